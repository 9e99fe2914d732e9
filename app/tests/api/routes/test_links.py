import pytest
from fastapi.testclient import TestClient

from api.routes.links import router as links_router
from infrastructure.services import get_mapping_admin, get_settings
from modules.membership.admin import MappingAdmin
from utils.tests import create_test_app

AUTH = {"Authorization": "Bearer admin-secret"}


@pytest.fixture
def client(fake_settings, mapping):
    app = create_test_app(
        links_router,
        overrides={get_settings: fake_settings, get_mapping_admin: MappingAdmin(mapping)},
    )
    return TestClient(app)


@pytest.mark.parametrize(
    "headers", [{}, {"Authorization": "Bearer wrong"}, {"Authorization": "admin-secret"}]
)
def test_requires_admin_token(client, store, headers):
    responses = [
        client.post(
            "/link", json={"email": "a@x.com", "discord_user_id": "U1"}, headers=headers
        ),
        client.request("DELETE", "/link", json={"email": "a@x.com"}, headers=headers),
        client.get("/link/a@x.com", headers=headers),
    ]
    for response in responses:
        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}
    assert store.snapshot() == {}


def test_create_link(client, store):
    response = client.post(
        "/link", json={"email": "A@X.com", "discord_user_id": "U1"}, headers=AUTH
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True, "email": "a@x.com", "discord_user_id": "U1"}
    assert store.snapshot() == {"a@x.com": "U1", "discord:U1": "a@x.com"}


def test_create_link_missing_fields(client):
    response = client.post("/link", json={"email": "a@x.com"}, headers=AUTH)
    assert response.status_code == 400
    assert response.json() == {"detail": "Missing email or discord_user_id"}


def test_create_link_invalid_email(client):
    response = client.post(
        "/link", json={"email": "bad", "discord_user_id": "U1"}, headers=AUTH
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid email format"}


def test_get_link(client):
    client.post("/link", json={"email": "a@x.com", "discord_user_id": "U1"}, headers=AUTH)

    response = client.get("/link/A@x.com", headers=AUTH)

    assert response.status_code == 200
    assert response.json() == {"email": "a@x.com", "discord_user_id": "U1"}


def test_get_link_not_found(client):
    response = client.get("/link/nobody@x.com", headers=AUTH)
    assert response.status_code == 404
    assert response.json() == {"detail": "Not found"}


def test_delete_link(client, store):
    client.post("/link", json={"email": "a@x.com", "discord_user_id": "U1"}, headers=AUTH)

    response = client.request("DELETE", "/link", json={"email": "a@x.com"}, headers=AUTH)

    assert response.status_code == 200
    assert response.json() == {"ok": True, "email": "a@x.com"}
    assert store.snapshot() == {}


def test_delete_link_missing_email(client):
    response = client.request("DELETE", "/link", json={}, headers=AUTH)
    assert response.status_code == 400
    assert response.json() == {"detail": "Missing email"}


def test_delete_link_rejects_reverse_key(client, store):
    client.post("/link", json={"email": "a@x.com", "discord_user_id": "123"}, headers=AUTH)

    response = client.request(
        "DELETE", "/link", json={"email": "discord:123"}, headers=AUTH
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid email format"}
    assert store.snapshot() == {"a@x.com": "123", "discord:123": "a@x.com"}


def test_get_link_rejects_reverse_key(client):
    client.post("/link", json={"email": "a@x.com", "discord_user_id": "123"}, headers=AUTH)

    response = client.get("/link/discord:123", headers=AUTH)

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid email format"}
