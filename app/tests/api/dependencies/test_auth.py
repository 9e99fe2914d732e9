from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from api.dependencies.auth import require_admin_token, require_webhook_secret


def test_require_webhook_secret_accepts(fake_settings):
    assert require_webhook_secret(MagicMock(), fake_settings, "webhook-secret") is None


@pytest.mark.parametrize("secret", [None, "", "nope"])
def test_require_webhook_secret_rejects(fake_settings, secret):
    with pytest.raises(HTTPException) as err:
        require_webhook_secret(MagicMock(), fake_settings, secret)
    assert err.value.status_code == 401


def test_require_admin_token_accepts(fake_settings):
    assert (
        require_admin_token(MagicMock(), fake_settings, "Bearer admin-secret") is None
    )


@pytest.mark.parametrize(
    "header", [None, "admin-secret", "Bearer webhook-secret", "Basic admin-secret"]
)
def test_require_admin_token_rejects(fake_settings, header):
    with pytest.raises(HTTPException) as err:
        require_admin_token(MagicMock(), fake_settings, header)
    assert err.value.status_code == 401


def test_require_admin_token_rejects_when_unconfigured(fake_settings):
    fake_settings.server.ADMIN_SECRET = ""
    with pytest.raises(HTTPException):
        require_admin_token(MagicMock(), fake_settings, "Bearer ")
