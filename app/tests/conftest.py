from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure.operations import OperationResult
from infrastructure.persistence import InMemoryMappingStore
from models.ghost import GhostMember, MemberStatus
from modules.membership.contracts import MembershipDirectory, RoleClient
from modules.membership.identity_mapping import IdentityMapping
from modules.membership.roles import MembershipRoles

BASE_ROLE = "role-member"
PREMIUM_ROLE = "role-premium"


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Limits are stored in process memory and shared by every test app."""
    get_limiter().reset()
    yield


@pytest.fixture
def roles():
    return MembershipRoles(base=BASE_ROLE, premium=PREMIUM_ROLE)


@pytest.fixture
def store():
    return InMemoryMappingStore()


@pytest.fixture
def mapping(store):
    return IdentityMapping(store)


@pytest.fixture
def role_client():
    client = AsyncMock(spec=RoleClient)
    client.grant.return_value = None
    client.revoke.return_value = None
    return client


@pytest.fixture
def directory():
    client = AsyncMock(spec=MembershipDirectory)
    client.get_member.return_value = OperationResult.success(
        data=GhostMember(id="m1", email="a@x.com", status=MemberStatus.FREE)
    )
    return client


@pytest.fixture
def make_member():
    def _make(email="a@x.com", status=MemberStatus.FREE, **kwargs):
        return GhostMember(email=email, status=status, **kwargs)

    return _make


@pytest.fixture
def fake_settings():
    """Minimal settings object for dependency overrides."""
    return SimpleNamespace(
        GIT_SHA="Unknown",
        server=SimpleNamespace(
            WEBHOOK_SECRET="webhook-secret",
            ADMIN_SECRET="admin-secret",
            HTTP_TIMEOUT_SECONDS=10.0,
        ),
        discord=SimpleNamespace(DISCORD_PUBLIC_KEY=""),
    )
