from unittest.mock import AsyncMock

import pytest

from infrastructure.operations import OperationResult
from models.ghost import GhostMember, MemberStatus
from modules.membership.admin import MappingAdmin
from modules.membership.contracts import MembershipDirectory
from modules.membership.identity_mapping import REVERSE_KEY_PREFIX
from modules.membership.linking import LinkManager


@pytest.fixture
def any_member_directory():
    client = AsyncMock(spec=MembershipDirectory)
    client.get_member.side_effect = lambda email: OperationResult.success(
        data=GhostMember(email=email, status=MemberStatus.FREE)
    )
    return client


@pytest.fixture
def manager(mapping, any_member_directory, role_client, roles):
    return LinkManager(mapping, any_member_directory, role_client, roles)


@pytest.fixture
def admin(mapping):
    return MappingAdmin(mapping)


def assert_consistent(store):
    """forward(e) = u holds exactly when reverse(u) = e."""
    data = store.snapshot()
    for key, value in data.items():
        if key.startswith(REVERSE_KEY_PREFIX):
            assert data.get(value) == key[len(REVERSE_KEY_PREFIX):], data
        else:
            assert data.get(f"{REVERSE_KEY_PREFIX}{value}") == key, data


async def run_step(step, manager, admin):
    operation, *args = step
    if operation == "link":
        return await manager.link(*args)
    if operation == "unlink":
        return await manager.unlink(*args)
    if operation == "create":
        return await admin.create_mapping(*args)
    return await admin.delete_mapping(*args)


SEQUENCES = {
    "admin_takes_over_linked_account": [
        ("link", "a@x.com", "U1"),
        ("link", "b@x.com", "U2"),
        ("create", "a@x.com", "U2"),
        ("unlink", "U1"),
        ("delete", "b@x.com"),
        ("link", "b@x.com", "U1"),
    ],
    "admin_moves_account_between_emails": [
        ("create", "a@x.com", "U1"),
        ("create", "b@x.com", "U1"),
        ("link", "a@x.com", "U2"),
        ("unlink", "U1"),
        ("delete", "a@x.com"),
    ],
    "raw_reverse_key_is_not_addressable": [
        ("link", "a@x.com", "123"),
        ("delete", "discord:123"),
        ("create", "discord:123", "456"),
        ("unlink", "123"),
        ("link", "a@x.com", "123"),
    ],
    "conflicts_leave_no_trace": [
        ("create", "a@x.com", "U1"),
        ("link", "b@x.com", "U1"),
        ("link", "a@x.com", "U2"),
        ("unlink", "U1"),
        ("link", "b@x.com", "U1"),
        ("create", "b@x.com", "U2"),
        ("delete", "a@x.com"),
    ],
    "repeated_and_case_mixed": [
        ("link", "A@X.com", "U1"),
        ("unlink", "U1"),
        ("unlink", "U1"),
        ("create", "a@x.com", "U1"),
        ("delete", " A@X.COM "),
        ("link", "a@x.com", "U2"),
        ("create", "a@x.com", "U2"),
    ],
}


@pytest.mark.asyncio
@pytest.mark.parametrize("steps", list(SEQUENCES.values()), ids=list(SEQUENCES))
async def test_mapping_stays_consistent(manager, admin, store, steps):
    for step in steps:
        await run_step(step, manager, admin)
        assert_consistent(store)


@pytest.mark.asyncio
async def test_consistency_check_detects_orphaned_forward_entry(store):
    await store.put("a@x.com", "U1")

    with pytest.raises(AssertionError):
        assert_consistent(store)
