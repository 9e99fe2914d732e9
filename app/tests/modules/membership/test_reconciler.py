import itertools
from unittest.mock import call

import pytest

from models.ghost import MemberStatus
from modules.membership.events import MembershipEvent, MembershipEventKind
from modules.membership.reconciler import (
    EventReconciler,
    ReconcileResult,
    plan_role_mutations,
)
from modules.membership.roles import RoleAction, RoleMutation
from modules.membership.tiers import is_premium

STATUSES = list(MemberStatus)


def _event(current, previous=None, kind=None, email="a@x.com"):
    if kind is None:
        kind = (
            MembershipEventKind.ADDED
            if previous is None
            else MembershipEventKind.UPDATED
        )
    return MembershipEvent(
        kind=kind, email=email, current_status=current, previous_status=previous
    )


def _expected_mutations(previous, current, roles):
    if previous is None:
        expected = [RoleMutation(RoleAction.GRANT, roles.base)]
        if is_premium(current):
            expected.append(RoleMutation(RoleAction.GRANT, roles.premium))
        return expected
    if is_premium(previous) == is_premium(current):
        return []
    if is_premium(current):
        return [RoleMutation(RoleAction.GRANT, roles.premium)]
    return [RoleMutation(RoleAction.REVOKE, roles.premium)]


@pytest.mark.parametrize(
    "previous,current", list(itertools.product(STATUSES + [None], STATUSES))
)
def test_plan_covers_every_transition(previous, current, roles):
    mutations = plan_role_mutations(_event(current, previous), roles)
    assert mutations == _expected_mutations(previous, current, roles)


@pytest.mark.parametrize("current", STATUSES)
def test_plan_deletion_revokes_both_roles_regardless_of_status(current, roles):
    mutations = plan_role_mutations(
        _event(current, kind=MembershipEventKind.DELETED), roles
    )
    assert mutations == [
        RoleMutation(RoleAction.REVOKE, roles.base),
        RoleMutation(RoleAction.REVOKE, roles.premium),
    ]


@pytest.mark.asyncio
async def test_reconcile_without_mapping_is_skipped(mapping, role_client, roles):
    reconciler = EventReconciler(mapping, role_client, roles)

    result = await reconciler.reconcile(_event(MemberStatus.PAID))

    assert result.is_success
    assert result.data == ReconcileResult(skipped=True, reason="no_mapping")
    role_client.grant.assert_not_called()
    role_client.revoke.assert_not_called()


@pytest.mark.asyncio
async def test_reconcile_added_free_member_grants_base_only(
    mapping, role_client, roles
):
    await mapping.put_link("a@x.com", "U1")
    reconciler = EventReconciler(mapping, role_client, roles)

    result = await reconciler.reconcile(_event(MemberStatus.FREE))

    assert result.is_success
    role_client.grant.assert_awaited_once_with("U1", roles.base)
    role_client.revoke.assert_not_called()


@pytest.mark.asyncio
async def test_reconcile_upgrade_grants_premium_only(mapping, role_client, roles):
    await mapping.put_link("a@x.com", "U1")
    reconciler = EventReconciler(mapping, role_client, roles)

    await reconciler.reconcile(_event(MemberStatus.PAID, MemberStatus.FREE))

    role_client.grant.assert_awaited_once_with("U1", roles.premium)
    role_client.revoke.assert_not_called()


@pytest.mark.asyncio
async def test_reconcile_downgrade_revokes_premium_only(mapping, role_client, roles):
    await mapping.put_link("a@x.com", "U1")
    reconciler = EventReconciler(mapping, role_client, roles)

    await reconciler.reconcile(_event(MemberStatus.FREE, MemberStatus.COMPED))

    role_client.revoke.assert_awaited_once_with("U1", roles.premium)
    role_client.grant.assert_not_called()


@pytest.mark.asyncio
async def test_reconcile_deletion_revokes_both(mapping, role_client, roles):
    await mapping.put_link("a@x.com", "U1")
    reconciler = EventReconciler(mapping, role_client, roles)

    await reconciler.reconcile(
        _event(MemberStatus.FREE, kind=MembershipEventKind.DELETED)
    )

    assert role_client.revoke.await_args_list == [
        call("U1", roles.base),
        call("U1", roles.premium),
    ]
    role_client.grant.assert_not_called()


@pytest.mark.asyncio
async def test_reconcile_deletion_keeps_mapping(mapping, role_client, roles, store):
    await mapping.put_link("a@x.com", "U1")
    reconciler = EventReconciler(mapping, role_client, roles)

    await reconciler.reconcile(
        _event(MemberStatus.PAID, kind=MembershipEventKind.DELETED)
    )

    assert store.snapshot() == {"a@x.com": "U1", "discord:U1": "a@x.com"}


@pytest.mark.asyncio
async def test_reconcile_role_failures_still_succeed(mapping, role_client, roles):
    await mapping.put_link("a@x.com", "U1")
    role_client.grant.side_effect = [
        "PUT role role-member: 403 Missing Permissions",
        None,
    ]
    reconciler = EventReconciler(mapping, role_client, roles)

    result = await reconciler.reconcile(_event(MemberStatus.PAID))

    assert result.is_success
    assert role_client.grant.await_count == 2
    assert result.data.errors == ["PUT role role-member: 403 Missing Permissions"]
    assert result.data.external_id == "U1"
    assert not result.data.skipped


@pytest.mark.asyncio
async def test_reconcile_same_tier_update_makes_no_calls(mapping, role_client, roles):
    await mapping.put_link("a@x.com", "U1")
    reconciler = EventReconciler(mapping, role_client, roles)

    result = await reconciler.reconcile(_event(MemberStatus.COMPED, MemberStatus.PAID))

    assert result.is_success
    assert result.data.mutations == []
    role_client.grant.assert_not_called()
    role_client.revoke.assert_not_called()
