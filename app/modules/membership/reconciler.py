"""Event reconciliation: align Discord roles with a Ghost membership change.

Decision table, with tier(status) = premium for paid/comped, else base:

    added (no previous status)          grant base, plus premium if premium
    updated, same tier                  nothing
    updated, base -> premium            grant premium
    updated, premium -> base            revoke premium
    deleted                             revoke base and premium

Role mutation failures are logged and reported in the result data but never
turn the result into an error: the webhook sender must see success once the
mapping lookup succeeded so it does not redeliver the event.
"""

from dataclasses import dataclass, field
from typing import List

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.membership.contracts import RoleClient
from modules.membership.events import MembershipEvent, MembershipEventKind
from modules.membership.identity_mapping import IdentityMapping
from modules.membership.roles import (
    MembershipRoles,
    RoleAction,
    RoleMutation,
    apply_role_mutations,
)
from modules.membership.tiers import MembershipTier, is_premium, tier_of

logger = get_module_logger()

SKIP_REASON_NO_MAPPING = "no_mapping"


@dataclass
class ReconcileResult:
    """Outcome of a reconciliation that reached the role mutation step.

    Attributes:
        external_id: the mapped Discord account, None when skipped
        mutations: the role mutations that were attempted
        errors: error strings of the mutations that failed
        skipped: True when the email had no mapping
        reason: why the event was skipped
    """

    external_id: str | None = None
    mutations: List[RoleMutation] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    skipped: bool = False
    reason: str | None = None


def plan_role_mutations(
    event: MembershipEvent, roles: MembershipRoles
) -> List[RoleMutation]:
    """Pure implementation of the decision table."""
    if event.kind is MembershipEventKind.DELETED:
        return [
            RoleMutation(RoleAction.REVOKE, roles.base),
            RoleMutation(RoleAction.REVOKE, roles.premium),
        ]

    if event.kind is MembershipEventKind.ADDED or event.previous_status is None:
        mutations = [RoleMutation(RoleAction.GRANT, roles.base)]
        if is_premium(event.current_status):
            mutations.append(RoleMutation(RoleAction.GRANT, roles.premium))
        return mutations

    previous_tier = tier_of(event.previous_status)
    current_tier = tier_of(event.current_status)
    if previous_tier is current_tier:
        return []
    if current_tier is MembershipTier.PREMIUM:
        return [RoleMutation(RoleAction.GRANT, roles.premium)]
    return [RoleMutation(RoleAction.REVOKE, roles.premium)]


class EventReconciler:
    """Applies membership events to the mapped Discord account."""

    def __init__(
        self,
        mapping: IdentityMapping,
        role_client: RoleClient,
        roles: MembershipRoles,
    ):
        self.mapping = mapping
        self.role_client = role_client
        self.roles = roles

    async def reconcile(self, event: MembershipEvent) -> OperationResult:
        external_id = await self.mapping.external_id_for(event.email)
        if not external_id:
            logger.info(
                "membership_event_skipped",
                kind=event.kind.value,
                email=event.email,
                reason=SKIP_REASON_NO_MAPPING,
            )
            return OperationResult.success(
                data=ReconcileResult(skipped=True, reason=SKIP_REASON_NO_MAPPING),
                message="No mapping for email",
            )

        mutations = plan_role_mutations(event, self.roles)
        errors = await apply_role_mutations(self.role_client, external_id, mutations)

        logger.info(
            "membership_event_reconciled",
            kind=event.kind.value,
            transition=_describe_transition(event),
            email=event.email,
            external_id=external_id,
            mutations=[f"{m.action.value}:{m.role_id}" for m in mutations],
            failed=len(errors),
        )
        if errors:
            logger.warning(
                "membership_event_roles_incomplete",
                email=event.email,
                external_id=external_id,
                errors=errors,
            )

        return OperationResult.success(
            data=ReconcileResult(
                external_id=external_id, mutations=mutations, errors=errors
            )
        )


def _describe_transition(event: MembershipEvent) -> str | None:
    if event.kind is not MembershipEventKind.UPDATED or event.previous_status is None:
        return None
    previous_tier = tier_of(event.previous_status)
    current_tier = tier_of(event.current_status)
    if previous_tier is current_tier:
        return None
    if current_tier is MembershipTier.PREMIUM:
        return "free->paid"
    return "paid->free"
