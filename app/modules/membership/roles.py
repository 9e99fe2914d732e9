"""Role mutation planning and execution."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from infrastructure.logging import get_module_logger
from modules.membership.contracts import RoleClient

logger = get_module_logger()


@dataclass(frozen=True)
class MembershipRoles:
    """Discord role ids managed by the relay.

    Attributes:
        base: granted to every linked member
        premium: granted on top of base to paid and comped members
    """

    base: str
    premium: str


class RoleAction(str, Enum):
    GRANT = "grant"
    REVOKE = "revoke"


@dataclass(frozen=True)
class RoleMutation:
    action: RoleAction
    role_id: str


async def apply_role_mutations(
    role_client: RoleClient,
    external_id: str,
    mutations: Sequence[RoleMutation],
) -> List[str]:
    """Issue each mutation in order and collect the failures.

    A failed call never prevents the next one from being attempted.

    Returns:
        The error strings reported by the role client, empty on full success.
    """
    errors: List[str] = []
    for mutation in mutations:
        if mutation.action is RoleAction.GRANT:
            error = await role_client.grant(external_id, mutation.role_id)
        else:
            error = await role_client.revoke(external_id, mutation.role_id)
        if error:
            logger.error(
                "role_mutation_failed",
                external_id=external_id,
                action=mutation.action.value,
                role_id=mutation.role_id,
                error=error,
            )
            errors.append(error)
    return errors
