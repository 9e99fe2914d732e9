"""Self-service linking of a Discord account to a Ghost membership email.

``link`` runs these steps in order and stops at the first failure:

1. normalize and validate the email
2. the email must not be mapped to another account
3. the requester must not be mapped to another email
4. the email must belong to a Ghost member
5. write forward then reverse mapping
6. grant base role, plus premium for paid/comped members

Steps 1-4 never write. Step 6 failures leave the mapping in place and are
reported as LINKED_ROLES_INCOMPLETE.

The check-then-write sequence is not atomic across concurrent requests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from models.ghost import GhostMember
from modules.membership import errors
from modules.membership.contracts import MembershipDirectory, RoleClient
from modules.membership.identity_mapping import (
    IdentityMapping,
    is_valid_email,
    normalize_email,
)
from modules.membership.roles import (
    MembershipRoles,
    RoleAction,
    RoleMutation,
    apply_role_mutations,
)
from modules.membership.tiers import is_premium

logger = get_module_logger()


class LinkOutcome(str, Enum):
    LINKED = "linked"
    LINKED_ROLES_INCOMPLETE = "linked_roles_incomplete"
    UNLINKED = "unlinked"
    NOTHING_TO_UNLINK = "nothing_to_unlink"


@dataclass
class LinkResult:
    outcome: LinkOutcome
    email: Optional[str] = None
    external_id: Optional[str] = None
    role_errors: List[str] = field(default_factory=list)


class LinkManager:
    """Enforces the 1:1 mapping invariant for self-service requests."""

    def __init__(
        self,
        mapping: IdentityMapping,
        directory: MembershipDirectory,
        role_client: RoleClient,
        roles: MembershipRoles,
    ):
        self.mapping = mapping
        self.directory = directory
        self.role_client = role_client
        self.roles = roles

    async def link(self, email: Optional[str], external_id: str) -> OperationResult:
        if not email or not email.strip():
            return OperationResult.invalid_input(
                "Please provide your email.", error_code=errors.MISSING_EMAIL
            )
        email = normalize_email(email)
        if not is_valid_email(email):
            return OperationResult.invalid_input(
                "Please provide a valid email address.",
                error_code=errors.INVALID_EMAIL,
            )

        linked_id = await self.mapping.external_id_for(email)
        if linked_id and linked_id != external_id:
            logger.info(
                "link_rejected",
                reason=errors.ALREADY_LINKED_ELSEWHERE,
                email=email,
                external_id=external_id,
            )
            return OperationResult.conflict(
                "This email is already linked to another Discord account.",
                error_code=errors.ALREADY_LINKED_ELSEWHERE,
            )

        linked_email = await self.mapping.email_for(external_id)
        if linked_email and linked_email != email:
            logger.info(
                "link_rejected",
                reason=errors.ACCOUNT_ALREADY_LINKED,
                email=email,
                external_id=external_id,
            )
            return OperationResult.conflict(
                f"Your Discord account is already linked to **{linked_email}**. "
                "Use `/unlink` first.",
                error_code=errors.ACCOUNT_ALREADY_LINKED,
                data={"linked_email": linked_email},
            )

        lookup = await self.directory.get_member(email)
        if lookup.status == OperationStatus.NOT_FOUND:
            return OperationResult.not_found(
                "This email is not associated with any Ghost membership.",
                error_code=errors.NOT_A_MEMBER,
            )
        if not lookup.is_success:
            logger.warning(
                "link_directory_unavailable", email=email, message=lookup.message
            )
            return OperationResult.upstream_unavailable(
                f"An error occurred while verifying your email: {lookup.message}",
                error_code=errors.DIRECTORY_UNAVAILABLE,
            )
        member: GhostMember = lookup.data

        await self.mapping.put_link(email, external_id)

        mutations = [RoleMutation(RoleAction.GRANT, self.roles.base)]
        if is_premium(member.status):
            mutations.append(RoleMutation(RoleAction.GRANT, self.roles.premium))
        role_errors = await apply_role_mutations(
            self.role_client, external_id, mutations
        )

        if role_errors:
            logger.warning(
                "link_roles_incomplete",
                email=email,
                external_id=external_id,
                errors=role_errors,
            )
            return OperationResult.success(
                data=LinkResult(
                    LinkOutcome.LINKED_ROLES_INCOMPLETE,
                    email=email,
                    external_id=external_id,
                    role_errors=role_errors,
                ),
                message=(
                    f"Your email **{email}** has been linked, but roles could not "
                    "be assigned. Please contact an administrator."
                ),
            )

        logger.info(
            "account_linked",
            email=email,
            external_id=external_id,
            status=member.status.value,
        )
        return OperationResult.success(
            data=LinkResult(LinkOutcome.LINKED, email=email, external_id=external_id),
            message=f"Your email **{email}** has been linked to your Discord account.",
        )

    async def unlink(self, external_id: str) -> OperationResult:
        """Remove both sides of the requester's mapping.

        Roles are left untouched; only a Ghost member deletion revokes them.
        """
        email = await self.mapping.email_for(external_id)
        if not email:
            return OperationResult.success(
                data=LinkResult(
                    LinkOutcome.NOTHING_TO_UNLINK, external_id=external_id
                ),
                message="No email is linked to your Discord account.",
            )

        if await self.mapping.external_id_for(email) == external_id:
            await self.mapping.remove_link(email, external_id)
        else:
            # forward(email) belongs to another account now
            await self.mapping.delete_reverse(external_id)
        logger.info("account_unlinked", email=email, external_id=external_id)
        return OperationResult.success(
            data=LinkResult(
                LinkOutcome.UNLINKED, email=email, external_id=external_id
            ),
            message=f"Your email **{email}** has been unlinked from your Discord account.",
        )
