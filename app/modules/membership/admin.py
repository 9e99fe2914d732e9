"""Operator-facing direct management of the identity mapping.

Unlike the self-service commands, these operations skip membership
verification and the conflict checks: an operator mapping overwrites
whatever was there. Stale counterparts of the overwritten entries are
removed so forward(e) = u holds exactly when reverse(u) = e.
"""

from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.membership import errors
from modules.membership.identity_mapping import (
    IdentityMapping,
    is_valid_email,
    normalize_email,
)

logger = get_module_logger()


class MappingAdmin:
    def __init__(self, mapping: IdentityMapping):
        self.mapping = mapping

    async def create_mapping(
        self, email: Optional[str], external_id: Optional[str]
    ) -> OperationResult:
        if not email or not external_id:
            return OperationResult.invalid_input(
                "Missing email or discord_user_id"
            )
        email = normalize_email(email)
        external_id = external_id.strip()
        if not is_valid_email(email) or not external_id:
            return OperationResult.invalid_input(
                "Invalid email format", error_code=errors.INVALID_EMAIL
            )

        previous_id = await self.mapping.external_id_for(email)
        previous_email = await self.mapping.email_for(external_id)

        await self.mapping.put_link(email, external_id)

        if previous_id and previous_id != external_id:
            if await self.mapping.email_for(previous_id) == email:
                await self.mapping.delete_reverse(previous_id)
        if previous_email and previous_email != email:
            if await self.mapping.external_id_for(previous_email) == external_id:
                await self.mapping.delete_forward(previous_email)

        logger.info(
            "admin_mapping_created",
            email=email,
            external_id=external_id,
            replaced_external_id=previous_id if previous_id != external_id else None,
            replaced_email=previous_email if previous_email != email else None,
        )
        return OperationResult.success(
            data={"email": email, "discord_user_id": external_id}
        )

    async def delete_mapping(self, email: Optional[str]) -> OperationResult:
        """Delete the forward entry, and the reverse one if it points back."""
        if not email or not email.strip():
            return OperationResult.invalid_input(
                "Missing email", error_code=errors.MISSING_EMAIL
            )
        email = normalize_email(email)
        if not is_valid_email(email):
            return OperationResult.invalid_input(
                "Invalid email format", error_code=errors.INVALID_EMAIL
            )

        external_id = await self.mapping.external_id_for(email)
        await self.mapping.delete_forward(email)
        if external_id and await self.mapping.email_for(external_id) == email:
            await self.mapping.delete_reverse(external_id)

        logger.info("admin_mapping_deleted", email=email, external_id=external_id)
        return OperationResult.success(
            data={"email": email, "discord_user_id": external_id}
        )

    async def get_mapping(self, email: str) -> OperationResult:
        email = normalize_email(email)
        if not is_valid_email(email):
            return OperationResult.invalid_input(
                "Invalid email format", error_code=errors.INVALID_EMAIL
            )
        external_id = await self.mapping.external_id_for(email)
        if not external_id:
            return OperationResult.not_found("Not found")
        return OperationResult.success(
            data={"email": email, "discord_user_id": external_id}
        )
