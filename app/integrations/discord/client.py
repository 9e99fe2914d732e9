"""Discord guild member role client."""

from typing import Optional

import httpx

from infrastructure.logging import get_module_logger
from modules.membership.contracts import RoleClient

logger = get_module_logger()


class DiscordRoleClient(RoleClient):
    """Adds and removes guild member roles with a bot token.

    Discord answers 204 for both a fresh change and a no-op, so the calls
    are idempotent.
    """

    def __init__(
        self,
        bot_token: Optional[str],
        guild_id: Optional[str],
        http_client: httpx.AsyncClient,
        api_url: str = "https://discord.com/api/v10",
    ) -> None:
        self.bot_token = bot_token
        self.guild_id = guild_id
        self.http_client = http_client
        self.api_url = api_url.rstrip("/")

    async def grant(self, external_id: str, role_id: str) -> Optional[str]:
        return await self._mutate("PUT", external_id, role_id)

    async def revoke(self, external_id: str, role_id: str) -> Optional[str]:
        return await self._mutate("DELETE", external_id, role_id)

    async def _mutate(self, method: str, external_id: str, role_id: str) -> Optional[str]:
        if not self.bot_token or not self.guild_id:
            return f"{method} role {role_id}: Discord bot is not configured"

        url = (
            f"{self.api_url}/guilds/{self.guild_id}"
            f"/members/{external_id}/roles/{role_id}"
        )
        try:
            response = await self.http_client.request(
                method, url, headers={"Authorization": f"Bot {self.bot_token}"}
            )
        except httpx.HTTPError as e:
            error = f"{method} role {role_id}: {e}"
            logger.error("discord_role_request_failed", external_id=external_id, error=error)
            return error

        if not response.is_success:
            error = f"{method} role {role_id}: {response.status_code} {response.text}"
            logger.error("discord_role_request_failed", external_id=external_id, error=error)
            return error

        logger.debug(
            "discord_role_updated", method=method, external_id=external_id, role_id=role_id
        )
        return None
