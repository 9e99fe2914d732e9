"""Discord integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class DiscordSettings(IntegrationSettings):
    """Discord bot and interaction configuration.

    Environment Variables:
        DISCORD_BOT_TOKEN: Bot token used for role mutations
        DISCORD_GUILD_ID: Guild (server) whose member roles are managed
        DISCORD_PUBLIC_KEY: Hex-encoded Ed25519 public key for interaction verification
        DISCORD_API_URL: Discord REST API base URL

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        guild_id = settings.discord.DISCORD_GUILD_ID
        ```
    """

    DISCORD_BOT_TOKEN: str | None = Field(default=None, alias="DISCORD_BOT_TOKEN")
    DISCORD_GUILD_ID: str = Field(default="", alias="DISCORD_GUILD_ID")
    DISCORD_PUBLIC_KEY: str = Field(default="", alias="DISCORD_PUBLIC_KEY")
    DISCORD_API_URL: str = Field(
        default="https://discord.com/api/v10", alias="DISCORD_API_URL"
    )
