"""Ghost integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class GhostSettings(IntegrationSettings):
    """Ghost Admin API configuration.

    Environment Variables:
        GHOST_URL: Base URL of the Ghost site (e.g., https://blog.example.com)
        GHOST_ADMIN_API_KEY: Admin API key in the ``id:hex_secret`` format

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        ghost_url = settings.ghost.GHOST_URL
        ```
    """

    GHOST_URL: str = Field(default="", alias="GHOST_URL")
    GHOST_ADMIN_API_KEY: str | None = Field(default=None, alias="GHOST_ADMIN_API_KEY")
    GHOST_TOKEN_TTL_SECONDS: int = Field(default=300, alias="GHOST_TOKEN_TTL_SECONDS")
