"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and request authentication configuration.

    Environment Variables:
        WEBHOOK_SECRET: Shared secret expected in the ``secret`` query parameter
            of Ghost webhooks
        ADMIN_SECRET: Bearer token for the administrative mapping endpoints
        HTTP_TIMEOUT_SECONDS: Timeout for outbound HTTP calls (default: 10)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        timeout = settings.server.HTTP_TIMEOUT_SECONDS
        ```
    """

    WEBHOOK_SECRET: str = Field(default="", alias="WEBHOOK_SECRET")
    ADMIN_SECRET: str = Field(default="", alias="ADMIN_SECRET")
    HTTP_TIMEOUT_SECONDS: float = Field(default=10.0, alias="HTTP_TIMEOUT_SECONDS")
