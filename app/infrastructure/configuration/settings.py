"""Membership relay configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    DiscordSettings,
    GhostSettings,
)

# Feature settings
from infrastructure.configuration.features import MembershipFeatureSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import (
    MappingStoreSettings,
    ServerSettings,
)


class Settings(BaseSettings):
    """Membership relay configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External service configurations (Ghost, Discord)
    - **Features**: Feature module configurations (membership roles)
    - **Infrastructure**: Core system configurations (server secrets, mapping store)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        # Access integration settings
        guild_id = settings.discord.DISCORD_GUILD_ID
        ghost_url = settings.ghost.GHOST_URL

        # Access feature settings
        premium_role = settings.membership.ROLE_PREMIUM

        # Access infrastructure settings
        if settings.mapping_store.backend == "dynamodb":
            ...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    ghost: GhostSettings
    discord: DiscordSettings

    # Feature settings
    membership: MembershipFeatureSettings

    # Infrastructure settings
    server: ServerSettings
    mapping_store: MappingStoreSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "ghost": GhostSettings,
            "discord": DiscordSettings,
            # Features
            "membership": MembershipFeatureSettings,
            # Infrastructure
            "server": ServerSettings,
            "mapping_store": MappingStoreSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
