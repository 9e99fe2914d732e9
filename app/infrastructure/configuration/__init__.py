"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the membership
relay using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    bot_token = settings.discord.DISCORD_BOT_TOKEN
    backend = settings.mapping_store.backend

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings"]
