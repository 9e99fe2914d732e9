from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_http_client, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        log_level=settings.LOG_LEVEL, is_production=settings.is_production
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _warn_missing_configuration(settings: "Settings", logger: BoundLogger) -> None:
    required = {
        "GHOST_URL": settings.ghost.GHOST_URL,
        "GHOST_ADMIN_API_KEY": settings.ghost.GHOST_ADMIN_API_KEY,
        "DISCORD_BOT_TOKEN": settings.discord.DISCORD_BOT_TOKEN,
        "DISCORD_GUILD_ID": settings.discord.DISCORD_GUILD_ID,
        "DISCORD_PUBLIC_KEY": settings.discord.DISCORD_PUBLIC_KEY,
        "DISCORD_ROLE_MEMBER": settings.membership.ROLE_MEMBER,
        "DISCORD_ROLE_PREMIUM": settings.membership.ROLE_PREMIUM,
        "WEBHOOK_SECRET": settings.server.WEBHOOK_SECRET,
        "ADMIN_SECRET": settings.server.ADMIN_SECRET,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        logger.warning("configuration_incomplete", missing=missing)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    _warn_missing_configuration(settings, logger)

    yield

    logger.info("application_shutdown")

    if get_http_client.cache_info().currsize:
        await get_http_client().aclose()
        get_http_client.cache_clear()
        logger.info("http_client_closed")
