"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the relay's collaborators.
"""

from functools import lru_cache

import httpx

from infrastructure.configuration import Settings
from infrastructure.persistence import (
    DynamoDBMappingStore,
    InMemoryMappingStore,
    MappingStore,
)
from integrations.discord import DiscordRoleClient
from integrations.ghost import GhostClient
from modules.membership.admin import MappingAdmin
from modules.membership.identity_mapping import IdentityMapping
from modules.membership.linking import LinkManager
from modules.membership.reconciler import EventReconciler
from modules.membership.roles import MembershipRoles


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_http_client() -> httpx.AsyncClient:
    """
    Get the shared outbound HTTP client.

    Closed by the server lifespan on shutdown.
    """
    settings = get_settings()
    return httpx.AsyncClient(timeout=settings.server.HTTP_TIMEOUT_SECONDS)


@lru_cache
def get_mapping_store() -> MappingStore:
    """
    Get the identity mapping store for the configured backend.

    The memory backend keeps state for the life of the process only and is
    meant for local development.
    """
    config = get_settings().mapping_store
    if config.backend == "dynamodb":
        return DynamoDBMappingStore(
            table_name=config.table_name,
            region=config.aws_region,
            endpoint_url=config.endpoint_url,
        )
    return InMemoryMappingStore()


@lru_cache
def get_identity_mapping() -> IdentityMapping:
    return IdentityMapping(get_mapping_store())


@lru_cache
def get_membership_roles() -> MembershipRoles:
    membership = get_settings().membership
    return MembershipRoles(base=membership.ROLE_MEMBER, premium=membership.ROLE_PREMIUM)


@lru_cache
def get_ghost_client() -> GhostClient:
    ghost = get_settings().ghost
    return GhostClient(
        base_url=ghost.GHOST_URL,
        admin_api_key=ghost.GHOST_ADMIN_API_KEY,
        http_client=get_http_client(),
        token_ttl=ghost.GHOST_TOKEN_TTL_SECONDS,
    )


@lru_cache
def get_discord_role_client() -> DiscordRoleClient:
    discord = get_settings().discord
    return DiscordRoleClient(
        bot_token=discord.DISCORD_BOT_TOKEN,
        guild_id=discord.DISCORD_GUILD_ID,
        http_client=get_http_client(),
        api_url=discord.DISCORD_API_URL,
    )


def get_event_reconciler() -> EventReconciler:
    return EventReconciler(
        mapping=get_identity_mapping(),
        role_client=get_discord_role_client(),
        roles=get_membership_roles(),
    )


def get_link_manager() -> LinkManager:
    return LinkManager(
        mapping=get_identity_mapping(),
        directory=get_ghost_client(),
        role_client=get_discord_role_client(),
        roles=get_membership_roles(),
    )


def get_mapping_admin() -> MappingAdmin:
    return MappingAdmin(get_identity_mapping())
