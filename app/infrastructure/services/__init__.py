"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    EventReconcilerDep,
    LinkManagerDep,
    MappingAdminDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_discord_role_client,
    get_event_reconciler,
    get_ghost_client,
    get_http_client,
    get_identity_mapping,
    get_link_manager,
    get_mapping_admin,
    get_mapping_store,
    get_membership_roles,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "EventReconcilerDep",
    "LinkManagerDep",
    "MappingAdminDep",
    "get_settings",
    "get_http_client",
    "get_mapping_store",
    "get_identity_mapping",
    "get_membership_roles",
    "get_ghost_client",
    "get_discord_role_client",
    "get_event_reconciler",
    "get_link_manager",
    "get_mapping_admin",
]
