"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the relay's services.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.services.providers import (
    get_event_reconciler,
    get_link_manager,
    get_mapping_admin,
    get_settings,
)
from modules.membership.admin import MappingAdmin
from modules.membership.linking import LinkManager
from modules.membership.reconciler import EventReconciler

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

EventReconcilerDep = Annotated[EventReconciler, Depends(get_event_reconciler)]

LinkManagerDep = Annotated[LinkManager, Depends(get_link_manager)]

MappingAdminDep = Annotated[MappingAdmin, Depends(get_mapping_admin)]

__all__ = [
    "SettingsDep",
    "EventReconcilerDep",
    "LinkManagerDep",
    "MappingAdminDep",
]
