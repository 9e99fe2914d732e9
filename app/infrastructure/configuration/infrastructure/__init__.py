"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.persistence import (
    MappingStoreSettings,
)
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = [
    "MappingStoreSettings",
    "ServerSettings",
]
