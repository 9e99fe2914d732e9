"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.discord import DiscordSettings
from infrastructure.configuration.integrations.ghost import GhostSettings

__all__ = [
    "DiscordSettings",
    "GhostSettings",
]
