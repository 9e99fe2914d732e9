"""Discord REST API integration."""

from integrations.discord.client import DiscordRoleClient

__all__ = ["DiscordRoleClient"]
