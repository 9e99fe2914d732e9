"""Ghost Admin API integration."""

from integrations.ghost.client import GhostClient, create_admin_token

__all__ = ["GhostClient", "create_admin_token"]
