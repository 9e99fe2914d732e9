"""Collaborator contracts consumed by the membership module.

Concrete implementations live under integrations/ (Ghost, Discord) and
infrastructure/persistence (mapping store). Tests substitute mocks.
"""

from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.operations import OperationResult


class RoleClient(ABC):
    """Adds and removes a single role on a single Discord account.

    Both calls are idempotent on the platform side. They return ``None`` on
    success and a human-readable error string on failure; they never raise
    for HTTP-level failures.
    """

    @abstractmethod
    async def grant(self, external_id: str, role_id: str) -> Optional[str]:
        """Add ``role_id`` to the account."""

    @abstractmethod
    async def revoke(self, external_id: str, role_id: str) -> Optional[str]:
        """Remove ``role_id`` from the account."""


class MembershipDirectory(ABC):
    """Resolves an email to a Ghost membership record."""

    @abstractmethod
    async def get_member(self, email: str) -> OperationResult:
        """Look up a member by email.

        Returns:
            OperationResult with:
            - SUCCESS and a ``GhostMember`` as data when found
            - NOT_FOUND when the directory has no such member
            - UPSTREAM_UNAVAILABLE with a caller-safe message otherwise
        """
