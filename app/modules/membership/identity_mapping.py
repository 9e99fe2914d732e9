"""Bidirectional email <-> Discord account mapping.

Two independent keys hold each link:

- forward: ``<normalized email>`` -> Discord user id
- reverse: ``discord:<user id>`` -> normalized email

The store offers no cross-key atomicity. Readers must not assume both
sides agree; a one-sided entry left by a partial write counts as whichever
side is present.
"""

import re
from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.persistence import MappingStore

logger = get_module_logger()

REVERSE_KEY_PREFIX = "discord:"
MAX_EMAIL_LENGTH = 254

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    """Syntactic check only. Expects an already normalized address."""
    if not email or len(email) > MAX_EMAIL_LENGTH:
        return False
    return EMAIL_PATTERN.match(email) is not None


def reverse_key(external_id: str) -> str:
    return f"{REVERSE_KEY_PREFIX}{external_id}"


class IdentityMapping:
    """Reads and writes both directions of the mapping on a MappingStore."""

    def __init__(self, store: MappingStore):
        self.store = store

    async def external_id_for(self, email: str) -> Optional[str]:
        return await self.store.get(normalize_email(email))

    async def email_for(self, external_id: str) -> Optional[str]:
        return await self.store.get(reverse_key(external_id))

    async def put_link(self, email: str, external_id: str) -> None:
        """Write forward then reverse."""
        email = normalize_email(email)
        await self.store.put(email, external_id)
        await self.store.put(reverse_key(external_id), email)
        logger.info("mapping_written", email=email, external_id=external_id)

    async def delete_forward(self, email: str) -> None:
        await self.store.delete(normalize_email(email))

    async def delete_reverse(self, external_id: str) -> None:
        await self.store.delete(reverse_key(external_id))

    async def remove_link(self, email: str, external_id: str) -> None:
        """Delete forward then reverse."""
        await self.delete_forward(email)
        await self.delete_reverse(external_id)
        logger.info(
            "mapping_removed",
            email=normalize_email(email),
            external_id=external_id,
        )
