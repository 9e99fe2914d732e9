"""Mapping store abstract base class and in-memory backend."""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class MappingStore(ABC):
    """Opaque string-keyed store holding the identity mapping.

    The store is the only source of truth for identity links: callers must
    not cache what they read. Implementations are eventually consistent and
    offer no transactions across keys.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the value stored under key.

        Args:
            key: Store key (a normalized email or a prefixed Discord user id).

        Returns:
            The stored value, or None when the key is absent.
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Args:
            key: Store key.
            value: Value to store.
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete key. Deleting an absent key is not an error.

        Args:
            key: Store key.
        """
        pass


class InMemoryMappingStore(MappingStore):
    """Process-local mapping store.

    Suitable for development and tests only: entries are lost on restart and
    not shared between processes.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of all entries (for tests and debugging)."""
        return dict(self._data)
