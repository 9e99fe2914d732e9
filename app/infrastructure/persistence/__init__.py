"""Persistence layer for the identity mapping.

Provides the key-value store abstraction the membership relay keeps its
email <-> Discord user mapping in, plus the concrete backends.
"""

from infrastructure.persistence.mapping_store import (
    InMemoryMappingStore,
    MappingStore,
)
from infrastructure.persistence.dynamodb import DynamoDBMappingStore

__all__ = [
    "MappingStore",
    "InMemoryMappingStore",
    "DynamoDBMappingStore",
]
