"""
Storage Services Package

Provides the abstract key-value interface, typed record accessors and
an in-memory implementation.
"""

from automatic_savings.services.storage.interface import (
    Item,
    NotFoundError,
    SerializationError,
    StateStorageInterface,
    StorageError,
)
from automatic_savings.services.storage.memory import InMemoryStateStorage

__all__ = [
    # Interfaces
    "Item",
    "StateStorageInterface",
    # Exceptions
    "NotFoundError",
    "SerializationError",
    "StorageError",
    # In-memory implementation
    "InMemoryStateStorage",
]
