"""
Abstract Storage Interface

DESIGN DECISION: The contract talks to storage through a tiny key-value
interface. This allows us to:
1. Run the contract against whatever store the host environment provides
2. Use in-memory storage for testing
3. Keep transition logic decoupled from storage implementation

Values are raw bytes. Encoding and decoding of typed records happens in
the typed accessors below, so every backend stores exactly the same bytes.
"""

from abc import ABC, abstractmethod
from typing import Generic, Type, TypeVar

from pydantic import BaseModel, ValidationError


class StateStorageInterface(ABC):
    """
    Abstract interface for contract storage.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def load(self, key: str) -> bytes:
        """
        Read the raw value stored under a key.

        Raises:
            NotFoundError: If nothing is stored under the key
            StorageError: If the read fails
        """
        pass

    @abstractmethod
    def save(self, key: str, value: bytes) -> None:
        """
        Store a raw value under a key, replacing any previous value.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether a value is stored under the key."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Delete the value stored under a key. Missing keys are ignored.

        Raises:
            StorageError: If the delete fails
        """
        pass


ModelT = TypeVar("ModelT", bound=BaseModel)


class Item(Generic[ModelT]):
    """
    Typed accessor for a single record under a fixed key.

    Usage:
        STATE = Item("state", State)
        STATE.save(storage, state)
        state = STATE.load(storage)
    """

    def __init__(self, key: str, model: Type[ModelT]):
        self.key = key
        self._model = model

    def load(self, storage: StateStorageInterface) -> ModelT:
        """
        Load and decode the record.

        Raises:
            NotFoundError: If the record was never saved
            SerializationError: If the stored bytes don't decode
        """
        raw = storage.load(self.key)
        try:
            return self._model.model_validate_json(raw)
        except ValidationError as e:
            raise SerializationError(
                f"Failed to decode {self._model.__name__} at '{self.key}': {e}"
            ) from e

    def save(self, storage: StateStorageInterface, value: ModelT) -> None:
        storage.save(self.key, value.model_dump_json().encode("utf-8"))

    def exists(self, storage: StateStorageInterface) -> bool:
        return storage.has(self.key)


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Record not found in storage."""
    pass


class SerializationError(StorageError):
    """Stored bytes could not be decoded into the expected record."""
    pass
