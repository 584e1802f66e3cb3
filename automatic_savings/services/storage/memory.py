"""
In-Memory Storage Implementation

Dictionary-backed store for tests and for hosts that keep contract
state in process. Values are copied on the way in so callers can't
mutate stored bytes behind the contract's back.
"""

from typing import Optional

from automatic_savings.services.storage.interface import (
    NotFoundError,
    StateStorageInterface,
)


class InMemoryStateStorage(StateStorageInterface):
    """Key-value storage held in a plain dict."""

    def __init__(self, initial: Optional[dict[str, bytes]] = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> bytes:
        try:
            return self._data[key]
        except KeyError:
            raise NotFoundError(f"No value stored under '{key}'") from None

    def save(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def has(self, key: str) -> bool:
        return key in self._data

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, bytes]:
        """Copy of everything stored, for comparing before/after."""
        return dict(self._data)
