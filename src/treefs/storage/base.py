"""
Abstract Key-Value Store Interface

Defines the contract for the durable slots a namespace snapshot is kept in.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """
    Abstract interface for key-value stores.

    Values are opaque text blobs. A ``set`` that returns without raising must
    be durable: a reader opening the store afterwards sees the new value.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or None when absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``. Removing an absent key is not an error."""
        ...

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
