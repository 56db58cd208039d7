"""
In-memory key-value store.

Used for ephemeral sessions and tests; nothing survives the process.
"""

from treefs.storage.base import KeyValueStore


class MemoryStore(KeyValueStore):
    """Dictionary-backed store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)
