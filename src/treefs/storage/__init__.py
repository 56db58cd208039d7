"""
Storage Layer

Key-value stores and the snapshot gateway that persists a namespace.

Modules:
    base: KeyValueStore interface
    memory: In-memory store
    directory: File-per-key store with atomic writes
    gateway: PersistenceGateway (write-through snapshots)
"""

from treefs.storage.base import KeyValueStore
from treefs.storage.directory import DirectoryStore
from treefs.storage.gateway import DEFAULT_STORAGE_KEY, LoadResult, PersistenceGateway
from treefs.storage.memory import MemoryStore

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "DirectoryStore",
    "PersistenceGateway",
    "LoadResult",
    "DEFAULT_STORAGE_KEY",
]
