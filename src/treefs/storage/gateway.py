"""
Snapshot persistence for a namespace.

The gateway serializes the entire tree to a single JSON record stored under a
fixed key, and restores it at process start. It never raises: failures are
logged and reported through return values so the namespace can keep working
in memory.
"""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from treefs.core.path_utils import ROOT_PATH
from treefs.core.tree_node import DirectoryNode
from treefs.exceptions import PersistenceError
from treefs.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "vfs_data"


@dataclass
class LoadResult:
    """
    Outcome of restoring a snapshot.

    ``restored`` is False when the tree was freshly initialized, either
    because no snapshot existed or because it could not be read; ``error``
    describes the latter case.
    """

    root: DirectoryNode
    restored: bool
    error: PersistenceError | None = None


class PersistenceGateway:
    """
    Write-through snapshot gateway over a key-value store.

    Params:
        store: Durable key-value store
        key: Fixed key the snapshot record is kept under
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        self.store = store
        self.key = key
        self.last_error: PersistenceError | None = None

    def dumps(self, root: DirectoryNode) -> str:
        """Serialize a tree to its snapshot text."""
        return root.model_dump_json()

    def loads(self, raw: str) -> DirectoryNode:
        """
        Deserialize snapshot text into a tree.

        Raises:
            PersistenceError: If the record is not valid JSON, does not match
                the node schema, or does not describe a root directory
        """
        try:
            root = DirectoryNode.model_validate_json(raw)
        except ValidationError as e:
            raise PersistenceError(self.key, f"invalid snapshot: {e.error_count()} error(s)") from e
        if root.name != ROOT_PATH or root.path != ROOT_PATH:
            raise PersistenceError(self.key, f"snapshot root is '{root.path}', expected '/'")
        return root

    def save(self, root: DirectoryNode) -> bool:
        """
        Serialize the whole tree and store it under the snapshot key.

        The record is only stored once it has been read back successfully, so
        a snapshot reported as saved is always one that ``load`` restores.

        Returns:
            True when the snapshot was stored; False when serialization, the
            read-back check or the store failed (the failure is logged and kept
            in ``last_error``)
        """
        try:
            raw = self.dumps(root)
            self.loads(raw)
            self.store.set(self.key, raw)
        except Exception as e:
            self.last_error = self._as_persistence_error(e)
            logger.warning("Failed to save snapshot: %s", self.last_error)
            return False
        self.last_error = None
        return True

    def load(self) -> LoadResult:
        """
        Restore the tree from the store.

        A missing, unreadable or corrupt record yields a fresh empty root.
        """
        try:
            raw = self.store.get(self.key)
        except Exception as e:
            return self._fresh(self._as_persistence_error(e))
        if raw is None:
            logger.info("No snapshot under '%s'; starting with an empty root", self.key)
            return LoadResult(root=DirectoryNode.root(), restored=False)
        try:
            root = self.loads(raw)
        except Exception as e:
            return self._fresh(self._as_persistence_error(e))
        return LoadResult(root=root, restored=True)

    def clear(self) -> None:
        """Remove the stored snapshot."""
        self.store.delete(self.key)

    def _as_persistence_error(self, error: Exception) -> PersistenceError:
        if isinstance(error, PersistenceError):
            return error
        return PersistenceError(self.key, str(error) or type(error).__name__)

    def _fresh(self, error: PersistenceError) -> LoadResult:
        self.last_error = error
        logger.warning("Discarding snapshot, starting with an empty root: %s", error)
        return LoadResult(root=DirectoryNode.root(), restored=False, error=error)
