"""
Namespace CRUD engine.

The Namespace owns the root directory of the tree and exposes create, read,
update, delete and list operations. Every operation re-derives its target by
walking from the root through PathResolver, reports failures as an
OperationResult instead of raising, and leaves the tree untouched on failure.
Successful mutations are written through to the persistence gateway.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Callable

from treefs.core.path_utils import (
    MAX_DEPTH,
    PathResolver,
    ResolveResult,
    canonical_path,
    join_path,
    parent_path,
    split_segments,
)
from treefs.core.tree_node import DirectoryNode, FileNode, TreeNode
from treefs.core.types import ChangeCallback, OperationResult
from treefs.exceptions import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    InvalidOperationError,
    NamespaceError,
    NodeNotFoundError,
    NotADirectoryNodeError,
    NotAFileError,
    PathComponentIsFileError,
)

if TYPE_CHECKING:
    from treefs.storage.gateway import PersistenceGateway

logger = logging.getLogger(__name__)


class Namespace:
    """
    Hierarchical tree of directories and files with CRUD operations.

    Params:
        root: Existing root directory to manage; a fresh empty root when None
        gateway: Persistence gateway used for write-through saves
        on_change: Called with the path of the directory whose contents changed
    """

    def __init__(
        self,
        root: DirectoryNode | None = None,
        gateway: "PersistenceGateway | None" = None,
        on_change: ChangeCallback | None = None,
    ):
        self._root = root if root is not None else DirectoryNode.root()
        self._gateway = gateway
        self.on_change = on_change

    @classmethod
    def open(
        cls,
        gateway: "PersistenceGateway",
        seed: bool = False,
        on_change: ChangeCallback | None = None,
    ) -> tuple["Namespace", bool]:
        """
        Restore a namespace from its persisted snapshot.

        Params:
            gateway: Gateway holding the snapshot
            seed: Populate sample content when no snapshot could be restored
            on_change: Change notifier for the presentation layer

        Returns:
            Tuple of the namespace and whether it was restored (False when it
            was freshly initialized)
        """
        loaded = gateway.load()
        namespace = cls(loaded.root, gateway=gateway, on_change=on_change)
        if not loaded.restored and seed:
            from treefs.samples import seed_sample_content

            seed_sample_content(namespace)
        return namespace, loaded.restored

    @property
    def root(self) -> DirectoryNode:
        return self._root

    def resolve(self, path: str) -> ResolveResult:
        return PathResolver.resolve(self._root, path)

    def get_node(self, path: str) -> TreeNode | None:
        """Return the node at ``path`` or None when it cannot be resolved."""
        return self.resolve(path).target

    def snapshot(self) -> DirectoryNode:
        """Return a deep copy of the whole tree."""
        return self._root.model_copy(deep=True)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_file(self, path: str, content: str = "") -> OperationResult:
        """Create a file, creating missing intermediate directories."""
        return self._create(
            path, lambda name, full: FileNode(name=name, path=full, content=content)
        )

    def create_directory(self, path: str) -> OperationResult:
        """Create a directory, creating missing intermediate directories."""
        return self._create(
            path, lambda name, full: DirectoryNode(name=name, path=full)
        )

    def update_file(self, path: str, content: str) -> OperationResult:
        """Overwrite the content of an existing file."""
        resolved = self._resolve_file(path)
        if not resolved.ok:
            return resolved
        resolved.value.content = content
        return self._commit(parent_path(path))

    def delete_file(self, path: str) -> OperationResult:
        """Detach a file from its parent directory."""
        if not split_segments(path):
            return self._fail(InvalidOperationError(path, "cannot delete the root directory"))
        resolved = self.resolve(path)
        if resolved.error is not None:
            return self._fail(resolved.error)
        if resolved.target is None:
            return self._fail(NodeNotFoundError(path))
        if not resolved.target.is_file:
            return self._fail(NotAFileError(path))
        del resolved.parent.children[resolved.target_name]
        return self._commit(resolved.parent.path)

    def delete_directory(self, path: str) -> OperationResult:
        """Detach an empty directory from its parent. Deletion is never recursive."""
        if not split_segments(path):
            return self._fail(InvalidOperationError(path, "cannot delete the root directory"))
        resolved = self.resolve(path)
        if resolved.error is not None:
            return self._fail(resolved.error)
        target = resolved.target
        if target is None:
            return self._fail(NodeNotFoundError(path))
        if not target.is_directory:
            return self._fail(NotADirectoryNodeError(path))
        if target.children:
            return self._fail(DirectoryNotEmptyError(path))
        del resolved.parent.children[resolved.target_name]
        return self._commit(resolved.parent.path)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def read_file(self, path: str) -> OperationResult:
        """Return the content of a file."""
        resolved = self._resolve_file(path)
        if not resolved.ok:
            return resolved
        return OperationResult.success(resolved.value.content)

    def list(self, path: str) -> OperationResult:
        """Return the child names of a directory, in no particular order."""
        resolved = self._resolve_directory(path)
        if not resolved.ok:
            return resolved
        return OperationResult.success(list(resolved.value.children))

    def list_entries(self, path: str) -> OperationResult:
        """
        Return ``(name, NodeType)`` pairs of a directory in display order.

        Directories come before files; each group is sorted by name.
        """
        resolved = self._resolve_directory(path)
        if not resolved.ok:
            return resolved
        entries = sorted(
            resolved.value.children.values(),
            key=lambda child: (not child.is_directory, child.name),
        )
        return OperationResult.success([(child.name, child.node_type) for child in entries])

    def iter_file_paths(self, directory: DirectoryNode | None = None) -> Iterator[str]:
        """Yield the path of every file below ``directory`` (default: root), depth first."""
        directory = directory if directory is not None else self._root
        for child in directory.children.values():
            if child.is_file:
                yield child.path
            else:
                yield from self.iter_file_paths(child)

    def all_file_paths(self) -> list[str]:
        return list(self.iter_file_paths())

    def suggest_paths(
        self, query: str, current: str | None = None, limit: int = 10
    ) -> list[str]:
        """
        Suggest file paths matching a mention query.

        Params:
            query: Case-insensitive substring to look for in file paths
            current: Path of the currently open file, listed first when it is
                still a readable file
            limit: Maximum number of suggestions

        Returns:
            Unique file paths, the open file first
        """
        needle = query.lower()
        suggestions: list[str] = []
        if current is not None and self.read_file(current).ok:
            suggestions.append(canonical_path(current))
        for path in self.iter_file_paths():
            if needle in path.lower() and path not in suggestions:
                suggestions.append(path)
        return suggestions[:limit]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _create(
        self, path: str, make_node: Callable[[str, str], TreeNode]
    ) -> OperationResult:
        segments = split_segments(path)
        if not segments:
            return self._fail(InvalidOperationError(path, "the root directory already exists"))
        if len(segments) > MAX_DEPTH:
            return self._fail(
                InvalidOperationError(path, f"paths are limited to {MAX_DEPTH} levels")
            )

        # Plan the whole walk before touching the tree so a failure leaves
        # no partially created directories behind.
        current = self._root
        missing: list[str] = []
        for segment in segments[:-1]:
            if missing:
                missing.append(segment)
                continue
            child = current.children.get(segment)
            if child is None:
                missing.append(segment)
            elif not child.is_directory:
                return self._fail(PathComponentIsFileError(path, child.path))
            else:
                current = child

        name = segments[-1]
        if not missing and name in current.children:
            return self._fail(AlreadyExistsError(canonical_path(path)))

        for segment in missing:
            directory = DirectoryNode(name=segment, path=join_path(current.path, segment))
            current.children[segment] = directory
            current = directory

        node = make_node(name, join_path(current.path, name))
        current.children[name] = node
        return self._commit(parent_path(node.path), node)

    def _resolve_file(self, path: str) -> OperationResult:
        resolved = self.resolve(path)
        if resolved.error is not None:
            return self._fail(resolved.error)
        if resolved.target is None:
            return self._fail(NodeNotFoundError(path))
        if not resolved.target.is_file:
            return self._fail(NotAFileError(path))
        return OperationResult.success(resolved.target)

    def _resolve_directory(self, path: str) -> OperationResult:
        resolved = self.resolve(path)
        if resolved.error is not None:
            return self._fail(resolved.error)
        if resolved.target is None:
            return self._fail(NodeNotFoundError(path))
        if not resolved.target.is_directory:
            return self._fail(NotADirectoryNodeError(path))
        return OperationResult.success(resolved.target)

    def _fail(self, error: NamespaceError) -> OperationResult:
        logger.debug("Namespace operation failed: %s", error)
        return OperationResult.failure(error)

    def _commit(self, changed_path: str, value=None) -> OperationResult:
        persisted = self._persist()
        if self.on_change is not None:
            self.on_change(changed_path)
        return OperationResult.success(value, persisted=persisted)

    def _persist(self) -> bool:
        if self._gateway is None:
            return True
        saved = self._gateway.save(self._root)
        if not saved:
            logger.warning(
                "Snapshot could not be saved; in-memory tree is ahead of storage"
            )
        return saved
