"""
Path resolution utilities for the treefs namespace.

This module is the single source of truth for path semantics. Paths are
slash-delimited; empty segments are discarded, so ``//a//b/`` and ``/a/b``
name the same node and ``""`` names the root.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from treefs.exceptions import NotFoundOrNotDirectoryError

if TYPE_CHECKING:
    from treefs.core.tree_node import DirectoryNode, FileNode

ROOT_PATH = "/"
SEPARATOR = "/"

# Deepest path the namespace accepts, counted in segments. Snapshots of deeper
# trees exceed the nesting the JSON reader allows.
MAX_DEPTH = 64


def split_segments(path: str) -> list[str]:
    """
    Split a path into its non-empty segments.

    Examples:
        "/a/b.txt" -> ["a", "b.txt"]
        "//a//b/" -> ["a", "b"]
        "/" -> []
    """
    return [segment for segment in (path or "").split(SEPARATOR) if segment]


def canonical_path(path: str) -> str:
    """Return the slash-normalized absolute form of a path."""
    return SEPARATOR + SEPARATOR.join(split_segments(path))


def join_path(parent: str, name: str) -> str:
    """Join a directory path and a child segment name."""
    if parent == ROOT_PATH:
        return f"{ROOT_PATH}{name}"
    return f"{parent}{SEPARATOR}{name}"


def parent_path(path: str) -> str:
    """
    Return the path of the directory containing ``path``.

    The parent of the root, and of any top-level entry, is the root.
    """
    segments = split_segments(path)
    if len(segments) <= 1:
        return ROOT_PATH
    return canonical_path(SEPARATOR.join(segments[:-1]))


def is_within(path: str, directory: str) -> bool:
    """Check whether ``path`` equals ``directory`` or lies below it."""
    path_segments = split_segments(path)
    directory_segments = split_segments(directory)
    return path_segments[: len(directory_segments)] == directory_segments


@dataclass
class ResolveResult:
    """
    Result of resolving a path against a namespace root.

    ``parent`` is the directory that holds (or would hold) the target; it is
    None only for the root itself. ``target`` may be None when the parent
    exists but has no child named ``target_name``.
    """

    parent: Optional["DirectoryNode"]
    target: Optional["DirectoryNode | FileNode"]
    target_name: str | None
    error: NotFoundOrNotDirectoryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exists(self) -> bool:
        return self.target is not None


class PathResolver:
    """Locates path targets and their parent directories without mutating anything."""

    @staticmethod
    def resolve(root: "DirectoryNode", path: str) -> ResolveResult:
        """
        Resolve a path against the tree rooted at ``root``.

        Params:
            root: Root directory of the namespace
            path: Absolute slash-delimited path

        Returns:
            ResolveResult with the parent directory and the (possibly absent)
            target, or an error naming the first segment that is missing or is
            not a directory
        """
        segments = split_segments(path)
        if not segments:
            return ResolveResult(parent=None, target=root, target_name=ROOT_PATH)

        current = root
        for segment in segments[:-1]:
            child = current.children.get(segment)
            if child is None or not child.is_directory:
                return ResolveResult(
                    parent=None,
                    target=None,
                    target_name=None,
                    error=NotFoundOrNotDirectoryError(path, segment),
                )
            current = child

        target_name = segments[-1]
        return ResolveResult(
            parent=current,
            target=current.children.get(target_name),
            target_name=target_name,
        )
