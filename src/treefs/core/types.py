"""
Core type definitions for treefs.

This module contains the node type enum and the structured result returned by
every namespace operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from treefs.exceptions import ErrorKind, TreeFSError

ChangeCallback = Callable[[str], None]


class NodeType(Enum):
    """Type tag of a namespace node."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class OperationResult:
    """
    Outcome of a namespace operation.

    Failures carry the (unraised) exception describing them; the namespace is
    left untouched whenever ``ok`` is False. For mutations, ``persisted``
    reports whether the write-through save succeeded.
    """

    ok: bool
    value: Any = None
    error: TreeFSError | None = None
    persisted: bool = True

    @classmethod
    def success(cls, value: Any = None, persisted: bool = True) -> "OperationResult":
        return cls(ok=True, value=value, persisted=persisted)

    @classmethod
    def failure(cls, error: TreeFSError) -> "OperationResult":
        return cls(ok=False, error=error, persisted=False)

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str | None:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> Any:
        """
        Return the value of a successful result.

        Raises:
            TreeFSError: The recorded error when the operation failed
        """
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok
