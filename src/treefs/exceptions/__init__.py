"""
treefs exception classes.

This package provides the error taxonomy used throughout treefs for
consistent error reporting across resolution, CRUD and persistence.
"""

from treefs.exceptions.core import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    ErrorKind,
    InvalidOperationError,
    NamespaceError,
    NodeNotFoundError,
    NotADirectoryNodeError,
    NotAFileError,
    NotFoundOrNotDirectoryError,
    PathComponentIsFileError,
    PersistenceError,
    TreeFSError,
)

__all__ = [
    "ErrorKind",
    "TreeFSError",
    "NamespaceError",
    "NotFoundOrNotDirectoryError",
    "NodeNotFoundError",
    "NotAFileError",
    "NotADirectoryNodeError",
    "AlreadyExistsError",
    "PathComponentIsFileError",
    "DirectoryNotEmptyError",
    "InvalidOperationError",
    "PersistenceError",
]
