"""
Exception classes for treefs namespace operations.

This module defines the error taxonomy shared by the path resolver, the
namespace CRUD engine and the persistence gateway. Namespace operations report
failures as structured results carrying an ErrorKind; the exception classes
here are raised only when a caller asks a result to be unwrapped.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure a namespace or persistence operation can report."""

    NOT_FOUND_OR_NOT_DIRECTORY = "not_found_or_not_directory"
    NOT_FOUND = "not_found"
    NOT_A_FILE = "not_a_file"
    NOT_A_DIRECTORY = "not_a_directory"
    ALREADY_EXISTS = "already_exists"
    PATH_COMPONENT_IS_FILE = "path_component_is_file"
    DIRECTORY_NOT_EMPTY = "directory_not_empty"
    INVALID_OPERATION = "invalid_operation"
    PERSISTENCE_FAILURE = "persistence_failure"


class TreeFSError(Exception):
    """Base exception for all treefs errors."""

    kind: ErrorKind | None = None


class NamespaceError(TreeFSError):
    """Base exception for failures of a namespace operation on a path."""

    def __init__(self, path: str, message: str):
        """
        Initialize the exception.

        Params:
            path: The path the operation was applied to
            message: Human-readable description of the failure
        """
        self.path = path
        self.message = message
        super().__init__(message)


class NotFoundOrNotDirectoryError(NamespaceError):
    """Raised when an intermediate path segment is missing or not a directory."""

    kind = ErrorKind.NOT_FOUND_OR_NOT_DIRECTORY

    def __init__(self, path: str, segment: str):
        self.segment = segment
        super().__init__(path, f"Path not found or not a directory at: {segment}")


class NodeNotFoundError(NamespaceError):
    """Raised when the final target of a path does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str):
        super().__init__(path, f"Path not found: {path}")


class NotAFileError(NamespaceError):
    """Raised when a file operation targets a directory."""

    kind = ErrorKind.NOT_A_FILE

    def __init__(self, path: str):
        super().__init__(path, f"Not a file: {path}")


class NotADirectoryNodeError(NamespaceError):
    """Raised when a directory operation targets a file."""

    kind = ErrorKind.NOT_A_DIRECTORY

    def __init__(self, path: str):
        super().__init__(path, f"Not a directory: {path}")


class AlreadyExistsError(NamespaceError):
    """Raised when a create operation collides with an existing entry."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, path: str):
        super().__init__(path, f"{path} already exists")


class PathComponentIsFileError(NamespaceError):
    """Raised when a path descends through a file as if it were a directory."""

    kind = ErrorKind.PATH_COMPONENT_IS_FILE

    def __init__(self, path: str, component: str):
        """
        Initialize the exception.

        Params:
            path: The path the operation was applied to
            component: Canonical path of the file blocking the descent
        """
        self.component = component
        super().__init__(
            path, f"{component} is a file, cannot create directory inside it"
        )


class DirectoryNotEmptyError(NamespaceError):
    """Raised when deleting a directory that still has children."""

    kind = ErrorKind.DIRECTORY_NOT_EMPTY

    def __init__(self, path: str):
        super().__init__(path, f"Directory not empty: {path}")


class InvalidOperationError(NamespaceError):
    """Raised for operations that are never allowed, such as deleting the root."""

    kind = ErrorKind.INVALID_OPERATION

    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(path, f"Invalid operation on '{path}': {reason}")


class PersistenceError(TreeFSError):
    """Raised when a snapshot cannot be serialized, stored or restored."""

    kind = ErrorKind.PERSISTENCE_FAILURE

    def __init__(self, key: str, reason: str):
        """
        Initialize the exception.

        Params:
            key: Storage key of the snapshot record
            reason: The underlying reason for the failure
        """
        self.key = key
        self.reason = reason
        self.message = f"Persistence failure for '{key}': {reason}"
        super().__init__(self.message)
