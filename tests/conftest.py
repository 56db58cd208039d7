"""
Shared test fixtures and utilities for the treefs test suite.
"""

import pytest

from treefs.commands.interpreter import CommandInterpreter
from treefs.core.namespace import Namespace
from treefs.storage import MemoryStore, PersistenceGateway


class FailingStore(MemoryStore):
    """Store whose writes fail, mimicking an exhausted storage quota."""

    def set(self, key: str, value: str) -> None:
        raise OSError("quota exceeded")


@pytest.fixture
def namespace():
    """Empty namespace without persistence."""
    return Namespace()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def gateway(store):
    return PersistenceGateway(store)


@pytest.fixture
def persisted_namespace(gateway):
    """Empty namespace writing through to an in-memory store."""
    namespace, _ = Namespace.open(gateway)
    return namespace


@pytest.fixture
def interpreter(namespace):
    return CommandInterpreter(namespace)


def tree_shape(node) -> dict:
    """Reduce a tree to its paths, types and contents for structural comparison."""
    if node.is_file:
        return {"path": node.path, "type": "file", "content": node.content}
    return {
        "path": node.path,
        "type": "directory",
        "children": {name: tree_shape(child) for name, child in node.children.items()},
    }
