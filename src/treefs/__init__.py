"""
treefs - An in-memory hierarchical namespace driven by a small command language

treefs provides a tree of directories and files, a CRUD engine over it, a
quote-aware command interpreter and write-through persistence to a key-value
store.
"""

from importlib.metadata import version

from treefs.commands.interpreter import CommandInterpreter
from treefs.core.namespace import Namespace
from treefs.core.tree_node import DirectoryNode, FileNode
from treefs.storage.gateway import PersistenceGateway

__version__ = version("treefs")

__all__ = [
    "__version__",
    "Namespace",
    "FileNode",
    "DirectoryNode",
    "CommandInterpreter",
    "PersistenceGateway",
]
