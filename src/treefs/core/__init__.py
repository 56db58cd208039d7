"""
Core treefs components.

This package provides the node models, path resolution, result types and the
Namespace CRUD engine.
"""

from treefs.core.path_utils import (
    MAX_DEPTH,
    ROOT_PATH,
    PathResolver,
    ResolveResult,
    canonical_path,
    is_within,
    join_path,
    parent_path,
    split_segments,
)
from treefs.core.tree_node import DirectoryNode, FileNode, Node, TreeNode
from treefs.core.types import ChangeCallback, NodeType, OperationResult
from treefs.core.namespace import Namespace

__all__ = [
    "MAX_DEPTH",
    "ROOT_PATH",
    "PathResolver",
    "ResolveResult",
    "canonical_path",
    "is_within",
    "join_path",
    "parent_path",
    "split_segments",
    "TreeNode",
    "FileNode",
    "DirectoryNode",
    "Node",
    "NodeType",
    "OperationResult",
    "ChangeCallback",
    "Namespace",
]
