"""
Node models for the treefs namespace.

A namespace is a strict tree of DirectoryNode and FileNode instances. The
models are pydantic models tagged by a ``type`` discriminator, so the same
classes describe both the in-memory tree and its serialized snapshot.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from treefs.core.path_utils import ROOT_PATH, join_path
from treefs.core.types import NodeType


class TreeNode(BaseModel):
    """
    Base class for all namespace node types.

    Every node carries its segment ``name``, its canonical absolute ``path``
    and the ``type`` tag that subclasses narrow to a literal discriminator.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    path: str
    type: str

    @property
    def node_type(self) -> NodeType:
        return NodeType(self.type)

    @property
    def is_file(self) -> bool:
        return self.node_type is NodeType.FILE

    @property
    def is_directory(self) -> bool:
        return self.node_type is NodeType.DIRECTORY


class FileNode(TreeNode):
    """Leaf node holding text content."""

    type: Literal["file"] = "file"
    content: str = ""


class DirectoryNode(TreeNode):
    """
    Interior node mapping segment names to child nodes.

    Validation enforces that each key equals the child's name and that each
    child's path extends this directory's path by exactly that name.
    """

    type: Literal["directory"] = "directory"
    children: dict[str, "Node"] = Field(default_factory=dict)

    @classmethod
    def root(cls) -> "DirectoryNode":
        """Create an empty root directory."""
        return cls(name=ROOT_PATH, path=ROOT_PATH)

    @model_validator(mode="after")
    def _check_children(self) -> "DirectoryNode":
        for key, child in self.children.items():
            if not key or "/" in key:
                raise ValueError(f"Invalid segment name '{key}' in {self.path}")
            if key != child.name:
                raise ValueError(
                    f"Child key '{key}' does not match node name '{child.name}' in {self.path}"
                )
            expected = join_path(self.path, key)
            if child.path != expected:
                raise ValueError(
                    f"Child path '{child.path}' should be '{expected}'"
                )
        return self


Node = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="type")]

DirectoryNode.model_rebuild()
