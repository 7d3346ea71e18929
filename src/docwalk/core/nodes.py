"""Documentation tree nodes.

Every file in the source directory becomes a FileNode wrapped in exactly one
classification variant (MarkdownPage, StaticAsset or LinkPage). Directories
are DirectoryNode instances owning their children in traversal order.

Nodes compare by identity: two nodes built from the same path are distinct
and carry different identifiers.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, TypedDict

from docwalk.core.errors import InvalidFileNameError
from docwalk.core.types import NodeId

MARKDOWN_EXTENSION = ".md"

NodeKind = Literal["directory", "markdown", "static", "link"]


class NodeDict(TypedDict, total=False):
    """Dictionary representation of a tree node."""

    kind: NodeKind
    id: str
    name: str
    title: str
    path: str
    children: list[NodeDict]


def new_node_id() -> NodeId:
    """Generate a fresh, randomly distributed node identifier."""
    return NodeId(uuid.uuid4())


def derive_title(name: str) -> str:
    """Turn a base name into a display title by replacing hyphens with spaces."""
    return name.replace("-", " ")


@dataclass(frozen=True, eq=False)
class FileNode:
    """Classified file data.

    Use FileNode.create() to build instances; it enforces the file name
    rules and assigns the identifier.
    """

    path: Path
    title: str
    id: NodeId = field(default_factory=new_node_id)

    @classmethod
    def create(cls, path: Path) -> FileNode:
        """Create a file node for the given path.

        Args:
            path: Path to the file

        Returns:
            FileNode with derived title and a fresh identifier

        Raises:
            InvalidFileNameError: If the base name contains a space
        """
        if " " in path.name:
            raise InvalidFileNameError(path)
        return cls(path=path, title=derive_title(path.name))

    @property
    def name(self) -> str:
        """Base name of the file."""
        return self.path.name


@dataclass(frozen=True, eq=False)
class _FileVariant:
    file: FileNode

    kind: NodeKind = field(init=False, default="static")

    @property
    def id(self) -> NodeId:
        return self.file.id

    @property
    def name(self) -> str:
        return self.file.name

    @property
    def path(self) -> Path:
        return self.file.path

    @property
    def title(self) -> str:
        return self.file.title

    def to_dict(self) -> NodeDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind,
            "id": str(self.id),
            "name": self.name,
            "title": self.title,
            "path": str(self.path),
        }


@dataclass(frozen=True, eq=False)
class MarkdownPage(_FileVariant):
    """Markdown page, rendered as an entry of the table of contents."""

    kind: NodeKind = field(init=False, default="markdown")


@dataclass(frozen=True, eq=False)
class StaticAsset(_FileVariant):
    """Static asset (image, stylesheet, download...), not listed in the TOC."""

    kind: NodeKind = field(init=False, default="static")


@dataclass(frozen=True, eq=False)
class LinkPage(_FileVariant):
    """Navigational link entry.

    Never produced by the tree builder. Reserved for entries added
    explicitly by callers.
    """

    kind: NodeKind = field(init=False, default="link")


@dataclass(eq=False)
class DirectoryNode:
    """Directory with its children in traversal order."""

    path: Path
    id: NodeId = field(default_factory=new_node_id)
    children: list[TreeNode] = field(default_factory=list)

    kind: NodeKind = field(init=False, default="directory")

    @classmethod
    def create(cls, path: Path) -> DirectoryNode:
        """Create an empty directory node with a fresh identifier."""
        return cls(path=path)

    @property
    def name(self) -> str:
        """Base name of the directory."""
        return self.path.name

    @property
    def title(self) -> str:
        """Display title of the directory."""
        return derive_title(self.path.name)

    def append(self, node: TreeNode) -> None:
        """Append a child node."""
        self.children.append(node)

    def to_dict(self) -> NodeDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind,
            "id": str(self.id),
            "name": self.name,
            "title": self.title,
            "path": str(self.path),
            "children": [child.to_dict() for child in self.children],
        }


TreeNode = MarkdownPage | StaticAsset | LinkPage | DirectoryNode


def classify(file: FileNode) -> MarkdownPage | StaticAsset:
    """Classify a file by its extension.

    Args:
        file: File node to classify

    Returns:
        MarkdownPage for a ".md" suffix (case-insensitive), StaticAsset otherwise
    """
    if file.path.suffix.lower() == MARKDOWN_EXTENSION:
        return MarkdownPage(file)
    return StaticAsset(file)
