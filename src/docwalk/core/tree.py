"""Documentation tree builder.

Walks a source directory depth-first and builds a DirectoryNode tree whose
structure mirrors the filesystem, with every file classified.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from docwalk.core.nodes import (
    DirectoryNode,
    FileNode,
    MarkdownPage,
    TreeNode,
    classify,
)
from docwalk.core.types import NodeId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """File discovered during the walk."""

    path: Path
    parent: Path


@dataclass(frozen=True)
class DirEntry:
    """Directory discovered during the walk."""

    path: Path
    parent: Path


PathEntry = FileEntry | DirEntry


def iter_entries(root: Path) -> Iterator[PathEntry]:
    """Enumerate a directory as a flat pre-order stream of entries.

    For every directory, all of its direct files are emitted first, in the
    order the filesystem reports them. Each subdirectory is then emitted,
    immediately followed by the full emission of its own contents.

    Symlinked directories are followed, except those pointing back to one
    of their own ancestors, which are skipped with a warning.

    Args:
        root: Directory to enumerate

    Yields:
        FileEntry and DirEntry items, each carrying its parent directory

    Raises:
        FileNotFoundError: If root (or a directory below it) doesn't exist
        NotADirectoryError: If root is not a directory
    """
    yield from _iter_entries(root, (root.resolve(),))


def _iter_entries(directory: Path, ancestors: tuple[Path, ...]) -> Iterator[PathEntry]:
    children = list(directory.iterdir())
    for path in children:
        if path.is_file():
            yield FileEntry(path=path, parent=directory)
    for path in children:
        if not path.is_dir():
            continue
        target = path.resolve()
        if target in ancestors:
            logger.warning(f"Skipping directory {path}: symlink loop to {target}")
            continue
        yield DirEntry(path=path, parent=directory)
        yield from _iter_entries(path, (*ancestors, target))


class TreeBuilder:
    """Builds a documentation tree from a source directory.

    Consumes the iter_entries() stream with a stack of open directories.
    Every entry is attached to the directory it was found in, whatever
    sibling directories were entered before it.
    """

    def __init__(self, root: Path) -> None:
        """Initialize builder.

        Args:
            root: Root directory of the documentation sources
        """
        self._root = root

    @property
    def root(self) -> Path:
        """Root directory of the documentation sources."""
        return self._root

    def build(self) -> DirectoryNode:
        """Build the tree.

        Returns:
            Root DirectoryNode with all files and subdirectories below it

        Raises:
            InvalidFileNameError: If a file name contains a space
            OSError: If the filesystem can't be enumerated
        """
        root_node = DirectoryNode.create(self._root)
        stack: list[DirectoryNode] = [root_node]
        pages = assets = directories = 0

        for entry in iter_entries(self._root):
            while stack[-1].path != entry.parent:
                stack.pop()
            current = stack[-1]

            if isinstance(entry, FileEntry):
                node = classify(FileNode.create(entry.path))
                current.append(node)
                if isinstance(node, MarkdownPage):
                    pages += 1
                else:
                    assets += 1
            else:
                directory = DirectoryNode.create(entry.path)
                current.append(directory)
                stack.append(directory)
                directories += 1
                logger.debug(f"Entered directory {entry.path}")

        logger.info(
            f"Built tree for {self._root}: {directories} directories, "
            f"{pages} pages, {assets} static assets",
        )
        return root_node


def build_tree(root: str | Path) -> DirectoryNode:
    """Build the documentation tree rooted at the given directory.

    Args:
        root: Root directory path

    Returns:
        Root DirectoryNode
    """
    return TreeBuilder(Path(root)).build()


def iter_nodes(root: DirectoryNode) -> Iterator[TreeNode]:
    """Iterate over all nodes below root in pre-order (root excluded)."""
    for child in root.children:
        yield child
        if isinstance(child, DirectoryNode):
            yield from iter_nodes(child)


def find_node(root: DirectoryNode, node_id: NodeId) -> TreeNode | None:
    """Find a node by identifier.

    Args:
        root: Tree to search
        node_id: Identifier to look for

    Returns:
        Matching node (root included), None if not found
    """
    if root.id == node_id:
        return root
    for node in iter_nodes(root):
        if node.id == node_id:
            return node
    return None


def find_parent(root: DirectoryNode, node_id: NodeId) -> DirectoryNode | None:
    """Find the directory that directly contains the given node.

    Returns:
        Parent DirectoryNode, None for the root or unknown identifiers
    """
    for child in root.children:
        if child.id == node_id:
            return root
        if isinstance(child, DirectoryNode):
            parent = find_parent(child, node_id)
            if parent is not None:
                return parent
    return None


def find_by_path(root: DirectoryNode, path: str | Path) -> TreeNode | None:
    """Find a node by its path relative to the tree root.

    Args:
        root: Tree to search
        path: Relative path (e.g., "guide/setup.md"); "" or "." is the root

    Returns:
        Matching node, None if not found
    """
    current: TreeNode = root
    for part in Path(path).parts:
        if not isinstance(current, DirectoryNode):
            return None
        match = next((c for c in current.children if c.name == part), None)
        if match is None:
            return None
        current = match
    return current


def count_nodes(root: DirectoryNode) -> dict[str, int]:
    """Count nodes below root by kind."""
    counts = {"directory": 0, "markdown": 0, "static": 0, "link": 0}
    for node in iter_nodes(root):
        counts[node.kind] += 1
    return counts
