"""Navigation aids derived from a documentation tree.

Breadcrumbs locate a file relative to the tree root. The table of contents
is a sequence of markup fragments that, concatenated, form a nested list
with the selected page and open folder marked.
"""

import html
import logging
from dataclasses import dataclass
from pathlib import Path

from docwalk.core.errors import NodeNotFoundError, NotUnderRootError
from docwalk.core.nodes import DirectoryNode, FileNode, MarkdownPage, derive_title
from docwalk.core.tree import find_by_path, find_parent
from docwalk.core.types import NodeId, URLPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreadcrumbItem:
    """Breadcrumb navigation item."""

    title: str
    path: URLPath

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "path": self.path}


@dataclass(frozen=True)
class Selection:
    """Currently selected folder and file, used when rendering the TOC."""

    folder_id: NodeId | None = None
    file_id: NodeId | None = None


@dataclass(frozen=True)
class TocMarkup:
    """Tag vocabulary of the table of contents."""

    list_tag: str = "ul"
    item_tag: str = "li"
    selected_class: str = "selected"

    def open_list(self, *, selected: bool) -> str:
        if selected:
            return f'<{self.list_tag} class="{self.selected_class}">'
        return f"<{self.list_tag}>"

    def close_list(self) -> str:
        return f"</{self.list_tag}>"

    def item(self, label: str, *, selected: bool) -> str:
        text = html.escape(label)
        if selected:
            return f'<{self.item_tag} class="{self.selected_class}">{text}</{self.item_tag}>'
        return f"<{self.item_tag}>{text}</{self.item_tag}>"


DEFAULT_MARKUP = TocMarkup()


def _as_path(root: DirectoryNode | Path) -> Path:
    return root.path if isinstance(root, DirectoryNode) else root


def get_breadcrumbs(file: FileNode, root: DirectoryNode | Path) -> list[str]:
    """Collect directory names between a file and the tree root.

    Walks upward from the file's directory until it reaches root. Paths are
    compared as written (made absolute), without following symlinks.

    Args:
        file: File to locate
        root: Tree root (node or directory path)

    Returns:
        Directory names, closest ancestor first. Empty for files in root.

    Raises:
        NotUnderRootError: If the file is not below root
    """
    root_path = _as_path(root).absolute()
    current = file.path.parent.absolute()
    segments: list[str] = []
    while current != root_path:
        parent = current.parent
        if parent == current:
            raise NotUnderRootError(file.path, root_path)
        segments.append(current.name)
        current = parent
    return segments


def get_url(
    file: FileNode,
    root: DirectoryNode | Path,
    *,
    innermost_first: bool = False,
) -> URLPath:
    """Build the URL of a file's directory relative to the tree root.

    Args:
        file: File to locate
        root: Tree root (node or directory path)
        innermost_first: Join segments closest ancestor first instead of
            root first

    Returns:
        Segments joined with "/" (e.g., "a/b" for root/a/b/file.md)

    Raises:
        NotUnderRootError: If the file is not below root
    """
    segments = get_breadcrumbs(file, root)
    if not innermost_first:
        segments.reverse()
    return URLPath("/".join(segments))


def build_breadcrumb_items(
    file: FileNode,
    root: DirectoryNode | Path,
) -> list[BreadcrumbItem]:
    """Build root-first breadcrumb items for templates.

    Each item carries the directory title and the URL of that directory.

    Raises:
        NotUnderRootError: If the file is not below root
    """
    items: list[BreadcrumbItem] = []
    prefix: list[str] = []
    for name in reversed(get_breadcrumbs(file, root)):
        prefix.append(name)
        items.append(BreadcrumbItem(title=derive_title(name), path=URLPath("/".join(prefix))))
    return items


def generate_toc(
    directory: DirectoryNode,
    selected_folder: NodeId | None = None,
    selected_file: NodeId | None = None,
    *,
    markup: TocMarkup = DEFAULT_MARKUP,
) -> list[str]:
    """Generate table of contents fragments for a directory.

    Produces the following kind of structure, one fragment per line:

        <li>Entry-1.md</li>
        <ul class="selected">
            <li class="selected">Entry-2.md</li>
        </ul>

    Markdown pages become list items, directories become nested lists.
    Static assets and link pages are not listed.

    Args:
        directory: Directory whose children are listed
        selected_folder: Identifier of the folder shown open
        selected_file: Identifier of the selected page
        markup: Tag vocabulary

    Returns:
        Markup fragments in tree order
    """
    fragments: list[str] = []
    _append_toc(fragments, directory, selected_folder, selected_file, markup)
    return fragments


def _append_toc(
    fragments: list[str],
    directory: DirectoryNode,
    selected_folder: NodeId | None,
    selected_file: NodeId | None,
    markup: TocMarkup,
) -> None:
    # Recursion depth follows directory depth
    for child in directory.children:
        if isinstance(child, MarkdownPage):
            fragments.append(markup.item(child.name, selected=child.id == selected_file))
        elif isinstance(child, DirectoryNode):
            fragments.append(markup.open_list(selected=child.id == selected_folder))
            _append_toc(fragments, child, selected_folder, selected_file, markup)
            fragments.append(markup.close_list())


def render_toc(
    directory: DirectoryNode,
    selection: Selection | None = None,
    *,
    markup: TocMarkup = DEFAULT_MARKUP,
) -> str:
    """Render the table of contents as a single markup string."""
    selection = selection or Selection()
    return "".join(
        generate_toc(directory, selection.folder_id, selection.file_id, markup=markup),
    )


def select(root: DirectoryNode, path: str | Path) -> Selection:
    """Build the selection context for a page.

    Args:
        root: Tree root
        path: Page path relative to root (e.g., "guide/setup.md")

    Returns:
        Selection with the page selected and its directory open

    Raises:
        NodeNotFoundError: If no file matches path
    """
    node = find_by_path(root, path)
    if node is None or isinstance(node, DirectoryNode):
        raise NodeNotFoundError(str(path))
    parent = find_parent(root, node.id)
    folder_id = parent.id if parent is not None else root.id
    logger.debug(f"Selected {path} (folder {folder_id}, file {node.id})")
    return Selection(folder_id=folder_id, file_id=node.id)
