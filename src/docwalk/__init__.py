"""docwalk - documentation tree and navigation builder."""

from docwalk.core.errors import (
    DocwalkError,
    InvalidFileNameError,
    NodeNotFoundError,
    NotUnderRootError,
)
from docwalk.core.navigation import (
    BreadcrumbItem,
    Selection,
    TocMarkup,
    build_breadcrumb_items,
    generate_toc,
    get_breadcrumbs,
    get_url,
    render_toc,
    select,
)
from docwalk.core.nodes import (
    DirectoryNode,
    FileNode,
    LinkPage,
    MarkdownPage,
    StaticAsset,
    TreeNode,
    classify,
)
from docwalk.core.tree import TreeBuilder, build_tree

__all__ = [
    "BreadcrumbItem",
    "DirectoryNode",
    "DocwalkError",
    "FileNode",
    "InvalidFileNameError",
    "LinkPage",
    "MarkdownPage",
    "NodeNotFoundError",
    "NotUnderRootError",
    "Selection",
    "StaticAsset",
    "TocMarkup",
    "TreeBuilder",
    "TreeNode",
    "build_breadcrumb_items",
    "build_tree",
    "classify",
    "generate_toc",
    "get_breadcrumbs",
    "get_url",
    "render_toc",
    "select",
]
