"""Errors raised while building and navigating a documentation tree."""

from pathlib import Path


class DocwalkError(Exception):
    """Base class for docwalk errors."""


class InvalidFileNameError(DocwalkError, ValueError):
    """File base name is not allowed in a documentation tree."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File name cannot contain spaces: {path}")


class NotUnderRootError(DocwalkError, ValueError):
    """File is not contained in the given root directory."""

    def __init__(self, path: Path, root: Path) -> None:
        self.path = path
        self.root = root
        super().__init__(f"File not under root: {path} (root: {root})")


class NodeNotFoundError(DocwalkError, LookupError):
    """No node matches the requested path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Node not found: {path}")
