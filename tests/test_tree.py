"""Tests for the documentation tree builder."""

import logging
from pathlib import Path

import pytest
from docwalk.core.errors import InvalidFileNameError
from docwalk.core.nodes import DirectoryNode, MarkdownPage, StaticAsset, TreeNode
from docwalk.core.tree import (
    DirEntry,
    FileEntry,
    TreeBuilder,
    build_tree,
    count_nodes,
    find_by_path,
    find_node,
    find_parent,
    iter_entries,
    iter_nodes,
)


def _shape(node: TreeNode) -> tuple:
    """Structure of a node without identifiers."""
    if isinstance(node, DirectoryNode):
        return (node.kind, node.name, [_shape(child) for child in node.children])
    return (node.kind, node.name)


def _child(directory: DirectoryNode, name: str) -> TreeNode:
    return next(c for c in directory.children if c.name == name)


class TestIterEntries:
    """Tests for iter_entries()."""

    def test__files_before_directories(self, source_dir: Path) -> None:
        """Emit direct files of a directory before its subdirectories."""
        entries = list(iter_entries(source_dir))

        root_entries = [e for e in entries if e.parent == source_dir]
        kinds = [type(e) for e in root_entries]
        assert kinds == [FileEntry, FileEntry, DirEntry, DirEntry]

    def test__preserves_filesystem_order(self, source_dir: Path) -> None:
        """Files keep the order reported by the filesystem."""
        expected = [p for p in source_dir.iterdir() if p.is_file()]

        entries = [e.path for e in iter_entries(source_dir) if isinstance(e, FileEntry) and e.parent == source_dir]

        assert entries == expected

    def test__pre_order(self, source_dir: Path) -> None:
        """Directory contents follow the directory entry immediately."""
        entries = list(iter_entries(source_dir))
        paths = [e.path for e in entries]

        guide = paths.index(source_dir / "guide")
        assert paths[guide + 1] == source_dir / "guide" / "Getting-Started.md"
        assert paths[guide + 2] == source_dir / "guide" / "setup"
        assert paths[guide + 3] == source_dir / "guide" / "setup" / "install.md"

    def test__missing_dir__raises(self, tmp_path: Path) -> None:
        """Propagate filesystem errors."""
        with pytest.raises(FileNotFoundError):
            list(iter_entries(tmp_path / "nonexistent"))


class TestTreeBuilder:
    """Tests for TreeBuilder.build()."""

    def test__empty_dir__returns_empty_root(self, tmp_path: Path) -> None:
        """Empty directory gives a root without children."""
        root = TreeBuilder(tmp_path).build()

        assert root.path == tmp_path
        assert root.children == []

    def test__child_count__files_plus_directories(self, source_dir: Path) -> None:
        """Each directory has one child per file and subdirectory."""
        root = build_tree(source_dir)

        assert len(root.children) == 4
        guide = _child(root, "guide")
        assert isinstance(guide, DirectoryNode)
        assert len(guide.children) == 2

    def test__classifies_files(self, source_dir: Path) -> None:
        """Markdown files become pages, others static assets."""
        root = build_tree(source_dir)

        assert isinstance(_child(root, "index.md"), MarkdownPage)
        assert isinstance(_child(root, "logo.png"), StaticAsset)
        api = _child(root, "api")
        assert isinstance(api, DirectoryNode)
        assert isinstance(_child(api, "schema.json"), StaticAsset)

    def test__files_before_directories(self, source_dir: Path) -> None:
        """Files come first in each directory's children."""
        root = build_tree(source_dir)

        kinds = [child.kind for child in root.children]
        assert kinds[2:] == ["directory", "directory"]
        assert sorted(kinds[:2]) == ["markdown", "static"]

    def test__directories_keep_filesystem_order(self, source_dir: Path) -> None:
        """Subdirectories appear in filesystem order."""
        expected = [p.name for p in source_dir.iterdir() if p.is_dir()]

        root = build_tree(source_dir)

        assert [c.name for c in root.children if isinstance(c, DirectoryNode)] == expected

    def test__sibling_directory_files_attached_to_sibling(self, source_dir: Path) -> None:
        """Files of a later sibling never land in a previously entered directory."""
        root = build_tree(source_dir)

        guide = _child(root, "guide")
        api = _child(root, "api")
        setup = _child(guide, "setup")  # type: ignore[arg-type]
        assert isinstance(setup, DirectoryNode)
        assert [c.name for c in setup.children] == ["install.md"]
        assert isinstance(api, DirectoryNode)
        assert sorted(c.name for c in api.children) == ["reference.md", "schema.json"]

    def test__mirrors_deep_hierarchy(self, tmp_path: Path) -> None:
        """Nested directories mirror the filesystem."""
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)
        (deep / "leaf.md").write_text("")
        (tmp_path / "a" / "top.md").write_text("")

        root = build_tree(tmp_path)

        assert _shape(root) == (
            "directory",
            tmp_path.name,
            [
                (
                    "directory",
                    "a",
                    [
                        ("markdown", "top.md"),
                        ("directory", "b", [("directory", "c", [("markdown", "leaf.md")])]),
                    ],
                ),
            ],
        )

    def test__unique_ids(self, source_dir: Path) -> None:
        """No two nodes share an identifier."""
        root = build_tree(source_dir)

        ids = [root.id] + [node.id for node in iter_nodes(root)]
        assert len(ids) == len(set(ids)) == 10

    def test__idempotent_structure__fresh_ids(self, source_dir: Path) -> None:
        """Building twice yields the same shape with different ids."""
        first = build_tree(source_dir)
        second = build_tree(source_dir)

        assert _shape(first) == _shape(second)
        first_ids = {first.id} | {n.id for n in iter_nodes(first)}
        second_ids = {second.id} | {n.id for n in iter_nodes(second)}
        assert first_ids.isdisjoint(second_ids)

    def test__accepts_string_root(self, source_dir: Path) -> None:
        """build_tree() accepts a string path."""
        root = build_tree(str(source_dir))

        assert root.path == source_dir

    def test__file_name_with_space__aborts(self, source_dir: Path) -> None:
        """A single invalid file name aborts the whole build."""
        (source_dir / "api" / "bad name.md").write_text("")

        with pytest.raises(InvalidFileNameError):
            build_tree(source_dir)

    def test__missing_root__raises(self, tmp_path: Path) -> None:
        """Missing root propagates FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            build_tree(tmp_path / "nonexistent")

    def test__root_is_file__raises(self, tmp_path: Path) -> None:
        """File root propagates NotADirectoryError."""
        file = tmp_path / "page.md"
        file.write_text("")

        with pytest.raises(NotADirectoryError):
            build_tree(file)

    def test__symlink_to_ancestor__skipped(
        self,
        source_dir: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A directory symlink pointing back up the tree is not followed."""
        (source_dir / "guide" / "loop").symlink_to(source_dir, target_is_directory=True)

        with caplog.at_level(logging.WARNING, logger="docwalk.core.tree"):
            root = build_tree(source_dir)

        assert find_by_path(root, "guide/loop") is None
        assert count_nodes(root) == {"directory": 3, "markdown": 4, "static": 2, "link": 0}
        assert "symlink loop" in caplog.text

    def test__symlink_to_sibling__followed(self, source_dir: Path) -> None:
        """A directory symlink pointing elsewhere in the tree is walked."""
        (source_dir / "guide" / "api-link").symlink_to(source_dir / "api", target_is_directory=True)

        root = build_tree(source_dir)

        assert isinstance(find_by_path(root, "guide/api-link/reference.md"), MarkdownPage)

    def test__logs_summary(self, source_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Log counts once the tree is built."""
        with caplog.at_level(logging.INFO, logger="docwalk.core.tree"):
            build_tree(source_dir)

        assert "3 directories, 4 pages, 2 static assets" in caplog.text


class TestQueries:
    """Tests for tree queries."""

    def test__iter_nodes__pre_order(self, tmp_path: Path) -> None:
        """Yield each directory before its contents."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "page.md").write_text("")
        root = build_tree(tmp_path)

        assert [n.name for n in iter_nodes(root)] == ["sub", "page.md"]

    def test__find_node__returns_node(self, source_dir: Path) -> None:
        """Find nodes by id, root included."""
        root = build_tree(source_dir)
        page = find_by_path(root, "guide/setup/install.md")
        assert page is not None

        assert find_node(root, page.id) is page
        assert find_node(root, root.id) is root

    def test__find_node__unknown__returns_none(self, source_dir: Path) -> None:
        """Return None for ids of another tree."""
        root = build_tree(source_dir)
        other = build_tree(source_dir)

        assert find_node(root, other.id) is None

    def test__find_parent__returns_directory(self, source_dir: Path) -> None:
        """Find the directory containing a node."""
        root = build_tree(source_dir)
        page = find_by_path(root, "guide/setup/install.md")
        setup = find_by_path(root, "guide/setup")
        assert page is not None

        assert find_parent(root, page.id) is setup
        assert find_parent(root, root.id) is None

    def test__find_by_path__root(self, source_dir: Path) -> None:
        """Empty path resolves to the root."""
        root = build_tree(source_dir)

        assert find_by_path(root, "") is root
        assert find_by_path(root, ".") is root

    def test__find_by_path__not_found__returns_none(self, source_dir: Path) -> None:
        """Return None for unknown paths and paths through files."""
        root = build_tree(source_dir)

        assert find_by_path(root, "missing.md") is None
        assert find_by_path(root, "index.md/child") is None

    def test__count_nodes__by_kind(self, source_dir: Path) -> None:
        """Count nodes below root by kind."""
        root = build_tree(source_dir)

        assert count_nodes(root) == {"directory": 3, "markdown": 4, "static": 2, "link": 0}
