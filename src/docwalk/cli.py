"""CLI interface for docwalk.

Command-line tool for inspecting a documentation source tree and producing
its navigation markup.
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from docwalk.config import Config
from docwalk.core.errors import DocwalkError
from docwalk.core.navigation import (
    TocMarkup,
    build_breadcrumb_items,
    get_breadcrumbs,
    get_url,
    render_toc,
    select,
)
from docwalk.core.nodes import DirectoryNode, TreeNode
from docwalk.core.tree import build_tree, count_nodes, find_by_path

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docwalk.toml)",
)

source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def cli(verbose: bool) -> None:
    """docwalk - documentation tree and navigation builder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@config_option
@source_dir_option
@click.option("--json", "as_json", is_flag=True, help="Print the tree as JSON")
def tree(config_path: Path | None, source_dir: Path | None, as_json: bool) -> None:
    """Print the documentation tree."""
    config = _load_config(config_path, source_dir)
    root = _build(config)

    if as_json:
        click.echo(json.dumps(root.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"{root.path} [{root.id}]")
    _echo_children(root, depth=1)
    counts = count_nodes(root)
    click.echo(
        f"\n{counts['directory']} directories, {counts['markdown']} pages, "
        f"{counts['static']} static assets",
    )


@cli.command()
@click.argument("page")
@config_option
@source_dir_option
@click.option(
    "--innermost-first",
    is_flag=True,
    help="Join URL segments closest directory first",
)
def breadcrumbs(
    page: str,
    config_path: Path | None,
    source_dir: Path | None,
    innermost_first: bool,
) -> None:
    """Print breadcrumbs and URL of PAGE (path relative to the source directory)."""
    config = _load_config(config_path, source_dir)
    root = _build(config)

    node = find_by_path(root, page)
    if node is None or isinstance(node, DirectoryNode):
        _fail(f"Page not found: {page}")

    try:
        segments = get_breadcrumbs(node.file, root)
        url = get_url(node.file, root, innermost_first=innermost_first)
        items = build_breadcrumb_items(node.file, root)
    except DocwalkError as e:
        _fail(str(e))

    trail = " > ".join(item.title for item in items) or "(root)"
    click.echo(f"Breadcrumbs: {trail}")
    click.echo(f"Segments: {', '.join(segments)}")
    click.echo(f"URL: {url}")


@cli.command()
@click.option(
    "--page",
    "-p",
    default=None,
    help="Page to mark as selected (path relative to the source directory)",
)
@config_option
@source_dir_option
def toc(page: str | None, config_path: Path | None, source_dir: Path | None) -> None:
    """Print the table of contents markup."""
    config = _load_config(config_path, source_dir)
    root = _build(config)

    selection = None
    if page is not None:
        try:
            selection = select(root, page)
        except DocwalkError as e:
            _fail(str(e))

    markup = TocMarkup(selected_class=config.toc.selected_class)
    click.echo(render_toc(root, selection, markup=markup))


def _load_config(config_path: Path | None, source_dir: Path | None) -> Config:
    """Load configuration and apply CLI overrides, exiting on invalid config."""
    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    return config.with_overrides(source_dir=source_dir)


def _build(config: Config) -> DirectoryNode:
    """Build the tree for the configured source directory.

    Raises:
        SystemExit: If the source directory is missing, a file name is invalid
            or the walk fails with an OS error
    """
    source_dir = config.docs.source_dir
    if not source_dir.is_dir():
        _fail(f"Source directory not found: {source_dir}")
    try:
        return build_tree(source_dir)
    except (DocwalkError, OSError) as e:
        _fail(str(e))


def _echo_children(directory: DirectoryNode, depth: int) -> None:
    for child in directory.children:
        click.echo(f"{'  ' * depth}{_describe(child)}")
        if isinstance(child, DirectoryNode):
            _echo_children(child, depth + 1)


def _describe(node: TreeNode) -> str:
    name = f"{node.name}/" if isinstance(node, DirectoryNode) else node.name
    return f"{node.kind:<9} {name} [{node.id}]"


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)