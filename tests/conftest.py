"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Create a documentation source directory.

    Layout:
        docs/
        ├── index.md
        ├── logo.png
        ├── guide/
        │   ├── Getting-Started.md
        │   └── setup/
        │       └── install.md
        └── api/
            ├── reference.md
            └── schema.json
    """
    docs = tmp_path / "docs"
    setup = docs / "guide" / "setup"
    setup.mkdir(parents=True)
    (docs / "api").mkdir()

    (docs / "index.md").write_text("# Home\n")
    (docs / "logo.png").write_bytes(b"\x89PNG")
    (docs / "guide" / "Getting-Started.md").write_text("# Getting Started\n")
    (setup / "install.md").write_text("# Install\n")
    (docs / "api" / "reference.md").write_text("# Reference\n")
    (docs / "api" / "schema.json").write_text("{}")
    return docs
