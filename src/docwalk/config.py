"""Configuration management for docwalk.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "docwalk.toml"


@dataclass
class DocsConfig:
    """Documentation source configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))


@dataclass
class TocConfig:
    """Table of contents rendering configuration."""

    selected_class: str = "selected"


@dataclass
class Config:
    """Application configuration."""

    docs: DocsConfig
    toc: TocConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docwalk.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(docs=DocsConfig(), toc=TocConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            docs=cls._parse_docs(data.get("docs"), config_dir),
            toc=cls._parse_toc(data.get("toc")),
            config_path=path,
        )

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        return DocsConfig(source_dir=config_dir / source_dir)

    @classmethod
    def _parse_toc(cls, data: object) -> TocConfig:
        """Parse toc configuration section."""
        if data is None:
            return TocConfig()

        if not isinstance(data, dict):
            raise ValueError("toc section must be a dictionary")

        selected_class = data.get("selected_class", "selected")
        if not isinstance(selected_class, str):
            raise ValueError("toc.selected_class must be a string")
        if not selected_class:
            raise ValueError("toc.selected_class must not be empty")

        return TocConfig(selected_class=selected_class)

    def with_overrides(
        self,
        *,
        source_dir: Path | None = None,
        selected_class: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            source_dir: Override docs.source_dir
            selected_class: Override toc.selected_class

        Returns:
            New Config instance with overrides applied
        """
        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        toc = self.toc
        if selected_class is not None:
            toc = replace(self.toc, selected_class=selected_class)

        return replace(self, docs=docs, toc=toc)
