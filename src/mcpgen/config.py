"""Scan configuration: where to look, what to skip, where to write.

Every path and pattern the pipeline uses is carried on a ``ScanConfig``
passed into the scanner and the collection builder, so a scan can be
pointed at a temporary home directory in tests without touching the
real one.

Defaults mirror the layout most MCP clients use:

- Search patterns: ``**/.mcp.json``, ``**/mcp-config.json``, ``**/mcp.json``.
- Exclusions: dependency trees, VCS metadata, caches, browser and chat
  application data, and the trash.
- Collection: ``~/.mcp-collection.json``.
- Defaults: ``default_mcps.json`` bundled inside the package.

A YAML file can override any of these::

    home_root: ~/work
    collection_path: ~/.config/mcpgen/collection.json
    ignore_patterns:
      - "**/node_modules/**"
      - "**/vendor/**"
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from mcpgen.exceptions import ConfigError

COLLECTION_FILENAME = ".mcp-collection.json"

BUNDLED_DEFAULTS_PATH: Path = Path(__file__).parent / "data" / "default_mcps.json"

SEARCH_PATTERNS: tuple[str, ...] = (
    "**/.mcp.json",
    "**/mcp-config.json",
    "**/mcp.json",
)

IGNORE_PATTERNS: tuple[str, ...] = (
    "**/node_modules/**",
    "**/.git/**",
    "**/Library/Caches/**",
    "**/Library/Application Support/Google/**",
    "**/Library/Application Support/Firefox/**",
    "**/Library/Application Support/Slack/**",
    "**/.Trash/**",
)

_PATH_KEYS = ("home_root", "collection_path", "defaults_path")
_PATTERN_KEYS = ("search_patterns", "ignore_patterns")


@dataclass(frozen=True)
class ScanConfig:
    """Explicit configuration for one scan.

    Attributes:
        home_root: Directory the search patterns are evaluated under.
        collection_path: Where the merged collection is written.
        defaults_path: JSON file with the bundled default servers.
        search_patterns: Globs (relative to ``home_root``) naming
            candidate config files.
        ignore_patterns: Globs excluding whole subtrees from the walk.
    """

    home_root: Path
    collection_path: Path
    defaults_path: Path = BUNDLED_DEFAULTS_PATH
    search_patterns: tuple[str, ...] = SEARCH_PATTERNS
    ignore_patterns: tuple[str, ...] = field(default=IGNORE_PATTERNS)

    @classmethod
    def default(cls, home: Path | None = None) -> ScanConfig:
        """Build the standard configuration for a home directory.

        Args:
            home: Override the home directory (for testing).
        """
        home_root = home if home is not None else Path.home()
        return cls(home_root=home_root, collection_path=home_root / COLLECTION_FILENAME)

    @classmethod
    def from_yaml(cls, path: Path, home: Path | None = None) -> ScanConfig:
        """Load a configuration from a YAML file on top of the defaults.

        Args:
            path: YAML file to read.
            home: Home directory used for defaults and ``~`` expansion.

        Raises:
            ConfigError: If the file is unreadable, not a mapping, has
                unknown keys, or has values of the wrong type.
        """
        return cls.default(home).with_overrides(read_overrides(path), home=home)

    def with_overrides(
        self, overrides: dict[str, Any], home: Path | None = None,
    ) -> ScanConfig:
        """Return a copy with values from a plain mapping applied.

        Relative paths and ``~`` are resolved against ``home`` (or the
        real home directory). A ``home_root`` override also moves the
        default collection path unless ``collection_path`` is given too.

        Raises:
            ConfigError: On unknown keys or wrongly typed values.
        """
        unknown = set(overrides) - set(_PATH_KEYS) - set(_PATTERN_KEYS)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        base_home = home if home is not None else Path.home()
        changes: dict[str, Any] = {}

        for key in _PATH_KEYS:
            if key not in overrides:
                continue
            value = overrides[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a non-empty string")
            changes[key] = _expand(value, base_home)

        for key in _PATTERN_KEYS:
            if key not in overrides:
                continue
            value = overrides[key]
            if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
                raise ConfigError(f"{key} must be a list of strings")
            changes[key] = tuple(value)

        if "home_root" in changes and "collection_path" not in changes:
            changes["collection_path"] = changes["home_root"] / COLLECTION_FILENAME
        return replace(self, **changes)


def read_overrides(path: Path) -> dict[str, Any]:
    """Read a YAML config file into a plain mapping of overrides.

    Raises:
        ConfigError: If the file is unreadable, invalid YAML, or not a mapping.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def _expand(value: str, home: Path) -> Path:
    """Expand a leading ``~`` against ``home`` and anchor relative paths."""
    if value == "~":
        return home
    if value.startswith("~/"):
        return home / value[2:]
    path = Path(value)
    return path if path.is_absolute() else home / path
