"""Shared fixtures for mcpgen tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from mcpgen.config import ScanConfig


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Create an empty fake home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Return a helper that writes JSON to a path, creating parents."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def defaults_file(tmp_path: Path) -> Path:
    """Location for a test defaults file (not created by default)."""
    return tmp_path / "defaults.json"


@pytest.fixture
def scan_config(home: Path, tmp_path: Path, defaults_file: Path) -> ScanConfig:
    """Scan configuration rooted at the fake home, with no defaults file."""
    return ScanConfig(
        home_root=home,
        collection_path=tmp_path / "out" / "collection.json",
        defaults_path=defaults_file,
    )
