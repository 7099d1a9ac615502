"""Data models for the discovery module.

Contains the per-item result types produced while walking the home
directory and reading candidate files. A skip is never an error: it is
recorded with a reason so callers can report it, and the scan moves on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Skip reasons.
UNREADABLE_DIR = "unreadable_dir"
UNREADABLE = "unreadable"
INVALID_JSON = "invalid_json"
UNSUPPORTED_SHAPE = "unsupported_shape"
LOCAL_PATHS = "local_paths"


@dataclass(frozen=True)
class SkippedItem:
    """Something the pipeline looked at and chose to leave out.

    Attributes:
        target: The directory, file, or server name that was skipped.
        reason: One of the module-level reason constants.
        detail: Free-form detail (usually the underlying error message).
    """

    target: str
    reason: str
    detail: str = ""


@dataclass
class DiscoveryResult:
    """Candidate files found under the home root.

    Attributes:
        files: Absolute paths of candidate config files, sorted.
        skipped: Directories that could not be read.
    """

    files: list[Path] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)


@dataclass
class ExtractedServers:
    """Server records read from one config file.

    Attributes:
        servers: Server name -> raw record, in document order.
        source: The file the records came from.
    """

    servers: dict[str, Any]
    source: Path


@dataclass
class ExtractOutcome:
    """Result of reading one candidate file: records or a skip.

    Exactly one of ``extracted`` and ``skipped`` is set.
    """

    path: Path
    extracted: ExtractedServers | None = None
    skipped: SkippedItem | None = None

    @property
    def ok(self) -> bool:
        """True if the file produced a server map."""
        return self.extracted is not None
