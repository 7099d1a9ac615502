"""mcpgen exception hierarchy.

All public exceptions inherit from McpGenError, giving callers a single
base class to catch when they want to handle any mcpgen-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from pathlib import Path


class McpGenError(Exception):
    """Base exception for all mcpgen errors."""


class ConfigError(McpGenError):
    """Raised when a scan configuration file is missing or malformed.

    Covers unreadable YAML, unknown keys, and values of the wrong type.
    """


class ExtractionError(McpGenError):
    """Raised when a candidate MCP config file cannot be turned into records.

    Only raised by the strict loader. The scan pipeline converts it into
    a skip so a single bad file never aborts a scan.

    Attributes:
        path: The file that failed.
        reason: Short machine-readable reason ("unreadable", "invalid_json",
            "unsupported_shape").
    """

    def __init__(self, path: Path, reason: str, detail: str = "") -> None:
        self.path = path
        self.reason = reason
        self.detail = detail
        message = f"{path}: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class CollectionReadError(McpGenError):
    """Raised when the persisted collection exists but cannot be parsed."""


class CollectionWriteError(McpGenError):
    """Raised when the merged collection cannot be written to disk.

    This is the only fatal condition of a scan: the collection file is
    the scan's one required output.

    Attributes:
        path: Destination path of the collection.
        cause: The underlying OS error.
    """

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write collection to {path}: {cause}")
