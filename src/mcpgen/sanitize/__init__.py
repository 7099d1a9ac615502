"""Credential redaction and local path detection for MCP server records.

Public API::

    from mcpgen.sanitize import classify, sanitize_record, has_local_paths

    classify("ghp_abc123")                       # "<YOUR_GITHUB_TOKEN>"
    sanitize_record({"command": "npx", "env": {"TOKEN": "sk-abc"}})
    has_local_paths({"args": ["/Users/me/db.sqlite"]})   # True
"""

from __future__ import annotations

from mcpgen.sanitize.classifier import (
    SECRET_PATTERNS,
    classify,
    is_placeholder,
    is_sensitive_key,
    match_secret_kind,
    redaction_token,
)
from mcpgen.sanitize.record import has_local_paths, sanitize_record

__all__ = [
    "SECRET_PATTERNS",
    "classify",
    "has_local_paths",
    "is_placeholder",
    "is_sensitive_key",
    "match_secret_kind",
    "redaction_token",
    "sanitize_record",
]
