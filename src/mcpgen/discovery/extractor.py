"""Extraction of named server records from MCP config files.

Two document shapes are recognised, tried in order:

1. A top-level ``mcpServers`` object, used by Claude Code, Claude Desktop,
   Cursor, and most MCP clients:

   .. code-block:: json

       {"mcpServers": {"github": {"command": "npx", "args": ["-y", "..."]}}}

2. A nested ``mcp.servers`` array whose entries carry their own ``name``:

   .. code-block:: json

       {"mcp": {"servers": [{"name": "github", "command": "npx"}]}}

   Entries without a ``name`` are skipped; the ``name`` field is removed
   from the record body.

Any read failure, JSON error, or unrecognised shape makes the file a skip.
One bad file never aborts a scan.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mcpgen.discovery.models import (
    INVALID_JSON,
    UNREADABLE,
    UNSUPPORTED_SHAPE,
    ExtractedServers,
    ExtractOutcome,
    SkippedItem,
)
from mcpgen.exceptions import ExtractionError

logger = logging.getLogger(__name__)


def _servers_from_map(servers: dict[str, Any]) -> dict[str, Any]:
    return {name: record for name, record in servers.items() if name}


def _servers_from_list(entries: list[Any]) -> dict[str, Any]:
    servers: dict[str, Any] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        if not name or not isinstance(name, str):
            continue
        servers[name] = {k: v for k, v in entry.items() if k != "name"}
    return servers


def parse_document(data: Any) -> dict[str, Any] | None:
    """Pull the server map out of a parsed config document.

    Args:
        data: The decoded JSON document.

    Returns:
        Server name -> record, or None if the document has neither
        supported shape.
    """
    if not isinstance(data, dict):
        return None

    servers = data.get("mcpServers")
    if isinstance(servers, dict):
        return _servers_from_map(servers)

    mcp = data.get("mcp")
    if isinstance(mcp, dict) and isinstance(mcp.get("servers"), list):
        return _servers_from_list(mcp["servers"])

    return None


def extract_strict(path: Path) -> ExtractedServers:
    """Read one config file and return its server records.

    Args:
        path: Candidate config file.

    Returns:
        The extracted servers and their source path.

    Raises:
        ExtractionError: If the file cannot be read, is not JSON, or has
            no supported shape.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ExtractionError(path, UNREADABLE, str(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ExtractionError(path, INVALID_JSON, str(exc)) from exc

    servers = parse_document(data)
    if servers is None:
        raise ExtractionError(path, UNSUPPORTED_SHAPE)
    return ExtractedServers(servers=servers, source=path)


def extract_outcome(path: Path) -> ExtractOutcome:
    """Read one config file, turning any failure into a recorded skip."""
    try:
        return ExtractOutcome(path=path, extracted=extract_strict(path))
    except ExtractionError as exc:
        logger.debug("Skipping %s: %s", path, exc.reason)
        return ExtractOutcome(
            path=path,
            skipped=SkippedItem(str(path), exc.reason, exc.detail),
        )


def extract(path: Path) -> ExtractedServers | None:
    """Read one config file; None if it yields no server map."""
    return extract_outcome(path).extracted
