"""Discovery of MCP config files and extraction of their server records.

Public API::

    from mcpgen.config import ScanConfig
    from mcpgen.discovery import DiscoveryScanner, extract

    result = DiscoveryScanner(ScanConfig.default()).discover()
    for path in result.files:
        extracted = extract(path)
        if extracted is not None:
            print(path, sorted(extracted.servers))
"""

from __future__ import annotations

from mcpgen.discovery.extractor import (
    extract,
    extract_outcome,
    extract_strict,
    parse_document,
)
from mcpgen.discovery.models import (
    DiscoveryResult,
    ExtractedServers,
    ExtractOutcome,
    SkippedItem,
)
from mcpgen.discovery.scanner import DiscoveryScanner, discover, display_path

__all__ = [
    "DiscoveryResult",
    "DiscoveryScanner",
    "ExtractOutcome",
    "ExtractedServers",
    "SkippedItem",
    "discover",
    "display_path",
    "extract",
    "extract_outcome",
    "extract_strict",
    "parse_document",
]
