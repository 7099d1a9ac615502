"""Merged MCP server collection: building, persisting, and reading it.

Public API::

    from mcpgen.collection import CollectionBuilder, load_collection
    from mcpgen.config import ScanConfig

    config = ScanConfig.default()
    result = CollectionBuilder(config).scan()
    saved = load_collection(config.collection_path)
"""

from __future__ import annotations

from mcpgen.collection.builder import (
    CollectionBuilder,
    load_defaults,
    merge_servers,
    scan,
    write_collection,
)
from mcpgen.collection.models import Collection, ScanResult, load_collection

__all__ = [
    "Collection",
    "CollectionBuilder",
    "ScanResult",
    "load_collection",
    "load_defaults",
    "merge_servers",
    "scan",
    "write_collection",
]
