"""Collection data model and its JSON file format.

The collection file lives at ``~/.mcp-collection.json`` by default::

    {
      "_meta": {
        "generatedAt": "2026-03-01T12:00:00+00:00",
        "totalServers": 2,
        "sourceFiles": ["~/projects/app/.mcp.json"]
      },
      "mcpServers": {
        "github": {"command": "npx", "args": ["-y", "..."]},
        "fetch": {"command": "uvx", "args": ["mcp-server-fetch"]}
      }
    }

Server records are stored exactly as the pipeline produced them; unknown
fields pass through untouched.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from mcpgen.discovery.models import SkippedItem
from mcpgen.exceptions import CollectionReadError


@dataclass
class Collection:
    """Deduplicated name -> server record mapping plus scan metadata.

    Attributes:
        servers: Server name -> record.
        source_files: Config files that were scanned, home shown as ``~``.
        generated_at: When the collection was built (UTC).
    """

    servers: dict[str, Any] = field(default_factory=dict)
    source_files: list[str] = field(default_factory=list)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_servers(self) -> int:
        return len(self.servers)

    @property
    def names(self) -> list[str]:
        """Return sorted server names."""
        return sorted(self.servers)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk document layout."""
        return {
            "_meta": {
                "generatedAt": self.generated_at.isoformat(),
                "totalServers": self.total_servers,
                "sourceFiles": list(self.source_files),
            },
            "mcpServers": self.servers,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Any) -> Collection:
        """Build a collection from a decoded collection document.

        Raises:
            CollectionReadError: If ``mcpServers`` is missing or malformed.
        """
        if not isinstance(data, dict) or not isinstance(data.get("mcpServers"), dict):
            raise CollectionReadError("Collection has no 'mcpServers' object")

        servers = {k: v for k, v in data["mcpServers"].items() if k}
        meta = data.get("_meta")
        meta = meta if isinstance(meta, dict) else {}

        sources = meta.get("sourceFiles")
        source_files = [s for s in sources if isinstance(s, str)] if isinstance(sources, list) else []

        generated_at = datetime.now(timezone.utc)
        stamp = meta.get("generatedAt")
        if isinstance(stamp, str):
            try:
                generated_at = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
            except ValueError:
                pass
        return cls(servers=servers, source_files=source_files, generated_at=generated_at)


@dataclass
class ScanResult:
    """Everything a scan produced.

    Attributes:
        collection: The merged collection that was written.
        files: Candidate files in the order they were processed.
        sources: Server name -> every file that declared it, including
            files whose record lost the first-writer-wins merge.
        skipped: Directories, files, and servers left out, with reasons.
        defaults_loaded: Number of bundled default servers.
        previous_total: Server count of the collection this scan
            replaced, or None if there was none.
    """

    collection: Collection
    files: list[Path] = field(default_factory=list)
    sources: dict[str, list[Path]] = field(default_factory=dict)
    skipped: list[SkippedItem] = field(default_factory=list)
    defaults_loaded: int = 0
    previous_total: int | None = None

    @property
    def servers(self) -> dict[str, Any]:
        return self.collection.servers


def load_collection(path: Path) -> Collection | None:
    """Read a persisted collection.

    Args:
        path: Collection file location.

    Returns:
        The collection, or None if the file does not exist.

    Raises:
        CollectionReadError: If the path cannot be checked, read, or parsed.
    """
    try:
        if not path.exists():
            return None
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CollectionReadError(f"Cannot read collection {path}: {exc}") from exc
    return Collection.from_dict(data)
