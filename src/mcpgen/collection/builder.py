"""Collection builder: discovery, sanitization, merge, and persistence.

Pipeline for one scan:
    1. Load the bundled default servers. A missing or malformed defaults
       file degrades to an empty set.
    2. Discover candidate config files under the home root.
    3. Extract each file's server records and sanitize every record.
    4. Merge across files with first-writer-wins: the first file (in
       discovery order) to declare a name supplies its record body. Every
       declaring file is still recorded in ``ScanResult.sources``.
    5. Drop scanned records that reference local absolute paths.
    6. Overlay the scanned records on the defaults; scanned records win.
    7. Atomically replace the collection file.

Files are processed one at a time, so the accumulation maps need no
locking. Nothing guards against two processes scanning at once: each
writes the file with an atomic rename and the last one wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from mcpgen.collection.models import Collection, ScanResult, load_collection
from mcpgen.config import ScanConfig
from mcpgen.discovery.extractor import extract_outcome
from mcpgen.discovery.models import LOCAL_PATHS, SkippedItem
from mcpgen.discovery.scanner import DiscoveryScanner, display_paths
from mcpgen.exceptions import CollectionReadError, CollectionWriteError
from mcpgen.sanitize import has_local_paths, sanitize_record

logger = logging.getLogger(__name__)


def load_defaults(path: Path) -> dict[str, Any]:
    """Load the default server set; empty if unavailable.

    Args:
        path: JSON file with an ``mcpServers`` object.

    Returns:
        Server name -> record. Empty on any read or parse failure.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Default servers unavailable: %s", path)
        return {}

    servers = data.get("mcpServers") if isinstance(data, dict) else None
    if not isinstance(servers, dict):
        logger.warning("Default servers file has no 'mcpServers' object: %s", path)
        return {}
    return {name: record for name, record in servers.items() if name}


def merge_servers(
    defaults: dict[str, Any], scanned: dict[str, Any],
) -> dict[str, Any]:
    """Overlay scanned servers on the defaults; scanned entries win."""
    merged = dict(defaults)
    merged.update(scanned)
    return merged


def write_collection(collection: Collection, path: Path) -> None:
    """Atomically replace the collection file.

    The JSON is written to a uniquely named temporary file in the
    destination directory and renamed over the target, so readers never
    see a partial file and concurrent writers never share a temp file.

    Raises:
        CollectionWriteError: If any step fails. The temporary file is
            always removed.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp",
        )
    except OSError as exc:
        raise CollectionWriteError(path, exc) from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(collection.to_json() + "\n")
        os.replace(tmp_path, path)
    except OSError as exc:
        raise CollectionWriteError(path, exc) from exc
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


class CollectionBuilder:
    """Builds and persists the merged MCP server collection.

    Usage::

        builder = CollectionBuilder(ScanConfig.default())
        result = builder.scan()
        print(f"{result.collection.total_servers} servers saved")
    """

    def __init__(self, config: ScanConfig) -> None:
        self._config = config

    def collect(
        self, files: list[Path],
    ) -> tuple[dict[str, Any], dict[str, list[Path]], list[SkippedItem]]:
        """Extract and sanitize servers from files, first writer wins.

        Args:
            files: Candidate config files in processing order.

        Returns:
            ``(servers, sources, skipped)``: the sanitized first-seen
            record per name, every file declaring each name, and the
            files that yielded nothing.
        """
        servers: dict[str, Any] = {}
        sources: dict[str, list[Path]] = {}
        skipped: list[SkippedItem] = []

        for path in files:
            outcome = extract_outcome(path)
            if outcome.extracted is None:
                if outcome.skipped is not None:
                    skipped.append(outcome.skipped)
                continue
            for name, record in outcome.extracted.servers.items():
                sources.setdefault(name, []).append(path)
                if name not in servers:
                    servers[name] = sanitize_record(record)

        logger.debug("Extracted %d unique server(s)", len(servers))
        return servers, sources, skipped

    def _previous_total(self) -> int | None:
        try:
            previous = load_collection(self._config.collection_path)
        except CollectionReadError:
            logger.warning(
                "Existing collection is unreadable and will be replaced: %s",
                self._config.collection_path,
            )
            return None
        return previous.total_servers if previous is not None else None

    def scan(self) -> ScanResult:
        """Run the full pipeline and overwrite the collection file.

        Returns:
            A ``ScanResult`` holding the written collection.

        Raises:
            CollectionWriteError: If the collection cannot be persisted.
        """
        config = self._config
        defaults = load_defaults(config.defaults_path)
        logger.info("Loaded %d default server(s)", len(defaults))

        previous_total = self._previous_total()

        discovery = DiscoveryScanner(config).discover()
        servers, sources, skipped = self.collect(discovery.files)

        scanned: dict[str, Any] = {}
        for name, record in servers.items():
            if has_local_paths(record):
                logger.debug("Excluding %s: references local paths", name)
                skipped.append(SkippedItem(name, LOCAL_PATHS))
                continue
            scanned[name] = record

        collection = Collection(
            servers=merge_servers(defaults, scanned),
            source_files=display_paths(discovery.files, config.home_root),
        )
        write_collection(collection, config.collection_path)
        logger.info(
            "Saved %d server(s) to %s",
            collection.total_servers, config.collection_path,
        )

        return ScanResult(
            collection=collection,
            files=discovery.files,
            sources=sources,
            skipped=discovery.skipped + skipped,
            defaults_loaded=len(defaults),
            previous_total=previous_total,
        )


def scan(config: ScanConfig) -> ScanResult:
    """Run a scan with ``config``. See ``CollectionBuilder.scan``."""
    return CollectionBuilder(config).scan()
