"""``mcpgen scan``: Discover MCP configs and save the merged collection.

Walks the home directory for ``.mcp.json``, ``mcp-config.json`` and
``mcp.json`` files, redacts secrets, drops servers that point at local
paths, merges the rest over the bundled defaults, and writes
``~/.mcp-collection.json``.

Exit Codes:
    0: Collection written (an empty collection is still a success).
    1: Invalid configuration, or the collection could not be written.
"""

from __future__ import annotations

import json
import sys
from collections import Counter

import click

from mcpgen.cli.options import common_options, resolve_config
from mcpgen.collection import CollectionBuilder
from mcpgen.discovery import display_path
from mcpgen.exceptions import McpGenError


@click.command("scan")
@common_options
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def scan_command(
    config_file: str | None,
    home: str | None,
    collection: str | None,
    output_format: str,
) -> None:
    """Scan for MCP server configs and rebuild the collection.

    The collection file is fully replaced on every successful scan.
    """
    try:
        config = resolve_config(config_file, home, collection)
        result = CollectionBuilder(config).scan()
    except McpGenError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(1)

    if output_format == "json":
        reasons = Counter(item.reason for item in result.skipped)
        click.echo(json.dumps({
            "total_servers": result.collection.total_servers,
            "defaults_loaded": result.defaults_loaded,
            "source_files": result.collection.source_files,
            "skipped": dict(sorted(reasons.items())),
            "collection_path": display_path(config.collection_path, config.home_root),
        }, indent=2))
    else:
        from mcpgen.cli.output import print_scan_summary
        print_scan_summary(result, config.home_root, config.collection_path)
    sys.exit(0)
