"""``mcpgen list`` and ``mcpgen show``: Inspect the saved collection.

Exit Codes:
    0: Collection (or server) displayed.
    1: The collection file exists but is malformed.
    2: No collection yet (run ``mcpgen scan``), or unknown server name.
"""

from __future__ import annotations

import json
import sys

import click

from mcpgen.cli.options import common_options, resolve_config
from mcpgen.collection import Collection, load_collection
from mcpgen.exceptions import McpGenError


def _load_or_exit(config_file: str | None, home: str | None, collection: str | None) -> Collection:
    try:
        config = resolve_config(config_file, home, collection)
        loaded = load_collection(config.collection_path)
    except McpGenError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(1)
    if loaded is None:
        click.echo("No collection found. Run 'mcpgen scan' first.")
        sys.exit(2)
    return loaded


@click.command("list")
@common_options
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def list_command(
    config_file: str | None,
    home: str | None,
    collection: str | None,
    output_format: str,
) -> None:
    """List every server in the saved collection."""
    loaded = _load_or_exit(config_file, home, collection)
    if output_format == "json":
        click.echo(json.dumps(loaded.to_dict(), indent=2))
    else:
        from mcpgen.cli.output import print_collection
        print_collection(loaded)


@click.command("show")
@click.argument("name")
@common_options
def show_command(
    name: str,
    config_file: str | None,
    home: str | None,
    collection: str | None,
) -> None:
    """Show the details of server NAME from the saved collection."""
    loaded = _load_or_exit(config_file, home, collection)
    if name not in loaded.servers:
        click.echo(f"Unknown server: {name}")
        sys.exit(2)

    from mcpgen.cli.output import print_server
    print_server(name, loaded.servers[name])
