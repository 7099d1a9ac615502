"""mcpgen CLI: Collect MCP server configurations from your machine.

Entry point for the ``mcpgen`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan: Discover MCP configs, redact secrets, save the collection.
    list: Show every server in the saved collection.
    show: Show one server from the saved collection.

Usage::

    mcpgen scan                          # Scan the home directory
    mcpgen scan --home ~/work            # Scan a different root
    mcpgen scan --config mcpgen.yaml     # Custom patterns and paths
    mcpgen list
    mcpgen show github
"""

from __future__ import annotations

import logging

import click

from mcpgen import __version__
from mcpgen.cli.list_cmd import list_command, show_command
from mcpgen.cli.scan import scan_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """mcpgen: Build a shareable collection of MCP server configurations.

    Finds MCP config files under your home directory, replaces secrets
    with placeholders, drops machine-specific entries, and merges the
    result with a bundled set of well-known servers.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register all subcommands
cli.add_command(scan_command)
cli.add_command(list_command)
cli.add_command(show_command)
