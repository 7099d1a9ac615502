"""Rich output formatting helpers for the mcpgen CLI.

Provides the scan summary, the collection table, and the single-server
detail panel. Environment variables are always shown by name only.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mcpgen.collection import Collection, ScanResult
from mcpgen.discovery import display_path

console = Console()


def _args_text(record: dict[str, Any]) -> str:
    args = record.get("args")
    if not isinstance(args, list) or not args:
        return "-"
    return " ".join(str(a) for a in args)


def _env_names(record: dict[str, Any]) -> list[str]:
    env = record.get("env")
    return sorted(env) if isinstance(env, dict) else []


def _transport_text(record: dict[str, Any]) -> str:
    transport = record.get("type") or ("stdio" if record.get("command") else "")
    url = record.get("url")
    if transport and url:
        return f"{transport} {url}"
    return str(transport or url or "-")


def print_scan_summary(result: ScanResult, home: Path, collection_path: Path) -> None:
    """Print the files found, skip counts, and where the collection went.

    Args:
        result: The completed scan.
        home: Home root, abbreviated to ``~`` in paths.
        collection_path: Where the collection was written.
    """
    console.print(f"[dim]Loaded {result.defaults_loaded} default server(s)[/dim]")
    console.print(f"Found [bold]{len(result.files)}[/bold] MCP config file(s)")
    for path in result.files:
        console.print(f"[dim]  • {escape(display_path(path, home))}[/dim]")

    if result.skipped:
        reasons = Counter(item.reason for item in result.skipped)
        detail = ", ".join(f"{count} {reason}" for reason, count in sorted(reasons.items()))
        console.print(f"[yellow]Skipped: {detail}[/yellow]")

    total = result.collection.total_servers
    line = f"[green]Saved {total} MCP server(s) to {escape(display_path(collection_path, home))}[/green]"
    if result.previous_total is not None and result.previous_total != total:
        delta = total - result.previous_total
        line += f" [dim]({delta:+d} since last scan)[/dim]"
    console.print(line)


def print_collection(collection: Collection) -> None:
    """Print every server in a collection as a table."""
    if not collection.servers:
        console.print("[dim]The collection is empty.[/dim]")
        return

    table = Table(title="MCP Collection", show_header=True, header_style="bold")
    table.add_column("Server", style="bold")
    table.add_column("Command")
    table.add_column("Type/URL")
    table.add_column("Args", style="dim")
    table.add_column("Env", style="cyan")

    for name in collection.names:
        record = collection.servers[name]
        if not isinstance(record, dict):
            table.add_row(escape(name), "-", "-", "-", "-")
            continue
        command = record.get("command") or "-"
        env = ", ".join(_env_names(record)) or "-"
        table.add_row(
            escape(name),
            escape(str(command)),
            escape(_transport_text(record)),
            escape(_args_text(record)),
            env,
        )

    console.print(table)
    console.print(
        f"[bold]{collection.total_servers}[/bold] servers | "
        f"generated {collection.generated_at.isoformat(timespec='seconds')}"
    )


def print_server(name: str, record: Any) -> None:
    """Print the detail view of one server."""
    if not isinstance(record, dict):
        console.print(Panel(Text(str(record)), title=name))
        return

    lines = Text()
    lines.append("Command: ", style="bold")
    lines.append(f"{record.get('command') or 'N/A'}\n")
    lines.append("Args: ", style="bold")
    lines.append(f"{_args_text(record) if record.get('args') else 'none'}\n")
    for field_name in ("type", "url", "description"):
        if record.get(field_name):
            lines.append(f"{field_name.capitalize()}: ", style="bold")
            lines.append(f"{record[field_name]}\n")

    env_names = _env_names(record)
    if env_names:
        lines.append("\nEnv vars:\n", style="bold")
        for env_name in env_names:
            lines.append(f"  {env_name}\n", style="cyan")

    console.print(Panel(lines, title=name))
