"""Shared Click options and config resolution for mcpgen commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import click

from mcpgen.config import ScanConfig, read_overrides

config_option = click.option(
    "--config", "config_file",
    type=click.Path(exists=True, dir_okay=False),
    envvar="MCPGEN_CONFIG",
    default=None,
    help="YAML file overriding paths and patterns (env: MCPGEN_CONFIG).",
)

home_option = click.option(
    "--home",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Root directory to scan (default: your home directory).",
)

collection_option = click.option(
    "--collection",
    type=click.Path(dir_okay=False),
    default=None,
    help="Collection file (default: ~/.mcp-collection.json).",
)


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply ``--config``, ``--home`` and ``--collection`` to a command."""
    return config_option(home_option(collection_option(func)))


def resolve_config(
    config_file: str | None, home: str | None, collection: str | None,
) -> ScanConfig:
    """Build the effective ``ScanConfig`` from command-line options.

    Precedence: explicit ``--home``/``--collection`` over the YAML file
    over built-in defaults.

    Raises:
        ConfigError: If the YAML file is invalid.
    """
    home_path = Path(home).absolute() if home else None
    config = ScanConfig.default(home_path)
    if config_file:
        overrides = read_overrides(Path(config_file))
        if home_path is not None:
            overrides.pop("home_root", None)
        config = config.with_overrides(overrides, home=home_path)

    if collection:
        config = config.with_overrides({"collection_path": str(Path(collection).absolute())})
    return config
