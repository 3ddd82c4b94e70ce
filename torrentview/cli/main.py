"""Command line interface for torrentview.

Provides commands to describe the status schema and to inspect bulk dump
files produced by the binary export.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from torrentview.config.config import init_config
from torrentview.models import LogLevel
from torrentview.serialize.fields import (
    KEY_TORRENT_ID,
    KEY_TORRENT_NAME,
    KEY_TORRENT_PROGRESS,
    KEY_TORRENT_RATIO,
    KEY_TORRENT_SIZE,
    KEY_TORRENT_STATE,
    SCHEMA_VERSION,
)
from torrentview.serialize.serialize_binary import decode_records
from torrentview.serialize.serialize_torrent import CANONICAL_FIELDS, select_fields
from torrentview.utils.exceptions import ConfigurationError, RecordDecodeError
from torrentview.utils.logging_config import setup_logging
from torrentview.utils.string import split_to_list

logger = logging.getLogger(__name__)

INSPECT_DEFAULT_FIELDS = (
    KEY_TORRENT_ID,
    KEY_TORRENT_NAME,
    KEY_TORRENT_STATE,
    KEY_TORRENT_PROGRESS,
    KEY_TORRENT_SIZE,
    KEY_TORRENT_RATIO,
)


def _format_cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.4g}"
    return str(value)


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to torrentview.toml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, verbose: bool) -> None:
    """Torrent status export tools."""
    try:
        config_manager = init_config(config_file, configure_logging=False)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    config = config_manager.config
    if verbose:
        config.observability.log_level = LogLevel.DEBUG
    # stdout carries command output such as ``inspect --json``
    setup_logging(config.observability, console=Console(stderr=True))
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command("fields")
def fields_cmd() -> None:
    """List the status fields in canonical order."""
    console = Console()
    table = Table(title=f"Torrent status fields (schema v{SCHEMA_VERSION})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Field", style="cyan")
    for index, name in enumerate(CANONICAL_FIELDS, start=1):
        table.add_row(str(index), name)
    console.print(table)


@cli.command("inspect")
@click.argument("dump_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--fields",
    "-f",
    "fields_opt",
    default="",
    help="Comma-separated fields to show",
)
@click.option("--json", "as_json", is_flag=True, help="Print records as JSON")
def inspect_cmd(dump_file: Path, fields_opt: str, as_json: bool) -> None:
    """Decode a bulk dump file and print its records."""
    console = Console()

    try:
        records = decode_records(dump_file.read_bytes())
    except RecordDecodeError as e:
        msg = f"{dump_file}: {e}"
        raise click.ClickException(msg) from e

    requested = split_to_list(fields_opt)
    if requested:
        columns = select_fields(requested)
        if not columns:
            msg = f"No known fields in: {fields_opt}"
            raise click.ClickException(msg)
    elif as_json:
        columns = list(CANONICAL_FIELDS)
    else:
        columns = list(INSPECT_DEFAULT_FIELDS)

    logger.debug("Decoded %d records from %s", len(records), dump_file)

    if as_json:
        rows = [{name: record[name] for name in columns if name in record} for record in records]
        click.echo(json.dumps(rows, indent=2))
        return

    table = Table(title=f"{dump_file.name}: {len(records)} torrent(s)")
    for name in columns:
        table.add_column(name)
    for record in records:
        table.add_row(*(_format_cell(record.get(name)) for name in columns))
    console.print(table)


def main() -> None:
    """Entry point."""
    cli(obj={})
