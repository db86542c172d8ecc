"""CLI interface for the folder crawler."""

from __future__ import annotations

import json
import logging
import os
import sys
import time

import click

from folder_crawler.core.folder import FolderError, check_folder
from folder_crawler.core.listing import build_listing
from folder_crawler.core.scanner import DirectoryScanner
from folder_crawler.models.scan_result import ListingRow
from folder_crawler.settings import Settings
from folder_crawler.utils import bytes_to_human, format_elapsed

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _stored_defaults() -> dict[str, dict[str, bool]]:
    """Option defaults for subcommands, taken from the settings file."""
    settings = Settings.instance()
    return {
        "list": {
            "recursive": settings.get_bool("scan.recursive"),
            "human": settings.get_bool("output.human_sizes"),
        },
    }


def _format_size(row: ListingRow, human: bool) -> str:
    if not human or row.scaled is None:
        return str(row.size_bytes)
    return f"{int(row.scaled)}{row.unit}"


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def main(ctx: click.Context, verbose: int) -> None:
    """Folder crawler: list files with their sizes and permissions."""
    _setup_logging(verbose)
    if ctx.default_map is None:
        ctx.default_map = _stored_defaults()


# ── list ─────────────────────────────────────────────────────────────────

@main.command("list")
@click.argument("folder", required=False)
@click.option(
    "-r",
    "--subpaths/--no-subpaths",
    "recursive",
    default=False,
    help="Crawl subdirectories too",
)
@click.option(
    "--human/--raw",
    default=True,
    help="Print sizes scaled to a unit or as raw bytes",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_cmd(folder: str | None, recursive: bool, human: bool, as_json: bool) -> None:
    """List the entries of FOLDER (default: the current directory)."""
    folder = folder or os.getcwd()
    try:
        check_folder(folder)
    except FolderError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    scanner = DirectoryScanner()
    log.info("About to search %s%s", folder, " with its subdirectories" if recursive else "")
    started = time.monotonic()
    result = scanner.scan_recursive(folder) if recursive else scanner.scan_shallow(folder)
    rows = build_listing(result, scanner)
    log.info("Listed %d entries in %s", len(rows), format_elapsed(time.monotonic() - started))

    if result.degraded:
        log.warning("Could not crawl %s: %s", result.root, result.error)
    if result.skipped:
        log.warning("Skipped %d unreadable entries under %s", result.skipped, result.root)

    if as_json:
        data = {
            "root": result.root,
            "degraded": result.degraded,
            "error": result.error,
            "skipped": result.skipped,
            "entries": [
                {
                    "path": row.path,
                    "size_bytes": row.size_bytes,
                    "permissions": row.permissions,
                    "mode": row.mode,
                }
                for row in rows
            ],
        }
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(click.style("Size\tPermissions\tFilePath", bold=True))
    for row in rows:
        click.echo(f"{_format_size(row, human)}\t {row.mode}  \t {row.path}")

    if rows:
        measured = sum(row.size_bytes for row in rows if row.sized)
        click.echo(
            f"\nScanned {len(rows):,} files in total "
            f"({click.style(bytes_to_human(measured), fg='green', bold=True)})"
        )


# ── config ───────────────────────────────────────────────────────────────

@main.group()
def config() -> None:
    """Read and change stored defaults."""


@config.command("get")
@click.argument("key")
def config_get(key: str) -> None:
    """Print the stored value of KEY as JSON."""
    value = Settings.instance().get(key)
    if value is not None:
        click.echo(json.dumps(value))


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Store VALUE (parsed as JSON when possible) under KEY."""
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value
    Settings.instance().set(key, parsed)
