"""CLI command implementations"""

import logging
from enum import Enum
from typing import Annotated, Optional

import typer

from hunkdiff.config import Settings, load_config
from hunkdiff.core.pipeline import diff_stats, read_input, run_diff, run_extract
from hunkdiff.core.render import hunks_to_json, render_hunks
from hunkdiff.core.unified import list_diff_files


class ExtractSide(str, Enum):
    """Which reconstructed side(s) extract prints"""
    old = "old"
    new = "new"
    both = "both"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Line-level diffs and unified-diff reconstruction."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def diff_cmd(
    old: Annotated[str, typer.Argument(help="Old file ('-' for stdin)")],
    new: Annotated[str, typer.Argument(help="New file ('-' for stdin)")],
    context: Annotated[Optional[int], typer.Option("--context", "-c", help="Context lines around changes")] = None,
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Max lines per input; 0 = unlimited")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="text or json")] = None,
    ):
    """Diff two files line by line and print the hunks."""
    settings = _settings(overrides={"context_lines": context, "max_lines": max_lines, "output_format": fmt})
    try:
        hunks = run_diff(old, new, settings.context_lines, settings.max_lines)
    except (ValueError, OSError) as e:
        _fail("Diff failed", e)

    if settings.output_format == "json":
        typer.echo(hunks_to_json(hunks))
        return
    typer.echo(render_hunks(hunks))
    if hunks:
        stats = diff_stats(hunks)
        typer.echo(f"{len(hunks)} hunk(s), +{stats.additions} -{stats.deletions}")


def extract_cmd(
    diff: Annotated[str, typer.Argument(help="Unified diff file ('-' for stdin)")],
    path: Annotated[str, typer.Argument(help="File path as it appears in the diff headers")],
    side: Annotated[ExtractSide, typer.Option("--side", help="Side to print")] = ExtractSide.new,
    ):
    """Reconstruct one file's old and/or new content from a unified diff."""
    try:
        parsed = run_extract(diff, path)
    except OSError as e:
        _fail("Extract failed", e)

    if parsed.status == "missing":
        typer.echo(f"{path} not found in diff.", err=True)
        raise typer.Exit(1)

    if side == ExtractSide.both:
        typer.echo(parsed.model_dump_json(indent=2))
    elif side == ExtractSide.old:
        typer.echo(parsed.old_content)
    else:
        typer.echo(parsed.new_content)


def files_cmd(
    diff: Annotated[str, typer.Argument(help="Unified diff file ('-' for stdin)")],
    ):
    """List the files covered by a unified diff."""
    try:
        files = list_diff_files(read_input(diff))
    except OSError as e:
        _fail("Reading diff failed", e)
    if not files:
        typer.echo("No files found in diff.")
        raise typer.Exit(1)
    for f in files:
        typer.echo(f)
