"""Pipeline step functions: live diff, stats, and file-backed diff/extract"""

import logging
import sys
from pathlib import Path

from hunkdiff.core.changes import compute_changes
from hunkdiff.core.hunks import group_hunks
from hunkdiff.core.models import DiffHunk, DiffStats, LineKind, ParsedDiff
from hunkdiff.core.unified import parse_git_diff


logger = logging.getLogger(__name__)

STDIN = "-"


def split_lines(text: str) -> list[str]:
    """Split text on newlines; an empty string has no lines."""
    return text.split("\n") if text else []


def compute_line_diff(old_text: str, new_text: str, context_lines: int = 3) -> list[DiffHunk]:
    """Diff two texts line by line and group the result into hunks."""
    changes = compute_changes(split_lines(old_text), split_lines(new_text))
    return group_hunks(changes, context_lines)


def diff_stats(hunks: list[DiffHunk]) -> DiffStats:
    """Count added/removed/unchanged lines across hunks."""
    additions = deletions = unchanged = 0
    for hunk in hunks:
        for line in hunk.lines:
            if line.kind == LineKind.added:
                additions += 1
            elif line.kind == LineKind.removed:
                deletions += 1
            else:
                unchanged += 1
    return DiffStats(additions=additions, deletions=deletions, unchanged=unchanged)


def read_input(path: str) -> str:
    """Read a UTF-8 text file, or stdin for '-'."""
    if path == STDIN:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _check_size(text: str, label: str, max_lines: int) -> None:
    """Raise ValueError when text exceeds max_lines (0 disables the check)."""
    count = len(split_lines(text))
    if max_lines and count > max_lines:
        raise ValueError(f"{label} has {count} lines, over the limit of {max_lines}")


def run_diff(
    old_path: str,
    new_path: str,
    context_lines: int = 3,
    max_lines: int = 0,
    ) -> list[DiffHunk]:
    """Read two files and return their hunks. Inputs over max_lines raise ValueError."""
    if old_path == STDIN and new_path == STDIN:
        raise ValueError("Only one side can be read from stdin")
    old_text, new_text = read_input(old_path), read_input(new_path)
    _check_size(old_text, old_path, max_lines)
    _check_size(new_text, new_path, max_lines)
    logger.debug("Diffing %s against %s (context=%d)", old_path, new_path, context_lines)
    return compute_line_diff(old_text, new_text, context_lines)


def run_extract(diff_path: str, file_path: str) -> ParsedDiff:
    """Read a unified diff document and reconstruct one file from it."""
    return parse_git_diff(read_input(diff_path), file_path)
