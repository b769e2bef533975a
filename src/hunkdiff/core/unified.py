"""Reconstruct old/new file content from a unified (git) diff document"""

import logging
import re
from typing import Optional

from hunkdiff.core.models import ParsedDiff


logger = logging.getLogger(__name__)

DEV_NULL = "/dev/null"
FILE_HEADER = "diff --git"
HUNK_HEADER_RE = re.compile(r'^@@ -(\d+)(?:,\d+)? \+(\d+)(?:,\d+)? @@')


def _split(diff_text: str) -> list[str]:
    """Split on LF only; content lines keep any trailing CR."""
    return diff_text.split("\n")


def _find_section(lines: list[str], file_path: str) -> Optional[list[str]]:
    """Return the lines from this file's `diff --git` header up to the next one."""
    header = f"{FILE_HEADER} a/{file_path} b/{file_path}"
    start = next((i for i, line in enumerate(lines) if line.rstrip("\r") == header), None)
    if start is None:
        return None
    end = next(
        (i for i in range(start + 1, len(lines)) if lines[i].startswith(FILE_HEADER)),
        len(lines),
    )
    return lines[start:end]


def _file_name(header_line: str) -> str:
    """Name from a ---/+++ line: '' for /dev/null, a/ or b/ prefix dropped."""
    name = header_line[4:].rstrip("\r")
    if name == DEV_NULL:
        return ""
    if name.startswith(("a/", "b/")):
        return name[2:]
    return name


def _split_header(section: list[str], file_path: str) -> tuple[str, str, list[str]]:
    """Return (old_name, new_name, body) where body starts at the first @@ line."""
    old_name = new_name = file_path
    for index, line in enumerate(section):
        if line.startswith("@@"):
            return old_name, new_name, section[index:]
        if line.startswith("--- "):
            old_name = _file_name(line)
        elif line.startswith("+++ "):
            new_name = _file_name(line)
    return old_name, new_name, []


def _collect(body: list[str], marker: str) -> str:
    """Join body lines carrying a single +/- marker, marker stripped."""
    header = marker * 3
    return "\n".join(
        line[1:] for line in body
        if line.startswith(marker) and not line.startswith(header)
    )


def _pad(lines: list[str], length: int) -> None:
    # Lines outside hunk coverage are unknown; blank placeholders keep numbering.
    lines.extend([""] * (length - len(lines)))


def _replay(body: list[str]) -> tuple[str, str]:
    """Replay modified-file hunks in order into full old/new text."""
    old_lines: list[str] = []
    new_lines: list[str] = []
    old_cursor = new_cursor = 0

    for line in body:
        if line.startswith("@@"):
            match = HUNK_HEADER_RE.match(line)
            if match:
                old_cursor = int(match.group(1)) - 1
                new_cursor = int(match.group(2)) - 1
                _pad(old_lines, old_cursor)
                _pad(new_lines, new_cursor)
            else:
                logger.debug("Skipping malformed hunk header: %r", line)
            continue

        if line.startswith("-") and not line.startswith("---"):
            old_lines.append(line[1:])
            old_cursor += 1
        elif line.startswith("+") and not line.startswith("+++"):
            new_lines.append(line[1:])
            new_cursor += 1
        elif line.startswith(" "):
            old_lines.append(line[1:])
            new_lines.append(line[1:])
            old_cursor += 1
            new_cursor += 1

    return "\n".join(old_lines), "\n".join(new_lines)


def parse_git_diff(diff_text: str, file_path: str) -> ParsedDiff:
    """Rebuild the before/after content of file_path from a unified diff.

    A path not present in the diff gives an empty ParsedDiff rather than an
    error. Created and deleted files are recognised by a /dev/null header.
    For modified files, lines between hunks are not in the diff and come back
    as blank lines.
    """
    section = _find_section(_split(diff_text), file_path)
    if section is None:
        logger.debug("No diff section for %s", file_path)
        return ParsedDiff()

    old_name, new_name, body = _split_header(section, file_path)

    if not old_name:
        return ParsedDiff(new_content=_collect(body, "+"), old_file_name=old_name, new_file_name=new_name)
    if not new_name:
        return ParsedDiff(old_content=_collect(body, "-"), old_file_name=old_name, new_file_name=new_name)

    old_content, new_content = _replay(body)
    return ParsedDiff(
        old_content=old_content,
        new_content=new_content,
        old_file_name=old_name,
        new_file_name=new_name,
    )


def list_diff_files(diff_text: str) -> list[str]:
    """Return the new-side path of every file section, in document order."""
    prefix = f"{FILE_HEADER} a/"
    files = []
    for line in _split(diff_text):
        if line.startswith(prefix):
            _, sep, path = line.rstrip("\r").rpartition(" b/")
            if sep:
                files.append(path)
    return files
