"""Diff data models shared by the live-diff and unified-diff paths"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LineKind(str, Enum):
    """Restrict diff lines to the three kinds a line-level diff can produce"""
    unchanged = "unchanged"
    added = "added"
    removed = "removed"


class DiffLine(BaseModel):
    """A single line of a diff, without its +/-/space marker."""
    model_config = ConfigDict(frozen=True)

    kind: LineKind
    content: str
    old_line_number: Optional[int] = None   # set for unchanged/removed
    new_line_number: Optional[int] = None   # set for unchanged/added

    @property
    def is_change(self) -> bool:
        return self.kind != LineKind.unchanged


class DiffHunk(BaseModel):
    """A run of changes plus surrounding context; line numbers are 1-based."""
    model_config = ConfigDict(frozen=True)

    start_line: int
    end_line: int
    new_start_line: int
    new_end_line: int
    lines: tuple[DiffLine, ...] = ()


class ParsedDiff(BaseModel):
    """Old/new file content reconstructed from one file section of a unified diff.

    An empty old_file_name means the file was created, an empty new_file_name
    means it was deleted. Both are None when the file is not in the diff.
    """
    model_config = ConfigDict(frozen=True)

    old_content: str = ""
    new_content: str = ""
    old_file_name: Optional[str] = None
    new_file_name: Optional[str] = None

    @property
    def status(self) -> str:
        if self.old_file_name is None and self.new_file_name is None:
            return "missing"
        if not self.old_file_name:
            return "created"
        if not self.new_file_name:
            return "deleted"
        return "modified"


class DiffStats(BaseModel):
    """Line counts over a set of hunks (context lines count as unchanged)."""
    model_config = ConfigDict(frozen=True)

    additions: int = 0
    deletions: int = 0
    unchanged: int = 0
