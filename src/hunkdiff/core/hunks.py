"""Group a change list into review-sized hunks with surrounding context"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from hunkdiff.core.models import DiffHunk, DiffLine


logger = logging.getLogger(__name__)


@dataclass
class _OpenHunk:
    """Mutable hunk under construction; frozen into a DiffHunk when closed."""
    start_line:     int
    new_start_line: int
    end_line:       int = 0
    new_end_line:   int = 0
    lines:          list[DiffLine] = field(default_factory=list)

    def add(self, line: DiffLine) -> None:
        """Append a line; end bounds move only for the numbers the line carries."""
        self.lines.append(line)
        if line.old_line_number is not None:
            self.end_line = line.old_line_number
        if line.new_line_number is not None:
            self.new_end_line = line.new_line_number

    def freeze(self) -> DiffHunk:
        return DiffHunk(
            start_line=self.start_line,
            end_line=self.end_line,
            new_start_line=self.new_start_line,
            new_end_line=self.new_end_line,
            lines=tuple(self.lines),
        )


def _first_number(changes: Sequence[DiffLine], start: int, attr: str) -> Optional[int]:
    """Return the first non-None line number for attr at or after start."""
    for change in changes[start:]:
        value = getattr(change, attr)
        if value is not None:
            return value
    return None


def _open_hunk(changes: Sequence[DiffLine], start: int) -> _OpenHunk:
    old_start = _first_number(changes, start, "old_line_number")
    new_start = _first_number(changes, start, "new_line_number")
    return _OpenHunk(
        start_line=old_start if old_start is not None else start + 1,
        new_start_line=new_start if new_start is not None else start + 1,
    )


def group_hunks(changes: Sequence[DiffLine], context_lines: int = 3) -> list[DiffHunk]:
    """Split an ordered change list into hunks.

    Changes whose index gap is at most 2 * context_lines share a hunk, with
    the unchanged lines between them included. Further apart, a new hunk is
    started; the gap between hunks is not materialized. Identical inputs
    (no added/removed entries) give no hunks.
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must be >= 0, got {context_lines}")

    hunks: list[DiffHunk] = []
    current: Optional[_OpenHunk] = None
    last_change = -1
    last_added = -1

    for index, change in enumerate(changes):
        if change.is_change:
            if current is None or index - last_change > context_lines * 2:
                if current is not None:
                    hunks.append(current.freeze())
                start = max(0, index - context_lines)
                current = _open_hunk(changes, start)
                for before in changes[start:index]:
                    if not before.is_change:
                        current.add(before)
            else:
                # Fold into the open hunk: fill in the connecting unchanged lines.
                for between in changes[last_added + 1:index]:
                    current.add(between)
            last_change = index

        if current is not None and index <= last_change + context_lines:
            current.add(change)
            last_added = index

    if current is not None:
        hunks.append(current.freeze())

    logger.debug("Grouped %d change records into %d hunk(s)", len(changes), len(hunks))
    return hunks
