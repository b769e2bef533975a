"""Backtrack an LCS table into an ordered list of per-line changes"""

from typing import Sequence

from hunkdiff.core.lcs import build_lcs_table
from hunkdiff.core.models import DiffLine, LineKind


def compute_changes(old_lines: Sequence[str], new_lines: Sequence[str]) -> list[DiffLine]:
    """Return unchanged/added/removed records in top-to-bottom order.

    On a tie between skipping an old line and skipping a new line, the new line
    is emitted as added first. Since backtracking runs bottom-up, that puts the
    removal above the addition in the final list.
    """
    table = build_lcs_table(old_lines, new_lines)
    changes: list[DiffLine] = []
    i, j = len(old_lines), len(new_lines)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and old_lines[i - 1] == new_lines[j - 1]:
            changes.append(DiffLine(
                kind=LineKind.unchanged,
                content=old_lines[i - 1],
                old_line_number=i,
                new_line_number=j,
            ))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            changes.append(DiffLine(kind=LineKind.added, content=new_lines[j - 1], new_line_number=j))
            j -= 1
        else:
            changes.append(DiffLine(kind=LineKind.removed, content=old_lines[i - 1], old_line_number=i))
            i -= 1

    changes.reverse()
    return changes
