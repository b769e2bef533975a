"""Render hunks as plain text or JSON for terminal and machine consumers"""

import json

from hunkdiff.core.models import DiffHunk, DiffLine, LineKind


NO_CHANGES = "No changes detected"
GAP_MARKER = "..."

PREFIX: dict[LineKind, str] = {
    LineKind.added:     "+",
    LineKind.removed:   "-",
    LineKind.unchanged: " ",
}


def _gutter(number: int | None, width: int) -> str:
    return str(number).rjust(width) if number is not None else " " * width


def render_line(line: DiffLine, width: int = 4) -> str:
    """Format one line as '<old> <new> <marker><content>'."""
    return (
        f"{_gutter(line.old_line_number, width)} "
        f"{_gutter(line.new_line_number, width)} "
        f"{PREFIX[line.kind]}{line.content}"
    )


def render_hunks(hunks: list[DiffHunk]) -> str:
    """Render hunks one line per entry, with '...' marking the gap between hunks."""
    if not hunks:
        return NO_CHANGES
    width = max(len(str(max(h.end_line, h.new_end_line))) for h in hunks)
    out = []
    for index, hunk in enumerate(hunks):
        if index > 0:
            out.append(GAP_MARKER)
        out.extend(render_line(line, width) for line in hunk.lines)
    return "\n".join(out)


def hunks_to_json(hunks: list[DiffHunk]) -> str:
    """Serialize hunks to a JSON array."""
    return json.dumps([h.model_dump(mode="json") for h in hunks], indent=2, ensure_ascii=False)
