"""Unit tests for core/changes.py"""

from hunkdiff.core.changes import compute_changes
from hunkdiff.core.models import LineKind


def _shape(changes):
    return [(c.kind, c.content, c.old_line_number, c.new_line_number) for c in changes]


def test_identical_inputs_all_unchanged():
    """Identical sequences produce only unchanged records with paired numbers."""
    changes = compute_changes(["a", "b"], ["a", "b"])
    assert _shape(changes) == [
        (LineKind.unchanged, "a", 1, 1),
        (LineKind.unchanged, "b", 2, 2),
    ]


def test_replacement_orders_removed_before_added():
    """A replaced line shows as removed then added, in top-to-bottom order."""
    changes = compute_changes(["a", "b", "c"], ["a", "x", "c"])
    assert _shape(changes) == [
        (LineKind.unchanged, "a", 1, 1),
        (LineKind.removed, "b", 2, None),
        (LineKind.added, "x", None, 2),
        (LineKind.unchanged, "c", 3, 3),
    ]


def test_swap_tie_break_prefers_added():
    """On equal LCS lengths, backtracking takes the added branch first."""
    changes = compute_changes(["a", "b"], ["b", "a"])
    assert _shape(changes) == [
        (LineKind.removed, "a", 1, None),
        (LineKind.unchanged, "b", 2, 1),
        (LineKind.added, "a", None, 2),
    ]


def test_swap_is_deterministic():
    """Repeated runs give the same sequence."""
    assert compute_changes(["a", "b"], ["b", "a"]) == compute_changes(["a", "b"], ["b", "a"])


def test_single_line_replacement():
    """Completely different single lines: removed, then added."""
    changes = compute_changes(["a"], ["b"])
    assert [c.kind for c in changes] == [LineKind.removed, LineKind.added]


def test_empty_old_side_all_added():
    """Nothing on the old side: every new line is added, numbered from 1."""
    changes = compute_changes([], ["x", "y"])
    assert _shape(changes) == [
        (LineKind.added, "x", None, 1),
        (LineKind.added, "y", None, 2),
    ]


def test_empty_new_side_all_removed():
    """Nothing on the new side: every old line is removed."""
    changes = compute_changes(["x", "y"], [])
    assert [c.kind for c in changes] == [LineKind.removed, LineKind.removed]
    assert [c.old_line_number for c in changes] == [1, 2]


def test_sides_reproduce_inputs():
    """unchanged+removed rebuild the old lines; unchanged+added rebuild the new ones."""
    old = ["def f():", "    return 1", "", "print(f())"]
    new = ["def f():", "    # one", "    return 1", "print(f())", "done"]
    changes = compute_changes(old, new)
    assert [c.content for c in changes if c.kind != LineKind.added] == old
    assert [c.content for c in changes if c.kind != LineKind.removed] == new
