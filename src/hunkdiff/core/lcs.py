"""Longest-common-subsequence table over two line sequences"""

import logging
from typing import Sequence


logger = logging.getLogger(__name__)


def build_lcs_table(old_lines: Sequence[str], new_lines: Sequence[str]) -> list[list[int]]:
    """Return the (m+1) x (n+1) table where table[i][j] is the LCS length of
    old_lines[:i] and new_lines[:j].

    Lines compare by exact string equality. Time and memory are O(m*n); callers
    bound input size before getting here.
    """
    m, n = len(old_lines), len(new_lines)
    logger.debug("Building %dx%d LCS table", m + 1, n + 1)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        old = old_lines[i - 1]
        row, prev = table[i], table[i - 1]
        for j in range(1, n + 1):
            if old == new_lines[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    return table
