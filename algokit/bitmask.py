"""Cheapest order for a set of jobs whose costs depend on those already done."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def min_total_cost(costs: Sequence[Sequence[int]]) -> int:
    """Return the least total cost of doing every job once.

    Doing job ``i`` costs ``costs[i][i]`` plus ``costs[i][j]`` for every job
    ``j`` already done. The matrix must be square.
    """
    matrix = [list(row) for row in costs]
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("cost matrix must be square")
    full = (1 << size) - 1

    @lru_cache(maxsize=None)
    def best(mask: int) -> int:
        if mask == full:
            return 0
        options = []
        for i, row in enumerate(matrix):
            if mask & (1 << i):
                continue
            price = row[i] + sum(
                row[j] for j in range(size) if j != i and mask & (1 << j)
            )
            options.append(price + best(mask | (1 << i)))
        return min(options)

    return best(0)