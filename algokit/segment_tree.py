"""Recursive construction of a sum segment tree."""

from __future__ import annotations

from collections.abc import Iterable


def build_sum_tree(values: Iterable[int]) -> list[int]:
    """Build a sum segment tree over ``values``.

    The result is an array with the root at index 1 and the children of
    node ``i`` at ``2 * i`` and ``2 * i + 1``; unused slots hold 0.
    Raises ValueError for an empty input.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot build a segment tree over no values")
    tree = [0] * (4 * len(items))

    def init(node: int, begin: int, end: int) -> int:
        if begin == end:
            tree[node] = items[begin]
        else:
            mid = (begin + end) // 2
            tree[node] = init(2 * node, begin, mid) + init(2 * node + 1, mid + 1, end)
        return tree[node]

    init(1, 0, len(items) - 1)
    return tree