"""Bottom-up construction of binary max- and min-heaps."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable


def _sift_down(heap: list[int], root: int, before: Callable[[int, int], bool]) -> None:
    size = len(heap)
    while True:
        best = root
        left = 2 * root + 1
        right = left + 1
        if left < size and before(heap[left], heap[best]):
            best = left
        if right < size and before(heap[right], heap[best]):
            best = right
        if best == root:
            return
        heap[root], heap[best] = heap[best], heap[root]
        root = best


def _build(values: Iterable[int], before: Callable[[int, int], bool]) -> list[int]:
    heap = list(values)
    for root in reversed(range(len(heap) // 2)):
        _sift_down(heap, root, before)
    return heap


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a max-heap in array order."""
    return _build(values, operator.gt)


def build_min_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a min-heap in array order."""
    return _build(values, operator.lt)


def format_heaps(values: Iterable[int]) -> str:
    """Render the max-heap and min-heap of the values, one item per line."""
    items = list(values)
    lines = ["max heap: "]
    lines.extend(str(v) for v in build_max_heap(items))
    lines.append("min heap: ")
    lines.extend(str(v) for v in build_min_heap(items))
    return "\n".join(lines) + "\n"