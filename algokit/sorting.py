"""Simple comparison sorts that return a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of ``values`` in ascending order using bubble sort."""
    items = list(values)
    count = len(items)
    for _ in range(count):
        for j in range(count - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of ``values`` in ascending order using selection sort."""
    items = list(values)
    for i in range(len(items)):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items