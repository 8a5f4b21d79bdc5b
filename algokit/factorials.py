"""Writing a number as a sum of distinct factorials."""

from __future__ import annotations

from math import factorial

_LARGEST = 20
_FACTORIALS = [factorial(k) for k in range(_LARGEST + 1)]


def factorial_decomposition(value: int) -> list[int] | None:
    """Return ``k`` values whose factorials sum to ``value``, smallest first.

    Factorials from 20! down to 0! are taken greedily, each at most once.
    Returns None when no such sum reaches ``value`` exactly.
    """
    if value < 1:
        raise ValueError("value must be a positive integer")
    remaining = value
    used: list[int] = []
    for k in range(_LARGEST, -1, -1):
        if _FACTORIALS[k] <= remaining:
            remaining -= _FACTORIALS[k]
            used.append(k)
    if remaining:
        return None
    used.reverse()
    return used


def format_decomposition(case_number: int, value: int) -> str:
    """Render the decomposition of ``value`` as a numbered case line."""
    terms = factorial_decomposition(value)
    if terms is None:
        return f"Case {case_number}: impossible"
    return f"Case {case_number}: " + "+".join(f"{k}!" for k in terms)