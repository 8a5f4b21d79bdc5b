"""Counting pattern occurrences with a string-matching automaton."""

from __future__ import annotations


def build_dfa(pattern: str) -> list[dict[str, int]]:
    """Build the matching automaton for ``pattern``.

    Row ``s`` maps a character to the next state from state ``s``; a
    character that is missing from a row leads back to state 0. State
    ``len(pattern)`` means a full match has just been read.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    table: list[dict[str, int]] = [{pattern[0]: 1}]
    fallback = 0
    for state in range(1, len(pattern) + 1):
        row = dict(table[fallback])
        if state < len(pattern):
            char = pattern[state]
            row[char] = state + 1
            fallback = table[fallback].get(char, 0)
        table.append(row)
    return table


def count_occurrences(text: str, pattern: str) -> int:
    """Return how many times ``pattern`` occurs in ``text``, overlaps included."""
    table = build_dfa(pattern)
    accept = len(pattern)
    state = 0
    count = 0
    for char in text:
        state = table[state].get(char, 0)
        if state == accept:
            count += 1
    return count