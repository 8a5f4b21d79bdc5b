"""Small solutions to short programming-contest problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def triangle_wave(amplitude: int, frequency: int) -> str:
    """Render ``frequency`` waves of the given amplitude, blank line between waves."""
    rising = [str(level) * level for level in range(1, amplitude + 1)]
    wave = rising + rising[-2::-1] if rising else []
    text = "".join(line + "\n" for line in wave)
    return "\n".join(text for _ in range(frequency))


def split_binary_string(text: str) -> list[str]:
    """Split a 0/1 string into the fewest parts with unequal counts of 0 and 1."""
    if not text:
        raise ValueError("text must not be empty")
    zeros = text.count("0")
    if zeros != len(text) - zeros:
        return [text]
    return [text[0], text[1:]]


def max_repeated_point(points: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of times any one point occurs, at least 1."""
    counts = Counter((x, y) for x, y in points)
    return max(1, max(counts.values(), default=1))


def modulo_power_of_two(exponent: int, value: int) -> int:
    """Return ``value`` modulo ``2 ** exponent``."""
    if exponent < 0 or value < 0:
        raise ValueError("exponent and value must be non-negative")
    if exponent >= value.bit_length():
        return value
    return value % (1 << exponent)


def first_player_wins(first_cards: Iterable[int], second_cards: Iterable[int]) -> bool:
    """Return True when the first player's highest card beats the second's."""
    return max(first_cards, default=-1) > max(second_cards, default=-1)


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


def max_digit_sum(value: int | str) -> int:
    """Return the largest digit-sum total of ``a`` and ``value - a`` for 0 <= a <= value."""
    number = int(value)
    if number < 0:
        raise ValueError("value must be non-negative")
    nines_count = len(str(number)) - 1
    nines = int("9" * nines_count) if nines_count else 0
    return _digit_sum(number - nines) + 9 * nines_count