from math import factorial

import pytest

from algokit.factorials import factorial_decomposition, format_decomposition

LIMIT = sum(factorial(k) for k in range(21))


@pytest.mark.parametrize("value", [4, 10, 154, 40321, LIMIT])
def test_terms_are_distinct_and_ascending(value):
    terms = factorial_decomposition(value)
    assert terms == sorted(set(terms))


def test_value_beyond_all_factorials_is_impossible():
    assert factorial_decomposition(LIMIT + 1) is None


def test_single_factorial_is_itself():
    assert factorial_decomposition(factorial(20)) == [20]


def test_format_for_possible_value():
    assert format_decomposition(2, 3) == "Case 2: 1!+2!"


def test_format_for_impossible_value():
    assert format_decomposition(1, LIMIT + 1) == "Case 1: impossible"


def test_non_positive_value_is_rejected():
    with pytest.raises(ValueError):
        factorial_decomposition(0)