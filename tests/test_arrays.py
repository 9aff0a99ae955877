from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    count_subarrays_with_sum,
    is_array_special,
    longest_equal_subarray,
    longest_subarray_within_limit,
    majority_element,
    maximum_beauty,
    monotonic_stack,
)

_small = st.lists(st.integers(-5, 5), max_size=10)


def _subarrays(values):
    for i in range(len(values)):
        for j in range(i + 1, len(values) + 1):
            yield values[i:j]


def test_worked_examples():
    assert longest_subarray_within_limit([10, 1, 2, 4, 7, 2], 5) == 4
    assert count_subarrays_with_sum([1, 1, 1], 2) == 2
    assert maximum_beauty([4, 6, 1, 2], 2) == 3


@given(st.integers(-3, 3), st.lists(st.integers(-3, 3), max_size=6), st.randoms())
def test_majority_found(major, others, rnd):
    values = others + [major] * (len(others) + 1)
    rnd.shuffle(values)
    assert majority_element(values) == major


def test_majority_of_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


@given(_small, st.integers(0, 6))
def test_longest_subarray_matches_brute_force(values, limit):
    expected = max(
        (len(s) for s in _subarrays(values) if max(s) - min(s) <= limit), default=0
    )
    assert longest_subarray_within_limit(values, limit) == expected


def test_longest_subarray_negative_limit():
    with pytest.raises(ValueError):
        longest_subarray_within_limit([1, 2], -1)


@given(_small)
def test_monotonic_stack_increasing(values):
    stack = monotonic_stack(values)
    assert stack == sorted(stack)
    if values:
        assert stack[-1] == values[-1]
        assert stack[0] == min(values)


@given(_small)
def test_monotonic_stack_decreasing(values):
    stack = monotonic_stack(values, decreasing=True)
    assert stack == sorted(stack, reverse=True)
    if values:
        assert stack[-1] == values[-1]
        assert stack[0] == max(values)


@given(_small, st.integers(-8, 8))
def test_count_subarrays_matches_brute_force(values, k):
    expected = sum(1 for s in _subarrays(values) if sum(s) == k)
    assert count_subarrays_with_sum(values, k) == expected


@st.composite
def _special_case(draw):
    values = draw(st.lists(st.integers(0, 20), min_size=1, max_size=10))
    n = len(values)
    queries = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)).map(sorted),
            max_size=5,
        )
    )
    return values, queries


@given(_special_case())
def test_is_array_special_matches_definition(case):
    values, queries = case
    expected = [
        all((values[i] - values[i + 1]) % 2 for i in range(left, right))
        for left, right in queries
    ]
    assert is_array_special(values, queries) == expected


def test_is_array_special_bad_query():
    with pytest.raises(IndexError):
        is_array_special([1, 2], [(1, 2)])


@given(st.lists(st.integers(0, 15), max_size=10), st.integers(0, 5))
def test_maximum_beauty_matches_brute_force(values, k):
    top = max(values, default=0)
    expected = max(
        (sum(1 for v in values if abs(v - t) <= k) for t in range(top + 1)), default=0
    )
    assert maximum_beauty(values, k) == expected


def test_maximum_beauty_rejects_negative():
    with pytest.raises(ValueError):
        maximum_beauty([1, -1], 2)
    with pytest.raises(ValueError):
        maximum_beauty([1, 2], -1)


@given(st.lists(st.integers(0, 3), max_size=9), st.integers(0, 4))
def test_longest_equal_subarray_matches_brute_force(values, k):
    expected = 0
    for window in _subarrays(values):
        value, count = Counter(window).most_common(1)[0]
        if len(window) - count <= k:
            expected = max(expected, count)
    assert longest_equal_subarray(values, k) == expected