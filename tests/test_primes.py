import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.primes import (
    count_primes,
    count_primes_linear,
    count_primes_odd,
    factorize,
    is_prime,
    is_prime_6k,
    prime_factors,
    smallest_prime_factors,
)


@given(st.integers(min_value=-50, max_value=20000))
def test_primality_tests_agree(n):
    assert is_prime(n) == is_prime_6k(n)


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 25, 49, 91])
def test_non_primes_rejected(n):
    assert not is_prime(n)
    assert not is_prime_6k(n)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 97, 7919])
def test_known_primes(n):
    assert is_prime(n)
    assert is_prime_6k(n)


@given(st.integers(min_value=1, max_value=100000))
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(f) for f in factors)


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == []


def test_prime_factors_worked_example():
    assert prime_factors(315) == [3, 3, 5, 7]


@pytest.mark.parametrize("n", [0, -12])
def test_prime_factors_rejects_non_positive(n):
    with pytest.raises(ValueError):
        prime_factors(n)


def test_smallest_prime_factors_table():
    spf = smallest_prime_factors(500)
    assert len(spf) == 500
    for x in range(2, 500):
        assert is_prime(spf[x])
        assert x % spf[x] == 0
        assert spf[x] == prime_factors(x)[0]


@given(st.integers(min_value=1, max_value=4999))
def test_factorize_matches_trial_division(x):
    spf = smallest_prime_factors(5000)
    assert factorize(spf, x) == prime_factors(x)


def test_factorize_rejects_out_of_range():
    spf = smallest_prime_factors(10)
    with pytest.raises(ValueError):
        factorize(spf, 0)
    with pytest.raises(ValueError):
        factorize(spf, 10)


def test_smallest_prime_factors_rejects_small_n():
    with pytest.raises(ValueError):
        smallest_prime_factors(1)


def test_count_primes_example():
    assert count_primes(10) == 4


@pytest.mark.parametrize("n", [-3, 0, 1, 2])
def test_count_primes_small_inputs(n):
    assert count_primes(n) == 0
    assert count_primes_odd(n) == 0
    assert count_primes_linear(n) == 0


@settings(max_examples=60)
@given(st.integers(min_value=0, max_value=3000))
def test_sieves_agree_with_primality(n):
    expected = sum(1 for i in range(n) if is_prime(i))
    assert count_primes(n) == expected
    assert count_primes_odd(n) == expected
    assert count_primes_linear(n) == expected