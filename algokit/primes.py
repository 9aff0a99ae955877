"""Primality tests, prime factorisation and prime-counting sieves."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt


def is_prime(n: int) -> bool:
    """Trial division by 2 and by odd numbers up to the square root."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % i for i in range(3, isqrt(n) + 1, 2))


def is_prime_6k(n: int) -> bool:
    """Trial division by 2, 3 and numbers of the form 6k +/- 1."""
    if n in (2, 3):
        return True
    if n <= 1 or n % 2 == 0 or n % 3 == 0:
        return False
    return all(n % i and n % (i + 2) for i in range(5, isqrt(n) + 1, 6))


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, repeated by multiplicity."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    i = 3
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 2
    if n > 2:
        factors.append(n)
    return factors


def smallest_prime_factors(n: int) -> list[int]:
    """Smallest prime factor of every number below ``n`` (index 1 holds 1)."""
    if n < 2:
        raise ValueError("n must be at least 2")
    spf = list(range(n))
    spf[4::2] = [2] * len(range(4, n, 2))
    for i in range(3, isqrt(n - 1) + 1):
        if spf[i] == i:
            for j in range(i * i, n, i):
                if spf[j] == j:
                    spf[j] = i
    return spf


def factorize(spf: Sequence[int], x: int) -> list[int]:
    """Prime factors of ``x`` using a table from :func:`smallest_prime_factors`."""
    if not 1 <= x < len(spf):
        raise ValueError(f"x must be between 1 and {len(spf) - 1}, got {x}")
    factors = []
    while x != 1:
        factors.append(spf[x])
        x //= spf[x]
    return factors


def count_primes(n: int) -> int:
    """Number of primes strictly below ``n``, by the sieve of Eratosthenes."""
    if n <= 2:
        return 0
    flags = bytearray([1]) * n
    flags[0] = flags[1] = 0
    flags[4::2] = bytes(len(range(4, n, 2)))
    for i in range(3, isqrt(n - 1) + 1, 2):
        if flags[i]:
            flags[i * i :: 2 * i] = bytes(len(range(i * i, n, 2 * i)))
    return sum(flags)


def count_primes_odd(n: int) -> int:
    """Number of primes below ``n``, sieving odd composites only."""
    if n < 3:
        return 0
    # Half the numbers are odd candidates; 1 (not prime) and 2 (prime) cancel.
    count = n // 2
    composite = bytearray(n)
    for i in range(3, isqrt(n - 1) + 1, 2):
        if composite[i]:
            continue
        for j in range(i * i, n, 2 * i):
            if not composite[j]:
                count -= 1
                composite[j] = 1
    return count


def count_primes_linear(n: int) -> int:
    """Number of primes below ``n``, by a linear sieve marking each composite once."""
    if n <= 2:
        return 0
    composite = bytearray(n)
    spf = [0] * n
    primes: list[int] = []
    for i in range(2, n):
        if not composite[i]:
            primes.append(i)
            spf[i] = i
        for p in primes:
            if p > spf[i] or i * p >= n:
                break
            composite[i * p] = 1
            spf[i * p] = p
    return len(primes)