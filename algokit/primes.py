"""Prime number tests, sieves and prime listings over intervals."""

from math import isqrt

__all__ = [
    "is_prime",
    "sieve",
    "count_primes",
    "primes_in_range",
    "primes_between",
    "primes_below",
]


def is_prime(n: int) -> bool:
    """Return True when ``n`` has exactly two positive divisors."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def sieve(limit: int) -> list[int]:
    """Return every prime less than or equal to ``limit`` (Sieve of Eratosthenes)."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    for p in range(2, isqrt(limit) + 1):
        if not composite[p]:
            multiples = range(p * p, limit + 1, p)
            composite[p * p :: p] = b"\x01" * len(multiples)
    return [n for n in range(2, limit + 1) if not composite[n]]


def count_primes(limit: int) -> int:
    """Return how many primes are less than or equal to ``limit``."""
    return len(sieve(limit))


def primes_in_range(start: int, end: int) -> list[int]:
    """Return the primes in the closed interval ``[start, end]``."""
    return [p for p in sieve(end) if p >= start]


def primes_between(low: int, high: int) -> list[int]:
    """Return the primes strictly between ``low`` and ``high``."""
    return [p for p in sieve(high - 1) if p > low]


def primes_below(n: int) -> list[int]:
    """Return the primes strictly less than ``n``."""
    return sieve(n - 1)