"""Integer arithmetic: factorials, series, combinatorics and calendar helpers."""

import datetime
import math

__all__ = [
    "MOD",
    "NOTES",
    "WEEKDAYS",
    "gcd",
    "factorial",
    "factorial_digits",
    "fibonacci",
    "sum_first_n",
    "sum_first_n_even",
    "power",
    "factors",
    "russian_peasant_multiply",
    "binomial_mod",
    "stirling_second_kind",
    "power_sum_mod",
    "count_notes",
    "is_leap_year",
    "new_year_weekday",
]

MOD = 1_000_000_007
NOTES = (2000, 500, 200, 100, 50, 20, 10, 5, 2, 1)
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def factorial(n: int) -> int:
    """Return ``n!``; negative numbers have no factorial."""
    if n < 0:
        raise ValueError("factorial of a negative number is not defined")
    return math.prod(range(2, n + 1))


def factorial_digits(n: int) -> str:
    """Return the full decimal expansion of ``n!``."""
    return str(factorial(n))


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting at 0 and 1."""
    terms = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def sum_first_n(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    return sum(range(1, n + 1))


def sum_first_n_even(n: int) -> int:
    """Return the sum of the first ``n`` even numbers, 0 + 2 + ... + 2(n-1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return sum(range(0, 2 * n, 2))


def power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def factors(n: int) -> list[int]:
    """Return the positive divisors of ``n`` in ascending order."""
    return [d for d in range(1, n + 1) if n % d == 0]


def russian_peasant_multiply(a: int, b: int) -> int:
    """Multiply by halving ``a`` and doubling ``b``."""
    sign = -1 if (a < 0) != (b < 0) else 1
    a, b = abs(a), abs(b)
    total = 0
    while a > 0:
        if a & 1:
            total += b
        a >>= 1
        b <<= 1
    return sign * total


def binomial_mod(n: int, r: int, modulus: int = MOD) -> int:
    """Return ``n choose r`` reduced modulo ``modulus``."""
    if n < 0 or not 0 <= r <= n:
        raise ValueError("need 0 <= r <= n")
    smaller = min(r, n - r)
    larger = n - smaller
    result = 1
    for j in range(1, smaller + 1):
        result = result * (larger + j) // j
    return result % modulus


def stirling_second_kind(k: int) -> list[int]:
    """Return the row S(k, 0), ..., S(k, k) of Stirling numbers of the second kind."""
    if k < 0:
        raise ValueError("k must be non-negative")
    row = [1]
    for _ in range(k):
        padded = row + [0]
        row = [0] + [padded[j - 1] + j * padded[j] for j in range(1, len(padded))]
    return row


def power_sum_mod(x: int, k: int) -> int:
    """Return 1**k + 2**k + ... + x**k modulo ``MOD`` using Stirling numbers."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if x < 0:
        raise ValueError("x must be non-negative")
    row = stirling_second_kind(k)
    total = 0
    for i in range(1, k + 1):
        falling = math.prod(range(x - i + 1, x + 2))
        total = (total + (falling // (i + 1)) % MOD * (row[i] % MOD)) % MOD
    return total


def count_notes(amount: int) -> dict[int, int]:
    """Split ``amount`` into the fewest notes, largest denomination first."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    counts = {}
    for note in NOTES:
        counts[note], amount = divmod(amount, note)
    return counts


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def new_year_weekday(year: int) -> str:
    """Return the English weekday name of 1 January of ``year``."""
    return WEEKDAYS[datetime.date(year, 1, 1).weekday()]