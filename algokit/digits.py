"""Digit manipulation: sums, reversal, Armstrong and magic numbers, bases."""

import string

__all__ = [
    "digit_sum",
    "reverse_number",
    "is_armstrong",
    "is_magic_number",
    "to_binary",
    "convert_base",
]

_ALPHABET = string.digits + string.ascii_uppercase


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("digit_sum needs a non-negative integer")
    return sum(int(c) for c in str(n))


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_armstrong(n: int, power: int | None = None) -> bool:
    """Return True when ``n`` equals the sum of its digits raised to ``power``.

    Without ``power`` the number of digits is used.
    """
    if n < 0:
        return False
    digits = [int(c) for c in str(n)]
    exponent = len(digits) if power is None else power
    return sum(d**exponent for d in digits) == n


def is_magic_number(n: int) -> bool:
    """Return True when the digit sum times its reverse equals ``n``."""
    if n < 0:
        return False
    total = digit_sum(n)
    if total < 10:
        return total * total == n
    return total * reverse_number(total) == n


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("to_binary needs a non-negative integer")
    if n == 0:
        return "0"
    bits = []
    while n:
        n, bit = divmod(n, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def convert_base(number: int | str, from_base: int, to_base: int) -> str:
    """Read ``number`` as digits in ``from_base`` and write it in ``to_base``."""
    for base in (from_base, to_base):
        if not 2 <= base <= 36:
            raise ValueError(f"base {base} is outside 2..36")
    text = str(number).strip().upper()
    if not text:
        raise ValueError("no digits to convert")
    value = 0
    for ch in text:
        digit = _ALPHABET.find(ch)
        if digit < 0 or digit >= from_base:
            raise ValueError(f"{ch!r} is not a digit in base {from_base}")
        value = value * from_base + digit
    if value == 0:
        return "0"
    out = []
    while value:
        value, remainder = divmod(value, to_base)
        out.append(_ALPHABET[remainder])
    return "".join(reversed(out))