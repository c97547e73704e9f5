"""String puzzles: anagrams, unique characters, palindromes, replacement, Vigenère."""

from __future__ import annotations

import string
from collections import Counter

__all__ = [
    "is_anagram",
    "first_unique_char",
    "is_palindrome",
    "replace_pattern",
    "vigenere_encrypt",
]


def is_anagram(first: str, second: str) -> bool:
    """Return True when the two strings hold the same letters, ignoring case."""
    if len(first) != len(second):
        return False
    return Counter(first.lower()) == Counter(second.lower())


def first_unique_char(text: str) -> str:
    """Return the first character that occurs exactly once in ``text``.

    When every character repeats, the first character is returned.
    """
    if not text:
        raise ValueError("text is empty")
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), text[0])


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same backwards once spaces are removed."""
    squeezed = text.replace(" ", "")
    return squeezed == squeezed[::-1]


def replace_pattern(text: str, pattern: str, replacement: str) -> str:
    """Replace every non-overlapping occurrence of ``pattern``, scanning left to right.

    Raises ValueError when the pattern is empty or does not occur.
    """
    if not pattern:
        raise ValueError("pattern is empty")
    if pattern not in text:
        raise ValueError("Pattern string NOT found")
    return text.replace(pattern, replacement)


def _shift(letter: str, amount: int) -> str:
    base = ord("A") if letter.isupper() else ord("a")
    return chr(base + (ord(letter) - base + amount) % 26)


def vigenere_encrypt(plaintext: str, key: str) -> str:
    """Encrypt with a Vigenère key of ASCII letters.

    Only letters are shifted, keeping their case; the key advances on
    letters alone.
    """
    if not key or any(ch not in string.ascii_letters for ch in key):
        raise ValueError("key must be a non-empty string of letters")
    shifts = [ord(ch.upper()) - ord("A") for ch in key]
    out = []
    used = 0
    for ch in plaintext:
        if ch in string.ascii_letters:
            out.append(_shift(ch, shifts[used % len(shifts)]))
            used += 1
        else:
            out.append(ch)
    return "".join(out)