"""Text patterns: pyramids, triangles, Pascal's triangle and letter diamonds.

Each function returns the pattern as text, every line ending in a newline.
"""

from __future__ import annotations

__all__ = [
    "half_pyramid",
    "number_triangle",
    "pascal_triangle",
    "alphabet_diamond",
    "hollow_square",
]


def _check_rows(rows: int) -> None:
    if rows < 0:
        raise ValueError("rows must be non-negative")


def _text(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def half_pyramid(rows: int) -> str:
    """Return a left-aligned pyramid of ``* `` cells."""
    _check_rows(rows)
    return _text(["* " * i for i in range(1, rows + 1)])


def number_triangle(rows: int) -> str:
    """Return rows counting ``1 2 ... i``."""
    _check_rows(rows)
    return _text(
        ["".join(f"{j} " for j in range(1, i + 1)) for i in range(1, rows + 1)]
    )


def pascal_triangle(rows: int) -> str:
    """Return Pascal's triangle, each row indented to centre it."""
    _check_rows(rows)
    lines = []
    for i in range(rows):
        coeffs = [1]
        for k in range(1, i + 1):
            coeffs.append(coeffs[-1] * (i - k + 1) // k)
        lines.append(" " * (rows - 1 - i) + "".join(f"{c} " for c in coeffs))
    return _text(lines)


def alphabet_diamond(rows: int) -> str:
    """Return a diamond of letters rising to ``Z`` in the middle of each row."""
    _check_rows(rows)
    if rows > 26:
        raise ValueError("at most 26 rows fit the alphabet")
    z = ord("Z")
    upper = []
    for i in range(1, rows + 1):
        rising = "".join(chr(z - i + j) for j in range(1, i + 1))
        falling = "".join(chr(z - j) for j in range(1, i))
        upper.append(" " * (rows - i) + rising + falling)
    return _text(upper + upper[-2::-1])


def hollow_square() -> str:
    """Return the three-by-three star square with a hollow centre."""
    return _text(["***", "* *", "***"])