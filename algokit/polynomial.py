"""Polynomials in x, y and z held as ordered lists of terms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Term", "Polynomial"]


@dataclass(frozen=True)
class Term:
    """A coefficient times powers of x, y and z."""

    coefficient: int
    x: int = 0
    y: int = 0
    z: int = 0

    @property
    def powers(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        sign = "" if self.coefficient < 0 else "+"
        text = f"{sign}{self.coefficient}"
        for name, exponent in zip("xyz", self.powers):
            if exponent != 0:
                text += f"{name}^{exponent}"
        return text


class Polynomial:
    """An ordered sequence of terms."""

    def __init__(self, terms: Iterable = ()) -> None:
        self._terms = tuple(t if isinstance(t, Term) else Term(*t) for t in terms)

    def evaluate(self, x: float, y: float, z: float) -> float:
        """Return the value of the polynomial at ``(x, y, z)``."""
        return float(
            sum(t.coefficient * x**t.x * y**t.y * z**t.z for t in self._terms)
        )

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        unused = list(other._terms)
        result = []
        for term in self._terms:
            match = next((t for t in unused if t.powers == term.powers), None)
            if match is None:
                result.append(term)
            else:
                unused.remove(match)
                result.append(Term(term.coefficient + match.coefficient, *term.powers))
        result.extend(unused)
        return Polynomial(result)

    def __str__(self) -> str:
        if not self._terms:
            return "Polynomial does not exist"
        return "".join(str(t) for t in self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._terms)!r})"