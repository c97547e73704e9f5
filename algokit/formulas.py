"""Small formulas: a calculator, quadratic roots, temperatures, interest, pi, Hanoi, FizzBuzz."""

from __future__ import annotations

import math
import random

__all__ = [
    "calculate",
    "solve_quadratic",
    "bhaskara",
    "fahrenheit_to_celsius",
    "celsius_to_fahrenheit",
    "simple_interest",
    "estimate_pi",
    "hanoi_moves",
    "fizzbuzz",
]


def calculate(a: int, b: int, operator: str) -> int:
    """Apply ``+ - * /`` to two integers; division truncates toward zero."""
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    raise ValueError(f"bad action {operator!r}")


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real solutions of ``ax^2 + bx + c = 0``.

    An empty tuple means no real solution; a linear equation or a double
    root gives one value. Raises ValueError when every x is a solution.
    """
    if a == 0 and b == 0 and c == 0:
        raise ValueError("infinitely many solutions exist")
    d = b * b - 4 * a * c
    if d < 0 or (a == 0 and b == 0) or (b == 0 and a * c > 0):
        return ()
    if d == 0 and a != 0:
        return (-b / (2 * a),)
    if a == 0:
        return (-c / b,)
    root = math.sqrt(d)
    return ((-b - root) / (2 * a), (-b + root) / (2 * a))


def bhaskara(a: float, b: float, c: float) -> tuple[float, float]:
    """Return both roots of ``ax^2 + bx + c`` by the quadratic formula, plus root first."""
    if a == 0:
        raise ZeroDivisionError("a is zero, so the formula divides by zero")
    delta = b**2 - 4 * a * c
    if delta < 0:
        raise ValueError("there is no real solution")
    root = math.sqrt(delta)
    return ((-b + root) / (2 * a), (-b - root) / (2 * a))


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to Celsius."""
    return (fahrenheit - 32) / 1.8


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to Fahrenheit."""
    return celsius * 1.8 + 32


def simple_interest(principal: float, rate: float, time: float) -> float:
    """Return the simple interest for a percentage ``rate`` over ``time``."""
    return principal * rate * time / 100


def estimate_pi(
    trials: int = 100_000, side: float = 10.0, rng: random.Random | None = None
) -> float:
    """Estimate pi from random points in a square and its inscribed circle."""
    if trials < 1:
        raise ValueError("trials must be at least 1")
    if side <= 0:
        raise ValueError("side must be positive")
    rng = rng if rng is not None else random.Random()
    half = side / 2
    limit = side * side / 4
    inside = 0
    for _ in range(trials):
        x = side * rng.random() - half
        y = side * rng.random() - half
        if x * x + y * y <= limit:
            inside += 1
    return 4.0 * inside / trials


def hanoi_moves(
    n: int, source: str = "A", dest: str = "C", spare: str = "B"
) -> list[tuple[str, str]]:
    """Return the moves that carry ``n`` rings from ``source`` to ``dest``."""
    if n < 0:
        raise ValueError("number of rings must be non-negative")
    moves: list[tuple[str, str]] = []

    def move(count: int, src: str, dst: str, via: str) -> None:
        if count == 0:
            return
        move(count - 1, src, via, dst)
        moves.append((src, dst))
        move(count - 1, via, dst, src)

    move(n, source, dest, spare)
    return moves


def fizzbuzz(limit: int = 100) -> list[str]:
    """Return the FizzBuzz lines for 1 to ``limit``."""
    lines = []
    for i in range(1, limit + 1):
        word = ("Fizz" if i % 3 == 0 else "") + ("Buzz" if i % 5 == 0 else "")
        lines.append(word or str(i))
    return lines