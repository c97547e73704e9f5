"""Postfix evaluation and infix-to-postfix conversion with an operator stack."""

from __future__ import annotations

import math
import string

__all__ = ["PRIORITY", "evaluate_postfix", "infix_to_postfix"]

# Each operator has its own level; '-' binds below '+' and '/' below '*'.
PRIORITY = {"+": 2, "-": 1, "*": 4, "/": 3, "^": 5}

_POSTFIX_OPERATORS = "+-*/^%"


def _apply(operator: str, left: float, right: float) -> float:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return left / right
    if operator == "^":
        return math.pow(left, right)
    divisor = int(right)
    if divisor == 0:
        raise ZeroDivisionError("integer modulo by zero")
    return float(math.fmod(int(left), divisor))


def evaluate_postfix(expression: str) -> float:
    """Evaluate a postfix expression of single-digit operands.

    Operators are ``+ - * / ^ %``; ``%`` works on the truncated integer
    parts and keeps the sign of the dividend. Whitespace is ignored.
    """
    stack: list[float] = []
    for ch in expression:
        if ch.isspace():
            continue
        if ch in string.digits:
            stack.append(float(ch))
        elif ch in _POSTFIX_OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(ch, left, right))
        else:
            raise ValueError(f"unexpected symbol {ch!r}")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    On meeting an operator whose priority is not above the operator on
    top of the stack, that one operator is moved to the output first.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if ch == "(":
            stack.append(ch)
        elif ch in string.ascii_letters:
            output.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')'")
            stack.pop()
        elif ch in PRIORITY:
            if stack and stack[-1] != "(" and PRIORITY[ch] <= PRIORITY[stack[-1]]:
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ValueError(f"unexpected symbol {ch!r}")
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ValueError("unbalanced '('")
        output.append(operator)
    return "".join(output)