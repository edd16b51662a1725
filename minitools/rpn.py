"""Evaluate reverse Polish notation expressions made of single digits."""

from __future__ import annotations

import sys

_DIGITS = "0123456789"
_OPERATORS = "+-*/"


class RPNError(Exception):
    """Raised when an expression cannot be evaluated."""


def _apply(operator: str, a: int, b: int) -> int:
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if b == 0:
        raise RPNError("Error: division by zero.")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate(expression: str) -> int:
    """Evaluate ``expression``; integer division truncates toward zero."""
    stack: list[int] = []
    for token in expression.split():
        if len(token) == 1 and token in _DIGITS:
            stack.append(int(token))
        elif len(token) == 1 and token in _OPERATORS:
            if len(stack) < 2:
                raise RPNError("Error: not enough operands.")
            b = stack.pop()
            a = stack.pop()
            stack.append(_apply(token, a, b))
        else:
            raise RPNError(f"Error: invalid token: {token}")
    if len(stack) != 1:
        raise RPNError("Error: invalid expression.")
    return stack[0]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: rpn <expression>", file=sys.stderr)
        return 1
    try:
        print(evaluate(args[0]))
    except RPNError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())