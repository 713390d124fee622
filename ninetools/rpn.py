"""Evaluate expressions written in reverse Polish notation."""

from __future__ import annotations

import sys

from .console import Style, colorize, print_error

OPERATORS = "+-/*"

_DIGITS = frozenset("0123456789")
_OPS = frozenset(OPERATORS)
_SPACE = frozenset(" ")
_ALLOWED = _DIGITS | _OPS | _SPACE


class NotationError(ValueError):
    """The expression is not valid reverse Polish notation."""


def _tokens(expr: str) -> list[str]:
    """Split on single spaces; a trailing space does not add an empty token."""
    fields = expr.split(" ")
    if fields[-1] == "":
        fields.pop()
    return fields


def _is_number(token: str) -> bool:
    # An empty token (from doubled spaces) counts as the number zero.
    return set(token) <= _DIGITS


def _is_operator(token: str) -> bool:
    return bool(token) and set(token) <= _OPS


def _to_int(token: str) -> int:
    return int(token) if token else 0


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return _wrap32(a + b)
    if op == "-":
        return _wrap32(a - b)
    if op == "*":
        return _wrap32(a * b)
    if b == 0:
        raise NotationError("Division by zero is not allowed.")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return _wrap32(quotient)


def validate_notation(expr: str) -> None:
    """Raise ``NotationError`` unless ``expr`` is well-formed notation."""
    chars = set(expr)
    if (
        not chars <= _ALLOWED
        or chars <= _OPS | _SPACE
        or chars <= _DIGITS | _SPACE
    ):
        raise NotationError(
            "Must be only a combination of integers (0, 9) "
            "and operations {+, -, /, *}."
        )

    depth = 0
    for token in _tokens(expr):
        if _is_number(token):
            if _to_int(token) > 9:
                raise NotationError("Ints must be less than 10.")
            depth += 1
        elif _is_operator(token):
            if depth < 2:
                raise NotationError("Invalid notation.")
            depth -= 1
        else:
            raise NotationError("Invalid notation.")
    if depth != 1:
        raise NotationError("Invalid notation.")


def evaluate(expr: str) -> int:
    """Validate and evaluate ``expr``, returning the value left on top of the stack."""
    validate_notation(expr)
    stack: list[int] = []
    for token in _tokens(expr):
        if _is_number(token):
            stack.append(_to_int(token))
        elif _is_operator(token) and len(token) == 1:
            b = stack.pop()
            a = stack.pop()
            stack.append(_apply(token, a, b))
    return stack[-1]


def main(argv=None) -> int:
    """Evaluate the single expression given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print_error("Only integers (0, 9) and operations {+, -, /, *} allowed.")
        print_error("Usage: ./RPN [Reverse Polish Notation]")
        return 1
    try:
        result = evaluate(args[0])
    except NotationError as exc:
        print_error(str(exc))
        return 1
    print(colorize(str(result), Style.GREEN))
    return 0