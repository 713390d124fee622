"""Command-line front end that sorts positive integers by merge insertion."""

from __future__ import annotations

import re
import sys
import time
from collections import deque

from .console import Style, colorize, format_heading, print_error
from .pmerge import find_duplicate, ford_johnson_sort, is_sorted

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

USAGE = "Usage: ./PmergeMe x x x x x x"

_DIGITS = frozenset("0123456789")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")

_CONTAINERS = (
    ("LIST", "list", list),
    ("DEQUE", "deque", deque),
    ("TUPLE", "tuple", tuple),
)


class ArgumentError(ValueError):
    """The command-line arguments cannot be sorted."""


def _leading_int(text: str) -> tuple[int, str]:
    """Parse the leading integer of ``text``; return it and the unparsed rest."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0, text
    return int(match.group(1)), text[match.end():]


def check_argument_count(count: int) -> int:
    """Require at least two arguments; return ``count`` unchanged."""
    if count == 0:
        raise ArgumentError(
            f"{USAGE}\nOnly non-duplicate positive integers as arguments are allowed."
        )
    if count == 1:
        raise ArgumentError(f"{USAGE}\nArguments provided must be more than 1.")
    return count


def validate_token_sequence(seq: str) -> list[int]:
    """Check every space-separated token of ``seq`` is a non-negative int.

    Returns the values of the non-empty tokens.
    """
    values: list[int] = []
    for token in seq.split(" "):
        value, rest = _leading_int(token)
        if not set(token) <= _DIGITS and rest:
            raise ArgumentError(f"Non-digit found: {rest}")
        if not INT_MIN <= value <= INT_MAX:
            raise ArgumentError("Converted value is beyond int range.")
        if value < 0:
            raise ArgumentError(f"Negative value found: {value}")
        if token:
            values.append(value)
    return values


def parse_arguments(args: list[str]) -> list[int]:
    """Validate the arguments and return the integer each one starts with.

    Raises ``ArgumentError`` for too few arguments, bad tokens, duplicates
    or a sequence that is already sorted.
    """
    check_argument_count(len(args))
    for arg in args:
        validate_token_sequence(arg)
    values = [_leading_int(arg)[0] for arg in args]
    duplicate = find_duplicate(values)
    if duplicate is not None:
        raise ArgumentError(f"Duplicate found: {duplicate}")
    if is_sorted(values):
        raise ArgumentError("Sequence is sorted.")
    return values


def format_elapsed(elapsed_us: float, count: int, container_type: str) -> str:
    """Describe how long sorting ``count`` elements in ``container_type`` took."""
    label = colorize(
        f"Time to process a range of {count} elements with {container_type}\t:\t",
        Style.BOLD,
    )
    return f"{label}{elapsed_us:.5f} µs"


def _spaced(values) -> str:
    return "".join(f"{value} " for value in values)


def main(argv=None) -> int:
    """Sort the arguments with several container types and report timings."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ArgumentError as exc:
        for line in str(exc).splitlines():
            print_error(line)
        return 1

    for heading, name, container in _CONTAINERS:
        print(format_heading(heading))
        start = time.perf_counter_ns()
        before = container(values)
        after = container(ford_johnson_sort(before))
        end = time.perf_counter_ns()
        print(f"Before\t:\t{_spaced(before)}")
        print(f"After\t:\t{colorize(_spaced(after), Style.GREEN)}")
        print(format_elapsed((end - start) / 1000.0, len(after), name))
        print()
    return 0