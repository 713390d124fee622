"""Value amounts of bitcoin against a database of historical exchange rates."""

from __future__ import annotations

import bisect
import math
import re
import struct
import sys
from collections.abc import Iterable, Iterator, Mapping

from .console import print_error

DATABASE_PATH = "data.csv"
CSV_HEADER = "date,exchange_rate"
INPUT_HEADER = "date | value"

_DIGITS = frozenset("0123456789")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class InputFormatError(ValueError):
    """A line of input does not follow the ``date | value`` format."""


class DateNotFoundError(LookupError):
    """No database entry lies on or before the requested date."""


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _strtof(text: str) -> float:
    """Parse the longest leading float in ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return _to_float32(float(match.group(1)))


def _format_number(value: float) -> str:
    return format(value, "g")


def _chomp(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class ExchangeRates:
    """Exchange rates keyed by ``YYYY-MM-DD`` date strings."""

    def __init__(self, rates: Mapping[str, float]) -> None:
        self._rates = dict(rates)
        self._dates = sorted(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ExchangeRates:
        """Build from ``date,rate`` lines; the first entry for a date wins."""
        rates: dict[str, float] = {}
        for raw in lines:
            line = _chomp(raw)
            if line == CSV_HEADER:
                continue
            date, sep, rate = line.partition(",")
            if sep:
                rates.setdefault(date, _strtof(rate))
        return cls(rates)

    @classmethod
    def from_file(cls, path) -> ExchangeRates:
        """Load a CSV database; raises ``OSError`` if it cannot be opened."""
        with open(path, encoding="utf-8", errors="replace") as handle:
            return cls.from_lines(handle)

    def rate_on(self, date: str) -> tuple[str, float]:
        """Return ``(database_date, rate)`` for ``date`` or the closest earlier date."""
        if date in self._rates:
            return date, self._rates[date]
        index = bisect.bisect_left(self._dates, date)
        if index == 0:
            raise DateNotFoundError("Date not found in database (lower bound absent).")
        found = self._dates[index - 1]
        return found, self._rates[found]

    def convert(self, date: str, amount: float) -> tuple[str, float]:
        """Return ``(database_date, amount * rate)`` for ``date``."""
        found, rate = self.rate_on(date)
        return found, _to_float32(rate * amount)


def trim_spaces(text: str) -> str:
    """Strip leading and trailing space characters (not other whitespace)."""
    return text.strip(" ")


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def validate_delim(line: str) -> int:
    """Check for exactly one ``|`` with a space on each side; return its index."""
    found = line.find("|")
    if found == -1:
        raise InputFormatError(
            f"'{line}' not in line with the format `date | value`: no delim"
        )
    if found != line.rfind("|"):
        raise InputFormatError(
            f"'{line}' not in line with the format `date | value`: multi delims"
        )
    # A pipe at either edge of the line leaves nothing to check on that side.
    if found == 0:
        return found
    space_error = InputFormatError(
        f"'{line}' not in line with the format `date | value`: no space around delim"
    )
    if line[found - 1] != " ":
        raise space_error
    if found + 1 < len(line) and line[found + 1] != " ":
        raise space_error
    return found


def _date_chunks(text: str) -> Iterator[str]:
    sub = text
    found = sub.find("-")
    chunk = sub if found == -1 else sub[:found]
    for _ in range(3):
        yield chunk
        sub = sub[found + 1:]
        found = sub.find("-")
        chunk = sub if found == -1 else sub[:found]


_CHUNK_FORMATS = (
    (4, "year format: YYYY"),
    (2, "month format: MM"),
    (2, "day format: DD"),
)


def validate_date(text: str) -> str:
    """Validate a ``YYYY-MM-DD`` date against the calendar; return it unchanged."""
    for chunk, (length, label) in zip(_date_chunks(text), _CHUNK_FORMATS):
        if len(chunk) != length:
            raise InputFormatError(f"'{chunk}' not in line with the {label}")
        if not set(chunk) <= _DIGITS:
            raise InputFormatError(
                f"'{chunk}' not in line with the date format: non-digit"
            )

    year, month, day = int(text[0:4]), int(text[5:7]), int(text[8:10])
    if not (1 <= month <= 12 and 1 <= day <= 31):
        raise InputFormatError(
            f"'{text}' not in line with the date format `YYYY-MM-DD`"
        )
    if not is_leap_year(year) and month == 2 and day > 28:
        raise InputFormatError("Only 28 days in Feb for non-leap years.")
    if month in (4, 6, 9, 11) and day > 30:
        raise InputFormatError("Only 30 days in Apr, Jun, Sept and Nov.")
    return text


def validate_value(text: str) -> float:
    """Parse an amount, which must lie strictly between 0 and 1000."""
    value = _strtof(text)
    if value == 0.0 and not set(text) <= _DIGITS:
        raise InputFormatError(
            f"'{text}' not in line with the value format: non-digit"
        )
    if not 0.0 < value < 1000.0:
        raise InputFormatError(
            f"'{text}' not in line with the value format `(0, 1000)`"
        )
    return value


def _split_fields(line: str) -> list[str]:
    fields = line.split("|")
    if fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_line(line: str) -> tuple[str | None, float | None] | None:
    """Parse one ``date | value`` line.

    Returns ``None`` for the header and for lines with fewer than two fields.
    A field holding the literal header word comes back as ``None``.
    """
    validate_delim(line)
    date: str | None = None
    value: float | None = None
    count = 0
    for field in _split_fields(line):
        if not field.strip(" "):
            raise InputFormatError(
                f"'{line}' not in line with the format `date | value`: "
                "< 2 tokens or all spaces for either"
            )
        trimmed = trim_spaces(field)
        if count == 0 and trimmed != "date":
            date = validate_date(trimmed)
        if count == 1 and trimmed != "value":
            value = validate_value(trimmed)
        count += 1
    if count < 2 or line == INPUT_HEADER:
        return None
    return date, value


def process_input(
    lines: Iterable[str], rates: ExchangeRates
) -> Iterator[str | InputFormatError | DateNotFoundError]:
    """Yield a result line per valid input line, or the error for a bad one.

    A field that only holds its header word keeps the date or value from the
    previous line.
    """
    date = ""
    amount = 0.0
    for raw in lines:
        line = _chomp(raw)
        try:
            parsed = parse_line(line)
        except InputFormatError as exc:
            yield exc
            continue
        if parsed is None:
            continue
        new_date, new_amount = parsed
        if new_date is not None:
            date = new_date
        if new_amount is not None:
            amount = new_amount
        try:
            found, total = rates.convert(date, amount)
        except DateNotFoundError as exc:
            yield exc
            continue
        yield f"{found} => {_format_number(amount)} = {_format_number(total)}"


def is_valid_filename(path: str) -> bool:
    """True when the first ``.txt`` in ``path`` ends it."""
    found = path.find(".txt")
    return found != -1 and path[found:] == ".txt"


def main(argv=None) -> int:
    """Run the converter on one ``.txt`` input file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or not is_valid_filename(args[0]):
        print_error("Usage: ./btc [filename].txt")
        return 1

    try:
        rates = ExchangeRates.from_file(DATABASE_PATH)
    except OSError:
        print_error("Failed to open data.csv")
        rates = ExchangeRates({})

    try:
        handle = open(args[0], encoding="utf-8", errors="replace")
    except OSError:
        print_error(f"Failed to open {args[0]}")
        return 0

    with handle:
        for item in process_input(handle, rates):
            if isinstance(item, Exception):
                print_error(str(item))
            else:
                print(item)
    return 0