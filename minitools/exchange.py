"""Value a wallet of bitcoins against a historical exchange-rate database."""

from __future__ import annotations

import bisect
import re
import struct
import sys
from dataclasses import dataclass
from typing import NamedTuple

INT_MAX = 2**31 - 1
DATABASE_FILE = "data.csv"

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_C_SPACE = " \t\n\v\f\r"
_STREAM_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT = re.compile(
    r"""[+-]?(?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    )""",
    re.VERBOSE | re.IGNORECASE,
)


class ExchangeError(Exception):
    """Raised for unreadable files and lines that cannot be evaluated."""


class _Parsed(NamedTuple):
    value: float
    rest: str
    out_of_range: bool


def _stream_int(text: str) -> int | None:
    """Read a leading integer the way a formatted stream extraction does."""
    match = _STREAM_INT.match(text)
    return int(match.group(1)) if match else None


def _strtod(text: str) -> _Parsed:
    """Parse the longest floating-point prefix of ``text``.

    Returns the value, the unparsed remainder and whether the value
    overflowed or underflowed.  When nothing can be parsed the value is 0
    and the remainder is the whole text.
    """
    stripped = text.lstrip(_C_SPACE)
    match = _FLOAT.match(stripped)
    if match is None:
        return _Parsed(0.0, text, False)
    token = match.group()
    lowered = token.lower()
    rest = stripped[match.end():]

    if "inf" in lowered:
        return _Parsed(float(lowered), rest, False)
    if "nan" in lowered:
        return _Parsed(float(lowered.split("(")[0]), rest, False)

    if "x" in lowered:
        mantissa = re.split("p", lowered)[0].replace("0x", "", 1)
        nonzero = "123456789abcdef"
        try:
            value = float.fromhex(lowered)
        except OverflowError:
            return _Parsed(float("-inf" if lowered.startswith("-") else "inf"), rest, True)
    else:
        mantissa = re.split("e", lowered)[0]
        nonzero = "123456789"
        value = float(lowered)

    if value in (float("inf"), float("-inf")):
        return _Parsed(value, rest, True)
    underflow = value == 0.0 and any(ch in nonzero for ch in mantissa)
    return _Parsed(value, rest, underflow)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _amount_ok(parsed: _Parsed) -> bool:
    return not (
        parsed.out_of_range
        or parsed.rest
        or parsed.value < 0
        or parsed.value > float(INT_MAX)
    )


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _read_lines(filename: str) -> list[str] | None:
    try:
        with open(filename, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return _lines(handle.read())
    except OSError:
        return None


def is_valid_date(date: str) -> bool:
    """Check a ``YYYY-MM-DD`` date; February always has 28 days."""
    if len(date) != 10 or date[4] != "-" or date[7] != "-":
        return False
    year = _stream_int(date[0:4])
    month = _stream_int(date[5:7])
    day = _stream_int(date[8:10])
    if year is None or month is None or day is None:
        return False
    if year < 0 or not 1 <= month <= 12 or not 1 <= day <= 31:
        return False
    return day <= _DAYS_IN_MONTH[month - 1]


def is_valid_value(value: str) -> bool:
    """Check that ``value`` is a whole number between 0 and INT_MAX."""
    return _amount_ok(_strtod(value))


def _format_number(number: float) -> str:
    return "%g" % number


@dataclass(frozen=True)
class Evaluation:
    """One successfully valued line of an input file."""

    date: str
    value: str
    amount: float
    rate: float

    @property
    def result(self) -> float:
        return self.amount * self.rate

    def __str__(self) -> str:
        return f"{self.date} => {self.value} = {_format_number(self.result)}"


class BitcoinExchange:
    """Exchange rates keyed by date, with lookup of the closest earlier date."""

    def __init__(self) -> None:
        self._rates: dict[str, float] = {}
        self._dates: list[str] = []

    def __len__(self) -> int:
        return len(self._rates)

    def load_database(self, filename: str) -> None:
        """Load ``date,rate`` lines from a CSV file, skipping its header and bad lines."""
        lines = _read_lines(filename)
        if lines is None:
            raise ExchangeError("could not open database.")
        for line in lines[1:]:
            date, sep, value = line.partition(",")
            if not sep or not value:
                continue
            if not is_valid_date(date) or not is_valid_value(value):
                continue
            if date not in self._rates:
                bisect.insort(self._dates, date)
            self._rates[date] = _to_float32(_strtod(value).value)

    def rate_for(self, date: str) -> float:
        """Return the rate on ``date`` or on the closest earlier date."""
        if date in self._rates:
            return self._rates[date]
        position = bisect.bisect_left(self._dates, date)
        if position == 0:
            raise ExchangeError("no earlier date in database.")
        return self._rates[self._dates[position - 1]]

    def evaluate_line(self, line: str) -> Evaluation:
        """Value one ``date | amount`` line."""
        date, sep, value = line.partition("|")
        if not sep or not value:
            raise ExchangeError(f"bad input => {line}")
        date = date.rstrip(" \t")
        value = value.lstrip(" \t")
        if not value:
            raise ExchangeError(f"bad input => {line}")
        if not is_valid_date(date):
            raise ExchangeError(f"bad input => {date}")

        parsed = _strtod(value)
        if not _amount_ok(parsed):
            if parsed.value < 0:
                raise ExchangeError("not a positive number.")
            raise ExchangeError("too large a number.")
        return Evaluation(date, value, parsed.value, self.rate_for(date))

    def evaluate_file(self, filename: str) -> list[Evaluation | ExchangeError]:
        """Value every line after the header; failures appear as errors in the list."""
        lines = _read_lines(filename)
        if lines is None:
            raise ExchangeError("could not open file.")
        outcomes: list[Evaluation | ExchangeError] = []
        for line in lines[1:]:
            try:
                outcomes.append(self.evaluate_line(line))
            except ExchangeError as error:
                outcomes.append(error)
        return outcomes


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: could not open file.", file=sys.stderr)
        return 1
    exchange = BitcoinExchange()
    try:
        exchange.load_database(DATABASE_FILE)
    except ExchangeError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    try:
        outcomes = exchange.evaluate_file(args[0])
    except ExchangeError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 0
    for outcome in outcomes:
        if isinstance(outcome, ExchangeError):
            print(f"Error: {outcome}", file=sys.stderr)
        else:
            print(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())