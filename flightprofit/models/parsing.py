"""Numeric field parsing with explicit failures instead of silent NaN values."""
from __future__ import annotations

import math
from typing import Optional

from flightprofit import console


class FieldParseError(ValueError):
    """Raised when a numeric column holds text that cannot be parsed."""

    def __init__(self, column: str, value: str, expected: str) -> None:
        super().__init__(f"column '{column}' expected {expected}, got {value!r}")
        self.column = column
        self.value = value
        self.expected = expected


def parse_float(value: str, column: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise FieldParseError(column, value, "a number") from None
    if math.isnan(number) or math.isinf(number):
        raise FieldParseError(column, value, "a finite number")
    return number


def parse_int(value: str, column: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    # Accept "180.0" style integers written by spreadsheet exports.
    number = parse_float(value, column)
    if not number.is_integer():
        raise FieldParseError(column, value, "a whole number")
    return int(number)


def parse_optional_float(value: Optional[str], column: str, source: str, line_no: int) -> Optional[float]:
    """
    Parse a column that may legitimately be empty.

    Blank values become ``None`` without a warning; text that is present but
    not numeric also becomes ``None`` and is reported as a parse warning.
    """
    if value is None or value == "":
        return None
    try:
        return parse_float(value, column)
    except FieldParseError as exc:
        warn_parse(source, line_no, exc)
        return None


def warn_parse(source: str, line_no: int, exc: FieldParseError) -> None:
    console.warn(f"Parse warning in {source}, data row {line_no}: {exc}")
