"""
Error taxonomy for reviewstats.

Only InvalidDateFormat (and OSError from file access) is fatal to a run.
The other errors are recovered close to where they are raised.
"""

from typing import Optional


class ReviewStatsError(Exception):
    """Base class for all reviewstats errors."""


class RecordParseError(ReviewStatsError, ValueError):
    """An input line is not a well-formed review record."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MissingFieldError(ReviewStatsError, KeyError):
    """A record lacks a field needed by the current operation."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"record has no usable '{self.field}' field"


class InvalidDateFormat(ReviewStatsError, ValueError):
    """A date boundary does not match the 'MM dd, yyyy' pattern."""

    def __init__(self, value: str, expected: str = "MM dd, yyyy"):
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid date {value!r}: expected format '{expected}'")
