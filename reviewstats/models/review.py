"""
Review record model.

A record is the JSON object parsed from one input line, kept as a plain
dict because field presence varies between reviews. The accessors below
pull typed values out of it and raise MissingFieldError when a field is
absent or unusable for the operation at hand.
"""

import math
import re
from typing import Any, Dict, Optional

from reviewstats.errors import MissingFieldError

Record = Dict[str, Any]

ASIN = "asin"
OVERALL = "overall"
VERIFIED = "verified"
REVIEW_TIME = "unixReviewTime"
REVIEW_TEXT = "reviewText"
STYLE = "style"

_INTEGER = re.compile(r"-?[0-9]+")


def product_id(record: Record) -> str:
    """
    Get the product identifier (asin) of a record.

    Raises:
        MissingFieldError: If asin is absent, null, or not a scalar
    """
    value = record.get(ASIN)
    if value is None or isinstance(value, (dict, list)):
        raise MissingFieldError(ASIN)
    return as_text(value)


def rating(record: Record) -> float:
    """
    Get the star rating (overall) as a float.

    Numeric strings are accepted. NaN, infinities and anything else
    count as missing.
    """
    value = record.get(OVERALL)
    if isinstance(value, bool) or value is None:
        raise MissingFieldError(OVERALL)
    if not isinstance(value, (int, float, str)):
        raise MissingFieldError(OVERALL)
    try:
        result = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        raise MissingFieldError(OVERALL) from None
    if not math.isfinite(result):
        raise MissingFieldError(OVERALL)
    return result


def review_time(record: Record) -> int:
    """Get unixReviewTime in seconds since the epoch (UTC)."""
    value = record.get(REVIEW_TIME)
    if isinstance(value, bool) or value is None:
        raise MissingFieldError(REVIEW_TIME)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    raise MissingFieldError(REVIEW_TIME)


def review_text(record: Record) -> str:
    """Get reviewText; non-string values are missing."""
    value = record.get(REVIEW_TEXT)
    if not isinstance(value, str):
        raise MissingFieldError(REVIEW_TEXT)
    return value


def is_verified(record: Record) -> bool:
    """
    Get the verified-purchase flag.

    A missing flag reads as False, the same as an explicit false.
    """
    value = record.get(VERIFIED)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    if isinstance(value, (int, float)):
        return value != 0
    return False


def style(record: Record) -> Optional[Dict[str, Any]]:
    """Get the nested style mapping, or None when it is not an object."""
    value = record.get(STYLE)
    if isinstance(value, dict):
        return value
    return None


def as_text(value: Any) -> str:
    """
    Render a JSON scalar the way it appears in the source document.

    Containers have no textual form and render as an empty string.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""
