"""
Record filters.

DateRangeFilter keeps reviews written inside an inclusive window of
calendar days. TextSearchFilter keeps reviews whose text contains a
search term, ignoring case.
"""

import logging
import re
from datetime import date, datetime, timezone
from typing import Iterable, List

from reviewstats.errors import InvalidDateFormat, MissingFieldError
from reviewstats.models.review import Record, review_text, review_time

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"^\d{2} \d{2}, \d{4}$")
DATE_FORMAT = "%m %d, %Y"
DISPLAY_FORMAT = "MM dd, yyyy"
SECONDS_PER_DAY = 86400


def parse_boundary(value: str) -> date:
    """
    Parse a 'MM dd, yyyy' string, e.g. "01 15, 2014".

    Raises:
        InvalidDateFormat: If the text does not match the pattern or
            names a day that does not exist
    """
    if value is None:
        raise InvalidDateFormat(value, DISPLAY_FORMAT)
    text = value.strip()
    if not DATE_PATTERN.match(text):
        raise InvalidDateFormat(value, DISPLAY_FORMAT)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormat(value, DISPLAY_FORMAT) from e


class DateRangeFilter:
    """
    Keeps records whose unixReviewTime falls on a day in [start, end].

    Timestamps and boundaries are both read as UTC. The end day is
    included in full, up to 23:59:59.
    """

    def __init__(self, start: str, end: str):
        """
        Initialize date range filter.

        Args:
            start: First day, 'MM dd, yyyy'
            end: Last day, 'MM dd, yyyy'

        Raises:
            InvalidDateFormat: If either boundary is malformed
        """
        self.start_date = parse_boundary(start)
        self.end_date = parse_boundary(end)

        self.start_ts = self._midnight_utc(self.start_date)
        self.end_ts = self._midnight_utc(self.end_date) + SECONDS_PER_DAY - 1

        if self.start_date > self.end_date:
            logger.warning(
                f"Start date {self.start_date} is after end date {self.end_date}; "
                f"no reviews can match"
            )

    @staticmethod
    def _midnight_utc(day: date) -> int:
        return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())

    def contains(self, record: Record) -> bool:
        """
        Check whether one record lies in the window.

        Raises:
            MissingFieldError: If the record has no usable unixReviewTime
        """
        ts = review_time(record)
        return self.start_ts <= ts <= self.end_ts

    def apply(self, records: Iterable[Record]) -> List[Record]:
        """Filter records to the window, keeping their order."""
        kept: List[Record] = []
        excluded = 0
        for record in records:
            try:
                if self.contains(record):
                    kept.append(record)
            except MissingFieldError:
                excluded += 1

        if excluded:
            logger.info(f"{excluded} records without unixReviewTime excluded from date filter")
        logger.info(
            f"Date filter {self.start_date}..{self.end_date} kept {len(kept)} records"
        )
        return kept


class TextSearchFilter:
    """
    Case-insensitive substring search over reviewText.

    An empty term matches every record that has review text.
    """

    def __init__(self, term: str):
        self.term = term or ""
        self._needle = self.term.casefold()

    def matches(self, record: Record) -> bool:
        try:
            text = review_text(record)
        except MissingFieldError:
            return False
        return self._needle in text.casefold()

    def apply(self, records: Iterable[Record]) -> List[Record]:
        """Return matching records in their original order."""
        matched = [record for record in records if self.matches(record)]
        logger.info(f"Search for {self.term!r} matched {len(matched)} reviews")
        return matched
