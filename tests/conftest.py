"""Shared fixtures for reviewstats tests."""

import json
from datetime import datetime, timezone

import pytest


def utc_ts(year, month, day, hour=0, minute=0, second=0):
    """Unix seconds for a UTC wall-clock time."""
    return int(datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc).timestamp())


def review(asin="X1", overall=5.0, verified=True, ts=None, text=None, style=None, **extra):
    """Build a review record; omitted optional fields stay absent."""
    record = {"asin": asin, "overall": overall, "verified": verified}
    if ts is not None:
        record["unixReviewTime"] = ts
    if text is not None:
        record["reviewText"] = text
    if style is not None:
        record["style"] = style
    record.update(extra)
    return record


@pytest.fixture
def sample_records():
    """Small catalogue: B2 is most reviewed, A1 best rated."""
    return [
        review("A1", 5.0, True, utc_ts(2014, 1, 10), "Great blender", {"Color:": " Red"}),
        review("B2", 3.0, False, utc_ts(2014, 2, 20), "Works fine", {"Size:": " Large", "Color:": " Blue"}),
        review("B2", 4.0, True, utc_ts(2014, 3, 1), "Really great value"),
        review("C3", 2.0, True, utc_ts(2013, 12, 31), "Broke after a week"),
        review("B2", 2.0, True, utc_ts(2014, 1, 15), "meh"),
        review("A1", 5.0, False, utc_ts(2014, 2, 1), "GREAT again"),
    ]


@pytest.fixture
def write_jsonl(tmp_path):
    """Write records (dicts or raw strings) to a JSON-lines file."""
    def _write(rows, name="reviews.json"):
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as fp:
            for row in rows:
                line = row if isinstance(row, str) else json.dumps(row, ensure_ascii=False)
                fp.write(line + "\n")
        return path
    return _write


@pytest.fixture
def make_review():
    return review


@pytest.fixture
def ts():
    return utc_ts
