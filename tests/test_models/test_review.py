"""Tests for record field accessors."""

import pytest

from reviewstats.errors import MissingFieldError
from reviewstats.models.review import (
    as_text,
    is_verified,
    product_id,
    rating,
    review_text,
    review_time,
    style,
)


def test_product_id():
    assert product_id({"asin": "B00X"}) == "B00X"
    assert product_id({"asin": 42}) == "42"


@pytest.mark.parametrize("record", [{}, {"asin": None}, {"asin": {"id": 1}}, {"asin": []}])
def test_product_id_missing(record):
    with pytest.raises(MissingFieldError) as exc_info:
        product_id(record)

    assert exc_info.value.field == "asin"


def test_rating_values():
    assert rating({"overall": 5}) == 5.0
    assert rating({"overall": 3.5}) == 3.5
    assert rating({"overall": " 4 "}) == 4.0


@pytest.mark.parametrize("value", [
    None, True, "five", [5], "NaN", "inf", "-Infinity", float("nan"), float("inf"), 10 ** 400,
])
def test_rating_unusable(value):
    with pytest.raises(MissingFieldError):
        rating({"overall": value})


def test_review_time():
    assert review_time({"unixReviewTime": 1389312000}) == 1389312000
    assert review_time({"unixReviewTime": "1389312000"}) == 1389312000
    assert review_time({"unixReviewTime": 1389312000.0}) == 1389312000

    with pytest.raises(MissingFieldError):
        review_time({})
    with pytest.raises(MissingFieldError):
        review_time({"unixReviewTime": "01 10, 2014"})


@pytest.mark.parametrize("value", ["--5", "\u00b2", "1_000", "12.5", "", "-"])
def test_review_time_malformed_strings(value):
    with pytest.raises(MissingFieldError):
        review_time({"unixReviewTime": value})


def test_review_time_negative_and_padded():
    assert review_time({"unixReviewTime": " -60 "}) == -60


def test_review_text():
    assert review_text({"reviewText": ""}) == ""

    with pytest.raises(MissingFieldError):
        review_text({"summary": "no body"})


@pytest.mark.parametrize("value, expected", [
    (True, True),
    (False, False),
    ("true", True),
    ("FALSE", False),
    (1, True),
    (0, False),
    (None, False),
])
def test_is_verified(value, expected):
    assert is_verified({"verified": value}) is expected


def test_is_verified_missing():
    assert is_verified({}) is False


def test_style():
    assert style({"style": {"Size:": " M"}}) == {"Size:": " M"}
    assert style({"style": "M"}) is None
    assert style({}) is None


def test_as_text():
    assert as_text("x") == "x"
    assert as_text(False) == "false"
    assert as_text(7) == "7"
    assert as_text(None) == "null"
    assert as_text([1]) == ""
