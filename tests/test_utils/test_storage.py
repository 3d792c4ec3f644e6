"""Tests for CSV report writing."""

import pytest

from reviewstats.models.report import Report
from reviewstats.utils.storage import ReportWriter


def _read(path):
    return path.read_bytes().decode("utf-8")


def test_header_then_rows(tmp_path):
    report = Report(
        name="popularity",
        header=["ASIN", "КоличествоОтзывов", "Verified", "Style"],
        rows=[("B2", 3, "false", "Size: Large"), ("A1", 2, "true", "")]
    )
    path = tmp_path / "popular_products.csv"

    ReportWriter().write(report, path)

    assert _read(path) == (
        "ASIN,КоличествоОтзывов,Verified,Style\n"
        "B2,3,false,Size: Large\n"
        "A1,2,true,\n"
    )


def test_empty_report_has_only_header(tmp_path):
    path = tmp_path / "rated_products.csv"

    ReportWriter().write(Report("rating", ["ASIN", "AvgRating", "Verified", "Style"]), path)

    assert _read(path) == "ASIN,AvgRating,Verified,Style\n"


def test_average_rendering(tmp_path):
    report = Report("rating", ["ASIN", "AvgRating"], [("X1", 4.0), ("X2", 3.5)])
    path = tmp_path / "out.csv"

    ReportWriter().write(report, path)

    assert _read(path) == "ASIN,AvgRating\nX1,4.0\nX2,3.5\n"


def test_fields_with_commas_and_quotes_are_quoted(tmp_path):
    report = Report(
        "matched-reviews",
        ["ASIN", "ReviewText", "Verified", "Style"],
        [("A1", 'Big, "loud" and\nfast', "true", "Size: L, Color: Red")]
    )
    path = tmp_path / "matched.csv"

    ReportWriter().write(report, path)

    assert _read(path) == (
        "ASIN,ReviewText,Verified,Style\n"
        'A1,"Big, ""loud"" and\nfast",true,"Size: L, Color: Red"\n'
    )


def test_overwrites_existing_file(tmp_path):
    path = tmp_path / "out.csv"
    path.write_text("stale content\n" * 10, encoding="utf-8")

    ReportWriter().write(Report("x", ["ASIN"], [("A",)]), path)

    assert _read(path) == "ASIN\nA\n"


def test_unwritable_destination_raises(tmp_path):
    with pytest.raises(OSError):
        ReportWriter().write(Report("x", ["ASIN"]), tmp_path / "missing_dir" / "out.csv")


def test_report_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Report("x", ["ASIN", "Count"], [("A",)])
