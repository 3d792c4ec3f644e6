"""Tests for style formatting."""

from reviewstats.utils.style import format_style


def test_absent_style_is_empty():
    assert format_style(None) == ""


def test_key_and_value_concatenated_in_mapping_order():
    style = {"Size:": " Large", "Color:": " Red"}

    assert format_style(style) == "Size: Large, Color: Red"


def test_no_trailing_separator():
    assert format_style({"Format:": " Paperback"}) == "Format: Paperback"


def test_order_is_not_alphabetical():
    assert format_style({"b": "2", "a": "1"}) == "b2, a1"


def test_empty_mapping():
    assert format_style({}) == ""


def test_non_string_values():
    assert format_style({"Count:": 3, "Gift:": True, "Note:": None, "Nested:": {"x": 1}}) == (
        "Count:3, Gift:true, Note:null, Nested:"
    )


def test_non_mapping_style_is_empty():
    assert format_style("Size: Large") == ""
    assert format_style(["Size"]) == ""


def test_plain_keys_are_concatenated_without_space():
    assert format_style({"Size": "Large", "Color": "Red"}) == "SizeLarge, ColorRed"
