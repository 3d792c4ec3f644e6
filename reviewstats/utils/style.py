"""Flatten a record's style attributes into one display string."""

from typing import Any, Dict, Optional

from reviewstats.models.review import as_text

SEPARATOR = ", "


def format_style(style: Optional[Dict[str, Any]]) -> str:
    """
    Render style attributes as "<key><value>" pairs joined by ", ".

    Keys and values are concatenated as-is; Amazon style keys carry their
    own punctuation ({"Size:": " Large"} -> "Size: Large"). Attributes come
    out in the mapping's own order. None or a non-mapping gives "".
    """
    if not isinstance(style, dict):
        return ""
    return SEPARATOR.join(f"{key}{as_text(value)}" for key, value in style.items())
