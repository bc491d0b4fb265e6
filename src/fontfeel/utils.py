"""Name-table reading, em formatting and small list/number helpers."""

import re
from collections.abc import Iterable

from fontTools.ttLib import TTFont

# nameIDs read from the name table
NAME_ID_COPYRIGHT = 0
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULL_NAME = 4
NAME_ID_VERSION = 5
NAME_ID_POSTSCRIPT = 6
NAME_ID_MANUFACTURER = 8


def generate_slug(name: str) -> str:
    """Convert a display name to a file-name friendly slug.

    "Source Serif Pro" -> "source-serif-pro"
    "My_Font  Name!" -> "my-font-name"
    """
    slug = name.lower()
    slug = re.sub(r"[\s_]+", "-", slug)
    # Strip anything that isn't alphanumeric or hyphen
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    slug = slug.strip("-")
    return slug


def get_name_entry(font: TTFont, name_id: int) -> str | None:
    """Extract a string from the font's name table by nameID."""
    if "name" not in font:
        return None
    name_table = font["name"]
    record = name_table.getName(name_id, 3, 1, 0x0409)  # Windows, Unicode BMP, English
    if record is None:
        record = name_table.getName(name_id, 1, 0, 0)  # Mac, Roman, English
    if record is None:
        record = name_table.getDebugName(name_id)
    if record is None:
        return None
    text = str(record).strip()
    return text or None


def format_em(value: float) -> str:
    """0.523 -> "0.52 em"."""
    return f"{value:.2f} em"


def parse_em(text: str) -> float:
    """"0.52 em" -> 0.52. Raises ValueError for anything else."""
    match = re.fullmatch(r"\s*(-?\d+(?:\.\d+)?)\s*em\s*", text)
    if match is None:
        msg = f"Not an em measurement: {text!r}"
        raise ValueError(msg)
    return float(match.group(1))


def clamp(value: float, low: int, high: int) -> int:
    return int(max(low, min(high, value)))


def dedupe_and_cap(values: Iterable[str], cap: int) -> list[str]:
    """Drop repeated entries (first occurrence wins), then keep at most `cap`."""
    return list(dict.fromkeys(values))[:cap]


def label_name(label: str) -> str:
    """"Bold (700)" -> "Bold"."""
    return label.split(" (", 1)[0].strip()
