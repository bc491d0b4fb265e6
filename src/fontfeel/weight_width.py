"""Weight and width labels from OS/2 classes, falling back to name keywords."""

import logging

from fontfeel.config import (
    DEFAULT_WEIGHT,
    DEFAULT_WIDTH,
    WEIGHT_BANDS,
    WEIGHT_NAME_KEYWORDS,
    WEIGHT_OVERFLOW_LABEL,
    WIDTH_CUSTOM_LABEL,
    WIDTH_NAME_KEYWORDS,
    WIDTH_NAMES,
)
from fontfeel.font_source import NameStrings, Os2Table

logger = logging.getLogger(__name__)


def weight_label(weight_class: int) -> str:
    """Bucket a usWeightClass by inclusive upper bound: 650 -> "Bold (700)"."""
    for upper, name in WEIGHT_BANDS:
        if weight_class <= upper:
            return f"{name} ({upper})"
    return f"{WEIGHT_OVERFLOW_LABEL} ({weight_class})"


def width_label(width_class: int) -> str:
    """Map a usWidthClass to its canonical name: 3 -> "Condensed (3)"."""
    name = WIDTH_NAMES.get(width_class)
    if name is None:
        return f"{WIDTH_CUSTOM_LABEL} ({width_class})"
    return f"{name} ({width_class})"


def resolve_weight(os2: Os2Table | None, names: NameStrings) -> str:
    if os2 is not None and os2.weight_class:
        return weight_label(os2.weight_class)
    label = _match_keywords(names.variant_text(), WEIGHT_NAME_KEYWORDS)
    if label:
        logger.debug("Weight inferred from name: %s", label)
        return label
    return DEFAULT_WEIGHT


def resolve_width(os2: Os2Table | None, names: NameStrings) -> str:
    if os2 is not None and os2.width_class:
        return width_label(os2.width_class)
    label = _match_keywords(names.variant_text(), WIDTH_NAME_KEYWORDS)
    if label:
        logger.debug("Width inferred from name: %s", label)
        return label
    return DEFAULT_WIDTH


def _match_keywords(text: str, table: tuple[tuple[tuple[str, ...], str], ...]) -> str | None:
    for keywords, label in table:
        if any(kw in text for kw in keywords):
            return label
    return None
