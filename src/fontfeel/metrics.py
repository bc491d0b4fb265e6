"""Typographic metric extraction: proportions, contrast, terminals and shape.

Each vertical metric is read with a fixed precedence:

1. the OS/2 table value, normalized by units per em
2. a bounding-box measurement of a probe glyph ("x", "H", "d", "p")
3. the hhea ascent/descent (ascender and descender only)
4. the defaults in ``DEFAULT_METRIC_VALUES``
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fontfeel.config import (
    ASCENDER_PROBE,
    CAP_HEIGHT_PROBE,
    CONTRAST_HIGH,
    CONTRAST_MEDIUM,
    CONTRAST_NONE,
    DEEP_DESCENDER_TO_CAP_RATIO,
    DEFAULT_CONTRAST,
    DEFAULT_METRIC_VALUES,
    DEFAULT_TERMINAL,
    DESCENDER_PROBE,
    LARGE_X_TO_CAP_RATIO,
    PANOSE_CONTRAST_INDEX,
    PANOSE_TERMINAL_INDEX,
    PANOSE_TERMINALS,
    SHAPE_BALANCED,
    SHAPE_DEEP_DESCENDERS,
    SHAPE_LARGE_X_HEIGHT,
    SHAPE_SMALL_X_HEIGHT,
    SHAPE_TALL_ASCENDERS,
    SMALL_X_TO_CAP_RATIO,
    TALL_ASCENDER_TO_CAP_RATIO,
    X_HEIGHT_PROBE,
)
from fontfeel.font_source import Os2Table, ParsedFont
from fontfeel.schema import FontMetrics
from fontfeel.utils import format_em

logger = logging.getLogger(__name__)

Bounds = tuple[float, float, float, float]


@dataclass(frozen=True)
class MetricValues:
    """Numeric metrics (em, 2 decimals) plus the categorical descriptors."""

    x_height: float
    cap_height: float
    ascender: float
    descender: float
    contrast: str
    stroke_terminals: str
    shape: str

    def to_schema(self) -> FontMetrics:
        return FontMetrics(
            x_height=format_em(self.x_height),
            cap_height=format_em(self.cap_height),
            ascender=format_em(self.ascender),
            descender=format_em(self.descender),
            contrast=self.contrast,
            stroke_terminals=self.stroke_terminals,
            shape=self.shape,
        )


def extract_metrics(font: ParsedFont) -> MetricValues:
    """Measure x-height, cap height, ascender, descender, contrast, terminals, shape."""
    upm = font.units_per_em
    os2 = font.os2
    hhea = font.hhea

    x_height = _first_available(
        os2.x_height / upm if os2 and os2.x_height > 0 else None,
        lambda: _probe(font, X_HEIGHT_PROBE, lambda b: b[3]),
        default=DEFAULT_METRIC_VALUES["x_height"],
        upm=upm,
    )
    cap_height = _first_available(
        os2.cap_height / upm if os2 and os2.cap_height > 0 else None,
        lambda: _probe(font, CAP_HEIGHT_PROBE, lambda b: b[3]),
        default=DEFAULT_METRIC_VALUES["cap_height"],
        upm=upm,
    )
    ascender = _first_available(
        os2.typo_ascender / upm if os2 and os2.typo_ascender > 0 else None,
        lambda: _probe(font, ASCENDER_PROBE, lambda b: b[3]),
        lambda: hhea.ascender if hhea and hhea.ascender > 0 else None,
        default=DEFAULT_METRIC_VALUES["ascender"],
        upm=upm,
    )
    # Descenders are stored as a positive depth below the baseline
    descender = _first_available(
        abs(os2.typo_descender) / upm if os2 and os2.typo_descender != 0 else None,
        lambda: _probe(font, DESCENDER_PROBE, lambda b: -b[1]),
        lambda: abs(hhea.descender) if hhea and hhea.descender != 0 else None,
        default=DEFAULT_METRIC_VALUES["descender"],
        upm=upm,
    )

    return MetricValues(
        x_height=round(x_height, 2),
        cap_height=round(cap_height, 2),
        ascender=round(ascender, 2),
        descender=round(descender, 2),
        contrast=classify_contrast(os2),
        stroke_terminals=classify_terminals(os2),
        shape=determine_shape(x_height, cap_height, ascender, descender),
    )


def _first_available(
    table_value: float | None,
    *fallbacks: Callable[[], float | None],
    default: float,
    upm: int,
) -> float:
    """Return the table value (already in em), else the first fallback (font units)."""
    if table_value is not None:
        return table_value
    for fallback in fallbacks:
        value = fallback()
        if value is not None and value > 0:
            return value / upm
    return default


def _probe(font: ParsedFont, char: str, measure: Callable[[Bounds], float]) -> float | None:
    """Measure a probe glyph's bounding box; lookup failures count as no data."""
    try:
        bounds = font.glyph_bounds(char)
    except Exception as e:
        logger.debug("Glyph probe %r failed: %s", char, e)
        return None
    if bounds is None:
        return None
    value = measure(bounds)
    return value if value > 0 else None


def classify_contrast(os2: Os2Table | None) -> str:
    """Bucket the PANOSE stroke-variation byte into None / Medium / High."""
    if os2 is None:
        return DEFAULT_CONTRAST
    value = os2.panose[PANOSE_CONTRAST_INDEX]
    if value == 1:
        return CONTRAST_NONE
    if 2 <= value <= 5:
        return CONTRAST_MEDIUM
    if value >= 6:
        return CONTRAST_HIGH
    return DEFAULT_CONTRAST


def classify_terminals(os2: Os2Table | None) -> str:
    """Map the PANOSE terminal byte onto None/Rounded/Flared/Pointed/Square."""
    if os2 is None:
        return DEFAULT_TERMINAL
    return PANOSE_TERMINALS.get(os2.panose[PANOSE_TERMINAL_INDEX], DEFAULT_TERMINAL)


def determine_shape(x_height: float, cap_height: float, ascender: float, descender: float) -> str:
    """Describe the overall proportions.

    The rules overlap, so only the first match counts: large x-height, small
    x-height, tall ascenders, deep descenders, then balanced.
    """
    if cap_height <= 0:
        return SHAPE_BALANCED

    x_to_cap = x_height / cap_height
    ascender_to_cap = ascender / cap_height
    descender_to_cap = descender / cap_height

    if x_to_cap > LARGE_X_TO_CAP_RATIO:
        return SHAPE_LARGE_X_HEIGHT
    if x_to_cap < SMALL_X_TO_CAP_RATIO:
        return SHAPE_SMALL_X_HEIGHT
    if ascender_to_cap > TALL_ASCENDER_TO_CAP_RATIO:
        return SHAPE_TALL_ASCENDERS
    if descender_to_cap > DEEP_DESCENDER_TO_CAP_RATIO:
        return SHAPE_DEEP_DESCENDERS
    return SHAPE_BALANCED


def metric_fingerprint(values: MetricValues) -> int:
    """Deterministic integer derived from the four em metrics.

    Used to spread otherwise identical fonts apart in personality jitter and
    flavor recommendations.
    """
    weighted = (
        3 * values.x_height + 5 * values.cap_height + 7 * values.ascender + 11 * values.descender
    )
    return round(weighted * 100)
