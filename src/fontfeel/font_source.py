"""Font parsing adapter.

Wraps a fontTools ``TTFont`` behind a small read-only surface: units per em,
the handful of OS/2, post, hhea and name fields the analysis needs, a glyph
count, and character-to-glyph lookups. Each table is exposed as an optional
record (``None`` when the table is missing or unreadable), so the analysis
modules never probe fontTools objects directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO

from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont

from fontfeel.utils import (
    NAME_ID_COPYRIGHT,
    NAME_ID_FAMILY,
    NAME_ID_FULL_NAME,
    NAME_ID_MANUFACTURER,
    NAME_ID_POSTSCRIPT,
    NAME_ID_SUBFAMILY,
    NAME_ID_VERSION,
    get_name_entry,
)

logger = logging.getLogger(__name__)

PANOSE_FIELDS = (
    "bFamilyType",
    "bSerifStyle",
    "bWeight",
    "bProportion",
    "bContrast",
    "bStrokeVariation",
    "bArmStyle",
    "bLetterForm",
    "bMidline",
    "bXHeight",
)


class FontAnalysisError(Exception):
    """Raised when a font cannot be read or parsed at all."""


@dataclass(frozen=True)
class Os2Table:
    weight_class: int = 0
    width_class: int = 0
    panose: tuple[int, ...] = (0,) * 10
    family_class: int = 0
    x_height: int = 0
    cap_height: int = 0
    typo_ascender: int = 0
    typo_descender: int = 0


@dataclass(frozen=True)
class PostTable:
    is_fixed_pitch: bool = False


@dataclass(frozen=True)
class HheaTable:
    ascender: int = 0
    descender: int = 0


@dataclass(frozen=True)
class NameStrings:
    family: str = ""
    subfamily: str = ""
    full_name: str = ""
    postscript: str = ""
    version: str | None = None
    copyright: str | None = None
    manufacturer: str | None = None

    def style_text(self) -> str:
        """Family, full and PostScript names joined and lower-cased."""
        return f"{self.family} {self.full_name} {self.postscript}".lower()

    def variant_text(self) -> str:
        """Full, family and subfamily names, lower-cased with '-'/'_' as spaces."""
        text = f"{self.full_name} {self.family} {self.subfamily}".lower()
        return text.replace("-", " ").replace("_", " ")


@dataclass(frozen=True)
class GlyphInfo:
    name: str
    advance_width: int


class ParsedFont:
    """Read-only view of a parsed font."""

    def __init__(self, ttfont: TTFont):
        self._font = ttfont
        self.units_per_em: int = ttfont["head"].unitsPerEm
        self.os2 = _read_os2(ttfont)
        self.post = _read_post(ttfont)
        self.hhea = _read_hhea(ttfont)
        self.names = _read_names(ttfont)
        self._cmap = _read_cmap(ttfont)
        self._glyph_set = None

    def __enter__(self) -> ParsedFont:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._font.close()

    @property
    def glyph_count(self) -> int:
        return len(self._font.getGlyphOrder())

    @property
    def outline_format(self) -> str | None:
        """"truetype", "cff" or None."""
        if "glyf" in self._font:
            return "truetype"
        if "CFF " in self._font or "CFF2" in self._font:
            return "cff"
        return None

    @property
    def container(self) -> str:
        """File container: TTF, OTF, WOFF, WOFF2 or Unknown."""
        flavor = self._font.flavor
        if flavor in ("woff", "woff2"):
            return flavor.upper()
        version = self._font.sfntVersion
        if version == "OTTO":
            return "OTF"
        if version in ("\0\1\0\0", "true"):
            return "TTF"
        return "Unknown"

    def char_to_glyph(self, char: str) -> GlyphInfo | None:
        """Return the glyph mapped to `char`, or None for unmapped/.notdef."""
        glyph_name = self._cmap.get(ord(char))
        if not glyph_name or glyph_name == ".notdef":
            return None
        advance_width = 0
        if "hmtx" in self._font:
            advance_width = self._font["hmtx"][glyph_name][0]
        return GlyphInfo(name=glyph_name, advance_width=advance_width)

    def glyph_bounds(self, char: str) -> tuple[float, float, float, float] | None:
        """Bounding box (xMin, yMin, xMax, yMax) in font units, None if empty."""
        glyph = self.char_to_glyph(char)
        if glyph is None:
            return None
        if self._glyph_set is None:
            self._glyph_set = self._font.getGlyphSet()
        pen = BoundsPen(self._glyph_set)
        self._glyph_set[glyph.name].draw(pen)
        return pen.bounds


def load_font(data: bytes) -> ParsedFont:
    """Parse font bytes (TTF/OTF/WOFF/WOFF2).

    Raises:
        FontAnalysisError: If the data cannot be parsed as a font.
    """
    try:
        ttfont = TTFont(BytesIO(data), fontNumber=0)
        parsed = ParsedFont(ttfont)
    except Exception as e:
        msg = f"Failed to analyze font: {e}"
        raise FontAnalysisError(msg) from e

    if parsed.units_per_em <= 0:
        parsed.close()
        msg = f"Failed to analyze font: invalid unitsPerEm {parsed.units_per_em}"
        raise FontAnalysisError(msg)
    return parsed


# --- Table readers ---
# A table that is missing or fails to decompile is reported as None.


def _read_os2(font: TTFont) -> Os2Table | None:
    if "OS/2" not in font:
        return None
    try:
        os2 = font["OS/2"]
        panose = getattr(os2, "panose", None)
        panose_bytes = (
            tuple(int(getattr(panose, field, 0)) for field in PANOSE_FIELDS)
            if panose is not None
            else (0,) * 10
        )
        return Os2Table(
            weight_class=os2.usWeightClass,
            width_class=os2.usWidthClass,
            panose=panose_bytes,
            family_class=os2.sFamilyClass,
            # sxHeight/sCapHeight only exist from table version 2
            x_height=getattr(os2, "sxHeight", 0),
            cap_height=getattr(os2, "sCapHeight", 0),
            typo_ascender=os2.sTypoAscender,
            typo_descender=os2.sTypoDescender,
        )
    except Exception as e:
        logger.debug("Unreadable OS/2 table: %s", e)
        return None


def _read_post(font: TTFont) -> PostTable | None:
    if "post" not in font:
        return None
    try:
        return PostTable(is_fixed_pitch=bool(font["post"].isFixedPitch))
    except Exception as e:
        logger.debug("Unreadable post table: %s", e)
        return None


def _read_hhea(font: TTFont) -> HheaTable | None:
    if "hhea" not in font:
        return None
    try:
        hhea = font["hhea"]
        return HheaTable(ascender=hhea.ascent, descender=hhea.descent)
    except Exception as e:
        logger.debug("Unreadable hhea table: %s", e)
        return None


def _read_names(font: TTFont) -> NameStrings:
    def entry(name_id: int) -> str | None:
        try:
            return get_name_entry(font, name_id)
        except Exception as e:
            logger.debug("Unreadable name entry %d: %s", name_id, e)
            return None

    return NameStrings(
        family=entry(NAME_ID_FAMILY) or "",
        subfamily=entry(NAME_ID_SUBFAMILY) or "",
        full_name=entry(NAME_ID_FULL_NAME) or "",
        postscript=entry(NAME_ID_POSTSCRIPT) or "",
        version=entry(NAME_ID_VERSION),
        copyright=entry(NAME_ID_COPYRIGHT),
        manufacturer=entry(NAME_ID_MANUFACTURER),
    )


def _read_cmap(font: TTFont) -> dict[int, str]:
    try:
        return font.getBestCmap() or {}
    except Exception as e:
        logger.debug("Unreadable cmap table: %s", e)
        return {}
