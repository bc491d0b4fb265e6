"""Shared fixtures for fontfeel tests."""

from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables.O_S_2f_2 import Panose

from fontfeel.font_source import PANOSE_FIELDS, GlyphInfo, NameStrings

UPM = 1000
ASCII_CODEPOINTS = tuple(range(0x20, 0x7F))
LATIN_EXTENDED_CODEPOINTS = tuple(range(0xA0, 0x250))

# Probe glyph outlines (yMin, yMax) in font units
GLYPH_EXTENTS = {
    "x": (0, 500),
    "H": (0, 700),
    "d": (0, 750),
    "p": (-200, 500),
}
DEFAULT_EXTENT = (0, 700)


# -- Font building -----------------------------------------------------------


def _box_glyph(y_min: int, y_max: int, width: int):
    pen = TTGlyphPen(None)
    pen.moveTo((50, y_min))
    pen.lineTo((50, y_max))
    pen.lineTo((width - 50, y_max))
    pen.lineTo((width - 50, y_min))
    pen.closePath()
    return pen.glyph()


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def _panose(values):
    panose = Panose()
    for field, value in zip(PANOSE_FIELDS, values):
        setattr(panose, field, value)
    return panose


def build_font(
    *,
    family="Test Font",
    style_name="Regular",
    full_name=None,
    codepoints=ASCII_CODEPOINTS,
    with_os2=True,
    panose=(0,) * 10,
    weight_class=400,
    width_class=5,
    family_class=0,
    x_height=500,
    cap_height=700,
    typo_ascender=800,
    typo_descender=-200,
    hhea_ascent=900,
    hhea_descent=-250,
    fixed_pitch=False,
    proportional_digits=False,
    flavor=None,
    version="Version 1.000",
    manufacturer="Test Foundry",
) -> bytes:
    """Build a small TrueType font in memory and return its bytes."""
    fb = FontBuilder(UPM, isTTF=True)

    glyph_order = [".notdef"]
    cmap: dict[int, str] = {}
    glyphs = {".notdef": _box_glyph(0, 700, 500)}
    metrics = {".notdef": (500, 50)}

    for code in codepoints:
        char = chr(code)
        glyph_name = f"uni{code:04X}"
        glyph_order.append(glyph_name)
        cmap[code] = glyph_name

        width = 550
        if char in "0123456789" and proportional_digits:
            width = 400 + int(char) * 20

        if char.isspace():
            glyphs[glyph_name] = _empty_glyph()
            metrics[glyph_name] = (250, 0)
            continue

        y_min, y_max = GLYPH_EXTENTS.get(char, DEFAULT_EXTENT)
        glyphs[glyph_name] = _box_glyph(y_min, y_max, width)
        metrics[glyph_name] = (width, 50)

    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupMaxp()
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=hhea_ascent, descent=hhea_descent)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style_name,
            "fullName": full_name or f"{family} {style_name}",
            "psName": f"{family}-{style_name}".replace(" ", ""),
            "version": version,
            "manufacturer": manufacturer,
        }
    )
    if with_os2:
        fb.setupOS2(
            usWeightClass=weight_class,
            usWidthClass=width_class,
            sFamilyClass=family_class,
            panose=_panose(panose),
            sxHeight=x_height,
            sCapHeight=cap_height,
            sTypoAscender=typo_ascender,
            sTypoDescender=typo_descender,
            usWinAscent=max(hhea_ascent, 0),
            usWinDescent=abs(hhea_descent),
        )
    fb.setupPost(isFixedPitch=1 if fixed_pitch else 0)

    if flavor:
        fb.font.flavor = flavor

    buffer = BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


@pytest.fixture()
def font_bytes():
    """Factory fixture: font_bytes(**overrides) -> TrueType bytes."""
    return build_font


@pytest.fixture()
def font_file(tmp_path):
    """Factory fixture: font_file(name, **overrides) -> path of a written .ttf."""

    def _write(file_name="test-font.ttf", **overrides):
        path = tmp_path / file_name
        path.write_bytes(build_font(**overrides))
        return path

    return _write


# -- Duck-typed font for lookup edge cases -----------------------------------


class FakeFont:
    """Stands in for ParsedFont with hand-picked glyphs and failures."""

    def __init__(
        self,
        chars="",
        *,
        advance_widths=None,
        bounds=None,
        failing=None,
        os2=None,
        post=None,
        hhea=None,
        names=None,
        units_per_em=UPM,
        glyph_count=None,
    ):
        self.units_per_em = units_per_em
        self.os2 = os2
        self.post = post
        self.hhea = hhea
        self.names = names or NameStrings()
        self._chars = set(chars)
        self._advance_widths = advance_widths or {}
        self._bounds = bounds or {}
        self._failing = failing or (lambda char: False)
        self.glyph_count = glyph_count if glyph_count is not None else len(self._chars) + 1

    def char_to_glyph(self, char):
        if self._failing(char):
            raise KeyError(f"lookup failed for U+{ord(char):04X}")
        if char not in self._chars:
            return None
        return GlyphInfo(name=f"uni{ord(char):04X}", advance_width=self._advance_widths.get(char, 500))

    def glyph_bounds(self, char):
        if self._failing(char):
            raise KeyError(f"lookup failed for U+{ord(char):04X}")
        return self._bounds.get(char)


@pytest.fixture()
def fake_font():
    """Factory fixture for FakeFont."""
    return FakeFont
