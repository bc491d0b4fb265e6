"""Tests for style classification."""

import pytest

from fontfeel.classifier import classify_style, style_from_name
from fontfeel.font_source import NameStrings, Os2Table, PostTable, load_font


def _names(family="Test Font", full_name=None, postscript=""):
    return NameStrings(family=family, full_name=full_name or family, postscript=postscript)


def _os2(family_type=0, serif_style=0, proportion=0, family_class=0):
    panose = (family_type, serif_style, 0, proportion, 0, 0, 0, 0, 0, 0)
    return Os2Table(panose=panose, family_class=family_class)


class TestNameHeuristics:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Open Sans", "sans-serif"),
            ("Noto Serif", "serif"),
            ("Dancing Script", "script"),
            ("Caveat Brush", "script"),
            ("Bungee Display", "decorative"),
            ("Comic Neue", "decorative"),
        ],
    )
    def test_keywords(self, name, expected):
        assert style_from_name(name) == expected

    def test_sans_and_serif_together_is_no_signal(self):
        assert style_from_name("PT Sans Serif") is None

    def test_case_insensitive(self):
        assert style_from_name("ROBOTO SERIF") == "serif"

    def test_no_signal(self):
        assert style_from_name("Helvetica") is None

    def test_postscript_name_counts(self):
        names = _names(family="Foo", postscript="FooScript-Regular")
        assert classify_style(names, None, None) == "script"

    def test_name_beats_panose(self):
        assert classify_style(_names("Noto Serif"), _os2(family_type=3), None) == "serif"


class TestPanose:
    def test_family_type_script(self):
        assert classify_style(_names(), _os2(family_type=3), None) == "script"

    def test_family_type_script_with_weight_words_in_name(self):
        names = _names(family="Test Font", full_name="Test Font Bold Condensed")
        assert classify_style(names, _os2(family_type=3), None) == "script"

    @pytest.mark.parametrize("family_type", [4, 5])
    def test_family_type_decorative(self, family_type):
        assert classify_style(_names(), _os2(family_type=family_type), None) == "decorative"

    @pytest.mark.parametrize("serif_style", [0, 11])
    def test_latin_text_sans(self, serif_style):
        os2 = _os2(family_type=2, serif_style=serif_style)
        assert classify_style(_names(), os2, None) == "sans-serif"

    @pytest.mark.parametrize("serif_style", [2, 6, 10])
    def test_latin_text_serif(self, serif_style):
        os2 = _os2(family_type=2, serif_style=serif_style)
        assert classify_style(_names(), os2, None) == "serif"

    def test_proportion_monospaced(self):
        assert classify_style(_names(), _os2(proportion=9), None) == "monospace"

    def test_latin_text_with_unknown_serif_style_checks_proportion(self):
        os2 = _os2(family_type=2, serif_style=1, proportion=9)
        assert classify_style(_names(), os2, None) == "monospace"


class TestFamilyClass:
    @pytest.mark.parametrize(
        "class_id,expected",
        [(2, "serif"), (5, "serif"), (8, "sans-serif"), (10, "script"), (12, "decorative")],
    )
    def test_high_byte(self, class_id, expected):
        os2 = _os2(family_class=(class_id << 8) | 3)
        assert classify_style(_names(), os2, None) == expected

    def test_unmapped_class_falls_through(self):
        post = PostTable(is_fixed_pitch=True)
        assert classify_style(_names(), _os2(family_class=1 << 8), post) == "monospace"


class TestFallbacks:
    def test_fixed_pitch(self):
        assert classify_style(_names(), None, PostTable(is_fixed_pitch=True)) == "monospace"

    def test_default(self):
        assert classify_style(_names(), None, None) == "sans-serif"

    def test_pure_function(self):
        names, os2 = _names(), _os2(family_type=2, serif_style=4)
        assert classify_style(names, os2, None) == classify_style(names, os2, None)


class TestBuiltFonts:
    def test_fixed_pitch_font(self, font_bytes):
        with load_font(font_bytes(fixed_pitch=True)) as font:
            assert classify_style(font.names, font.os2, font.post) == "monospace"

    def test_panose_script_font(self, font_bytes):
        panose = (3, 0, 0, 0, 0, 0, 0, 0, 0, 0)
        with load_font(font_bytes(panose=panose)) as font:
            assert classify_style(font.names, font.os2, font.post) == "script"

    def test_family_class_from_os2(self, font_bytes):
        with load_font(font_bytes(family_class=(3 << 8) | 1)) as font:
            assert classify_style(font.names, font.os2, font.post) == "serif"
