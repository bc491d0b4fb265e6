"""Tests for weight and width resolution."""

import pytest

from fontfeel.analyzer import analyze_font_bytes
from fontfeel.font_source import NameStrings, Os2Table
from fontfeel.weight_width import resolve_weight, resolve_width, weight_label, width_label


class TestWeightLabel:
    @pytest.mark.parametrize(
        "weight_class,expected",
        [
            (1, "Thin (100)"),
            (100, "Thin (100)"),
            (150, "Extra Light (200)"),
            (400, "Regular (400)"),
            (401, "Medium (500)"),
            (650, "Bold (700)"),
            (900, "Black (900)"),
            (950, "Heavy (950)"),
        ],
    )
    def test_bands(self, weight_class, expected):
        assert weight_label(weight_class) == expected


class TestWidthLabel:
    @pytest.mark.parametrize(
        "width_class,expected",
        [(1, "Ultra Condensed (1)"), (3, "Condensed (3)"), (5, "Normal (5)"), (9, "Ultra Expanded (9)")],
    )
    def test_canonical(self, width_class, expected):
        assert width_label(width_class) == expected

    def test_non_canonical_class(self):
        assert width_label(12) == "Custom (12)"


class TestResolveWeight:
    def test_os2_class_wins(self):
        names = NameStrings(full_name="Foo Light")
        assert resolve_weight(Os2Table(weight_class=700), names) == "Bold (700)"

    def test_name_keyword_when_class_zero(self):
        names = NameStrings(full_name="Foo SemiBold")
        assert resolve_weight(Os2Table(weight_class=0), names) == "Semi Bold (600)"

    def test_name_keyword_without_os2(self):
        names = NameStrings(full_name="Foo-ExtraLight")
        assert resolve_weight(None, names) == "Extra Light (200)"

    def test_longer_phrase_before_substring(self):
        names = NameStrings(subfamily="Extra Bold")
        assert resolve_weight(None, names) == "Extra Bold (800)"

    def test_underscores_normalized(self):
        names = NameStrings(family="Foo_Demi_Bold")
        assert resolve_weight(None, names) == "Semi Bold (600)"

    def test_default(self):
        assert resolve_weight(None, NameStrings(full_name="Foo")) == "Regular (400)"


class TestResolveWidth:
    def test_os2_class_wins(self):
        names = NameStrings(full_name="Foo Expanded")
        assert resolve_width(Os2Table(width_class=3), names) == "Condensed (3)"

    def test_name_keyword_when_class_zero(self):
        names = NameStrings(full_name="Foo Condensed")
        assert resolve_width(Os2Table(width_class=0), names) == "Condensed (3)"

    def test_semi_condensed_not_condensed(self):
        names = NameStrings(full_name="Foo Semi Condensed")
        assert resolve_width(None, names) == "Semi Condensed (4)"

    def test_expanded(self):
        assert resolve_width(None, NameStrings(subfamily="Expanded")) == "Expanded (7)"

    def test_default(self):
        assert resolve_width(None, NameStrings()) == "Normal (5)"


class TestBuiltFont:
    def test_bold_weight_class_with_condensed_name(self, font_bytes):
        data = font_bytes(style_name="Condensed", weight_class=700, width_class=0)
        result = analyze_font_bytes(data)
        assert result.weight == "Bold (700)"
        assert result.width == "Condensed (3)"
