"""Tests for typographic metric extraction."""

import pytest

from fontfeel.config import (
    CONTRAST_HIGH,
    CONTRAST_MEDIUM,
    CONTRAST_NONE,
    SHAPE_BALANCED,
    SHAPE_DEEP_DESCENDERS,
    SHAPE_LARGE_X_HEIGHT,
    SHAPE_SMALL_X_HEIGHT,
    SHAPE_TALL_ASCENDERS,
)
from fontfeel.font_source import HheaTable, Os2Table, load_font
from fontfeel.metrics import (
    MetricValues,
    classify_contrast,
    classify_terminals,
    determine_shape,
    extract_metrics,
    metric_fingerprint,
)
from tests.conftest import ASCII_CODEPOINTS, FakeFont


def _panose(**positions):
    values = [0] * 10
    for index, value in positions.items():
        values[int(index.lstrip("b"))] = value
    return tuple(values)


def _extract(data):
    with load_font(data) as font:
        return extract_metrics(font)


class TestExtractFromTables:
    def test_os2_values_normalized_by_upm(self, font_bytes):
        metrics = _extract(font_bytes())
        assert metrics.x_height == pytest.approx(0.5)
        assert metrics.cap_height == pytest.approx(0.7)
        assert metrics.ascender == pytest.approx(0.8)
        assert metrics.descender == pytest.approx(0.2)

    def test_values_rounded_to_two_places(self, font_bytes):
        metrics = _extract(font_bytes(x_height=523, cap_height=687))
        assert metrics.x_height == pytest.approx(0.52)
        assert metrics.cap_height == pytest.approx(0.69)

    def test_to_schema_formats_em_strings(self, font_bytes):
        schema = _extract(font_bytes()).to_schema()
        assert schema.x_height == "0.50 em"
        assert schema.cap_height == "0.70 em"
        assert schema.ascender == "0.80 em"
        assert schema.descender == "0.20 em"

    def test_zero_os2_x_height_falls_back_to_glyph(self, font_bytes):
        metrics = _extract(font_bytes(x_height=0, cap_height=0))
        # "x" and "H" box glyphs are 500 and 700 units tall
        assert metrics.x_height == pytest.approx(0.5)
        assert metrics.cap_height == pytest.approx(0.7)


class TestExtractWithoutOs2:
    def test_probe_glyphs(self, font_bytes):
        metrics = _extract(font_bytes(with_os2=False))
        assert metrics.x_height == pytest.approx(0.5)
        assert metrics.cap_height == pytest.approx(0.7)
        assert metrics.ascender == pytest.approx(0.75)
        assert metrics.descender == pytest.approx(0.2)

    def test_hhea_when_probes_missing(self, font_bytes):
        codepoints = [c for c in ASCII_CODEPOINTS if chr(c) not in "dp"]
        metrics = _extract(font_bytes(with_os2=False, codepoints=codepoints))
        assert metrics.ascender == pytest.approx(0.9)
        assert metrics.descender == pytest.approx(0.25)

    def test_default_categorical_values(self, font_bytes):
        metrics = _extract(font_bytes(with_os2=False))
        assert metrics.contrast == CONTRAST_MEDIUM
        assert metrics.stroke_terminals == "Rounded"

    def test_defaults_when_nothing_available(self):
        metrics = extract_metrics(FakeFont())
        assert metrics.x_height == pytest.approx(0.5)
        assert metrics.cap_height == pytest.approx(0.7)
        assert metrics.ascender == pytest.approx(0.8)
        assert metrics.descender == pytest.approx(0.2)

    def test_failing_probe_counts_as_no_data(self):
        font = FakeFont(
            "xHdp",
            failing=lambda char: True,
            hhea=HheaTable(ascender=880, descender=-220),
        )
        metrics = extract_metrics(font)
        assert metrics.x_height == pytest.approx(0.5)
        assert metrics.ascender == pytest.approx(0.88)
        assert metrics.descender == pytest.approx(0.22)

    def test_non_positive_probe_is_ignored(self):
        # A descender probe sitting on the baseline gives no depth
        font = FakeFont("p", bounds={"p": (0, 0, 500, 500)})
        metrics = extract_metrics(font)
        assert metrics.descender == pytest.approx(0.2)


class TestContrast:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, CONTRAST_NONE),
            (2, CONTRAST_MEDIUM),
            (5, CONTRAST_MEDIUM),
            (6, CONTRAST_HIGH),
            (9, CONTRAST_HIGH),
            (0, CONTRAST_MEDIUM),
        ],
    )
    def test_panose_buckets(self, value, expected):
        assert classify_contrast(Os2Table(panose=_panose(b7=value))) == expected

    def test_no_os2(self):
        assert classify_contrast(None) == CONTRAST_MEDIUM


class TestTerminals:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, "None"),
            (2, "Rounded"),
            (3, "Flared"),
            (4, "Pointed"),
            (5, "Square"),
            (6, "Rounded"),
            (7, "Flared"),
            (8, "Pointed"),
            (0, "Rounded"),
            (11, "Rounded"),
        ],
    )
    def test_panose_mapping(self, value, expected):
        assert classify_terminals(Os2Table(panose=_panose(b8=value))) == expected

    def test_read_from_built_font(self, font_bytes):
        metrics = _extract(font_bytes(panose=_panose(b7=8, b8=4)))
        assert metrics.contrast == CONTRAST_HIGH
        assert metrics.stroke_terminals == "Pointed"


class TestShape:
    def test_large_x_height(self):
        assert determine_shape(0.55, 0.7, 0.8, 0.2) == SHAPE_LARGE_X_HEIGHT

    def test_small_x_height(self):
        assert determine_shape(0.3, 0.7, 0.8, 0.2) == SHAPE_SMALL_X_HEIGHT

    def test_tall_ascenders(self):
        assert determine_shape(0.45, 0.7, 0.9, 0.2) == SHAPE_TALL_ASCENDERS

    def test_deep_descenders(self):
        assert determine_shape(0.45, 0.7, 0.8, 0.4) == SHAPE_DEEP_DESCENDERS

    def test_balanced(self):
        assert determine_shape(0.45, 0.7, 0.8, 0.2) == SHAPE_BALANCED

    def test_first_matching_rule_wins(self):
        # Large x-height and tall ascenders both apply
        assert determine_shape(0.6, 0.7, 0.9, 0.4) == SHAPE_LARGE_X_HEIGHT

    def test_zero_cap_height(self):
        assert determine_shape(0.5, 0.0, 0.8, 0.2) == SHAPE_BALANCED


class TestFingerprint:
    def test_weighted_sum(self):
        values = MetricValues(0.5, 0.7, 0.8, 0.2, CONTRAST_MEDIUM, "Rounded", SHAPE_BALANCED)
        assert metric_fingerprint(values) == 1280

    def test_ignores_categorical_fields(self):
        first = MetricValues(0.5, 0.7, 0.8, 0.2, CONTRAST_MEDIUM, "Rounded", SHAPE_BALANCED)
        second = MetricValues(0.5, 0.7, 0.8, 0.2, CONTRAST_HIGH, "Square", SHAPE_TALL_ASCENDERS)
        assert metric_fingerprint(first) == metric_fingerprint(second)
