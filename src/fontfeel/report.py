"""Plain-text reports for analysis and comparison results."""

from __future__ import annotations

from fontfeel.config import TRAITS
from fontfeel.schema import FontAnalysisResult, FontComparisonResult

FILLED = "\u2588"  # █
EMPTY = "\u00b7"  # ·
BAR_WIDTH = 20


def trait_bar(score: int, width: int = BAR_WIDTH) -> str:
    """Render a 0-100 score as a fixed-width bar: 50 -> ██████████··········"""
    filled = round(max(0, min(100, score)) / 100 * width)
    return FILLED * filled + EMPTY * (width - filled)


def _section(title: str, rows: list[tuple[str, str]]) -> list[str]:
    label_width = max((len(label) for label, _ in rows), default=0)
    lines = [title]
    lines.extend(f"  {label.ljust(label_width)}  {value}" for label, value in rows)
    return lines


def _bullets(title: str, items: list[str]) -> list[str]:
    lines = [title]
    lines.extend(f"  - {item}" for item in items)
    if not items:
        lines.append("  (none)")
    return lines


def render_analysis(result: FontAnalysisResult) -> str:
    """Render one analysis as a multi-section text report."""
    identity = result.identity
    metrics = result.metrics
    charset = result.character_set
    recs = result.recommendations

    sections: list[list[str]] = [
        [
            f"Font: {identity.name}",
            f"  Format: {result.format} ({identity.container}) | Style: {result.style}",
            f"  Weight: {result.weight} | Width: {result.width}",
            f"  Version: {identity.version}",
            f"  Manufacturer: {identity.manufacturer}",
        ],
        _section(
            "Metrics",
            [
                ("x-height", metrics.x_height),
                ("Cap height", metrics.cap_height),
                ("Ascender", metrics.ascender),
                ("Descender", metrics.descender),
                ("Contrast", metrics.contrast),
                ("Terminals", metrics.stroke_terminals),
                ("Shape", metrics.shape),
            ],
        ),
        _section(
            "Personality",
            [
                (trait.title(), f"{trait_bar(score)} {score:3d}")
                for trait, score in result.personality.traits().items()
            ],
        )
        + [f"  {result.personality.emotional_description}"],
        _section(
            "Character set",
            [
                ("Latin", charset.latin),
                ("Numerals", charset.numerals),
                ("Symbols", charset.symbols),
                ("Punctuation", charset.punctuation),
                ("Languages", charset.languages),
            ],
        ),
        _bullets("Recommended for", recs.recommended_uses),
        _bullets("Not recommended for", recs.not_recommended_uses),
        _bullets("Pairs well with", recs.font_pairings),
    ]
    return "\n\n".join("\n".join(lines) for lines in sections)


def render_comparison(comparison: FontComparisonResult) -> str:
    """Render a comparison: score, metric/trait tables and pairing advice."""
    primary = comparison.primary_font
    secondary = comparison.secondary_font
    pairing = comparison.pairing_recommendations

    header = [
        f"Compatibility score: {comparison.compatibility_score}/100",
        f"  Primary:   {primary.name} ({primary.format})",
        f"  Secondary: {secondary.name} ({secondary.format})",
    ]

    metric_rows = [
        (name, f"{diff.primary} | {diff.secondary} | {diff.difference}")
        for name, diff in comparison.metrics.items()
    ]
    trait_rows = [
        (
            trait.title(),
            f"{comparison.personality[trait].primary:3d} | "
            f"{comparison.personality[trait].secondary:3d} | "
            f"{comparison.personality[trait].difference:+d}",
        )
        for trait in TRAITS
    ]
    charset_rows = [
        (name, diff.difference) for name, diff in comparison.character_set.items()
    ]

    sections = [
        header,
        _section("Metrics (primary | secondary | difference)", metric_rows),
        _section("Personality (primary | secondary | difference)", trait_rows),
        _section("Character set", charset_rows),
        [
            "Pairing",
            f"  {pairing.headings_body}",
            f"  {pairing.contrast_pairing}",
            f"  {pairing.hierarchy_pairing}",
        ],
    ]
    return "\n\n".join("\n".join(lines) for lines in sections)
