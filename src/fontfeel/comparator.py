"""Compare two analyzed fonts and score how well they pair."""

import logging
from pathlib import Path

from pydantic.alias_generators import to_camel

from fontfeel.analyzer import analyze_font
from fontfeel.config import (
    COMPATIBILITY_BASELINE,
    FORMALITY_GAP,
    HEAVY_WEIGHT_LABELS,
    TRAITS,
    X_HEIGHT_SIMILARITY_BANDS,
)
from fontfeel.schema import (
    FontAnalysisResult,
    FontComparisonResult,
    MetricDifference,
    PairingRecommendations,
    TraitDifference,
    ValueDifference,
)
from fontfeel.utils import clamp, label_name, parse_em

logger = logging.getLogger(__name__)

EM_METRICS = ("x_height", "cap_height", "ascender", "descender")
CATEGORICAL_METRICS = ("contrast", "stroke_terminals", "shape")
CHARACTER_SET_FIELDS = ("latin", "numerals", "symbols", "punctuation", "languages")
GENERAL_FIELDS = ("format", "style", "weight", "width")


def compare_fonts(primary_path: str | Path, secondary_path: str | Path) -> FontComparisonResult:
    """Analyze both files and compare them.

    A failure analyzing either font aborts the comparison.
    """
    primary = analyze_font(primary_path)
    secondary = analyze_font(secondary_path)
    return compare_results(primary, secondary)


def compare_results(
    primary: FontAnalysisResult,
    secondary: FontAnalysisResult,
) -> FontComparisonResult:
    score = compatibility_score(primary, secondary)
    logger.info("Compatibility %s / %s: %d", primary.name, secondary.name, score)

    return FontComparisonResult(
        primary_font=primary,
        secondary_font=secondary,
        metrics=_metric_differences(primary, secondary),
        personality=_trait_differences(primary, secondary),
        character_set={
            to_camel(field): _sameness(
                getattr(primary.character_set, field),
                getattr(secondary.character_set, field),
            )
            for field in CHARACTER_SET_FIELDS
        },
        general={
            field: _sameness(getattr(primary, field), getattr(secondary, field))
            for field in GENERAL_FIELDS
        },
        compatibility_score=score,
        pairing_recommendations=pairing_recommendations(primary, secondary),
    )


def percentage_difference(primary: float, secondary: float) -> str:
    """Signed change of `secondary` relative to `primary`: 0.5, 0.55 -> "+10.0%"."""
    if primary == secondary:
        return "Identical"
    if primary == 0:
        return "N/A"
    return f"{(secondary - primary) / primary * 100:+.1f}%"


def compatibility_score(primary: FontAnalysisResult, secondary: FontAnalysisResult) -> int:
    """Score in [0, 100], starting from 50.

    +10 for different outline formats, +10 for different weights, +15/+10/+5
    for x-heights within 10/20/30 %, +10 for a formality gap over 30.
    """
    score = COMPATIBILITY_BASELINE

    if primary.format != secondary.format:
        score += 10
    if primary.weight != secondary.weight:
        score += 10

    primary_x = parse_em(primary.metrics.x_height)
    secondary_x = parse_em(secondary.metrics.x_height)
    if primary_x > 0:
        relative = abs(primary_x - secondary_x) / primary_x
        for limit, bonus in X_HEIGHT_SIMILARITY_BANDS:
            if relative < limit:
                score += bonus
                break

    if _formality_gap(primary, secondary) > FORMALITY_GAP:
        score += 10

    return clamp(score, 0, 100)


def pairing_recommendations(
    primary: FontAnalysisResult,
    secondary: FontAnalysisResult,
) -> PairingRecommendations:
    first, second = primary.name, secondary.name

    primary_heavy = label_name(primary.weight) in HEAVY_WEIGHT_LABELS
    secondary_heavy = label_name(secondary.weight) in HEAVY_WEIGHT_LABELS
    if primary_heavy and not secondary_heavy:
        heading, body = first, second
    elif secondary_heavy and not primary_heavy:
        heading, body = second, first
    elif secondary.personality.formality > primary.personality.formality:
        heading, body = second, first
    else:
        heading, body = first, second
    headings_body = f"Use {heading} for headings and {body} for body text."

    if primary.metrics.contrast != secondary.metrics.contrast:
        contrast_pairing = (
            f"The different stroke contrast of {first} and {second} gives the pairing "
            "visual interest while keeping each role distinct."
        )
    else:
        contrast_pairing = (
            f"{first} and {second} share similar stroke contrast; set them apart "
            "with size, weight or color."
        )

    if _formality_gap(primary, secondary) > FORMALITY_GAP:
        hierarchy_pairing = (
            "The strong difference in formality creates a clear hierarchy; keep the "
            "more formal font for primary content."
        )
    else:
        hierarchy_pairing = (
            "Both fonts sit at a similar level of formality; build hierarchy through "
            "scale and spacing rather than tone."
        )

    return PairingRecommendations(
        headings_body=headings_body,
        contrast_pairing=contrast_pairing,
        hierarchy_pairing=hierarchy_pairing,
    )


def _formality_gap(primary: FontAnalysisResult, secondary: FontAnalysisResult) -> int:
    return abs(primary.personality.formality - secondary.personality.formality)


def _metric_differences(
    primary: FontAnalysisResult,
    secondary: FontAnalysisResult,
) -> dict[str, MetricDifference]:
    differences: dict[str, MetricDifference] = {}
    for field in EM_METRICS:
        first = getattr(primary.metrics, field)
        second = getattr(secondary.metrics, field)
        differences[to_camel(field)] = MetricDifference(
            primary=first,
            secondary=second,
            difference=percentage_difference(parse_em(first), parse_em(second)),
        )
    for field in CATEGORICAL_METRICS:
        first = getattr(primary.metrics, field)
        second = getattr(secondary.metrics, field)
        differences[to_camel(field)] = MetricDifference(
            primary=first,
            secondary=second,
            difference="Identical" if first == second else "Different",
        )
    return differences


def _trait_differences(
    primary: FontAnalysisResult,
    secondary: FontAnalysisResult,
) -> dict[str, TraitDifference]:
    first = primary.personality.traits()
    second = secondary.personality.traits()
    return {
        trait: TraitDifference(
            primary=first[trait],
            secondary=second[trait],
            difference=first[trait] - second[trait],
        )
        for trait in TRAITS
    }


def _sameness(first: str, second: str) -> ValueDifference:
    return ValueDifference(
        primary=first,
        secondary=second,
        difference="Identical" if first == second else "Different",
    )
