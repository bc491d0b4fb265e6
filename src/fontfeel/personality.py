"""Personality scoring: six 0-100 trait scores and a generated description.

Every trait starts at 50. Fixed deltas are applied for the style, the
x-height, the contrast bucket, the terminal style and the shape, then a small
jitter derived from the metric fingerprint so fonts that land in the same
buckets still differ slightly. Scores are clamped to 0-100.
"""

from __future__ import annotations

from fontfeel.config import (
    CONTRAST_HIGH,
    CONTRAST_NONE,
    HIGH_X_HEIGHT,
    LOW_X_HEIGHT,
    SHAPE_DEEP_DESCENDERS,
    SHAPE_LARGE_X_HEIGHT,
    SHAPE_SMALL_X_HEIGHT,
    SHAPE_TALL_ASCENDERS,
    STRONG_TRAIT,
    TERMINAL_FLARED,
    TERMINAL_POINTED,
    TERMINAL_ROUNDED,
    TERMINAL_SQUARE,
    TRAIT_BASELINE,
    TRAIT_MAX,
    TRAIT_MIN,
    TRAITS,
    WEAK_TRAIT,
)
from fontfeel.metrics import MetricValues, metric_fingerprint
from fontfeel.schema import Personality
from fontfeel.utils import clamp

Deltas = dict[str, int]

STYLE_DELTAS: dict[str, Deltas] = {
    "serif": {"formality": 25, "sophistication": 20, "traditionality": 25, "playfulness": -10},
    "sans-serif": {"approachability": 15, "gentleness": 10, "traditionality": -10},
    "script": {"formality": 10, "gentleness": 25, "sophistication": 15, "playfulness": 20},
    "decorative": {"formality": -15, "playfulness": 30, "traditionality": -20},
    "monospace": {"formality": 15, "approachability": -10, "traditionality": 5, "playfulness": -15},
}

LARGE_X_HEIGHT_DELTAS: Deltas = {"approachability": 10, "formality": -5}
SMALL_X_HEIGHT_DELTAS: Deltas = {"sophistication": 10, "formality": 5}

CONTRAST_DELTAS: dict[str, Deltas] = {
    CONTRAST_HIGH: {"sophistication": 15, "traditionality": 10, "approachability": -5},
    CONTRAST_NONE: {"approachability": 10, "traditionality": -10},
}

TERMINAL_DELTAS: dict[str, Deltas] = {
    TERMINAL_ROUNDED: {"gentleness": 15, "approachability": 10},
    TERMINAL_POINTED: {"sophistication": 10, "gentleness": -10},
    TERMINAL_SQUARE: {"formality": 10, "gentleness": -5},
    TERMINAL_FLARED: {"sophistication": 5, "traditionality": 5},
}

SHAPE_DELTAS: dict[str, Deltas] = {
    SHAPE_LARGE_X_HEIGHT: {"approachability": 5, "playfulness": 5},
    SHAPE_SMALL_X_HEIGHT: {"sophistication": 5, "traditionality": 5},
    SHAPE_TALL_ASCENDERS: {"sophistication": 5},
    SHAPE_DEEP_DESCENDERS: {"gentleness": 5, "playfulness": 5},
}

# --- Description templates ---

STYLE_OPENINGS: dict[str, str] = {
    "serif": "carries the measured authority of classic book typography",
    "sans-serif": "speaks in a clean, direct voice free of ornament",
    "script": "flows with the rhythm of the handwritten stroke",
    "decorative": "puts personality ahead of neutrality",
    "monospace": "keeps every character in a strict, even cadence",
}

CONTRAST_CLAUSES: dict[str, str] = {
    "None": "with strokes of uniform thickness that read as steady and even",
    "Medium": "with moderate stroke contrast that keeps texture lively without fuss",
    "High": "with pronounced thick-thin contrast that lends it drama",
}

TERMINAL_CLAUSES: dict[str, str] = {
    "None": "and plain stroke endings that stay out of the way",
    "Rounded": "and softly rounded terminals that take the edge off",
    "Flared": "and gently flared terminals with a chiselled warmth",
    "Pointed": "and sharp, pointed terminals that add tension",
    "Square": "and crisp square terminals that feel engineered",
}

HIGH_TRAIT_CLAUSES: dict[str, str] = {
    "formality": "Its strongest note is formality, suiting serious and official communication.",
    "approachability": "Above all it feels approachable, inviting readers in.",
    "gentleness": "Its dominant quality is gentleness, soft and reassuring on the page.",
    "sophistication": "Sophistication leads, giving text a refined, premium finish.",
    "traditionality": "It leans strongly traditional, rooted in historical letterforms.",
    "playfulness": "Playfulness dominates, bringing energy and fun to the text.",
}

LOW_TRAIT_CLAUSES: dict[str, str] = {
    "formality": "It has very little formality, so it reads as relaxed and casual.",
    "approachability": "It keeps readers at a distance, projecting reserve.",
    "gentleness": "There is little softness here; the forms feel firm and decisive.",
    "sophistication": "It avoids refinement in favour of plain, functional forms.",
    "traditionality": "It shows almost no traditional influence and feels contemporary.",
    "playfulness": "It is almost entirely serious, with no room for whimsy.",
}

BALANCED_CLOSING = "No single trait dominates, which keeps it versatile across many uses."


def score_personality(style: str, metrics: MetricValues) -> Personality:
    """Score the six traits and compose the emotional description."""
    scores = dict.fromkeys(TRAITS, TRAIT_BASELINE)

    _apply(scores, STYLE_DELTAS.get(style, {}))

    if metrics.x_height > HIGH_X_HEIGHT:
        _apply(scores, LARGE_X_HEIGHT_DELTAS)
    elif metrics.x_height < LOW_X_HEIGHT:
        _apply(scores, SMALL_X_HEIGHT_DELTAS)

    _apply(scores, CONTRAST_DELTAS.get(metrics.contrast, {}))
    _apply(scores, TERMINAL_DELTAS.get(metrics.stroke_terminals, {}))
    _apply(scores, SHAPE_DELTAS.get(metrics.shape, {}))

    fingerprint = metric_fingerprint(metrics)
    for index, trait in enumerate(TRAITS):
        scores[trait] += trait_jitter(fingerprint, index)

    traits = {trait: clamp(value, TRAIT_MIN, TRAIT_MAX) for trait, value in scores.items()}
    description = describe_personality(traits, style, metrics, fingerprint)
    return Personality(**traits, emotional_description=description)


def trait_jitter(fingerprint: int, index: int) -> int:
    """Per-trait offset in [-5, +4]."""
    return (fingerprint * (index + 1) * 7) % 10 - 5


def _apply(scores: dict[str, int], deltas: Deltas) -> None:
    for trait, delta in deltas.items():
        scores[trait] += delta


def describe_personality(
    traits: dict[str, int],
    style: str,
    metrics: MetricValues,
    fingerprint: int,
) -> str:
    """Compose the description from style, contrast or terminals, and extremes.

    The contrast clause is used for even fingerprints and the terminal clause
    for odd ones.
    """
    opening = STYLE_OPENINGS.get(style, STYLE_OPENINGS["sans-serif"])
    if fingerprint % 2 == 0:
        bucket = metrics.contrast.split(" (", 1)[0]
        middle = CONTRAST_CLAUSES.get(bucket, CONTRAST_CLAUSES["Medium"])
    else:
        middle = TERMINAL_CLAUSES.get(metrics.stroke_terminals, TERMINAL_CLAUSES["Rounded"])

    sentences = [f"This {style} typeface {opening}, {middle}."]

    # max()/min() return the first extreme, so ties keep the declared trait order
    highest = max(TRAITS, key=traits.__getitem__)
    lowest = min(TRAITS, key=traits.__getitem__)

    if traits[highest] > STRONG_TRAIT:
        sentences.append(HIGH_TRAIT_CLAUSES[highest])
    if traits[lowest] < WEAK_TRAIT:
        sentences.append(LOW_TRAIT_CLAUSES[lowest])
    if len(sentences) == 1:
        sentences.append(BALANCED_CLOSING)

    return " ".join(sentences)
