"""Consistency checks for serialized (camelCase) font analysis results."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from fontfeel.config import (
    LANGUAGES_ENGLISH,
    LANGUAGES_LIMITED,
    LANGUAGES_WESTERN,
    LATIN_BASIC,
    LATIN_EXTENDED,
    MAX_PAIRINGS,
    MAX_USES,
    TRAIT_MAX,
    TRAIT_MIN,
    TRAITS,
    UNKNOWN,
    VALID_CONTRASTS,
    VALID_FORMATS,
    VALID_LANGUAGES,
    VALID_NUMERALS,
    VALID_PUNCTUATION,
    VALID_SHAPES,
    VALID_STYLES,
    VALID_SYMBOLS,
    VALID_TERMINALS,
)

REQUIRED_FIELDS = (
    "identity",
    "format",
    "style",
    "metrics",
    "personality",
    "characterSet",
    "weight",
    "width",
    "recommendations",
)
EM_PATTERN = re.compile(r"^\d+\.\d{2} em$")
LATIN_COMPLETE_PATTERN = re.compile(r"^Complete \(\d+ glyphs\)$")
CLASS_LABEL_PATTERN = re.compile(r"^[A-Z][A-Za-z ]* \(\d+\)$")

CHARACTER_SET_VOCABULARIES: dict[str, tuple[str, ...]] = {
    "numerals": VALID_NUMERALS,
    "symbols": VALID_SYMBOLS,
    "punctuation": VALID_PUNCTUATION,
    "languages": VALID_LANGUAGES,
}


def validate_analysis(data: dict[str, Any]) -> list[str]:
    """Run all checks on an analysis dict. Returns list of issues (empty = valid)."""
    issues: list[str] = []

    _check_schema(data, issues)
    _check_categories(data, issues)
    _check_metrics(data, issues)
    _check_personality(data, issues)
    _check_character_set(data, issues)
    _check_recommendations(data, issues)

    return issues


def validate_file(path: str) -> list[str]:
    """Load JSON from file path, then validate."""
    filepath = Path(path)

    if not filepath.exists():
        return [f"File not found: {path}"]

    try:
        raw = filepath.read_text(encoding="utf-8")
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return [f"Invalid JSON: {e}"]

    if not isinstance(data, dict):
        return ["Root element must be a JSON object"]

    return validate_analysis(data)


# --- Individual checks ---


def _check_schema(data: dict[str, Any], issues: list[str]) -> None:
    for field in REQUIRED_FIELDS:
        if field not in data:
            issues.append(f"Missing required field: '{field}'")


def _check_categories(data: dict[str, Any], issues: list[str]) -> None:
    style = data.get("style")
    if style is not None and style not in VALID_STYLES:
        issues.append(f"Invalid style: '{style}' (must be one of: {', '.join(VALID_STYLES)})")

    font_format = data.get("format")
    if font_format is not None and font_format not in VALID_FORMATS:
        issues.append(f"Invalid format: '{font_format}'")

    for field in ("weight", "width"):
        value = data.get(field)
        if value is not None and not CLASS_LABEL_PATTERN.match(str(value)):
            issues.append(f"Invalid {field} label: '{value}' (expected e.g. 'Bold (700)')")


def _check_metrics(data: dict[str, Any], issues: list[str]) -> None:
    metrics = data.get("metrics")
    if not isinstance(metrics, dict):
        return

    for field in ("xHeight", "capHeight", "ascender", "descender"):
        value = metrics.get(field)
        if not isinstance(value, str) or not EM_PATTERN.match(value):
            issues.append(f"Metric '{field}' must look like '0.52 em', got {value!r}")

    if metrics.get("contrast") not in VALID_CONTRASTS:
        issues.append(f"Invalid contrast: {metrics.get('contrast')!r}")
    if metrics.get("strokeTerminals") not in VALID_TERMINALS:
        issues.append(f"Invalid stroke terminals: {metrics.get('strokeTerminals')!r}")
    if metrics.get("shape") not in VALID_SHAPES:
        issues.append(f"Invalid shape: {metrics.get('shape')!r}")


def _check_personality(data: dict[str, Any], issues: list[str]) -> None:
    personality = data.get("personality")
    if not isinstance(personality, dict):
        return

    for trait in TRAITS:
        value = personality.get(trait)
        if not isinstance(value, int) or isinstance(value, bool):
            issues.append(f"Trait '{trait}' must be an integer, got {value!r}")
        elif not TRAIT_MIN <= value <= TRAIT_MAX:
            issues.append(f"Trait '{trait}' out of range {TRAIT_MIN}-{TRAIT_MAX}: {value}")

    if not personality.get("emotionalDescription"):
        issues.append("Personality is missing its emotional description")


def _check_character_set(data: dict[str, Any], issues: list[str]) -> None:
    character_set = data.get("characterSet")
    if not isinstance(character_set, dict):
        return

    latin = character_set.get("latin")
    if latin not in (LATIN_EXTENDED, LATIN_BASIC, UNKNOWN) and not (
        isinstance(latin, str) and LATIN_COMPLETE_PATTERN.match(latin)
    ):
        issues.append(f"Invalid latin coverage: {latin!r}")

    for field, vocabulary in CHARACTER_SET_VOCABULARIES.items():
        value = character_set.get(field)
        if value not in vocabulary:
            issues.append(f"Invalid {field} coverage: {value!r}")

    # Language support can never exceed Latin coverage
    languages = character_set.get("languages")
    if latin == UNKNOWN and languages in (LANGUAGES_ENGLISH, LANGUAGES_LIMITED, LANGUAGES_WESTERN):
        issues.append(f"Languages '{languages}' claimed without Basic Latin coverage")


def _check_recommendations(data: dict[str, Any], issues: list[str]) -> None:
    recommendations = data.get("recommendations")
    if not isinstance(recommendations, dict):
        return

    caps = {
        "recommendedUses": MAX_USES,
        "notRecommendedUses": MAX_USES,
        "fontPairings": MAX_PAIRINGS,
    }
    for field, cap in caps.items():
        values = recommendations.get(field)
        if not isinstance(values, list):
            issues.append(f"Recommendations '{field}' must be a list")
            continue
        if len(values) > cap:
            issues.append(f"Recommendations '{field}' has {len(values)} entries (max {cap})")
        duplicates = sorted({v for v in values if values.count(v) > 1})
        if duplicates:
            issues.append(f"Recommendations '{field}' has duplicates: {', '.join(duplicates)}")
