"""Pydantic v2 models for font analysis and comparison results."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from fontfeel.config import (
    MAX_PAIRINGS,
    MAX_USES,
    TRAIT_MAX,
    TRAIT_MIN,
    TRAITS,
    UNKNOWN,
    VALID_CONTRASTS,
    VALID_SHAPES,
)

StyleLabel = Literal["serif", "sans-serif", "script", "decorative", "monospace"]
FormatLabel = Literal["TrueType", "OpenType/CFF", "Unknown"]
TerminalLabel = Literal["None", "Rounded", "Flared", "Pointed", "Square"]
Sameness = Literal["Identical", "Different"]


class _Record(BaseModel):
    """Immutable record with camelCase aliases for serialized output."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json_dict(self) -> dict:
        """Dump to dict with camelCase keys."""
        return self.model_dump(by_alias=True)


class FontIdentity(_Record):
    """Descriptive metadata about the analyzed file."""

    name: str
    size: int
    mime_type: str
    last_modified: str = UNKNOWN
    version: str = UNKNOWN
    copyright: str = UNKNOWN
    manufacturer: str = UNKNOWN
    container: str = UNKNOWN


class FontMetrics(_Record):
    x_height: str
    cap_height: str
    ascender: str
    descender: str
    contrast: str
    stroke_terminals: TerminalLabel
    shape: str

    @field_validator("contrast")
    @classmethod
    def contrast_known(cls, v: str) -> str:
        if v not in VALID_CONTRASTS:
            msg = f"Unknown contrast bucket: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("shape")
    @classmethod
    def shape_known(cls, v: str) -> str:
        if v not in VALID_SHAPES:
            msg = f"Unknown shape description: {v!r}"
            raise ValueError(msg)
        return v


class Personality(_Record):
    """Six trait scores in [0, 100] and a generated description."""

    formality: int
    approachability: int
    gentleness: int
    sophistication: int
    traditionality: int
    playfulness: int
    emotional_description: str

    @field_validator(*TRAITS)
    @classmethod
    def trait_in_range(cls, v: int) -> int:
        if not TRAIT_MIN <= v <= TRAIT_MAX:
            msg = f"Trait score must be within {TRAIT_MIN}-{TRAIT_MAX}, got {v}"
            raise ValueError(msg)
        return v

    def traits(self) -> dict[str, int]:
        """Trait scores keyed by trait name, in declared order."""
        return {trait: getattr(self, trait) for trait in TRAITS}


class CharacterSet(_Record):
    latin: str
    numerals: str
    symbols: str
    punctuation: str
    languages: str


def _check_unique_capped(values: list[str], cap: int, field: str) -> list[str]:
    if len(set(values)) != len(values):
        msg = f"{field} contains duplicate entries"
        raise ValueError(msg)
    if len(values) > cap:
        msg = f"{field} has {len(values)} entries, exceeding {cap}"
        raise ValueError(msg)
    return values


class Recommendations(_Record):
    recommended_uses: list[str]
    not_recommended_uses: list[str]
    font_pairings: list[str]

    @field_validator("recommended_uses", "not_recommended_uses")
    @classmethod
    def uses_unique_capped(cls, v: list[str], info: ValidationInfo) -> list[str]:
        return _check_unique_capped(v, MAX_USES, info.field_name)

    @field_validator("font_pairings")
    @classmethod
    def pairings_unique_capped(cls, v: list[str]) -> list[str]:
        return _check_unique_capped(v, MAX_PAIRINGS, "font_pairings")


class FontAnalysisResult(_Record):
    """Complete characterization of one font."""

    identity: FontIdentity
    format: FormatLabel
    style: StyleLabel
    metrics: FontMetrics
    personality: Personality
    character_set: CharacterSet
    weight: str
    width: str
    recommendations: Recommendations

    @property
    def name(self) -> str:
        return self.identity.name


class MetricDifference(_Record):
    primary: str
    secondary: str
    difference: str


class TraitDifference(_Record):
    primary: int
    secondary: int
    difference: int


class ValueDifference(_Record):
    primary: str
    secondary: str
    difference: Sameness


class PairingRecommendations(_Record):
    headings_body: str
    contrast_pairing: str
    hierarchy_pairing: str


class FontComparisonResult(_Record):
    """Side-by-side comparison of two analyzed fonts."""

    primary_font: FontAnalysisResult
    secondary_font: FontAnalysisResult
    metrics: dict[str, MetricDifference]
    personality: dict[str, TraitDifference]
    character_set: dict[str, ValueDifference]
    general: dict[str, ValueDifference]
    compatibility_score: int
    pairing_recommendations: PairingRecommendations

    @field_validator("compatibility_score")
    @classmethod
    def score_in_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            msg = f"Compatibility score must be within 0-100, got {v}"
            raise ValueError(msg)
        return v
