"""Pipeline orchestrator: font file -> FontAnalysisResult.

Ties together metric extraction, style classification, character set survey
and weight/width resolution, then scores personality and derives
recommendations from those outputs. This is the main entry point for analysis.
"""

import asyncio
import logging
from datetime import datetime
from pathlib import Path

from fontfeel.charset import survey_character_set
from fontfeel.classifier import classify_style
from fontfeel.config import (
    DEFAULT_MIME_TYPE,
    FONT_MIME_TYPES,
    FORMAT_CFF,
    FORMAT_TRUETYPE,
    UNKNOWN,
    UNKNOWN_FONT_NAME,
)
from fontfeel.font_source import FontAnalysisError, ParsedFont, load_font
from fontfeel.metrics import extract_metrics
from fontfeel.personality import score_personality
from fontfeel.recommendations import generate_recommendations
from fontfeel.schema import FontAnalysisResult, FontIdentity
from fontfeel.weight_width import resolve_weight, resolve_width

logger = logging.getLogger(__name__)


def analyze_font(font_path: str | Path) -> FontAnalysisResult:
    """Analyze a font file on disk.

    Raises:
        FontAnalysisError: If the file cannot be read or parsed.
    """
    path = Path(font_path)
    data = read_font_bytes(path)
    return analyze_font_bytes(data, **_file_identity(path))


async def analyze_font_async(font_path: str | Path) -> FontAnalysisResult:
    """Like analyze_font, but awaits the file read in a worker thread."""
    path = Path(font_path)
    data = await asyncio.to_thread(read_font_bytes, path)
    return analyze_font_bytes(data, **_file_identity(path))


def read_font_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        msg = f"Failed to read font file {path}: {e}"
        raise FontAnalysisError(msg) from e


def analyze_font_bytes(
    data: bytes,
    *,
    file_name: str | None = None,
    mime_type: str | None = None,
    last_modified: datetime | None = None,
) -> FontAnalysisResult:
    """Main analysis pipeline over an in-memory font.

    Steps:
    1. Parse the font (fatal on failure)
    2. Extract metrics, classify style, survey characters, resolve weight/width
    3. Score personality from style + metrics
    4. Generate recommendations from style + metrics + personality
    """
    font = load_font(data)
    try:
        identity = _build_identity(font, data, file_name, mime_type, last_modified)
        metrics = extract_metrics(font)
        style = classify_style(font.names, font.os2, font.post)
        character_set = survey_character_set(font)
        weight = resolve_weight(font.os2, font.names)
        width = resolve_width(font.os2, font.names)
        font_format = determine_format(font)
    finally:
        font.close()

    logger.info("Analyzed %s: %s, %s, %s", identity.name, style, weight, width)

    personality = score_personality(style, metrics)
    recommendations = generate_recommendations(style, metrics, personality)

    return FontAnalysisResult(
        identity=identity,
        format=font_format,
        style=style,
        metrics=metrics.to_schema(),
        personality=personality,
        character_set=character_set,
        weight=weight,
        width=width,
        recommendations=recommendations,
    )


def determine_format(font: ParsedFont) -> str:
    if font.outline_format == "truetype":
        return FORMAT_TRUETYPE
    if font.outline_format == "cff":
        return FORMAT_CFF
    return UNKNOWN


def _file_identity(path: Path) -> dict:
    """Identity keyword arguments derived from the file path."""
    try:
        last_modified = datetime.fromtimestamp(path.stat().st_mtime)
    except OSError:
        last_modified = None
    return {
        "file_name": path.name,
        "mime_type": FONT_MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE),
        "last_modified": last_modified,
    }


def _build_identity(
    font: ParsedFont,
    data: bytes,
    file_name: str | None,
    mime_type: str | None,
    last_modified: datetime | None,
) -> FontIdentity:
    names = font.names
    # Name: prefer the full name, fall back to the file name without extension
    name = names.full_name or (Path(file_name).stem if file_name else "") or UNKNOWN_FONT_NAME

    return FontIdentity(
        name=name,
        size=len(data),
        mime_type=mime_type or DEFAULT_MIME_TYPE,
        last_modified=last_modified.isoformat(timespec="seconds") if last_modified else UNKNOWN,
        version=names.version or UNKNOWN,
        copyright=names.copyright or UNKNOWN,
        manufacturer=names.manufacturer or UNKNOWN,
        container=font.container,
    )
