"""Character set coverage: Latin ranges, numerals, symbols, punctuation, languages."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fontfeel.config import (
    BASIC_PUNCTUATION_CHARS,
    COVERAGE_RATIO,
    CURRENCY_CHARS,
    DEFAULT_CHARACTER_SET,
    EXTENDED_PUNCTUATION_CHARS,
    LANGUAGES_ENGLISH,
    LANGUAGES_LIMITED,
    LANGUAGES_WESTERN,
    LATIN_BASIC,
    LATIN_COMPLETE_TEMPLATE,
    LATIN_EXTENDED,
    LATIN_RANGES,
    NUMERAL_CHARS,
    NUMERALS_BOTH,
    NUMERALS_PROPORTIONAL,
    NUMERALS_TABULAR,
    PUNCTUATION_BASIC,
    PUNCTUATION_COMPLETE,
    SYMBOLS_BASIC,
    SYMBOLS_CURRENCY,
    TABULAR_MIN_DIGITS,
    UNKNOWN,
)
from fontfeel.font_source import ParsedFont
from fontfeel.schema import CharacterSet

logger = logging.getLogger(__name__)


def has_glyph(font: ParsedFont, char: str) -> bool:
    """True if `char` maps to a real glyph. Lookup errors count as missing."""
    try:
        return font.char_to_glyph(char) is not None
    except Exception as e:
        logger.debug("Glyph lookup for U+%04X failed: %s", ord(char), e)
        return False


def covers(font: ParsedFont, chars: Iterable[str]) -> bool:
    """True if at least COVERAGE_RATIO of `chars` resolve to glyphs."""
    chars = list(chars)
    if not chars:
        return False
    found = sum(1 for char in chars if has_glyph(font, char))
    return found >= COVERAGE_RATIO * len(chars)


def covers_range(font: ParsedFont, start: int, end: int) -> bool:
    """Coverage check over the inclusive codepoint range start..end."""
    return covers(font, (chr(code) for code in range(start, end + 1)))


def has_tabular_numerals(font: ParsedFont) -> bool:
    """Digits are tabular if at least five resolve and share one advance width."""
    widths: list[int] = []
    for digit in NUMERAL_CHARS:
        try:
            glyph = font.char_to_glyph(digit)
        except Exception as e:
            logger.debug("Glyph lookup for %r failed: %s", digit, e)
            continue
        if glyph is not None and glyph.advance_width:
            widths.append(glyph.advance_width)

    if len(widths) < TABULAR_MIN_DIGITS:
        return False
    return len(set(widths)) == 1


def survey_character_set(font: ParsedFont) -> CharacterSet:
    """Describe Latin, numeral, symbol, punctuation and language coverage.

    Falls back to DEFAULT_CHARACTER_SET if the survey fails as a whole.
    """
    try:
        return _survey(font)
    except Exception as e:
        logger.warning("Character set survey failed, using defaults: %s", e)
        return CharacterSet(**DEFAULT_CHARACTER_SET)


def _survey(font: ParsedFont) -> CharacterSet:
    ranges = {key: covers_range(font, start, end) for key, (start, end) in LATIN_RANGES.items()}
    basic = ranges["basic_latin"]
    supplement = ranges["latin_1_supplement"]
    extended_a = ranges["latin_extended_a"]
    extended_b = ranges["latin_extended_b"]

    if basic and supplement and extended_a and extended_b:
        latin = LATIN_COMPLETE_TEMPLATE.format(count=font.glyph_count)
    elif basic and supplement:
        latin = LATIN_EXTENDED
    elif basic:
        latin = LATIN_BASIC
    else:
        latin = UNKNOWN

    proportional = covers(font, NUMERAL_CHARS)
    tabular = has_tabular_numerals(font)
    if proportional and tabular:
        numerals = NUMERALS_BOTH
    elif tabular:
        numerals = NUMERALS_TABULAR
    elif proportional:
        numerals = NUMERALS_PROPORTIONAL
    else:
        numerals = UNKNOWN

    symbols = SYMBOLS_CURRENCY if covers(font, CURRENCY_CHARS) else SYMBOLS_BASIC

    basic_punctuation = covers(font, BASIC_PUNCTUATION_CHARS)
    if basic_punctuation and covers(font, EXTENDED_PUNCTUATION_CHARS):
        punctuation = PUNCTUATION_COMPLETE
    elif basic_punctuation:
        punctuation = PUNCTUATION_BASIC
    else:
        punctuation = UNKNOWN

    if basic and supplement and extended_a:
        languages = LANGUAGES_WESTERN
    elif basic and supplement:
        languages = LANGUAGES_LIMITED
    elif basic:
        languages = LANGUAGES_ENGLISH
    else:
        languages = UNKNOWN

    return CharacterSet(
        latin=latin,
        numerals=numerals,
        symbols=symbols,
        punctuation=punctuation,
        languages=languages,
    )
