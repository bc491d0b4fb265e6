"""Style classification: serif, sans-serif, script, decorative or monospace."""

from fontfeel.config import (
    DECORATIVE_NAME_KEYWORDS,
    DEFAULT_STYLE,
    IBM_CLASS_STYLES,
    PANOSE_FAMILY_TYPE,
    PANOSE_MONOSPACED,
    PANOSE_PROPORTION,
    PANOSE_SERIF_STYLE,
    SCRIPT_NAME_KEYWORDS,
    STYLE_DECORATIVE,
    STYLE_MONOSPACE,
    STYLE_SANS_SERIF,
    STYLE_SCRIPT,
    STYLE_SERIF,
)
from fontfeel.font_source import NameStrings, Os2Table, PostTable


def classify_style(names: NameStrings, os2: Os2Table | None, post: PostTable | None) -> str:
    """Return exactly one style label.

    Checks run top to bottom and the first hit wins: name keywords, PANOSE
    family type, PANOSE proportion, IBM font class, post.isFixedPitch.
    """
    style = style_from_name(names.style_text())
    if style:
        return style

    if os2 is not None:
        style = _style_from_panose(os2.panose)
        if style:
            return style

        style = _style_from_family_class(os2.family_class)
        if style:
            return style

    if post is not None and post.is_fixed_pitch:
        return STYLE_MONOSPACE

    return DEFAULT_STYLE


def style_from_name(text: str) -> str | None:
    """Infer a style from lower-cased name strings, or None."""
    text = text.lower()
    if "sans" in text and "serif" not in text:
        return STYLE_SANS_SERIF
    if "serif" in text and "sans" not in text:
        return STYLE_SERIF
    if any(kw in text for kw in SCRIPT_NAME_KEYWORDS):
        return STYLE_SCRIPT
    if any(kw in text for kw in DECORATIVE_NAME_KEYWORDS):
        return STYLE_DECORATIVE
    return None


def _style_from_panose(panose: tuple[int, ...]) -> str | None:
    # Family type: 2 = Latin text, 3 = script, 4 = decorative, 5 = pictorial
    family_type = panose[PANOSE_FAMILY_TYPE]
    if family_type == 3:
        return STYLE_SCRIPT
    if family_type in (4, 5):
        return STYLE_DECORATIVE
    if family_type == 2:
        serif_style = panose[PANOSE_SERIF_STYLE]
        if serif_style in (0, 11):
            return STYLE_SANS_SERIF
        if 2 <= serif_style <= 10:
            return STYLE_SERIF

    if panose[PANOSE_PROPORTION] == PANOSE_MONOSPACED:
        return STYLE_MONOSPACE
    return None


def _style_from_family_class(family_class: int) -> str | None:
    if not family_class:
        return None
    class_id = (family_class >> 8) & 0xFF
    return IBM_CLASS_STYLES.get(class_id)
