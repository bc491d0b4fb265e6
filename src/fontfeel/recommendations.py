"""Use-case recommendations and font pairing suggestions."""

from __future__ import annotations

from fontfeel.config import (
    CONTRAST_HIGH,
    CONTRAST_NONE,
    FLAVOR_MULTIPLIERS,
    HIGH_X_HEIGHT,
    LOW_X_HEIGHT,
    MAX_PAIRINGS,
    MAX_USES,
    STRONG_TRAIT,
    TERMINAL_POINTED,
    TERMINAL_ROUNDED,
    TERMINAL_SQUARE,
    WEAK_TRAIT,
)
from fontfeel.metrics import MetricValues, metric_fingerprint
from fontfeel.schema import Personality, Recommendations
from fontfeel.utils import dedupe_and_cap

# style -> (recommended, not recommended)
STYLE_USES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "serif": (
        (
            "Business documents and presentations",
            "Formal invitations",
            "Book covers and interior text",
            "Academic publications",
        ),
        (
            "Children's publications",
            "Casual social media content",
            "Mobile interfaces requiring compact text",
            "Display text at very small sizes",
        ),
    ),
    "sans-serif": (
        (
            "Website and mobile interfaces",
            "Corporate branding",
            "Information displays",
            "Modern publications",
        ),
        (
            "Traditional formal documents",
            "Luxury brand materials",
            "Classical literature",
            "Wedding invitations",
        ),
    ),
    "script": (
        ("Wedding invitations", "Certificates", "Luxury branding", "Greeting cards"),
        ("Long-form body text", "User interfaces", "Technical documentation", "Small size text"),
    ),
    "decorative": (
        ("Headlines and titles", "Posters and banners", "Logo design", "Short promotional text"),
        ("Body text", "Legal documents", "Technical content", "Mobile interfaces"),
    ),
    "monospace": (
        ("Code displays", "Technical documentation", "Tabular data", "Terminal interfaces"),
        ("Long-form reading", "Elegant branding", "Flowing text layouts", "Artistic typography"),
    ),
}

RECOMMENDED_FLAVOR_POOL = (
    "Packaging design",
    "Editorial pull quotes",
    "Event programmes",
    "Restaurant menus",
    "Museum and gallery labels",
    "Podcast and video thumbnails",
    "Annual reports",
    "Newsletter mastheads",
)

DISCOURAGED_FLAVOR_POOL = (
    "Dense data tables",
    "Road signage",
    "Captions on busy images",
    "Fine print and disclaimers",
    "Low-resolution e-ink displays",
    "All-caps paragraphs",
    "Form input fields",
)

# style -> body text, heading and UI candidates
PAIRING_DATABASE: dict[str, dict[str, tuple[str, ...]]] = {
    "serif": {
        "body": ("Open Sans", "Roboto", "Lato", "Source Sans Pro"),
        "headings": ("Montserrat", "Raleway", "Poppins"),
        "ui": ("Roboto", "Inter", "Open Sans"),
    },
    "sans-serif": {
        "body": ("Merriweather", "Georgia", "Lora", "PT Serif"),
        "headings": ("Playfair Display", "Libre Baskerville", "Crimson Text"),
        "ui": ("Roboto", "Open Sans", "Lato"),
    },
    "script": {
        "body": ("Montserrat", "Open Sans", "Roboto", "Lato"),
        "headings": ("Oswald", "Raleway", "Poppins"),
        "ui": ("Open Sans", "Roboto", "Source Sans Pro"),
    },
    "decorative": {
        "body": ("Roboto", "Open Sans", "Lato", "Source Sans Pro"),
        "headings": ("Montserrat", "Oswald", "Raleway"),
        "ui": ("Roboto", "Open Sans", "Inter"),
    },
    "monospace": {
        "body": ("Open Sans", "Roboto", "Source Sans Pro"),
        "headings": ("Montserrat", "Raleway", "Oswald"),
        "ui": ("Roboto", "Open Sans", "Lato"),
    },
}


def generate_recommendations(
    style: str,
    metrics: MetricValues,
    personality: Personality,
) -> Recommendations:
    """Build recommended / not recommended uses and pairing suggestions."""
    seeds = STYLE_USES.get(style, STYLE_USES["sans-serif"])
    recommended = list(seeds[0])
    discouraged = list(seeds[1])

    _add_metric_uses(metrics, recommended, discouraged)
    _add_personality_uses(personality, recommended, discouraged)

    fingerprint = metric_fingerprint(metrics)
    recommended.extend(flavor_entries(fingerprint, RECOMMENDED_FLAVOR_POOL))
    discouraged.extend(flavor_entries(fingerprint, DISCOURAGED_FLAVOR_POOL))

    return Recommendations(
        recommended_uses=dedupe_and_cap(recommended, MAX_USES),
        not_recommended_uses=dedupe_and_cap(discouraged, MAX_USES),
        font_pairings=suggest_pairings(style, personality),
    )


def _add_metric_uses(metrics: MetricValues, recommended: list[str], discouraged: list[str]) -> None:
    if metrics.x_height > HIGH_X_HEIGHT:
        recommended.append("Small-size UI text")
        recommended.append("Mobile screens")
    elif metrics.x_height < LOW_X_HEIGHT:
        discouraged.append("Small-size UI text")

    if metrics.contrast == CONTRAST_HIGH:
        recommended.append("Editorial headlines")
        discouraged.append("Low-resolution screens")
    elif metrics.contrast == CONTRAST_NONE:
        recommended.append("Signage and wayfinding")

    if metrics.stroke_terminals == TERMINAL_ROUNDED:
        recommended.append("Friendly brand identities")
    elif metrics.stroke_terminals == TERMINAL_POINTED:
        recommended.append("Fashion and editorial design")
    elif metrics.stroke_terminals == TERMINAL_SQUARE:
        recommended.append("Technical and industrial branding")

    shape = metrics.shape.lower()
    if "readable" in shape:
        recommended.append("Extended on-screen reading")
    elif "elegant" in shape:
        recommended.append("Premium print materials")


def _add_personality_uses(
    personality: Personality,
    recommended: list[str],
    discouraged: list[str],
) -> None:
    if personality.formality > STRONG_TRAIT:
        recommended.extend(("Formal business communications", "Legal documents"))
    elif personality.formality < WEAK_TRAIT:
        discouraged.append("Formal business communications")

    if personality.playfulness > STRONG_TRAIT:
        recommended.extend(("Children's content", "Casual social media"))
        discouraged.extend(("Legal documents", "Financial reports"))
    elif personality.playfulness < WEAK_TRAIT:
        discouraged.append("Children's content")

    if personality.sophistication > STRONG_TRAIT:
        recommended.extend(("Luxury branding", "High-end publications"))
    elif personality.sophistication < WEAK_TRAIT:
        discouraged.append("Luxury branding")

    if personality.approachability > STRONG_TRAIT:
        recommended.extend(("Educational materials", "Healthcare communications"))
    elif personality.approachability < WEAK_TRAIT:
        discouraged.append("Educational materials")


def flavor_entries(fingerprint: int, pool: tuple[str, ...]) -> list[str]:
    """Pick one or two pool entries at fingerprint * k mod len(pool)."""
    indices: list[int] = []
    for multiplier in FLAVOR_MULTIPLIERS:
        index = (fingerprint * multiplier) % len(pool)
        if index not in indices:
            indices.append(index)
    return [pool[index] for index in indices]


def suggest_pairings(style: str, personality: Personality) -> list[str]:
    """Suggest up to four companion fonts for the given style and personality."""
    category = PAIRING_DATABASE.get(style, PAIRING_DATABASE["serif"])
    body, headings, ui = category["body"], category["headings"], category["ui"]

    pairings: list[str] = []
    if personality.formality > STRONG_TRAIT:
        pairings.append(f"{body[0]} (for body text)")
        pairings.append(f"{headings[0]} (for headings)")
    elif personality.playfulness > STRONG_TRAIT:
        pairings.append(f"{body[1]} (for body text)")
        pairings.append(f"{headings[1]} (for complementary headings)")
    elif personality.sophistication > STRONG_TRAIT:
        pairings.append(f"{body[2]} (for body text)")
        pairings.append(f"{headings[2]} (for elegant headings)")
    else:
        pairings.append(f"{body[0]} (for body text)")
        pairings.append(f"{ui[0]} (for UI elements)")

    if not any("UI elements" in pairing for pairing in pairings):
        pairings.append(f"{ui[0]} (for UI elements)")

    if len(pairings) < MAX_PAIRINGS:
        versatile = body[3] if len(body) > 3 else body[0]
        pairings.append(f"{versatile} (for versatile use alongside)")

    return dedupe_and_cap(pairings, MAX_PAIRINGS)
