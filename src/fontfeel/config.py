"""Constants and configuration for fontfeel."""

# Supported font files (by extension) and the MIME types reported for them
FONT_EXTENSIONS = (".ttf", ".otf", ".woff", ".woff2")
FONT_MIME_TYPES: dict[str, str] = {
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

UNKNOWN = "Unknown"
UNKNOWN_FONT_NAME = "Unknown Font"

# Styles
STYLE_SERIF = "serif"
STYLE_SANS_SERIF = "sans-serif"
STYLE_SCRIPT = "script"
STYLE_DECORATIVE = "decorative"
STYLE_MONOSPACE = "monospace"
VALID_STYLES = (STYLE_SERIF, STYLE_SANS_SERIF, STYLE_SCRIPT, STYLE_DECORATIVE, STYLE_MONOSPACE)
DEFAULT_STYLE = STYLE_SANS_SERIF

SCRIPT_NAME_KEYWORDS = ("script", "handwriting", "cursive", "brush", "calligraph")
DECORATIVE_NAME_KEYWORDS = ("deco", "display", "ornament", "fancy", "comic", "grunge")

# PANOSE byte positions read by the classifier and metric extractor
PANOSE_FAMILY_TYPE = 0
PANOSE_SERIF_STYLE = 1
PANOSE_PROPORTION = 3
PANOSE_CONTRAST_INDEX = 7
PANOSE_TERMINAL_INDEX = 8
PANOSE_MONOSPACED = 9

# IBM font class (high byte of sFamilyClass)
IBM_CLASS_STYLES: dict[int, str] = {
    2: STYLE_SERIF,
    3: STYLE_SERIF,
    4: STYLE_SERIF,
    5: STYLE_SERIF,
    8: STYLE_SANS_SERIF,
    9: STYLE_SCRIPT,
    10: STYLE_SCRIPT,
    12: STYLE_DECORATIVE,
}

# Container / outline formats
FORMAT_TRUETYPE = "TrueType"
FORMAT_CFF = "OpenType/CFF"
VALID_FORMATS = (FORMAT_TRUETYPE, FORMAT_CFF, UNKNOWN)

# Metric defaults in em, used only when neither tables nor glyphs give a value
DEFAULT_METRIC_VALUES: dict[str, float] = {
    "x_height": 0.5,
    "cap_height": 0.7,
    "ascender": 0.8,
    "descender": 0.2,
}

# Probe characters for glyph bounding-box measurement
X_HEIGHT_PROBE = "x"
CAP_HEIGHT_PROBE = "H"
ASCENDER_PROBE = "d"
DESCENDER_PROBE = "p"

# Contrast buckets
CONTRAST_NONE = "None (1.0)"
CONTRAST_MEDIUM = "Medium (3.5)"
CONTRAST_HIGH = "High (7.0)"
VALID_CONTRASTS = (CONTRAST_NONE, CONTRAST_MEDIUM, CONTRAST_HIGH)
DEFAULT_CONTRAST = CONTRAST_MEDIUM

# Stroke terminals
TERMINAL_NONE = "None"
TERMINAL_ROUNDED = "Rounded"
TERMINAL_FLARED = "Flared"
TERMINAL_POINTED = "Pointed"
TERMINAL_SQUARE = "Square"
VALID_TERMINALS = (TERMINAL_NONE, TERMINAL_ROUNDED, TERMINAL_FLARED, TERMINAL_POINTED, TERMINAL_SQUARE)
DEFAULT_TERMINAL = TERMINAL_ROUNDED
PANOSE_TERMINALS: dict[int, str] = {
    1: TERMINAL_NONE,
    2: TERMINAL_ROUNDED,
    3: TERMINAL_FLARED,
    4: TERMINAL_POINTED,
    5: TERMINAL_SQUARE,
    6: TERMINAL_ROUNDED,
    7: TERMINAL_FLARED,
    8: TERMINAL_POINTED,
}

# Shape descriptions (the rules are evaluated in this order)
SHAPE_LARGE_X_HEIGHT = "Large x-height, more open and readable"
SHAPE_SMALL_X_HEIGHT = "Small x-height, more elegant and traditional"
SHAPE_TALL_ASCENDERS = "Tall ascenders, more distinctive and elegant"
SHAPE_DEEP_DESCENDERS = "Deep descenders, more distinctive and elegant"
SHAPE_BALANCED = "Balanced proportions, versatile and readable"
VALID_SHAPES = (
    SHAPE_LARGE_X_HEIGHT,
    SHAPE_SMALL_X_HEIGHT,
    SHAPE_TALL_ASCENDERS,
    SHAPE_DEEP_DESCENDERS,
    SHAPE_BALANCED,
)
LARGE_X_TO_CAP_RATIO = 0.7
SMALL_X_TO_CAP_RATIO = 0.5
TALL_ASCENDER_TO_CAP_RATIO = 1.2
DEEP_DESCENDER_TO_CAP_RATIO = 0.5

# Character set survey
COVERAGE_RATIO = 0.7
LATIN_RANGES: dict[str, tuple[int, int]] = {
    "basic_latin": (0x0020, 0x007F),
    "latin_1_supplement": (0x00A0, 0x00FF),
    "latin_extended_a": (0x0100, 0x017F),
    "latin_extended_b": (0x0180, 0x024F),
}
NUMERAL_CHARS = tuple("0123456789")
TABULAR_MIN_DIGITS = 5
CURRENCY_CHARS = ("$", "€", "£", "¥", "¢")
BASIC_PUNCTUATION_CHARS = tuple(".,;:!?\"'()[]{}")
EXTENDED_PUNCTUATION_CHARS = (
    "-",
    "–",
    "—",
    "…",
    "<",
    ">",
    "“",
    "”",
    "‘",
    "’",
)

LATIN_COMPLETE_TEMPLATE = "Complete ({count} glyphs)"
LATIN_EXTENDED = "Extended (Western European)"
LATIN_BASIC = "Basic (ASCII only)"
NUMERALS_BOTH = "Proportional and Tabular"
NUMERALS_TABULAR = "Tabular"
NUMERALS_PROPORTIONAL = "Proportional"
SYMBOLS_CURRENCY = "Basic (+currency)"
SYMBOLS_BASIC = "Basic"
PUNCTUATION_COMPLETE = "Complete"
PUNCTUATION_BASIC = "Basic"
LANGUAGES_WESTERN = "Latin-based (Western European)"
LANGUAGES_LIMITED = "Latin-based (limited)"
LANGUAGES_ENGLISH = "English only"

VALID_NUMERALS = (NUMERALS_BOTH, NUMERALS_TABULAR, NUMERALS_PROPORTIONAL, UNKNOWN)
VALID_SYMBOLS = (SYMBOLS_CURRENCY, SYMBOLS_BASIC, UNKNOWN)
VALID_PUNCTUATION = (PUNCTUATION_COMPLETE, PUNCTUATION_BASIC, UNKNOWN)
VALID_LANGUAGES = (LANGUAGES_WESTERN, LANGUAGES_LIMITED, LANGUAGES_ENGLISH, UNKNOWN)

# Returned when the character survey fails as a whole
DEFAULT_CHARACTER_SET: dict[str, str] = {
    "latin": UNKNOWN,
    "numerals": UNKNOWN,
    "symbols": UNKNOWN,
    "punctuation": UNKNOWN,
    "languages": UNKNOWN,
}

# Weight classes: (inclusive upper bound, label)
WEIGHT_BANDS: tuple[tuple[int, str], ...] = (
    (100, "Thin"),
    (200, "Extra Light"),
    (300, "Light"),
    (400, "Regular"),
    (500, "Medium"),
    (600, "Semi Bold"),
    (700, "Bold"),
    (800, "Extra Bold"),
    (900, "Black"),
)
WEIGHT_OVERFLOW_LABEL = "Heavy"
DEFAULT_WEIGHT = "Regular (400)"

# Name keywords checked in order; longer phrases precede their substrings
WEIGHT_NAME_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("extra light", "extralight", "ultra light", "ultralight"), "Extra Light (200)"),
    (("semi bold", "semibold", "demi bold", "demibold"), "Semi Bold (600)"),
    (("extra bold", "extrabold", "ultra bold", "ultrabold"), "Extra Bold (800)"),
    (("thin", "hairline"), "Thin (100)"),
    (("light",), "Light (300)"),
    (("medium",), "Medium (500)"),
    (("bold",), "Bold (700)"),
    (("black", "heavy"), "Black (900)"),
    (("regular", "normal", "book"), "Regular (400)"),
)

WIDTH_NAMES: dict[int, str] = {
    1: "Ultra Condensed",
    2: "Extra Condensed",
    3: "Condensed",
    4: "Semi Condensed",
    5: "Normal",
    6: "Semi Expanded",
    7: "Expanded",
    8: "Extra Expanded",
    9: "Ultra Expanded",
}
WIDTH_CUSTOM_LABEL = "Custom"
DEFAULT_WIDTH = "Normal (5)"

WIDTH_NAME_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("ultra condensed", "ultracondensed"), "Ultra Condensed (1)"),
    (("extra condensed", "extracondensed"), "Extra Condensed (2)"),
    (("semi condensed", "semicondensed"), "Semi Condensed (4)"),
    (("condensed",), "Condensed (3)"),
    (("ultra expanded", "ultraexpanded"), "Ultra Expanded (9)"),
    (("extra expanded", "extraexpanded"), "Extra Expanded (8)"),
    (("semi expanded", "semiexpanded"), "Semi Expanded (6)"),
    (("expanded",), "Expanded (7)"),
)

# Personality
TRAITS = (
    "formality",
    "approachability",
    "gentleness",
    "sophistication",
    "traditionality",
    "playfulness",
)
TRAIT_BASELINE = 50
TRAIT_MIN = 0
TRAIT_MAX = 100
HIGH_X_HEIGHT = 0.6
LOW_X_HEIGHT = 0.4
STRONG_TRAIT = 70
WEAK_TRAIT = 30

# Recommendations
MAX_USES = 6
MAX_PAIRINGS = 4
FLAVOR_MULTIPLIERS = (3, 7)

# Comparison
COMPATIBILITY_BASELINE = 50
HEAVY_WEIGHT_LABELS = ("Bold", "Heavy", "Black")
X_HEIGHT_SIMILARITY_BANDS: tuple[tuple[float, int], ...] = (
    (0.10, 15),
    (0.20, 10),
    (0.30, 5),
)
FORMALITY_GAP = 30
