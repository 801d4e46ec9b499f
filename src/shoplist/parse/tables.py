"""Fixed lookup tables for ingredient-line parsing.

Everything here is built once at import time and exposed read-only.
"""

from types import MappingProxyType

# =============================================================================
# Unit Synonyms
# =============================================================================

# Canonical unit -> surface forms that denote it
UNIT_SYNONYMS: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {
        "tsp": frozenset({"teaspoon", "teaspoons", "tsp", "t"}),
        "tbsp": frozenset({"tablespoon", "tablespoons", "tbsp", "tbs"}),
        "cup": frozenset({"cup", "cups"}),
        "pint": frozenset({"pint", "pints", "pt"}),
        "quart": frozenset({"quart", "quarts", "qt"}),
        "gallon": frozenset({"gallon", "gallons", "gal"}),
        "milliliter": frozenset({"milliliter", "milliliters", "ml"}),
        "liter": frozenset({"liter", "liters", "l"}),
        "ounce": frozenset({"ounce", "ounces", "oz"}),
        "lb": frozenset({"pound", "pounds", "lb", "lbs"}),
        "g": frozenset({"gram", "grams", "g"}),
        "kg": frozenset({"kilogram", "kilograms", "kg"}),
        "can": frozenset({"can", "cans"}),
        "jar": frozenset({"jar", "jars"}),
        "bottle": frozenset({"bottle", "bottles"}),
        "package": frozenset({"package", "packages", "pkg"}),
        "box": frozenset({"box", "boxes"}),
        "bag": frozenset({"bag", "bags"}),
        "carton": frozenset({"carton", "cartons"}),
        "sheet": frozenset({"sheet", "sheets"}),
        "inch": frozenset({"inch", "inches", "in"}),
    }
)


def _build_unit_lookup() -> MappingProxyType[str, str]:
    lookup: dict[str, str] = {}
    for canonical, synonyms in UNIT_SYNONYMS.items():
        for synonym in synonyms:
            lookup[synonym.lower()] = canonical
    return MappingProxyType(lookup)


# Lowercase surface form -> canonical unit
UNIT_LOOKUP: MappingProxyType[str, str] = _build_unit_lookup()

# Plural display forms for canonical units spelled out as words
PLURAL_UNITS: MappingProxyType[str, str] = MappingProxyType(
    {
        "cup": "cups",
        "pint": "pints",
        "quart": "quarts",
        "gallon": "gallons",
        "milliliter": "milliliters",
        "liter": "liters",
        "ounce": "ounces",
        "can": "cans",
        "jar": "jars",
        "bottle": "bottles",
        "package": "packages",
        "box": "boxes",
        "bag": "bags",
        "carton": "cartons",
        "sheet": "sheets",
        "inch": "inches",
    }
)

# Units recognised when written fused to a number, e.g. "400g"
FUSED_UNITS: tuple[str, ...] = ("g", "kg", "ml", "l", "oz", "lb", "lbs", "inch", "inches", "in")

# =============================================================================
# Numbers
# =============================================================================

NUM_WORDS: MappingProxyType[str, float] = MappingProxyType(
    {
        "a": 1,
        "an": 1,
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
        "ten": 10,
        "eleven": 11,
        "twelve": 12,
        "dozen": 12,
        "half": 0.5,
        "quarter": 0.25,
    }
)

# Number words accepted as a standalone leading quantity token
QUANTITY_WORDS: tuple[str, ...] = (
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "a",
    "an",
    "half",
    "quarter",
)

UNICODE_FRACTIONS: MappingProxyType[str, float] = MappingProxyType(
    {
        "¼": 1 / 4,
        "½": 1 / 2,
        "¾": 3 / 4,
        "⅓": 1 / 3,
        "⅔": 2 / 3,
        "⅛": 1 / 8,
        "⅜": 3 / 8,
        "⅝": 5 / 8,
        "⅞": 7 / 8,
    }
)

# =============================================================================
# Words Without Numeric Meaning
# =============================================================================

# Checked in order; "a pinch" must precede "pinch"
VAGUE_PHRASES: tuple[str, ...] = (
    "a pinch",
    "pinch",
    "to taste",
    "as needed",
    "few",
    "some",
    "several",
    "handful",
    "dash",
    "sprinkle",
)

PREPOSITIONS: frozenset[str] = frozenset(
    {
        "in",
        "with",
        "on",
        "for",
        "from",
        "into",
        "to",
        "of",
        "by",
        "at",
        "over",
        "under",
        "up",
        "without",
    }
)

DESCRIPTORS: tuple[str, ...] = (
    "chopped",
    "sliced",
    "minced",
    "peeled",
    "grated",
    "crushed",
    "ground",
    "drained",
    "fresh",
    "frozen",
    "boiled",
    "melted",
    "shredded",
    "softened",
)
