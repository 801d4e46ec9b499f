"""Short-circuit rules for lines that never reach a shopping list as-is."""

import re

from shoplist.parse.cleaner import clean_item_name, strip_leading_of
from shoplist.parse.models import EMPTY, ParsedIngredient
from shoplist.parse.tables import VAGUE_PHRASES

WATER_RE = re.compile(r"^water\b", re.IGNORECASE)
VAGUE_PHRASE_RES: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"^{re.escape(phrase)}\b", re.IGNORECASE) for phrase in VAGUE_PHRASES
)


def is_water(text: str) -> bool:
    """Water is never added to a shopping list."""
    return bool(WATER_RE.match(text.strip()))


def filter_exclusions(line: str) -> ParsedIngredient | None:
    """
    Apply the water and vague-quantity rules to a normalized line.

    Returns a final result when a rule applies, or None to continue
    with quantity extraction.

    Examples:
        "water" -> ParsedIngredient("", "")
        "a pinch of salt" -> ParsedIngredient("", "salt")
        "to taste water" -> ParsedIngredient("", "")
        "2 cups flour" -> None
    """
    if is_water(line):
        return EMPTY

    for pattern in VAGUE_PHRASE_RES:
        if pattern.match(line):
            remainder = strip_leading_of(pattern.sub("", line, count=1))
            if is_water(remainder):
                return EMPTY
            return ParsedIngredient(quantity="", item=clean_item_name(remainder))

    return None
