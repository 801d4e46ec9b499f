"""Unit resolution via the synonym table."""

from shoplist.parse.tables import PLURAL_UNITS, UNIT_LOOKUP

TRAILING_PUNCTUATION = ".,)"


def _lookup_key(token: str) -> str:
    key = token.lower()
    if key and key[-1] in TRAILING_PUNCTUATION:
        key = key[:-1]
    return key


def resolve_unit(token: str | None) -> str | None:
    """
    Map a unit word or abbreviation to its canonical unit.

    Case-insensitive; one trailing ".", "," or ")" is ignored.

    Examples:
        "Teaspoons" -> "tsp"
        "oz." -> "ounce"
        "handful" -> None
    """
    if not token:
        return None
    return UNIT_LOOKUP.get(_lookup_key(token))


def display_unit(token: str | None) -> str | None:
    """
    Resolve a unit for display next to a quantity.

    Same as resolve_unit, but a plural surface form of a spelled-out unit
    keeps its plural ("cups" -> "cups", "cup" -> "cup", "pounds" -> "lb").
    """
    canonical = resolve_unit(token)
    if canonical is None:
        return None
    plural = PLURAL_UNITS.get(canonical)
    if plural is not None and _lookup_key(token) == plural:
        return plural
    return canonical
