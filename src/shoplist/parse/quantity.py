"""Quantity extraction from the head of a normalized ingredient line."""

import re

from shoplist.parse.models import QuantityMatch
from shoplist.parse.normalizer import format_number
from shoplist.parse.tables import FUSED_UNITS, NUM_WORDS, QUANTITY_WORDS, UNIT_LOOKUP

# Range separators are "-", "–" or "to"
RANGE_RE = re.compile(r"(.+?)\s*(?:-|–|to)\s*(.+)", re.IGNORECASE)
# Span consumed by a range: left side, separator, then the right-hand number
RANGE_SPAN_RE = re.compile(
    r"^.+?(?:-|–|to)\s*(?:\d+(?:\.\d+)?(?:/\d+)?\b|.+?\b)\s*", re.IGNORECASE
)
FUSED_RE = re.compile(
    rf"^([~≈]?\d+(?:\.\d+)?)({'|'.join(FUSED_UNITS)})\b",
    re.IGNORECASE,
)
SINGLE_RE = re.compile(
    rf"^([~≈]?\d+/\d+|[~≈]?[\d.]+(?:\s+\d+/\d+)?|{'|'.join(QUANTITY_WORDS)})\b",
    re.IGNORECASE,
)
FRACTION_RE = re.compile(r"(\d+)/(\d+)")
DECIMAL_RE = re.compile(r"\d+(?:\.\d+)?")

# Range detection only looks at the first few words
RANGE_WINDOW = 3


def parse_mixed_number(text: str) -> float | None:
    """
    Sum the numeric pieces of a mixed number.

    Pieces that are not a fraction, decimal, or number word contribute
    nothing. Returns None when the total is zero.

    Examples:
        "1 1/2" -> 1.5
        "two" -> 2.0
        "3 onions" -> 3.0
        "onions" -> None
    """
    total = 0.0
    for piece in text.split():
        if fraction := FRACTION_RE.fullmatch(piece):
            numerator, denominator = int(fraction.group(1)), int(fraction.group(2))
            if denominator:
                total += numerator / denominator
        elif DECIMAL_RE.fullmatch(piece):
            total += float(piece)
        else:
            total += NUM_WORDS.get(piece.lower(), 0)
    return total or None


def extract_range(candidate: str) -> str | None:
    """
    Parse a "<left> - <right>" range into "<left_value>-<right_value>".

    Examples:
        "2-3 onions" -> "2-3"
        "1 1/2 to 2" -> "1.5-2"
        "2 cups flour" -> None
    """
    match = RANGE_RE.search(candidate)
    if not match:
        return None
    low = parse_mixed_number(match.group(1))
    high = parse_mixed_number(match.group(2))
    if low is None or high is None:
        return None
    return f"{format_number(low)}-{format_number(high)}"


def _extract_fused(text: str) -> QuantityMatch | None:
    match = FUSED_RE.match(text)
    if not match:
        return None
    number, unit = match.group(1), match.group(2).lower()
    canonical = UNIT_LOOKUP.get(unit, unit)
    return QuantityMatch(f"{number} {canonical}", text[match.end() :].strip())


def _extract_single(text: str) -> QuantityMatch | None:
    match = SINGLE_RE.match(text)
    if not match:
        return None
    return QuantityMatch(match.group(1), text[match.end() :].strip())


def extract_quantity(text: str) -> QuantityMatch:
    """
    Split a leading quantity off a normalized line.

    Tries, in order: a numeric range, a number fused to a unit ("400g"),
    then a single fraction, decimal, mixed number, or number word.

    Examples:
        "2-3 onions" -> ("2-3", "onions")
        "400g chicken" -> ("400 g", "chicken")
        "1/2 tsp salt" -> ("1/2", "tsp salt")
        "salt" -> ("", "salt")
    """
    candidate = " ".join(text.split(" ")[:RANGE_WINDOW])
    if quantity := extract_range(candidate):
        return QuantityMatch(quantity, RANGE_SPAN_RE.sub("", text, count=1))

    return _extract_fused(text) or _extract_single(text) or QuantityMatch("", text)
