"""Lexical normalization of raw ingredient lines."""

import re

from shoplist.parse.tables import UNICODE_FRACTIONS

# Bullets ("- ", "* ", "• ") or numbering ("1. ", "2) ") at the start of a line
LIST_PREFIX_RE = re.compile(r"^\s*(?:[-*•]\s+|\d+[.)]\s+)")
UNICODE_FRACTION_RE = re.compile(f"[{''.join(UNICODE_FRACTIONS)}]")
WHITESPACE_RE = re.compile(r"\s+")


def format_number(value: float) -> str:
    """
    Render a number the way it should appear in quantity text.

    Whole numbers lose their trailing ".0"; everything else uses the
    shortest representation that round-trips.

    Examples:
        2.0 -> "2"
        0.75 -> "0.75"
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def strip_list_prefix(line: str) -> str:
    """Remove a leading bullet or numbering marker."""
    return LIST_PREFIX_RE.sub("", line, count=1)


def replace_unicode_fractions(line: str) -> str:
    """Replace vulgar-fraction glyphs with a space and their decimal value."""
    return UNICODE_FRACTION_RE.sub(
        lambda match: f" {format_number(UNICODE_FRACTIONS[match.group()])}", line
    )


def normalize_spaces(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return WHITESPACE_RE.sub(" ", text).strip()


def normalize(line: str | None) -> str:
    """
    Normalize a raw ingredient line before quantity extraction.

    Examples:
        "- 2  cups flour" -> "2 cups flour"
        "1. ¾ cup milk" -> "0.75 cup milk"
        "1½ tsp salt" -> "1 0.5 tsp salt"
    """
    if not line:
        return ""
    return normalize_spaces(replace_unicode_fractions(strip_list_prefix(line)))
