"""Item-name cleanup: drop culinary descriptors and stray prepositions."""

import re

from shoplist.parse.normalizer import normalize_spaces
from shoplist.parse.tables import DESCRIPTORS, PREPOSITIONS

DESCRIPTOR_RE = re.compile(rf"\b(?:{'|'.join(DESCRIPTORS)})\b", re.IGNORECASE)
LEADING_OF_RE = re.compile(r"^of\s+", re.IGNORECASE)
TRAILING_SEPARATORS_RE = re.compile(r"[,;]+$")


def strip_leading_of(text: str) -> str:
    """Drop one leading "of " left behind by quantity extraction."""
    return LEADING_OF_RE.sub("", text.strip(), count=1).strip()


def clean_item_name(text: str) -> str:
    """
    Reduce an ingredient remainder to the item name.

    Descriptors are removed anywhere; prepositions are removed except
    in first position. Falls back to the input when nothing is left.

    Examples:
        "onions, sliced" -> "onions"
        "of fresh basil" -> "basil"
        "chopped" -> "chopped"
    """
    if not text:
        return text

    cleaned = DESCRIPTOR_RE.sub("", strip_leading_of(text)).strip()

    words = cleaned.split()
    kept = [word for idx, word in enumerate(words) if idx == 0 or word.lower() not in PREPOSITIONS]

    cleaned = normalize_spaces(" ".join(kept))
    cleaned = TRAILING_SEPARATORS_RE.sub("", cleaned).strip()

    return cleaned or text
