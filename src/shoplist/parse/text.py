"""Turn pasted text and structured recipe ingredients into parser input lines."""

from collections.abc import Mapping
from typing import Any


def split_raw_text(text: Any) -> list[str]:
    """
    Split pasted text into candidate ingredient lines.

    Multi-line text is split on newlines; a single line is split on
    commas instead. Blank entries and exact duplicates are dropped,
    keeping the first occurrence.

    Examples:
        "2 eggs\\n1 cup milk" -> ["2 eggs", "1 cup milk"]
        "eggs, milk, eggs" -> ["eggs", "milk"]
    """
    if not isinstance(text, str):
        return []

    lines = [line.strip() for line in text.split("\n") if line.strip()]
    if len(lines) <= 1:
        lines = [item.strip() for item in text.split(",") if item.strip()]

    return list(dict.fromkeys(lines))


def ingredient_to_line(entry: Any) -> str:
    """
    Flatten a recipe ingredient into a single parser line.

    Accepts plain strings or mappings with "name" and optional
    "quantity" and "notes" keys.

    Examples:
        "2 eggs" -> "2 eggs"
        {"name": "flour", "quantity": "2 cups"} -> "2 cups flour"
        {"name": "eggs", "notes": "large"} -> "eggs (large)"
    """
    if isinstance(entry, str):
        return entry
    if not isinstance(entry, Mapping):
        return ""

    name = str(entry.get("name") or "").strip()
    if not name:
        return ""

    quantity = entry.get("quantity")
    notes = entry.get("notes")

    line = f"{quantity} {name}" if quantity else name
    if notes:
        line += f" ({notes})"
    return line
