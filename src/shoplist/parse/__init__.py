"""Parse free-text recipe ingredient lines into quantities and item names."""

from shoplist.parse.cleaner import clean_item_name
from shoplist.parse.exclusions import filter_exclusions
from shoplist.parse.models import ParsedIngredient, QuantityMatch
from shoplist.parse.normalizer import normalize
from shoplist.parse.pipeline import (
    attach_unit,
    parse_ingredient,
    parse_ingredients,
    parse_ingredients_concurrently,
)
from shoplist.parse.quantity import extract_quantity, extract_range, parse_mixed_number
from shoplist.parse.text import ingredient_to_line, split_raw_text
from shoplist.parse.units import display_unit, resolve_unit

__all__ = [
    "ParsedIngredient",
    "QuantityMatch",
    "attach_unit",
    "clean_item_name",
    "display_unit",
    "extract_quantity",
    "extract_range",
    "filter_exclusions",
    "ingredient_to_line",
    "normalize",
    "parse_ingredient",
    "parse_ingredients",
    "parse_ingredients_concurrently",
    "parse_mixed_number",
    "resolve_unit",
    "split_raw_text",
]
