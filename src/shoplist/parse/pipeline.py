"""Single-line and batch ingredient parsing."""

import concurrent.futures
import contextvars
from collections.abc import Sequence
from typing import Any

from shoplist.config import get_settings
from shoplist.logging_config import get_logger
from shoplist.parse.cleaner import clean_item_name, strip_leading_of
from shoplist.parse.exclusions import filter_exclusions, is_water
from shoplist.parse.models import EMPTY, ParsedIngredient, QuantityMatch
from shoplist.parse.normalizer import normalize
from shoplist.parse.quantity import extract_quantity
from shoplist.parse.units import display_unit

logger = get_logger(__name__)


def attach_unit(match: QuantityMatch) -> QuantityMatch:
    """
    Move a unit word following a bare quantity into the quantity.

    Only applies when the quantity is a single token; fused and
    mixed-number quantities are left alone.

    Examples:
        ("2", "cups flour") -> ("2 cups", "flour")
        ("2-3", "lbs. beef") -> ("2-3 lb", "beef")
        ("1 1/2", "cups flour") -> unchanged
    """
    if not match.quantity or " " in match.quantity:
        return match

    first, _, rest = match.rest.partition(" ")
    unit = display_unit(first)
    if unit is None:
        return match
    return QuantityMatch(f"{match.quantity} {unit}", rest)


def parse_ingredient(line: Any) -> ParsedIngredient:
    """
    Parse one free-text ingredient line into a quantity and an item.

    Never raises: unparseable, empty, or non-string input yields an
    empty record.
    """
    if not line or not isinstance(line, str):
        return EMPTY

    working = normalize(line)

    if (excluded := filter_exclusions(working)) is not None:
        logger.debug(f"Excluded ingredient line: {line!r}")
        return excluded

    match = attach_unit(extract_quantity(working))
    remainder = strip_leading_of(match.rest)

    # Catches "1 cup water", "water for boiling" after the quantity is gone
    if is_water(remainder):
        logger.debug(f"Dropped water line: {line!r}")
        return EMPTY

    return ParsedIngredient(quantity=match.quantity, item=clean_item_name(remainder))


def _coerce_lines(lines: Any) -> list[str] | None:
    if isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence):
        return None
    return [line if isinstance(line, str) else "" for line in lines]


def _keep_items(results: list[ParsedIngredient], total: int) -> list[ParsedIngredient]:
    kept = [result for result in results if not result.is_empty]
    logger.debug(f"Parsed {total} ingredient lines: kept={len(kept)}, dropped={total - len(kept)}")
    return kept


def parse_ingredients(lines: Any) -> list[ParsedIngredient]:
    """
    Parse a batch of ingredient lines, dropping records without an item.

    Non-string elements count as empty lines; input that is not a list
    or tuple of lines yields an empty list. Output keeps input order.
    """
    coerced = _coerce_lines(lines)
    if coerced is None:
        return []
    return _keep_items([parse_ingredient(line) for line in coerced], len(coerced))


def parse_ingredients_concurrently(
    lines: Any,
    max_workers: int | None = None,
) -> list[ParsedIngredient]:
    """
    Same contract as parse_ingredients, fanned out over a thread pool.

    Args:
        lines: Ingredient lines to parse.
        max_workers: Pool size. Defaults to the parser_max_workers setting.

    Returns:
        Parsed records with non-empty items, in input order.
    """
    coerced = _coerce_lines(lines)
    if coerced is None:
        return []

    # Worker threads do not inherit context variables such as the batch id
    context = contextvars.copy_context()

    def parse_in_context(line: str) -> ParsedIngredient:
        return context.copy().run(parse_ingredient, line)

    workers = max_workers or get_settings().parser_max_workers
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(parse_in_context, coerced))

    return _keep_items(results, len(coerced))
