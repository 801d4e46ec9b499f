"""API routes for turning ingredient text into shopping-list entries."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from shoplist.config import Settings, get_settings
from shoplist.logging_config import LoggingContext, get_logger
from shoplist.parse import (
    ingredient_to_line,
    parse_ingredient,
    parse_ingredients,
    parse_ingredients_concurrently,
    split_raw_text,
)
from shoplist.schemas import (
    ImportTextRequest,
    IngredientOut,
    ParseBatchRequest,
    ParsedBatchResponse,
    ParseLineRequest,
    RecipeIngredientsRequest,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["ingredients"])


def _check_limit(count: int, limit: int) -> None:
    if count > limit:
        logger.warning(f"Rejected request with {count} items (limit {limit})")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Maximum {limit} items allowed per request. You have {count} items.",
        )


# =============================================================================
# Parsing Endpoints
# =============================================================================


@router.post("/ingredients/parse", response_model=IngredientOut)
async def parse_line(request: ParseLineRequest) -> IngredientOut:
    """
    Parse a single ingredient line.

    Always succeeds; a line that carries no shopping-list item comes back
    with an empty item.
    """
    return IngredientOut.model_validate(parse_ingredient(request.line))


@router.post("/ingredients/parse-batch", response_model=ParsedBatchResponse)
def parse_batch(
    request: ParseBatchRequest,
    settings: Settings = Depends(get_settings),
) -> ParsedBatchResponse:
    """
    Parse many ingredient lines, dropping those without an item.

    Runs in the FastAPI threadpool; the parser fan-out blocks until done.
    """
    _check_limit(len(request.lines), settings.max_batch_lines)

    with LoggingContext(batch_id=str(uuid.uuid4())):
        results = parse_ingredients_concurrently(request.lines)
        logger.info(f"Parsed batch: submitted={len(request.lines)}, kept={len(results)}")
        return ParsedBatchResponse.from_results(results, len(request.lines))


@router.post("/ingredients/import-text", response_model=ParsedBatchResponse)
async def import_text(
    request: ImportTextRequest,
    settings: Settings = Depends(get_settings),
) -> ParsedBatchResponse:
    """
    Parse pasted text into ingredients.

    Multi-line text is split per line, single-line text per comma.
    Duplicate lines are only parsed once.
    """
    lines = split_raw_text(request.text)
    _check_limit(len(lines), settings.max_import_items)

    with LoggingContext(batch_id=str(uuid.uuid4())):
        results = parse_ingredients(lines)
        logger.info(f"Imported text: lines={len(lines)}, kept={len(results)}")
        return ParsedBatchResponse.from_results(results, len(lines))


@router.post("/recipes/ingredients", response_model=ParsedBatchResponse)
async def parse_recipe_ingredients(
    request: RecipeIngredientsRequest,
    settings: Settings = Depends(get_settings),
) -> ParsedBatchResponse:
    """Parse a recipe's ingredient list, given as strings or name/quantity/notes objects."""
    lines = [ingredient_to_line(entry) for entry in request.ingredients]
    _check_limit(len(lines), settings.max_import_items)

    with LoggingContext(batch_id=str(uuid.uuid4())):
        results = parse_ingredients(lines)
        logger.info(f"Parsed recipe ingredients: lines={len(lines)}, kept={len(results)}")
        return ParsedBatchResponse.from_results(results, len(lines))
