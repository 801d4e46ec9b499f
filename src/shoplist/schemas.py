"""Request and response schemas for the ingredient parsing API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shoplist.parse import ParsedIngredient


class IngredientOut(BaseModel):
    """A parsed ingredient ready to become a shopping-list item."""

    model_config = ConfigDict(from_attributes=True)

    quantity: str = ""
    item: str = ""


class ParseLineRequest(BaseModel):
    """Request to parse a single ingredient line."""

    line: str = ""


class ParseBatchRequest(BaseModel):
    """Request to parse a batch of ingredient lines."""

    lines: list[Any] = Field(default_factory=list, description="Raw ingredient lines")


class ImportTextRequest(BaseModel):
    """Request to parse pasted recipe or list text."""

    text: str = Field(description="Newline- or comma-separated ingredients")


class RecipeIngredientsRequest(BaseModel):
    """Request to parse a recipe's ingredients (strings or name/quantity/notes objects)."""

    ingredients: list[str | dict[str, Any]] = Field(default_factory=list)


class ParsedBatchResponse(BaseModel):
    """Parsed ingredients with counts of what was kept and dropped."""

    ingredients: list[IngredientOut]
    total: int
    dropped: int

    @classmethod
    def from_results(cls, results: list[ParsedIngredient], submitted: int) -> "ParsedBatchResponse":
        return cls(
            ingredients=[IngredientOut.model_validate(result) for result in results],
            total=len(results),
            dropped=submitted - len(results),
        )
