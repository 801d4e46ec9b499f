"""Records produced by the ingredient parser."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ParsedIngredient:
    """A single ingredient line split into a quantity and an item name."""

    quantity: str = ""
    item: str = ""

    @property
    def is_empty(self) -> bool:
        """A record without an item contributes nothing to a shopping list."""
        return not self.item

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


# Shared result for lines that parse to nothing
EMPTY = ParsedIngredient()


@dataclass(frozen=True)
class QuantityMatch:
    """Quantity found at the head of a line plus the unconsumed remainder."""

    quantity: str
    rest: str
