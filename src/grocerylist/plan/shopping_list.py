"""Grocery list aggregation across recipes."""

import math
from collections.abc import Iterable, Sequence
from typing import TypeVar

from grocerylist.logging_config import get_logger
from grocerylist.normalize.units import convert, parse_quantity
from grocerylist.schemas import DEFAULT_CATEGORY, GroceryItem, Ingredient

logger = get_logger(__name__)

IngredientT = TypeVar("IngredientT", bound=Ingredient)

FAILED_QUANTITY_MESSAGE = "Failed to add quantities"


# =============================================================================
# Quantity Formatting
# =============================================================================


def round_quantity(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    rounded = math.floor(abs(value) * 100 + 0.5) / 100
    return math.copysign(rounded, value)


def format_quantity(value: float) -> str:
    """
    Encode a quantity as its shortest decimal text.

    Whole numbers drop the fractional part ("2", not "2.0").
    """
    if value == int(value):
        return str(int(value))
    return str(value)


# =============================================================================
# Ingredient Aggregation
# =============================================================================


def _merge(existing: IngredientT, incoming: Ingredient) -> IngredientT:
    """Fold one more record into an existing entry with the same item."""
    converted = convert(incoming.quantity, incoming.unit, existing.unit)
    current = parse_quantity(existing.quantity) if existing.has_quantity else None

    total = None
    if converted is not None and current is not None:
        total = current + converted
        if not math.isfinite(total * 100):
            total = None

    if total is None:
        # Blank quantities never recover; error reflects only this merge.
        error = converted is None or existing.has_quantity
        logger.debug(
            f"Cannot add {incoming.quantity!r} {incoming.unit!r} to "
            f"{existing.quantity!r} {existing.unit!r} for {existing.item!r} (error={error})"
        )
        return existing.model_copy(update={"quantity": "", "unit": "", "error": error})

    return existing.model_copy(update={"quantity": format_quantity(round_quantity(total))})


def combine_ingredients(ingredients: Iterable[IngredientT]) -> list[IngredientT]:
    """
    Combine ingredient records that share the same item name.

    Records are processed in order. The first record of each item keeps its
    position and unit; later records are converted into that unit and added,
    rounded to two decimals. When a quantity cannot be converted, or the item
    already lost its quantity, the entry's quantity and unit are blanked. The
    entry's ``error`` flag then tells whether this particular merge failed.

    Never raises for unconvertible data, and never mutates its inputs.

    Args:
        ingredients: Ingredient records in recipe order.

    Returns:
        One record per distinct item, in first-seen order.
    """
    combined: list[IngredientT] = []
    positions: dict[str, int] = {}
    merges = 0

    for ingredient in ingredients:
        index = positions.get(ingredient.item)
        if index is None:
            positions[ingredient.item] = len(combined)
            combined.append(ingredient)
            continue

        combined[index] = _merge(combined[index], ingredient)
        merges += 1

    logger.debug(
        f"Combined ingredients into {len(combined)} items ({merges} merges, "
        f"{sum(1 for i in combined if i.error)} with errors)"
    )
    return combined


# =============================================================================
# Grocery List Maintenance
# =============================================================================


def to_grocery_items(
    ingredients: Iterable[Ingredient],
    is_checked: bool = False,
) -> list[GroceryItem]:
    """Convert ingredient records to grocery items, keeping existing check marks."""
    items = []
    for ingredient in ingredients:
        if isinstance(ingredient, GroceryItem):
            items.append(ingredient)
        else:
            items.append(GroceryItem(**ingredient.model_dump(), is_checked=is_checked))
    return items


def add_grocery_items(
    existing: Sequence[GroceryItem],
    new_items: Iterable[Ingredient],
) -> list[GroceryItem]:
    """
    Add items to a grocery list, merging those already on it.

    Existing entries keep their position and check mark.
    """
    return combine_ingredients([*existing, *to_grocery_items(new_items)])


def remove_grocery_item(existing: Iterable[GroceryItem], item: str) -> list[GroceryItem]:
    """Remove every entry for an item."""
    return [grocery for grocery in existing if grocery.item != item]


def toggle_checked(existing: Iterable[GroceryItem], item: str) -> list[GroceryItem]:
    """Flip the check mark of an item."""
    return [
        grocery.model_copy(update={"is_checked": not grocery.is_checked})
        if grocery.item == item
        else grocery
        for grocery in existing
    ]


def group_by_category(ingredients: Iterable[IngredientT]) -> dict[str, list[IngredientT]]:
    """Group records by category in first-seen order. Blank categories go to 'Other'."""
    groups: dict[str, list[IngredientT]] = {}
    for ingredient in ingredients:
        category = ingredient.category or DEFAULT_CATEGORY
        groups.setdefault(category, []).append(ingredient)
    return groups


def display_quantity(ingredient: Ingredient) -> str:
    """Get human-readable quantity string."""
    if ingredient.error:
        return FAILED_QUANTITY_MESSAGE
    if not ingredient.has_quantity:
        return ""
    if ingredient.unit:
        return f"{ingredient.quantity} {ingredient.unit}"
    return ingredient.quantity
