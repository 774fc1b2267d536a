"""Collect ingredients from scheduled meals and selected recipes."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from grocerylist.config import get_settings
from grocerylist.exceptions import InvalidDateRangeError
from grocerylist.logging_config import get_logger
from grocerylist.plan.shopping_list import combine_ingredients, to_grocery_items
from grocerylist.schemas import CalendarItem, GroceryItem, Ingredient, Recipe

logger = get_logger(__name__)


def dates_in_range(start: date, end: date) -> list[date]:
    """List every day from start to end, inclusive. Empty if start is after end."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def validate_date_range(start: date, end: date, max_days: int | None = None) -> None:
    """
    Check that a date range can be collected.

    Raises:
        InvalidDateRangeError: If end is before start, or the range spans
            more than ``max_days`` days (default from settings).
    """
    if max_days is None:
        max_days = get_settings().max_date_range_days

    if end < start:
        raise InvalidDateRangeError(start, end, "end date must not be before start date")

    days_count = (end - start).days + 1
    if days_count > max_days:
        raise InvalidDateRangeError(start, end, f"maximum range is {max_days} days")


def ingredients_for_recipes(recipes: Iterable[Recipe]) -> list[Ingredient]:
    """Flatten the parsed ingredients of recipes, in recipe order."""
    return [ingredient for recipe in recipes for ingredient in recipe.ingredients_parsed]


def recipe_ids_by_date(
    calendar_items: Iterable[CalendarItem],
    start: date,
    end: date,
) -> list[str]:
    """Recipe ids scheduled between start and end, in calendar order. Duplicates are kept."""
    return [
        recipe_id
        for calendar_item in calendar_items
        if start <= calendar_item.date <= end
        for data in calendar_item.recipe_data
        for recipe_id in data.recipe_ids
    ]


def ingredients_by_date(
    calendar_items: Sequence[CalendarItem],
    recipes: Sequence[Recipe],
    start: date,
    end: date,
) -> list[Ingredient]:
    """
    Combined ingredients of every meal scheduled between start and end.

    A recipe scheduled twice contributes its ingredients twice. Recipe ids
    that no longer exist are skipped.

    Raises:
        InvalidDateRangeError: If the date range is reversed or too long.
    """
    validate_date_range(start, end)

    recipes_by_id = {recipe.id: recipe for recipe in recipes}
    scheduled: list[Recipe] = []
    for recipe_id in recipe_ids_by_date(calendar_items, start, end):
        recipe = recipes_by_id.get(recipe_id)
        if recipe is None:
            logger.debug(f"Skipping unknown recipe {recipe_id}")
            continue
        scheduled.append(recipe)

    logger.info(f"Collecting ingredients of {len(scheduled)} meals from {start} to {end}")
    return combine_ingredients(ingredients_for_recipes(scheduled))


def ingredients_for_recipe_selection(recipes: Iterable[Recipe]) -> list[GroceryItem]:
    """Combined ingredients of selected recipes, all pre-checked for adding to groceries."""
    combined = combine_ingredients(ingredients_for_recipes(recipes))
    return to_grocery_items(combined, is_checked=True)
