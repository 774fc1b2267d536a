"""Grocery list aggregation and ingredient collection."""

from grocerylist.plan.collect import (
    dates_in_range,
    ingredients_by_date,
    ingredients_for_recipe_selection,
    ingredients_for_recipes,
    validate_date_range,
)
from grocerylist.plan.shopping_list import (
    add_grocery_items,
    combine_ingredients,
    display_quantity,
    group_by_category,
    remove_grocery_item,
    toggle_checked,
)

__all__ = [
    "add_grocery_items",
    "combine_ingredients",
    "dates_in_range",
    "display_quantity",
    "group_by_category",
    "ingredients_by_date",
    "ingredients_for_recipe_selection",
    "ingredients_for_recipes",
    "remove_grocery_item",
    "toggle_checked",
    "validate_date_range",
]
