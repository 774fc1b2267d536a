"""Common data schemas for recipes, calendar items and grocery lists."""

from datetime import date

from pydantic import BaseModel, Field

INGREDIENT_CATEGORIES: list[str] = [
    "Herbs and Spices",
    "Condiments and Sauces",
    "Sugars and Sweeteners",
    "Fats and Oils",
    "Dairy and Eggs",
    "Grains and Cereals",
    "Vegetables and Fruits",
    "Proteins",
    "Beverages",
    "Nuts and Seeds",
    "Legumes",
    "Other",
]

DEFAULT_CATEGORY = "Other"


class Ingredient(BaseModel):
    """
    A single ingredient line of a recipe or grocery list.

    An empty ``quantity`` means the amount is unknown (not zero), and ``unit``
    is then empty as well. ``error`` is only meaningful for such blank
    quantities: it tells whether the most recent merge failed to reconcile
    units, as opposed to merely inheriting an earlier failure.
    """

    item: str
    quantity: str = ""
    unit: str = ""
    category: str = ""
    notes: str = ""
    error: bool = False

    @property
    def has_quantity(self) -> bool:
        """Check if the ingredient carries a concrete quantity."""
        return self.quantity != ""


class GroceryItem(Ingredient):
    """Ingredient as stored on a grocery list."""

    is_checked: bool = False


class Recipe(BaseModel):
    """Recipe with its parsed ingredients."""

    id: str
    title: str = ""
    servings: str = ""
    ingredients_parsed: list[Ingredient] = Field(default_factory=list)


class CalendarItemData(BaseModel):
    """A labelled group of recipes scheduled on a calendar day."""

    label: str | None = None
    recipe_ids: list[str] = Field(default_factory=list)


class CalendarItem(BaseModel):
    """All recipes scheduled on one day."""

    date: date
    recipe_data: list[CalendarItemData] = Field(default_factory=list)
