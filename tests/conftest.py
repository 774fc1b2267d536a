"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from grocerylist.config import get_settings
from grocerylist.logging_config import clear_context
from grocerylist.schemas import CalendarItem, CalendarItemData, GroceryItem, Ingredient, Recipe

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


@pytest.fixture(autouse=True)
def reset_state():
    """Start every test with fresh settings and an empty logging context."""
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    clear_context()


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def pancakes():
    """Pancake recipe with metric and US units."""
    return Recipe(
        id="recipe-pancakes",
        title="Pancakes",
        servings="4",
        ingredients_parsed=[
            Ingredient(item="flour", quantity="250", unit="gram", category="Grains and Cereals"),
            Ingredient(item="milk", quantity="2", unit="cup", category="Dairy and Eggs"),
            Ingredient(
                item="sugar", quantity="2", unit="tablespoon", category="Sugars and Sweeteners"
            ),
            Ingredient(item="eggs", quantity="2", unit="", category="Dairy and Eggs"),
        ],
    )


@pytest.fixture
def bread():
    """Bread recipe sharing flour and milk with the pancakes."""
    return Recipe(
        id="recipe-bread",
        title="Bread",
        servings="8",
        ingredients_parsed=[
            Ingredient(item="flour", quantity="1", unit="kilogram", category="Grains and Cereals"),
            Ingredient(item="milk", quantity="120", unit="milliliter", category="Dairy and Eggs"),
            Ingredient(item="yeast", quantity="7", unit="gram", notes="instant"),
        ],
    )


@pytest.fixture
def calendar_items():
    """One week of scheduled meals, with a recipe id that no longer exists."""
    return [
        CalendarItem(
            date=date(2024, 3, 4),
            recipe_data=[CalendarItemData(label="Breakfast", recipe_ids=["recipe-pancakes"])],
        ),
        CalendarItem(
            date=date(2024, 3, 5),
            recipe_data=[
                CalendarItemData(label="Lunch", recipe_ids=["recipe-bread"]),
                CalendarItemData(label="Dinner", recipe_ids=["recipe-deleted"]),
            ],
        ),
        CalendarItem(
            date=date(2024, 3, 10),
            recipe_data=[CalendarItemData(recipe_ids=["recipe-pancakes"])],
        ),
    ]


@pytest.fixture
def grocery_list():
    """A grocery list with one checked item."""
    return [
        GroceryItem(item="flour", quantity="1", unit="kilogram", is_checked=True),
        GroceryItem(item="butter", quantity="250", unit="gram"),
    ]
