"""API routes for combining ingredients into grocery lists."""

from datetime import date

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from grocerylist.exceptions import InvalidDateRangeError
from grocerylist.logging_config import get_logger
from grocerylist.plan.collect import ingredients_by_date
from grocerylist.plan.shopping_list import add_grocery_items, combine_ingredients
from grocerylist.schemas import CalendarItem, GroceryItem, Ingredient, Recipe

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/groceries", tags=["groceries"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class CombineRequest(BaseModel):
    """Ingredients to combine, in recipe order."""

    ingredients: list[Ingredient] = Field(default_factory=list)


class CombineResponse(BaseModel):
    """Combined ingredients, one per distinct item."""

    ingredients: list[Ingredient]


class ByDateRequest(BaseModel):
    """Scheduled meals and the recipes they refer to."""

    start_date: date
    end_date: date
    calendar_items: list[CalendarItem] = Field(default_factory=list)
    recipes: list[Recipe] = Field(default_factory=list)


class AddGroceriesRequest(BaseModel):
    """Items to add to an existing grocery list."""

    existing: list[GroceryItem] = Field(default_factory=list)
    items: list[Ingredient] = Field(default_factory=list)


class GroceriesResponse(BaseModel):
    """Updated grocery list."""

    groceries: list[GroceryItem]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/combine", response_model=CombineResponse)
async def combine(request: CombineRequest) -> CombineResponse:
    """Merge duplicate ingredients, summing their quantities across units."""
    return CombineResponse(ingredients=combine_ingredients(request.ingredients))


@router.post("/by-date", response_model=CombineResponse)
async def combine_by_date(request: ByDateRequest) -> CombineResponse:
    """Combine the ingredients of every meal scheduled in a date range."""
    try:
        ingredients = ingredients_by_date(
            request.calendar_items,
            request.recipes,
            request.start_date,
            request.end_date,
        )
    except InvalidDateRangeError as e:
        logger.warning(str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.reason,
        ) from e

    return CombineResponse(ingredients=ingredients)


@router.post("/add", response_model=GroceriesResponse)
async def add_groceries(request: AddGroceriesRequest) -> GroceriesResponse:
    """Add ingredients to a grocery list, merging items already on it."""
    return GroceriesResponse(groceries=add_grocery_items(request.existing, request.items))
