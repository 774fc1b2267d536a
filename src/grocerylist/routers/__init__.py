"""API routers for the grocerylist service."""

from grocerylist.routers.groceries import router as groceries_router
from grocerylist.routers.units import router as units_router

__all__ = [
    "groceries_router",
    "units_router",
]
