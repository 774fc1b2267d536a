"""API routes for units of measurement."""

from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel

from grocerylist.normalize.units import BASE_UNITS, Dimension, convert, units_for

router = APIRouter(prefix="/api/v1/units", tags=["units"])


class DimensionUnits(BaseModel):
    """Units available for one dimension."""

    dimension: Dimension
    base_unit: str
    units: list[str]


class ConversionResponse(BaseModel):
    """Result of a single conversion; null when the units are not convertible."""

    quantity: str
    from_unit: str
    to_unit: str
    result: float | None


@router.get("", response_model=list[DimensionUnits])
async def list_units() -> list[DimensionUnits]:
    """List all known units grouped by dimension."""
    return [
        DimensionUnits(dimension=dimension, base_unit=base_unit, units=units_for(dimension))
        for dimension, base_unit in BASE_UNITS.items()
    ]


@router.get("/convert", response_model=ConversionResponse)
async def convert_quantity(
    quantity: Annotated[str, Query(description="Decimal quantity to convert")],
    from_unit: Annotated[str, Query(description="Unit the quantity is expressed in")],
    to_unit: Annotated[str, Query(description="Unit to convert to")],
) -> ConversionResponse:
    """Convert a quantity between two units of the same dimension."""
    return ConversionResponse(
        quantity=quantity,
        from_unit=from_unit,
        to_unit=to_unit,
        result=convert(quantity, from_unit, to_unit),
    )
