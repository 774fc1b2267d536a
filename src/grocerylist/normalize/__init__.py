"""Units of measurement and conversion between them."""

from grocerylist.normalize.units import (
    BASE_UNITS,
    UNITS,
    Dimension,
    UnitDefinition,
    convert,
    get_unit,
    is_known_unit,
    parse_quantity,
    units_for,
)

__all__ = [
    "BASE_UNITS",
    "UNITS",
    "Dimension",
    "UnitDefinition",
    "convert",
    "get_unit",
    "is_known_unit",
    "parse_quantity",
    "units_for",
]
