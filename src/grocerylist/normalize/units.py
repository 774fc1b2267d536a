"""Unit definitions and conversion between units of the same dimension."""

import math
import re
from dataclasses import dataclass
from enum import Enum


class Dimension(str, Enum):
    """Physical dimension a unit measures."""

    MASS = "mass"
    VOLUME = "volume"
    LENGTH = "length"


# Canonical base unit per dimension
BASE_UNITS: dict[Dimension, str] = {
    Dimension.MASS: "gram",
    Dimension.VOLUME: "liter",
    Dimension.LENGTH: "meter",
}


@dataclass(frozen=True)
class UnitDefinition:
    """A named unit and its multiplicative factor to the dimension's base unit."""

    name: str
    dimension: Dimension
    factor: float


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Mass conversions (base unit: gram)
MASS_UNITS: dict[str, float] = {
    "gram": 1.0,
    "kilogram": 1000.0,
    "ounce": 28.3495,
    "pound": 453.592,
}

# Volume conversions (base unit: liter)
VOLUME_UNITS: dict[str, float] = {
    "liter": 1.0,
    "milliliter": 0.001,
    "teaspoon": 0.00492892,
    "tablespoon": 0.0147868,
    "cup": 0.24,
    "pint": 0.473176,
    "quart": 0.946353,
    "gallon": 3.78541,
}

# Length conversions (base unit: meter)
LENGTH_UNITS: dict[str, float] = {
    "meter": 1.0,
    "centimeter": 0.01,
    "millimeter": 0.001,
    "inch": 0.0254,
    "foot": 0.3048,
    "yard": 0.9144,
    "mile": 1609.34,
}

UNITS: dict[str, UnitDefinition] = {
    name: UnitDefinition(name=name, dimension=dimension, factor=factor)
    for dimension, table in (
        (Dimension.MASS, MASS_UNITS),
        (Dimension.VOLUME, VOLUME_UNITS),
        (Dimension.LENGTH, LENGTH_UNITS),
    )
    for name, factor in table.items()
}

# Plain decimal quantity: optional sign, digits with optional fraction, optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


# =============================================================================
# Lookup Functions
# =============================================================================


def get_unit(name: str) -> UnitDefinition | None:
    """Look up a unit by its exact name."""
    return UNITS.get(name)


def is_known_unit(name: str) -> bool:
    return name in UNITS


def units_for(dimension: Dimension) -> list[str]:
    """List unit names of a dimension, base unit first."""
    return [name for name, unit in UNITS.items() if unit.dimension == dimension]


def parse_quantity(quantity_text: str) -> float | None:
    """
    Parse a decimal quantity string.

    Accepts plain ASCII decimals with an optional sign and exponent
    ("2", "-1.5", ".25", "1e3"); surrounding whitespace is ignored. Returns
    None for empty text, anything else ("1/2", "1_000", "inf") and values
    too large for a float.
    """
    text = quantity_text.strip() if isinstance(quantity_text, str) else ""
    if not DECIMAL_PATTERN.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None

    return value


# =============================================================================
# Conversion
# =============================================================================


def convert(quantity_text: str, from_unit: str, to_unit: str) -> float | None:
    """
    Convert a quantity from one unit to another of the same dimension.

    The value is first scaled to the dimension's base unit (gram, liter or
    meter) and then scaled down to the target unit. No rounding is applied.

    Returns:
        The converted value, or None when either unit is unknown, the
        quantity is not a finite number, the units measure different
        dimensions, or the result overflows.
    """
    source = UNITS.get(from_unit)
    target = UNITS.get(to_unit)
    value = parse_quantity(quantity_text)

    if source is None or target is None or value is None:
        return None

    if source.dimension != target.dimension:
        return None

    # Identity conversions are exact
    if source.name == target.name:
        return value

    base_value = value * source.factor
    result = base_value / target.factor
    if not math.isfinite(result):
        return None

    return result
