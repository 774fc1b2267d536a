"""Grocery list aggregation: combine recipe ingredients across units."""

__version__ = "0.1.0"
