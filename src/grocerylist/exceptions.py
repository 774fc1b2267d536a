"""Exceptions raised by the grocery collection helpers."""

from datetime import date


class GroceryListError(Exception):
    """Base class for grocerylist errors."""


class InvalidDateRangeError(GroceryListError):
    """A calendar date range is reversed or too long to collect."""

    def __init__(self, start: date, end: date, reason: str):
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(f"Invalid date range {start.isoformat()}..{end.isoformat()}: {reason}")
