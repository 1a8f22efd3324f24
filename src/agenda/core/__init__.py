"""Functional core - pure business logic with no I/O."""

from .dates import Date, compare_date, today, add_days, add_months, add_years, is_within
from .errors import AgendaError, InvalidSelection, UnknownList, StoreError
from .items import Item, RepeatRule
from .recurrence import next_occurrence, advance
from .schedule import Schedule, Proximity, compare_items, sort_items, insert_item, reconcile, classify
from .session import Session, DEFAULT_LIST

__all__ = [
    # Dates
    "Date",
    "compare_date",
    "today",
    "add_days",
    "add_months",
    "add_years",
    "is_within",
    # Errors
    "AgendaError",
    "InvalidSelection",
    "UnknownList",
    "StoreError",
    # Items
    "Item",
    "RepeatRule",
    # Recurrence
    "next_occurrence",
    "advance",
    # Schedule
    "Schedule",
    "Proximity",
    "compare_items",
    "sort_items",
    "insert_item",
    "reconcile",
    "classify",
    # Session
    "Session",
    "DEFAULT_LIST",
]
