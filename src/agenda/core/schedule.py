"""Pure schedule logic: ordering, reconciliation and proximity - no I/O."""

from enum import Enum
from functools import cmp_to_key

from .dates import Date, compare_date, is_within, today
from .items import Item
from .recurrence import advance

Schedule = dict[str, list[Item]]


def compare_items(a: Item, b: Item) -> int:
    """
    Three-way comparison of items by date.

    Undated items sort after every dated item and tie with each other.
    """
    match (a.date, b.date):
        case (None, None):
            return 0
        case (None, _):
            return 1
        case (_, None):
            return -1
        case (x, y):
            return compare_date(x, y)


def sort_items(items: list[Item]) -> list[Item]:
    """Stable sort by date; same-date items keep their relative order."""
    return sorted(items, key=cmp_to_key(compare_items))


def insert_item(items: list[Item], item: Item) -> list[Item]:
    """Return a new list with the item placed after any existing same-date items."""
    return sort_items([*items, item])


def reconcile(items: list[Item], as_of: Date | None = None) -> list[Item]:
    """
    Advance or drop past-due items, then re-sort.

    Pure function - no I/O. Running it on an already reconciled list is a no-op.
    """
    as_of = as_of or today()
    survivors = []
    for item in items:
        if item.date is None or item.date >= as_of:
            survivors.append(item)
            continue
        advanced = advance(item, as_of)
        if advanced is not None:
            survivors.append(advanced)
    return sort_items(survivors)


class Proximity(Enum):
    """Urgency bucket used to pick a display marker."""

    COMPLETE = "complete"
    DUE_NOW = "due_now"
    DUE_SOON = "due_soon"
    DUE_WEEK = "due_week"
    NONE = "none"


# Checked in order, first match wins
PROXIMITY_WINDOWS = [
    (1, Proximity.DUE_NOW),
    (3, Proximity.DUE_SOON),
    (7, Proximity.DUE_WEEK),
]


def classify(item: Item, as_of: Date | None = None) -> Proximity:
    """Completion beats urgency; undated items have no urgency."""
    if item.complete:
        return Proximity.COMPLETE
    as_of = as_of or today()
    for days, bucket in PROXIMITY_WINDOWS:
        if is_within(item.date, days, as_of):
            return bucket
    return Proximity.NONE
