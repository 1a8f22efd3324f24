"""Recurrence engine - pure functions, no I/O."""

import logging

from .dates import Date, add_days, add_months, add_years, today
from .items import Item, RepeatRule

logger = logging.getLogger(__name__)


def next_occurrence(item: Item) -> Item | None:
    """
    The next occurrence of a past-due item, or None if it doesn't repeat.

    The input item is never modified; the new occurrence starts incomplete.
    """
    if item.date is None:
        return item

    match item.repeat:
        case RepeatRule.WEEKLY:
            return item.moved_to(add_days(item.date, 7))
        case RepeatRule.MONTHLY:
            return item.moved_to(add_months(item.date, 1))
        case RepeatRule.YEARLY:
            return item.moved_to(add_years(item.date, 1))
        case _:
            return None


def advance(item: Item, as_of: Date | None = None) -> Item | None:
    """
    Roll an item forward until it is no longer in the past.

    Returns None when a non-repeating item has expired. Undated and
    current items come back unchanged.
    """
    as_of = as_of or today()
    current: Item | None = item
    while current is not None and current.date is not None and current.date < as_of:
        current = next_occurrence(current)

    if current is None:
        logger.debug(f"Dropping expired item {item.text!r} ({item.date})")
    elif current is not item:
        logger.debug(f"Advanced {item.text!r} from {item.date} to {current.date}")
    return current
