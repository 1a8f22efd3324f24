"""Agenda item domain model - no I/O dependencies."""

from dataclasses import dataclass, replace
from enum import Enum

from .dates import Date


class RepeatRule(str, Enum):
    """What happens to an item once its date has passed."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"

    @classmethod
    def parse(cls, answer: str) -> "RepeatRule":
        """Parse a menu answer by its first letter. Anything unrecognized means never."""
        match answer.strip()[:1].lower():
            case "w":
                return cls.WEEKLY
            case "m":
                return cls.MONTHLY
            case "y":
                return cls.YEARLY
            case _:
                return cls.NEVER


@dataclass(frozen=True)
class Item:
    """A single agenda entry."""

    text: str
    complete: bool = False
    repeat: RepeatRule = RepeatRule.NEVER
    date: Date | None = None

    @property
    def is_dated(self) -> bool:
        return self.date is not None

    def toggled(self) -> "Item":
        return replace(self, complete=not self.complete)

    def moved_to(self, new_date: Date) -> "Item":
        """A fresh occurrence of this item on another date."""
        return replace(self, date=new_date, complete=False)
