"""Editing session over a schedule - pure state, no I/O."""

from dataclasses import dataclass, field

from .dates import Date
from .errors import InvalidSelection, UnknownList
from .items import Item
from .schedule import Schedule, insert_item, reconcile

DEFAULT_LIST = "Agenda"


@dataclass
class Session:
    """
    The schedule being edited plus the name of the active list.

    Items are addressed by their 1-based position in the active list, the
    same numbers the renderer prints.
    """

    schedule: Schedule = field(default_factory=dict)
    active: str = DEFAULT_LIST

    def __post_init__(self):
        self.schedule.setdefault(self.active, [])

    @classmethod
    def new(cls, default_list: str = DEFAULT_LIST) -> "Session":
        return cls(schedule={default_list: []}, active=default_list)

    @classmethod
    def resume(cls, schedule: Schedule | None, default_list: str = DEFAULT_LIST) -> "Session":
        """Start from a loaded schedule, or a fresh one if nothing was loaded."""
        if not schedule:
            return cls.new(default_list)
        return cls(schedule=schedule, active=default_list)

    @property
    def items(self) -> list[Item]:
        return self.schedule[self.active]

    def _replace(self, items: list[Item]) -> None:
        self.schedule[self.active] = items

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self.items):
            raise InvalidSelection(f"No item {index} in {self.active}")
        return index - 1

    def refresh(self, as_of: Date | None = None) -> list[Item]:
        """Reconcile the active list against today and return it."""
        self._replace(reconcile(self.items, as_of))
        return self.items

    def add(self, item: Item) -> None:
        self._replace(insert_item(self.items, item))

    def toggle(self, index: int) -> Item:
        """Flip completion of the item at a 1-based index."""
        pos = self._position(index)
        updated = self.items[pos].toggled()
        self.items[pos] = updated
        return updated

    def delete(self, index: int) -> Item:
        """Remove the item at a 1-based index and return it."""
        return self.items.pop(self._position(index))

    def list_names(self) -> list[str]:
        return sorted(self.schedule)

    def has_list(self, name: str) -> bool:
        return name in self.schedule

    def switch(self, name: str, create: bool = False) -> None:
        """Make another list active, optionally creating it."""
        if not name:
            raise InvalidSelection("List name cannot be empty")
        if name not in self.schedule:
            if not create:
                raise UnknownList(name)
            self.schedule[name] = []
        self.active = name
