"""Domain exceptions."""


class AgendaError(Exception):
    """Base class for agenda errors."""


class InvalidSelection(AgendaError):
    """An item index or name that doesn't refer to anything."""


class UnknownList(AgendaError):
    """A list name that isn't in the schedule."""

    def __init__(self, name: str):
        super().__init__(f"Schedule does not exist: {name}")
        self.name = name


class StoreError(AgendaError):
    """The schedule could not be written to storage."""
