"""Schedule storage interface."""

from typing import Protocol

from agenda.core.schedule import Schedule


class ScheduleStore(Protocol):
    """Interface for persisting the whole schedule between runs."""

    def load(self) -> Schedule | None:
        """Load the schedule. Returns None if there is no usable stored schedule."""
        ...

    def save(self, schedule: Schedule) -> None:
        """Write the schedule, replacing what was stored. Raises StoreError on failure."""
        ...
