"""Ports - interfaces/protocols for external dependencies."""

from .schedule_store import ScheduleStore

__all__ = [
    "ScheduleStore",
]
