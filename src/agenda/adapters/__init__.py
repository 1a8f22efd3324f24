"""Adapters - I/O implementations of ports."""

from .file_store import JsonScheduleStore

__all__ = [
    "JsonScheduleStore",
]
