"""JSON file schedule storage adapter."""

import json
import logging
import os
from pathlib import Path

from agenda.core.dates import Date
from agenda.core.errors import StoreError
from agenda.core.items import Item, RepeatRule
from agenda.core.schedule import Schedule

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def item_to_dict(item: Item) -> dict:
    return {
        "text": item.text,
        "complete": item.complete,
        "repeat": item.repeat.value,
        "date": (
            {"year": item.date.year, "month": item.date.month, "day": item.date.day}
            if item.date
            else None
        ),
    }


def _expect(value, kind: type, field: str):
    # bool is an int subclass, so it has to be ruled out explicitly
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TypeError(f"{field} must be {kind.__name__}, got {value!r}")
    return value


def item_from_dict(data: dict) -> Item:
    """Build an Item from its stored form. Raises KeyError/ValueError/TypeError on bad data."""
    raw_date = data.get("date")
    item_date = None
    if raw_date is not None:
        item_date = Date(
            _expect(raw_date["year"], int, "year"),
            _expect(raw_date["month"], int, "month"),
            _expect(raw_date["day"], int, "day"),
        )
    return Item(
        text=_expect(data["text"], str, "text"),
        complete=_expect(data.get("complete", False), bool, "complete"),
        repeat=RepeatRule(data.get("repeat", RepeatRule.NEVER.value)),
        date=item_date,
    )


class JsonScheduleStore:
    """
    JSON file schedule storage.

    Implements ScheduleStore protocol. The whole schedule lives in one file;
    list order and item order are kept exactly as given.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self.unreadable = False

    def load(self) -> Schedule | None:
        """Load the schedule. Returns None if the file is missing or malformed."""
        self.unreadable = False
        if not self.path.exists():
            logger.debug(f"No schedule at {self.path}")
            return None

        try:
            data = json.loads(self.path.read_text())
            lists = data["lists"]
            schedule = {
                str(name): [item_from_dict(entry) for entry in entries]
                for name, entries in lists.items()
            }
        except (OSError, json.JSONDecodeError, KeyError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable schedule {self.path}: {e}")
            self.unreadable = True
            return None

        logger.debug(f"Loaded {len(schedule)} list(s) from {self.path}")
        return schedule

    def save(self, schedule: Schedule) -> None:
        """Write the schedule atomically via a sibling temp file."""
        payload = {
            "version": FORMAT_VERSION,
            "lists": {name: [item_to_dict(i) for i in items] for name, items in schedule.items()},
        }
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, indent=2))
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            logger.error(f"Failed to write schedule {self.path}: {e}")
            raise StoreError(f"Couldn't write {self.path}: {e}") from e
        logger.debug(f"Saved {len(schedule)} list(s) to {self.path}")
