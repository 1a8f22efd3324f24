"""Configuration management for Agenda."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.session import DEFAULT_LIST

logger = logging.getLogger(__name__)

AGENDA_HOME = Path(os.environ.get("AGENDA_HOME", Path.home() / ".agenda"))
CONFIG_FILE = AGENDA_HOME / "agenda.conf"
SCHEDULE_FILE = AGENDA_HOME / "schedule.json"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Agenda configuration."""

    schedule_file: Path = field(default_factory=lambda: SCHEDULE_FILE)
    default_list: str = DEFAULT_LIST
    color: bool = True


def _unquote(value: str) -> str:
    """Handle quoted values with inline comments: "value" # comment"""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                return value[1:end_quote]
            return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from agenda.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "schedule_file":
                if value:
                    config.schedule_file = Path(value).expanduser()
            case "default_list":
                if value:
                    config.default_list = value
            case "color":
                config.color = _parse_bool(key, value, config.color)

    return config
