"""Terminal rendering of the agenda view."""

import click

from .core.dates import Date, today
from .core.items import Item
from .core.schedule import Proximity, classify

DATELESS_COLUMN = "----------"
CONTINUATION_COLUMN = "        |-"

# (marker, style kwargs) per proximity bucket
MARKERS: dict[Proximity, tuple[str, dict]] = {
    Proximity.COMPLETE: ("x", {"fg": "blue"}),
    Proximity.DUE_NOW: ("!", {"fg": "red", "bold": True}),
    Proximity.DUE_SOON: ("!", {"fg": "yellow", "bold": True}),
    Proximity.DUE_WEEK: ("!", {"fg": "green", "bold": True}),
    Proximity.NONE: (" ", {}),
}


def _style(text: str, color: bool, **styles) -> str:
    if not color or not styles:
        return text
    return click.style(text, **styles)


def format_header(list_name: str, as_of: Date, color: bool = True) -> list[str]:
    """List name banner followed by today's date."""
    return [
        _style(f"================= List: {list_name}", color, fg="white", bold=True),
        _style(f"{as_of} ====== Today's Date", color, fg="white", bold=True),
    ]


def format_marker(item: Item, as_of: Date, color: bool = True) -> str:
    marker, styles = MARKERS[classify(item, as_of)]
    return _style(marker, color, **styles)


def format_item_line(
    item: Item,
    number: int,
    as_of: Date,
    previous_date: Date | None,
    color: bool = True,
) -> str:
    """
    One agenda row: date column, [marker], two-digit index, text.

    The date is only printed when it differs from the row above; the header
    counts as a row dated today.
    """
    if item.date is None:
        column = DATELESS_COLUMN
    elif item.date == previous_date:
        column = CONTINUATION_COLUMN
    else:
        column = str(item.date)
    return f"{column} [{format_marker(item, as_of, color)}] {number:02d} {item.text}"


def render_agenda(
    list_name: str,
    items: list[Item],
    as_of: Date | None = None,
    color: bool = True,
) -> str:
    """Render the header and every item of a list into one block of text."""
    as_of = as_of or today()
    lines = format_header(list_name, as_of, color)
    previous = as_of
    for number, item in enumerate(items, start=1):
        lines.append(format_item_line(item, number, as_of, previous, color))
        previous = item.date if item.date is not None else as_of
    return "\n".join(lines)
