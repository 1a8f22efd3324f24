"""Interactive menu commands and their dispatch table."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import click

from .core.dates import Date, today
from .core.errors import InvalidSelection, StoreError
from .core.items import Item, RepeatRule
from .core.session import Session
from .ports.schedule_store import ScheduleStore
from .render import render_agenda

logger = logging.getLogger(__name__)

INVALID_CHOICE = "Invalid choice."
WRITE_FAILED = "Couldn't write changes to schedule."


class Command(Enum):
    """Menu entries as (key, label)."""

    ADD = ("A", "Add item")
    TOGGLE = ("T", "Toggle completion")
    DELETE = ("D", "Delete item")
    REFRESH = ("R", "Refresh screen")
    WRITE = ("W", "Write schedule")
    SWITCH = ("S", "Change schedule")
    QUIT = ("Q", "Quit")

    @property
    def key(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    @classmethod
    def parse(cls, text: str) -> "Command | None":
        """Match on the first character, case-insensitively."""
        first = text.strip()[:1].upper()
        for command in cls:
            if command.key == first:
                return command
        return None


@dataclass
class MenuContext:
    """Everything a menu command may touch."""

    session: Session
    store: ScheduleStore
    color: bool = True
    as_of: Date | None = None

    def today(self) -> Date:
        return self.as_of or today()


def save_session(ctx: MenuContext) -> bool:
    """Persist the schedule; report failure instead of raising."""
    try:
        ctx.store.save(ctx.session.schedule)
    except StoreError:
        click.echo(WRITE_FAILED, err=True)
        return False
    return True


def read_item(as_of: Date) -> Item | None:
    """Ask for a whole item. Returns None if the user doesn't confirm."""
    item_date = None
    repeat = RepeatRule.NEVER
    dated = click.prompt("Date [Yn]", default="", show_default=False)
    if dated.strip().lower() != "n":
        repeat = RepeatRule.parse(
            click.prompt(
                "Repeat [w]eekly, repeat [m]onthly, repeat [y]early, [N]ever repeat",
                default="",
                show_default=False,
            )
        )
        year = click.prompt("Year", default=as_of.year, type=int)
        month = click.prompt("Month", default=as_of.month, type=int)
        day = click.prompt("Day", default=as_of.day, type=int)
        item_date = Date(year, month, day)

    text = click.prompt("Text", default="", show_default=False)
    if not click.confirm("Confirm", default=False):
        return None
    return Item(text=text, repeat=repeat, date=item_date)


def _add(ctx: MenuContext) -> bool:
    item = read_item(ctx.today())
    if item is not None:
        ctx.session.add(item)
        logger.debug(f"Added {item.text!r} to {ctx.session.active}")
    return True


def _with_index(action: Callable[[int], Item]) -> None:
    index = click.prompt("Item", type=int, default=0, show_default=False)
    try:
        action(index)
    except InvalidSelection:
        click.echo(INVALID_CHOICE)


def _toggle(ctx: MenuContext) -> bool:
    _with_index(ctx.session.toggle)
    return True


def _delete(ctx: MenuContext) -> bool:
    _with_index(ctx.session.delete)
    return True


def _refresh(ctx: MenuContext) -> bool:
    return True


def _write(ctx: MenuContext) -> bool:
    save_session(ctx)
    return True


def _switch(ctx: MenuContext) -> bool:
    session = ctx.session
    click.echo("Available lists are:")
    for name in session.list_names():
        click.echo(f"    {name}")
    name = click.prompt("Change list to", default="", show_default=False).strip()
    if not name:
        click.echo(INVALID_CHOICE)
        return True
    if session.has_list(name):
        session.switch(name)
    elif click.confirm("Schedule does not exist!  Do you want to create it?", default=False):
        session.switch(name, create=True)
    return True


def _quit(ctx: MenuContext) -> bool:
    return False


# Each handler returns False to end the menu loop
HANDLERS: dict[Command, Callable[[MenuContext], bool]] = {
    Command.ADD: _add,
    Command.TOGGLE: _toggle,
    Command.DELETE: _delete,
    Command.REFRESH: _refresh,
    Command.WRITE: _write,
    Command.SWITCH: _switch,
    Command.QUIT: _quit,
}


def format_menu() -> str:
    return "\n".join(f"{c.key}) {c.label}" for c in Command)


def dispatch(ctx: MenuContext, command: Command) -> bool:
    return HANDLERS[command](ctx)


def run_menu(ctx: MenuContext) -> None:
    """Redraw, read a choice and dispatch it until the user quits."""
    while True:
        items = ctx.session.refresh(ctx.as_of)
        click.clear()
        click.echo(render_agenda(ctx.session.active, items, ctx.today(), ctx.color))
        click.echo(format_menu())
        command = Command.parse(click.prompt("Choice", default="", show_default=False))
        if command is None:
            click.echo(INVALID_CHOICE)
            continue
        if not dispatch(ctx, command):
            break
