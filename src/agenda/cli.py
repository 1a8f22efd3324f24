"""Agenda CLI - terminal personal agenda."""

import logging
import sys
from pathlib import Path

import click

from .adapters.file_store import JsonScheduleStore
from .commands import INVALID_CHOICE, MenuContext, run_menu, save_session
from .config import load_config
from .core.dates import Date
from .core.errors import InvalidSelection, UnknownList
from .core.items import Item, RepeatRule
from .core.session import Session
from .render import render_agenda


def open_session(ctx: click.Context, list_name: str | None = None) -> MenuContext:
    """Load the schedule and select a list. Missing or corrupt storage starts fresh."""
    store = JsonScheduleStore(ctx.obj["schedule_file"])
    config = ctx.obj["config"]
    schedule = store.load()
    if store.unreadable:
        click.echo("Couldn't open preexisting schedule.", err=True)
    session = Session.resume(schedule, config.default_list)
    if list_name:
        try:
            session.switch(list_name)
        except UnknownList as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    return MenuContext(session=session, store=store, color=config.color)


def _finish(app: MenuContext) -> None:
    if not save_session(app):
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--file",
    "schedule_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Schedule file to use",
)
@click.pass_context
def main(ctx, debug: bool, schedule_file: Path | None):
    """Agenda - terminal personal agenda."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    ctx.obj = {"config": config, "schedule_file": schedule_file or config.schedule_file}

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@main.command()
@click.pass_context
def menu(ctx):
    """Interactive agenda menu."""
    app = open_session(ctx)
    try:
        run_menu(app)
    finally:
        _finish(app)


@main.command()
@click.option("--list", "list_name", default=None, help="List to show")
@click.pass_context
def show(ctx, list_name: str | None):
    """Show a list once."""
    app = open_session(ctx, list_name)
    items = app.session.refresh()
    click.echo(render_agenda(app.session.active, items, color=app.color))
    _finish(app)


@main.command()
@click.argument("text")
@click.option("--date", "due", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Date (YYYY-MM-DD)")
@click.option(
    "--repeat",
    type=click.Choice([r.value for r in RepeatRule], case_sensitive=False),
    default=RepeatRule.NEVER.value,
    help="Repeat rule for dated items",
)
@click.option("--list", "list_name", default=None, help="List to add to")
@click.pass_context
def add(ctx, text: str, due, repeat: str, list_name: str | None):
    """Add an item."""
    app = open_session(ctx, list_name)
    item_date = Date.from_date(due.date()) if due else None
    rule = RepeatRule(repeat.lower()) if item_date else RepeatRule.NEVER
    app.session.add(Item(text=text, repeat=rule, date=item_date))
    _finish(app)
    click.echo(f"Added: {text}")


def _by_index(ctx: click.Context, index: int, list_name: str | None, action: str) -> Item:
    app = open_session(ctx, list_name)
    app.session.refresh()
    try:
        item = getattr(app.session, action)(index)
    except InvalidSelection:
        click.echo(INVALID_CHOICE, err=True)
        sys.exit(1)
    _finish(app)
    return item


@main.command()
@click.argument("index", type=int)
@click.option("--list", "list_name", default=None, help="List the item is in")
@click.pass_context
def toggle(ctx, index: int, list_name: str | None):
    """Toggle completion of item INDEX."""
    item = _by_index(ctx, index, list_name, "toggle")
    state = "done" if item.complete else "not done"
    click.echo(f"{item.text}: {state}")


@main.command()
@click.argument("index", type=int)
@click.option("--list", "list_name", default=None, help="List the item is in")
@click.pass_context
def delete(ctx, index: int, list_name: str | None):
    """Delete item INDEX."""
    item = _by_index(ctx, index, list_name, "delete")
    click.echo(f"Deleted: {item.text}")


@main.command()
@click.pass_context
def lists(ctx):
    """List the available lists."""
    session = open_session(ctx).session
    for name in session.list_names():
        marker = "*" if name == session.active else " "
        click.echo(f"{marker} {name}")
