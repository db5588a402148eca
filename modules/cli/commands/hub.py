"""
Hub Commands.

Check in to the hub, remove a check-in, and see who is checked in.
"""

import asyncio
from collections.abc import Coroutine
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from modules.api.client import get_hub_client
from modules.api.schemas import HubVisit
from modules.cli.dates import resolve_date, today
from modules.core.exceptions import ApplicationError
from modules.core.logging import get_logger, log_with_source

logger = get_logger(__name__)
console = Console()
err_console = Console(stderr=True)


def _run(coro: Coroutine[Any, Any, None]) -> None:
    """Run a command coroutine, turning application errors into exit code 1."""
    try:
        asyncio.run(coro)
    except ApplicationError as e:
        log_with_source(logger, "cli", "error", "Command failed", code=e.code, error=e.message)
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)


def _print_notes(visit: HubVisit) -> None:
    if visit.display_notes:
        console.print(f"Notes: {escape(visit.display_notes)}")


def checkin(
    notes: Optional[str] = typer.Option(None, "--notes", "-n", help="Notes to add to your check-in"),
    remove: bool = typer.Option(False, "--remove", "-r", help="Remove your check-in instead of creating one"),
) -> None:
    """
    Check in to the hub (creates or updates your visit for today).

    Examples:
        hubcheck checkin
        hubcheck checkin -n "pairing on the parser"
        hubcheck checkin --remove
    """
    _run(_checkin(notes, remove))


async def _checkin(notes: str | None, remove: bool) -> None:
    """Async implementation of checkin command."""
    client = get_hub_client()

    try:
        me = await client.get_current_user()
        date = today()

        if remove:
            await client.delete_visit(me.id, date)
            log_with_source(logger, "cli", "info", "Check-in removed", person_id=me.id, date=date)
            console.print(f"Removed check-in for {date}")
            return

        # Only rewrite an existing visit when there are notes to add
        existing = await client.get_visit(me.id, date)
        if existing is not None and notes is None:
            console.print(f"Already checked in for {existing.date}")
            _print_notes(existing)
            return

        visit = await client.create_or_update_visit(me.id, date, notes)
        log_with_source(logger, "cli", "info", "Checked in", person_id=me.id, date=visit.date)
        console.print(f"Checked in for {visit.date}")
        _print_notes(visit)

    finally:
        await client.close()


def checked_in(
    date: Optional[str] = typer.Option(None, "--date", "-d", help="Date to check (defaults to today, format: YYYY-MM-DD)"),
) -> None:
    """
    View who is checked in (today by default).

    Examples:
        hubcheck checked-in
        hubcheck checked-in -d 2024-01-15
    """
    _run(_checked_in(date))


async def _checked_in(date: str | None) -> None:
    """Async implementation of checked-in command."""
    client = get_hub_client()

    try:
        date_str = today() if date is None else resolve_date(date)
        visits = await client.get_visits(date_str)
        _display_visits(date_str, visits)

    finally:
        await client.close()


def _display_visits(date: str, visits: list[HubVisit]) -> None:
    """Display the people checked in for a date."""
    if not visits:
        console.print(f"No one is checked in for {date}")
        return

    count = len(visits)
    noun = "person" if count == 1 else "people"
    console.print(f"Checked in for {date} ({count} {noun}):")
    for visit in visits:
        name = escape(visit.person.name)
        if visit.display_notes:
            console.print(f"  - {name} ({escape(visit.display_notes)})")
        else:
            console.print(f"  - {name}")


def whoami() -> None:
    """Show the profile that owns the configured token."""
    _run(_whoami())


async def _whoami() -> None:
    """Async implementation of whoami command."""
    client = get_hub_client()

    try:
        me = await client.get_current_user()
        console.print(f"{escape(me.name)} (id {me.id})")

    finally:
        await client.close()
