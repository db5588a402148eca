#!/usr/bin/env python3
"""
hubcheck CLI.

Check in to the Recurse Center hub and see who else is there.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                          # Show help

    python cli.py checkin                         # Check in for today
    python cli.py checkin -n "working on X"       # Check in (or update) with notes
    python cli.py checkin --remove                # Remove today's check-in
    python cli.py checked-in                      # Who is checked in today
    python cli.py checked-in -d 2024-01-15        # Who was checked in on a date
    python cli.py whoami                          # Show the token's profile

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message

The bearer token is read from RC_TOKEN (environment, config/.env or ./.env).
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from modules.cli.commands import checked_in, checkin, whoami
from modules.core.config import validate_project_root
from modules.core.logging import setup_logging

app = typer.Typer(
    name="hubcheck",
    help="hubcheck - Check in to the Recurse Center hub from the command line.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.command(name="checkin")(checkin)
app.command(name="checked-in")(checked_in)
app.command(name="whoami")(whoami)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    hubcheck - Check in to the Recurse Center hub from the command line.

    Requires RC_TOKEN to be set in the environment or a .env file.
    """
    validate_project_root()

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
