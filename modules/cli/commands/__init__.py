"""
CLI Commands.

Organized by domain/feature area.
"""

from modules.cli.commands.hub import checked_in, checkin, whoami

__all__ = [
    "checked_in",
    "checkin",
    "whoami",
]
