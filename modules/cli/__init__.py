"""
CLI Client Module.

Command-line client built with Typer for the hub check-in API.

Architecture:
- CLI is a thin presentation layer
- API access lives in modules.api
- CLI calls the hub API via HTTP (httpx)

Usage:
    hubcheck --help
    hubcheck checkin -n "working on X"
    hubcheck checkin --remove
    hubcheck checked-in -d 2024-01-15
"""
