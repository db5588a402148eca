"""
Application Modules.

- core/: Configuration, logging, exceptions
- api/: Hub API transport, schemas and client
- cli/: Command-line client (Typer + Rich)
"""
