"""
Core Infrastructure.

Configuration, logging, and exceptions shared by the API client and the CLI.
"""
