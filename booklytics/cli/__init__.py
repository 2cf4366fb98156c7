"""Booklytics CLI: Typer-based command-line interface.

Provides the ``booklytics`` command with subcommands for replaying the
demo library session, sending a one-off event, and listing event kinds.

All output uses Rich for formatted terminal display.
"""
