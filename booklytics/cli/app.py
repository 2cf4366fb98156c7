"""Main Typer application: imports and registers all CLI commands.

Entry point: ``booklytics`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import typer
from rich.logging import RichHandler

from booklytics.cli.commands.demo import demo_cmd
from booklytics.cli.commands.events_cmd import events_cmd
from booklytics.cli.commands.send import send_cmd
from booklytics.config import settings


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


app = typer.Typer(
    name="booklytics",
    help="Booklytics: fan book-library analytics events out to many sinks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="demo", help="Replay a demo library session through the sinks.")(demo_cmd)
app.command(name="send", help="Send a single open event.")(send_cmd)
app.command(name="events", help="List known event kinds.")(events_cmd)


@app.callback()
def configure(
    log_level: Optional[LogLevel] = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Logging level (defaults to BOOKLYTICS_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=log_level.value if log_level is not None else settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
