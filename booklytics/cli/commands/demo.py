"""``booklytics demo``: replay a short library session through the sinks.

Adds two books on the list screen, deletes the first, then adds and reads
a book on the detail screen.  Every event goes through one CompositeSink
built from the configured sink types.
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from booklytics.config import settings
from booklytics.controllers import BookDetailController, BookListController
from booklytics.library import Library
from booklytics.models.book import Book
from booklytics.models.events import EventNaming
from booklytics.routing.factory import build_composite

console = Console()

DEMO_TITLES = ("I Am a Cat", "Sanshiro", "Kokoro")


def demo_cmd(
    sink: Optional[List[str]] = typer.Option(
        None,
        "--sink",
        "-s",
        help="Sink type to compose (repeatable): api, firebase.",
    ),
    naming: Optional[EventNaming] = typer.Option(
        None,
        "--naming",
        "-n",
        help="Wire naming: plain (bookAdded) or scoped (bookList_bookAdded).",
    ),
    prefix: Optional[str] = typer.Option(
        None,
        "--prefix",
        "-p",
        help="Prefix for every event name, e.g. 'Staging-'.",
    ),
) -> None:
    """Replay the demo library session through the configured sinks."""
    sink_types = sink or settings.sinks
    try:
        composite = build_composite(
            sink_types,
            console=console,
            naming=naming or settings.event_naming,
            prefix=settings.resolved_prefix if prefix is None else prefix,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--sink") from exc

    console.print(
        Panel(
            f"[bold]Booklytics Demo[/bold]\n\nSinks: {', '.join(sink_types)}",
            border_style="cyan",
            padding=(1, 2),
        )
    )

    library = Library()
    book_list = BookListController(library, composite)
    book_detail = BookDetailController(library, composite)

    first, second, third = (Book(name=title) for title in DEMO_TITLES)
    book_list.appeared()
    book_list.add_book(first)
    book_list.add_book(second)
    book_list.delete_book(0)
    book_detail.add_book(third)
    book_detail.read_book(1)

    console.print()
    console.print(
        f"[bold green]Demo complete:[/bold green] {len(library)} books left in the library"
    )
