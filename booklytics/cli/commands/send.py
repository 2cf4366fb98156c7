"""``booklytics send NAME [KEY=VALUE ...]``: emit one open event."""

from __future__ import annotations

import re
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from booklytics.config import settings
from booklytics.models.events import AnalyticsEvent, Metadata
from booklytics.routing.factory import build_composite

console = Console()

_INT_RE = re.compile(r"^-?\d+$")


def parse_pairs(pairs: List[str]) -> Metadata:
    """Turn ``key=value`` strings into metadata; integer-looking values become ints.

    Raises
    ------
    typer.BadParameter
        If an item has no ``=`` or an empty key.
    """
    metadata: Metadata = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}")
        metadata[key] = int(value) if _INT_RE.match(value) else value
    return metadata


def send_cmd(
    name: str = typer.Argument(..., help="Event name."),
    pairs: Optional[List[str]] = typer.Argument(None, help="Metadata as KEY=VALUE."),
    sink: Optional[List[str]] = typer.Option(
        None, "--sink", "-s", help="Sink type to compose (repeatable)."
    ),
) -> None:
    """Send a single open event through the configured sinks."""
    metadata = parse_pairs(pairs or [])
    try:
        event = AnalyticsEvent(name=name, metadata=metadata)
    except ValidationError as exc:
        raise typer.BadParameter("event name must not be empty", param_hint="NAME") from exc
    try:
        composite = build_composite(
            sink or settings.sinks, console=console, prefix=settings.resolved_prefix
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--sink") from exc
    composite.log(event)
