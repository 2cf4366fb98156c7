"""Build a CompositeSink from sink type names ("api", "firebase", ...)."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console

from booklytics.models.events import EventNaming
from booklytics.routing.composite import CompositeSink, compose
from booklytics.routing.sinks import BaseSink
from booklytics.routing.sinks.api import ApiSink
from booklytics.routing.sinks.firebase import FirebaseSink
from booklytics.routing.sinks.memory import MemorySink
from booklytics.routing.transport import ConsoleTransport

SINK_TYPES = ("api", "firebase", "memory")


def build_sink(
    sink_type: str,
    console: Console | None = None,
    naming: EventNaming = EventNaming.PLAIN,
    prefix: str = "",
) -> BaseSink:
    """Create one sink by type name.

    Raises
    ------
    ValueError
        If *sink_type* is not one of ``SINK_TYPES``.
    """
    if sink_type == "api":
        return ApiSink(ConsoleTransport(console), prefix=prefix, naming=naming)
    if sink_type == "firebase":
        return FirebaseSink(console)
    if sink_type == "memory":
        return MemorySink()
    raise ValueError(
        f"Unknown sink type {sink_type!r}; expected one of {', '.join(SINK_TYPES)}"
    )


def build_composite(
    sink_types: Iterable[str],
    console: Console | None = None,
    naming: EventNaming = EventNaming.PLAIN,
    prefix: str = "",
) -> CompositeSink:
    """Compose one sink per type name, in the order given."""
    return compose(
        *(build_sink(t, console=console, naming=naming, prefix=prefix) for t in sink_types)
    )
