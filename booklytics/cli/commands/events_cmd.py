"""``booklytics events``: list the closed event kinds and their wire names."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from booklytics.models.events import EVENT_TYPE_MAP, ClosedEvent

console = Console()


def events_cmd() -> None:
    """List known event kinds."""
    table = Table(title="Event Kinds")
    table.add_column("Kind", style="cyan")
    table.add_column("Wire Name", style="green")
    table.add_column("Payload")

    for kind, event_cls in EVENT_TYPE_MAP.items():
        if issubclass(event_cls, ClosedEvent):
            wire_name = event_cls.event_name
        else:
            wire_name = "[dim](caller-defined)[/dim]"
        payload = [
            field for field in event_cls.model_fields if field not in ("kind", "screen")
        ]
        table.add_row(kind, wire_name, ", ".join(payload) or "[dim]-[/dim]")

    console.print(table)
