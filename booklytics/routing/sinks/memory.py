"""In-memory sink: records every event it is given, in order."""

from __future__ import annotations

from booklytics.models.events import Event


class MemorySink:
    """Keeps events in a list for later inspection.

    Parameters
    ----------
    name:
        Returned as ``sink_name``; lets several recorders be told apart.
    """

    def __init__(self, name: str = "memory") -> None:
        self._name = name
        self._events: list[Event] = []

    @property
    def sink_name(self) -> str:
        return self._name

    def log(self, event: Event) -> None:
        self._events.append(event)

    @property
    def events(self) -> list[Event]:
        """Return a copy of the recorded events."""
        return list(self._events)

    def flush(self) -> list[Event]:
        """Return and clear all recorded events."""
        events = list(self._events)
        self._events.clear()
        return events
