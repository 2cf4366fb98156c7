"""Sink protocol for Booklytics event routing.

All generic sinks implement the ``BaseSink`` protocol: a ``sink_name``
property and a ``log(event)`` method.  A CompositeSink calls ``log`` on
every member for every event it receives.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from booklytics.models.events import Event


@runtime_checkable
class BaseSink(Protocol):
    """Protocol that every Booklytics sink must implement.

    Sinks format an event and hand it to a transport.  They must not
    mutate the event and must tolerate metadata keys they do not know.

    Attributes
    ----------
    sink_name : str
        A human-readable identifier for this sink instance
        (e.g. ``"api"``, ``"firebase"``).
    """

    @property
    def sink_name(self) -> str:
        """Return the name of this sink."""
        ...

    def log(self, event: Event) -> None:
        """Forward *event* to this sink's transport.

        Failures may raise; a CompositeSink isolates and reports them so
        sibling sinks still receive the event.
        """
        ...
