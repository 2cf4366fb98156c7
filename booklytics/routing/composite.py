"""CompositeSink: forwards every event to a fixed, ordered set of sinks.

A failing member is logged (and reported to an optional callback) but
never stops delivery to the members after it, and never reaches the
caller.  Analytics is best-effort: it must not change the outcome of the
user action it describes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from booklytics.models.events import Event
from booklytics.routing.sinks import BaseSink

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[str, Any, Exception], None]

_M = TypeVar("_M")


def describe_sink(member: object) -> str:
    """Name a member for logs: its ``sink_name`` if it has one, else its class."""
    return getattr(member, "sink_name", type(member).__name__)


def fan_out(
    members: Iterable[_M],
    call: Callable[[_M], None],
    describe: Callable[[_M], str],
    payload: Any,
    on_error: ErrorCallback | None = None,
) -> list[str]:
    """Apply *call* to each member in order, isolating failures.

    Returns the ``describe(member)`` names that completed without raising.
    Shared by the generic CompositeSink and the per-action delegate
    composites.
    """
    succeeded: list[str] = []
    for member in members:
        try:
            label = describe(member)
        except Exception:  # noqa: BLE001
            label = type(member).__name__
        try:
            call(member)
            succeeded.append(label)
        except Exception as exc:  # noqa: BLE001
            logger.error("Sink %s failed for %r: %s", label, payload, exc)
            if on_error is not None:
                try:
                    on_error(label, payload, exc)
                except Exception:  # noqa: BLE001
                    logger.exception("Error callback raised while reporting %s", label)
    return succeeded


class CompositeSink:
    """A sink whose ``log`` forwards to each member sink, in order.

    Membership is fixed at construction.  The same sink may appear in
    several composites, or more than once in one composite, in which case
    it receives the event once per appearance.  A composite is itself a
    BaseSink, so composites nest.

    Usage
    -----
    >>> composite = compose(api_sink, firebase_sink)
    >>> composite.log(book_added("Kokoro"))
    """

    def __init__(
        self,
        sinks: Iterable[BaseSink] = (),
        name: str = "composite",
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._sinks: tuple[BaseSink, ...] = tuple(sinks)
        self._name = name
        self._on_error = on_error

    @property
    def sink_name(self) -> str:
        return self._name

    @property
    def members(self) -> tuple[BaseSink, ...]:
        """Return the member sinks in delivery order."""
        return self._sinks

    def __len__(self) -> int:
        return len(self._sinks)

    def log(self, event: Event) -> None:
        self.dispatch(event)

    def dispatch(self, event: Event) -> list[str]:
        """Deliver *event* to every member and return the names that succeeded.

        With no members this does nothing and returns an empty list.
        """
        succeeded = fan_out(
            self._sinks,
            lambda sink: sink.log(event),
            describe_sink,
            event,
            self._on_error,
        )
        if len(succeeded) < len(self._sinks):
            logger.warning(
                "%s: %d/%d sinks succeeded for %s",
                self._name,
                len(succeeded),
                len(self._sinks),
                event.name,
            )
        else:
            logger.debug("%s: delivered %s to %d sinks", self._name, event.name, len(succeeded))
        return succeeded


def compose(
    *sinks: BaseSink,
    name: str = "composite",
    on_error: ErrorCallback | None = None,
) -> CompositeSink:
    """Build a CompositeSink from zero or more sinks, kept in argument order."""
    return CompositeSink(sinks, name=name, on_error=on_error)
