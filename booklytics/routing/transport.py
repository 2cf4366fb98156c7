"""Transports: the last hop that actually emits a ``(name, metadata)`` pair.

Sinks never talk to a process-wide API object; they are handed a
transport at construction so tests can swap in a ``BufferedTransport``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from rich.console import Console

from booklytics.routing.sinks._formatting import format_event_line

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Anything that can emit a named event with metadata."""

    def send(self, name: str, metadata: Mapping[str, Any]) -> None:
        ...


class ConsoleTransport:
    """Prints one ``Event: ...`` line per event to a Rich console.

    Parameters
    ----------
    console:
        Target console.  Defaults to a new stdout console.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def send(self, name: str, metadata: Mapping[str, Any]) -> None:
        self._console.print(
            format_event_line(name, metadata),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


class BufferedTransport:
    """Keeps every sent pair in memory until ``flush()`` is called."""

    def __init__(self) -> None:
        self._sent: list[tuple[str, dict[str, Any]]] = []

    def send(self, name: str, metadata: Mapping[str, Any]) -> None:
        self._sent.append((name, dict(metadata)))
        logger.debug("BufferedTransport: buffered %s", name)

    @property
    def sent(self) -> list[tuple[str, dict[str, Any]]]:
        """Return a copy of the buffered pairs, oldest first."""
        return list(self._sent)

    def flush(self) -> list[tuple[str, dict[str, Any]]]:
        """Return and clear all buffered pairs."""
        sent = list(self._sent)
        self._sent.clear()
        return sent
