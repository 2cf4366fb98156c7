"""Shared test fixtures for Booklytics."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from booklytics.library import Library
from booklytics.models.book import Book
from booklytics.models.events import Event
from booklytics.routing.sinks.memory import MemorySink
from booklytics.routing.transport import BufferedTransport


class RecordingSink:
    """A sink that appends ``(sink_name, event)`` to a shared call log."""

    def __init__(self, name: str, calls: list[tuple[str, Event]]) -> None:
        self._name = name
        self._calls = calls

    @property
    def sink_name(self) -> str:
        return self._name

    def log(self, event: Event) -> None:
        self._calls.append((self._name, event))


class FailingSink:
    """A sink that always raises."""

    def __init__(self, name: str = "failing_sink", exc_type: type = RuntimeError) -> None:
        self._name = name
        self._exc_type = exc_type
        self.attempts = 0

    @property
    def sink_name(self) -> str:
        return self._name

    def log(self, event: Event) -> None:
        self.attempts += 1
        raise self._exc_type(f"{self._name} exploded!")


@pytest.fixture
def calls() -> list[tuple[str, Event]]:
    """A shared, ordered call log for RecordingSinks."""
    return []


@pytest.fixture
def make_recording_sink(calls: list[tuple[str, Event]]) -> Callable[[str], RecordingSink]:
    """Factory fixture: build RecordingSinks that write to ``calls``."""

    def _factory(name: str) -> RecordingSink:
        return RecordingSink(name, calls)

    return _factory


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def transport() -> BufferedTransport:
    return BufferedTransport()


@pytest.fixture
def library() -> Library:
    """A library holding books "A" and "B"."""
    return Library([Book(name="A"), Book(name="B")])


@pytest.fixture
def empty_library() -> Library:
    return Library()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()
