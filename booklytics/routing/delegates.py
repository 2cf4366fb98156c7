"""Per-action delegate family.

Instead of a single ``log(event)`` call, each screen defines one method per
action it can report.  A delegate for the book list cannot be used where a
book-detail delegate is expected, which is the guarantee the generic
``log`` family gives up.

* ``BookListDelegate`` / ``BookDetailDelegate``: the per-screen protocols.
* ``BookListComposite`` / ``BookDetailComposite``: fan a call out to many
  delegates, in order, isolating failures.
* ``SinkDelegate``: lets any generic sink act as a delegate for both
  screens by building the matching closed event.
* ``DelegateSink``: the reverse: a generic sink that routes closed events
  to delegate methods.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from booklytics.models.book import Book
from booklytics.models.events import (
    BookAdded,
    BookDeleted,
    BookRead,
    Event,
    Screen,
)
from booklytics.routing.composite import ErrorCallback, describe_sink, fan_out
from booklytics.routing.sinks import BaseSink

logger = logging.getLogger(__name__)


@runtime_checkable
class BookListDelegate(Protocol):
    def did_add_book(self, book: Book) -> None:
        ...

    def did_delete_book(self, book: Book) -> None:
        ...


@runtime_checkable
class BookDetailDelegate(Protocol):
    def did_add_book(self, book: Book) -> None:
        ...

    def did_read_book(self, book: Book) -> None:
        ...


class BookListComposite:
    """Forwards book-list callbacks to every member delegate."""

    def __init__(
        self, *delegates: BookListDelegate, on_error: ErrorCallback | None = None
    ) -> None:
        self._delegates: tuple[BookListDelegate, ...] = delegates
        self._on_error = on_error

    @property
    def members(self) -> tuple[BookListDelegate, ...]:
        return self._delegates

    def did_add_book(self, book: Book) -> None:
        fan_out(
            self._delegates, lambda d: d.did_add_book(book), describe_sink, book, self._on_error
        )

    def did_delete_book(self, book: Book) -> None:
        fan_out(
            self._delegates, lambda d: d.did_delete_book(book), describe_sink, book, self._on_error
        )


class BookDetailComposite:
    """Forwards book-detail callbacks to every member delegate."""

    def __init__(
        self, *delegates: BookDetailDelegate, on_error: ErrorCallback | None = None
    ) -> None:
        self._delegates: tuple[BookDetailDelegate, ...] = delegates
        self._on_error = on_error

    @property
    def members(self) -> tuple[BookDetailDelegate, ...]:
        return self._delegates

    def did_add_book(self, book: Book) -> None:
        fan_out(
            self._delegates, lambda d: d.did_add_book(book), describe_sink, book, self._on_error
        )

    def did_read_book(self, book: Book) -> None:
        fan_out(
            self._delegates, lambda d: d.did_read_book(book), describe_sink, book, self._on_error
        )


class SinkDelegate:
    """Adapts a generic sink to both delegate protocols.

    Parameters
    ----------
    sink:
        Receives one closed event per callback.
    screen:
        Stamped on ``BookAdded`` events, since both screens can add books.
    """

    def __init__(self, sink: BaseSink, screen: Screen | None = None) -> None:
        self._sink = sink
        self._screen = screen

    @property
    def sink_name(self) -> str:
        return self._sink.sink_name

    def did_add_book(self, book: Book) -> None:
        self._sink.log(BookAdded(book=book, screen=self._screen))

    def did_delete_book(self, book: Book) -> None:
        self._sink.log(BookDeleted(book=book, screen=Screen.BOOK_LIST))

    def did_read_book(self, book: Book) -> None:
        self._sink.log(BookRead(book=book, screen=Screen.BOOK_DETAIL))


class DelegateSink:
    """A generic sink that calls per-action delegate methods.

    ``BookAdded`` goes to the delegate for the event's screen (the list
    delegate when the screen is unknown, or whichever delegate exists);
    ``BookDeleted`` to the list delegate; ``BookRead`` to the detail
    delegate.  Events with no delegate method are skipped.
    """

    def __init__(
        self,
        list_delegate: BookListDelegate | None = None,
        detail_delegate: BookDetailDelegate | None = None,
    ) -> None:
        self._list = list_delegate
        self._detail = detail_delegate

    @property
    def sink_name(self) -> str:
        return "delegate"

    def log(self, event: Event) -> None:
        if isinstance(event, BookAdded):
            target = self._detail if event.screen is Screen.BOOK_DETAIL else self._list
            if target is None:
                target = self._list if self._list is not None else self._detail
            if target is not None:
                target.did_add_book(event.book)
                return
        elif isinstance(event, BookDeleted) and self._list is not None:
            self._list.did_delete_book(event.book)
            return
        elif isinstance(event, BookRead) and self._detail is not None:
            self._detail.did_read_book(event.book)
            return
        logger.debug("DelegateSink: no delegate method for %s", event.name)
