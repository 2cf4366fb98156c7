"""Screen controllers: perform a library action, then report it.

A controller emits an event only when the library confirms the action
happened.  Out-of-range indexes return ``None`` from the library; the
controller then emits nothing and reports nothing.  A sink that raises is
logged and skipped, so analytics never changes what a controller returns.
"""

from __future__ import annotations

from booklytics.library import Library
from booklytics.models import events
from booklytics.models.book import Book
from booklytics.models.events import BookDetailEvent, BookListEvent, Screen
from booklytics.routing.composite import describe_sink, fan_out
from booklytics.routing.sinks import BaseSink


class _Controller:
    def __init__(self, library: Library, sink: BaseSink) -> None:
        self._library = library
        self._sink = sink

    def _report(self, event: events.Event) -> None:
        fan_out((self._sink,), lambda sink: sink.log(event), describe_sink, event)


class BookListController(_Controller):
    """The book list screen: view, select, add and delete books."""

    def _emit(self, event: BookListEvent) -> None:
        self._report(event)

    def appeared(self) -> None:
        self._emit(events.book_list_viewed())

    def select_book(self, index: int) -> Book | None:
        book = self._library.read(index)
        if book is None:
            return None
        self._emit(events.book_selected(index))
        return book

    def add_book(self, book: Book) -> Book:
        added = self._library.add(book)
        self._emit(events.book_added(added, screen=Screen.BOOK_LIST))
        return added

    def delete_book(self, index: int) -> Book | None:
        book = self._library.delete(index)
        if book is None:
            return None
        self._emit(events.book_deleted(book))
        return book


class BookDetailController(_Controller):
    """The book detail screen: add and read books."""

    def _emit(self, event: BookDetailEvent) -> None:
        self._report(event)

    def add_book(self, book: Book) -> Book:
        added = self._library.add(book)
        self._emit(events.book_added(added, screen=Screen.BOOK_DETAIL))
        return added

    def read_book(self, index: int) -> Book | None:
        book = self._library.read(index)
        if book is None:
            return None
        self._emit(events.book_read(book, count=1))
        return book
