"""In-memory book collection whose mutation results drive event emission.

Index-based calls return ``None`` instead of raising when the index is out
of range; controllers treat ``None`` as "nothing happened".
"""

from __future__ import annotations

from collections.abc import Iterator

from booklytics.models.book import Book


class Library:
    """An ordered, zero-indexed list of books."""

    def __init__(self, books: list[Book] | None = None) -> None:
        self._books: list[Book] = list(books or [])

    def add(self, book: Book) -> Book:
        self._books.append(book)
        return book

    def delete(self, index: int) -> Book | None:
        """Remove and return the book at *index*, or ``None`` if out of range."""
        if not self._in_range(index):
            return None
        return self._books.pop(index)

    def read(self, index: int) -> Book | None:
        """Return the book at *index* without removing it, or ``None``."""
        if not self._in_range(index):
            return None
        return self._books[index]

    def _in_range(self, index: int) -> bool:
        # Negative indexes are out of range, not "from the end".
        return 0 <= index < len(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))
