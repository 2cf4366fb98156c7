"""Booklytics data models: Pydantic v2, frozen (immutable)."""

from booklytics.models.book import Book
from booklytics.models.events import (
    EVENT_TYPE_MAP,
    AnalyticsEvent,
    BookAdded,
    BookDeleted,
    BookDetailEvent,
    BookListEvent,
    BookListViewed,
    BookRead,
    BookReadError,
    BookSelected,
    ClosedEvent,
    Event,
    EventNaming,
    LoginAttempted,
    LoginFailed,
    LoginScreenViewed,
    LoginSucceeded,
    Metadata,
    Screen,
    WireEvent,
    parse_event,
    to_wire,
)

__all__ = [
    "Book",
    # events
    "Event",
    "ClosedEvent",
    "AnalyticsEvent",
    "BookListViewed",
    "BookSelected",
    "BookAdded",
    "BookDeleted",
    "BookRead",
    "BookReadError",
    "LoginScreenViewed",
    "LoginAttempted",
    "LoginFailed",
    "LoginSucceeded",
    "BookListEvent",
    "BookDetailEvent",
    "EVENT_TYPE_MAP",
    # wire
    "Metadata",
    "Screen",
    "EventNaming",
    "WireEvent",
    "parse_event",
    "to_wire",
]
