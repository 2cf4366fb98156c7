"""Tests for the event and book models: validation, immutability, wire form."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from booklytics.models import events
from booklytics.models.book import Book
from booklytics.models.events import (
    EVENT_TYPE_MAP,
    AnalyticsEvent,
    BookAdded,
    BookDeleted,
    BookListViewed,
    BookRead,
    BookReadError,
    BookSelected,
    EventNaming,
    LoginFailed,
    LoginScreenViewed,
    Screen,
    WireEvent,
    parse_event,
    to_wire,
)


class TestBook:
    def test_book_is_frozen(self):
        book = Book(name="Kokoro")
        with pytest.raises(ValidationError):
            book.name = "Sanshiro"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Book(name="")


class TestOpenEvent:
    def test_defaults(self):
        event = AnalyticsEvent(name="bookListViewed")
        assert event.metadata == {}
        assert event.kind == "custom"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            AnalyticsEvent(name="")

    def test_frozen(self):
        event = AnalyticsEvent(name="x")
        with pytest.raises(ValidationError):
            event.name = "y"

    def test_metadata_copied_from_caller(self):
        source = {"book": "A"}
        event = AnalyticsEvent(name="bookAdded", metadata=source)
        source["book"] = "B"
        assert event.metadata == {"book": "A"}

    def test_nested_metadata_values(self):
        event = AnalyticsEvent(
            name="sync", metadata={"count": 2, "ok": True, "tags": ["a"], "ctx": {"k": "v"}}
        )
        assert event.metadata["ctx"] == {"k": "v"}

    def test_metadata_cannot_be_changed_in_place(self):
        event = AnalyticsEvent(name="x", metadata={"k": 1, "ctx": {"a": 1}, "tags": ["t"]})
        with pytest.raises(TypeError):
            event.metadata["k"] = 2
        with pytest.raises(TypeError):
            event.metadata["ctx"]["a"] = 2
        with pytest.raises(AttributeError):
            event.metadata["tags"].append("u")
        assert event.model_dump()["metadata"] == {"k": 1, "ctx": {"a": 1}, "tags": ["t"]}

    def test_nested_metadata_copied_from_caller(self):
        ctx = {"a": 1}
        event = AnalyticsEvent(name="x", metadata={"ctx": ctx})
        ctx["a"] = 2
        assert event.metadata["ctx"] == {"a": 1}


class TestClosedEvents:
    def test_book_added(self):
        event = BookAdded(book=Book(name="X"))
        assert event.name == "bookAdded"
        assert event.metadata == {"book": "X"}

    def test_book_accepts_plain_title(self):
        assert BookDeleted(book="X").book == Book(name="X")

    def test_book_read_carries_count(self):
        event = BookRead(book="X", count=3)
        assert event.name == "bookRead"
        assert event.metadata == {"book": "X", "read_count": 3}

    def test_book_read_count_defaults_to_one(self):
        assert BookRead(book="X").count == 1

    def test_book_selected_index_is_string(self):
        assert BookSelected(index=4).metadata == {"index": "4"}

    def test_book_list_viewed_has_no_metadata(self):
        event = BookListViewed()
        assert event.name == "bookListViewed"
        assert event.metadata == {}

    def test_book_read_error(self):
        event = BookReadError(code=404, description="missing")
        assert event.name == "BookReadError"
        assert event.metadata == {"code": 404, "description": "missing"}

    def test_login_events(self):
        assert LoginScreenViewed().name == "loginScreenViewed"
        failed = LoginFailed(reason="bad password")
        assert failed.metadata == {"reason": "bad password"}

    def test_closed_events_are_frozen(self):
        event = BookAdded(book="X")
        with pytest.raises(ValidationError):
            event.book = Book(name="Y")

    def test_factories_stamp_screen(self):
        assert events.book_list_viewed().screen is Screen.BOOK_LIST
        assert events.book_deleted("X").screen is Screen.BOOK_LIST
        assert events.book_read("X").screen is Screen.BOOK_DETAIL
        assert events.book_added("X").screen is None


class TestToWire:
    @pytest.mark.parametrize(
        ("closed", "open_form"),
        [
            (events.book_added("X"), AnalyticsEvent(name="bookAdded", metadata={"book": "X"})),
            (events.book_deleted("X"), AnalyticsEvent(name="bookDeleted", metadata={"book": "X"})),
            (
                events.book_read("X", count=1),
                AnalyticsEvent(name="bookRead", metadata={"book": "X", "read_count": 1}),
            ),
            (events.book_list_viewed(), AnalyticsEvent(name="bookListViewed")),
            (events.book_selected(2), AnalyticsEvent(name="bookSelected", metadata={"index": "2"})),
        ],
    )
    def test_closed_matches_open_form(self, closed, open_form):
        assert to_wire(closed) == to_wire(open_form)
        assert to_wire(closed).name == open_form.name
        assert to_wire(closed).metadata == open_form.metadata

    def test_returns_named_tuple(self):
        name, metadata = to_wire(events.book_added("X"))
        assert (name, metadata) == ("bookAdded", {"book": "X"})
        assert isinstance(to_wire(events.book_added("X")), WireEvent)

    def test_scoped_naming_prefixes_screen(self):
        event = events.book_added("X", screen=Screen.BOOK_LIST)
        assert to_wire(event, EventNaming.SCOPED).name == "bookList_bookAdded"
        detail = events.book_added("X", screen=Screen.BOOK_DETAIL)
        assert to_wire(detail, EventNaming.SCOPED).name == "bookDetail_bookAdded"

    def test_scoped_naming_keeps_already_scoped_names(self):
        assert to_wire(events.book_list_viewed(), EventNaming.SCOPED).name == "bookListViewed"

    def test_scoped_naming_without_screen_is_plain(self):
        assert to_wire(events.book_added("X"), EventNaming.SCOPED).name == "bookAdded"

    def test_scoped_naming_leaves_open_events_alone(self):
        event = AnalyticsEvent(name="custom_thing")
        assert to_wire(event, EventNaming.SCOPED).name == "custom_thing"

    def test_metadata_is_a_fresh_copy(self):
        event = AnalyticsEvent(name="x", metadata={"k": 1})
        wire = to_wire(event)
        wire.metadata["k"] = 2
        assert event.metadata == {"k": 1}

    def test_nested_metadata_is_a_deep_copy(self):
        event = AnalyticsEvent(name="x", metadata={"ctx": {"a": 1}, "tags": ["t"]})
        wire = to_wire(event)
        wire.metadata["ctx"]["a"] = 2
        wire.metadata["tags"].append("u")
        assert wire.metadata == {"ctx": {"a": 2}, "tags": ["t", "u"]}
        assert event.metadata["ctx"] == {"a": 1}
        assert event.metadata["tags"] == ("t",)


class TestParseEvent:
    def test_round_trips_closed_event(self):
        event = events.book_read("X", count=2)
        assert parse_event(event.model_dump()) == event

    def test_round_trips_open_event(self):
        event = AnalyticsEvent(name="x", metadata={"a": 1})
        assert parse_event(event.model_dump()) == event

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            parse_event({"kind": "bookBurned", "book": {"name": "X"}})

    def test_type_map_covers_every_kind(self):
        for kind, event_cls in EVENT_TYPE_MAP.items():
            assert event_cls.model_fields["kind"].default == kind
