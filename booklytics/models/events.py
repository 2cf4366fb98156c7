"""Analytics events: one immutable record per confirmed user action.

Two shapes are supported:

* **Closed events**: one frozen model per action (``BookAdded``,
  ``BookRead`` ...).  Each carries exactly the payload its action needs;
  ``name`` and ``metadata`` are derived from that payload, so a sink can
  never be handed a mismatched name/metadata pair.
* **Open events**: ``AnalyticsEvent(name=..., metadata=...)`` for callers
  and sinks that want raw string/mapping access.  It is also the explicit
  fallback variant of the ``Event`` union.

``to_wire`` converts any event into the ``(name, metadata)`` pair that
transports understand.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, ClassVar, Literal, NamedTuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    TypeAdapter,
    field_serializer,
    field_validator,
)

from booklytics.models.book import Book

Metadata = dict[str, JsonValue]


class Screen(str, Enum):
    """The screen an event originated from."""

    BOOK_LIST = "bookList"
    BOOK_DETAIL = "bookDetail"


class EventNaming(str, Enum):
    """How closed events are named on the wire.

    ``PLAIN`` gives ``bookAdded``; ``SCOPED`` prefixes the originating
    screen, giving ``bookList_bookAdded``.
    """

    PLAIN = "plain"
    SCOPED = "scoped"


class WireEvent(NamedTuple):
    """The transport-level shape of an event."""

    name: str
    metadata: Metadata


# ---------------------------------------------------------------------------
# Open event
# ---------------------------------------------------------------------------


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(item) for item in value]
    return value


class AnalyticsEvent(BaseModel):
    """An open event: any non-empty name plus arbitrary metadata.

    Typing the metadata for a given name is the caller's responsibility.
    The metadata is copied on construction and stored read-only: mappings
    become ``MappingProxyType`` and lists become tuples, all the way down.
    ``model_dump()`` and ``to_wire`` hand back plain dicts and lists.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    name: str = Field(min_length=1)
    metadata: Metadata = Field(default_factory=dict, validate_default=True)

    @field_validator("metadata")
    @classmethod
    def freeze_metadata(cls, value: Metadata) -> Any:
        return _freeze(value)

    @field_serializer("metadata")
    def dump_metadata(self, value: Mapping[str, Any]) -> Metadata:
        return _thaw(value)


# ---------------------------------------------------------------------------
# Closed events
# ---------------------------------------------------------------------------


class ClosedEvent(BaseModel):
    """Base for tagged events whose name and metadata are derived."""

    model_config = ConfigDict(frozen=True)

    event_name: ClassVar[str]

    screen: Screen | None = None

    @property
    def name(self) -> str:
        return self.event_name

    @property
    def metadata(self) -> Metadata:
        return {}


class _BookPayload(ClosedEvent):
    book: Book

    @field_validator("book", mode="before")
    @classmethod
    def coerce_title(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"name": value}
        return value

    @property
    def metadata(self) -> Metadata:
        return {"book": self.book.name}


class BookListViewed(ClosedEvent):
    kind: Literal["bookListViewed"] = "bookListViewed"
    event_name: ClassVar[str] = "bookListViewed"


class BookSelected(ClosedEvent):
    kind: Literal["bookSelected"] = "bookSelected"
    event_name: ClassVar[str] = "bookSelected"

    index: int

    @property
    def metadata(self) -> Metadata:
        # Indexes have always been reported as strings.
        return {"index": str(self.index)}


class BookAdded(_BookPayload):
    kind: Literal["bookAdded"] = "bookAdded"
    event_name: ClassVar[str] = "bookAdded"


class BookDeleted(_BookPayload):
    kind: Literal["bookDeleted"] = "bookDeleted"
    event_name: ClassVar[str] = "bookDeleted"


class BookRead(_BookPayload):
    kind: Literal["bookRead"] = "bookRead"
    event_name: ClassVar[str] = "bookRead"

    count: int = Field(default=1, ge=0)

    @property
    def metadata(self) -> Metadata:
        return {"book": self.book.name, "read_count": self.count}


class BookReadError(ClosedEvent):
    """A book could not be opened for reading."""

    kind: Literal["bookReadError"] = "bookReadError"
    event_name: ClassVar[str] = "BookReadError"

    code: int
    description: str

    @property
    def metadata(self) -> Metadata:
        return {"code": self.code, "description": self.description}


class LoginScreenViewed(ClosedEvent):
    kind: Literal["loginScreenViewed"] = "loginScreenViewed"
    event_name: ClassVar[str] = "loginScreenViewed"


class LoginAttempted(ClosedEvent):
    kind: Literal["loginAttempted"] = "loginAttempted"
    event_name: ClassVar[str] = "loginAttempted"


class LoginFailed(ClosedEvent):
    kind: Literal["loginFailed"] = "loginFailed"
    event_name: ClassVar[str] = "loginFailed"

    reason: str

    @property
    def metadata(self) -> Metadata:
        return {"reason": self.reason}


class LoginSucceeded(ClosedEvent):
    kind: Literal["loginSucceeded"] = "loginSucceeded"
    event_name: ClassVar[str] = "loginSucceeded"


Event = Annotated[
    Union[
        BookListViewed,
        BookSelected,
        BookAdded,
        BookDeleted,
        BookRead,
        BookReadError,
        LoginScreenViewed,
        LoginAttempted,
        LoginFailed,
        LoginSucceeded,
        AnalyticsEvent,
    ],
    Field(discriminator="kind"),
]

# Per-screen event families
BookListEvent = Union[BookListViewed, BookSelected, BookAdded, BookDeleted]
BookDetailEvent = Union[BookAdded, BookRead]

# Registry for deserialization by kind
EVENT_TYPE_MAP: dict[str, type[BaseModel]] = {
    "bookListViewed": BookListViewed,
    "bookSelected": BookSelected,
    "bookAdded": BookAdded,
    "bookDeleted": BookDeleted,
    "bookRead": BookRead,
    "bookReadError": BookReadError,
    "loginScreenViewed": LoginScreenViewed,
    "loginAttempted": LoginAttempted,
    "loginFailed": LoginFailed,
    "loginSucceeded": LoginSucceeded,
    "custom": AnalyticsEvent,
}

_event_adapter: TypeAdapter[Event] = TypeAdapter(Event)


def parse_event(data: dict[str, Any]) -> Event:
    """Rebuild an event from its ``model_dump()`` form.

    Raises ``pydantic.ValidationError`` for unknown kinds or bad payloads.
    """
    return _event_adapter.validate_python(data)


def to_wire(event: Event, naming: EventNaming = EventNaming.PLAIN) -> WireEvent:
    """Convert *event* into the ``(name, metadata)`` pair sent to transports.

    With ``EventNaming.SCOPED`` a closed event that knows its screen is
    named ``<screen>_<name>``, unless its bare name already starts with
    the screen (``bookListViewed`` stays as is).  Open events pass
    through unchanged.  The metadata is always a fresh, deep-copied dict.
    """
    name = event.name
    if (
        naming is EventNaming.SCOPED
        and isinstance(event, ClosedEvent)
        and event.screen is not None
        and not name.startswith(event.screen.value)
    ):
        name = f"{event.screen.value}_{name}"
    return WireEvent(name=name, metadata=_thaw(event.metadata))


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def book_list_viewed() -> BookListViewed:
    return BookListViewed(screen=Screen.BOOK_LIST)


def book_selected(index: int) -> BookSelected:
    return BookSelected(index=index, screen=Screen.BOOK_LIST)


def book_added(book: Book | str, screen: Screen | None = None) -> BookAdded:
    return BookAdded(book=book, screen=screen)


def book_deleted(book: Book | str) -> BookDeleted:
    return BookDeleted(book=book, screen=Screen.BOOK_LIST)


def book_read(book: Book | str, count: int = 1) -> BookRead:
    return BookRead(book=book, count=count, screen=Screen.BOOK_DETAIL)
