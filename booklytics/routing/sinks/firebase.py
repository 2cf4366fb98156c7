"""Firebase-style sink: renders events as Firebase Analytics parameter blocks.

This sink does NOT talk to Firebase.  It builds a payload shaped like a
Firebase ``logEvent`` call, prints it as a multi-line block on a Rich
console, and keeps it in a buffer for a transport layer or test harness
to collect with ``flush()``.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from rich.console import Console

from booklytics.models.events import Event, to_wire
from booklytics.routing.sinks._formatting import format_value

logger = logging.getLogger(__name__)


class FirebasePayload(BaseModel):
    """A single Firebase-style analytics event."""

    model_config = ConfigDict(frozen=True)

    event_name: str
    item_id: str = Field(default_factory=lambda: str(uuid.uuid4()).upper())
    item_name: str = ""
    content_type: str = ""
    value: str = ""
    extra: dict[str, JsonValue] = {}


class FirebaseSink:
    """Builds and prints Firebase-style payloads.

    The first metadata entry becomes the item (``book`` -> item name
    ``book``, content type ``name``); any remaining entries are kept in
    ``extra``.

    Parameters
    ----------
    console:
        Where the rendered block is printed.  Defaults to stdout.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._pending_payloads: list[FirebasePayload] = []

    @property
    def sink_name(self) -> str:
        return "firebase"

    def log(self, event: Event) -> None:
        payload = self.build_payload(event)
        self._pending_payloads.append(payload)
        self._console.print(
            self._format_block(payload), markup=False, highlight=False
        )
        logger.debug("FirebaseSink: logged %s (%s)", payload.event_name, payload.item_id)

    @staticmethod
    def build_payload(event: Event) -> FirebasePayload:
        """Map an event onto Firebase item parameters."""
        name, metadata = to_wire(event)
        fields: dict[str, Any] = {"event_name": name}
        if metadata:
            key, value = next(iter(metadata.items()))
            fields["item_name"] = key
            fields["content_type"] = "name" if key == "book" else key
            fields["value"] = format_value(value)
            fields["extra"] = {k: v for k, v in metadata.items() if k != key}
        return FirebasePayload(**fields)

    @staticmethod
    def _format_block(payload: FirebasePayload) -> str:
        lines = [
            f"EventName: {payload.event_name}",
            f"AnalyticsParameterItemID: {payload.item_id}",
            f"AnalyticsParameterItemName: {payload.item_name}",
            f"AnalyticsParameterContentType: {payload.content_type}",
            f"AnalyticsParameterValue: {payload.value}",
        ]
        lines.extend(f"{key}: {format_value(value)}" for key, value in payload.extra.items())
        return "\n".join(lines)

    def flush(self) -> list[FirebasePayload]:
        """Return and clear all pending payloads."""
        payloads = list(self._pending_payloads)
        self._pending_payloads.clear()
        return payloads

    @property
    def pending_count(self) -> int:
        """Return the number of pending payloads."""
        return len(self._pending_payloads)
