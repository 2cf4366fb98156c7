"""API sink: forwards events to a remote analytics transport.

The sink converts each event to its wire form and calls
``transport.send(name, metadata)``.  An optional name prefix tags every
event with the deployment environment (``Production-bookAdded``).
"""

from __future__ import annotations

import logging

from booklytics.models.events import Event, EventNaming, to_wire
from booklytics.routing.transport import Transport

logger = logging.getLogger(__name__)


class ApiSink:
    """Sends events through a :class:`Transport`.

    Parameters
    ----------
    transport:
        Where wire events go.
    prefix:
        Prepended to every event name, e.g. ``"Staging-"``.
    naming:
        Plain (``bookAdded``) or screen-scoped (``bookList_bookAdded``) names.
    """

    def __init__(
        self,
        transport: Transport,
        prefix: str = "",
        naming: EventNaming = EventNaming.PLAIN,
    ) -> None:
        self._transport = transport
        self._prefix = prefix
        self._naming = naming

    @property
    def sink_name(self) -> str:
        return "api"

    def log(self, event: Event) -> None:
        wire = to_wire(event, self._naming)
        name = f"{self._prefix}{wire.name}"
        self._transport.send(name, wire.metadata)
        logger.debug("ApiSink: sent %s", name)
