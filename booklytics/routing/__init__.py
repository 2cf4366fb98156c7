"""Booklytics event routing: fans analytics events out to every sink.

Sinks are pluggable targets: the remote-API sink, the Firebase-style
console sink, an in-memory recorder, or any custom object implementing
the BaseSink protocol.  ``compose`` builds a CompositeSink that forwards
each event to all of its members in order, so a controller never knows
how many back ends it is talking to.

The per-action delegate family (``did_add_book`` and friends) lives in
``booklytics.routing.delegates``.
"""
