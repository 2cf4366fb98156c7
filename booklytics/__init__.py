"""Booklytics: event dispatch and composite forwarding for book-library analytics.

Controllers report confirmed library actions as immutable events; sinks
forward them to transports; ``compose`` fans a single event out to any
number of sinks, in order, without one failing sink affecting the rest.
"""

__version__ = "0.1.0"
__description__ = "Event dispatch and composite forwarding for book-library analytics"

from booklytics.controllers import BookDetailController, BookListController
from booklytics.library import Library
from booklytics.models import Book, to_wire
from booklytics.routing.composite import CompositeSink, compose
from booklytics.routing.sinks import BaseSink
from booklytics.cli.app import app as cli

__all__ = [
    "Book",
    "Library",
    "BookListController",
    "BookDetailController",
    "BaseSink",
    "CompositeSink",
    "compose",
    "to_wire",
    "cli",
    "__version__",
]
