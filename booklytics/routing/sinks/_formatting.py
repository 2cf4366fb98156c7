"""Shared formatting helpers for console-facing sinks and transports."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def format_value(value: Any) -> str:
    """Render a metadata value for a log line.

    Scalars render with ``str``; nested mappings and lists render as
    compact JSON so a line never spans several rows.

    Examples
    --------
    >>> format_value(3)
    '3'
    >>> format_value({"a": 1})
    '{"a":1}'
    """
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def format_event_line(name: str, metadata: Mapping[str, Any]) -> str:
    """Return ``Event: <name>`` followed by tab-separated ``key: value`` pairs."""
    parts = [f"Event: {name}"]
    parts.extend(f"{key}: {format_value(value)}" for key, value in metadata.items())
    return "\t".join(parts)
