from __future__ import annotations

import os
import time
from typing import Any

_events: list[dict[str, Any]] = []
_MAX_EVENTS = int(os.getenv("ANALYTICS_MAX_EVENTS", "10000"))


def record_event(event_type: str, data: dict[str, Any]) -> None:
    _events.append({
        "type": event_type,
        "timestamp": time.time(),
        **data,
    })
    # Oldest events go first once the log is full.
    if len(_events) > _MAX_EVENTS:
        del _events[: len(_events) - _MAX_EVENTS]


def get_events() -> list[dict[str, Any]]:
    return _events


def clear_events() -> None:
    _events.clear()
