from __future__ import annotations

import os
import threading
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

DEFAULT_CREDITS = int(os.getenv("DEFAULT_CREDITS", "3"))

_credits: dict[str, int] = {}
# Sync endpoints run in a threadpool; check-and-spend must be atomic.
_lock = threading.Lock()


def get(user_id: str) -> int:
    """Remaining transformations for *user_id*; new users start with the default."""
    with _lock:
        return _credits.setdefault(user_id, DEFAULT_CREDITS)


def decrement(user_id: str) -> None:
    """Consume one credit, never dropping below zero."""
    with _lock:
        _credits[user_id] = max(0, _credits.setdefault(user_id, DEFAULT_CREDITS) - 1)


def reserve(user_id: str) -> bool:
    """Spend one credit if any remain. Returns False when the user has none."""
    with _lock:
        remaining = _credits.setdefault(user_id, DEFAULT_CREDITS)
        if remaining <= 0:
            return False
        _credits[user_id] = remaining - 1
        return True


def refund(user_id: str) -> None:
    """Give back a credit taken by ``reserve`` for work that did not happen."""
    with _lock:
        _credits[user_id] = _credits.setdefault(user_id, DEFAULT_CREDITS) + 1


def set_credits(user_id: str, count: int) -> None:
    with _lock:
        _credits[user_id] = max(0, count)


def clear_credits() -> None:
    with _lock:
        _credits.clear()
