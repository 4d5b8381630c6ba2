"""
In-process TTL cache for recommendation responses.

The engine output is a pure function of the request, so identical requests
inside the TTL window are served from here.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
from typing import Any

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0
_TTL_SECONDS = int(os.getenv("RECOMMENDATION_CACHE_TTL", "300"))
_MAX_ENTRIES = int(os.getenv("RECOMMENDATION_CACHE_MAX_ENTRIES", "1024"))


def _make_key(request_dict: dict) -> str:
    normalized = json.dumps(request_dict, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(request_dict: dict) -> Any | None:
    global _hits, _misses
    key = _make_key(request_dict)
    entry = _cache.get(key)
    if entry is not None:
        if time.time() - entry["created_at"] < _TTL_SECONDS:
            _hits += 1
            return entry["value"]
        del _cache[key]
    _misses += 1
    return None


def _evict(now: float) -> None:
    for key in [k for k, e in _cache.items() if now - e["created_at"] >= _TTL_SECONDS]:
        del _cache[key]
    # Dicts keep insertion order, so the first keys are the oldest.
    while _cache and len(_cache) >= _MAX_ENTRIES:
        del _cache[next(iter(_cache))]


def cache_set(request_dict: dict, value: Any) -> None:
    key = _make_key(request_dict)
    now = time.time()
    _cache.pop(key, None)
    if len(_cache) >= _MAX_ENTRIES:
        _evict(now)
    _cache[key] = {"value": value, "created_at": now}


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "ttl_seconds": _TTL_SECONDS,
        "max_entries": _MAX_ENTRIES,
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
