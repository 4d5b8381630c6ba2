from __future__ import annotations

from collections import Counter
from typing import Any

from ..recommendations.intensity import normalize_intensity

_KEEP_KINDS = ("seating", "rug", "lighting")


def _top(counter: Counter[str], n: int = 10) -> list[dict[str, Any]]:
    return [{"name": name, "count": count} for name, count in counter.most_common(n)]


def _rate(part: int, total: int) -> float:
    return round(part / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "recommend"]
    transforms = [e for e in events if e["type"] == "transform"]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    style_counter: Counter[str] = Counter(s.get("style", "unknown") for s in searches)
    room_counter: Counter[str] = Counter(s.get("room_type", "unknown") for s in searches)

    # Unknown intensities are reported under the tier they resolved to
    intensity_usage = dict(
        Counter(normalize_intensity(s.get("intensity")) for s in searches)
    )

    keep_counts = {kind: 0 for kind in _KEEP_KINDS}
    for s in searches:
        for kind in s.get("keep_items", []) or []:
            if kind in keep_counts:
                keep_counts[kind] += 1
    keep_item_usage = {k: _rate(v, total) for k, v in keep_counts.items()}

    cache_hits = sum(1 for s in searches if s.get("cache_hit"))

    transform_ok = sum(1 for t in transforms if t.get("provider_ok"))

    return {
        "total_recommendations": total,
        "avg_response_time_ms": avg_time,
        "top_styles": _top(style_counter),
        "top_room_types": _top(room_counter),
        "intensity_usage": intensity_usage,
        "keep_item_usage": keep_item_usage,
        "explain_usage": _rate(sum(1 for s in searches if s.get("explain")), total),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": _rate(cache_hits, total),
        },
        "transform_summary": {
            "total": len(transforms),
            "succeeded": transform_ok,
            "failed": len(transforms) - transform_ok,
            "success_rate": _rate(transform_ok, len(transforms)),
        },
    }
