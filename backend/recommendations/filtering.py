from __future__ import annotations

from .data_store import complementary_for
from .models import KeepItems, Product

# Only the major piece of each slot is suppressed; accents stay eligible.
KEEP_CATEGORY_MAP: dict[str, frozenset[str]] = {
    "seating": frozenset({"seating_major"}),
    "rug": frozenset({"rug"}),
    "lighting": frozenset({"lighting_major"}),
}


def removed_categories(keep_items: KeepItems) -> set[str]:
    removed: set[str] = set()
    for kind in keep_items.kept():
        removed |= KEEP_CATEGORY_MAP.get(kind, frozenset())
    return removed


def filter_candidates(
    products: list[Product],
    keep_items: KeepItems,
    style: str,
) -> list[Product]:
    """Drop categories the user is keeping and append complementary picks."""
    removed = removed_categories(keep_items)
    candidates = [p for p in products if p.category not in removed]

    seen = {p.id for p in candidates}
    for kind in keep_items.kept():
        for extra in complementary_for(kind, style):
            if extra.id in seen:
                continue
            candidates.append(extra)
            seen.add(extra.id)

    return candidates
