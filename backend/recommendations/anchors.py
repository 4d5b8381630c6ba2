from __future__ import annotations

from .intensity import normalize_intensity
from .models import Product


def _order_group(group: list[Product]) -> list[Product]:
    """Move the first valid anchor/value pair to the front of a category group."""
    for anchor in group:
        if not anchor.is_premium_anchor:
            continue
        value = next((p for p in group if p.compares_to_id == anchor.id), None)
        if value is None or value is anchor:
            continue
        rest = [p for p in group if p is not anchor and p is not value]
        return [anchor, value, *rest]
    return group


def compose_anchors(ranked: list[Product], intensity: str | None) -> list[Product]:
    """
    Present each premium anchor immediately before its cheaper comparison item.

    Categories are emitted in the order they first appear in ``ranked``. The
    refresh tier is returned untouched.
    """
    if normalize_intensity(intensity) == "refresh":
        return ranked

    groups: dict[str, list[Product]] = {}
    for product in ranked:
        groups.setdefault(product.category, []).append(product)

    composed: list[Product] = []
    for group in groups.values():
        composed.extend(_order_group(group))

    if not composed:
        return ranked
    return composed
