from __future__ import annotations

from .anchors import compose_anchors
from .data_store import lookup, resolve
from .filtering import filter_candidates
from .intensity import intensity_profile
from .models import Recommendation, SelectionCriteria
from .ranking import rank


def recommend(criteria: SelectionCriteria) -> Recommendation:
    """Select, rank, truncate and anchor-order products for one request."""
    profile = intensity_profile(criteria.intensity)

    # Complements follow the catalog actually served, not the raw request.
    style, room_type = resolve(criteria.style, criteria.room_type)
    candidates = lookup(style, room_type)
    candidates = filter_candidates(candidates, criteria.keep_items, style)
    ranked = rank(candidates, criteria.intensity)

    # Truncate before pairing: a pair only surfaces if both halves made the cut.
    top = ranked[: profile.target_item_count]
    products = compose_anchors(top, criteria.intensity)

    return Recommendation(
        products=tuple(products),
        product_count=len(products),
        intensity_info=profile,
    )
