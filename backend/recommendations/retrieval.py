from __future__ import annotations

import time

from ..analytics.store import record_event
from ..llm.groq_client import explain_products
from .cache import cache_get, cache_set
from .engine import recommend
from .models import (
    RecommendationItem,
    RecommendationRequest,
    RecommendationResponse,
)
from .ranking import score_product


def _record_search(
    request: RecommendationRequest,
    results_returned: int,
    start_time: float,
    cache_hit: bool,
) -> None:
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("recommend", {
        "style": request.style,
        "room_type": request.room_type,
        "intensity": request.intensity,
        "keep_items": request.keep_items.kept(),
        "explain": request.explain,
        "results_returned": results_returned,
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })


def get_recommendations(request: RecommendationRequest) -> RecommendationResponse:
    start_time = time.time()

    request_dict = request.model_dump()
    cached = cache_get(request_dict)
    if cached is not None:
        _record_search(request, cached.product_count, start_time, cache_hit=True)
        return cached

    criteria = request.to_criteria()
    result = recommend(criteria)

    reasons: dict[str, str] = {}
    if request.explain and result.products:
        reasons = explain_products(
            criteria.model_dump(),
            [p.model_dump() for p in result.products],
        )

    items = [
        RecommendationItem(
            product=product,
            score=round(score_product(product, criteria.intensity), 4),
            reason=reasons.get(product.id),
        )
        for product in result.products
    ]

    response = RecommendationResponse(
        products=items,
        product_count=result.product_count,
        intensity_info=result.intensity_info,
        style=request.style,
        room_type=request.room_type,
    )

    cache_set(request_dict, response)
    _record_search(request, len(items), start_time, cache_hit=False)

    return response
