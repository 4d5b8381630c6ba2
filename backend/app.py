from __future__ import annotations

import logging
import os
import time

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .auth.dependencies import require_admin, require_user
from .auth.users import authenticate
from .credits import ledger
from .imaging.errors import ImageProviderError
from .imaging.replicate_client import transform_image
from .recommendations.cache import get_cache_stats
from .recommendations.data_store import room_types, styles
from .recommendations.filtering import KEEP_CATEGORY_MAP
from .recommendations.intensity import (
    INTENSITY_PROFILES,
    build_prompt,
    transformation_strength,
)
from .recommendations.models import (
    LoginRequest,
    RecommendationRequest,
    RecommendationResponse,
    TransformRequest,
    TransformResponse,
)
from .recommendations.retrieval import get_recommendations

logger = logging.getLogger(__name__)

app = FastAPI(title="Room Restyle API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "room-restyle-secret-change-in-production"),
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "styles": styles(),
        "room_types": room_types(),
        "intensities": [p.model_dump() for p in INTENSITY_PROFILES.values()],
        "keep_items": sorted(KEEP_CATEGORY_MAP),
    }


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── User endpoints ───────────────────────────────────────────────────────


@app.get("/credits")
def credits(user: dict = Depends(require_user)) -> dict:
    return {"username": user["username"], "credits": ledger.get(user["username"])}


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: RecommendationRequest,
    user: dict = Depends(require_user),
) -> RecommendationResponse:
    return get_recommendations(body)


@app.post("/transform", response_model=TransformResponse)
def transform(
    body: TransformRequest,
    response: Response,
    user: dict = Depends(require_user),
) -> TransformResponse:
    if not body.image_url and not body.image_data:
        raise HTTPException(status_code=400, detail="Send image_url or image_data (base64).")

    # Recommendations do not depend on the image, so they are built first
    # and returned even when the provider fails.
    recs = get_recommendations(RecommendationRequest(**body.model_dump(
        include={"style", "room_type", "intensity", "keep_items", "explain"},
    )))

    prompt = build_prompt(body.style, body.room_type, body.intensity, body.keep_items)
    strength = transformation_strength(body.intensity)

    username = user["username"]
    # Check and spend in one step so concurrent requests cannot overspend.
    if not ledger.reserve(username):
        raise HTTPException(status_code=402, detail="No credits remaining")

    start_time = time.time()
    image = None
    error = None
    try:
        image = transform_image(
            prompt,
            strength,
            image_url=body.image_url,
            image_data=body.image_data,
        )
    except ImageProviderError as exc:
        ledger.refund(username)
        logger.warning("Image transformation failed for %s: %s", username, exc)
        error = str(exc)
        response.status_code = 502

    record_event("transform", {
        "style": body.style,
        "intensity": body.intensity,
        "strength": strength,
        "provider_ok": error is None,
        "response_time_ms": round((time.time() - start_time) * 1000, 1),
    })

    return TransformResponse(
        ok=error is None,
        image=image,
        error=error,
        prompt=prompt,
        strength=strength,
        credits_remaining=ledger.get(username),
        recommendations=recs,
    )


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics(user: dict = Depends(require_admin)) -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats(user: dict = Depends(require_admin)) -> dict:
    return get_cache_stats()
