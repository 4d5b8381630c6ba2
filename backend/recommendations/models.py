from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal[
    "seating_major",
    "seating_accent",
    "rug",
    "table",
    "table_small",
    "lighting_major",
    "lighting_accent",
    "decor",
    "textiles",
]


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    category: Category
    title: str
    display_price: str
    price_value: float | None = None
    vendor: str
    affiliate_links: dict[str, str] = Field(default_factory=dict)
    commission_rate: float = 0.0
    conversion_score: float = 0.0
    badge: str | None = None
    is_premium_anchor: bool = False
    compares_to_id: str | None = None


class KeepItems(BaseModel):
    model_config = ConfigDict(frozen=True)

    seating: bool = False
    rug: bool = False
    lighting: bool = False

    def kept(self) -> list[str]:
        """Names of the retained slots, in declaration order."""
        return [name for name, value in self.model_dump().items() if value]


class SelectionCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    style: str = "boho"
    room_type: str = "living_room"
    intensity: str = "redesign"
    keep_items: KeepItems = Field(default_factory=KeepItems)


class IntensityProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    intensity: str
    label: str
    description: str
    target_item_count: int = Field(..., gt=0)
    focus_areas: tuple[str, ...]
    strength: float = Field(..., ge=0.0, le=1.0)


class Recommendation(BaseModel):
    """Result of a single engine call."""

    model_config = ConfigDict(frozen=True)

    products: tuple[Product, ...]
    product_count: int
    intensity_info: IntensityProfile


# ── API models ───────────────────────────────────────────────────────────


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RecommendationRequest(BaseModel):
    style: str = Field(default="boho", min_length=1, description="Catalog style key, e.g. boho")
    room_type: str = Field(default="living_room", min_length=1)
    intensity: str = Field(
        default="redesign",
        description="refresh, redesign or transform; anything else is treated as redesign",
    )
    keep_items: KeepItems = Field(default_factory=KeepItems)
    explain: bool = Field(
        default=False, description="Ask the LLM for a one-line reason per product"
    )

    def to_criteria(self) -> SelectionCriteria:
        return SelectionCriteria(
            style=self.style,
            room_type=self.room_type,
            intensity=self.intensity,
            keep_items=self.keep_items,
        )


class RecommendationItem(BaseModel):
    product: Product
    score: float
    reason: str | None = None


class RecommendationResponse(BaseModel):
    products: list[RecommendationItem]
    product_count: int
    intensity_info: IntensityProfile
    style: str
    room_type: str


class TransformRequest(RecommendationRequest):
    image_url: str | None = Field(default=None, description="Public URL of the room photo")
    image_data: str | None = Field(
        default=None, description="Base64 image bytes or a data: URL"
    )


class TransformedImage(BaseModel):
    url: str | None = None
    data: str | None = None


class TransformResponse(BaseModel):
    ok: bool
    image: TransformedImage | None = None
    error: str | None = None
    prompt: str
    strength: float
    credits_remaining: int
    recommendations: RecommendationResponse
