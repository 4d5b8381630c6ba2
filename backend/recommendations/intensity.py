"""
Intensity tiers and prompt building for the image transformation step.

Every function here is pure and total: unknown intensities resolve to the
``redesign`` tier and unknown styles to the boho description.
"""
from __future__ import annotations

from .models import IntensityProfile, KeepItems

DEFAULT_INTENSITY = "redesign"

INTENSITY_PROFILES: dict[str, IntensityProfile] = {
    "refresh": IntensityProfile(
        intensity="refresh",
        label="Light Refresh",
        description="Swap in accents and soft furnishings, keep the big pieces.",
        target_item_count=8,
        focus_areas=("decor", "textiles", "lighting_accent"),
        strength=0.35,
    ),
    "redesign": IntensityProfile(
        intensity="redesign",
        label="Full Redesign",
        description="Replace the main furniture and restyle the room around it.",
        target_item_count=10,
        focus_areas=("seating_major", "rug", "lighting_major", "decor"),
        strength=0.55,
    ),
    "transform": IntensityProfile(
        intensity="transform",
        label="Complete Transformation",
        description="Reimagine the whole room from the floor up.",
        target_item_count=12,
        focus_areas=("seating_major", "table", "rug", "lighting_major", "decor", "textiles"),
        strength=0.75,
    ),
}

STYLE_PROMPTS: dict[str, str] = {
    "boho": (
        "bohemian style with rattan and jute textures, layered patterned textiles, "
        "macrame, warm earthy tones and plenty of plants"
    ),
    "modern": (
        "modern style with clean lines, low-profile furniture, a neutral palette "
        "with black and brass accents, and uncluttered surfaces"
    ),
    "scandinavian": (
        "scandinavian style with light oak wood, white walls, soft wool and linen "
        "textiles, and bright natural light"
    ),
    "industrial": (
        "industrial style with exposed brick, distressed leather, black metal "
        "fixtures, reclaimed wood and Edison bulb lighting"
    ),
}

_INTENSITY_INSTRUCTIONS: dict[str, str] = {
    "refresh": (
        "Keep the layout and all large furniture. Only update decor, pillows, "
        "throws and small lighting."
    ),
    "redesign": (
        "Keep the room architecture and layout. Replace the main furniture, rug "
        "and lighting to match the new style."
    ),
    "transform": (
        "Keep only the walls, windows and floor plan. Redesign every furnishing, "
        "finish and light fixture."
    ),
}

_KEEP_SENTENCES: dict[str, str] = {
    "seating": "Keep the existing sofa and main seating exactly as they are.",
    "rug": "Keep the existing rug exactly as it is.",
    "lighting": "Keep the existing main light fixtures exactly as they are.",
}


def normalize_intensity(intensity: str | None) -> str:
    value = (intensity or "").strip().lower()
    return value if value in INTENSITY_PROFILES else DEFAULT_INTENSITY


def intensity_profile(intensity: str | None) -> IntensityProfile:
    return INTENSITY_PROFILES[normalize_intensity(intensity)]


def transformation_strength(intensity: str | None) -> float:
    return intensity_profile(intensity).strength


def _room_name(room_type: str) -> str:
    return room_type.replace("_", " ").strip() or "room"


def build_prompt(
    style: str,
    room_type: str,
    intensity: str | None,
    keep_items: KeepItems | None = None,
) -> str:
    """Build the text prompt sent to the image provider."""
    style_text = STYLE_PROMPTS.get(style.strip().lower(), STYLE_PROMPTS["boho"])
    parts = [
        f"Interior design photo of this {_room_name(room_type)}, restyled in {style_text}.",
        _INTENSITY_INSTRUCTIONS[normalize_intensity(intensity)],
    ]
    if keep_items is not None:
        parts.extend(_KEEP_SENTENCES[kind] for kind in keep_items.kept())
    parts.append("Photorealistic, natural lighting, same camera angle.")
    return " ".join(parts)
