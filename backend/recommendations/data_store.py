from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .models import Product

logger = logging.getLogger(__name__)

_CATALOG_JSON = Path(__file__).resolve().parent.parent / "data" / "catalog.json"

DEFAULT_STYLE = "boho"
DEFAULT_ROOM_TYPE = "living_room"

_catalog: dict[str, Any] | None = None


def _catalog_key(style: str, room_type: str) -> str:
    return f"{style}_{room_type}"


def _load(path: Path = _CATALOG_JSON) -> dict[str, Any]:
    with path.open(encoding="utf-8") as fh:
        raw = json.load(fh)

    catalogs = {
        key: tuple(Product(**item) for item in items)
        for key, items in raw.get("catalogs", {}).items()
    }
    complementary = {
        key: tuple(Product(**item) for item in items)
        for key, items in raw.get("complementary", {}).items()
    }
    logger.info(
        "Loaded catalog %s: %d style/room entries, %d complementary sets",
        raw.get("version", "unversioned"),
        len(catalogs),
        len(complementary),
    )
    return {"catalogs": catalogs, "complementary": complementary}


def get_catalog() -> dict[str, Any]:
    """Return the in-memory catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = _load()
    return _catalog


def resolve(style: str, room_type: str) -> tuple[str, str]:
    """Normalise a style/room pair to a catalog key, falling back to boho living room."""
    style = style.strip().lower()
    room_type = room_type.strip().lower()
    if _catalog_key(style, room_type) in get_catalog()["catalogs"]:
        return style, room_type
    return DEFAULT_STYLE, DEFAULT_ROOM_TYPE


def lookup(style: str, room_type: str) -> list[Product]:
    """Products for a style/room pair, or the boho living room set on a miss."""
    style, room_type = resolve(style, room_type)
    return list(get_catalog()["catalogs"].get(_catalog_key(style, room_type), ()))


def complementary_for(kind: str, style: str) -> list[Product]:
    """Products registered to pair with a kept item of ``kind`` in ``style``."""
    key = f"{kind.strip().lower()}_{style.strip().lower()}"
    return list(get_catalog()["complementary"].get(key, ()))


def styles() -> list[str]:
    keys = get_catalog()["catalogs"].keys()
    return sorted({key.split("_", 1)[0] for key in keys})


def room_types() -> list[str]:
    keys = get_catalog()["catalogs"].keys()
    return sorted({key.split("_", 1)[1] for key in keys})
