from __future__ import annotations

from .intensity import normalize_intensity
from .models import Product

REFRESH_LOW_PRICE_THRESHOLD = 100.0
REFRESH_LOW_PRICE_BONUS = 20.0


def score_product(product: Product, intensity: str | None) -> float:
    """Composite score: conversion + commission, plus the refresh low-price bonus."""
    score = product.conversion_score + product.commission_rate
    if normalize_intensity(intensity) == "refresh":
        # Missing prices count as 0 and so always earn the bonus.
        price = product.price_value if product.price_value is not None else 0.0
        if price < REFRESH_LOW_PRICE_THRESHOLD:
            score += REFRESH_LOW_PRICE_BONUS
    return score


def rank(products: list[Product], intensity: str | None) -> list[Product]:
    """Return a new list ordered by descending score; ties keep input order."""
    return sorted(products, key=lambda p: score_product(p, intensity), reverse=True)
