from unittest.mock import patch

import pytest

from backend.recommendations.anchors import compose_anchors
from backend.recommendations.data_store import complementary_for
from backend.recommendations.engine import recommend
from backend.recommendations.intensity import intensity_profile
from backend.recommendations.models import KeepItems, Product, SelectionCriteria


def _criteria(**overrides) -> SelectionCriteria:
    params = {"style": "boho", "room_type": "living_room", "intensity": "redesign"}
    params.update(overrides)
    return SelectionCriteria(**params)


def _ids(products):
    return [p.id for p in products]


@pytest.mark.parametrize("intensity", ["refresh", "redesign", "transform", "extreme", ""])
def test_result_bounded_by_target_count(intensity):
    result = recommend(_criteria(intensity=intensity))
    assert len(result.products) <= intensity_profile(intensity).target_item_count
    assert result.product_count == len(result.products)
    assert result.intensity_info == intensity_profile(intensity)


def test_refresh_scenario():
    result = recommend(_criteria(intensity="refresh"))
    assert result.product_count == 8
    assert _ids(result.products) == [
        "boho-lr-throw-pillows",
        "boho-lr-pendant",
        "boho-lr-macrame",
        "boho-lr-side-table",
        "boho-lr-plant-stand",
        "boho-lr-rug-value",
        "boho-lr-sofa-value",
        "boho-lr-accent-chair",
    ]
    products = list(result.products)
    for current, following in zip(products, products[1:]):
        assert not (current.is_premium_anchor and following.compares_to_id == current.id)


def test_refresh_composer_step_is_identity():
    products = list(recommend(_criteria(intensity="refresh")).products)
    assert compose_anchors(products, "refresh") == products


def test_redesign_scenario_pairs_rug_anchor():
    result = recommend(_criteria(keep_items=KeepItems(rug=False)))
    assert result.product_count == 10
    ids = _ids(result.products)
    assert ids == [
        "boho-lr-rug-premium",
        "boho-lr-rug-value",
        "boho-lr-sofa-premium",
        "boho-lr-sofa-value",
        "boho-lr-throw-pillows",
        "boho-lr-accent-chair",
        "boho-lr-pendant",
        "boho-lr-coffee-table",
        "boho-lr-macrame",
        "boho-lr-floor-lamp",
    ]
    premium = ids.index("boho-lr-rug-premium")
    assert ids[premium + 1] == "boho-lr-rug-value"


def test_transform_scenario_returns_twelve():
    result = recommend(_criteria(intensity="transform"))
    assert result.product_count == 12
    assert _ids(result.products)[-1] == "boho-lr-side-table"


def test_keep_seating_scenario():
    result = recommend(_criteria(keep_items=KeepItems(seating=True)))
    assert all(p.category != "seating_major" for p in result.products)
    complementary_ids = {p.id for p in complementary_for("seating", "boho")}
    assert complementary_ids & set(_ids(result.products))
    # Accent seating is still offered
    assert "boho-lr-accent-chair" in _ids(result.products)


def test_unknown_style_and_room_fall_back():
    fallback = recommend(_criteria(style="cyberpunk", room_type="garage"))
    default = recommend(_criteria())
    assert fallback.products == default.products


def test_unknown_intensity_behaves_like_redesign():
    extreme = recommend(_criteria(intensity="extreme"))
    redesign = recommend(_criteria(intensity="redesign"))
    assert extreme.products == redesign.products
    assert extreme.intensity_info == redesign.intensity_info


def test_non_boho_catalog():
    result = recommend(_criteria(style="modern", intensity="transform"))
    ids = _ids(result.products)
    assert ids[:2] == ["modern-lr-sofa-premium", "modern-lr-sofa-value"]
    assert len(ids) == 11  # catalog is smaller than the target count


def _filler(pid: str, category: str, conversion: float, **kw) -> Product:
    return Product(
        id=pid,
        category=category,
        title=pid,
        display_price="$500",
        price_value=500,
        vendor="Amazon",
        conversion_score=conversion,
        **kw,
    )


def test_truncation_happens_before_anchor_pairing():
    catalog = [_filler(f"decor-{i}", "decor", 90 - i) for i in range(9)]
    catalog.append(_filler("rug-value", "rug", 95, compares_to_id="rug-premium"))
    catalog.append(_filler("rug-premium", "rug", 10, is_premium_anchor=True))

    with patch("backend.recommendations.engine.lookup", return_value=catalog):
        result = recommend(_criteria())

    ids = _ids(result.products)
    assert len(ids) == 10
    assert "rug-premium" not in ids
    assert ids[0] == "rug-value"


def test_empty_candidates_give_empty_result():
    only_rugs = [_filler("rug-only", "rug", 50)]
    with patch("backend.recommendations.engine.lookup", return_value=only_rugs):
        result = recommend(_criteria(style="modern", keep_items=KeepItems(rug=True)))
    assert result.products == ()
    assert result.product_count == 0


def test_recommend_is_repeatable():
    criteria = _criteria(intensity="transform", keep_items=KeepItems(lighting=True))
    assert recommend(criteria) == recommend(criteria)


def test_style_and_room_are_case_insensitive():
    result = recommend(_criteria(style="Boho", room_type=" Bedroom "))
    assert result.products
    assert all(p.id.startswith("boho-br-") for p in result.products)


def test_fallback_style_gets_fallback_complements():
    result = recommend(_criteria(style="cyberpunk", keep_items=KeepItems(seating=True)))
    ids = _ids(result.products)
    assert "boho-comp-sofa-throw" in ids
    assert all(p.category != "seating_major" for p in result.products)
