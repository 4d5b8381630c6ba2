from __future__ import annotations

import json
import logging
from typing import Any

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an interior design shopping assistant. "
    "Given a room restyle request and a list of recommended products, "
    "write a short, friendly one-sentence explanation of how each product "
    "fits the requested style and room.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{"explanations": [{"id": "<product_id>", "reason": "<one sentence>"}]}\n'
    "Include only products from the provided list. Do not mention prices."
)


def _build_user_message(
    criteria: dict[str, Any],
    products: list[dict[str, Any]],
) -> str:
    lines = ["## Restyle Request"]
    lines.append(f"- Style: {criteria.get('style', 'boho')}")
    lines.append(f"- Room: {str(criteria.get('room_type', 'living_room')).replace('_', ' ')}")
    if criteria.get("intensity"):
        lines.append(f"- Intensity: {criteria['intensity']}")
    kept = [k for k, v in (criteria.get("keep_items") or {}).items() if v]
    if kept:
        lines.append(f"- Keeping existing: {', '.join(kept)}")

    lines.append("\n## Recommended Products")
    lines.append("| ID | Title | Category | Vendor |")
    lines.append("|---|---|---|---|")
    for p in products:
        lines.append(
            f"| {p['id']} | {p['title']} | {p.get('category', '?')} "
            f"| {p.get('vendor', 'N/A')} |"
        )

    return "\n".join(lines)


def explain_products(
    criteria: dict[str, Any],
    products: list[dict[str, Any]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> dict[str, str]:
    """
    Call Groq LLM to write a one-line explanation per product.

    Returns a dict mapping product id -> reason string.
    Returns empty dict on any failure (timeout, bad JSON, API error).
    """
    if not config.enabled or not config.api_key:
        return {}

    if not products:
        return {}

    known_ids = {p["id"] for p in products}

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": _build_user_message(criteria, products),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content or ""
        parsed = json.loads(content)

        results: dict[str, str] = {}
        for item in parsed.get("explanations", []):
            pid = str(item.get("id", ""))
            reason = item.get("reason", "")
            if pid in known_ids and reason:
                results[pid] = reason

        return results

    except Exception:
        logger.warning("Groq explanation call failed, returning products without reasons", exc_info=True)
        return {}
