from __future__ import annotations

from advisor.categories import get_category
from advisor.types import AdvisoryState


def segment_node(state: AdvisoryState) -> dict:
    category = get_category(state["category_id"])
    response = category.build_response(state["request"], state.get("raw_text", ""))
    return {"response": response}
