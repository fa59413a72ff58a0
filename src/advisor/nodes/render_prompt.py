from __future__ import annotations

from advisor.categories import get_category
from advisor.types import AdvisoryState


def render_prompt_node(state: AdvisoryState) -> dict:
    category = get_category(state["category_id"])
    return {"prompt": category.render_prompt(state["request"])}
