from __future__ import annotations

import logging
from typing import Callable

from advisor.categories import get_category
from advisor.errors import AdvisoryBackendError
from advisor.types import AdvisoryState
from framework.llm.client import LLMClient


logger = logging.getLogger(__name__)


def build_generate_node(client: LLMClient) -> Callable[[AdvisoryState], dict]:
    def generate_node(state: AdvisoryState) -> dict:
        category = get_category(state["category_id"])
        try:
            raw_text = client.generate(state.get("prompt", ""))
        except Exception as exc:
            raise AdvisoryBackendError(category.id, category.failure_context, exc) from exc
        logger.debug("Backend returned %d chars for %s", len(raw_text), category.id)
        return {"raw_text": raw_text}

    return generate_node
