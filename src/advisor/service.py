from __future__ import annotations

import logging

from advisor.categories import AdvisoryCategory, get_category
from advisor.orchestrator import build_graph
from advisor.prompt_templates.welcome import PROMPT_TEMPLATE as WELCOME_PROMPT
from advisor.schemas import AdvisoryRequest, AdvisoryResponse
from framework.llm.client import LLMClient


logger = logging.getLogger(__name__)


class AdvisorService:
    """Runs advisory requests through the prompt/generate/segment graph.

    The service holds no per-request state; one instance can serve every
    category concurrently. Backend failures surface as
    ``AdvisoryBackendError`` and are never retried.
    """

    def __init__(self, client: LLMClient) -> None:
        self._client = client
        self._graph = build_graph(client)

    def advise(self, category_id: str, request: AdvisoryRequest) -> AdvisoryResponse:
        category = get_category(category_id)
        if not isinstance(request, category.request_model):
            raise TypeError(
                f"{category.id} expects {category.request_model.__name__}, "
                f"got {type(request).__name__}"
            )

        state = {
            "category_id": category.id,
            "request": request,
            "prompt": "",
            "raw_text": "",
            "response": None,
        }
        result_state = self._graph.invoke(state)
        return result_state["response"]

    def welcome(self) -> str:
        return self._client.generate(WELCOME_PROMPT).strip()


def log_welcome(service: AdvisorService) -> None:
    try:
        message = service.welcome()
    except Exception as exc:
        logger.warning("Error generating welcome: %s", exc)
        return
    if message:
        logger.info("%s", message)


def describe_category(category: AdvisoryCategory) -> str:
    return f"POST {category.path:<12} - {category.description}"
