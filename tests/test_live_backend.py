import os

import pytest

from advisor.schemas import BloodSugarRequest
from advisor.service import AdvisorService
from framework.llm.client import GeminiClient
from framework.llm.config import GeminiConfig


def _require_gemini_env() -> None:
    if not os.getenv("GEMINI_API_KEY"):
        pytest.skip("Set GEMINI_API_KEY to run live backend tests.")


def test_live_blood_sugar_advisory():
    _require_gemini_env()
    service = AdvisorService(GeminiClient(GeminiConfig.from_env()))

    response = service.advise(
        "blood_sugar", BloodSugarRequest(reading=145, meal_timing="after_meal", meal_type="lunch")
    )

    assert response.status == "normal"
    assert response.interpretation
