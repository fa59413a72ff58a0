from __future__ import annotations

from typing import Protocol

from google import genai
from google.genai import types

from framework.llm.config import GeminiConfig


class LLMClient(Protocol):
    def generate(self, prompt: str) -> str:  # pragma: no cover - interface only
        ...


def build_generation_config(config: GeminiConfig) -> types.GenerateContentConfig | None:
    if config.temperature is None and config.max_output_tokens is None:
        return None
    return types.GenerateContentConfig(
        temperature=config.temperature,
        max_output_tokens=config.max_output_tokens,
    )


class GeminiClient:
    def __init__(self, config: GeminiConfig) -> None:
        self._client = genai.Client(api_key=config.api_key)
        self._model_name = config.model_name
        self._generation_config = build_generation_config(config)

    @property
    def model_name(self) -> str:
        return self._model_name

    def generate(self, prompt: str) -> str:
        response = self._client.models.generate_content(
            model=self._model_name,
            contents=prompt,
            config=self._generation_config,
        )
        return getattr(response, "text", "") or ""
