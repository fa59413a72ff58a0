from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import os


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model_name: str
    temperature: Optional[float]
    max_output_tokens: Optional[int]

    @classmethod
    def from_env(cls) -> "GeminiConfig":
        api_key = os.getenv("GEMINI_API_KEY", "").strip()
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable is missing.")

        model_name = os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash")

        raw_temperature = os.getenv("GEMINI_TEMPERATURE")
        temperature = float(raw_temperature) if raw_temperature else None
        raw_max_tokens = os.getenv("GEMINI_MAX_OUTPUT_TOKENS")
        max_output_tokens = int(raw_max_tokens) if raw_max_tokens else None

        return cls(
            api_key=api_key,
            model_name=model_name,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
