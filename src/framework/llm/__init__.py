"""LLM client abstractions and helpers."""

from .client import GeminiClient, LLMClient, build_generation_config
from .config import GeminiConfig

__all__ = [
    "GeminiClient",
    "GeminiConfig",
    "LLMClient",
    "build_generation_config",
]
