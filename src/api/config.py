from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

from framework.utils.env import get_env_bool, split_csv


@dataclass(frozen=True)
class AppConfig:
    host: str
    port: int
    cors_origins: List[str]
    log_level: str
    welcome_on_startup: bool


def load_config() -> AppConfig:
    return AppConfig(
        host=os.getenv("ADVISOR_HOST", "127.0.0.1"),
        port=int(os.getenv("ADVISOR_PORT", "3400")),
        cors_origins=split_csv(os.getenv("CORS_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        welcome_on_startup=get_env_bool("ADVISOR_WELCOME_ON_STARTUP", default=True),
    )
