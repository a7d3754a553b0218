from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from clients.members_sdk.config import _load_dotenv

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class AppConfig:
    page_size: int
    boundary_count: int
    sibling_count: int
    log_level: str

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "AppConfig":
        _load_dotenv(env_file)
        config = cls(
            page_size=_int_env("ADMIN_PANEL_PAGE_SIZE", "10"),
            boundary_count=_int_env("ADMIN_PANEL_BOUNDARY_COUNT", "1"),
            sibling_count=_int_env("ADMIN_PANEL_SIBLING_COUNT", "1"),
            log_level=os.getenv("ADMIN_PANEL_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.page_size < 1:
            raise ValueError("ADMIN_PANEL_PAGE_SIZE must be >= 1")
        if self.boundary_count < 0:
            raise ValueError("ADMIN_PANEL_BOUNDARY_COUNT must be >= 0")
        if self.sibling_count < 0:
            raise ValueError("ADMIN_PANEL_SIBLING_COUNT must be >= 0")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"ADMIN_PANEL_LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
