from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MEMBERS_URL = "https://geektrust.s3-ap-southeast-1.amazonaws.com/adminui-problem/members.json"


@dataclass(frozen=True)
class SDKConfig:
    members_url: str
    timeout_seconds: float
    verify_ssl: bool

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "SDKConfig":
        _load_dotenv(env_file)
        members_url = os.getenv("ADMIN_PANEL_MEMBERS_URL", DEFAULT_MEMBERS_URL).strip() or DEFAULT_MEMBERS_URL
        timeout_seconds = float(os.getenv("ADMIN_PANEL_TIMEOUT_SECONDS", "30"))
        verify_ssl = parse_bool(os.getenv("ADMIN_PANEL_VERIFY_SSL", "true"), default=True)
        config = cls(
            members_url=members_url,
            timeout_seconds=timeout_seconds,
            verify_ssl=verify_ssl,
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not self.members_url.startswith(("http://", "https://")):
            raise ValueError("ADMIN_PANEL_MEMBERS_URL must be an http(s) URL")
        if self.timeout_seconds <= 0:
            raise ValueError("ADMIN_PANEL_TIMEOUT_SECONDS must be greater than 0")


def parse_bool(value: str | bool | None, default: bool = True) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default

    normalized = str(value).strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _load_dotenv(path: str) -> None:
    dotenv_path = Path(path)
    if not dotenv_path.exists():
        return

    for raw_line in dotenv_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())
