from __future__ import annotations

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from pharmascan.domain.ports.Settings_provider import Settings_provider


# Keys the application reads, with their defaults.
KNOWN_KEYS: Dict[str, str] = {
    "SERVE": "0",
    "DOMAIN": "0.0.0.0",
    "PORT": "8080",
    "ALLOWED_CORS_ORIGINS": "*",
    "SWAGGER_ENABLED": "1",
    "OUTPUT_FORMAT": "csv",
    "START_RECORD_NO": "1",
    "LOG_LEVEL": "DEBUG",
}


class EnvSettings(Settings_provider):
    """Settings backed by process environment, seeded from `.env` once."""

    def __init__(self, *, dotenv: bool = True) -> None:
        if dotenv:
            load_dotenv()

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        if default is None:
            default = KNOWN_KEYS.get(key)
        return os.getenv(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        v = os.getenv(key)
        if v is None:
            return default
        return v.strip().lower() in ("1", "true", "yes")

    def get_int(self, key: str, default: int) -> int:
        v = os.getenv(key)
        if v is None or not v.strip():
            return default
        try:
            return int(v)
        except ValueError:
            return default

    def snapshot(self) -> Dict[str, str]:
        return {k: os.getenv(k, d) for k, d in KNOWN_KEYS.items()}
