from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _clean_key(raw: Optional[str]) -> Optional[str]:
    # Keys pasted into .env often carry stray quotes.
    if raw is None:
        return None
    cleaned = raw.replace('"', "").replace("'", "").strip()
    return cleaned or None


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Built once at startup and handed to the relay and the app factory.
    """

    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-flash-latest"
    temperature: Optional[float] = None
    top_p: Optional[float] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            app_env=os.getenv("APP_ENV", "development"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT") or 3000),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            gemini_api_key=_clean_key(os.getenv("GEMINI_API_KEY")),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-flash-latest"),
            temperature=_optional_float("MODEL_TEMPERATURE"),
            top_p=_optional_float("MODEL_TOP_P"),
        )

    @property
    def masked_api_key(self) -> str:
        key = self.gemini_api_key or ""
        if len(key) <= 9:
            return "*" * len(key)
        return f"{key[:5]}...{key[-4:]}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
