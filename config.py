"""
Centralised settings loader.

Values come from the process environment and an optional `.env` file.
Field names map to upper-case env-vars (``google_api_key`` ← GOOGLE_API_KEY).
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ─── Gemini ─────────────────────────────────────────────────────
    google_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def get_settings() -> Settings:  # pragma: no cover
    return Settings()


settings: Settings = get_settings()
