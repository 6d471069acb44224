"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults provided for every setting: the service runs with no .env

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API
    cors_origins: list[str] = ["http://localhost:3030"]
    max_input_length: int = 100_000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
