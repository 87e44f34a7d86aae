"""Environment-driven settings via pydantic-settings.

Invariants:
    - get_env() is cached (lru_cache): single instance per process
    - Every value can be overridden with a REGISTRY_-prefixed variable
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class EnvSettings(BaseSettings):
    """Registry settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REGISTRY_", env_file=".env", case_sensitive=False
    )

    secret_key: str = "django-insecure-registry-dev-key"
    debug: bool = False
    allowed_hosts: list[str] = ["localhost", "127.0.0.1", "testserver"]

    # Storage
    store_backend: Literal["memory", "django"] = "django"
    database_path: Path = BASE_DIR / "db.sqlite3"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_env() -> EnvSettings:
    return EnvSettings()
