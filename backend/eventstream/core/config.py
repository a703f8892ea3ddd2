from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _dotenv_override_enabled() -> bool:
    v = os.getenv("DOTENV_OVERRIDE", "").strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def load_env_files(*, repo_root: Path | None = None) -> list[Path]:
    """
    Load environment variables from local env files using python-dotenv.

    - OS environment variables win unless DOTENV_OVERRIDE is truthy.
    - Returns the env file paths that were found and loaded.
    """
    root = repo_root or Path(__file__).resolve().parents[3]
    candidates = [
        root / "backend" / ".env",
        root / "backend" / "env",
    ]

    loaded: list[Path] = []
    for p in candidates:
        if p.is_file():
            load_dotenv(dotenv_path=p, override=_dotenv_override_enabled())
            loaded.append(p)
    return loaded


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    env: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"
    # Level for the codec loggers; falls back to log_level when unset.
    codec_log_level: str | None = None

    allowed_origins: str = "http://localhost:5173"

    # Request bounds for the codec endpoints.
    max_decode_bytes: int = Field(default=1024 * 1024, ge=1)
    max_events_per_request: int = Field(default=100, ge=1)

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_env_files()
    return Settings()
