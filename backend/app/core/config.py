# File: backend/app/core/config.py
# Version: v0.4.0
"""
Centralized application settings using Pydantic Settings.

Controls:
- App metadata and API prefix
- CORS origins
- Path to the LAMP defaults JSON (design parameters, reaction conditions,
  placeholder primers); unset means backend/app/config/lamp_defaults.json
- Server host/port and log level
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- App ---
    API_PREFIX: str = "/api"
    APP_NAME: str = "miRLAMP"
    APP_VERSION: str = "0.4.0"

    # --- CORS ---
    CORS_ORIGINS: str = "*"  # comma-separated or '*' for all

    # --- LAMP defaults ---
    LAMP_DEFAULTS_PATH: Optional[Path] = None

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.CORS_ORIGINS.strip()
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


settings = Settings()
