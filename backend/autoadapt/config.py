"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    autoadapt_env: str = "development"
    autoadapt_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Engine tuning
    skew_area_threshold: float = 90
    alignment_threshold_px: float = 1.0
    center_threshold: float = 0.05

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
