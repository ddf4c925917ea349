"""FastAPI dependency injection."""

from __future__ import annotations

from autoadapt.config import settings
from autoadapt.engine.config import AdaptConfig


def get_settings():
    return settings


def get_adapt_config() -> AdaptConfig:
    return AdaptConfig.from_settings(settings)
