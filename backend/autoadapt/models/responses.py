"""API response models."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, field_serializer


def json_safe(value: Any) -> Any:
    """Replace inf/nan (not valid JSON) with None, recursively."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    adapters_registered: int = 0


class SizeMatchOut(BaseModel):
    size_id: str | None = None
    size: str
    percentage: float


class SizeMatchResponse(BaseModel):
    best_size_id: str
    matches: list[SizeMatchOut] = Field(default_factory=list)


class AdaptResponse(BaseModel):
    objects: dict[str, dict[str, Any]]
    decisions: dict[str, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
    skewed: int = 0
    non_skewed: int = 0
    passed_through: int = 0

    @field_serializer("objects")
    def _serialize_objects(self, objects: dict[str, dict[str, Any]]) -> dict[str, Any]:
        return json_safe(objects)


class LayoutResponse(BaseModel):
    reference_size_id: str
    target_size: str
    objects: dict[str, dict[str, Any]]

    @field_serializer("objects")
    def _serialize_objects(self, objects: dict[str, dict[str, Any]]) -> dict[str, Any]:
        return json_safe(objects)
