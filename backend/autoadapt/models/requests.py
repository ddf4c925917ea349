"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SizeEntry(BaseModel):
    width: float
    height: float


class SizeMatchRequest(BaseModel):
    sizes: dict[str, SizeEntry] = Field(..., description="Existing sizes keyed by size id")
    target: str = Field(..., description='Requested size, "WxH" or square/landscape/portrait')
    requested_id: str | None = Field(default=None, description="Preferred reference size id")


class AdaptRequest(BaseModel):
    objects: dict[str, dict[str, Any]] = Field(..., description="Flat element records keyed by id")
    reference_size: str = Field(..., description='Size the objects are laid out for, "WxH"')
    target_size: str = Field(..., description='Size to adapt to, "WxH"')


class LayoutRequest(BaseModel):
    variant: dict[str, Any] = Field(..., description="Document variant with sizes and objects")
    target_size: str = Field(..., description='Size to generate, "WxH"')
    reference_size_id: str | None = Field(default=None, description="Force a reference size")
