"""Adapters for kinds that skip classification: the creative box and audio."""

from __future__ import annotations

from autoadapt.engine.context import AdaptContext
from autoadapt.engine.positioning import Placement
from autoadapt.engine.registry import AdaptMode, adapter
from autoadapt.models.elements import CanvasElement, ElementKind


@adapter(kind=ElementKind.CREATIVE_BOX, mode=AdaptMode.FIXED, description="Fill the target canvas")
def creative_box(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, "width": ctx.target_width, "height": ctx.target_height}


@adapter(kind=ElementKind.AUDIO, mode=AdaptMode.FIXED, description="Audio has no geometry")
def audio(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return dict(element)
