"""Vector shape adapters: rounded rects and plain paths.

Rounded rects are boxes with a corner radius. Paths have no width/height of their own;
their extent is ``scaleX``/``scaleY``.
"""

from __future__ import annotations

from autoadapt.engine.boxes import (
    placed_box,
    placed_transform,
    skew_box,
    skew_transform,
    uniform_box,
    uniform_transform,
)
from autoadapt.engine.context import AdaptContext
from autoadapt.engine.positioning import Placement
from autoadapt.engine.registry import AdaptMode, adapter
from autoadapt.engine.scaling import scale_corner_radius, scaled_border
from autoadapt.models.elements import CanvasElement, ElementKind


def _rect_style(element: CanvasElement, ctx: AdaptContext) -> dict:
    ratio = ctx.scaling_ratio
    return {
        "cornerRadius": scale_corner_radius(element.get("cornerRadius"), ratio),
        **scaled_border(element, ratio, ctx.config),
    }


@adapter(kind=ElementKind.ROUNDED_RECT, mode=AdaptMode.SKEW)
def rounded_rect_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, **skew_box(element, ctx), **_rect_style(element, ctx)}


@adapter(kind=ElementKind.ROUNDED_RECT, mode=AdaptMode.NON_SKEW)
def rounded_rect_non_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, **placed_box(placement), **_rect_style(element, ctx)}


@adapter(kind=ElementKind.ROUNDED_RECT, mode=AdaptMode.GROUP_CHILD)
def rounded_rect_group_child(
    element: CanvasElement, ctx: AdaptContext, placement: Placement | None
) -> CanvasElement:
    return {**element, **uniform_box(element, ctx.scaling_ratio), **_rect_style(element, ctx)}


@adapter(kind=ElementKind.PATH, mode=AdaptMode.SKEW, description="Stretch path scale per axis")
def path_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {
        **element,
        **skew_transform(element, ctx),
        **scaled_border(element, ctx.scaling_ratio, ctx.config),
    }


@adapter(kind=ElementKind.PATH, mode=AdaptMode.NON_SKEW, description="Move path, scale uniformly")
def path_non_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    ratio = ctx.scaling_ratio
    return {
        **element,
        **placed_transform(element, placement, ratio),
        **scaled_border(element, ratio, ctx.config),
    }


@adapter(kind=ElementKind.PATH, mode=AdaptMode.GROUP_CHILD)
def path_group_child(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    ratio = ctx.scaling_ratio
    return {
        **element,
        **uniform_transform(element, ratio),
        **scaled_border(element, ratio, ctx.config),
    }
