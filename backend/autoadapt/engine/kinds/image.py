"""Image and SVG-container adapters.

Both carry an inner image transform (``imageScale``, ``imageLeft``, ``imageTop``). Offsets
follow the axis ratios on the canvas-level paths and the uniform ratio inside a group.
Only images have a corner radius.
"""

from __future__ import annotations

from typing import Any

from autoadapt.engine.boxes import placed_box, skew_box, uniform_box
from autoadapt.engine.context import AdaptContext
from autoadapt.engine.positioning import Placement
from autoadapt.engine.registry import AdaptMode, adapter
from autoadapt.engine.scaling import scale_corner_radius, scale_value, scaled_border
from autoadapt.models.elements import CanvasElement, ElementKind, is_image


def _inner_image(
    element: CanvasElement,
    ctx: AdaptContext,
    x_ratio: float,
    y_ratio: float,
) -> dict[str, Any]:
    ratio = ctx.scaling_ratio
    fields: dict[str, Any] = {
        "imageScale": scale_value(element.get("imageScale"), ratio, 1),
        "imageLeft": scale_value(element.get("imageLeft"), x_ratio, 0),
        "imageTop": scale_value(element.get("imageTop"), y_ratio, 0),
    }
    if is_image(element):
        fields["cornerRadius"] = scale_corner_radius(element.get("cornerRadius"), ratio)
    fields.update(scaled_border(element, ratio, ctx.config))
    return fields


@adapter(
    kind=(ElementKind.IMAGE, ElementKind.SVG_CONTAINER),
    mode=AdaptMode.SKEW,
    description="Stretch image frame per axis",
)
def image_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {
        **element,
        **skew_box(element, ctx),
        **_inner_image(element, ctx, ctx.width_ratio, ctx.height_ratio),
    }


@adapter(
    kind=(ElementKind.IMAGE, ElementKind.SVG_CONTAINER),
    mode=AdaptMode.NON_SKEW,
    description="Place image frame by heuristic",
)
def image_non_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {
        **element,
        **placed_box(placement),
        **_inner_image(element, ctx, ctx.width_ratio, ctx.height_ratio),
    }


@adapter(
    kind=(ElementKind.IMAGE, ElementKind.SVG_CONTAINER),
    mode=AdaptMode.GROUP_CHILD,
    description="Scale image frame inside a group",
)
def image_group_child(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    ratio = ctx.scaling_ratio
    return {
        **element,
        **uniform_box(element, ratio),
        **_inner_image(element, ctx, ratio, ratio),
    }
