"""Text adapters.

Besides the box, text scales its typography: font size, word spacing, padding, corner
radius, auto-fit bounds and pixel-sized inline style runs.
"""

from __future__ import annotations

from typing import Any

from autoadapt.engine.boxes import placed_box, skew_box, uniform_box
from autoadapt.engine.context import AdaptContext
from autoadapt.engine.positioning import Placement
from autoadapt.engine.registry import AdaptMode, adapter
from autoadapt.engine.scaling import (
    adapt_word_style_font_sizes,
    scale_auto_fit_sizes,
    scale_corner_radius,
    scale_padding,
    scaled_border,
)
from autoadapt.models.elements import CanvasElement, ElementKind
from autoadapt.utils.math_helpers import is_number, truthy_num


def _typography(element: CanvasElement, ctx: AdaptContext) -> dict[str, Any]:
    ratio = ctx.scaling_ratio
    fields: dict[str, Any] = {
        "wordSpacing": truthy_num(element.get("wordSpacing")) * ratio,
        "padding": scale_padding(element.get("padding"), ratio),
        "cornerRadius": scale_corner_radius(element.get("cornerRadius"), ratio),
        **scaled_border(element, ratio, ctx.config),
        "autoFitSizes": scale_auto_fit_sizes(
            element.get("autoFitSizes"), ratio, ctx.reference_height, ctx.config
        ),
        "wordStyle": adapt_word_style_font_sizes(element.get("wordStyle"), ratio),
    }
    font_size = element.get("fontSize")
    if is_number(font_size):
        fields["fontSize"] = font_size * ratio
    return fields


@adapter(kind=ElementKind.TEXT, mode=AdaptMode.SKEW, description="Stretch text box per axis")
def text_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, **skew_box(element, ctx), **_typography(element, ctx)}


@adapter(kind=ElementKind.TEXT, mode=AdaptMode.NON_SKEW, description="Place text box by heuristic")
def text_non_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, **placed_box(placement), **_typography(element, ctx)}


@adapter(kind=ElementKind.TEXT, mode=AdaptMode.GROUP_CHILD, description="Scale text inside a group")
def text_group_child(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, **uniform_box(element, ctx.scaling_ratio), **_typography(element, ctx)}
