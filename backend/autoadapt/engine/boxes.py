"""Box arithmetic shared by the kind adapters.

``*_box`` helpers produce left/top/width/height for rect-like kinds, ``*_transform``
helpers produce left/top/scaleX/scaleY for paths, which carry no width/height.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from autoadapt.engine.context import AdaptContext
from autoadapt.engine.positioning import Placement
from autoadapt.utils.math_helpers import num


def skew_box(element: Mapping[str, Any], ctx: AdaptContext) -> dict[str, float]:
    return {
        "left": ctx.along_x(num(element, "left")),
        "top": ctx.along_y(num(element, "top")),
        "width": ctx.along_x(num(element, "width", 1)),
        "height": ctx.along_y(num(element, "height", 1)),
    }


def placed_box(placement: Placement) -> dict[str, float]:
    return {
        "left": placement.left,
        "top": placement.top,
        "width": placement.width,
        "height": placement.height,
    }


def uniform_box(element: Mapping[str, Any], ratio: float) -> dict[str, float]:
    return {
        "left": num(element, "left") * ratio,
        "top": num(element, "top") * ratio,
        "width": num(element, "width", 1) * ratio,
        "height": num(element, "height", 1) * ratio,
    }


def skew_transform(element: Mapping[str, Any], ctx: AdaptContext) -> dict[str, float]:
    return {
        "left": ctx.along_x(num(element, "left")),
        "top": ctx.along_y(num(element, "top")),
        "scaleX": ctx.along_x(num(element, "scaleX", 1)),
        "scaleY": ctx.along_y(num(element, "scaleY", 1)),
    }


def placed_transform(element: Mapping[str, Any], placement: Placement, ratio: float) -> dict[str, float]:
    return {
        "left": placement.left,
        "top": placement.top,
        "scaleX": num(element, "scaleX", 1) * ratio,
        "scaleY": num(element, "scaleY", 1) * ratio,
    }


def uniform_transform(element: Mapping[str, Any], ratio: float) -> dict[str, float]:
    return {
        "left": num(element, "left") * ratio,
        "top": num(element, "top") * ratio,
        "scaleX": num(element, "scaleX", 1) * ratio,
        "scaleY": num(element, "scaleY", 1) * ratio,
    }
