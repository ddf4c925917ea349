"""Non-skew positioning: keep an element's qualitative placement on a new canvas.

The element is resized uniformly by ``min(widthRatio, heightRatio)`` and then placed by
the first rule that applies, in this order:

1. edge snap: any edge within ``alignment_threshold`` px of the canvas edge stays on
   that edge; the other axis keeps its offset as a fraction of the canvas;
2. horizontal centering: if the box splits almost evenly across the vertical center
   line, its center point keeps its fractional coordinates;
3. quadrant anchor: the edge nearest the element's half of the canvas keeps its
   fractional coordinate.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.size_matching import parse_size
from autoadapt.utils.geometry import split_area_at_x
from autoadapt.utils.math_helpers import ceil_finite, num, safe_divide


@dataclass(frozen=True)
class Placement:
    left: float
    top: float
    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        return self.left == 0 and self.top == 0 and self.width == 0 and self.height == 0


def values_without_skewing(
    reference_size: str,
    target_size: str,
    element: Mapping[str, Any],
    config: AdaptConfig | None = None,
) -> Placement:
    """New box for ``element`` moved from ``reference_size`` to ``target_size``."""
    config = config or AdaptConfig()
    ref_w, ref_h = parse_size(reference_size)
    new_w, new_h = parse_size(target_size)

    top = num(element, "top")
    left = num(element, "left")
    scale_x = num(element, "scaleX", 1)
    scale_y = num(element, "scaleY", 1)
    width = num(element, "width", 1) * scale_x
    height = num(element, "height", 1) * scale_y

    scale_factor = min(new_w / ref_w, new_h / ref_h)
    scaled_w = ceil_finite(width * scale_factor)
    scaled_h = ceil_finite(height * scale_factor)

    threshold = config.alignment_threshold
    from_right = abs(left + width - ref_w)
    from_bottom = abs(top + height - ref_h)
    from_left = abs(left)
    from_top = abs(top)

    if min(from_right, from_left, from_bottom, from_top) < threshold:
        if from_right < threshold:
            new_left = new_w - scaled_w
        elif from_left < threshold:
            new_left = 0
        else:
            new_left = ceil_finite(left / ref_w * new_w)

        if from_bottom < threshold:
            new_top = new_h - scaled_h
        elif from_top < threshold:
            new_top = 0
        else:
            new_top = ceil_finite(top / ref_h * new_h)

        # Callers re-apply scaleX/scaleY on top of width/height in this branch
        return Placement(
            left=new_left,
            top=new_top,
            width=safe_divide(scaled_w, scale_x),
            height=safe_divide(scaled_h, scale_y),
        )

    center_x = left + width / 2
    center_y = top + height / 2
    right = left + width
    bottom = top + height

    left_area, right_area = split_area_at_x(
        (left, top, right, bottom), ref_w / 2, (0.0, 0.0, ref_w, ref_h)
    )
    total_area = left_area + right_area
    centered = total_area > 0 and abs(left_area - right_area) / total_area < config.center_threshold

    if centered:
        new_center_x = center_x / ref_w * new_w
        new_center_y = center_y / ref_h * new_h
        return Placement(
            left=new_center_x - scaled_w / 2,
            top=new_center_y - scaled_h / 2,
            width=scaled_w,
            height=scaled_h,
        )

    in_right_half = center_x > ref_w / 2
    in_bottom_half = center_y > ref_h / 2

    anchor_x = (right if in_right_half else left) / ref_w * new_w
    anchor_y = (bottom if in_bottom_half else top) / ref_h * new_h

    return Placement(
        left=anchor_x - scaled_w if in_right_half else anchor_x,
        top=anchor_y - scaled_h if in_bottom_half else anchor_y,
        width=scaled_w,
        height=scaled_h,
    )
