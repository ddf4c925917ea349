"""Area coverage and skew eligibility.

An element is *skewed* (scaled independently per axis) when it is effectively a
background: it covers most of the canvas or spans one full axis. Everything else keeps
its proportions and goes through the non-skew positioner.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from autoadapt.engine.config import AdaptConfig
from autoadapt.models.elements import DataType
from autoadapt.utils.geometry import rect_intersection_area
from autoadapt.utils.math_helpers import floor_finite, is_number, num, round_half_up


@dataclass(frozen=True)
class ReferenceLengths:
    left: float
    top: float
    width: float
    height: float
    canvas_width: float
    canvas_height: float

    @classmethod
    def of(cls, element: Mapping[str, Any], canvas_width: float, canvas_height: float) -> ReferenceLengths:
        return cls(
            left=num(element, "left", 0),
            top=num(element, "top", 0),
            width=num(element, "width", 1),
            height=num(element, "height", 1),
            canvas_width=canvas_width,
            canvas_height=canvas_height,
        )


def _present(element: Mapping[str, Any], key: str, missing: float) -> float:
    """``missing`` when the key is absent, nan when it is present but not a number."""
    if key not in element:
        return missing
    value = element[key]
    return value if is_number(value) else float("nan")


def area_percentage(element: Mapping[str, Any], canvas_width: Any, canvas_height: Any) -> float:
    """Percentage (0–100, rounded) of the canvas covered by the element's bounding box.

    ``scaleX`` and ``scaleY`` are treated differently: a ``scaleY`` key
    holding null counts as 1, a ``scaleX`` key holding null makes the result nan.
    """
    canvas_width = canvas_width if is_number(canvas_width) else 0
    canvas_height = canvas_height if is_number(canvas_height) else 0

    scale_y = element.get("scaleY") if "scaleY" in element else 1
    if not is_number(scale_y):
        scale_y = 1
    width = _present(element, "width", 1) * _present(element, "scaleX", 1)
    height = _present(element, "height", 1) * scale_y
    top = _present(element, "top", 0)
    left = _present(element, "left", 0)

    canvas_area = canvas_width * canvas_height
    if canvas_area == 0:
        return 0

    overlap = rect_intersection_area(
        (left, top, left + width, top + height),
        (0.0, 0.0, canvas_width, canvas_height),
    )
    if math.isnan(overlap):
        return float("nan")
    return round_half_up(overlap / canvas_area * 100)


def should_skew(
    area_pct: float,
    lengths: ReferenceLengths,
    kind: str | DataType | None,
    config: AdaptConfig | None = None,
) -> bool:
    """Groups never skew; large or full-span elements do; nan area never passes the threshold."""
    config = config or AdaptConfig()
    if kind == DataType.GROUP or kind == DataType.GROUP.value:
        return False
    if area_pct > config.skew_area_threshold:
        return True

    spans_full_width = (
        floor_finite(lengths.left) <= 0 and floor_finite(lengths.width) >= lengths.canvas_width
    )
    spans_full_height = (
        floor_finite(lengths.top) <= 0 and floor_finite(lengths.height) >= lengths.canvas_height
    )
    return spans_full_width or spans_full_height
