"""Property scaling: small pure transforms applied on top of a box transform."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any

from autoadapt.engine.config import AdaptConfig
from autoadapt.models.elements import is_audio, is_creative_box, is_group
from autoadapt.utils.math_helpers import ceil_finite, is_number, round_half_up, truthy_num

_CORNERS = ("tl", "tr", "bl", "br")
_SIDES = ("top", "right", "bottom", "left")


def scale_corner_radius(corner_radius: Mapping[str, Any] | None, ratio: float) -> dict[str, float]:
    corner_radius = corner_radius if isinstance(corner_radius, Mapping) else {}
    return {corner: truthy_num(corner_radius.get(corner)) * ratio for corner in _CORNERS}


def scale_padding(padding: Mapping[str, Any] | None, ratio: float) -> dict[str, Any]:
    """Scale each side; extra keys (e.g. ``all``) are kept as they are."""
    if not isinstance(padding, Mapping):
        padding = {side: 0 for side in _SIDES}
    scaled = dict(padding)
    for side in _SIDES:
        value = truthy_num(padding.get(side))
        scaled[side] = value * ratio if value else 0
    return scaled


def scaled_border(
    element: Mapping[str, Any],
    ratio: float,
    config: AdaptConfig | None = None,
) -> dict[str, Any]:
    """``{"border": ...}`` with a scaled stroke, or ``{}`` when nothing should change.

    Meant to be splatted into the adapted record.
    """
    if is_creative_box(element) or is_group(element) or is_audio(element):
        return {}
    border = element.get("border")
    if not border or not isinstance(border, Mapping):
        return {}
    stroke_width = border.get("strokeWidth")
    if not is_number(stroke_width) or not stroke_width:
        return {}

    config = config or AdaptConfig()
    return {
        "border": {
            **copy.deepcopy(config.default_border),
            **border,
            "strokeWidth": stroke_width * ratio,
        }
    }


def adapt_word_style_font_sizes(
    word_style: Sequence[Mapping[str, Any]] | None,
    ratio: float,
) -> list[dict[str, Any]]:
    """Scale pixel font sizes of inline style runs; percentage sizes are relative and stay."""
    if not word_style:
        return []

    adapted: list[dict[str, Any]] = []
    for style in word_style:
        data = style.get("data") or {}
        styles = data.get("styles") or {}
        font_size = styles.get("fontSize")
        if not font_size or not is_number(font_size):
            adapted.append(dict(style))
            continue

        unit = styles.get("fontSizeUnit") or "%"
        new_size = round_half_up(font_size * ratio) if unit == "px" else font_size
        adapted.append(
            {
                **style,
                "data": {
                    **data,
                    "styles": {**styles, "fontSize": new_size, "fontSizeUnit": unit},
                },
            }
        )
    return adapted


def scale_auto_fit_sizes(
    auto_fit_sizes: Sequence[Any] | None,
    ratio: float,
    fallback_height: float,
    config: AdaptConfig | None = None,
) -> list[float]:
    """[min, max] font bounds; a missing bound starts from ``fallback_height``."""
    if isinstance(auto_fit_sizes, (list, tuple)) and len(auto_fit_sizes) == 2:
        return [
            ceil_finite((size if is_number(size) else fallback_height) * ratio)
            for size in auto_fit_sizes
        ]
    config = config or AdaptConfig()
    return list(config.fallback_auto_fit_sizes)


def scale_value(value: Any, ratio: float, default: float) -> float:
    """``value * ratio`` with ``default`` standing in for a missing value."""
    return (value if is_number(value) else default) * ratio
