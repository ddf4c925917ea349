"""Thresholds and weights used by the adaptation heuristics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from autoadapt.config import Settings


def _default_border() -> dict[str, Any]:
    return {
        "stroke": "rgba(0, 0, 0, 1)",
        "strokeWidth": 0,
        "strokeDashArray": [0, 0],
    }


@dataclass
class AdaptConfig:
    """Controls classification, positioning and size matching."""

    # Elements covering more than this % of the canvas are skewed
    skew_area_threshold: float = 90

    # Size match score blend
    aspect_ratio_weight: float = 0.9
    scale_distance_weight: float = 0.1
    min_match_percentage: float = 20
    max_match_percentage: float = 100

    # Non-skew positioning
    alignment_threshold: float = 1.0  # px from a canvas edge
    center_threshold: float = 0.05  # left/right area imbalance tolerated as centered

    # Text auto-fit bounds when the element has none
    fallback_auto_fit_sizes: tuple[float, float] = (1, math.inf)

    # Merged under an existing border before scaling
    default_border: dict[str, Any] = field(default_factory=_default_border)

    @classmethod
    def from_settings(cls, settings: Settings) -> AdaptConfig:
        return cls(
            skew_area_threshold=settings.skew_area_threshold,
            alignment_threshold=settings.alignment_threshold_px,
            center_threshold=settings.center_threshold,
        )
