"""AdaptContext — the state flowing through one adaptation call.

Source records (``objects``) are read-only; adapted records accumulate in ``adapted``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.size_matching import normalize_size, parse_size
from autoadapt.errors import InvalidSizeError
from autoadapt.models.elements import CanvasElement


def _checked_size(size: str, role: str) -> tuple[float, float]:
    width, height = parse_size(size)
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise InvalidSizeError(f"Invalid {role} size {size!r}", {role: size})
    return width, height


@dataclass
class AdaptContext:
    """Shared state for adapting one element collection to one target size."""

    objects: Mapping[str, CanvasElement]
    reference_size: str
    target_size: str
    reference_width: float
    reference_height: float
    target_width: float
    target_height: float
    config: AdaptConfig = field(default_factory=AdaptConfig)

    # --- Results ---
    adapted: dict[str, CanvasElement] = field(default_factory=dict)
    # element id -> AdaptMode value, or "pass" for unchanged copies
    decisions: dict[str, str] = field(default_factory=dict)
    area_percentages: dict[str, float] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        objects: Mapping[str, CanvasElement],
        reference_size: str,
        target_size: str,
        config: AdaptConfig | None = None,
    ) -> AdaptContext:
        ref_w, ref_h = _checked_size(reference_size, "reference")
        new_w, new_h = _checked_size(target_size, "target")
        return cls(
            objects=objects,
            reference_size=normalize_size(reference_size),
            target_size=normalize_size(target_size),
            reference_width=ref_w,
            reference_height=ref_h,
            target_width=new_w,
            target_height=new_h,
            config=config or AdaptConfig(),
        )

    @property
    def width_ratio(self) -> float:
        return self.target_width / self.reference_width

    @property
    def height_ratio(self) -> float:
        return self.target_height / self.reference_height

    @property
    def scaling_ratio(self) -> float:
        return min(self.width_ratio, self.height_ratio)

    def count(self, decision: str) -> int:
        return sum(1 for d in self.decisions.values() if d == decision)

    def along_x(self, value: float) -> float:
        """Horizontal length on the target canvas (multiply first, keeps integers exact)."""
        return value * self.target_width / self.reference_width

    def along_y(self, value: float) -> float:
        return value * self.target_height / self.reference_height
