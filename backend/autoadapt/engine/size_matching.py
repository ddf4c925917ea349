"""Size matching. Picks the existing canvas size closest to a requested one.

Two different rankings live here:

* the *selection* used to choose a reference layout: smallest aspect-ratio distance
  first, smallest Euclidean (width, height) distance as the tie-break;
* the *match percentage* reported to callers: a 20–100 score blending normalized
  aspect similarity (90%) with normalized absolute-size similarity (10%).

They can disagree; the selection always wins when a reference is picked.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from autoadapt.engine.config import AdaptConfig
from autoadapt.errors import NoReferenceSizeError
from autoadapt.utils.geometry import euclidean_distance
from autoadapt.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)

SIZE_PRESETS: dict[str, str] = {
    "square": "720x720",
    "landscape": "1280x720",
    "portrait": "720x1280",
}


@dataclass(frozen=True)
class SizeMatch:
    size: str
    percentage: float
    size_id: str | None = None


@dataclass
class ClosestSizeResult:
    closest_size: str
    matches: list[SizeMatch] = field(default_factory=list)


@dataclass
class ClosestSizeObjectsResult:
    closest_size_id: str
    matches: list[SizeMatch] = field(default_factory=list)


def normalize_size(size_value: str) -> str:
    """Map a symbolic size name to its "WxH" form; anything else passes through."""
    return SIZE_PRESETS.get(size_value, size_value)


def _to_number(part: str) -> float:
    part = part.strip()
    if not part:
        return 0.0
    try:
        return float(part)
    except ValueError:
        return float("nan")


def parse_size(size_value: str) -> tuple[float, float]:
    """Split a (possibly symbolic) size into (width, height)."""
    parts = normalize_size(size_value).split("x")
    width = _to_number(parts[0])
    height = _to_number(parts[1]) if len(parts) > 1 else 0.0
    return width, height


def format_size(width: float, height: float) -> str:
    def _fmt(v: float) -> str:
        return str(int(v)) if float(v).is_integer() else str(v)

    return f"{_fmt(width)}x{_fmt(height)}"


def size_distance(size_a: str, size_b: str) -> float:
    """Euclidean distance between two sizes seen as (width, height) points."""
    w1, h1 = parse_size(size_a)
    w2, h2 = parse_size(size_b)
    return euclidean_distance(w1, h1, w2, h2)


def aspect_ratio(width: float, height: float) -> float:
    """width / height, nan when undefined."""
    if not height or math.isnan(height) or math.isnan(width):
        return float("nan")
    return width / height


def _distances(
    points: Sequence[tuple[float, float]], target: tuple[float, float]
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    target_ratio = aspect_ratio(*target)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = np.where(pts[:, 1] != 0, pts[:, 0] / pts[:, 1], np.nan)
    aspect = np.abs(target_ratio - ratios)
    euclid = np.hypot(pts[:, 0] - target[0], pts[:, 1] - target[1])
    return aspect, euclid


def _normalized_similarity(distances: NDArray[np.float64]) -> NDArray[np.float64]:
    """1 at distance 0, 0 at the largest distance; all 1 when every distance is equal."""
    lo, hi = float(np.min(distances)), float(np.max(distances))
    if hi == lo:
        return np.ones_like(distances)
    return 1.0 - distances / hi


def score_candidates(
    candidates: Sequence[str],
    target: str,
    config: AdaptConfig | None = None,
) -> list[SizeMatch]:
    """Match percentage for every candidate, best first (ties keep input order)."""
    config = config or AdaptConfig()
    points = [parse_size(c) for c in candidates]
    percentages = _percentages(points, parse_size(target), config)
    matches = [SizeMatch(size=c, percentage=p) for c, p in zip(candidates, percentages)]
    return sorted(matches, key=lambda m: -m.percentage)


def _percentages(
    points: Sequence[tuple[float, float]],
    target: tuple[float, float],
    config: AdaptConfig,
) -> list[float]:
    floor = config.min_match_percentage
    if not points:
        return []
    aspect, euclid = _distances(points, target)
    valid = ~(np.isnan(aspect) | np.isnan(euclid))
    percentages = [floor] * len(points)
    if not valid.any():
        return percentages

    aspect_sim = _normalized_similarity(aspect[valid])
    euclid_sim = _normalized_similarity(euclid[valid])
    scores = config.aspect_ratio_weight * aspect_sim + config.scale_distance_weight * euclid_sim
    clipped = np.clip(scores * 100, floor, config.max_match_percentage)
    for idx, value in zip(np.flatnonzero(valid), clipped):
        percentages[int(idx)] = round_half_up(float(value))
    return percentages


def _closest_index(points: Sequence[tuple[float, float]], target: tuple[float, float]) -> int:
    """Smallest aspect-ratio distance, then smallest Euclidean distance."""
    aspect, euclid = _distances(points, target)
    ranked = [
        (float(a), float(e), i)
        for i, (a, e) in enumerate(zip(aspect, euclid))
        if not (math.isnan(a) or math.isnan(e))
    ]
    if not ranked:
        raise ValueError(f"no candidate size has a defined aspect ratio against {target}")
    return min(ranked)[2]


def _size_of(entry: Mapping[str, Any]) -> tuple[float, float]:
    width, height = entry.get("width"), entry.get("height")
    return (
        float(width) if width is not None else float("nan"),
        float(height) if height is not None else float("nan"),
    )


def pick_best_reference(
    candidate_sizes_by_id: Mapping[str, Mapping[str, Any]],
    target: str,
) -> str:
    """Id of the candidate size most similar to ``target``.

    A single candidate is returned without scoring. Internal failures fall back to the
    first candidate id.
    """
    ids = list(candidate_sizes_by_id)
    if not ids:
        raise NoReferenceSizeError("No sizes available to use as reference", {"target": target})
    if len(ids) == 1:
        return ids[0]

    try:
        points = [_size_of(candidate_sizes_by_id[i]) for i in ids]
        return ids[_closest_index(points, parse_size(target))]
    except Exception:
        logger.exception("Reference size selection failed for %s, using %s", target, ids[0])
        return ids[0]


def find_closest_size_with_matches(
    sizes: Sequence[str],
    target: str,
    config: AdaptConfig | None = None,
) -> ClosestSizeResult:
    if not sizes:
        raise NoReferenceSizeError("No sizes to match against", {"target": target})
    by_key = {size: dict(zip(("width", "height"), parse_size(size))) for size in sizes}
    closest = pick_best_reference(by_key, target)
    return ClosestSizeResult(
        closest_size=closest,
        matches=score_candidates(sizes, target, config),
    )


def find_closest_size_objects_with_matches(
    sizes_by_id: Mapping[str, Mapping[str, Any]],
    target: str,
    config: AdaptConfig | None = None,
) -> ClosestSizeObjectsResult:
    config = config or AdaptConfig()
    closest_id = pick_best_reference(sizes_by_id, target)
    ids = list(sizes_by_id)
    points = [_size_of(sizes_by_id[i]) for i in ids]
    percentages = _percentages(points, parse_size(target), config)
    matches = [
        SizeMatch(size=format_size(*point), percentage=pct, size_id=size_id)
        for size_id, point, pct in zip(ids, points, percentages)
    ]
    matches.sort(key=lambda m: -m.percentage)
    return ClosestSizeObjectsResult(closest_size_id=closest_id, matches=matches)


def find_best_reference_size(
    sizes_by_id: Mapping[str, Mapping[str, Any]],
    target: str,
    requested_id: str | None = None,
) -> str:
    """Reference size id for generating ``target``.

    An explicitly requested id wins when it exists; otherwise the best match is used.
    """
    if not sizes_by_id:
        raise NoReferenceSizeError("Document has no sizes to adapt from", {"target": target})
    if requested_id is not None:
        if requested_id in sizes_by_id:
            return requested_id
        logger.warning(
            "Requested reference size %r not in document, falling back to best match",
            requested_id,
        )
    best = pick_best_reference(sizes_by_id, target)
    logger.debug("Reference size for %s: %s", target, best)
    return best
