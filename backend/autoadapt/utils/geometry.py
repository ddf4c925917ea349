"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from shapely.geometry import box

Rect = tuple[float, float, float, float]


def rect_intersection_area(a: Rect, b: Rect) -> float:
    """Overlap area of two (xmin, ymin, xmax, ymax) rectangles.

    Inverted rectangles (xmax < xmin) have no area, nan coordinates give nan.
    """
    coords = (*a, *b)
    if any(math.isnan(c) for c in coords):
        return float("nan")
    if a[2] <= a[0] or a[3] <= a[1] or b[2] <= b[0] or b[3] <= b[1]:
        return 0.0
    return float(box(*a).intersection(box(*b)).area)


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Distance between two points (used on (width, height) pairs)."""
    return float(np.hypot(x2 - x1, y2 - y1))


def split_area_at_x(rect: Rect, split_x: float, clip: Rect) -> tuple[float, float]:
    """Area of ``rect`` inside ``clip`` on each side of the vertical line ``x = split_x``."""
    xmin, ymin, xmax, ymax = rect
    cxmin, cymin, cxmax, cymax = clip
    clipped_height = max(0.0, min(ymax, cymax) - max(ymin, cymin))
    left = max(0.0, min(xmax, split_x) - max(xmin, cxmin)) * clipped_height
    right = max(0.0, min(xmax, cxmax) - max(xmin, split_x)) * clipped_height
    return left, right
