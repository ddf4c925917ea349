"""Tests for the non-skew placement heuristic (1280x720 -> 720x1280, factor 0.5625)."""

from __future__ import annotations

import pytest

from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.positioning import Placement, values_without_skewing

LANDSCAPE = "1280x720"
PORTRAIT = "720x1280"


def _place(**element) -> Placement:
    return values_without_skewing(LANDSCAPE, PORTRAIT, element)


# ── Edge snap ──


def test_left_edge_snaps_and_top_keeps_fraction():
    placement = _place(left=0, top=300, width=200, height=100)
    # top: ceil(300 / 720 * 1280) = ceil(533.3)
    assert placement == Placement(left=0, top=534, width=113, height=57)


def test_right_edge_snaps():
    placement = _place(left=1080, top=100, width=200, height=100)
    assert placement == Placement(left=607, top=178, width=113, height=57)


def test_bottom_edge_snaps():
    placement = _place(left=0, top=620, width=200, height=100)
    assert placement.top == 1280 - 57
    assert placement.left == 0


def test_snap_within_threshold():
    placement = _place(left=0.5, top=300, width=200, height=100)
    assert placement.left == 0


def test_snap_divides_out_scale():
    placement = _place(left=0, top=300, width=100, height=100, scaleX=2)
    assert placement.width == pytest.approx(56.5)
    assert placement.height == 57


def test_configurable_alignment_threshold():
    element = {"left": 5, "top": 300, "width": 200, "height": 100}
    placement = values_without_skewing(LANDSCAPE, PORTRAIT, element, AdaptConfig(alignment_threshold=10))
    assert placement.left == 0


# ── Centering ──


def test_centered_box_keeps_center():
    placement = _place(left=440, top=260, width=400, height=200)
    assert placement == Placement(left=247.5, top=583.5, width=225, height=113)
    assert placement.left + placement.width / 2 == 360
    assert placement.top + placement.height / 2 == 640


def test_slightly_off_center_is_still_centered():
    # 195 px left of the center line, 205 px right of it
    placement = _place(left=445, top=260, width=400, height=200)
    center_x = placement.left + placement.width / 2
    assert center_x == pytest.approx(645 / 1280 * 720)


def test_imbalance_at_threshold_is_not_centered():
    placement = _place(left=450, top=260, width=400, height=200)
    # Right half: anchored on the right edge
    assert placement.left + placement.width == pytest.approx(850 / 1280 * 720)


# ── Quadrant anchor ──


def test_top_left_quadrant_anchors_top_left():
    placement = _place(left=100, top=50, width=200, height=100)
    assert placement.left == pytest.approx(56.25)
    assert placement.top == pytest.approx(88.889, abs=1e-3)
    assert (placement.width, placement.height) == (113, 57)


def test_bottom_right_quadrant_anchors_bottom_right():
    placement = _place(left=900, top=500, width=200, height=100)
    assert placement.left == pytest.approx(505.75)
    assert placement.top == pytest.approx(1009.667, abs=1e-3)
    # Right and bottom edges keep their fractional position
    assert placement.left + placement.width == pytest.approx(1100 / 1280 * 720)
    assert placement.top + placement.height == pytest.approx(600 / 720 * 1280)


# ── Degenerate ──


def test_empty_box_is_degenerate():
    placement = _place(left=0, top=0, width=0, height=0)
    assert placement.is_degenerate


def test_regular_box_is_not_degenerate():
    assert not _place(left=100, top=50, width=200, height=100).is_degenerate


def test_symbolic_sizes():
    assert values_without_skewing("landscape", "portrait", {"left": 0, "top": 300, "width": 200, "height": 100}) == (
        Placement(left=0, top=534, width=113, height=57)
    )
