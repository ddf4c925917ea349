"""Tests for the adaptation driver (landscape 1280x720 -> portrait 720x1280)."""

from __future__ import annotations

import copy
import math

import pytest

from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.context import AdaptContext
from autoadapt.engine.driver import PASS, AdaptationDriver, adapt_objects, create_driver
from autoadapt.engine.registry import AdapterRegistry
from autoadapt.errors import HeuristicFailureError, InvalidSizeError

LANDSCAPE = "1280x720"
PORTRAIT = "720x1280"


def _run(objects, reference=LANDSCAPE, target=PORTRAIT) -> AdaptContext:
    ctx = AdaptContext.create(objects, reference, target)
    return create_driver().run(ctx)


@pytest.fixture
def adapted(landscape_objects) -> AdaptContext:
    return _run(landscape_objects)


# ── Context ──


class TestContext:
    def test_ratios(self):
        ctx = AdaptContext.create({}, LANDSCAPE, PORTRAIT)
        assert ctx.width_ratio == 0.5625
        assert ctx.height_ratio == pytest.approx(1.7778, abs=1e-4)
        assert ctx.scaling_ratio == 0.5625

    def test_symbolic_sizes_are_normalized(self):
        ctx = AdaptContext.create({}, "landscape", "portrait")
        assert (ctx.reference_size, ctx.target_size) == (LANDSCAPE, PORTRAIT)

    @pytest.mark.parametrize("size", ["0x720", "1280x0", "axb", "", "banner"])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidSizeError):
            AdaptContext.create({}, size, PORTRAIT)
        with pytest.raises(InvalidSizeError):
            AdaptContext.create({}, LANDSCAPE, size)

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError):
            adapt_objects({}, LANDSCAPE, "-5x10")


# ── Skew ──


class TestSkew:
    def test_full_bleed_background_fills_target(self, adapted):
        background = adapted.adapted["background"]
        assert adapted.decisions["background"] == "skew"
        assert (background["left"], background["top"]) == (0, 0)
        assert (background["width"], background["height"]) == (720, 1280)
        assert background["imageScale"] == 0.5625
        assert adapted.area_percentages["background"] == 100

    def test_full_width_band_round_trips(self):
        band = {
            "band": {"dataType": "SHAPE", "type": "rounded-rect", "left": 0, "top": 600, "width": 1280, "height": 120}
        }
        there = _run(band)
        assert there.decisions["band"] == "skew"
        assert there.adapted["band"]["width"] == 720
        assert there.adapted["band"]["top"] == pytest.approx(1066.667, abs=1e-3)

        back = _run(there.adapted, PORTRAIT, LANDSCAPE)
        assert back.decisions["band"] == "skew"
        for key, value in band["band"].items():
            if isinstance(value, (int, float)):
                assert back.adapted["band"][key] == pytest.approx(value)

    def test_path_skew_stretches_scale(self):
        objects = {"wave": {"dataType": "SHAPE", "type": "path", "left": 0, "top": 0, "width": 1280, "height": 100}}
        wave = _run(objects).adapted["wave"]
        assert wave["scaleX"] == 0.5625
        assert wave["scaleY"] == pytest.approx(1280 / 720)


# ── Non-skew ──


class TestNonSkew:
    def test_headline_keeps_proportion(self, adapted):
        headline = adapted.adapted["headline"]
        assert adapted.decisions["headline"] == "non_skew"
        assert headline["fontSize"] == 27
        assert headline["autoFitSizes"] == [1, math.inf]
        assert headline["wordStyle"] == []
        assert headline["text"] == "Summer sale"

    def test_centered_card_stays_centered(self, adapted):
        card = adapted.adapted["card"]
        assert card["left"] + card["width"] / 2 == 360
        assert card["top"] + card["height"] / 2 == 640
        assert card["cornerRadius"] == {"tl": 9, "tr": 9, "bl": 9, "br": 9}

    def test_svg_container_inner_image(self, adapted):
        logo = adapted.adapted["logo"]
        assert logo["imageScale"] == 2 * 0.5625
        assert "cornerRadius" not in logo

    def test_degenerate_placement_raises(self):
        objects = {"ghost": {"dataType": "TEXT", "left": 0, "top": 0, "width": 0, "height": 0}}
        with pytest.raises(HeuristicFailureError) as exc_info:
            _run(objects)
        assert exc_info.value.context == {"element_id": "ghost", "kind": "TEXT"}


# ── Fixed and pass-through ──


class TestFixedAndPass:
    def test_creative_box_fills_target(self, adapted):
        box = adapted.adapted["box"]
        assert (box["width"], box["height"]) == (720, 1280)
        assert adapted.decisions["box"] == "fixed"

    def test_audio_unchanged(self, adapted, landscape_objects):
        assert adapted.adapted["music"] == landscape_objects["music"]
        assert adapted.decisions["music"] == "fixed"

    def test_video_passes_through(self, adapted, landscape_objects):
        assert adapted.adapted["clip"] == landscape_objects["clip"]
        assert adapted.decisions["clip"] == PASS

    def test_unknown_kind_passes_through(self):
        objects = {"x": {"dataType": "HOLOGRAM", "left": 10, "width": 5}}
        ctx = _run(objects)
        assert ctx.adapted == objects
        assert ctx.decisions == {"x": PASS}

    def test_empty_registry_passes_everything(self, landscape_objects):
        ctx = AdaptContext.create(landscape_objects, LANDSCAPE, PORTRAIT)
        AdaptationDriver(AdapterRegistry()).run(ctx)
        assert ctx.adapted == landscape_objects
        assert set(ctx.decisions.values()) == {PASS}


# ── Groups ──


class TestGroups:
    def test_group_container_is_placed(self, adapted):
        badge = adapted.adapted["badge"]
        assert adapted.decisions["badge"] == "non_skew"
        assert badge["left"] == pytest.approx(56.25)
        assert badge["top"] == pytest.approx(177.78, abs=1e-2)
        assert (badge["width"], badge["height"]) == (113, 57)
        assert badge["objects"] == ["badge-text", "badge-star"]

    def test_members_scale_uniformly(self, adapted):
        text = adapted.adapted["badge-text"]
        star = adapted.adapted["badge-star"]
        assert adapted.decisions["badge-text"] == "group_child"
        assert adapted.decisions["badge-star"] == "group_child"
        assert text["left"] == -28.125
        assert text["fontSize"] == 11.25
        assert star["left"] == 33.75
        assert star["scaleX"] == star["scaleY"] == 0.5625

    def test_members_never_classified(self, adapted):
        assert "badge-text" not in adapted.area_percentages

    def test_member_listed_before_group(self, landscape_objects):
        reordered = {"badge-text": landscape_objects.pop("badge-text"), **landscape_objects}
        ctx = _run(reordered)
        assert ctx.decisions["badge-text"] == "group_child"
        assert ctx.adapted["badge-text"]["left"] == -28.125
        assert list(ctx.adapted) == list(reordered)

    def test_nested_groups(self):
        objects = {
            "outer": {"dataType": "GROUP", "left": 100, "top": 100, "width": 400, "height": 200, "objects": ["inner"]},
            "inner": {
                "dataType": "GROUP",
                "left": -100,
                "top": -50,
                "width": 200,
                "height": 100,
                "groupPath": "outer",
                "objects": ["leaf"],
            },
            "leaf": {"dataType": "TEXT", "left": -20, "top": -10, "width": 40, "height": 20, "fontSize": 16, "groupPath": "inner"},
        }
        ctx = _run(objects)
        assert ctx.decisions == {"outer": "non_skew", "inner": "group_child", "leaf": "group_child"}
        assert ctx.adapted["inner"]["width"] == 112.5
        assert ctx.adapted["leaf"]["fontSize"] == 9

    def test_nested_group_without_parent_passes(self):
        objects = {
            "orphan": {"dataType": "GROUP", "left": 10, "top": 10, "width": 50, "height": 50, "groupPath": "gone", "objects": []},
        }
        ctx = _run(objects)
        assert ctx.decisions == {"orphan": PASS}
        assert ctx.adapted == objects

    def test_missing_member_is_ignored(self):
        objects = {
            "g": {"dataType": "GROUP", "left": 100, "top": 100, "width": 200, "height": 100, "objects": ["nope"]},
        }
        ctx = _run(objects)
        assert list(ctx.adapted) == ["g"]

    def test_self_referencing_group_terminates(self):
        objects = {
            "g": {"dataType": "GROUP", "left": 100, "top": 100, "width": 200, "height": 100, "objects": ["g"]},
        }
        ctx = _run(objects)
        assert list(ctx.adapted) == ["g"]


# ── Whole collection ──


class TestCollection:
    def test_every_element_adapted_in_input_order(self, adapted, landscape_objects):
        assert list(adapted.adapted) == list(landscape_objects)

    def test_input_not_mutated(self, landscape_objects):
        snapshot = copy.deepcopy(landscape_objects)
        adapt_objects(landscape_objects, LANDSCAPE, PORTRAIT)
        assert landscape_objects == snapshot

    def test_output_not_aliased(self, landscape_objects):
        result = adapt_objects(landscape_objects, LANDSCAPE, PORTRAIT)
        result["badge"]["objects"].append("intruder")
        result["clip"]["left"] = 999
        assert landscape_objects["badge"]["objects"] == ["badge-text", "badge-star"]
        assert landscape_objects["clip"]["left"] == 10

    def test_symbolic_sizes_match_numeric(self, landscape_objects):
        assert adapt_objects(landscape_objects, "landscape", "portrait") == adapt_objects(
            landscape_objects, LANDSCAPE, PORTRAIT
        )

    def test_same_size_is_near_identity(self, landscape_objects):
        result = adapt_objects(landscape_objects, LANDSCAPE, LANDSCAPE)
        assert result["card"]["left"] == 440
        assert result["card"]["width"] == 400
        assert result["headline"]["fontSize"] == 48

    def test_config_threshold_changes_decision(self, landscape_objects):
        config = AdaptConfig(skew_area_threshold=3)
        ctx = AdaptContext.create(landscape_objects, LANDSCAPE, PORTRAIT, config)
        create_driver().run(ctx)
        assert ctx.decisions["headline"] == "skew"
