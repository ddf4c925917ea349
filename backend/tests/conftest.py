"""Shared test fixtures."""

from __future__ import annotations

import copy

import pytest


# A landscape design: full-bleed background, headline, centered card, logo in a
# corner, a grouped badge and the non-visual elements every document carries.
LANDSCAPE_OBJECTS = {
    "box": {"dataType": "CREATIVE_BOX", "left": 0, "top": 0, "width": 1280, "height": 720},
    "background": {
        "dataType": "IMAGE",
        "left": 0,
        "top": 0,
        "width": 1280,
        "height": 720,
        "imageScale": 1,
        "imageLeft": 0,
        "imageTop": 0,
    },
    "headline": {
        "dataType": "TEXT",
        "left": 40,
        "top": 340,
        "width": 1200,
        "height": 40,
        "fontSize": 48,
        "text": "Summer sale",
    },
    "card": {
        "dataType": "SHAPE",
        "type": "rounded-rect",
        "left": 440,
        "top": 260,
        "width": 400,
        "height": 200,
        "cornerRadius": {"tl": 16, "tr": 16, "bl": 16, "br": 16},
    },
    "logo": {
        "dataType": "SHAPE",
        "type": "svg-container",
        "left": 1080,
        "top": 520,
        "width": 160,
        "height": 160,
        "imageScale": 2,
    },
    "badge": {
        "dataType": "GROUP",
        "left": 100,
        "top": 100,
        "width": 200,
        "height": 100,
        "objects": ["badge-text", "badge-star"],
    },
    "badge-text": {
        "dataType": "TEXT",
        "left": -50,
        "top": -20,
        "width": 100,
        "height": 40,
        "fontSize": 20,
        "groupPath": "badge",
    },
    "badge-star": {
        "dataType": "SHAPE",
        "type": "path",
        "left": 60,
        "top": -10,
        "scaleX": 1,
        "scaleY": 1,
        "groupPath": "badge",
    },
    "music": {"dataType": "AUDIO", "src": "https://cdn.example.com/track.mp3"},
    "clip": {"dataType": "VIDEO", "left": 10, "top": 10, "width": 320, "height": 180},
}


@pytest.fixture
def landscape_objects() -> dict:
    return copy.deepcopy(LANDSCAPE_OBJECTS)


@pytest.fixture
def variant(landscape_objects) -> dict:
    objects = landscape_objects
    objects["headline"]["overrides"] = {"square": {"fontSize": 36, "zIndex": 4}}
    return {
        "id": "variant-1",
        "sizes": {
            "landscape": {"id": "landscape", "width": 1280, "height": 720, "displayName": "Landscape"},
            "square": {"id": "square", "width": 720, "height": 720, "displayName": "Square"},
        },
        "objects": objects,
    }


@pytest.fixture
def capsule(variant) -> dict:
    return {
        "_id": "capsule-1",
        "name": "Summer campaign",
        "canvasData": {"metadata": {}, "variant": variant},
    }
