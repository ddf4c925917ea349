"""Canvas element kinds.

Element records stay plain dicts (the document JSON shape); this module only names
the ``dataType`` / ``type`` tags and folds them into one closed ``ElementKind``.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

CanvasElement = dict[str, Any]


class DataType(str, enum.Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    SHAPE = "SHAPE"
    GROUP = "GROUP"
    CREATIVE_BOX = "CREATIVE_BOX"
    AUDIO = "AUDIO"
    VIDEO = "VIDEO"
    CANVAS_MASK = "CANVAS_MASK"


class ShapeType(str, enum.Enum):
    SVG_CONTAINER = "svg-container"
    ROUNDED_RECT = "rounded-rect"


class ElementKind(enum.Enum):
    TEXT = "text"
    IMAGE = "image"
    SVG_CONTAINER = "svg_container"
    ROUNDED_RECT = "rounded_rect"
    PATH = "path"
    GROUP = "group"
    CREATIVE_BOX = "creative_box"
    AUDIO = "audio"
    VIDEO = "video"
    CANVAS_MASK = "canvas_mask"
    UNKNOWN = "unknown"


_DATA_TYPE_KINDS: dict[DataType, ElementKind] = {
    DataType.TEXT: ElementKind.TEXT,
    DataType.IMAGE: ElementKind.IMAGE,
    DataType.GROUP: ElementKind.GROUP,
    DataType.CREATIVE_BOX: ElementKind.CREATIVE_BOX,
    DataType.AUDIO: ElementKind.AUDIO,
    DataType.VIDEO: ElementKind.VIDEO,
    DataType.CANVAS_MASK: ElementKind.CANVAS_MASK,
}

_SHAPE_KINDS: dict[ShapeType, ElementKind] = {
    ShapeType.SVG_CONTAINER: ElementKind.SVG_CONTAINER,
    ShapeType.ROUNDED_RECT: ElementKind.ROUNDED_RECT,
}


def element_kind(element: Mapping[str, Any] | None) -> ElementKind:
    if not element:
        return ElementKind.UNKNOWN
    try:
        data_type = DataType(element.get("dataType"))
    except ValueError:
        return ElementKind.UNKNOWN
    if data_type is DataType.SHAPE:
        try:
            return _SHAPE_KINDS[ShapeType(element.get("type"))]
        except ValueError:
            return ElementKind.PATH
    return _DATA_TYPE_KINDS[data_type]


def is_text(element: Mapping[str, Any] | None) -> bool:
    return bool(element) and element.get("dataType") == DataType.TEXT.value


def is_image(element: Mapping[str, Any] | None) -> bool:
    return bool(element) and element.get("dataType") == DataType.IMAGE.value


def is_video(element: Mapping[str, Any] | None) -> bool:
    return bool(element) and element.get("dataType") == DataType.VIDEO.value


def is_shape(element: Mapping[str, Any] | None) -> bool:
    return bool(element) and element.get("dataType") == DataType.SHAPE.value


def is_svg_container(element: Mapping[str, Any] | None) -> bool:
    return element_kind(element) is ElementKind.SVG_CONTAINER


def is_rounded_rect(element: Mapping[str, Any] | None) -> bool:
    return element_kind(element) is ElementKind.ROUNDED_RECT


def is_group(element: Mapping[str, Any] | None) -> bool:
    return bool(element) and element.get("dataType") == DataType.GROUP.value


def is_creative_box(element: Mapping[str, Any] | None) -> bool:
    return bool(element) and element.get("dataType") == DataType.CREATIVE_BOX.value


def is_audio(element: Mapping[str, Any] | None) -> bool:
    return bool(element) and element.get("dataType") == DataType.AUDIO.value
