"""Layout-only merge: spatial fields from one record, styling from another."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from autoadapt.models.elements import CanvasElement, ElementKind, element_kind

LAYOUT_FIELDS: tuple[str, ...] = (
    "left",
    "top",
    "width",
    "height",
    "angle",
    "scaleX",
    "scaleY",
    "visible",
    "flipX",
    "flipY",
)

KIND_LAYOUT_FIELDS: dict[ElementKind, tuple[str, ...]] = {
    ElementKind.TEXT: ("fontSize", "autoFitSizes", "wordSpacing", "padding", "wordStyle"),
    ElementKind.IMAGE: ("imageScale", "imageLeft", "imageTop", "cornerRadius"),
    ElementKind.SVG_CONTAINER: ("imageScale", "imageLeft", "imageTop", "cornerRadius"),
    ElementKind.ROUNDED_RECT: ("cornerRadius",),
}

_EXCLUDED = {ElementKind.CREATIVE_BOX, ElementKind.AUDIO}


def layout_fields_for(kind: ElementKind) -> tuple[str, ...]:
    return LAYOUT_FIELDS + KIND_LAYOUT_FIELDS.get(kind, ())


def merge_layout_from_reference(
    base: Mapping[str, Any], reference: Mapping[str, Any]
) -> CanvasElement:
    kind = element_kind(base)
    merged = copy.deepcopy(dict(base))
    if kind in _EXCLUDED:
        return merged

    fields = layout_fields_for(kind) if element_kind(reference) is kind else LAYOUT_FIELDS
    for key in fields:
        if key in reference:
            merged[key] = copy.deepcopy(reference[key])
    return merged


def merge_layout_from_reference_objects(
    base_objects: Mapping[str, Mapping[str, Any]],
    reference_objects: Mapping[str, Mapping[str, Any]],
) -> dict[str, CanvasElement]:
    merged: dict[str, CanvasElement] = {}
    for element_id, base in base_objects.items():
        reference = reference_objects.get(element_id)
        if reference is None:
            merged[element_id] = copy.deepcopy(dict(base))
        else:
            merged[element_id] = merge_layout_from_reference(base, reference)
    return merged
