"""Generate a layout for a new size and attach it to a document.

A document ("capsule") keeps its canvas in ``canvasData.variant``:
``{"id", "sizes": {size_id: {...}}, "objects": {element_id: element_with_overrides}}``.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from autoadapt.document.overrides import apply_adapted_as_overrides, resolve_objects_for_size
from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.driver import adapt_objects
from autoadapt.engine.size_matching import find_best_reference_size, format_size, parse_size
from autoadapt.errors import AutoAdaptError
from autoadapt.models.elements import CanvasElement

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    reference_size_id: str
    target_size: str
    objects: dict[str, CanvasElement] = field(default_factory=dict)


def size_string(size: Mapping[str, Any]) -> str:
    return format_size(size.get("width", 0), size.get("height", 0))


def generate_base_layout_for_size(
    variant: Mapping[str, Any],
    target_size: str,
    reference_size_id: str | None = None,
    config: AdaptConfig | None = None,
) -> LayoutResult:
    """Adapted elements for ``target_size``, starting from the most similar existing size."""
    sizes = variant.get("sizes") or {}
    reference_id = find_best_reference_size(sizes, target_size, reference_size_id)
    reference = size_string(sizes[reference_id])

    objects = resolve_objects_for_size(variant.get("objects") or {}, reference_id)
    logger.info(
        "Generating %s from reference %s (%s), %d elements",
        target_size,
        reference_id,
        reference,
        len(objects),
    )
    return LayoutResult(
        reference_size_id=reference_id,
        target_size=target_size,
        objects=adapt_objects(objects, reference, target_size, config),
    )


def build_new_capsule(
    capsule: Mapping[str, Any],
    adapted_objects: Mapping[str, CanvasElement],
    size_id: str,
    target_size: str,
    display_name: str | None = None,
) -> dict[str, Any]:
    """Copy of ``capsule`` with ``size_id`` registered and its layout stored as overrides."""
    document = copy.deepcopy(dict(capsule))
    variant = (document.get("canvasData") or {}).get("variant")
    if variant is None:
        raise AutoAdaptError("Document has no canvasData.variant", {"size_id": size_id})

    width, height = (int(v) if v.is_integer() else v for v in parse_size(target_size))
    sizes = dict(variant.get("sizes") or {})
    sizes[size_id] = {
        **sizes.get(size_id, {}),
        "id": size_id,
        "width": width,
        "height": height,
        "displayName": display_name or format_size(width, height),
        "rulers": {},
        "showGrid": False,
    }
    variant["sizes"] = sizes
    variant["objects"] = apply_adapted_as_overrides(variant.get("objects") or {}, adapted_objects, size_id)
    return document
