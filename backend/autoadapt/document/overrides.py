"""Per-size override records.

Elements store their base record plus ``overrides: {size_id: {field: value}}``; the layout
for a size is the base record patched with that size's override.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from autoadapt.models.elements import CanvasElement

logger = logging.getLogger(__name__)

OVERRIDES_KEY = "overrides"
Z_INDEX_KEY = "zIndex"


def _base(element: Mapping[str, Any]) -> CanvasElement:
    return {k: copy.deepcopy(v) for k, v in element.items() if k != OVERRIDES_KEY}


def resolve_element_for_size(element: Mapping[str, Any], size_id: str) -> CanvasElement:
    overrides = element.get(OVERRIDES_KEY) or {}
    patch = overrides.get(size_id) or {}
    return {**_base(element), **copy.deepcopy(patch)}


def resolve_objects_for_size(
    objects: Mapping[str, Mapping[str, Any]], size_id: str
) -> dict[str, CanvasElement]:
    """Flat records (base ⊕ overrides[size_id]) for every element."""
    return {element_id: resolve_element_for_size(e, size_id) for element_id, e in objects.items()}


def apply_adapted_as_overrides(
    objects: Mapping[str, Mapping[str, Any]],
    adapted: Mapping[str, Mapping[str, Any]],
    size_id: str,
) -> dict[str, CanvasElement]:
    """Copy of ``objects`` with each adapted record stored as the override for ``size_id``."""
    result = {element_id: copy.deepcopy(dict(e)) for element_id, e in objects.items()}
    for element_id, record in adapted.items():
        element = result.get(element_id)
        if element is None:
            logger.debug("Adapted element %s has no base record, skipping", element_id)
            continue
        overrides = dict(element.get(OVERRIDES_KEY) or {})
        previous = overrides.get(size_id) or {}
        patch = _base(record)
        if Z_INDEX_KEY in previous:
            patch[Z_INDEX_KEY] = previous[Z_INDEX_KEY]
        overrides[size_id] = patch
        element[OVERRIDES_KEY] = overrides
    return result
