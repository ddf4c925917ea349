"""Group adapters.

A group is only ever placed by the non-skew heuristic. Its members are adapted by the
driver afterwards with the uniform group-child adapters; a group nested in another group
gets its container box scaled the same way.
"""

from __future__ import annotations

from autoadapt.engine.boxes import placed_box, uniform_box
from autoadapt.engine.context import AdaptContext
from autoadapt.engine.positioning import Placement
from autoadapt.engine.registry import AdaptMode, adapter
from autoadapt.models.elements import CanvasElement, ElementKind


@adapter(kind=ElementKind.GROUP, mode=AdaptMode.NON_SKEW, description="Place group container")
def group_non_skew(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, **placed_box(placement)}


@adapter(kind=ElementKind.GROUP, mode=AdaptMode.GROUP_CHILD, description="Scale nested group container")
def group_group_child(element: CanvasElement, ctx: AdaptContext, placement: Placement | None) -> CanvasElement:
    return {**element, **uniform_box(element, ctx.scaling_ratio)}
