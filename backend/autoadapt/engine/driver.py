"""Adaptation driver — classifies every element and dispatches to its kind adapter."""

from __future__ import annotations

import copy
import logging
import time
from collections.abc import Mapping

from autoadapt.engine.classification import ReferenceLengths, area_percentage, should_skew
from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.context import AdaptContext
from autoadapt.engine.positioning import values_without_skewing
from autoadapt.engine.registry import AdapterRegistry, AdaptMode, load_adapters
from autoadapt.errors import HeuristicFailureError
from autoadapt.models.elements import CanvasElement, ElementKind, element_kind, is_group

logger = logging.getLogger(__name__)

PASS = "pass"


def _member_ids(group: CanvasElement) -> list[str]:
    members = group.get("objects")
    return [m for m in members if isinstance(m, str)] if isinstance(members, list) else []


class AdaptationDriver:
    """Adapts a whole element collection from a reference size to a target size."""

    def __init__(self, registry: AdapterRegistry | None = None) -> None:
        self.registry = registry or load_adapters()

    def run(self, ctx: AdaptContext) -> AdaptContext:
        start = time.perf_counter()
        members = self._claimed_members(ctx)
        claimed = set(members)

        for element_id, element in ctx.objects.items():
            if element_id in claimed:
                continue
            if is_group(element) and element.get("groupPath") is not None:
                # Nested group whose parent is not in this collection
                logger.debug("  %s: nested group without parent, passing through", element_id)
                self._pass(element_id, element, ctx)
                continue
            self._adapt_top_level(element_id, element, ctx)

        for element_id in members:
            if element_id not in ctx.adapted:
                self._pass(element_id, ctx.objects[element_id], ctx)
        ctx.adapted = {eid: ctx.adapted[eid] for eid in ctx.objects if eid in ctx.adapted}

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Adapted %d elements %s -> %s (fixed=%d skew=%d non_skew=%d group_child=%d pass=%d) in %.1fms",
            len(ctx.adapted),
            ctx.reference_size,
            ctx.target_size,
            ctx.count(AdaptMode.FIXED.value),
            ctx.count(AdaptMode.SKEW.value),
            ctx.count(AdaptMode.NON_SKEW.value),
            ctx.count(AdaptMode.GROUP_CHILD.value),
            ctx.count(PASS),
            total,
        )
        return ctx

    def _adapt_top_level(self, element_id: str, element: CanvasElement, ctx: AdaptContext) -> None:
        kind = element_kind(element)
        source = copy.deepcopy(element)

        fixed = self.registry.get(kind, AdaptMode.FIXED)
        if fixed is not None:
            ctx.adapted[element_id] = fixed.fn(source, ctx, None)
            ctx.decisions[element_id] = AdaptMode.FIXED.value
            return

        area = area_percentage(source, ctx.reference_width, ctx.reference_height)
        lengths = ReferenceLengths.of(source, ctx.reference_width, ctx.reference_height)
        skew = should_skew(area, lengths, source.get("dataType"), ctx.config)
        mode = AdaptMode.SKEW if skew else AdaptMode.NON_SKEW
        ctx.area_percentages[element_id] = area

        spec = self.registry.get(kind, mode)
        if spec is None:
            logger.debug("  %s: no %s adapter for %s", element_id, mode.value, kind.name)
            self._pass(element_id, element, ctx)
            return

        placement = None
        if mode is AdaptMode.NON_SKEW:
            placement = values_without_skewing(ctx.reference_size, ctx.target_size, source, ctx.config)
            if placement.is_degenerate:
                raise HeuristicFailureError(
                    "Non-skew placement collapsed to an empty box",
                    {"element_id": element_id, "kind": kind.name},
                )

        ctx.adapted[element_id] = spec.fn(source, ctx, placement)
        ctx.decisions[element_id] = mode.value
        logger.debug("  %s: %s %s (area %s%%)", element_id, kind.name, mode.value, area)

        if kind is ElementKind.GROUP:
            self._adapt_members(element, ctx, seen={element_id})

    def _adapt_members(self, group: CanvasElement, ctx: AdaptContext, seen: set[str]) -> None:
        """Uniformly scale every member of ``group`` (and of groups nested in it)."""
        for member_id in _member_ids(group):
            if member_id in seen:
                continue
            seen.add(member_id)
            member = ctx.objects.get(member_id)
            if member is None:
                logger.debug("  group member %s not in collection, skipping", member_id)
                continue

            kind = element_kind(member)
            spec = self.registry.get(kind, AdaptMode.GROUP_CHILD)
            if spec is None:
                self._pass(member_id, member, ctx)
            else:
                ctx.adapted[member_id] = spec.fn(copy.deepcopy(member), ctx, None)
                ctx.decisions[member_id] = AdaptMode.GROUP_CHILD.value

            if is_group(member):
                self._adapt_members(member, ctx, seen)

    def _claimed_members(self, ctx: AdaptContext) -> list[str]:
        """Ids adapted through their parent group rather than on their own."""
        claimed: list[str] = []
        pending = [
            element
            for element in ctx.objects.values()
            if is_group(element) and element.get("groupPath") is None
        ]
        while pending:
            group = pending.pop()
            for member_id in _member_ids(group):
                member = ctx.objects.get(member_id)
                if member is None or member_id in claimed:
                    continue
                claimed.append(member_id)
                if is_group(member):
                    pending.append(member)
        return claimed

    @staticmethod
    def _pass(element_id: str, element: CanvasElement, ctx: AdaptContext) -> None:
        ctx.adapted[element_id] = copy.deepcopy(element)
        ctx.decisions[element_id] = PASS


def create_driver() -> AdaptationDriver:
    """Factory function for a driver over the default adapter registry."""
    return AdaptationDriver()


def adapt_objects(
    objects: Mapping[str, CanvasElement],
    reference_size: str,
    target_size: str,
    config: AdaptConfig | None = None,
) -> dict[str, CanvasElement]:
    """Adapted copy of ``objects`` laid out for ``target_size``."""
    ctx = AdaptContext.create(objects, reference_size, target_size, config)
    create_driver().run(ctx)
    return ctx.adapted
