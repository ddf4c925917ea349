"""Adapter registry — every element-kind adapter is a standalone function registered via decorator.

Usage:
    @adapter(kind=ElementKind.TEXT, mode=AdaptMode.SKEW)
    def text_skew(element: CanvasElement, ctx: AdaptContext, placement: None) -> CanvasElement:
        return {**element, "fontSize": element["fontSize"] * ctx.scaling_ratio}

Adding a new kind = creating one module under ``autoadapt/engine/kinds`` with the
decorator. A (kind, mode) pair with no adapter is passed through unchanged by the driver.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from autoadapt.models.elements import CanvasElement, ElementKind

if TYPE_CHECKING:
    from autoadapt.engine.context import AdaptContext
    from autoadapt.engine.positioning import Placement

logger = logging.getLogger(__name__)

AdapterFn = Callable[[CanvasElement, "AdaptContext", Optional["Placement"]], CanvasElement]


class AdaptMode(enum.Enum):
    FIXED = "fixed"  # bypasses classification entirely
    SKEW = "skew"
    NON_SKEW = "non_skew"
    GROUP_CHILD = "group_child"


@dataclass
class AdapterSpec:
    kind: ElementKind
    mode: AdaptMode
    fn: AdapterFn
    description: str = ""


class AdapterRegistry:
    """Adapters keyed by (element kind, adaptation mode)."""

    def __init__(self) -> None:
        self._adapters: dict[tuple[ElementKind, AdaptMode], AdapterSpec] = {}

    def register(self, spec: AdapterSpec) -> None:
        key = (spec.kind, spec.mode)
        if key in self._adapters:
            raise ValueError(f"Duplicate adapter for {spec.kind.name}/{spec.mode.name}")
        self._adapters[key] = spec
        logger.debug("Registered adapter %s/%s", spec.kind.name, spec.mode.name)

    def get(self, kind: ElementKind, mode: AdaptMode) -> AdapterSpec | None:
        return self._adapters.get((kind, mode))

    def kinds(self, mode: AdaptMode) -> list[ElementKind]:
        return sorted((k for k, m in self._adapters if m == mode), key=lambda k: k.value)

    def all(self) -> list[AdapterSpec]:
        return sorted(self._adapters.values(), key=lambda s: (s.kind.value, s.mode.value))

    @property
    def count(self) -> int:
        return len(self._adapters)


# Module-level singleton
_registry = AdapterRegistry()


def get_registry() -> AdapterRegistry:
    return _registry


def adapter(
    *,
    kind: ElementKind | Iterable[ElementKind],
    mode: AdaptMode,
    description: str = "",
):
    """Decorator to register an adapter for one or more element kinds."""
    kinds = [kind] if isinstance(kind, ElementKind) else list(kind)

    def decorator(fn: AdapterFn) -> AdapterFn:
        for k in kinds:
            _registry.register(AdapterSpec(kind=k, mode=mode, fn=fn, description=description))
        return fn

    return decorator


def load_adapters() -> AdapterRegistry:
    """Import every module under ``autoadapt.engine.kinds`` so the decorators fire."""
    package = importlib.import_module("autoadapt.engine.kinds")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry
