"""Tests for the adapter registry."""

import pytest

from autoadapt.engine.registry import AdapterRegistry, AdapterSpec, AdaptMode, load_adapters
from autoadapt.models.elements import ElementKind


def _noop(element, ctx, placement):
    return element


def test_register_and_get():
    reg = AdapterRegistry()
    spec = AdapterSpec(kind=ElementKind.TEXT, mode=AdaptMode.SKEW, fn=_noop)
    reg.register(spec)
    assert reg.get(ElementKind.TEXT, AdaptMode.SKEW) is spec
    assert reg.get(ElementKind.TEXT, AdaptMode.NON_SKEW) is None
    assert reg.count == 1


def test_duplicate_rejected():
    reg = AdapterRegistry()
    reg.register(AdapterSpec(kind=ElementKind.TEXT, mode=AdaptMode.SKEW, fn=_noop))
    with pytest.raises(ValueError, match="TEXT/SKEW"):
        reg.register(AdapterSpec(kind=ElementKind.TEXT, mode=AdaptMode.SKEW, fn=_noop))


def test_kinds_by_mode():
    reg = AdapterRegistry()
    reg.register(AdapterSpec(kind=ElementKind.TEXT, mode=AdaptMode.SKEW, fn=_noop))
    reg.register(AdapterSpec(kind=ElementKind.IMAGE, mode=AdaptMode.SKEW, fn=_noop))
    reg.register(AdapterSpec(kind=ElementKind.GROUP, mode=AdaptMode.NON_SKEW, fn=_noop))
    assert reg.kinds(AdaptMode.SKEW) == [ElementKind.IMAGE, ElementKind.TEXT]


def test_all_adapters_loaded():
    reg = load_adapters()
    assert reg.count == 19


def test_load_is_idempotent():
    assert load_adapters().count == load_adapters().count


def test_every_geometric_kind_has_group_child():
    reg = load_adapters()
    assert reg.kinds(AdaptMode.GROUP_CHILD) == sorted(
        [
            ElementKind.TEXT,
            ElementKind.IMAGE,
            ElementKind.SVG_CONTAINER,
            ElementKind.ROUNDED_RECT,
            ElementKind.PATH,
            ElementKind.GROUP,
        ],
        key=lambda k: k.value,
    )


def test_groups_never_skew():
    reg = load_adapters()
    assert reg.get(ElementKind.GROUP, AdaptMode.SKEW) is None


def test_unhandled_kinds_have_no_adapter():
    reg = load_adapters()
    for kind in (ElementKind.VIDEO, ElementKind.CANVAS_MASK, ElementKind.UNKNOWN):
        for mode in AdaptMode:
            assert reg.get(kind, mode) is None


def test_fixed_kinds():
    reg = load_adapters()
    assert reg.kinds(AdaptMode.FIXED) == [ElementKind.AUDIO, ElementKind.CREATIVE_BOX]
