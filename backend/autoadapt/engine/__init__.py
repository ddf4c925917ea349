"""Layout adaptation engine."""

from autoadapt.engine.context import AdaptContext
from autoadapt.engine.driver import AdaptationDriver, adapt_objects, create_driver
from autoadapt.engine.registry import AdaptMode, adapter, get_registry, load_adapters

__all__ = [
    "adapter",
    "AdaptMode",
    "get_registry",
    "load_adapters",
    "AdaptContext",
    "AdaptationDriver",
    "adapt_objects",
    "create_driver",
]
