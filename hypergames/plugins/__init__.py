"""Plugin package with auto-discovery hooks."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from hypergames.core.registry import Registry
from hypergames.core.types import AnalysisInfo
from hypergames.dependencies import get_registry

logger = logging.getLogger(__name__)


def discover_plugins(registry: Registry | None = None) -> tuple[str, ...]:
    """Import every plugin module under ``hypergames.plugins`` and register its analyses.

    Each module lists its plugin instances in a module-level ``PLUGINS`` tuple.
    """
    registry = registry if registry is not None else get_registry()

    discovered: list[str] = []
    for module_info in pkgutil.iter_modules(__path__, prefix=f"{__name__}."):
        if module_info.ispkg:
            continue
        module = importlib.import_module(module_info.name)
        for plugin in getattr(module, "PLUGINS", ()):
            registry.register_analysis(plugin)
        logger.info("Discovered plugin module: %s", module_info.name)
        discovered.append(module_info.name)

    return tuple(discovered)


def list_analyses(registry: Registry | None = None) -> list[AnalysisInfo]:
    """Metadata of the registered analyses."""
    registry = registry if registry is not None else get_registry()
    return [
        AnalysisInfo(
            name=plugin.name,
            description=plugin.description,
            applicable_to=list(plugin.applicable_to),
            continuous=plugin.continuous,
        )
        for plugin in registry.analyses()
    ]
