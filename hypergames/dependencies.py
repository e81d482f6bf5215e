"""Factories for the library's shared services.

Callers that want isolated instances (tests, parallel analyses) can build
their own ``Registry`` or ``ConversionRegistry``; everything else shares the
cached singletons below.

Usage in tests:
    from hypergames.dependencies import reset_dependencies

    def teardown_function():
        reset_dependencies()
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hypergames.conversions.registry import ConversionRegistry
    from hypergames.core.registry import Registry


@lru_cache(maxsize=1)
def get_registry() -> Registry:
    """Get the analysis plugin registry singleton."""
    from hypergames.core.registry import Registry

    return Registry()


@lru_cache(maxsize=1)
def get_conversion_registry() -> ConversionRegistry:
    """Get the conversion registry singleton, with built-in conversions registered."""
    from hypergames.conversions import register_builtin_conversions
    from hypergames.conversions.registry import ConversionRegistry

    return register_builtin_conversions(ConversionRegistry())


def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Call this in test fixtures to ensure fresh instances between tests.
    """
    get_registry.cache_clear()
    get_conversion_registry.cache_clear()
