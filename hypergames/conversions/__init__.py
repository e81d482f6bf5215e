"""Game format conversion system.

Provides conversions between game representations
(incomplete -> hypergraphical -> normal).
"""
from hypergames.conversions import howson_rosenthal, hypergraphical_nfg
from hypergames.conversions.registry import (
    Conversion,
    ConversionCheck,
    ConversionRegistry,
)


def register_builtin_conversions(registry: ConversionRegistry) -> ConversionRegistry:
    """Register the library's conversions on ``registry``."""
    for module in (howson_rosenthal, hypergraphical_nfg):
        for conversion in module.CONVERSIONS:
            registry.register(conversion)
    return registry


__all__ = [
    "Conversion",
    "ConversionCheck",
    "ConversionRegistry",
    "register_builtin_conversions",
]
