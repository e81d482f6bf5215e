"""Shared helpers for analysis operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from hypergames.core.errors import (
    ConversionError,
    GameError,
    incompatible_plugin,
    safe_error_message,
)
from hypergames.core.profiles import Profile
from hypergames.core.strategies import IncompleteProfile
from hypergames.core.types import DeviationInfo

if TYPE_CHECKING:
    from hypergames.conversions.registry import ConversionRegistry
    from hypergames.core.equilibria import Deviation
    from hypergames.core.registry import AnalysisPlugin, AnalysisResult, Registry
    from hypergames.models import AnyGame

logger = logging.getLogger(__name__)


def _find_compatible_game(
    conversions: ConversionRegistry,
    game: AnyGame,
    plugin: AnalysisPlugin,
) -> AnyGame | None:
    """Find a game format compatible with the plugin.

    Checks if the plugin can run on the native game, then tries conversions
    to each format listed in ``plugin.applicable_to``.
    """
    if plugin.can_run(game):
        return game

    for target_format in getattr(plugin, "applicable_to", ()):
        if target_format == game.format_name:
            continue
        if not conversions.check(game, target_format, quick=True).possible:
            continue
        try:
            converted = conversions.convert(game, target_format)
        except ConversionError as exc:
            logger.info(
                "Skipping %s conversion for %s: %s",
                target_format,
                plugin.name,
                safe_error_message(exc),
            )
            continue
        if plugin.can_run(converted):
            logger.info(
                "Using %s conversion for analysis %s on game %s",
                target_format,
                plugin.name,
                game.id,
            )
            return converted

    return None


def resolve_game_for_plugin(
    conversions: ConversionRegistry,
    game: AnyGame,
    plugin: AnalysisPlugin,
) -> AnyGame:
    """Get game for analysis, converting if necessary.

    Raises:
        GameError: If no compatible format can be obtained.
    """
    result = _find_compatible_game(conversions, game, plugin)
    if result is None:
        logger.warning(
            "Plugin '%s' cannot run on game %s (format: %s, applicable_to: %s)",
            plugin.name,
            game.id,
            game.format_name,
            getattr(plugin, "applicable_to", ()),
        )
        raise incompatible_plugin(plugin.name, game.format_name)
    return result


def run_analysis(
    registry: Registry,
    conversions: ConversionRegistry,
    name: str,
    game: AnyGame,
    config: dict | None = None,
) -> AnalysisResult:
    """Run the analysis called ``name`` on ``game``, converting it if needed."""
    plugin = registry.get_analysis(name)
    if plugin is None:
        available = [p.name for p in registry.analyses()]
        msg = f"Unknown plugin: {name}. Available: {available}"
        raise GameError(msg)
    target = resolve_game_for_plugin(conversions, game, plugin)
    return plugin.run(target, config)


# =============================================================================
# Presentation helpers shared by plugins
# =============================================================================


def describe_profile(profile: Profile | IncompleteProfile) -> dict[str, Any]:
    """String-keyed view of a profile for analysis details."""
    if isinstance(profile, IncompleteProfile):
        return {
            str(player): {str(s): str(a) for s, a in profile.strategy(player).items()}
            for player in profile.players
        }
    return {str(player): str(action) for player, action in profile.items()}


def describe_deviation(deviation: Deviation) -> DeviationInfo:
    return {
        "player": str(deviation.player),
        "signal": None if deviation.signal is None else str(deviation.signal),
        "action": str(deviation.action),
        "current": str(deviation.current),
        "deviation": str(deviation.deviation),
    }
