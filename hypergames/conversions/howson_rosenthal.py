"""Generalized Howson-Rosenthal transformation: incomplete -> hypergraphical.

Every incomplete game ``g`` maps to a hypergraphical game ``h`` such that

* the players of ``h`` are the ``(player, signal)`` pairs of ``g``, each
  choosing among ``player``'s actions;
* ``h`` has one local game per signal profile ``theta``, played by exactly
  the pairs ``(i, theta[i])``;
* pair ``(i, theta[i])`` gets ``⊗(belief(i, theta), utility(i, a, theta))``
  from local game ``theta``, where ``a`` is the action profile read off
  the flattened profile at ``theta``.

Then ``g.expected_utility(i, t, p) == h.global_utility((i, t), flatten(p))``
for all ``i``, ``t`` and ``p``, and ``p`` is a Nash equilibrium of ``g`` iff
``flatten(p)`` is one of ``h``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from hypergames.config import ConversionConfig
from hypergames.conversions.registry import Conversion, ConversionCheck
from hypergames.core.profiles import Profile
from hypergames.core.strategies import flat_space, project_flat
from hypergames.models.hypergraphical import HypergraphicalGame, LocalGame
from hypergames.models.incomplete import IncompleteGame

logger = logging.getLogger(__name__)


def check_incomplete_to_hypergraphical(game) -> ConversionCheck:
    """Check if an incomplete game can be transformed."""
    if not isinstance(game, IncompleteGame):
        return ConversionCheck(possible=False, blockers=["Not an incomplete game"])

    # One local game per signal profile
    num_local_games = game.signals.size

    if num_local_games > ConversionConfig.LOCAL_GAME_BLOCKING_THRESHOLD:
        return ConversionCheck(
            possible=False,
            blockers=[
                f"Too many signal profiles ({num_local_games:,}) - "
                "transformation would be impractical"
            ],
        )

    warnings = []
    if num_local_games > ConversionConfig.LOCAL_GAME_WARNING_THRESHOLD:
        warnings.append(f"Large hypergraph: {num_local_games:,} local games")
    return ConversionCheck(possible=True, warnings=warnings)


def _local_utility(game: IncompleteGame, theta: Profile) -> Callable[[Any, Profile], Any]:
    def utility(player: tuple[Any, Any], profile: Profile) -> Any:
        owner, _signal = player
        actions = project_flat(profile, theta, game.actions)
        return game.evaluation_of(owner).weigh(
            game.belief(owner, theta), game.utility(owner, actions, theta)
        )

    return utility


def to_hypergraphical(game: IncompleteGame) -> HypergraphicalGame:
    """Build the hypergraphical game equivalent to ``game``."""
    space = flat_space(game.signals, game.actions)
    local_games = tuple(
        LocalGame(
            id=theta.entries,
            players=frozenset((player, signal) for player, signal in theta.items()),
            utility=_local_utility(game, theta),
            label=", ".join(f"{player}={signal}" for player, signal in theta.items()),
        )
        for theta in game.signals.profiles()
    )
    logger.debug(
        "Howson-Rosenthal on %s: %d local games over %d (player, signal) pairs",
        game.id,
        len(local_games),
        len(space.players),
    )
    return HypergraphicalGame(
        id=f"{game.id}-hypergraphical",
        title=game.title,
        description=game.description,
        actions=space,
        local_games=local_games,
        evaluation={pair: game.evaluation_of(pair[0]) for pair in space.players},
        tags=[*game.tags, "converted", "from-incomplete"],
    )


CONVERSIONS = (
    Conversion(
        name="Howson-Rosenthal",
        source_format="incomplete",
        target_format="hypergraphical",
        can_convert=check_incomplete_to_hypergraphical,
        convert=to_hypergraphical,
    ),
)
