"""Utilities for converting games to Gambit format.

NOTE: This module assumes pygambit is available. It should only be imported
from code paths that have already verified PYGAMBIT_AVAILABLE is True.
"""
from __future__ import annotations

from itertools import product
from numbers import Real
from typing import TYPE_CHECKING, Any

import pygambit as gbt

from hypergames.core.profiles import Profile

if TYPE_CHECKING:
    from hypergames.models.normal_form import NormalFormGame


def normal_form_to_gambit(game: NormalFormGame) -> tuple[gbt.Game, list[dict[str, Any]]]:
    """Convert a NormalFormGame with real-valued outcomes to a Gambit table.

    Args:
        game: The normal form game (any number of players).

    Returns:
        The Gambit game and, per player, a map from strategy label back to
        the action it stands for.

    Raises:
        ValueError: If an outcome is not a real number.
    """
    domains = game.actions.domains
    gambit_game = gbt.Game.new_table([len(domain) for domain in domains])
    gambit_game.title = game.title

    labels: list[dict[str, Any]] = []
    for player_index, (player_name, domain) in enumerate(
        zip(game.players, domains, strict=True)
    ):
        player = gambit_game.players[player_index]
        player.label = str(player_name)
        mapping: dict[str, Any] = {}
        for strat_index, action in enumerate(domain):
            player.strategies[strat_index].label = str(action)
            mapping[str(action)] = action
        labels.append(mapping)

    for indices in product(*[range(len(domain)) for domain in domains]):
        entries = tuple(domain[i] for domain, i in zip(domains, indices, strict=True))
        profile = Profile.model_construct(space=game.actions, entries=entries)
        outcome = gambit_game[indices]
        for player_index, player_name in enumerate(game.players):
            value = game.utility(player_name, profile)
            if not isinstance(value, Real):
                msg = f"Gambit needs real-valued payoffs, got {value!r} for {player_name!r}"
                raise ValueError(msg)
            outcome[gambit_game.players[player_index]] = value

    return gambit_game, labels
