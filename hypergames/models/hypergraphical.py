"""Hypergraphical game model.

A hypergraphical game is a collection of local games, each played by a
subset of the players. A player's global utility is the ⊕-aggregation
(per its evaluation structure) of its local utilities over the local games
it plays. Because ⊕ is commutative and associative, the order of local
games is irrelevant.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from hypergames.core.equilibria import Deviation
from hypergames.core.errors import GameError, unknown_player
from hypergames.core.evaluation import (
    EvaluationSpec,
    EvaluationStructure,
    check_evaluation_players,
    structure_for,
)
from hypergames.core.profiles import Profile, ProfileSpace

if TYPE_CHECKING:
    from hypergames.models.normal_form import NormalFormGame


class LocalGame(BaseModel):
    """A sub-game played by ``players``.

    ``utility(player, profile)`` receives the global profile but must only
    read the entries of the local game's own players.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Any
    players: frozenset[Any]
    utility: Callable[[Any, Profile], Any]
    label: str | None = None


class HypergraphicalGame(BaseModel):
    """Game whose utilities decompose over local games (a hypergraph of players)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    title: str
    description: str | None = None
    actions: ProfileSpace
    local_games: tuple[LocalGame, ...]
    evaluation: EvaluationSpec
    tags: list[str] = Field(default_factory=list)
    format_name: Literal["hypergraphical"] = "hypergraphical"

    _memberships: dict[Any, tuple[LocalGame, ...]] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_local_games(self) -> HypergraphicalGame:
        seen: set[Any] = set()
        for local_game in self.local_games:
            if local_game.id in seen:
                msg = f"Duplicate local game id {local_game.id!r}"
                raise GameError(msg)
            seen.add(local_game.id)
            for player in local_game.players:
                if player not in self.actions:
                    raise unknown_player(player, self.actions.players)
        check_evaluation_players(self.evaluation, self.actions.players)
        return self

    def model_post_init(self, __context: Any) -> None:
        self._memberships = {
            player: tuple(g for g in self.local_games if player in g.players)
            for player in self.actions.players
        }

    @property
    def players(self) -> tuple[Any, ...]:
        return self.actions.players

    @property
    def num_profiles(self) -> int:
        return self.actions.size

    def evaluation_of(self, player: Any) -> EvaluationStructure:
        self.actions.index(player)
        return structure_for(self.evaluation, player)

    def plays(self, local_game: LocalGame, player: Any) -> bool:
        """``player`` participates in ``local_game``."""
        return player in local_game.players

    def local_games_of(self, player: Any) -> tuple[LocalGame, ...]:
        self.actions.index(player)
        return self._memberships[player]

    def local_utility(self, local_game: LocalGame, player: Any, profile: Profile) -> Any:
        if not self.plays(local_game, player):
            msg = f"Player {player!r} does not play local game {local_game.id!r}"
            raise GameError(msg)
        return local_game.utility(player, profile)

    def global_utility(self, player: Any, profile: Profile) -> Any:
        """⊕-aggregate of ``player``'s local utilities under ``profile``."""
        if profile.space != self.actions:
            msg = f"Profile does not belong to the action space of game {self.id!r}"
            raise GameError(msg)
        evaluation = self.evaluation_of(player)
        return evaluation.total(
            local_game.utility(player, profile) for local_game in self._memberships[player]
        )

    def profiles(self) -> Iterator[Profile]:
        return self.actions.profiles()

    def to_normal_form(self) -> NormalFormGame:
        from hypergames.conversions.hypergraphical_nfg import to_normal_form

        return to_normal_form(self)

    def improving_deviations(
        self, profile: Profile, *, stop_at_first: bool = False
    ) -> list[Deviation]:
        return self.to_normal_form().improving_deviations(profile, stop_at_first=stop_at_first)

    def is_nash_equilibrium(self, profile: Profile) -> bool:
        """Delegates to the equivalent normal form game."""
        return self.to_normal_form().is_nash_equilibrium(profile)

    def pure_equilibria(self) -> list[Profile]:
        return self.to_normal_form().pure_equilibria()
