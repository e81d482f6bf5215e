"""Normal form (strategic form) game model.

Each player picks an action from its finite domain; ``utility(player, profile)``
gives the player's outcome for the full action profile, and ``outcome_le``
orders the player's outcomes.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hypergames.core.equilibria import Deviation, profile_deviations
from hypergames.core.errors import GameError
from hypergames.core.evaluation import strictly_improves
from hypergames.core.profiles import Profile, ProfileSpace
from hypergames.core.types import Preorder

logger = logging.getLogger(__name__)


class NormalFormGame(BaseModel):
    """Strategic form game over an arbitrary number of players."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    title: str
    description: str | None = None
    actions: ProfileSpace
    utility: Callable[[Any, Profile], Any]
    outcome_le: Preorder | dict[Any, Preorder] = operator.le
    tags: list[str] = Field(default_factory=list)
    format_name: Literal["normal"] = "normal"

    @model_validator(mode="after")
    def _check_preorders(self) -> NormalFormGame:
        if isinstance(self.outcome_le, dict) and set(self.outcome_le) != set(self.players):
            msg = "Per-player preorders must be given for exactly the game's players"
            raise GameError(msg)
        return self

    @classmethod
    def from_payoff_table(
        cls,
        *,
        id: str,
        title: str,
        actions: Mapping[Any, Sequence[Any]],
        payoffs: Mapping[tuple[Any, ...], Sequence[Any]],
        **kwargs: Any,
    ) -> NormalFormGame:
        """Build a game from ``{action_tuple: payoff_tuple}``.

        Both tuples are ordered like ``actions``; every action profile must
        appear in the table.
        """
        space = ProfileSpace.from_domains(actions)
        table = {tuple(key): tuple(value) for key, value in payoffs.items()}
        for profile in space.profiles():
            if profile.entries not in table:
                msg = f"Payoff table has no entry for {profile.entries!r}"
                raise GameError(msg)
            if len(table[profile.entries]) != len(space.players):
                msg = f"Payoff entry for {profile.entries!r} must have one value per player"
                raise GameError(msg)

        def utility(player: Any, profile: Profile) -> Any:
            return table[profile.entries][space.index(player)]

        return cls(id=id, title=title, actions=space, utility=utility, **kwargs)

    @property
    def players(self) -> tuple[Any, ...]:
        return self.actions.players

    @property
    def num_profiles(self) -> int:
        return self.actions.size

    def preorder(self, player: Any) -> Preorder:
        self.actions.index(player)
        if isinstance(self.outcome_le, dict):
            return self.outcome_le[player]
        return self.outcome_le

    def prefers(self, player: Any, old: Any, new: Any) -> bool:
        """``player`` strictly prefers outcome ``new`` to ``old``."""
        return strictly_improves(old, new, self.preorder(player))

    def payoff(self, player: Any, profile: Profile) -> Any:
        """Outcome of ``player`` under ``profile``."""
        self._check_profile(profile)
        self.actions.index(player)
        return self.utility(player, profile)

    def profiles(self) -> Iterator[Profile]:
        return self.actions.profiles()

    def improving_deviations(
        self, profile: Profile, *, stop_at_first: bool = False
    ) -> list[Deviation]:
        """All strictly improving unilateral deviations from ``profile``."""
        self._check_profile(profile)
        return profile_deviations(
            profile, self.utility, self.prefers, stop_at_first=stop_at_first
        )

    def is_nash_equilibrium(self, profile: Profile) -> bool:
        return not self.improving_deviations(profile, stop_at_first=True)

    def pure_equilibria(self) -> list[Profile]:
        """Enumerate every pure Nash equilibrium."""
        logger.debug("Enumerating %d profiles of %s", self.num_profiles, self.id)
        return [profile for profile in self.profiles() if self.is_nash_equilibrium(profile)]

    def _check_profile(self, profile: Profile) -> None:
        if profile.space != self.actions:
            msg = f"Profile does not belong to the action space of game {self.id!r}"
            raise GameError(msg)
