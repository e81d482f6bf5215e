"""Incomplete-information game model.

Each player privately receives a signal (its type) and chooses an action as
a function of that signal. Utilities depend on the action profile and on the
true signal profile; ``belief(player, theta)`` weighs each signal profile
the player considers. The expected utility of a player holding ``signal`` is

    ⊕ over theta with theta[player] == signal of
        ⊗(belief(player, theta), utility(player, actions(theta), theta))

using the player's :class:`EvaluationStructure`. Bayesian games are the
special case ⊕ = +, ⊗ = *, with beliefs given by a probability distribution.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from fractions import Fraction
from itertools import product
from numbers import Rational
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hypergames.core.equilibria import Deviation
from hypergames.core.errors import DomainError, GameError
from hypergames.core.evaluation import (
    EvaluationSpec,
    EvaluationStructure,
    check_evaluation_players,
    expected_utility,
    structure_for,
)
from hypergames.core.profiles import Profile, ProfileSpace
from hypergames.core.strategies import (
    IncompleteProfile,
    bmove,
    estimate_profile_count,
    incomplete_profiles,
    project_profile,
)

if TYPE_CHECKING:
    from hypergames.models.hypergraphical import HypergraphicalGame

logger = logging.getLogger(__name__)


class IncompleteGame(BaseModel):
    """Game of incomplete information over finite signals and actions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    title: str
    description: str | None = None
    signals: ProfileSpace
    actions: ProfileSpace
    utility: Callable[[Any, Profile, Profile], Any]
    belief: Callable[[Any, Profile], Any]
    evaluation: EvaluationSpec
    tags: list[str] = Field(default_factory=list)
    format_name: Literal["incomplete"] = "incomplete"

    @model_validator(mode="after")
    def _check_spaces(self) -> IncompleteGame:
        if self.signals.players != self.actions.players:
            msg = "Signal and action spaces must range over the same players, in the same order"
            raise GameError(msg)
        check_evaluation_players(self.evaluation, self.actions.players)
        return self

    @classmethod
    def from_common_prior(
        cls,
        *,
        id: str,
        title: str,
        signals: ProfileSpace,
        actions: ProfileSpace,
        utility: Callable[[Any, Profile, Profile], Any],
        prior: Callable[[Profile], Any] | Mapping[tuple[Any, ...], Any],
        conditional: bool = False,
        **kwargs: Any,
    ) -> IncompleteGame:
        """Build a Bayesian game from a common prior over signal profiles.

        Args:
            prior: ``prior(theta)`` or a table keyed by ``theta.entries``
                (missing entries have probability zero).
            conditional: If True, each player's belief is the conditional
                ``P(theta | theta[player])``; otherwise the unnormalized prior
                is used, which ranks deviations identically.

        Raises:
            DomainError: If ``conditional`` and some signal of some player has
                zero marginal probability.
        """
        if isinstance(prior, Mapping):
            table = {tuple(key): value for key, value in prior.items()}

            def weight(theta: Profile) -> Any:
                return table.get(theta.entries, 0)

        else:
            weight = prior

        if not conditional:

            def belief(player: Any, theta: Profile) -> Any:
                return weight(theta)

        else:
            marginals: dict[tuple[Any, Any], Any] = {}
            for theta in signals.profiles():
                for player, signal in theta.items():
                    key = (player, signal)
                    marginals[key] = marginals.get(key, 0) + weight(theta)
            for (player, signal), marginal in marginals.items():
                if not marginal:
                    msg = (
                        f"Signal {signal!r} of player {player!r} has zero prior "
                        "probability; its conditional belief is undefined"
                    )
                    raise DomainError(msg)

            def belief(player: Any, theta: Profile) -> Any:
                return _divide(weight(theta), marginals[(player, theta[player])])

        kwargs.setdefault("evaluation", expected_utility())
        tags = [*kwargs.pop("tags", []), "bayesian"]
        return cls(
            id=id,
            title=title,
            signals=signals,
            actions=actions,
            utility=utility,
            belief=belief,
            tags=tags,
            **kwargs,
        )

    @property
    def players(self) -> tuple[Any, ...]:
        return self.actions.players

    @property
    def num_profiles(self) -> int:
        """Number of incomplete profiles (capped estimate for huge games)."""
        return estimate_profile_count(self.signals, self.actions)

    def evaluation_of(self, player: Any) -> EvaluationStructure:
        self.actions.index(player)
        return structure_for(self.evaluation, player)

    def profile(self, strategies: Mapping[Any, Mapping[Any, Any]]) -> IncompleteProfile:
        """Build an incomplete profile from ``{player: {signal: action}}``."""
        return IncompleteProfile.from_strategies(self.signals, self.actions, strategies)

    def incomplete_profiles(self) -> Iterator[IncompleteProfile]:
        return incomplete_profiles(self.signals, self.actions)

    def signal_profiles(self, player: Any = None, signal: Any = None) -> Iterator[Profile]:
        """Signal profiles, optionally only those where ``player`` receives ``signal``."""
        if player is None:
            yield from self.signals.profiles()
            return
        self.signals.check(player, signal)
        index = self.signals.index(player)
        domains = list(self.signals.domains)
        domains[index] = (signal,)
        for combo in product(*domains):
            yield Profile.model_construct(space=self.signals, entries=combo)

    def expected_utility(self, player: Any, signal: Any, iprofile: IncompleteProfile) -> Any:
        """Valuation of ``iprofile`` for ``player`` when it holds ``signal``."""
        self._check_profile(iprofile)
        evaluation = self.evaluation_of(player)
        return evaluation.total(
            evaluation.weigh(
                self.belief(player, theta),
                self.utility(player, project_profile(iprofile, theta), theta),
            )
            for theta in self.signal_profiles(player, signal)
        )

    def improving_deviations(
        self, iprofile: IncompleteProfile, *, stop_at_first: bool = False
    ) -> list[Deviation]:
        """All strictly improving deviations of one player at one of its signals."""
        self._check_profile(iprofile)
        deviations: list[Deviation] = []
        for player in self.players:
            evaluation = self.evaluation_of(player)
            for signal in self.signals.domain(player):
                current = self.expected_utility(player, signal, iprofile)
                chosen = iprofile.action(player, signal)
                for action in self.actions.domain(player):
                    if action == chosen:
                        continue
                    moved = bmove(iprofile, player, signal, action)
                    outcome = self.expected_utility(player, signal, moved)
                    if evaluation.improves(current, outcome):
                        deviations.append(
                            Deviation(
                                player=player,
                                signal=signal,
                                action=action,
                                current=current,
                                deviation=outcome,
                            )
                        )
                        if stop_at_first:
                            return deviations
        return deviations

    def is_nash_equilibrium(self, iprofile: IncompleteProfile) -> bool:
        """No player, at any of its signals, gains by switching action."""
        return not self.improving_deviations(iprofile, stop_at_first=True)

    def pure_equilibria(self) -> list[IncompleteProfile]:
        """Enumerate every pure (Bayesian) Nash equilibrium."""
        logger.debug("Enumerating %d incomplete profiles of %s", self.num_profiles, self.id)
        return [p for p in self.incomplete_profiles() if self.is_nash_equilibrium(p)]

    def to_hypergraphical(self) -> HypergraphicalGame:
        from hypergames.conversions.howson_rosenthal import to_hypergraphical

        return to_hypergraphical(self)

    def _check_profile(self, iprofile: IncompleteProfile) -> None:
        if iprofile.signals != self.signals or iprofile.actions != self.actions:
            msg = f"Incomplete profile does not belong to game {self.id!r}"
            raise GameError(msg)


def _divide(numerator: Any, denominator: Any) -> Any:
    # Keep probabilities exact when both operands are rational
    if isinstance(numerator, Rational) and isinstance(denominator, Rational):
        return Fraction(numerator) / Fraction(denominator)
    return numerator / denominator
