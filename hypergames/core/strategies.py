"""Incomplete profiles: one strategy (signal -> action) per player.

These functions are shared by incomplete games, the Howson-Rosenthal
conversion and the equilibrium plugins. The flattened view indexes actions
by ``(player, signal)`` pairs, enumerated player-major in domain order.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import lru_cache
from itertools import chain, product
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from hypergames.config import EnumerationConfig
from hypergames.core.errors import GameError, domain_mismatch, unknown_player
from hypergames.core.profiles import Profile, ProfileSpace


class IncompleteProfile(BaseModel):
    """Strategies of all players in an incomplete game.

    ``strategies[k][m]`` is the action of player ``k`` when it receives its
    ``m``-th signal.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    signals: ProfileSpace
    actions: ProfileSpace
    strategies: tuple[tuple[Any, ...], ...]

    @model_validator(mode="after")
    def _check_strategies(self) -> IncompleteProfile:
        if self.signals.players != self.actions.players:
            msg = "Signal and action spaces must range over the same players"
            raise GameError(msg)
        if len(self.strategies) != len(self.signals.players):
            msg = (
                f"Got {len(self.strategies)} strategies for "
                f"{len(self.signals.players)} players"
            )
            raise GameError(msg)
        for player, signal_domain, action_domain, strategy in zip(
            self.signals.players,
            self.signals.domains,
            self.actions.domains,
            self.strategies,
            strict=True,
        ):
            if len(strategy) != len(signal_domain):
                msg = f"Strategy of player {player!r} must assign one action per signal"
                raise GameError(msg)
            for action in strategy:
                if action not in action_domain:
                    raise domain_mismatch(player, action, action_domain)
        return self

    @classmethod
    def from_strategies(
        cls,
        signals: ProfileSpace,
        actions: ProfileSpace,
        strategies: Mapping[Any, Mapping[Any, Any]],
    ) -> IncompleteProfile:
        """Build from ``{player: {signal: action}}``."""
        for player in strategies:
            if player not in signals.players:
                raise unknown_player(player, signals.players)
        rows = []
        for player, signal_domain in zip(signals.players, signals.domains, strict=True):
            strategy = strategies.get(player)
            if strategy is None:
                msg = f"Incomplete profile is missing a strategy for player {player!r}"
                raise GameError(msg)
            missing = [signal for signal in signal_domain if signal not in strategy]
            if missing:
                msg = f"Strategy of player {player!r} has no action for signals {missing!r}"
                raise GameError(msg)
            rows.append(tuple(strategy[signal] for signal in signal_domain))
        return cls(signals=signals, actions=actions, strategies=tuple(rows))

    @property
    def players(self) -> tuple[Any, ...]:
        return self.signals.players

    def strategy(self, player: Any) -> dict[Any, Any]:
        index = self.signals.index(player)
        return dict(zip(self.signals.domains[index], self.strategies[index], strict=True))

    def action(self, player: Any, signal: Any) -> Any:
        index = self.signals.index(player)
        return self.strategies[index][_signal_index(self.signals, index, signal)]

    def __repr__(self) -> str:
        strategies = {player: self.strategy(player) for player in self.players}
        return f"IncompleteProfile({strategies!r})"


def _signal_index(signals: ProfileSpace, player_index: int, signal: Any) -> int:
    domain = signals.domains[player_index]
    try:
        return domain.index(signal)
    except ValueError:
        raise domain_mismatch(signals.players[player_index], signal, domain) from None


@lru_cache(maxsize=256)
def flat_space(signals: ProfileSpace, actions: ProfileSpace) -> ProfileSpace:
    """Space indexed by ``(player, signal)`` whose domains are the player's actions."""
    players = []
    domains = []
    for player, signal_domain, action_domain in zip(
        signals.players, signals.domains, actions.domains, strict=True
    ):
        for signal in signal_domain:
            players.append((player, signal))
            domains.append(action_domain)
    return ProfileSpace(players=tuple(players), domains=tuple(domains))


def flatten(iprofile: IncompleteProfile) -> Profile:
    """Re-index an incomplete profile by ``(player, signal)`` pairs."""
    space = flat_space(iprofile.signals, iprofile.actions)
    return Profile.model_construct(
        space=space, entries=tuple(chain.from_iterable(iprofile.strategies))
    )


def unflatten(
    flat: Profile, signals: ProfileSpace, actions: ProfileSpace
) -> IncompleteProfile:
    """Inverse of :func:`flatten`."""
    if flat.space != flat_space(signals, actions):
        msg = "Profile is not indexed by the (player, signal) pairs of these spaces"
        raise GameError(msg)
    rows = []
    offset = 0
    for signal_domain in signals.domains:
        rows.append(flat.entries[offset : offset + len(signal_domain)])
        offset += len(signal_domain)
    return IncompleteProfile.model_construct(
        signals=signals, actions=actions, strategies=tuple(rows)
    )


def project_profile(iprofile: IncompleteProfile, theta: Profile) -> Profile:
    """Actions played when the true signal profile is ``theta``."""
    entries = []
    for index, player in enumerate(iprofile.players):
        signal = theta[player]
        entries.append(iprofile.strategies[index][_signal_index(iprofile.signals, index, signal)])
    return Profile.model_construct(space=iprofile.actions, entries=tuple(entries))


def project_flat(flat: Profile, theta: Profile, actions: ProfileSpace) -> Profile:
    """Same as :func:`project_profile`, reading a flattened profile."""
    return Profile.model_construct(
        space=actions,
        entries=tuple(flat[(player, theta[player])] for player in actions.players),
    )


def bmove(iprofile: IncompleteProfile, player: Any, signal: Any, action: Any) -> IncompleteProfile:
    """Change only the action ``player`` takes on ``signal``.

    Raises:
        UnknownPlayerError: If ``player`` is not in the profile.
        DomainError: If ``signal`` or ``action`` is outside the player's domains.
    """
    index = iprofile.signals.index(player)
    position = _signal_index(iprofile.signals, index, signal)
    iprofile.actions.check(player, action)
    strategy = iprofile.strategies[index]
    strategy = strategy[:position] + (action,) + strategy[position + 1 :]
    strategies = iprofile.strategies[:index] + (strategy,) + iprofile.strategies[index + 1 :]
    return IncompleteProfile.model_construct(
        signals=iprofile.signals, actions=iprofile.actions, strategies=strategies
    )


def incomplete_profiles(
    signals: ProfileSpace, actions: ProfileSpace
) -> Iterator[IncompleteProfile]:
    """Enumerate every incomplete profile over the two spaces."""
    per_player = [
        list(product(action_domain, repeat=len(signal_domain)))
        for signal_domain, action_domain in zip(signals.domains, actions.domains, strict=True)
    ]
    for strategies in product(*per_player):
        yield IncompleteProfile.model_construct(
            signals=signals, actions=actions, strategies=strategies
        )


def estimate_profile_count(signals: ProfileSpace, actions: ProfileSpace) -> int:
    """Count incomplete profiles WITHOUT enumerating them.

    The result is capped once it exceeds ``EnumerationConfig.ESTIMATE_CAP``.
    """
    total = 1
    for signal_domain, action_domain in zip(signals.domains, actions.domains, strict=True):
        total *= len(action_domain) ** len(signal_domain)
        if total > EnumerationConfig.ESTIMATE_CAP:
            return total
    return total
