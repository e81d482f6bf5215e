"""Profiles: one value per player, drawn from per-player finite domains.

A :class:`ProfileSpace` is the registry of players and their domains; every
:class:`Profile` belongs to exactly one space and is validated against it when
it is built. Profiles are immutable; :func:`move` returns a new profile.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from itertools import product
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator

from hypergames.core.errors import (
    DomainError,
    GameError,
    domain_mismatch,
    not_finite,
    unknown_player,
)


class ProfileSpace(BaseModel):
    """Ordered players together with one finite domain per player.

    Players and domain values must be hashable. ``domains[k]`` is the domain
    of ``players[k]``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    players: tuple[Any, ...]
    domains: tuple[tuple[Any, ...], ...]

    @field_validator("players", "domains", mode="before")
    @classmethod
    def _reject_lazy_collections(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, Iterator):
            raise not_finite(info.field_name.capitalize())
        if info.field_name == "domains":
            for domain in value:
                if isinstance(domain, Iterator):
                    raise not_finite("Player domain")
        return value

    @model_validator(mode="after")
    def _check_shape(self) -> ProfileSpace:
        if len(self.domains) != len(self.players):
            msg = f"Got {len(self.domains)} domains for {len(self.players)} players"
            raise GameError(msg)
        if len(set(self.players)) != len(self.players):
            msg = f"Duplicate players in {list(self.players)!r}"
            raise GameError(msg)
        for player, domain in zip(self.players, self.domains, strict=True):
            if not domain:
                msg = f"Player {player!r} has an empty domain"
                raise DomainError(msg)
            if len(set(domain)) != len(domain):
                msg = f"Duplicate values in the domain of player {player!r}"
                raise DomainError(msg)
        return self

    @classmethod
    def from_domains(cls, domains: Mapping[Any, Iterable[Any]]) -> ProfileSpace:
        """Build a space from ``{player: domain}`` (insertion order is kept)."""
        return cls(players=tuple(domains.keys()), domains=tuple(domains.values()))

    @property
    def size(self) -> int:
        """Number of distinct profiles in this space."""
        return math.prod(len(domain) for domain in self.domains)

    def __contains__(self, player: Any) -> bool:
        return player in self.players

    def index(self, player: Any) -> int:
        try:
            return self.players.index(player)
        except ValueError:
            raise unknown_player(player, self.players) from None

    def domain(self, player: Any) -> tuple[Any, ...]:
        return self.domains[self.index(player)]

    def check(self, player: Any, value: Any) -> None:
        """Raise :class:`DomainError` unless ``value`` is in ``player``'s domain."""
        domain = self.domain(player)
        if value not in domain:
            raise domain_mismatch(player, value, domain)

    def profile(self, assignment: Mapping[Any, Any]) -> Profile:
        """Build a validated profile from ``{player: value}``."""
        for player in assignment:
            if player not in self.players:
                raise unknown_player(player, self.players)
        missing = [player for player in self.players if player not in assignment]
        if missing:
            msg = f"Profile is missing values for players {missing!r}"
            raise GameError(msg)
        return Profile(space=self, entries=tuple(assignment[p] for p in self.players))

    def profiles(self) -> Iterator[Profile]:
        """Enumerate every profile of the space in lexicographic domain order."""
        for combo in product(*self.domains):
            yield Profile.model_construct(space=self, entries=combo)

    def restrict(self, players: Iterable[Any]) -> ProfileSpace:
        """Sub-space over ``players``, keeping this space's player order."""
        wanted = set(players)
        for player in wanted:
            if player not in self.players:
                raise unknown_player(player, self.players)
        kept = [k for k, player in enumerate(self.players) if player in wanted]
        return ProfileSpace(
            players=tuple(self.players[k] for k in kept),
            domains=tuple(self.domains[k] for k in kept),
        )


class Profile(BaseModel):
    """A total assignment of one value per player of ``space``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    space: ProfileSpace
    entries: tuple[Any, ...]

    @model_validator(mode="after")
    def _check_domains(self) -> Profile:
        if len(self.entries) != len(self.space.players):
            msg = (
                f"Profile has {len(self.entries)} entries for "
                f"{len(self.space.players)} players"
            )
            raise GameError(msg)
        for player, domain, value in zip(
            self.space.players, self.space.domains, self.entries, strict=True
        ):
            if value not in domain:
                raise domain_mismatch(player, value, domain)
        return self

    @property
    def players(self) -> tuple[Any, ...]:
        return self.space.players

    def __getitem__(self, player: Any) -> Any:
        return self.entries[self.space.index(player)]

    def items(self) -> Iterator[tuple[Any, Any]]:
        return zip(self.space.players, self.entries)

    def as_dict(self) -> dict[Any, Any]:
        return dict(self.items())

    def move(self, player: Any, value: Any) -> Profile:
        """Return a copy where ``player`` plays ``value`` instead."""
        self.space.check(player, value)
        index = self.space.index(player)
        entries = self.entries[:index] + (value,) + self.entries[index + 1 :]
        return Profile.model_construct(space=self.space, entries=entries)

    def restrict(self, players: Iterable[Any]) -> Profile:
        """Sub-profile over ``players``."""
        space = self.space.restrict(players)
        return Profile.model_construct(
            space=space, entries=tuple(self[player] for player in space.players)
        )

    def __repr__(self) -> str:
        return f"Profile({self.as_dict()!r})"


def move(profile: Profile, player: Any, value: Any) -> Profile:
    """Point-wise update: ``profile`` with ``player``'s entry replaced by ``value``.

    Raises:
        UnknownPlayerError: If ``player`` is not in the profile's space.
        DomainError: If ``value`` is outside ``player``'s domain.
    """
    return profile.move(player, value)
