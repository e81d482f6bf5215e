"""Pure Nash equilibrium checks by bounded enumeration of deviations."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from hypergames.core.profiles import Profile


class Deviation(BaseModel):
    """A strictly improving unilateral deviation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    player: Any
    action: Any  # The action deviated to
    current: Any  # Outcome before deviating
    deviation: Any  # Outcome after deviating
    signal: Any = None  # Set only for incomplete games


def profile_deviations(
    profile: Profile,
    payoff: Callable[[Any, Profile], Any],
    improves: Callable[[Any, Any, Any], bool],
    *,
    stop_at_first: bool = False,
) -> list[Deviation]:
    """Scan every unilateral deviation from ``profile``.

    Args:
        profile: The candidate profile.
        payoff: ``payoff(player, profile)`` returns the player's outcome.
        improves: ``improves(player, old, new)`` is the strict preference.
        stop_at_first: Return as soon as one counterexample is found.

    Returns:
        The strictly improving deviations (empty iff ``profile`` is a pure
        Nash equilibrium).
    """
    deviations: list[Deviation] = []
    for player, chosen in profile.items():
        current = payoff(player, profile)
        for action in profile.space.domain(player):
            if action == chosen:
                continue
            outcome = payoff(player, profile.move(player, action))
            if improves(player, current, outcome):
                deviations.append(
                    Deviation(player=player, action=action, current=current, deviation=outcome)
                )
                if stop_at_first:
                    return deviations
    return deviations
