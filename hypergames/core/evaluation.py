"""Evaluation structures: how beliefs and utilities combine into valuations.

An :class:`EvaluationStructure` bundles, for one player, the aggregation
operator ``aggregate`` (⊕) over valuations with its identity ``neutral``
(V0), the combination ``combine`` (⊗) of a belief weight with a utility, and
preorders over utilities, beliefs and valuations.

``aggregate`` must be commutative and associative with identity ``neutral``.
This is a caller obligation and cannot be checked: a structure that breaks
it makes aggregated values depend on enumeration order.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable
from functools import reduce
from typing import Any

from pydantic import BaseModel, ConfigDict

from hypergames.core.errors import GameError
from hypergames.core.types import BinaryOp, Preorder


def strictly_improves(old: Any, new: Any, le: Preorder) -> bool:
    """``new`` is strictly better than ``old``: ``old <= new`` and not ``new <= old``."""
    return le(old, new) and not le(new, old)


class EvaluationStructure(BaseModel):
    """Per-player algebra used to evaluate outcomes under uncertainty."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = "custom"
    neutral: Any
    aggregate: BinaryOp
    combine: BinaryOp
    utility_le: Preorder = operator.le
    belief_le: Preorder = operator.le
    valuation_le: Preorder = operator.le

    def total(self, values: Iterable[Any]) -> Any:
        """Fold ``aggregate`` over ``values`` starting from ``neutral``."""
        return reduce(self.aggregate, values, self.neutral)

    def weigh(self, belief: Any, utility: Any) -> Any:
        return self.combine(belief, utility)

    def improves(self, old: Any, new: Any) -> bool:
        return strictly_improves(old, new, self.valuation_le)


def expected_utility() -> EvaluationStructure:
    """Classical Bayesian evaluation: sum of probability-weighted utilities."""
    return EvaluationStructure(
        name="expected-utility",
        neutral=0,
        aggregate=operator.add,
        combine=operator.mul,
    )


def possibilistic_optimistic() -> EvaluationStructure:
    """Optimistic qualitative utility: ``max`` over ``min(possibility, utility)``."""
    return EvaluationStructure(
        name="possibilistic-optimistic",
        neutral=-math.inf,
        aggregate=max,
        combine=min,
    )


def _pessimistic_combine(possibility: Any, utility: Any) -> Any:
    return max(1 - possibility, utility)


def possibilistic_pessimistic() -> EvaluationStructure:
    """Pessimistic qualitative utility: ``min`` over ``max(1 - possibility, utility)``.

    Possibilities and utilities are expected on the same [0, 1] scale.
    """
    return EvaluationStructure(
        name="possibilistic-pessimistic",
        neutral=math.inf,
        aggregate=min,
        combine=_pessimistic_combine,
    )


EvaluationSpec = EvaluationStructure | dict[Any, EvaluationStructure]
"""One structure shared by every player, or one structure per player."""


def structure_for(evaluation: EvaluationSpec, player: Any) -> EvaluationStructure:
    """Look up ``player``'s structure in a shared or per-player specification."""
    if isinstance(evaluation, EvaluationStructure):
        return evaluation
    return evaluation[player]


def check_evaluation_players(evaluation: EvaluationSpec, players: Iterable[Any]) -> None:
    """Per-player specifications must name exactly the game's players."""
    if isinstance(evaluation, EvaluationStructure):
        return
    expected = set(players)
    given = set(evaluation)
    if given != expected:
        missing = sorted(map(repr, expected - given))
        extra = sorted(map(repr, given - expected))
        msg = f"Evaluation structures do not match players (missing: {missing}, unknown: {extra})"
        raise GameError(msg)

