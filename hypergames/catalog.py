"""Example games used in documentation, tests and quick experiments."""

from __future__ import annotations

from fractions import Fraction
from typing import Any

from hypergames.core.evaluation import expected_utility
from hypergames.core.profiles import Profile, ProfileSpace
from hypergames.models.hypergraphical import HypergraphicalGame, LocalGame
from hypergames.models.incomplete import IncompleteGame
from hypergames.models.normal_form import NormalFormGame


def prisoners_dilemma() -> NormalFormGame:
    """Prisoner's Dilemma - unique equilibrium at (Defect, Defect)."""
    return NormalFormGame.from_payoff_table(
        id="prisoners-dilemma",
        title="Prisoner's Dilemma",
        actions={"Row": ("Cooperate", "Defect"), "Column": ("Cooperate", "Defect")},
        payoffs={
            ("Cooperate", "Cooperate"): (-1, -1),
            ("Cooperate", "Defect"): (-3, 0),
            ("Defect", "Cooperate"): (0, -3),
            ("Defect", "Defect"): (-2, -2),
        },
        tags=["strategic-form", "classic"],
    )


def matching_pennies() -> NormalFormGame:
    """Matching Pennies - no pure equilibrium."""
    return NormalFormGame.from_payoff_table(
        id="matching-pennies",
        title="Matching Pennies",
        actions={"Matcher": ("Heads", "Tails"), "Mismatcher": ("Heads", "Tails")},
        payoffs={
            ("Heads", "Heads"): (1, -1),
            ("Heads", "Tails"): (-1, 1),
            ("Tails", "Heads"): (-1, 1),
            ("Tails", "Tails"): (1, -1),
        },
        tags=["strategic-form", "classic", "zero-sum"],
    )


def coordination_triangle() -> HypergraphicalGame:
    """Three players on a triangle; each edge is a pairwise coordination game.

    A player earns 1 per neighbour choosing the same action, so the pure
    equilibria are the two unanimous profiles.
    """
    actions = ProfileSpace.from_domains({"A": (0, 1), "B": (0, 1), "C": (0, 1)})

    def agree(player: Any, profile: Profile, edge: tuple[str, str]) -> int:
        left, right = edge
        return int(profile[left] == profile[right])

    local_games = tuple(
        LocalGame(
            id=edge,
            players=frozenset(edge),
            utility=lambda player, profile, edge=edge: agree(player, profile, edge),
            label=f"{edge[0]}-{edge[1]}",
        )
        for edge in (("A", "B"), ("B", "C"), ("A", "C"))
    )
    return HypergraphicalGame(
        id="coordination-triangle",
        title="Coordination Triangle",
        actions=actions,
        local_games=local_games,
        evaluation=expected_utility(),
        tags=["graphical"],
    )


def point_mass_bayesian_game(true_signals: tuple[int, int] = (1, 0)) -> IncompleteGame:
    """Two players, signals {0, 1}, actions {0, 1}; all belief sits on ``true_signals``.

    Utilities: player 0 earns 3 for matching and ``theta[0]`` for playing 1;
    player 1 earns 2 for mismatching and ``theta[1]`` for playing 1.
    """
    signals = ProfileSpace.from_domains({0: (0, 1), 1: (0, 1)})
    actions = ProfileSpace.from_domains({0: (0, 1), 1: (0, 1)})

    def utility(player: int, a: Profile, theta: Profile) -> int:
        if player == 0:
            return 3 * int(a[0] == a[1]) + theta[0] * a[0]
        return 2 * int(a[0] != a[1]) + theta[1] * a[1]

    def belief(player: int, theta: Profile) -> Fraction:
        return Fraction(1) if theta.entries == tuple(true_signals) else Fraction(0)

    return IncompleteGame(
        id="point-mass",
        title="Point-mass Bayesian game",
        signals=signals,
        actions=actions,
        utility=utility,
        belief=belief,
        evaluation=expected_utility(),
        tags=["bayesian"],
    )


def bayesian_battle_of_sexes() -> IncompleteGame:
    """Battle of the Sexes where Bob's preference is private (Osborne's variant).

    Bob either wants to meet Alice ("likes") or to avoid her ("avoids"),
    each with prior probability 1/2. The unique pure Bayesian equilibrium
    is Alice: Bach; Bob: Bach if he likes her, Stravinsky otherwise.
    """
    signals = ProfileSpace.from_domains({"Alice": ("-",), "Bob": ("likes", "avoids")})
    actions = ProfileSpace.from_domains({"Alice": ("B", "S"), "Bob": ("B", "S")})

    alice = {("B", "B"): 2, ("B", "S"): 0, ("S", "B"): 0, ("S", "S"): 1}
    bob = {
        "likes": {("B", "B"): 1, ("B", "S"): 0, ("S", "B"): 0, ("S", "S"): 2},
        "avoids": {("B", "B"): 0, ("B", "S"): 2, ("S", "B"): 1, ("S", "S"): 0},
    }

    def utility(player: str, a: Profile, theta: Profile) -> int:
        if player == "Alice":
            return alice[a.entries]
        return bob[theta["Bob"]][a.entries]

    return IncompleteGame.from_common_prior(
        id="bayesian-bos",
        title="Bayesian Battle of the Sexes",
        signals=signals,
        actions=actions,
        utility=utility,
        prior={("-", "likes"): Fraction(1, 2), ("-", "avoids"): Fraction(1, 2)},
        conditional=True,
        tags=["classic"],
    )
