"""Smoke tests for the example games."""
from __future__ import annotations

import pytest

from hypergames import catalog


@pytest.mark.parametrize(
    ("factory", "format_name", "equilibria"),
    [
        (catalog.prisoners_dilemma, "normal", 1),
        (catalog.matching_pennies, "normal", 0),
        (catalog.coordination_triangle, "hypergraphical", 2),
        (catalog.point_mass_bayesian_game, "incomplete", 0),
        (catalog.bayesian_battle_of_sexes, "incomplete", 1),
    ],
)
def test_example_games(factory, format_name, equilibria):
    game = factory()
    assert game.format_name == format_name
    assert len(game.pure_equilibria()) == equilibria


def test_point_mass_on_other_signals():
    # Player 0 holds no belief at signal 1 once all mass sits on (0, 0)
    game = catalog.point_mass_bayesian_game((0, 0))
    assert game.format_name == "incomplete"
    assert all(
        game.expected_utility(0, 1, profile) == 0 for profile in game.incomplete_profiles()
    )
