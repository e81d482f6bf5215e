"""Tests for the Gambit cross-check plugin."""
from __future__ import annotations

import operator

import pytest

from hypergames.plugins.gambit_nash import PYGAMBIT_AVAILABLE, GambitPureNashPlugin


@pytest.fixture
def plugin() -> GambitPureNashPlugin:
    return GambitPureNashPlugin()


def test_plugin_metadata(plugin):
    assert plugin.name == "Gambit Pure Nash"
    assert plugin.applicable_to == ("normal",)


def test_cannot_run_on_other_formats(plugin, coordination_triangle, bayesian_bos):
    assert not plugin.can_run(coordination_triangle)
    assert not plugin.can_run(bayesian_bos)


def test_cannot_run_with_custom_preorder(plugin, prisoners_dilemma):
    reversed_game = prisoners_dilemma.model_copy(update={"outcome_le": operator.ge})
    assert not plugin.can_run(reversed_game)


@pytest.mark.skipif(not PYGAMBIT_AVAILABLE, reason="pygambit not available")
class TestWithGambit:
    def test_prisoners_dilemma(self, plugin, prisoners_dilemma):
        result = plugin.run(prisoners_dilemma)
        assert result.details["equilibria"] == [{"Row": "Defect", "Column": "Defect"}]
        assert result.details["agrees_with_enumeration"] is True
        assert result.summary == "Gambit: 1 pure Nash equilibrium"

    def test_matching_pennies(self, plugin, matching_pennies):
        result = plugin.run(matching_pennies)
        assert result.details["equilibria"] == []
        assert result.details["agrees_with_enumeration"] is True

    def test_three_player_game(self, plugin, coordination_triangle):
        result = plugin.run(coordination_triangle.to_normal_form())
        assert len(result.details["equilibria"]) == 2
        assert result.details["agrees_with_enumeration"] is True
