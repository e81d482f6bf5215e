"""Tests for the Howson-Rosenthal transformation."""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from hypergames.config import ConversionConfig
from hypergames.conversions.howson_rosenthal import (
    check_incomplete_to_hypergraphical,
    to_hypergraphical,
)
from hypergames.core.strategies import flatten
from hypergames.models.incomplete import IncompleteGame
from tests.game_strategies import incomplete_games, incomplete_profiles_of


class TestStructure:
    def test_one_local_game_per_signal_profile(self, bayesian_bos: IncompleteGame):
        hypergraph = to_hypergraphical(bayesian_bos)
        assert len(hypergraph.local_games) == bayesian_bos.signals.size
        participants = {g.id: g.players for g in hypergraph.local_games}
        assert participants[("-", "likes")] == {("Alice", "-"), ("Bob", "likes")}
        assert participants[("-", "avoids")] == {("Alice", "-"), ("Bob", "avoids")}

    def test_players_are_signal_pairs(self, bayesian_bos: IncompleteGame):
        hypergraph = to_hypergraphical(bayesian_bos)
        assert hypergraph.players == (("Alice", "-"), ("Bob", "likes"), ("Bob", "avoids"))
        assert hypergraph.actions.domain(("Bob", "avoids")) == ("B", "S")

    def test_metadata(self, bayesian_bos: IncompleteGame):
        hypergraph = to_hypergraphical(bayesian_bos)
        assert hypergraph.id == "bayesian-bos-hypergraphical"
        assert "from-incomplete" in hypergraph.tags
        assert hypergraph.evaluation_of(("Bob", "likes")).name == "expected-utility"

    def test_equilibria_map_to_flattened_profiles(self, bayesian_bos: IncompleteGame):
        hypergraph = to_hypergraphical(bayesian_bos)
        expected = [flatten(p) for p in bayesian_bos.pure_equilibria()]
        assert hypergraph.pure_equilibria() == expected


class TestCheck:
    def test_rejects_other_formats(self, prisoners_dilemma):
        result = check_incomplete_to_hypergraphical(prisoners_dilemma)
        assert not result.possible

    def test_small_game_passes(self, bayesian_bos: IncompleteGame):
        result = check_incomplete_to_hypergraphical(bayesian_bos)
        assert result.possible
        assert result.warnings == []

    def test_warning_threshold(self, bayesian_bos: IncompleteGame, monkeypatch):
        monkeypatch.setattr(ConversionConfig, "LOCAL_GAME_WARNING_THRESHOLD", 1)
        result = check_incomplete_to_hypergraphical(bayesian_bos)
        assert result.possible
        assert "Large hypergraph" in result.warnings[0]

    def test_blocking_threshold(self, bayesian_bos: IncompleteGame, monkeypatch):
        monkeypatch.setattr(ConversionConfig, "LOCAL_GAME_BLOCKING_THRESHOLD", 1)
        result = check_incomplete_to_hypergraphical(bayesian_bos)
        assert not result.possible
        assert "Too many signal profiles" in result.blockers[0]


class TestEquivalence:
    @given(data=st.data(), game=incomplete_games())
    @settings(max_examples=40, deadline=None)
    def test_valuations_are_preserved(self, data, game: IncompleteGame):
        hypergraph = to_hypergraphical(game)
        profile = data.draw(incomplete_profiles_of(game))
        flat = flatten(profile)
        for player in game.players:
            for signal in game.signals.domain(player):
                assert hypergraph.global_utility((player, signal), flat) == (
                    game.expected_utility(player, signal, profile)
                )

    @given(game=incomplete_games())
    @settings(max_examples=20, deadline=None)
    def test_equilibria_correspond(self, game: IncompleteGame):
        hypergraph = to_hypergraphical(game).to_normal_form()
        for profile in game.incomplete_profiles():
            assert game.is_nash_equilibrium(profile) == hypergraph.is_nash_equilibrium(
                flatten(profile)
            )

    @given(data=st.data(), game=incomplete_games())
    @settings(max_examples=30, deadline=None)
    def test_deviations_correspond(self, data, game: IncompleteGame):
        hypergraph = to_hypergraphical(game).to_normal_form()
        profile = data.draw(incomplete_profiles_of(game))
        incomplete = {(d.player, d.signal, d.action) for d in game.improving_deviations(profile)}
        flat = {
            (d.player[0], d.player[1], d.action)
            for d in hypergraph.improving_deviations(flatten(profile))
        }
        assert incomplete == flat
