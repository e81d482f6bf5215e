"""Tests for the pure Nash enumeration plugin."""
from __future__ import annotations

import pytest


@pytest.fixture
def nash_plugin(registry):
    """Get the pure Nash plugin from registry."""
    plugin = registry.get_analysis("Pure Nash")
    assert plugin is not None
    return plugin


class TestPureNashPlugin:
    def test_plugin_metadata(self, nash_plugin):
        assert nash_plugin.name == "Pure Nash"
        assert nash_plugin.continuous is True
        assert "incomplete" in nash_plugin.applicable_to

    def test_prisoners_dilemma(self, nash_plugin, prisoners_dilemma):
        result = nash_plugin.run(prisoners_dilemma)
        assert result.summary == "1 pure Nash equilibrium"
        assert result.details["equilibria"] == [{"Row": "Defect", "Column": "Defect"}]
        assert result.details["exhaustive"] is True
        assert result.details["profile_count"] == 4

    def test_no_equilibrium(self, nash_plugin, matching_pennies):
        result = nash_plugin.run(matching_pennies)
        assert result.summary == "No pure Nash equilibria"
        assert result.details["equilibria"] == []

    def test_hypergraphical(self, nash_plugin, coordination_triangle):
        result = nash_plugin.run(coordination_triangle)
        assert result.summary == "2 pure Nash equilibria"
        assert {p.entries for p in result.details["profiles"]} == {(0, 0, 0), (1, 1, 1)}

    def test_incomplete(self, nash_plugin, bayesian_bos):
        result = nash_plugin.run(bayesian_bos)
        assert result.details["equilibria"] == [
            {"Alice": {"-": "B"}, "Bob": {"likes": "B", "avoids": "S"}}
        ]

    def test_blocked_by_profile_limit(self, nash_plugin, coordination_triangle):
        result = nash_plugin.run(coordination_triangle, {"max_profiles": 4})
        assert result.details["exhaustive"] is False
        assert result.details["equilibria"] == []
        assert result.summary == "Too many profiles (8 > 4)"
