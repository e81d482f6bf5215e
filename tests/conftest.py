"""Shared test fixtures for hypergames."""
from __future__ import annotations

import pytest

from hypergames import catalog
from hypergames.dependencies import get_conversion_registry, get_registry
from hypergames.models import HypergraphicalGame, IncompleteGame, NormalFormGame
from hypergames.plugins import discover_plugins

# Register the built-in analyses on the shared registry once for the session
discover_plugins()


@pytest.fixture
def prisoners_dilemma() -> NormalFormGame:
    return catalog.prisoners_dilemma()


@pytest.fixture
def matching_pennies() -> NormalFormGame:
    return catalog.matching_pennies()


@pytest.fixture
def coordination_triangle() -> HypergraphicalGame:
    return catalog.coordination_triangle()


@pytest.fixture
def point_mass_game() -> IncompleteGame:
    """Point-mass beliefs on the signal profile (1, 0)."""
    return catalog.point_mass_bayesian_game((1, 0))


@pytest.fixture
def bayesian_bos() -> IncompleteGame:
    return catalog.bayesian_battle_of_sexes()


@pytest.fixture
def registry():
    return get_registry()


@pytest.fixture
def conversions():
    return get_conversion_registry()
