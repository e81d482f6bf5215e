"""Tests for evaluation structures."""
from __future__ import annotations

import math
from fractions import Fraction

import pytest
from pydantic import ValidationError

from hypergames.core.errors import GameError
from hypergames.core.evaluation import (
    EvaluationStructure,
    check_evaluation_players,
    expected_utility,
    possibilistic_optimistic,
    possibilistic_pessimistic,
    strictly_improves,
    structure_for,
)


class TestStrictlyImproves:
    def test_total_order(self):
        assert strictly_improves(1, 2, lambda a, b: a <= b)
        assert not strictly_improves(2, 2, lambda a, b: a <= b)
        assert not strictly_improves(3, 2, lambda a, b: a <= b)

    def test_partial_preorder(self):
        # Set inclusion: incomparable outcomes never improve on each other
        def subset(a, b):
            return a <= b

        assert strictly_improves(frozenset({1}), frozenset({1, 2}), subset)
        assert not strictly_improves(frozenset({1}), frozenset({2}), subset)
        assert not strictly_improves(frozenset({2}), frozenset({1}), subset)


class TestExpectedUtility:
    def test_total_is_weighted_sum(self):
        ev = expected_utility()
        values = [ev.weigh(Fraction(1, 4), 8), ev.weigh(Fraction(3, 4), 4)]
        assert ev.total(values) == 5

    def test_empty_total_is_neutral(self):
        assert expected_utility().total([]) == 0

    def test_improves(self):
        ev = expected_utility()
        assert ev.improves(1, 2)
        assert not ev.improves(2, 1)


class TestPossibilistic:
    def test_optimistic(self):
        ev = possibilistic_optimistic()
        values = [ev.weigh(1, 0.2), ev.weigh(0.5, 0.9)]
        assert ev.total(values) == 0.5
        assert ev.total([]) == -math.inf

    def test_pessimistic(self):
        ev = possibilistic_pessimistic()
        values = [ev.weigh(1, 0.2), ev.weigh(Fraction(1, 2), 0.9)]
        assert ev.total(values) == 0.2
        assert ev.total([]) == math.inf


class TestEvaluationStructure:
    def test_custom_structure(self):
        ev = EvaluationStructure(neutral=frozenset(), aggregate=frozenset.union, combine=lambda w, u: u)
        assert ev.name == "custom"
        assert ev.total([frozenset({1}), frozenset({2})]) == {1, 2}

    def test_is_frozen(self):
        ev = expected_utility()
        with pytest.raises(ValidationError):
            ev.neutral = 1

    def test_requires_callables(self):
        with pytest.raises(ValidationError):
            EvaluationStructure(neutral=0, aggregate="sum", combine=min)

    def test_structure_for(self):
        shared = expected_utility()
        per_player = {"a": possibilistic_optimistic()}
        assert structure_for(shared, "anyone") is shared
        assert structure_for(per_player, "a").name == "possibilistic-optimistic"

    def test_check_evaluation_players(self):
        check_evaluation_players(expected_utility(), ["a", "b"])
        check_evaluation_players({"a": expected_utility(), "b": expected_utility()}, ["a", "b"])
        with pytest.raises(GameError, match="missing"):
            check_evaluation_players({"a": expected_utility()}, ["a", "b"])
