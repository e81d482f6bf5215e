"""Tests for profile spaces and profiles."""
from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from hypergames.core.errors import DomainError, GameError, UnknownPlayerError
from hypergames.core.profiles import Profile, ProfileSpace, move
from tests.game_strategies import profile_spaces, profiles


@pytest.fixture
def space() -> ProfileSpace:
    return ProfileSpace.from_domains({"Alice": ("L", "R"), "Bob": ("U", "M", "D")})


class TestProfileSpace:
    def test_from_domains_keeps_order(self, space: ProfileSpace):
        assert space.players == ("Alice", "Bob")
        assert space.domain("Bob") == ("U", "M", "D")
        assert space.size == 6

    def test_lists_become_tuples(self):
        space = ProfileSpace(players=["a"], domains=[[1, 2]])
        assert space.domains == ((1, 2),)

    def test_unknown_player(self, space: ProfileSpace):
        with pytest.raises(UnknownPlayerError, match="Carol"):
            space.domain("Carol")

    def test_rejects_duplicate_players(self):
        with pytest.raises(ValidationError, match="Duplicate players"):
            ProfileSpace(players=("a", "a"), domains=((1,), (1,)))

    def test_rejects_empty_domain(self):
        with pytest.raises(ValidationError, match="empty domain"):
            ProfileSpace.from_domains({"a": ()})

    def test_rejects_duplicate_domain_values(self):
        with pytest.raises(ValidationError, match="Duplicate values"):
            ProfileSpace.from_domains({"a": (1, 1)})

    def test_rejects_mismatched_lengths(self):
        with pytest.raises(ValidationError, match="2 domains for 1 players"):
            ProfileSpace(players=("a",), domains=((1,), (2,)))

    def test_rejects_lazy_domain(self):
        with pytest.raises(ValidationError, match="finite collection"):
            ProfileSpace.from_domains({"a": (x for x in range(3))})

    def test_rejects_lazy_players(self):
        with pytest.raises(ValidationError, match="finite collection"):
            ProfileSpace(players=iter(["a"]), domains=((1,),))

    def test_space_is_frozen(self, space: ProfileSpace):
        with pytest.raises(ValidationError):
            space.players = ("x",)

    def test_profiles_enumerates_product(self, space: ProfileSpace):
        entries = [p.entries for p in space.profiles()]
        assert len(entries) == 6
        assert entries[0] == ("L", "U")
        assert entries[-1] == ("R", "D")

    def test_restrict(self, space: ProfileSpace):
        sub = space.restrict(["Bob"])
        assert sub.players == ("Bob",)
        assert sub.domain("Bob") == ("U", "M", "D")

    def test_check(self, space: ProfileSpace):
        space.check("Alice", "L")
        with pytest.raises(DomainError):
            space.check("Alice", "U")


class TestProfile:
    def test_build_and_lookup(self, space: ProfileSpace):
        profile = space.profile({"Alice": "R", "Bob": "M"})
        assert profile["Alice"] == "R"
        assert profile["Bob"] == "M"
        assert profile.as_dict() == {"Alice": "R", "Bob": "M"}

    def test_rejects_value_outside_domain(self, space: ProfileSpace):
        with pytest.raises(ValidationError, match="not in the domain"):
            space.profile({"Alice": "X", "Bob": "M"})

    def test_direct_construction_is_validated(self, space: ProfileSpace):
        with pytest.raises(ValidationError):
            Profile(space=space, entries=("L",))

    def test_missing_player(self, space: ProfileSpace):
        with pytest.raises(GameError, match="missing"):
            space.profile({"Alice": "L"})

    def test_unknown_player_in_assignment(self, space: ProfileSpace):
        with pytest.raises(UnknownPlayerError):
            space.profile({"Alice": "L", "Bob": "U", "Carol": 1})

    def test_profiles_are_hashable_values(self, space: ProfileSpace):
        a = space.profile({"Alice": "L", "Bob": "U"})
        b = space.profile({"Bob": "U", "Alice": "L"})
        assert a == b
        assert len({a, b}) == 1

    def test_move(self, space: ProfileSpace):
        profile = space.profile({"Alice": "L", "Bob": "U"})
        moved = move(profile, "Bob", "D")
        assert moved.as_dict() == {"Alice": "L", "Bob": "D"}
        assert profile["Bob"] == "U"

    def test_move_rejects_foreign_value(self, space: ProfileSpace):
        profile = space.profile({"Alice": "L", "Bob": "U"})
        with pytest.raises(DomainError):
            move(profile, "Alice", "U")

    def test_move_rejects_unknown_player(self, space: ProfileSpace):
        profile = space.profile({"Alice": "L", "Bob": "U"})
        with pytest.raises(UnknownPlayerError):
            move(profile, "Carol", "L")

    def test_restrict(self, space: ProfileSpace):
        profile = space.profile({"Alice": "L", "Bob": "U"})
        assert profile.restrict(["Alice"]).as_dict() == {"Alice": "L"}


class TestMoveProperties:
    @given(data=st.data(), space=profile_spaces())
    @settings(max_examples=50, deadline=None)
    def test_move_identity(self, data, space: ProfileSpace):
        profile = data.draw(profiles(space))
        for player in space.players:
            assert move(profile, player, profile[player]) == profile

    @given(data=st.data(), space=profile_spaces())
    @settings(max_examples=50, deadline=None)
    def test_move_isolation(self, data, space: ProfileSpace):
        profile = data.draw(profiles(space))
        player = data.draw(st.sampled_from(space.players))
        value = data.draw(st.sampled_from(space.domain(player)))
        moved = move(profile, player, value)
        assert moved[player] == value
        for other in space.players:
            if other != player:
                assert moved[other] == profile[other]
