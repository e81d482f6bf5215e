"""Finite normal-form, hypergraphical and incomplete-information games.

Includes the generalized Howson-Rosenthal transformation from incomplete
games to hypergraphical games, which preserves expected utilities and pure
Nash equilibria.
"""

import logging

from hypergames.conversions.howson_rosenthal import to_hypergraphical
from hypergames.conversions.hypergraphical_nfg import to_normal_form
from hypergames.core.equilibria import Deviation
from hypergames.core.errors import (
    ConversionError,
    DomainError,
    GameError,
    InfiniteDomainError,
    UnknownPlayerError,
)
from hypergames.core.evaluation import (
    EvaluationStructure,
    expected_utility,
    possibilistic_optimistic,
    possibilistic_pessimistic,
)
from hypergames.core.profiles import Profile, ProfileSpace, move
from hypergames.core.strategies import (
    IncompleteProfile,
    bmove,
    flatten,
    project_flat,
    project_profile,
    unflatten,
)
from hypergames.models import (
    AnyGame,
    HypergraphicalGame,
    IncompleteGame,
    LocalGame,
    NormalFormGame,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AnyGame",
    "ConversionError",
    "Deviation",
    "DomainError",
    "EvaluationStructure",
    "GameError",
    "HypergraphicalGame",
    "IncompleteGame",
    "IncompleteProfile",
    "InfiniteDomainError",
    "LocalGame",
    "NormalFormGame",
    "Profile",
    "ProfileSpace",
    "UnknownPlayerError",
    "bmove",
    "expected_utility",
    "flatten",
    "move",
    "possibilistic_optimistic",
    "possibilistic_pessimistic",
    "project_flat",
    "project_profile",
    "to_hypergraphical",
    "to_normal_form",
    "unflatten",
]
