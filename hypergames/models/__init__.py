"""Game models: normal form, hypergraphical and incomplete-information games."""

from typing import Union

from hypergames.models.hypergraphical import HypergraphicalGame, LocalGame
from hypergames.models.incomplete import IncompleteGame
from hypergames.models.normal_form import NormalFormGame

# Type alias for any game type - used across plugins and converters
AnyGame = Union[NormalFormGame, HypergraphicalGame, IncompleteGame]

__all__ = [
    "AnyGame",
    "HypergraphicalGame",
    "IncompleteGame",
    "LocalGame",
    "NormalFormGame",
]
