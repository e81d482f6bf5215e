"""Conversion from hypergraphical games to normal form games."""
from __future__ import annotations

from hypergames.config import EnumerationConfig
from hypergames.conversions.registry import Conversion, ConversionCheck
from hypergames.models.hypergraphical import HypergraphicalGame
from hypergames.models.normal_form import NormalFormGame


def check_hypergraphical_to_nfg(game) -> ConversionCheck:
    """Check if a game can be flattened into normal form."""
    if not isinstance(game, HypergraphicalGame):
        return ConversionCheck(possible=False, blockers=["Not a hypergraphical game"])

    warnings = ["Local game structure is folded into global utilities"]
    if game.num_profiles > EnumerationConfig.MAX_PROFILES:
        warnings.append(
            f"Large game: {game.num_profiles:,} action profiles - "
            "equilibrium enumeration will be blocked"
        )
    return ConversionCheck(possible=True, warnings=warnings)


def to_normal_form(game: HypergraphicalGame) -> NormalFormGame:
    """Normal form game whose utility is the hypergraphical global utility.

    Each player's outcome preorder is the valuation preorder of its
    evaluation structure.
    """
    return NormalFormGame(
        id=f"{game.id}-nfg",
        title=game.title,
        description=game.description,
        actions=game.actions,
        utility=game.global_utility,
        outcome_le={player: game.evaluation_of(player).valuation_le for player in game.players},
        tags=[*game.tags, "converted", "from-hypergraphical"],
    )


CONVERSIONS = (
    Conversion(
        name="Hypergraphical to NFG",
        source_format="hypergraphical",
        target_format="normal",
        can_convert=check_hypergraphical_to_nfg,
        convert=to_normal_form,
    ),
)
