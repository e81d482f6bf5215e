"""Pure Nash cross-check powered by Gambit/pygambit."""
from __future__ import annotations

import importlib.util
import logging
import operator
from typing import TYPE_CHECKING

from hypergames.config import PluginConfig
from hypergames.core.analysis_helpers import describe_profile
from hypergames.core.profiles import Profile
from hypergames.core.registry import AnalysisResult
from hypergames.models import AnyGame, NormalFormGame

if TYPE_CHECKING:
    import pygambit as gbt

PYGAMBIT_AVAILABLE = importlib.util.find_spec("pygambit") is not None
if PYGAMBIT_AVAILABLE:
    import pygambit as gbt

    from hypergames.core.gambit_utils import normal_form_to_gambit
else:  # pragma: no cover
    gbt = None

logger = logging.getLogger(__name__)


class GambitPureNashPlugin:
    """Computes pure equilibria with Gambit and compares them to enumeration."""

    name = "Gambit Pure Nash"
    description = "Cross-checks pure Nash equilibria with Gambit's enumpure solver"
    applicable_to: tuple[str, ...] = ("normal",)
    continuous = False

    def can_run(self, game: AnyGame) -> bool:  # noqa: D401 - interface parity
        if not PYGAMBIT_AVAILABLE or not isinstance(game, NormalFormGame):
            return False
        if game.num_profiles > PluginConfig.GAMBIT_MAX_PROFILES:
            return False
        # Gambit maximises real payoffs, so only the usual order is supported
        if not all(game.preorder(player) is operator.le for player in game.players):
            return False
        # Strategy labels are mapped back to actions by their string form
        if len({str(p) for p in game.players}) != len(game.players):
            return False
        return all(
            len({str(a) for a in domain}) == len(domain) for domain in game.actions.domains
        )

    def run(self, game: AnyGame, config: dict | None = None) -> AnalysisResult:
        if not PYGAMBIT_AVAILABLE:
            msg = "pygambit is not installed; install pygambit to run this analysis"
            raise RuntimeError(msg)
        if not self.can_run(game):
            msg = "Gambit cross-check requires a small normal form game with real payoffs"
            raise ValueError(msg)

        gambit_game, labels = normal_form_to_gambit(game)
        result = gbt.nash.enumpure_solve(gambit_game)
        equilibria = [self._to_profile(game, labels, eq) for eq in result.equilibria]

        enumerated = set(game.pure_equilibria())
        agrees = set(equilibria) == enumerated
        if not agrees:
            logger.warning(
                "Gambit found %d pure equilibria on %s, enumeration found %d",
                len(equilibria),
                game.id,
                len(enumerated),
            )

        details = {
            "equilibria": [describe_profile(profile) for profile in equilibria],
            "solver": "gambit-enumpure",
            "agrees_with_enumeration": agrees,
        }
        return AnalysisResult(
            summary=self.summarize(AnalysisResult(summary="", details=details)),
            details=details,
        )

    def summarize(self, result: AnalysisResult) -> str:  # noqa: D401
        count = len(result.details.get("equilibria", []))
        noun = "equilibrium" if count == 1 else "equilibria"
        suffix = "" if result.details.get("agrees_with_enumeration", True) else " (mismatch)"
        return f"Gambit: {count} pure Nash {noun}{suffix}"

    def _to_profile(self, game: NormalFormGame, labels, eq) -> Profile:
        player_index = {str(player): k for k, player in enumerate(game.players)}
        entries = list(game.actions.domains[k][0] for k in range(len(game.players)))
        for strategy, probability in eq:
            if float(probability) > 0.5:
                k = player_index[strategy.player.label]
                entries[k] = labels[k][strategy.label]
        return game.actions.profile(dict(zip(game.players, entries, strict=True)))


PLUGINS = (GambitPureNashPlugin(),)
