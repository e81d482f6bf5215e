"""Pure Nash equilibrium enumeration plugin."""
from __future__ import annotations

import logging

from hypergames.config import EnumerationConfig
from hypergames.core.analysis_helpers import describe_profile
from hypergames.core.registry import AnalysisResult
from hypergames.models import AnyGame, HypergraphicalGame, IncompleteGame, NormalFormGame

logger = logging.getLogger(__name__)


class PureNashPlugin:
    """Finds every pure-strategy Nash equilibrium by exhaustive enumeration."""

    name = "Pure Nash"
    description = "Enumerates pure-strategy Nash equilibria"
    applicable_to: tuple[str, ...] = ("normal", "hypergraphical", "incomplete")
    continuous = True

    def can_run(self, game: AnyGame) -> bool:  # noqa: D401
        return isinstance(game, (NormalFormGame, HypergraphicalGame, IncompleteGame))

    def run(self, game: AnyGame, config: dict | None = None) -> AnalysisResult:
        config = config or {}
        max_profiles = config.get("max_profiles", EnumerationConfig.MAX_PROFILES)
        profile_count = game.num_profiles

        if profile_count > max_profiles:
            logger.warning(
                "Skipping pure Nash enumeration on %s: %d profiles exceed limit %d",
                game.id,
                profile_count,
                max_profiles,
            )
            details = {
                "equilibria": [],
                "exhaustive": False,
                "profile_count": profile_count,
                "blocker": f"Too many profiles ({profile_count:,} > {max_profiles:,})",
            }
            return AnalysisResult(
                summary=self.summarize(AnalysisResult(summary="", details=details)),
                details=details,
            )

        logger.info("Enumerating %d profiles of %s", profile_count, game.id)
        equilibria = game.pure_equilibria()
        details = {
            "equilibria": [describe_profile(profile) for profile in equilibria],
            "profiles": equilibria,
            "exhaustive": True,
            "profile_count": profile_count,
        }
        return AnalysisResult(
            summary=self.summarize(AnalysisResult(summary="", details=details)),
            details=details,
        )

    def summarize(self, result: AnalysisResult) -> str:  # noqa: D401
        if "blocker" in result.details:
            return result.details["blocker"]
        count = len(result.details.get("equilibria", []))
        if count == 0:
            return "No pure Nash equilibria"
        if count == 1:
            return "1 pure Nash equilibrium"
        return f"{count} pure Nash equilibria"


PLUGINS = (PureNashPlugin(),)
