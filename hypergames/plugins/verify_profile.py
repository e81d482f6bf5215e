"""Profile verification plugin - checks if a pure profile is a Nash equilibrium."""
from __future__ import annotations

from collections.abc import Mapping

from hypergames.config import PluginConfig
from hypergames.core.analysis_helpers import describe_deviation, describe_profile
from hypergames.core.profiles import Profile
from hypergames.core.registry import AnalysisResult
from hypergames.core.strategies import IncompleteProfile
from hypergames.models import AnyGame, HypergraphicalGame, IncompleteGame, NormalFormGame


class VerifyProfilePlugin:
    """Verifies if a given pure profile is a Nash equilibrium."""

    name = "Verify Profile"
    description = "Check if a candidate profile is a Nash equilibrium"
    applicable_to: tuple[str, ...] = ("normal", "hypergraphical", "incomplete")
    continuous = False  # Only runs when explicitly triggered with config

    def can_run(self, game: AnyGame) -> bool:  # noqa: D401 - interface parity
        return isinstance(game, (NormalFormGame, HypergraphicalGame, IncompleteGame))

    def run(self, game: AnyGame, config: dict | None = None) -> AnalysisResult:
        if not config or "profile" not in config:
            msg = "Profile verification requires a 'profile' in config"
            raise ValueError(msg)

        profile = self._coerce_profile(game, config["profile"])
        deviations = game.improving_deviations(profile)
        reported = deviations[: PluginConfig.MAX_REPORTED_DEVIATIONS]

        details = {
            "is_equilibrium": not deviations,
            "profile": describe_profile(profile),
            "deviation_count": len(deviations),
            "deviations": [describe_deviation(d) for d in reported],
        }
        summary = self.summarize(AnalysisResult(summary="", details=details))
        return AnalysisResult(summary=summary, details=details)

    def summarize(self, result: AnalysisResult) -> str:  # noqa: D401
        if result.details.get("is_equilibrium"):
            return "Profile is a Nash equilibrium"
        count = result.details.get("deviation_count", 0)
        noun = "deviation" if count == 1 else "deviations"
        return f"Not an equilibrium ({count} improving {noun})"

    def _coerce_profile(
        self, game: AnyGame, candidate: object
    ) -> Profile | IncompleteProfile:
        """Accept ready-made profiles or plain ``{player: action}`` mappings.

        Incomplete games take ``{player: {signal: action}}``.
        """
        if isinstance(candidate, (Profile, IncompleteProfile)):
            return candidate
        if not isinstance(candidate, Mapping):
            msg = f"Unsupported profile type: {type(candidate).__name__}"
            raise ValueError(msg)
        if isinstance(game, IncompleteGame):
            return game.profile(candidate)
        return game.actions.profile(candidate)


PLUGINS = (VerifyProfilePlugin(),)
