"""Lightweight analysis plugin registry.

Plugins are plain objects exposing metadata and a synchronous ``run``;
:func:`hypergames.plugins.discover_plugins` registers the built-in ones.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from hypergames.models import AnyGame


class AnalysisResult(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    summary: str
    details: dict[str, Any]


@runtime_checkable
class AnalysisPlugin(Protocol):
    """Interface for analysis plugins."""

    name: str
    description: str
    applicable_to: tuple[str, ...]
    continuous: bool

    def can_run(self, game: AnyGame) -> bool:
        ...

    def run(self, game: AnyGame, config: dict | None = None) -> AnalysisResult:
        ...

    def summarize(self, result: AnalysisResult) -> str:
        ...


class Registry:
    def __init__(self) -> None:
        self._analysis: dict[str, AnalysisPlugin] = {}

    def register_analysis(self, plugin: AnalysisPlugin) -> None:
        self._analysis[plugin.name] = plugin

    def analyses(self) -> Iterable[AnalysisPlugin]:
        return self._analysis.values()

    def get_analysis(self, name: str) -> AnalysisPlugin | None:
        return self._analysis.get(name)

    def applicable(self, game: AnyGame) -> list[AnalysisPlugin]:
        """Plugins that can run on ``game`` as it is."""
        return [plugin for plugin in self._analysis.values() if plugin.can_run(game)]
