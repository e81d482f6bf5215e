"""Conversion registry for game model transformations.

Conversions are edges between ``format_name`` values; the registry finds the
shortest chain of edges, so ``incomplete -> normal`` is served by
``incomplete -> hypergraphical -> normal``.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hypergames.core.errors import conversion_failed
from hypergames.core.types import GameFormat

if TYPE_CHECKING:
    from hypergames.models import AnyGame

logger = logging.getLogger(__name__)


@dataclass
class ConversionCheck:
    """Result of checking if a conversion is possible."""

    possible: bool
    warnings: list[str] = field(default_factory=list)
    blockers: list[str] = field(default_factory=list)


@dataclass
class Conversion:
    """A registered conversion between game formats."""

    name: str
    source_format: GameFormat
    target_format: GameFormat
    can_convert: Callable[[AnyGame], ConversionCheck]
    convert: Callable[[AnyGame], AnyGame]


class ConversionRegistry:
    """Registry for game format conversions."""

    def __init__(self) -> None:
        self._edges: dict[str, dict[str, Conversion]] = {}

    def register(self, conversion: Conversion) -> None:
        """Register a conversion, replacing any previous one for the same edge."""
        targets = self._edges.setdefault(conversion.source_format, {})
        targets[conversion.target_format] = conversion

    def formats(self) -> set[str]:
        """Every format that appears at either end of a conversion."""
        found = set(self._edges)
        for targets in self._edges.values():
            found.update(targets)
        return found

    def path(self, source_format: str, target_format: str) -> list[Conversion] | None:
        """Shortest chain of conversions (breadth-first), or None if unreachable.

        Converting a format to itself takes the empty chain.
        """
        queue: deque[tuple[str, list[Conversion]]] = deque([(source_format, [])])
        visited = {source_format}
        while queue:
            current, chain = queue.popleft()
            if current == target_format:
                return chain
            for target, conversion in self._edges.get(current, {}).items():
                if target not in visited:
                    visited.add(target)
                    queue.append((target, [*chain, conversion]))
        return None

    def check(self, game: AnyGame, target_format: str, *, quick: bool = False) -> ConversionCheck:
        """Check if a game can be converted to target format.

        Args:
            game: The game to convert.
            target_format: Target format name.
            quick: If True, only check the first step of the chain without
                   performing intermediate conversions.
        """
        if game.format_name == target_format:
            return ConversionCheck(possible=True, warnings=["Already in target format"])

        chain = self.path(game.format_name, target_format)
        if not chain:
            return ConversionCheck(
                possible=False,
                blockers=[f"No conversion path from {game.format_name} to {target_format}"],
            )

        steps = chain[:1] if quick else chain
        warnings: list[str] = []
        current = game
        for position, conversion in enumerate(steps, start=1):
            result = conversion.can_convert(current)
            if not result.possible:
                return ConversionCheck(possible=False, warnings=warnings, blockers=result.blockers)
            warnings.extend(result.warnings)
            # Later steps are checked against the converted game
            if position < len(steps):
                current = conversion.convert(current)

        if len(chain) > 1:
            warnings.insert(0, f"Requires {len(chain)}-step conversion")
        return ConversionCheck(possible=True, warnings=warnings)

    def convert(self, game: AnyGame, target_format: str) -> AnyGame:
        """Convert a game to target format, following the shortest chain.

        Raises:
            ConversionError: If no chain exists or a step is blocked.
        """
        chain = self.path(game.format_name, target_format)
        if chain is None:
            raise conversion_failed(game.format_name, target_format, ["no conversion path"])

        current = game
        for conversion in chain:
            result = conversion.can_convert(current)
            if not result.possible:
                raise conversion_failed(
                    conversion.source_format, conversion.target_format, result.blockers
                )
            for warning in result.warnings:
                logger.info("%s on %s: %s", conversion.name, current.id, warning)
            current = conversion.convert(current)
            logger.debug("Applied %s to %s", conversion.name, game.id)
        return current

    def available_conversions(
        self, game: AnyGame, *, quick: bool = True
    ) -> dict[str, ConversionCheck]:
        """Checks for every format reachable from the game's format."""
        return {
            target: self.check(game, target, quick=quick)
            for target in sorted(self.formats() - {game.format_name})
            if self.path(game.format_name, target)
        }
