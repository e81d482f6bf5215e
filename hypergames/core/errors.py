"""Exception types and standardized error constructors.

All errors derive from ``ValueError`` so that they surface unchanged through
pydantic validators (which wrap ``ValueError`` into ``ValidationError``).
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class GameError(ValueError):
    """Base class for contract violations detected by the library."""


class DomainError(GameError):
    """A value lies outside a player's declared domain."""


class UnknownPlayerError(GameError):
    """A player is not part of the game or profile space."""


class InfiniteDomainError(GameError):
    """A player set or domain is not a finite, materialised collection."""


class ConversionError(GameError):
    """A game cannot be converted to the requested format."""


def unknown_player(player: Any, players: Iterable[Any]) -> UnknownPlayerError:
    """Create an error for a player outside the known player set.

    Args:
        player: The offending player identifier
        players: The players that are known

    Returns:
        UnknownPlayerError with a consistent message
    """
    return UnknownPlayerError(f"Unknown player: {player!r}. Known players: {list(players)!r}")


def domain_mismatch(player: Any, value: Any, domain: Iterable[Any]) -> DomainError:
    """Create an error for a value outside a player's domain.

    Args:
        player: The player whose domain was violated
        value: The rejected value
        domain: The player's declared domain

    Returns:
        DomainError with a consistent message
    """
    return DomainError(
        f"Value {value!r} is not in the domain of player {player!r}: {list(domain)!r}"
    )


def not_finite(what: str) -> InfiniteDomainError:
    """Create an error for a lazily-produced (potentially infinite) collection."""
    return InfiniteDomainError(
        f"{what} must be a finite collection (list, tuple, set), not a lazy iterator"
    )


def conversion_failed(
    source_format: str, target_format: str, reasons: Iterable[str] = ()
) -> ConversionError:
    """Create an error for a failed format conversion.

    Args:
        source_format: The source format
        target_format: The target format that couldn't be reached
        reasons: Optional blockers explaining the failure

    Returns:
        ConversionError with a consistent message
    """
    detail = f"Cannot convert from {source_format} to {target_format}"
    reasons = list(reasons)
    if reasons:
        detail = f"{detail}: {', '.join(reasons)}"
    return ConversionError(detail)


def incompatible_plugin(plugin_name: str, game_format: str) -> GameError:
    """Create an error when a plugin can't run on a game."""
    return GameError(f"Plugin '{plugin_name}' cannot run on this game (format: {game_format})")


def safe_error_message(error: Exception) -> str:
    """Extract a safe error message from an exception.

    Library errors and ``ValueError`` carry user-facing messages; anything
    else is reduced to its type name.
    """
    if isinstance(error, ValueError):
        return str(error)
    return type(error).__name__
