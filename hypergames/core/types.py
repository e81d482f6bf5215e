"""Shared type definitions for the library.

This module provides type aliases, TypedDict and Literal types for the
structures passed between games, conversions and plugins.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, TypedDict

# =============================================================================
# Identifiers and operators
# =============================================================================

Preorder = Callable[[Any, Any], bool]
"""``le(a, b)`` is true when ``a`` is at most as good as ``b``."""

BinaryOp = Callable[[Any, Any], Any]

GameFormat = Literal["normal", "hypergraphical", "incomplete"]


# =============================================================================
# Plugin Types
# =============================================================================


class DeviationInfo(TypedDict):
    """A strictly improving unilateral deviation, as reported by plugins."""

    player: str
    signal: str | None  # Only set for incomplete games
    action: str
    current: str
    deviation: str


class AnalysisInfo(TypedDict):
    """Information about an analysis provided by a plugin."""

    name: str
    description: str
    applicable_to: list[str]
    continuous: bool
