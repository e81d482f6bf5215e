"""Centralized configuration constants for the library.

Values can be overridden from the environment so that large games can be
analysed without code changes.
"""

from __future__ import annotations

import logging
import os

# Logging
LOG_LEVEL = os.environ.get("HYPERGAMES_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging with the library's format.

    Applications embedding the library usually configure logging themselves;
    this is a convenience for scripts and notebooks.
    """
    logging.basicConfig(
        level=level if level is not None else LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


class EnumerationConfig:
    """Limits for brute-force enumeration of profiles."""

    # Equilibrium enumeration refuses to walk more profiles than this
    MAX_PROFILES = int(os.environ.get("HYPERGAMES_MAX_PROFILES", 100_000))

    # Counting stops early once the estimate exceeds this
    ESTIMATE_CAP = 10_000_000


class ConversionConfig:
    """Configuration constants for game conversions."""

    # Howson-Rosenthal builds one local game per signal profile
    LOCAL_GAME_WARNING_THRESHOLD = int(
        os.environ.get("HYPERGAMES_LOCAL_GAME_WARNING_THRESHOLD", 1_000)
    )
    LOCAL_GAME_BLOCKING_THRESHOLD = int(
        os.environ.get("HYPERGAMES_LOCAL_GAME_BLOCKING_THRESHOLD", 1_000_000)
    )


class PluginConfig:
    """Configuration constants for analysis plugins."""

    # Upper bound on deviations reported by Verify Profile
    MAX_REPORTED_DEVIATIONS = 50

    # Gambit cross-check is skipped above this many profiles
    GAMBIT_MAX_PROFILES = 10_000
