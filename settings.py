"""
Engine configuration using Pydantic Settings.

Values can be overridden through environment variables:
- SPE_SOLVER_QUEUE_STRATEGY=lazy
- SPE_LOG_LEVEL=DEBUG
- SPE_LOG_FORMAT="%(levelname)s %(message)s"
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from errors import ConfigurationError


class QueueStrategy(str, Enum):
    """
    How the Dijkstra solver orders its frontier.

    LIVE: queue of bare vertices whose comparator reads the current path map,
          so priorities follow every relaxation without re-sorting.
    LAZY: queue of (distance, seq, vertex) snapshots; a snapshot made stale
          by a later relaxation is skipped when it reaches the front.
    """

    LIVE = "live"
    LAZY = "lazy"


class SolverSettings(BaseSettings):
    """
    Solver configuration.

    Environment variables prefixed with SPE_SOLVER_.
    """

    model_config = SettingsConfigDict(env_prefix="SPE_SOLVER_")

    queue_strategy: QueueStrategy = QueueStrategy.LIVE


class LoggingSettings(BaseSettings):
    """
    Logging configuration.

    Environment variables prefixed with SPE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SPE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class EngineSettings(BaseSettings):
    """
    Top-level settings aggregating the sections above.

        settings = get_settings()
        settings.solver.queue_strategy
        settings.log.level
    """

    model_config = SettingsConfigDict(env_prefix="SPE_")

    solver: SolverSettings = Field(default_factory=SolverSettings)
    log: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """
    Load settings once and cache them.

    Call reset_settings() first to pick up changed environment variables.
    """
    return EngineSettings()


def reset_settings() -> None:
    """Drop the cached settings (tests use this after monkeypatching env)."""
    get_settings.cache_clear()


def configure_logging(settings: Optional[EngineSettings] = None) -> int:
    """
    Apply the configured level and format to the root logger.

    Library modules only create loggers; calling this is up to the
    application embedding the engine.

    Returns:
        The numeric level that was applied.

    Raises:
        ConfigurationError: if the configured level is not a logging level name.
    """
    settings = settings or get_settings()
    level_name = settings.log.level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {settings.log.level}",
            setting_name="SPE_LOG_LEVEL",
        )
    logging.basicConfig(level=level, format=settings.log.format)
    return level
