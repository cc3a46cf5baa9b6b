"""
Engine configuration.

Flags are read from environment variables so they can be toggled without code
changes, e.g. ``BENTO_USE_FRONTIER_MOVEGEN=1 pytest``.
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class EngineConfig:
    """
    Runtime options for the engine.

    Attributes:
        movegen_debug: Log move-search timings at INFO instead of DEBUG
        use_frontier_movegen: Anchor candidate placements on frontier cells
            instead of scanning every board position
        log_level: Level name used by ``setup_logging`` callers
    """

    movegen_debug: bool = False
    use_frontier_movegen: bool = False
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a config from ``BENTO_*`` environment variables."""
        if environ is None:
            environ = os.environ
        return cls(
            movegen_debug=_env_flag(environ, "BENTO_MOVEGEN_DEBUG"),
            use_frontier_movegen=_env_flag(environ, "BENTO_USE_FRONTIER_MOVEGEN"),
            log_level=environ.get("BENTO_LOG_LEVEL", "INFO") or "INFO",
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EngineConfig":
        """Create config from dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered_dict)


def load_config() -> EngineConfig:
    """Read the current environment."""
    return EngineConfig.from_env()
