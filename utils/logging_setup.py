"""
Logging setup utilities for the Bento Blocks engine.

The engine modules only create module-level loggers; applications embedding
the engine call ``setup_logging`` once to decide where records go.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from bento_blocks.config import EngineConfig

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Set up logging with a console handler and an optional file handler.

    Existing root handlers are removed so repeated calls do not duplicate
    output.

    Args:
        level: Logging level, numeric or a name such as "DEBUG"
        log_file: Optional path of a log file; parent directories are created
        format_string: Optional custom format string. If None, uses default format.

    Returns:
        Path to the log file, or None when logging only to the console

    Example:
        >>> setup_logging(logging.DEBUG)
        >>> logger = logging.getLogger("bento_blocks.game")
        >>> logger.debug("Player 1 placed I1 at (0, 0)")
    """
    if isinstance(level, str):
        level = EngineConfig(log_level=level).log_level_value

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return log_file


def setup_logging_from_config(config: Optional[EngineConfig] = None,
                              log_file: Optional[Path] = None) -> Optional[Path]:
    """Configure logging at the level named by ``BENTO_LOG_LEVEL``."""
    config = config or EngineConfig.from_env()
    return setup_logging(config.log_level_value, log_file)
