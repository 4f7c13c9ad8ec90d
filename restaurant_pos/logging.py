"""Loguru logging configuration.

Call setup_logging() once at application startup. All other modules simply
do `from loguru import logger` and log normally.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from restaurant_pos.config import LOG_LEVEL, LOG_PATH


def setup_logging(level: str = LOG_LEVEL, path: str | Path = LOG_PATH) -> None:
    """Route log records to a rotating file sink.

    The default stderr handler is removed so log output never draws over the
    terminal UI.
    """
    logger.remove()

    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level=level,
        rotation="1 day",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
    )
