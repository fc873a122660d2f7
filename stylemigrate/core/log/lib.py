"""Core logging implementation for style-migrate."""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "setup_logging"]


def setup_logging(level: Optional[int | str] = None, stream=sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level. Read from STYLE_MIGRATE_LOG_LEVEL when None.
        stream: Output stream.
    """
    if level is None:
        from stylemigrate.config import get_log_level

        level = get_log_level()

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or "style-migrate")
