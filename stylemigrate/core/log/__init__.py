"""Logging micro API for style-migrate."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
