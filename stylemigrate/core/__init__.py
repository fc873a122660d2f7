"""Core utilities shared across style-migrate."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
