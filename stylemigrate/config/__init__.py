"""Centralized configuration management for style-migrate.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from stylemigrate.config import EnvVar, get_environment
    >>>
    >>> threshold = get_environment(EnvVar.OFFSET_RESET_THRESHOLD)  # int: 100
    >>> threshold = get_environment(EnvVar.OFFSET_RESET_THRESHOLD, override=250)
    >>>
    >>> for var in list_environment_variables("migration"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    logging: Log level for setup_logging
    migration: Offset reset threshold and token preservation
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    get_offset_reset_threshold,
    get_preserve_tokens,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    "get_offset_reset_threshold",
    "get_preserve_tokens",
    # Introspection
    "list_environment_variables",
]
