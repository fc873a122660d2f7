"""Conversion between legacy and unified style documents."""

from .lib import (
    DEFAULT_COMPONENT_TYPE,
    convert_component,
    convert_legacy_to_unified,
    empty_unified_config,
    seed_design_tokens,
)
from .rollback import (
    coerce_unified_config,
    component_to_legacy,
    convert_unified_to_legacy,
)

__all__ = [
    # Legacy -> unified
    "DEFAULT_COMPONENT_TYPE",
    "empty_unified_config",
    "seed_design_tokens",
    "convert_component",
    "convert_legacy_to_unified",
    # Unified -> legacy
    "coerce_unified_config",
    "component_to_legacy",
    "convert_unified_to_legacy",
]
