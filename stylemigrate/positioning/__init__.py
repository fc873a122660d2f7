"""Grid region resolution and positioning token extraction."""

from .lib import (
    CONSTRAINT_KEYS,
    HORIZONTAL_SYNONYMS,
    REGION_RULES,
    VERTICAL_SYNONYMS,
    PositionSignals,
    RegionRule,
    extract_positioning,
    match_region_rule,
    normalize_horizontal,
    normalize_vertical,
    resolve_region,
    split_region,
)

__all__ = [
    # Normalization
    "VERTICAL_SYNONYMS",
    "HORIZONTAL_SYNONYMS",
    "normalize_vertical",
    "normalize_horizontal",
    # Region rules
    "PositionSignals",
    "RegionRule",
    "REGION_RULES",
    "match_region_rule",
    "resolve_region",
    "split_region",
    # Extraction
    "CONSTRAINT_KEYS",
    "extract_positioning",
]
