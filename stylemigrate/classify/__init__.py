"""Style property classification and separation."""

from .lib import (
    CONTAINER_PROPERTIES,
    POSITIONING_PROPERTIES,
    PROPERTY_REGISTRY,
    TYPOGRAPHY_PROPERTIES,
    SeparatedStyles,
    classify,
    get_properties_by_category,
    is_container_property,
    is_positioning_property,
    is_typography_property,
    separate_style_categories,
)

__all__ = [
    # Registry
    "TYPOGRAPHY_PROPERTIES",
    "CONTAINER_PROPERTIES",
    "POSITIONING_PROPERTIES",
    "PROPERTY_REGISTRY",
    # Classification
    "classify",
    "is_typography_property",
    "is_container_property",
    "is_positioning_property",
    "get_properties_by_category",
    # Separation
    "SeparatedStyles",
    "separate_style_categories",
]
