"""Style property classification.

Legacy inline styles mix typography, container chrome and layout
constraints in one flat map. This module assigns each property name to
exactly one bucket via a closed registry, and splits a style map into the
three buckets. Property names outside the registry are UNKNOWN and are
dropped when separating.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from stylemigrate.tokens import StyleCategory

TYPOGRAPHY_PROPERTIES: frozenset[str] = frozenset(
    {
        "fontSize",
        "fontFamily",
        "color",
        "textAlign",
        "fontWeight",
        "lineHeight",
        "textShadow",
        "textTransform",
        "letterSpacing",
    }
)

CONTAINER_PROPERTIES: frozenset[str] = frozenset(
    {
        "padding",
        "backgroundColor",
        "backdropFilter",
        "borderRadius",
        "boxShadow",
        "border",
    }
)

POSITIONING_PROPERTIES: frozenset[str] = frozenset(
    {
        "maxWidth",
        "minHeight",
        "width",
        "height",
        "position",
        "top",
        "left",
        "right",
        "bottom",
    }
)

PROPERTY_REGISTRY: dict[StyleCategory, frozenset[str]] = {
    StyleCategory.TYPOGRAPHY: TYPOGRAPHY_PROPERTIES,
    StyleCategory.CONTAINER: CONTAINER_PROPERTIES,
    StyleCategory.POSITIONING: POSITIONING_PROPERTIES,
}


def classify(property_name: str) -> StyleCategory:
    """Classify a style property name.

    Args:
        property_name: camelCase CSS property name, e.g. "fontSize".

    Returns:
        StyleCategory: The bucket the property belongs to, or UNKNOWN.

    Example:
        >>> classify("backgroundColor")
        <StyleCategory.CONTAINER: 'container'>
    """
    if not isinstance(property_name, str):
        return StyleCategory.UNKNOWN

    for category, properties in PROPERTY_REGISTRY.items():
        if property_name in properties:
            return category
    return StyleCategory.UNKNOWN


def is_typography_property(property_name: str) -> bool:
    """Check if a property belongs to the typography category."""
    return classify(property_name) is StyleCategory.TYPOGRAPHY


def is_container_property(property_name: str) -> bool:
    """Check if a property belongs to the container category."""
    return classify(property_name) is StyleCategory.CONTAINER


def is_positioning_property(property_name: str) -> bool:
    """Check if a property belongs to the positioning category."""
    return classify(property_name) is StyleCategory.POSITIONING


def get_properties_by_category(category: StyleCategory) -> frozenset[str]:
    """Get all property names registered for a category.

    Args:
        category: The category to look up.

    Returns:
        The registered names; empty for UNKNOWN.
    """
    return PROPERTY_REGISTRY.get(StyleCategory(category), frozenset())


@dataclass
class SeparatedStyles:
    """A style map split into its three recognized buckets."""

    typography: dict[str, Any] = field(default_factory=dict)
    container: dict[str, Any] = field(default_factory=dict)
    positioning: dict[str, Any] = field(default_factory=dict)

    def bucket(self, category: StyleCategory) -> dict[str, Any]:
        """Return the bucket for a category.

        Raises:
            KeyError: For StyleCategory.UNKNOWN.
        """
        buckets = {
            StyleCategory.TYPOGRAPHY: self.typography,
            StyleCategory.CONTAINER: self.container,
            StyleCategory.POSITIONING: self.positioning,
        }
        return buckets[StyleCategory(category)]

    def is_empty(self) -> bool:
        return not (self.typography or self.container or self.positioning)


def separate_style_categories(style_map: Mapping[str, Any] | None) -> SeparatedStyles:
    """Split a flat style map into typography, container and positioning.

    Values are copied unchanged; input insertion order is kept within each
    bucket. Unknown properties are dropped.

    Args:
        style_map: Legacy inline style map. None or a non-mapping value
            yields empty buckets.

    Returns:
        SeparatedStyles: The three buckets.

    Example:
        >>> styles = separate_style_categories({"fontSize": "4rem", "padding": "2rem"})
        >>> styles.typography, styles.container
        ({'fontSize': '4rem'}, {'padding': '2rem'})
    """
    separated = SeparatedStyles()
    if not isinstance(style_map, Mapping):
        return separated

    for key, value in style_map.items():
        category = classify(key)
        if category is StyleCategory.UNKNOWN:
            continue
        separated.bucket(category)[key] = value

    return separated


__all__ = [
    "TYPOGRAPHY_PROPERTIES",
    "CONTAINER_PROPERTIES",
    "POSITIONING_PROPERTIES",
    "PROPERTY_REGISTRY",
    "classify",
    "is_typography_property",
    "is_container_property",
    "is_positioning_property",
    "get_properties_by_category",
    "SeparatedStyles",
    "separate_style_categories",
]
