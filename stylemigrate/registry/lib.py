"""Design-token registry construction for single legacy components.

Each legacy component yields up to three tokens: typography and container
tokens when its inline style has properties in those buckets, and a
positioning token always. Token ids are readable, deterministic keys of the
form "{component id}-{category}-{index}" so migrated documents diff cleanly.
"""

import copy
from collections.abc import Container, Mapping
from dataclasses import dataclass, field
from typing import Any

from stylemigrate.classify import separate_style_categories
from stylemigrate.core import get_logger
from stylemigrate.positioning import extract_positioning
from stylemigrate.tokens import DesignTokenTable, StyleCategory

logger = get_logger("migration.registry")

DEFAULT_ID_PREFIX = "component"


@dataclass
class TokenBundle:
    """Tokens generated for one component and the ids that reference them.

    Attributes:
        positioning_id: Id of the positioning token (always present).
        tokens: Partial token table holding this component's tokens.
        typography_id: Id of the typography token, if one was emitted.
        container_id: Id of the container token, if one was emitted.
    """

    positioning_id: str
    tokens: DesignTokenTable = field(default_factory=DesignTokenTable)
    typography_id: str | None = None
    container_id: str | None = None

    def references(self) -> dict[str, str]:
        """Reference fields to set on the unified component."""
        refs = {
            "typography": self.typography_id,
            "container": self.container_id,
            "positioning": self.positioning_id,
        }
        return {name: token_id for name, token_id in refs.items() if token_id}

    def merge_into(self, table: DesignTokenTable) -> None:
        """Merge this bundle's token fragments into an accumulating table."""
        table.merge(self.tokens)


def make_token_id(component_id: Any, category: StyleCategory, index: int) -> str:
    """Build the base token id for a component.

    Example:
        >>> make_token_id("cover-title", StyleCategory.TYPOGRAPHY, 0)
        'cover-title-typography-0'
        >>> make_token_id(None, StyleCategory.POSITIONING, 3)
        'component-positioning-3'
    """
    prefix = DEFAULT_ID_PREFIX if component_id in (None, "") else str(component_id)
    return f"{prefix}-{StyleCategory(category).value}-{index}"


def _unique_id(base: str, page_type: str, taken: Container[str]) -> str:
    """Return base, or a page-type qualified variant when base is taken."""
    if base not in taken:
        return base

    qualified = f"{page_type}-{base}"
    candidate = qualified
    suffix = 2
    while candidate in taken:
        candidate = f"{qualified}-{suffix}"
        suffix += 1

    logger.debug(f"Token id {base!r} already taken, using {candidate!r}")
    return candidate


def build_tokens(
    component: Mapping[str, Any] | None,
    page_type: str,
    index: int,
    existing: DesignTokenTable | None = None,
    offset_reset_threshold: int | None = None,
) -> TokenBundle:
    """Build the design tokens for one legacy component.

    Args:
        component: Legacy component mapping.
        page_type: Page type the component belongs to (cover, page, ...).
        index: Position of the component in its page's component list.
        existing: Tokens already registered in this conversion run. Ids that
            collide with it are qualified with the page type.
        offset_reset_threshold: Passed through to extract_positioning.

    Returns:
        TokenBundle: The component's tokens and reference ids.

    Example:
        >>> component = {"id": "title", "style": {"color": "#fff"}}
        >>> bundle = build_tokens(component, "cover", 0)
        >>> bundle.references()
        {'typography': 'title-typography-0', 'positioning': 'title-positioning-0'}
    """
    if not isinstance(component, Mapping):
        component = {}

    existing = existing if existing is not None else DesignTokenTable()
    component_id = component.get("id")
    separated = separate_style_categories(component.get("style"))
    bundle = TokenBundle(positioning_id="")

    if separated.typography:
        bundle.typography_id = _unique_id(
            make_token_id(component_id, StyleCategory.TYPOGRAPHY, index),
            page_type,
            existing.typography,
        )
        bundle.tokens.typography[bundle.typography_id] = copy.deepcopy(
            separated.typography
        )

    if separated.container:
        bundle.container_id = _unique_id(
            make_token_id(component_id, StyleCategory.CONTAINER, index),
            page_type,
            existing.containers,
        )
        bundle.tokens.containers[bundle.container_id] = copy.deepcopy(
            separated.container
        )

    bundle.positioning_id = _unique_id(
        make_token_id(component_id, StyleCategory.POSITIONING, index),
        page_type,
        existing.positioning,
    )
    bundle.tokens.positioning[bundle.positioning_id] = extract_positioning(
        component, offset_reset_threshold=offset_reset_threshold
    )

    return bundle


__all__ = [
    "DEFAULT_ID_PREFIX",
    "TokenBundle",
    "make_token_id",
    "build_tokens",
]
