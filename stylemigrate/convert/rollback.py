"""Unified to legacy style document conversion (rollback).

Resolves each component's token references and rebuilds the legacy shape:
an inline `style` map, `position`/`horizontalPosition` enums, `x`/`y`
offsets and `containerStyle` constraints. Classified style values survive a
migrate/rollback round trip; property grouping and order may differ.
"""

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from stylemigrate.convert.lib import seed_design_tokens
from stylemigrate.core import get_logger
from stylemigrate.positioning import split_region
from stylemigrate.tokens import (
    LEGACY_COMPONENT_FIELDS,
    UNIFIED_VERSION,
    DesignTokenTable,
    LegacyComponent,
    LegacyConfig,
    PageTypeConfig,
    StyleCategory,
    UnifiedComponent,
    UnifiedConfig,
)

logger = get_logger("migration.rollback")


def _read_components(page_type: str, components: Any) -> list[UnifiedComponent]:
    if components is None:
        return []
    if not isinstance(components, list):
        logger.warning(
            f"Ignoring components of page type {page_type!r}: "
            f"expected a list, got {type(components).__name__}"
        )
        return []

    result: list[UnifiedComponent] = []
    for index, component in enumerate(components):
        try:
            result.append(UnifiedComponent.model_validate(component))
        except ValidationError as e:
            logger.warning(
                f"Dropping invalid component {index} of page type {page_type!r}: {e}"
            )
    return result


def coerce_unified_config(value: Any) -> UnifiedConfig | None:
    """Return value as a UnifiedConfig, or None when it cannot be read.

    Mappings are read one entry at a time: an invalid token, page or
    component is dropped with a warning and the rest of the document is
    kept. References to dropped tokens stay in place and no longer resolve.

    Args:
        value: UnifiedConfig model or unified document mapping.

    Returns:
        UnifiedConfig | None: The model, or None for non-mapping input.
    """
    if isinstance(value, UnifiedConfig):
        return value
    if not isinstance(value, Mapping):
        if value is not None:
            logger.warning(f"Expected a unified config, got {type(value).__name__}")
        return None

    raw_pages = value.get("pageTypes")
    if raw_pages is not None and not isinstance(raw_pages, Mapping):
        logger.warning(
            f"Ignoring pageTypes: expected an object, got {type(raw_pages).__name__}"
        )
        raw_pages = None

    page_types: dict[str, PageTypeConfig] = {}
    for page_type, page in (raw_pages or {}).items():
        page_type = str(page_type)
        if not isinstance(page, Mapping):
            logger.warning(
                f"Skipping page type {page_type!r}: expected an object, "
                f"got {type(page).__name__}"
            )
            continue
        page_types[page_type] = PageTypeConfig(
            background=copy.deepcopy(page.get("background")),
            components=_read_components(page_type, page.get("components")),
        )

    version = value.get("version")
    return UnifiedConfig(
        version=version if isinstance(version, str) else UNIFIED_VERSION,
        design_tokens=seed_design_tokens(value),
        page_types=page_types,
    )


def component_to_legacy(
    component: UnifiedComponent, tokens: DesignTokenTable
) -> LegacyComponent:
    """Rebuild a legacy component from a unified component.

    A reference that does not resolve omits that category only.

    Args:
        component: Unified component to convert.
        tokens: Token table the component's references point into.

    Returns:
        LegacyComponent: The rebuilt legacy component.
    """
    legacy: LegacyComponent = {"id": component.id, "type": component.type}
    if component.content is not None:
        legacy["content"] = copy.deepcopy(component.content)

    style: dict[str, Any] = {}
    for category, token_id in (
        (StyleCategory.TYPOGRAPHY, component.typography),
        (StyleCategory.CONTAINER, component.container),
    ):
        if token_id is None:
            continue
        token = tokens.get_token(category, token_id)
        if token is None:
            logger.warning(
                f"Component {component.id!r} references missing "
                f"{category.value} token {token_id!r}"
            )
            continue
        style.update(copy.deepcopy(token))
    legacy["style"] = style

    if component.positioning is not None:
        token = tokens.get_token(StyleCategory.POSITIONING, component.positioning)
        if token is None:
            logger.warning(
                f"Component {component.id!r} references missing "
                f"positioning token {component.positioning!r}"
            )
        else:
            vertical, horizontal = split_region(token.region)
            legacy["position"] = vertical
            legacy["horizontalPosition"] = horizontal
            legacy["x"] = token.offset.x
            legacy["y"] = token.offset.y
            if token.constraints is not None and not token.constraints.is_empty():
                legacy["containerStyle"] = token.constraints.model_dump(
                    by_alias=True, exclude_none=True
                )

    for key, value in component.custom_fields.items():
        if key in LEGACY_COMPONENT_FIELDS:
            continue
        legacy[key] = copy.deepcopy(value)

    return legacy


def convert_unified_to_legacy(
    unified_config: UnifiedConfig | Mapping[str, Any] | None,
) -> LegacyConfig:
    """Convert a unified document back to the legacy shape.

    Args:
        unified_config: UnifiedConfig model or its document mapping.

    Returns:
        LegacyConfig: `{page_type: {"background"?, "components": [...]}}`;
        empty when the input cannot be read as a unified document.

    Example:
        >>> from stylemigrate.convert import convert_legacy_to_unified
        >>> unified = convert_legacy_to_unified(
        ...     {"cover": {"components": [{"id": "t", "style": {"color": "red"}}]}}
        ... )
        >>> convert_unified_to_legacy(unified)["cover"]["components"][0]["style"]
        {'color': 'red'}
    """
    config = coerce_unified_config(unified_config)
    if config is None:
        return {}

    legacy: LegacyConfig = {}
    for page_type, page in config.page_types.items():
        page_doc: dict[str, Any] = {}
        if page.background is not None:
            page_doc["background"] = copy.deepcopy(page.background)
        page_doc["components"] = [
            component_to_legacy(component, config.design_tokens)
            for component in page.components
        ]
        legacy[page_type] = page_doc

    return legacy


__all__ = [
    "coerce_unified_config",
    "component_to_legacy",
    "convert_unified_to_legacy",
]
