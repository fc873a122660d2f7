"""Legacy to unified style document conversion.

Walks every page type and component of a legacy document, registers the
design tokens of each component and assembles a UnifiedConfig whose
components reference those tokens. Custom component fields are copied
verbatim. Malformed parts of the input are skipped with a warning; the
conversion itself never raises on bad input.
"""

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from stylemigrate.config import get_offset_reset_threshold, get_preserve_tokens
from stylemigrate.core import get_logger
from stylemigrate.registry import build_tokens
from stylemigrate.tokens import (
    DOCUMENT_METADATA_KEYS,
    LEGACY_COMPONENT_FIELDS,
    REFERENCE_FIELDS,
    UNIFIED_VERSION,
    DesignTokenTable,
    PageTypeConfig,
    PositioningToken,
    StyleCategory,
    UnifiedComponent,
    UnifiedConfig,
)

logger = get_logger("migration.convert")

DEFAULT_COMPONENT_TYPE = "text"


def empty_unified_config() -> UnifiedConfig:
    """Return the minimal valid unified document (no tokens, no pages)."""
    return UnifiedConfig(version=UNIFIED_VERSION)


def seed_design_tokens(document: Mapping[str, Any]) -> DesignTokenTable:
    """Collect tokens already present in a partially migrated document.

    Documents saved halfway through a migration carry a top-level
    `designTokens` object next to their page types. Valid entries are
    copied; malformed ones are dropped with a warning.

    Args:
        document: Legacy or unified document mapping.

    Returns:
        DesignTokenTable: The carried-over tokens (empty when none).
    """
    table = DesignTokenTable()
    raw = document.get("designTokens")
    if not isinstance(raw, Mapping):
        return table

    for name, target in (
        ("typography", table.typography),
        ("containers", table.containers),
    ):
        entries = raw.get(name)
        if not isinstance(entries, Mapping):
            continue
        for token_id, token in entries.items():
            if isinstance(token_id, str) and isinstance(token, Mapping):
                target[token_id] = copy.deepcopy(dict(token))
            else:
                logger.warning(f"Dropping malformed {name} token {token_id!r}")

    entries = raw.get("positioning")
    if isinstance(entries, Mapping):
        for token_id, token in entries.items():
            if not isinstance(token_id, str):
                continue
            try:
                table.positioning[token_id] = PositioningToken.model_validate(token)
            except ValidationError as e:
                logger.warning(f"Dropping invalid positioning token {token_id!r}: {e}")

    return table


def _component_id(component: Mapping[str, Any], index: int) -> str:
    value = component.get("id")
    if value in (None, ""):
        return f"component-{index}"
    return value if isinstance(value, str) else str(value)


def _component_type(component: Mapping[str, Any]) -> str:
    value = component.get("type")
    if value in (None, ""):
        return DEFAULT_COMPONENT_TYPE
    return value if isinstance(value, str) else str(value)


def _resolves(tokens: DesignTokenTable, field_name: str, token_id: Any) -> bool:
    if not isinstance(token_id, str):
        return False
    return tokens.get_token(StyleCategory(field_name), token_id) is not None


def convert_component(
    component: Mapping[str, Any],
    page_type: str,
    index: int,
    tokens: DesignTokenTable,
    offset_reset_threshold: int | None = None,
) -> UnifiedComponent:
    """Convert one legacy component, registering its tokens in `tokens`.

    Args:
        component: Legacy component mapping.
        page_type: Page type the component belongs to.
        index: Position of the component in its page's list.
        tokens: Accumulating token table for this run (mutated).
        offset_reset_threshold: Passed through to the positioning extractor.

    Returns:
        UnifiedComponent: The component with token references.
    """
    bundle = build_tokens(
        component,
        page_type,
        index,
        existing=tokens,
        offset_reset_threshold=offset_reset_threshold,
    )
    bundle.merge_into(tokens)

    data: dict[str, Any] = {
        "id": _component_id(component, index),
        "type": _component_type(component),
    }
    if "content" in component:
        data["content"] = copy.deepcopy(component["content"])
    data.update(bundle.references())

    for key, value in component.items():
        if key in LEGACY_COMPONENT_FIELDS:
            continue
        if not isinstance(key, str):
            logger.warning(f"Dropping non-string field {key!r} on {data['id']!r}")
            continue
        if key in REFERENCE_FIELDS:
            # Already-migrated reference; keep it only when it resolves.
            if _resolves(tokens, key, value):
                data[key] = value
            else:
                logger.warning(
                    f"Component {data['id']!r} references unknown {key} "
                    f"token {value!r}, keeping generated reference"
                )
            continue
        data[key] = copy.deepcopy(value)

    return UnifiedComponent.model_validate(data)


def convert_legacy_to_unified(
    legacy_config: Mapping[str, Any] | None,
    offset_reset_threshold: int | None = None,
    preserve_tokens: bool | None = None,
) -> UnifiedConfig:
    """Convert a legacy style document to a unified design-token document.

    Every top-level key except `version` and `designTokens` is a page type
    holding a `components` list. The input is never mutated.

    Args:
        legacy_config: Legacy document, or None.
        offset_reset_threshold: x above which top-center offsets are reset.
            Read from configuration when None.
        preserve_tokens: Carry over an existing top-level `designTokens`
            object. Read from configuration when None.

    Returns:
        UnifiedConfig: The converted document; the minimal empty document
        for None or non-mapping input.

    Example:
        >>> unified = convert_legacy_to_unified({
        ...     "cover": {"components": [{"id": "t", "style": {"fontSize": "2rem"}}]}
        ... })
        >>> unified.page_types["cover"].components[0].typography
        't-typography-0'
    """
    if not isinstance(legacy_config, Mapping):
        if legacy_config is not None:
            logger.warning(
                f"Expected a legacy document object, got "
                f"{type(legacy_config).__name__}; returning empty config"
            )
        return empty_unified_config()

    threshold = get_offset_reset_threshold(offset_reset_threshold)
    if get_preserve_tokens(preserve_tokens):
        tokens = seed_design_tokens(legacy_config)
    else:
        tokens = DesignTokenTable()

    page_types: dict[str, PageTypeConfig] = {}

    for page_type, page_config in legacy_config.items():
        if page_type in DOCUMENT_METADATA_KEYS:
            continue
        page_type = str(page_type)

        if not isinstance(page_config, Mapping):
            logger.warning(
                f"Skipping page type {page_type!r}: expected an object, "
                f"got {type(page_config).__name__}"
            )
            continue

        components = page_config.get("components")
        if components is None:
            components = []
        elif not isinstance(components, list):
            logger.warning(
                f"Ignoring components of page type {page_type!r}: "
                f"expected a list, got {type(components).__name__}"
            )
            components = []

        converted: list[UnifiedComponent] = []
        for index, component in enumerate(components):
            if not isinstance(component, Mapping):
                logger.warning(
                    f"Skipping component {index} of page type {page_type!r}: "
                    f"expected an object, got {type(component).__name__}"
                )
                continue
            converted.append(
                convert_component(component, page_type, index, tokens, threshold)
            )

        page_types[page_type] = PageTypeConfig(
            background=copy.deepcopy(page_config.get("background")),
            components=converted,
        )

    logger.debug(
        f"Converted {len(page_types)} page types, "
        f"{sum(len(p.components) for p in page_types.values())} components"
    )
    return UnifiedConfig(
        version=UNIFIED_VERSION,
        design_tokens=tokens,
        page_types=page_types,
    )


__all__ = [
    "DEFAULT_COMPONENT_TYPE",
    "empty_unified_config",
    "seed_design_tokens",
    "convert_component",
    "convert_legacy_to_unified",
]
