"""Public migration entry points.

Thin, total wrappers over the converters and the validator. None of these
functions raise: malformed input degrades to the documented defaults and
unexpected failures are logged and replaced by a safe result.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stylemigrate.convert import (
    coerce_unified_config,
    convert_legacy_to_unified,
    convert_unified_to_legacy,
    empty_unified_config,
)
from stylemigrate.core import get_logger
from stylemigrate.registry import build_tokens
from stylemigrate.tokens import (
    UNIFIED_VERSION,
    LegacyConfig,
    StyleCategory,
    UnifiedConfig,
)
from stylemigrate.validation import ValidationResult, validate_compatibility

logger = get_logger("migration")


@dataclass
class MigrationResult:
    """Outcome of migrate_validated.

    Attributes:
        success: True when a unified config was produced.
        config: The unified config, None when validation blocked the migration.
        validation: Compatibility report of the input document.
        from_version: `version` of the input document, if it declared one.
    """

    success: bool
    config: UnifiedConfig | None
    validation: ValidationResult
    from_version: str | None = None


def is_unified_config(document: Any) -> bool:
    """Check if a document is already in the unified format.

    A unified document declares version "2.0" and carries both
    `designTokens` and `pageTypes` objects.
    """
    if isinstance(document, UnifiedConfig):
        return True
    if not isinstance(document, Mapping):
        return False
    return (
        document.get("version") == UNIFIED_VERSION
        and isinstance(document.get("designTokens"), Mapping)
        and isinstance(document.get("pageTypes"), Mapping)
    )


def needs_migration(document: Any) -> bool:
    """Check if a document is a legacy document that should be migrated."""
    return isinstance(document, Mapping) and not is_unified_config(document)


def _document_version(document: Any) -> str | None:
    if not isinstance(document, Mapping):
        return None
    version = document.get("version")
    return version if isinstance(version, str) else None


def _resolve_references(config: UnifiedConfig) -> UnifiedConfig:
    """Clear dangling style references and repoint dangling positioning.

    A component whose positioning reference does not resolve gets a fresh
    center-center positioning token, so every component stays placed.
    """
    tokens = config.design_tokens
    for page_type, page in config.page_types.items():
        for index, component in enumerate(page.components):
            for category, name in (
                (StyleCategory.TYPOGRAPHY, "typography"),
                (StyleCategory.CONTAINER, "container"),
            ):
                ref = getattr(component, name)
                if ref is None or tokens.get_token(category, ref) is not None:
                    continue
                logger.warning(
                    f"Component {component.id!r} references missing "
                    f"{name} token {ref!r}, clearing it"
                )
                setattr(component, name, None)

            positioning = component.positioning
            if tokens.get_token(StyleCategory.POSITIONING, positioning) is not None:
                continue
            bundle = build_tokens({"id": component.id}, page_type, index, tokens)
            bundle.merge_into(tokens)
            logger.warning(
                f"Component {component.id!r} has no resolvable positioning, "
                f"using {bundle.positioning_id!r}"
            )
            component.positioning = bundle.positioning_id
    return config


def migrate(legacy_config: Any) -> UnifiedConfig:
    """Migrate a legacy style document to the unified format.

    Documents that are already unified are returned as a validated copy
    instead of being migrated twice. Invalid tokens and components in them
    are dropped one by one; references left dangling are cleared, and a
    component without a resolvable positioning token gets a centered one.

    Args:
        legacy_config: Legacy (or already unified) document.

    Returns:
        UnifiedConfig: The unified document. The minimal empty document is
        returned for None, malformed input or any internal failure.

    Example:
        >>> config = migrate({"cover": {"components": [{"id": "t", "type": "text"}]}})
        >>> config.page_types["cover"].components[0].positioning
        't-positioning-0'
    """
    try:
        if isinstance(legacy_config, UnifiedConfig):
            return _resolve_references(legacy_config.model_copy(deep=True))
        if is_unified_config(legacy_config):
            logger.debug("Document is already unified, skipping migration")
            config = coerce_unified_config(copy.deepcopy(legacy_config))
            return _resolve_references(config)
        return convert_legacy_to_unified(legacy_config)
    except Exception as e:
        logger.error(f"Migration failed, returning empty config: {e}")
    return empty_unified_config()


def rollback(unified_config: Any) -> LegacyConfig:
    """Convert a unified document back to the legacy format.

    Args:
        unified_config: UnifiedConfig model or unified document mapping.

    Returns:
        LegacyConfig: The legacy document; empty for unreadable input or
        any internal failure.
    """
    try:
        return convert_unified_to_legacy(unified_config)
    except Exception as e:
        logger.error(f"Rollback failed, returning empty config: {e}")
        return {}


def migrate_validated(legacy_config: Any) -> MigrationResult:
    """Validate a legacy document and migrate it only if it is valid.

    Already unified documents are not validated as legacy documents; they
    succeed with an empty report.

    Args:
        legacy_config: Legacy document to migrate.

    Returns:
        MigrationResult: The report, and the unified config on success.

    Example:
        >>> result = migrate_validated({"cover": {"components": [{"id": "t"}]}})
        >>> result.success, result.validation.errors
        (False, ['Missing component type'])
    """
    from_version = _document_version(legacy_config)

    if is_unified_config(legacy_config):
        return MigrationResult(
            success=True,
            config=migrate(legacy_config),
            validation=ValidationResult(),
            from_version=from_version or UNIFIED_VERSION,
        )

    validation = validate_compatibility(legacy_config)
    if not validation.is_valid:
        logger.warning(f"Migration blocked: {', '.join(validation.errors)}")
        return MigrationResult(
            success=False,
            config=None,
            validation=validation,
            from_version=from_version,
        )

    return MigrationResult(
        success=True,
        config=migrate(legacy_config),
        validation=validation,
        from_version=from_version,
    )


# Backward compatible name
migrate_to_unified_system = migrate


__all__ = [
    "MigrationResult",
    "is_unified_config",
    "needs_migration",
    "migrate",
    "migrate_to_unified_system",
    "migrate_validated",
    "rollback",
    "validate_compatibility",
]
