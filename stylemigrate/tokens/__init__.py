"""Design-token models for unified style documents."""

from stylemigrate.tokens.lib import (
    DOCUMENT_METADATA_KEYS,
    LEGACY_COMPONENT_FIELDS,
    REFERENCE_FIELDS,
    UNIFIED_VERSION,
    ContainerToken,
    DesignTokenTable,
    GridRegion,
    HorizontalPosition,
    LegacyComponent,
    LegacyConfig,
    PageTypeConfig,
    PositionConstraints,
    PositioningToken,
    PositionOffset,
    StyleCategory,
    TypographyToken,
    UnifiedComponent,
    UnifiedConfig,
    VerticalPosition,
    export_json_schema,
)

__all__ = [
    # Constants
    "UNIFIED_VERSION",
    "LEGACY_COMPONENT_FIELDS",
    "DOCUMENT_METADATA_KEYS",
    "REFERENCE_FIELDS",
    # Aliases
    "TypographyToken",
    "ContainerToken",
    "LegacyComponent",
    "LegacyConfig",
    # Enums
    "StyleCategory",
    "VerticalPosition",
    "HorizontalPosition",
    "GridRegion",
    # Models
    "PositionOffset",
    "PositionConstraints",
    "PositioningToken",
    "DesignTokenTable",
    "UnifiedComponent",
    "PageTypeConfig",
    "UnifiedConfig",
    "export_json_schema",
]
