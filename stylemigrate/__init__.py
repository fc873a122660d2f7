"""style-migrate: legacy inline styles to unified design tokens and back."""

from stylemigrate.classify import classify, separate_style_categories
from stylemigrate.migration import (
    MigrationResult,
    is_unified_config,
    migrate,
    migrate_to_unified_system,
    migrate_validated,
    needs_migration,
    rollback,
    validate_compatibility,
)
from stylemigrate.positioning import extract_positioning, resolve_region
from stylemigrate.tokens import (
    DesignTokenTable,
    GridRegion,
    PositioningToken,
    StyleCategory,
    UnifiedComponent,
    UnifiedConfig,
    export_json_schema,
)
from stylemigrate.validation import ValidationIssue, ValidationResult

__all__ = [
    # Migration
    "migrate",
    "migrate_to_unified_system",
    "migrate_validated",
    "rollback",
    "is_unified_config",
    "needs_migration",
    "MigrationResult",
    # Validation
    "validate_compatibility",
    "ValidationResult",
    "ValidationIssue",
    # Classification and positioning
    "classify",
    "separate_style_categories",
    "resolve_region",
    "extract_positioning",
    # Models
    "StyleCategory",
    "GridRegion",
    "PositioningToken",
    "DesignTokenTable",
    "UnifiedComponent",
    "UnifiedConfig",
    "export_json_schema",
]
