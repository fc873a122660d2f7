"""Public migration entry points (migrate, validate, rollback)."""

from stylemigrate.migration.lib import (
    MigrationResult,
    is_unified_config,
    migrate,
    migrate_to_unified_system,
    migrate_validated,
    needs_migration,
    rollback,
    validate_compatibility,
)

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
