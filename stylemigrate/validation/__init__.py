"""Legacy document compatibility validation."""

from stylemigrate.validation.lib import (
    IssueType,
    ValidationIssue,
    ValidationResult,
    is_valid,
    validate_compatibility,
)

__all__ = [
    "IssueType",
    "ValidationIssue",
    "ValidationResult",
    "validate_compatibility",
    "is_valid",
]
