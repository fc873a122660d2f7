"""Legacy document compatibility validation.

This module checks a legacy style document for structural issues before a
migration is committed. Problems that would make a migrated component
unaddressable (missing id or type) or that the converter would have to
discard (malformed style maps) are errors; page types without components
are warnings and never block a migration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from stylemigrate.core import get_logger
from stylemigrate.tokens import DOCUMENT_METADATA_KEYS

logger = get_logger("migration.validation")


class IssueType(str, Enum):
    """Category of a compatibility issue."""

    STRUCTURAL = "structural"
    FORMAT = "format"
    EMPTY_PAGE = "empty_page"


@dataclass
class ValidationIssue:
    """A single compatibility issue found in a legacy document.

    Attributes:
        path: Location of the issue, e.g. "cover.components[0]".
        message: Human-readable description.
        issue_type: Category of the issue.
    """

    path: str
    message: str
    issue_type: IssueType

    @property
    def is_warning(self) -> bool:
        return self.issue_type is IssueType.EMPTY_PAGE


@dataclass
class ValidationResult:
    """Outcome of validate_compatibility.

    Attributes:
        issues: Every issue found, in document order.
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """Messages of the issues that block a migration."""
        return [issue.message for issue in self.issues if not issue.is_warning]

    @property
    def warnings(self) -> list[str]:
        """Messages of the issues that do not block a migration."""
        return [issue.message for issue in self.issues if issue.is_warning]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, path: str, message: str, issue_type: IssueType) -> None:
        self.issues.append(ValidationIssue(path, message, issue_type))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the `{isValid, errors, warnings}` report shape."""
        return {
            "isValid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _validate_component(component: Any, path: str, result: ValidationResult) -> None:
    if not isinstance(component, Mapping):
        result.add(
            path,
            f"Component must be an object, got {type(component).__name__}",
            IssueType.FORMAT,
        )
        return

    if _is_blank(component.get("id")):
        result.add(path, "Missing component id", IssueType.STRUCTURAL)
    if _is_blank(component.get("type")):
        result.add(path, "Missing component type", IssueType.STRUCTURAL)

    style = component.get("style")
    if style is not None and not isinstance(style, Mapping):
        result.add(f"{path}.style", "Invalid style format", IssueType.FORMAT)

    container_style = component.get("containerStyle")
    if container_style is not None and not isinstance(container_style, Mapping):
        result.add(
            f"{path}.containerStyle",
            "Invalid containerStyle format",
            IssueType.FORMAT,
        )


def validate_compatibility(legacy_config: Any) -> ValidationResult:
    """Validate a legacy document before migrating it.

    Performs the following checks:
        - The document and each page type are objects
        - Each page type has a `components` list (warning when absent)
        - Each component has an id and a type
        - `style` and `containerStyle`, when present, are objects

    The `version` and `designTokens` keys are document metadata and are not
    checked as page types.

    Args:
        legacy_config: Legacy document to validate.

    Returns:
        ValidationResult: Issues found; `is_valid` is True when none of
        them is an error.

    Example:
        >>> result = validate_compatibility({
        ...     "cover": {"components": [{"type": "text", "style": "bad"}]}
        ... })
        >>> result.errors
        ['Missing component id', 'Invalid style format']
    """
    result = ValidationResult()

    if legacy_config is None:
        result.add("root", "Config is missing", IssueType.STRUCTURAL)
        return result
    if not isinstance(legacy_config, Mapping):
        result.add(
            "root",
            f"Config must be an object, got {type(legacy_config).__name__}",
            IssueType.FORMAT,
        )
        return result

    for page_type, page_config in legacy_config.items():
        if page_type in DOCUMENT_METADATA_KEYS:
            continue
        path = str(page_type)

        if not isinstance(page_config, Mapping):
            result.add(
                path,
                f"Page type {page_type} must be an object, "
                f"got {type(page_config).__name__}",
                IssueType.FORMAT,
            )
            continue

        components = page_config.get("components")
        if components is None:
            result.add(
                path,
                f"Page type {page_type} has no components",
                IssueType.EMPTY_PAGE,
            )
            continue
        if not isinstance(components, list):
            result.add(
                f"{path}.components",
                f"Components of page type {page_type} must be a list",
                IssueType.FORMAT,
            )
            continue

        for index, component in enumerate(components):
            _validate_component(component, f"{path}.components[{index}]", result)

    if not result.is_valid:
        logger.debug(
            f"Compatibility check found {len(result.errors)} errors, "
            f"{len(result.warnings)} warnings"
        )
    return result


def is_valid(legacy_config: Any) -> bool:
    """Check if a legacy document can be migrated.

    Convenience function that returns True if no validation errors exist.

    Args:
        legacy_config: Legacy document to validate.

    Returns:
        bool: True if the document is valid, False otherwise.
    """
    return validate_compatibility(legacy_config).is_valid


__all__ = [
    "IssueType",
    "ValidationIssue",
    "ValidationResult",
    "validate_compatibility",
    "is_valid",
]
