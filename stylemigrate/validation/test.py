"""Unit tests for validation module."""

import pytest

from stylemigrate.validation import (
    IssueType,
    ValidationResult,
    is_valid,
    validate_compatibility,
)


class TestValidateCompatibility:
    """Tests for validate_compatibility function."""

    @pytest.mark.unit
    def test_valid_document(self, legacy_config):
        """A well-formed legacy document passes validation."""
        result = validate_compatibility(legacy_config)
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.unit
    def test_none(self):
        """None is a single error."""
        result = validate_compatibility(None)
        assert not result.is_valid
        assert len(result.errors) == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["config", 3, ["cover"]])
    def test_non_mapping(self, value):
        result = validate_compatibility(value)
        assert not result.is_valid
        assert result.issues[0].issue_type is IssueType.FORMAT

    @pytest.mark.unit
    def test_reference_example(self):
        """Missing id, missing type and a string style are all reported."""
        result = validate_compatibility(
            {
                "cover": {
                    "components": [
                        {"type": "text"},
                        {"id": "test"},
                        {"id": "test2", "type": "text", "style": "invalid"},
                    ]
                }
            }
        )
        assert not result.is_valid
        assert result.errors == [
            "Missing component id",
            "Missing component type",
            "Invalid style format",
        ]

    @pytest.mark.unit
    def test_issue_paths(self):
        """Issues carry the location of the offending component."""
        result = validate_compatibility(
            {"cover": {"components": [{"id": "a", "type": "text"}, {"id": "b"}]}}
        )
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.path == "cover.components[1]"
        assert issue.issue_type is IssueType.STRUCTURAL

    @pytest.mark.unit
    def test_empty_id_is_missing(self):
        result = validate_compatibility(
            {"page": {"components": [{"id": "", "type": ""}]}}
        )
        assert result.errors == ["Missing component id", "Missing component type"]

    @pytest.mark.unit
    def test_page_without_components_warns(self):
        """A page without components is a warning, not an error."""
        result = validate_compatibility({"cover": {"background": "red"}})
        assert result.is_valid
        assert result.warnings == ["Page type cover has no components"]
        assert result.issues[0].issue_type is IssueType.EMPTY_PAGE

    @pytest.mark.unit
    def test_empty_component_list(self):
        """An empty components list is neither an error nor a warning."""
        result = validate_compatibility({"cover": {"components": []}})
        assert result.is_valid
        assert result.warnings == []

    @pytest.mark.unit
    def test_metadata_keys_skipped(self, partially_migrated_config):
        """version and designTokens are not validated as page types."""
        result = validate_compatibility(partially_migrated_config)
        assert result.is_valid
        assert result.warnings == []

    @pytest.mark.unit
    def test_malformed_page(self):
        result = validate_compatibility({"cover": "not a page"})
        assert not result.is_valid
        assert result.issues[0].path == "cover"

    @pytest.mark.unit
    def test_components_not_a_list(self):
        result = validate_compatibility({"cover": {"components": {"id": "x"}}})
        assert not result.is_valid
        assert result.issues[0].path == "cover.components"

    @pytest.mark.unit
    def test_malformed_component(self):
        result = validate_compatibility({"cover": {"components": ["oops"]}})
        assert not result.is_valid
        assert result.issues[0].issue_type is IssueType.FORMAT

    @pytest.mark.unit
    def test_malformed_container_style(self):
        result = validate_compatibility(
            {
                "cover": {
                    "components": [
                        {"id": "a", "type": "text", "containerStyle": "centered"}
                    ]
                }
            }
        )
        assert not result.is_valid
        assert result.issues[0].path == "cover.components[0].containerStyle"

    @pytest.mark.unit
    def test_null_style_allowed(self):
        result = validate_compatibility(
            {"cover": {"components": [{"id": "a", "type": "text", "style": None}]}}
        )
        assert result.is_valid

    @pytest.mark.unit
    def test_warnings_do_not_affect_validity(self):
        """Warnings and errors are reported independently."""
        result = validate_compatibility(
            {"cover": {}, "page": {"components": [{"id": "a"}]}}
        )
        assert result.warnings == ["Page type cover has no components"]
        assert result.errors == ["Missing component type"]
        assert not result.is_valid


class TestValidationResult:
    """Tests for ValidationResult."""

    @pytest.mark.unit
    def test_empty_is_valid(self):
        assert ValidationResult().is_valid

    @pytest.mark.unit
    def test_to_dict(self):
        result = ValidationResult()
        result.add("cover", "Page type cover has no components", IssueType.EMPTY_PAGE)
        result.add("page.components[0]", "Missing component id", IssueType.STRUCTURAL)
        assert result.to_dict() == {
            "isValid": False,
            "errors": ["Missing component id"],
            "warnings": ["Page type cover has no components"],
        }


class TestIsValid:
    """Tests for is_valid function."""

    @pytest.mark.unit
    def test_valid(self, legacy_config):
        assert is_valid(legacy_config) is True

    @pytest.mark.unit
    def test_invalid(self):
        assert is_valid({"cover": {"components": [{}]}}) is False
