"""Integration tests for whole-document migration flows."""

import copy

import pytest

from stylemigrate import (
    migrate,
    migrate_validated,
    rollback,
    validate_compatibility,
)
from stylemigrate.classify import separate_style_categories
from stylemigrate.tokens import GridRegion


def _classified(style: dict) -> dict:
    separated = separate_style_categories(style)
    return {**separated.typography, **separated.container}


class TestRoundTrip:
    """migrate followed by rollback preserves classified style values."""

    @pytest.mark.integration
    def test_mock_document(self, legacy_config):
        restored = rollback(migrate(legacy_config))

        for page_type, page in legacy_config.items():
            for index, component in enumerate(page["components"]):
                rebuilt = restored[page_type]["components"][index]
                assert rebuilt["id"] == component["id"]
                assert rebuilt["content"] == component["content"]
                assert rebuilt["style"] == _classified(component["style"])

    @pytest.mark.integration
    def test_via_document(self, legacy_config):
        """The serialized unified document rolls back the same as the model."""
        unified = migrate(legacy_config)
        assert rollback(unified.to_document()) == rollback(unified)

    @pytest.mark.integration
    def test_unknown_style_properties_dropped(self):
        legacy = {
            "page": {
                "components": [
                    {
                        "id": "t",
                        "type": "text",
                        "style": {"color": "red", "zIndex": 3, "padding": "1px"},
                    }
                ]
            }
        }
        component = rollback(migrate(legacy))["page"]["components"][0]
        assert component["style"] == {"color": "red", "padding": "1px"}

    @pytest.mark.integration
    def test_positioning_restored(self, legacy_config):
        """Region, offset and constraints come back as legacy fields."""
        component = rollback(migrate(legacy_config))["cover"]["components"][0]

        assert component["position"] == "top"
        assert component["horizontalPosition"] == "center"
        # Stale top-center x offset is reset during migration.
        assert component["x"] == 0
        assert component["y"] == 40
        assert component["containerStyle"] == {"maxWidth": "85%"}

    @pytest.mark.integration
    def test_customizations_survive(self, customized_legacy_config):
        original = copy.deepcopy(customized_legacy_config)
        restored = rollback(migrate(customized_legacy_config))
        component = restored["cover"]["components"][0]

        assert customized_legacy_config == original
        assert restored["cover"]["background"] == original["cover"]["background"]
        for key in ("animation", "locked", "zIndex"):
            assert component[key] == original["cover"]["components"][0][key]

    @pytest.mark.integration
    def test_unified_document_round_trip(self, unified_config):
        """rollback then migrate keeps every style value and region."""
        migrated = migrate(rollback(unified_config))
        tokens = migrated.design_tokens

        component = migrated.page_types["cover"].components[0]
        assert tokens.typography[component.typography] == (
            unified_config["designTokens"]["typography"]["title-large"]
        )
        assert tokens.containers[component.container] == (
            unified_config["designTokens"]["containers"]["glass-effect"]
        )
        assert tokens.positioning[component.positioning].region == "top-center"


class TestNullSafety:
    """No entry point raises on missing or malformed input."""

    @pytest.mark.integration
    @pytest.mark.parametrize(
        "value",
        [
            None,
            {},
            [],
            "text",
            {"cover": None},
            {"cover": {"components": None}},
            {"cover": {"components": [None, 1, "x"]}},
            {"cover": {"components": [{"style": None, "containerStyle": 7}]}},
            {"cover": {"components": [{"x": "left", "y": None, "position": 3}]}},
        ],
    )
    def test_entry_points(self, value):
        unified = migrate(value)
        assert unified.version == "2.0"
        assert isinstance(rollback(unified), dict)
        assert isinstance(validate_compatibility(value).to_dict(), dict)
        assert isinstance(migrate_validated(value).success, bool)


class TestPositioningInvariant:
    """Every migrated component resolves to one of the nine regions."""

    @pytest.mark.integration
    def test_mixed_components(self):
        legacy = {
            "cover": {
                "components": [
                    {"id": "a"},
                    {"id": "b", "position": "bottom"},
                    {"id": "c", "horizontalPosition": "right", "x": 20},
                    {
                        "id": "d",
                        "containerStyle": {
                            "verticalAlignment": "top",
                            "horizontalAlignment": "left",
                        },
                    },
                    {"id": "e", "position": "sideways", "horizontalPosition": 4},
                ]
            },
            "page": {"components": [{"type": "image"}, {"type": "image"}]},
        }
        unified = migrate(legacy)
        regions = {region.value for region in GridRegion}

        for page in unified.page_types.values():
            for component in page.components:
                token = unified.design_tokens.positioning[component.positioning]
                assert token.region in regions

        regions_by_id = {
            component.id: unified.design_tokens.positioning[
                component.positioning
            ].region
            for component in unified.page_types["cover"].components
        }
        assert regions_by_id == {
            "a": "center-center",
            "b": "bottom-center",
            "c": "center-right",
            "d": "top-left",
            "e": "center-center",
        }


class TestLegacyVariants:
    """Legacy documents from every historical format migrate."""

    @pytest.mark.integration
    def test_version_1_0(self):
        legacy = {
            "version": "1.0",
            "cover": {
                "components": [
                    {
                        "id": "title",
                        "type": "text",
                        "style": {"fontSize": "2rem"},
                        "position": "top",
                        "horizontalPosition": "left",
                    }
                ]
            },
        }
        unified = migrate(legacy)
        component = unified.page_types["cover"].components[0]

        assert unified.version == "2.0"
        assert set(unified.page_types) == {"cover"}
        assert unified.design_tokens.positioning[component.positioning].region == (
            "top-left"
        )

    @pytest.mark.integration
    def test_without_version(self, legacy_config):
        assert "version" not in legacy_config
        assert migrate(legacy_config).version == "2.0"

    @pytest.mark.integration
    def test_container_style_only(self):
        """A component positioned only through containerStyle."""
        legacy = {
            "page": {
                "components": [
                    {
                        "id": "quote",
                        "type": "text",
                        "containerStyle": {
                            "verticalAlignment": "bottom",
                            "horizontalAlignment": "center",
                            "minHeight": "20vh",
                        },
                    }
                ]
            }
        }
        unified = migrate(legacy)
        component = unified.page_types["page"].components[0]
        token = unified.design_tokens.positioning[component.positioning]

        assert token.region == "bottom-center"
        assert token.constraints.min_height == "20vh"
        assert component.typography is None

    @pytest.mark.integration
    def test_partially_migrated(self, partially_migrated_config):
        result = migrate_validated(partially_migrated_config)

        assert result.success
        assert result.from_version == "1.5"
        assert result.config.version == "2.0"
        cover = result.config.page_types["cover"].components
        assert cover[0].typography == "heading"
        assert cover[1].positioning == "cover-subtitle-positioning-1"

    @pytest.mark.integration
    def test_validator_reference_case(self):
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
        assert result.to_dict() == {
            "isValid": False,
            "errors": [
                "Missing component id",
                "Missing component type",
                "Invalid style format",
            ],
            "warnings": [],
        }
