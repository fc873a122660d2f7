"""Unit tests for legacy to unified conversion."""

import copy
import logging

import pytest

from stylemigrate.convert import (
    convert_component,
    convert_legacy_to_unified,
    empty_unified_config,
    seed_design_tokens,
)
from stylemigrate.tokens import DesignTokenTable, UnifiedConfig


class TestConvertLegacyToUnified:
    """Tests for convert_legacy_to_unified function."""

    @pytest.mark.unit
    def test_document_shape(self, legacy_config):
        """A legacy document converts to version 2.0 with tokens and pages."""
        result = convert_legacy_to_unified(legacy_config)

        assert isinstance(result, UnifiedConfig)
        assert result.version == "2.0"
        assert set(result.page_types) == {"cover", "page"}

    @pytest.mark.unit
    def test_cover_title_tokens(self, legacy_config):
        """The cover title yields typography, container and positioning tokens."""
        result = convert_legacy_to_unified(legacy_config)
        component = result.page_types["cover"].components[0]
        tokens = result.design_tokens

        assert component.id == "cover-title"
        assert component.type == "text"
        assert component.content == "{storyTitle}"
        assert component.typography == "cover-title-typography-0"
        assert component.container == "cover-title-container-0"
        assert component.positioning == "cover-title-positioning-0"

        assert tokens.typography[component.typography] == {
            "fontSize": "4rem",
            "fontFamily": "Ribeye",
            "fontWeight": "700",
            "color": "#ffffff",
        }
        assert tokens.containers[component.container]["backdropFilter"] == (
            "blur(3px)"
        )
        positioning = tokens.positioning[component.positioning]
        assert positioning.region == "top-center"
        assert positioning.offset.x == 0
        assert positioning.offset.y == 40
        assert positioning.constraints.max_width == "85%"

    @pytest.mark.unit
    def test_typography_only_component(self, legacy_config):
        """A component without container properties gets no container reference."""
        result = convert_legacy_to_unified(legacy_config)
        component = result.page_types["page"].components[0]

        assert component.container is None
        assert component.typography == "page-text-typography-0"
        region = result.design_tokens.positioning[component.positioning].region
        assert region == "center-left"

    @pytest.mark.unit
    def test_every_component_has_resolving_positioning(self, legacy_config):
        """Every component references a positioning token that exists."""
        result = convert_legacy_to_unified(legacy_config)
        for page in result.page_types.values():
            for component in page.components:
                assert component.positioning in result.design_tokens.positioning

    @pytest.mark.unit
    def test_input_not_mutated(self, legacy_config):
        """Conversion leaves the legacy document untouched."""
        before = copy.deepcopy(legacy_config)
        convert_legacy_to_unified(legacy_config)
        assert legacy_config == before

    @pytest.mark.unit
    def test_custom_fields_preserved(self, customized_legacy_config):
        """Unrecognized component fields are copied verbatim."""
        result = convert_legacy_to_unified(customized_legacy_config)
        component = result.page_types["cover"].components[0]

        assert component.custom_fields == {
            "animation": {"name": "fade-in", "duration": 300},
            "locked": True,
            "zIndex": 4,
        }

    @pytest.mark.unit
    def test_none_custom_field_in_document(self):
        """A custom field holding None survives into the document."""
        legacy = {"page": {"components": [{"id": "t", "customProperty": None}]}}
        document = convert_legacy_to_unified(legacy).to_document()
        component = document["pageTypes"]["page"]["components"][0]

        assert "customProperty" in component
        assert component["customProperty"] is None
        assert "content" not in component

    @pytest.mark.unit
    def test_legacy_fields_not_carried(self, legacy_config):
        """Legacy positioning and style fields do not leak into the output."""
        document = convert_legacy_to_unified(legacy_config).to_document()
        component = document["pageTypes"]["cover"]["components"][0]

        for key in ("x", "y", "position", "horizontalPosition", "style"):
            assert key not in component
        assert "containerStyle" not in component

    @pytest.mark.unit
    def test_background_preserved(self, customized_legacy_config):
        """Page backgrounds are carried over unchanged."""
        result = convert_legacy_to_unified(customized_legacy_config)
        assert result.page_types["cover"].background == {
            "type": "solid",
            "color": "#000000",
        }

    @pytest.mark.unit
    def test_version_key_not_a_page_type(self, customized_legacy_config):
        """The legacy version key is metadata, not a page type."""
        result = convert_legacy_to_unified(customized_legacy_config)
        assert "version" not in result.page_types
        assert result.version == "2.0"

    @pytest.mark.unit
    def test_component_defaults(self):
        """Missing id and type fall back to defaults."""
        result = convert_legacy_to_unified({"page": {"components": [{}]}})
        component = result.page_types["page"].components[0]

        assert component.id == "component-0"
        assert component.type == "text"
        assert component.positioning == "component-positioning-0"

    @pytest.mark.unit
    def test_component_without_style(self):
        """A component without a style still gets a positioning token."""
        result = convert_legacy_to_unified(
            {"page": {"components": [{"id": "img", "type": "image"}]}}
        )
        component = result.page_types["page"].components[0]

        assert component.typography is None
        assert component.container is None
        assert result.design_tokens.positioning[component.positioning].region == (
            "center-center"
        )

    @pytest.mark.unit
    def test_page_without_components(self):
        """A page type without components converts to an empty page."""
        result = convert_legacy_to_unified({"cover": {"background": "red"}})
        assert result.page_types["cover"].components == []
        assert result.page_types["cover"].background == "red"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, [], "legacy", 42])
    def test_non_mapping_input(self, value):
        """Non-mapping input returns the minimal empty config."""
        result = convert_legacy_to_unified(value)
        assert result == empty_unified_config()
        assert result.to_document() == {
            "version": "2.0",
            "designTokens": {"typography": {}, "containers": {}, "positioning": {}},
            "pageTypes": {},
        }

    @pytest.mark.unit
    def test_malformed_page_skipped(self):
        """Page types whose value is not an object are skipped."""
        result = convert_legacy_to_unified(
            {"broken": "not a page", "page": {"components": []}}
        )
        assert set(result.page_types) == {"page"}

    @pytest.mark.unit
    def test_malformed_components_ignored(self):
        """A components value that is not a list yields an empty page."""
        result = convert_legacy_to_unified({"page": {"components": {"id": "x"}}})
        assert result.page_types["page"].components == []

    @pytest.mark.unit
    def test_malformed_component_keeps_indices(self):
        """Skipped components do not shift the index of later ones."""
        result = convert_legacy_to_unified(
            {"page": {"components": ["junk", {"style": {"color": "red"}}]}}
        )
        components = result.page_types["page"].components

        assert len(components) == 1
        assert components[0].id == "component-1"
        assert components[0].typography == "component-typography-1"

    @pytest.mark.unit
    def test_ids_unique_across_page_types(self):
        """Id-less components on different page types get distinct tokens."""
        result = convert_legacy_to_unified(
            {
                "cover": {"components": [{"style": {"color": "red"}}]},
                "page": {"components": [{"style": {"color": "blue"}}]},
            }
        )
        cover = result.page_types["cover"].components[0]
        page = result.page_types["page"].components[0]
        tokens = result.design_tokens

        assert cover.typography != page.typography
        assert tokens.typography[cover.typography] == {"color": "red"}
        assert tokens.typography[page.typography] == {"color": "blue"}
        assert cover.positioning != page.positioning

    @pytest.mark.unit
    def test_deterministic(self, legacy_config):
        """Identical input produces identical documents."""
        first = convert_legacy_to_unified(legacy_config).to_document()
        second = convert_legacy_to_unified(legacy_config).to_document()
        assert first == second

    @pytest.mark.unit
    def test_offset_threshold_argument(self, legacy_config):
        """A higher threshold keeps the cover title x offset."""
        result = convert_legacy_to_unified(legacy_config, offset_reset_threshold=200)
        token = result.design_tokens.positioning["cover-title-positioning-0"]
        assert token.offset.x == 115


class TestIncrementalMigration:
    """Tests for documents that already carry design tokens."""

    @pytest.mark.unit
    def test_existing_tokens_seeded(self, partially_migrated_config):
        """Tokens from a partially migrated document are carried over."""
        result = convert_legacy_to_unified(partially_migrated_config)
        tokens = result.design_tokens

        assert tokens.typography["heading"] == {
            "fontFamily": "Ribeye",
            "fontSize": "3rem",
        }
        assert tokens.positioning["header-slot"].region == "top-center"
        assert "designTokens" not in result.page_types

    @pytest.mark.unit
    def test_resolving_references_kept(self, partially_migrated_config):
        """References that resolve in the seeded tables are kept."""
        result = convert_legacy_to_unified(partially_migrated_config)
        component = result.page_types["cover"].components[0]

        assert component.typography == "heading"
        assert component.positioning == "header-slot"
        assert "typography" not in component.custom_fields

    @pytest.mark.unit
    def test_legacy_components_alongside(self, partially_migrated_config):
        """Plain legacy components in the same document are migrated."""
        result = convert_legacy_to_unified(partially_migrated_config)
        component = result.page_types["cover"].components[1]
        tokens = result.design_tokens

        assert tokens.typography[component.typography] == {"color": "#ffffff"}
        assert tokens.containers[component.container] == {"padding": "1rem"}
        assert tokens.positioning[component.positioning].region == "bottom-right"

    @pytest.mark.unit
    def test_unresolved_reference_replaced(self):
        """A reference to a missing token falls back to the generated one."""
        result = convert_legacy_to_unified(
            {"page": {"components": [{"id": "t", "positioning": "nowhere"}]}}
        )
        component = result.page_types["page"].components[0]
        assert component.positioning == "t-positioning-0"
        assert component.positioning in result.design_tokens.positioning

    @pytest.mark.unit
    def test_unresolved_style_reference_dropped(self, caplog):
        """Reserved reference names are not kept as custom fields."""
        legacy = {
            "page": {
                "components": [
                    {"id": "t", "typography": "custom-font", "container": {"a": 1}}
                ]
            }
        }
        with caplog.at_level(logging.WARNING, logger="migration"):
            result = convert_legacy_to_unified(legacy)
        component = result.page_types["page"].components[0]

        assert component.typography is None
        assert component.container is None
        assert component.custom_fields == {}
        assert "unknown typography token 'custom-font'" in caplog.text

    @pytest.mark.unit
    def test_preserve_tokens_disabled(self, partially_migrated_config):
        """With preservation off, existing tokens are ignored."""
        result = convert_legacy_to_unified(
            partially_migrated_config, preserve_tokens=False
        )
        component = result.page_types["cover"].components[0]

        assert "heading" not in result.design_tokens.typography
        assert component.positioning == "cover-title-positioning-0"

    @pytest.mark.unit
    def test_preserve_tokens_from_environment(
        self, monkeypatch, partially_migrated_config
    ):
        """Token preservation is read from the environment."""
        monkeypatch.setenv("STYLE_MIGRATE_PRESERVE_TOKENS", "false")
        result = convert_legacy_to_unified(partially_migrated_config)
        assert "header-slot" not in result.design_tokens.positioning


class TestSeedDesignTokens:
    """Tests for seed_design_tokens function."""

    @pytest.mark.unit
    def test_no_design_tokens(self, legacy_config):
        assert seed_design_tokens(legacy_config) == DesignTokenTable()

    @pytest.mark.unit
    def test_malformed_entries_dropped(self):
        """Non-object tokens and invalid positioning tokens are dropped."""
        table = seed_design_tokens(
            {
                "designTokens": {
                    "typography": {"ok": {"color": "red"}, "bad": "red"},
                    "containers": "nope",
                    "positioning": {
                        "good": {"region": "bottom-left"},
                        "broken": {"region": "upstairs"},
                    },
                }
            }
        )
        assert table.typography == {"ok": {"color": "red"}}
        assert table.containers == {}
        assert set(table.positioning) == {"good"}

    @pytest.mark.unit
    def test_seeded_tokens_are_copies(self):
        """Seeded tokens do not alias the input document."""
        document = {"designTokens": {"typography": {"h": {"color": "red"}}}}
        table = seed_design_tokens(document)
        table.typography["h"]["color"] = "blue"
        assert document["designTokens"]["typography"]["h"]["color"] == "red"


class TestConvertComponent:
    """Tests for convert_component function."""

    @pytest.mark.unit
    def test_registers_tokens(self, legacy_cover_title):
        """Converting a component registers its tokens in the table."""
        tokens = DesignTokenTable()
        component = convert_component(legacy_cover_title, "cover", 0, tokens)

        assert component.typography in tokens.typography
        assert component.container in tokens.containers
        assert component.positioning in tokens.positioning

    @pytest.mark.unit
    def test_non_string_id_coerced(self):
        tokens = DesignTokenTable()
        component = convert_component({"id": 12, "type": "text"}, "page", 0, tokens)
        assert component.id == "12"
        assert component.positioning == "12-positioning-0"
