"""Unit tests for the token registry builder."""

import pytest

from stylemigrate.registry import TokenBundle, build_tokens, make_token_id
from stylemigrate.tokens import DesignTokenTable, PositioningToken, StyleCategory


class TestMakeTokenId:
    """Tests for make_token_id."""

    @pytest.mark.unit
    def test_with_component_id(self):
        assert (
            make_token_id("cover-title", StyleCategory.CONTAINER, 2)
            == "cover-title-container-2"
        )

    @pytest.mark.unit
    @pytest.mark.parametrize("component_id", [None, ""])
    def test_without_component_id(self, component_id):
        assert (
            make_token_id(component_id, StyleCategory.TYPOGRAPHY, 0)
            == "component-typography-0"
        )

    @pytest.mark.unit
    def test_non_string_id(self):
        assert make_token_id(7, "positioning", 1) == "7-positioning-1"


class TestBuildTokens:
    """Tests for build_tokens."""

    @pytest.mark.unit
    def test_all_categories(self, legacy_cover_title):
        """A fully styled component yields three tokens."""
        bundle = build_tokens(legacy_cover_title, "cover", 0)

        assert bundle.typography_id == "cover-title-typography-0"
        assert bundle.container_id == "cover-title-container-0"
        assert bundle.positioning_id == "cover-title-positioning-0"
        assert bundle.tokens.typography[bundle.typography_id] == {
            "fontSize": "4rem",
            "fontFamily": "Ribeye",
            "fontWeight": "700",
            "color": "#ffffff",
        }
        assert bundle.tokens.containers[bundle.container_id] == {
            "padding": "2rem 3rem",
            "backgroundColor": "rgba(0,0,0,0.1)",
            "backdropFilter": "blur(3px)",
            "borderRadius": "2rem",
        }
        assert bundle.tokens.positioning[bundle.positioning_id].region == "top-center"

    @pytest.mark.unit
    def test_empty_categories_omitted(self):
        """Typography-only styles produce no container token."""
        bundle = build_tokens({"id": "t", "style": {"fontSize": "2rem"}}, "page", 3)
        assert bundle.container_id is None
        assert bundle.tokens.containers == {}
        assert bundle.references() == {
            "typography": "t-typography-3",
            "positioning": "t-positioning-3",
        }

    @pytest.mark.unit
    def test_positioning_always_emitted(self):
        """A component with nothing but an id still gets a positioning token."""
        bundle = build_tokens({"id": "bare"}, "cover", 0)
        assert bundle.typography_id is None
        assert bundle.container_id is None
        token = bundle.tokens.positioning["bare-positioning-0"]
        assert isinstance(token, PositioningToken)
        assert token.region == "center-center"

    @pytest.mark.unit
    def test_unknown_only_style(self):
        """A style with only unknown keys produces no style tokens."""
        bundle = build_tokens({"id": "z", "style": {"zIndex": 4}}, "page", 0)
        assert bundle.references() == {"positioning": "z-positioning-0"}

    @pytest.mark.unit
    def test_deterministic(self, legacy_cover_title):
        """Identical input gives identical ids and tokens."""
        first = build_tokens(legacy_cover_title, "cover", 0)
        second = build_tokens(legacy_cover_title, "cover", 0)
        assert first == second

    @pytest.mark.unit
    def test_collision_qualified_with_page_type(self):
        """Ids already registered are qualified with the page type."""
        existing = DesignTokenTable(
            typography={"component-typography-0": {"color": "red"}},
            positioning={"component-positioning-0": PositioningToken()},
        )
        bundle = build_tokens({"style": {"color": "blue"}}, "page", 0, existing)
        assert bundle.typography_id == "page-component-typography-0"
        assert bundle.positioning_id == "page-component-positioning-0"

    @pytest.mark.unit
    def test_collision_numeric_suffix(self):
        """A taken qualified id falls back to a numeric suffix."""
        existing = DesignTokenTable(
            positioning={
                "a-positioning-0": PositioningToken(),
                "p-a-positioning-0": PositioningToken(),
            }
        )
        bundle = build_tokens({"id": "a"}, "p", 0, existing)
        assert bundle.positioning_id == "p-a-positioning-0-2"

    @pytest.mark.unit
    def test_tokens_do_not_alias_input(self):
        """Token values are copies of the input style values."""
        shadow = ["2px", "2px"]
        component = {"id": "s", "style": {"textShadow": shadow}}
        bundle = build_tokens(component, "cover", 0)
        bundle.tokens.typography["s-typography-0"]["textShadow"].append("4px")
        assert shadow == ["2px", "2px"]

    @pytest.mark.unit
    def test_merge_into(self):
        """Bundles merge into an accumulating table."""
        table = DesignTokenTable()
        build_tokens({"id": "a", "style": {"color": "red"}}, "p", 0).merge_into(table)
        build_tokens({"id": "b", "style": {"padding": "1px"}}, "p", 1).merge_into(table)
        assert set(table.typography) == {"a-typography-0"}
        assert set(table.containers) == {"b-container-1"}
        assert set(table.positioning) == {"a-positioning-0", "b-positioning-1"}

    @pytest.mark.unit
    def test_non_mapping_component(self):
        """Malformed components still yield a positioning token."""
        bundle = build_tokens("oops", "cover", 5)
        assert isinstance(bundle, TokenBundle)
        assert bundle.references() == {"positioning": "component-positioning-5"}
