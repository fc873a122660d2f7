"""Unit tests for property classification and style separation."""

import pytest

from stylemigrate.classify import (
    CONTAINER_PROPERTIES,
    POSITIONING_PROPERTIES,
    PROPERTY_REGISTRY,
    TYPOGRAPHY_PROPERTIES,
    classify,
    get_properties_by_category,
    is_container_property,
    is_positioning_property,
    is_typography_property,
    separate_style_categories,
)
from stylemigrate.tokens import StyleCategory


class TestPropertyRegistry:
    """Tests for the property registry."""

    @pytest.mark.unit
    def test_categories_are_disjoint(self):
        """No property belongs to two categories."""
        assert not TYPOGRAPHY_PROPERTIES & CONTAINER_PROPERTIES
        assert not TYPOGRAPHY_PROPERTIES & POSITIONING_PROPERTIES
        assert not CONTAINER_PROPERTIES & POSITIONING_PROPERTIES

    @pytest.mark.unit
    def test_registry_covers_known_categories(self):
        """Every category except UNKNOWN has a registry entry."""
        assert set(PROPERTY_REGISTRY) == {
            StyleCategory.TYPOGRAPHY,
            StyleCategory.CONTAINER,
            StyleCategory.POSITIONING,
        }

    @pytest.mark.unit
    def test_get_properties_by_category(self):
        """Lookup returns the registered set; UNKNOWN is empty."""
        assert "fontSize" in get_properties_by_category(StyleCategory.TYPOGRAPHY)
        assert get_properties_by_category(StyleCategory.UNKNOWN) == frozenset()


class TestClassify:
    """Tests for classify."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name",
        [
            "fontSize",
            "fontFamily",
            "color",
            "textAlign",
            "fontWeight",
            "lineHeight",
            "textShadow",
            "textTransform",
            "letterSpacing",
        ],
    )
    def test_typography(self, name):
        """Typography properties classify as typography."""
        assert classify(name) is StyleCategory.TYPOGRAPHY

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name",
        [
            "padding",
            "backgroundColor",
            "backdropFilter",
            "borderRadius",
            "boxShadow",
            "border",
        ],
    )
    def test_container(self, name):
        """Container properties classify as container."""
        assert classify(name) is StyleCategory.CONTAINER

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name",
        ["maxWidth", "minHeight", "width", "height", "position", "top", "left"],
    )
    def test_positioning(self, name):
        """Positioning properties classify as positioning."""
        assert classify(name) is StyleCategory.POSITIONING

    @pytest.mark.unit
    def test_unknown(self):
        """Unregistered or non-string names are unknown."""
        assert classify("zIndex") is StyleCategory.UNKNOWN
        assert classify("font-size") is StyleCategory.UNKNOWN
        assert classify("") is StyleCategory.UNKNOWN
        assert classify(None) is StyleCategory.UNKNOWN

    @pytest.mark.unit
    def test_repeatable(self):
        """Repeated calls give the same answer."""
        assert {classify("color") for _ in range(5)} == {StyleCategory.TYPOGRAPHY}


class TestPredicates:
    """Tests for the is_*_property helpers."""

    @pytest.mark.unit
    def test_typography_predicate(self):
        assert is_typography_property("fontSize")
        assert not is_typography_property("padding")
        assert not is_typography_property("maxWidth")

    @pytest.mark.unit
    def test_container_predicate(self):
        assert is_container_property("border")
        assert not is_container_property("fontSize")
        assert not is_container_property("position")

    @pytest.mark.unit
    def test_positioning_predicate(self):
        assert is_positioning_property("left")
        assert not is_positioning_property("color")
        assert not is_positioning_property("padding")


class TestSeparateStyleCategories:
    """Tests for separate_style_categories."""

    @pytest.mark.unit
    def test_mixed_styles(self):
        """Mixed inline styles land in their buckets unchanged."""
        result = separate_style_categories(
            {
                "fontSize": "4rem",
                "fontFamily": "Ribeye",
                "color": "#ffffff",
                "textAlign": "center",
                "padding": "2rem 3rem",
                "backgroundColor": "rgba(0,0,0,0.1)",
                "backdropFilter": "blur(3px)",
                "borderRadius": "2rem",
                "maxWidth": "85%",
                "position": "absolute",
                "top": "40px",
            }
        )
        assert result.typography == {
            "fontSize": "4rem",
            "fontFamily": "Ribeye",
            "color": "#ffffff",
            "textAlign": "center",
        }
        assert result.container == {
            "padding": "2rem 3rem",
            "backgroundColor": "rgba(0,0,0,0.1)",
            "backdropFilter": "blur(3px)",
            "borderRadius": "2rem",
        }
        assert result.positioning == {
            "maxWidth": "85%",
            "position": "absolute",
            "top": "40px",
        }

    @pytest.mark.unit
    def test_unknown_keys_dropped(self):
        """Unknown properties appear in no bucket."""
        result = separate_style_categories({"zIndex": 3, "color": "red"})
        assert result.typography == {"color": "red"}
        assert result.container == {}
        assert result.positioning == {}

    @pytest.mark.unit
    def test_insertion_order_kept(self):
        """Bucket order follows input order."""
        result = separate_style_categories(
            {"lineHeight": "1.6", "color": "#333", "fontSize": "2rem"}
        )
        assert list(result.typography) == ["lineHeight", "color", "fontSize"]

    @pytest.mark.unit
    def test_order_does_not_change_content(self):
        """Input order has no effect on bucket contents."""
        forward = separate_style_categories({"color": "red", "padding": "1px"})
        backward = separate_style_categories({"padding": "1px", "color": "red"})
        assert forward == backward

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, {}, "invalid-style-format", 42, []])
    def test_empty_or_invalid_input(self, value):
        """Missing or malformed style maps give empty buckets."""
        result = separate_style_categories(value)
        assert result.is_empty()

    @pytest.mark.unit
    def test_input_not_mutated(self):
        """The input map is left untouched."""
        style = {"color": "red", "zIndex": 1}
        separate_style_categories(style)
        assert style == {"color": "red", "zIndex": 1}
