"""Unit tests for unified to legacy conversion."""

import pytest

from stylemigrate.convert import (
    coerce_unified_config,
    component_to_legacy,
    convert_legacy_to_unified,
    convert_unified_to_legacy,
)
from stylemigrate.tokens import (
    DesignTokenTable,
    PositioningToken,
    UnifiedComponent,
    UnifiedConfig,
)


class TestConvertUnifiedToLegacy:
    """Tests for convert_unified_to_legacy function."""

    @pytest.mark.unit
    def test_cover_title(self, unified_config):
        """Tokens are resolved back into inline legacy fields."""
        legacy = convert_unified_to_legacy(unified_config)
        component = legacy["cover"]["components"][0]

        assert component["id"] == "cover-title"
        assert component["type"] == "text"
        assert component["content"] == "{storyTitle}"
        assert component["style"] == {
            "fontFamily": "Ribeye",
            "fontSize": "4rem",
            "fontWeight": "700",
            "color": "#ffffff",
            "backgroundColor": "rgba(0,0,0,0.1)",
            "backdropFilter": "blur(3px)",
            "borderRadius": "2rem",
            "padding": "2rem 3rem",
        }
        assert component["position"] == "top"
        assert component["horizontalPosition"] == "center"
        assert component["x"] == 0
        assert component["y"] == 40
        assert component["containerStyle"] == {"maxWidth": "85%"}

    @pytest.mark.unit
    def test_no_constraints_no_container_style(self, unified_config):
        """containerStyle is only emitted when constraints exist."""
        legacy = convert_unified_to_legacy(unified_config)
        component = legacy["page"]["components"][0]

        assert component["position"] == "center"
        assert component["horizontalPosition"] == "left"
        assert (component["x"], component["y"]) == (50, 60)
        assert "containerStyle" not in component

    @pytest.mark.unit
    def test_background_carried_back(self, unified_config):
        legacy = convert_unified_to_legacy(unified_config)
        assert legacy["cover"]["background"] == {
            "type": "gradient",
            "colors": ["#ff6b6b", "#4ecdc4"],
        }

    @pytest.mark.unit
    def test_accepts_model(self, unified_config):
        """A UnifiedConfig model and its document give the same result."""
        model = UnifiedConfig.model_validate(unified_config)
        assert convert_unified_to_legacy(model) == convert_unified_to_legacy(
            unified_config
        )

    @pytest.mark.unit
    def test_missing_token_omits_category(self, unified_config):
        """A dangling reference omits only that category."""
        unified_config["designTokens"]["containers"] = {}
        legacy = convert_unified_to_legacy(unified_config)
        component = legacy["cover"]["components"][0]

        assert "backgroundColor" not in component["style"]
        assert component["style"]["fontFamily"] == "Ribeye"
        assert component["position"] == "top"

    @pytest.mark.unit
    def test_missing_positioning_token(self, unified_config):
        """A dangling positioning reference omits the position fields."""
        unified_config["designTokens"]["positioning"] = {}
        component = convert_unified_to_legacy(unified_config)["page"]["components"][0]

        for key in ("position", "horizontalPosition", "x", "y"):
            assert key not in component
        assert component["style"]["fontFamily"] == "Georgia"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [
            None,
            "unified",
            {"pageTypes": "not a mapping"},
            {"designTokens": {"positioning": {"p": {"region": "upstairs"}}}},
        ],
    )
    def test_unreadable_input(self, value):
        """Input that is not a unified document gives an empty result."""
        assert convert_unified_to_legacy(value) == {}

    @pytest.mark.unit
    def test_custom_fields_round_trip(self, customized_legacy_config):
        """Custom fields survive a migrate then rollback cycle."""
        unified = convert_legacy_to_unified(customized_legacy_config)
        component = convert_unified_to_legacy(unified)["cover"]["components"][0]

        assert component["animation"] == {"name": "fade-in", "duration": 300}
        assert component["locked"] is True
        assert component["zIndex"] == 4
        assert component["style"] == {"fontSize": "3rem", "boxShadow": "0 0 4px #000"}


class TestComponentToLegacy:
    """Tests for component_to_legacy function."""

    @pytest.mark.unit
    def test_style_always_present(self):
        """A component without style tokens still gets an empty style."""
        component = UnifiedComponent(id="img", type="image", positioning="p")
        tokens = DesignTokenTable(positioning={"p": PositioningToken()})
        legacy = component_to_legacy(component, tokens)

        assert legacy["style"] == {}
        assert legacy["position"] == "center"
        assert legacy["horizontalPosition"] == "center"
        assert "content" not in legacy

    @pytest.mark.unit
    def test_typography_then_container(self):
        """Container values win over typography values for the same key."""
        component = UnifiedComponent(id="c", typography="t", container="k")
        tokens = DesignTokenTable(
            typography={"t": {"color": "red"}},
            containers={"k": {"color": "blue", "padding": "1px"}},
        )
        legacy = component_to_legacy(component, tokens)
        assert legacy["style"] == {"color": "blue", "padding": "1px"}

    @pytest.mark.unit
    def test_legacy_named_extras_ignored(self):
        """Extra fields that collide with legacy fields are not copied back."""
        component = UnifiedComponent(id="c", x=999, style={"color": "red"}, note="n")
        legacy = component_to_legacy(component, DesignTokenTable())

        assert "x" not in legacy
        assert legacy["style"] == {}
        assert legacy["note"] == "n"

    @pytest.mark.unit
    def test_tokens_not_aliased(self):
        """Rebuilt styles are copies of the token values."""
        tokens = DesignTokenTable(typography={"t": {"textShadow": ["1px"]}})
        legacy = component_to_legacy(UnifiedComponent(id="c", typography="t"), tokens)
        legacy["style"]["textShadow"].append("2px")
        assert tokens.typography["t"]["textShadow"] == ["1px"]


class TestCoerceUnifiedConfig:
    """Tests for coerce_unified_config function."""

    @pytest.mark.unit
    def test_model_passthrough(self):
        config = UnifiedConfig()
        assert coerce_unified_config(config) is config

    @pytest.mark.unit
    def test_mapping_validated(self, unified_config):
        config = coerce_unified_config(unified_config)
        assert isinstance(config, UnifiedConfig)
        assert set(config.page_types) == {"cover", "page"}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 3, ["a"]])
    def test_unreadable(self, value):
        assert coerce_unified_config(value) is None

    @pytest.mark.unit
    def test_invalid_entries_dropped_individually(self, unified_config):
        """Invalid tokens and components are dropped, the rest is kept."""
        unified_config["designTokens"]["positioning"]["top-center"]["region"] = "up"
        unified_config["designTokens"]["typography"]["text-medium"] = "red"
        unified_config["pageTypes"]["page"]["components"].append({"type": "text"})
        config = coerce_unified_config(unified_config)

        assert set(config.design_tokens.positioning) == {"center-left"}
        assert set(config.design_tokens.typography) == {"title-large"}
        assert [c.id for c in config.page_types["page"].components] == ["page-text"]
        assert config.page_types["cover"].components[0].positioning == "top-center"

    @pytest.mark.unit
    def test_malformed_pages_skipped(self):
        config = coerce_unified_config(
            {"version": "2.0", "pageTypes": {"cover": "nope", "page": {}}}
        )
        assert set(config.page_types) == {"page"}
        assert config.page_types["page"].components == []


def _two_component_document() -> dict:
    legacy = {
        "page": {
            "components": [
                {"id": "a", "type": "text", "style": {"color": "red"}},
                {"id": "b", "type": "text", "position": "bottom", "y": 12},
            ]
        }
    }
    return convert_legacy_to_unified(legacy).to_document()


class TestRollbackLocalDegradation:
    """A bad token only affects the components that reference it."""

    @pytest.mark.unit
    def test_bad_region_string(self):
        document = _two_component_document()
        document["designTokens"]["positioning"]["b-positioning-1"]["region"] = (
            "middle-center"
        )
        a, b = convert_unified_to_legacy(document)["page"]["components"]

        assert a["style"] == {"color": "red"}
        assert a["position"] == "center"
        assert b["id"] == "b"
        for key in ("position", "horizontalPosition", "x", "y"):
            assert key not in b

    @pytest.mark.unit
    def test_non_mapping_typography_token(self):
        document = _two_component_document()
        document["designTokens"]["typography"]["a-typography-0"] = "red"
        a, b = convert_unified_to_legacy(document)["page"]["components"]

        assert a["style"] == {}
        assert a["position"] == "center"
        assert b["position"] == "bottom"
        assert b["y"] == 12
