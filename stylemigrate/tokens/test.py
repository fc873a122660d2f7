"""Unit tests for design-token models."""

import pytest

from stylemigrate.tokens import (
    LEGACY_COMPONENT_FIELDS,
    DesignTokenTable,
    GridRegion,
    HorizontalPosition,
    PageTypeConfig,
    PositionConstraints,
    PositioningToken,
    StyleCategory,
    UnifiedComponent,
    UnifiedConfig,
    VerticalPosition,
    export_json_schema,
)


class TestGridRegion:
    """Tests for GridRegion enum."""

    @pytest.mark.unit
    def test_nine_regions(self):
        """The grid is exactly the 3x3 cross product of the axes."""
        expected = {
            f"{v.value}-{h.value}" for v in VerticalPosition for h in HorizontalPosition
        }
        assert {r.value for r in GridRegion} == expected
        assert len(GridRegion) == 9

    @pytest.mark.unit
    def test_axes(self):
        """Regions expose their vertical and horizontal axes."""
        region = GridRegion.BOTTOM_RIGHT
        assert region.vertical == VerticalPosition.BOTTOM
        assert region.horizontal == HorizontalPosition.RIGHT

    @pytest.mark.unit
    def test_from_axes(self):
        """Regions can be built from their axes."""
        region = GridRegion.from_axes(VerticalPosition.TOP, HorizontalPosition.CENTER)
        assert region is GridRegion.TOP_CENTER


class TestPositioningToken:
    """Tests for PositioningToken model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Default token is centered with a zero offset and no constraints."""
        token = PositioningToken()
        assert token.region == "center-center"
        assert token.offset.x == 0
        assert token.offset.y == 0
        assert token.constraints is None

    @pytest.mark.unit
    def test_rejects_unknown_region(self):
        """Regions outside the grid are rejected."""
        with pytest.raises(ValueError):
            PositioningToken(region="middle-middle")

    @pytest.mark.unit
    def test_constraints_alias(self):
        """Constraints accept and dump camelCase names."""
        constraints = PositionConstraints.model_validate({"maxWidth": "85%"})
        assert constraints.max_width == "85%"
        assert constraints.model_dump(by_alias=True, exclude_none=True) == {
            "maxWidth": "85%"
        }
        assert not constraints.is_empty()
        assert PositionConstraints().is_empty()


class TestDesignTokenTable:
    """Tests for DesignTokenTable lookups."""

    @pytest.mark.unit
    def test_table_for_category(self):
        """Each category maps to its own table."""
        table = DesignTokenTable(typography={"t": {"color": "#fff"}})
        assert table.table_for(StyleCategory.TYPOGRAPHY) is table.typography
        assert table.table_for(StyleCategory.CONTAINER) is table.containers
        assert table.table_for(StyleCategory.POSITIONING) is table.positioning

    @pytest.mark.unit
    def test_unknown_category_has_no_table(self):
        """The unknown bucket is never stored."""
        with pytest.raises(KeyError):
            DesignTokenTable().table_for(StyleCategory.UNKNOWN)

    @pytest.mark.unit
    def test_get_token(self):
        """Missing ids resolve to None rather than raising."""
        table = DesignTokenTable(containers={"c": {"padding": "1rem"}})
        assert table.get_token(StyleCategory.CONTAINER, "c") == {"padding": "1rem"}
        assert table.get_token(StyleCategory.CONTAINER, "missing") is None
        assert table.get_token(StyleCategory.CONTAINER, None) is None

    @pytest.mark.unit
    def test_merge(self):
        """Merging combines all three tables."""
        table = DesignTokenTable(typography={"a": {"color": "red"}})
        table.merge(
            DesignTokenTable(
                typography={"b": {"color": "blue"}},
                positioning={"p": PositioningToken()},
            )
        )
        assert set(table.typography) == {"a", "b"}
        assert "p" in table.positioning


class TestUnifiedComponent:
    """Tests for UnifiedComponent model."""

    @pytest.mark.unit
    def test_custom_fields_preserved(self):
        """Unknown fields are kept as extras."""
        component = UnifiedComponent.model_validate(
            {"id": "title", "type": "text", "customProperty": "x"}
        )
        assert component.custom_fields == {"customProperty": "x"}
        assert component.customProperty == "x"

    @pytest.mark.unit
    def test_type_defaults_to_text(self):
        """Type falls back to text."""
        assert UnifiedComponent(id="a").type == "text"


class TestUnifiedConfig:
    """Tests for UnifiedConfig model."""

    @pytest.mark.unit
    def test_empty_document(self):
        """An empty config serializes to the minimal valid document."""
        assert UnifiedConfig().to_document() == {
            "version": "2.0",
            "designTokens": {"typography": {}, "containers": {}, "positioning": {}},
            "pageTypes": {},
        }

    @pytest.mark.unit
    def test_document_round_trip(self):
        """A document validates back into an equal model."""
        config = UnifiedConfig(
            design_tokens=DesignTokenTable(
                positioning={"p": PositioningToken(region=GridRegion.TOP_LEFT)}
            ),
            page_types={
                "cover": PageTypeConfig(
                    components=[UnifiedComponent(id="a", positioning="p")]
                )
            },
        )
        document = config.to_document()
        assert document["designTokens"]["positioning"]["p"]["region"] == "top-left"
        assert "constraints" not in document["designTokens"]["positioning"]["p"]
        assert UnifiedConfig.model_validate(document).to_document() == document

    @pytest.mark.unit
    def test_none_custom_field_kept(self):
        """A custom field set to None is data and is serialized."""
        component = UnifiedComponent(id="a", positioning="p", customProperty=None)
        config = UnifiedConfig(
            page_types={"cover": PageTypeConfig(components=[component])}
        )
        document = config.to_document()

        assert document["pageTypes"]["cover"]["components"][0] == {
            "id": "a",
            "type": "text",
            "positioning": "p",
            "customProperty": None,
        }
        assert "background" not in document["pageTypes"]["cover"]

    @pytest.mark.unit
    def test_constraints_omit_unset_sizes(self):
        """Only the size constraints that are set are serialized."""
        token = PositioningToken(constraints=PositionConstraints(max_width="85%"))
        assert token.model_dump(mode="json", by_alias=True) == {
            "region": "center-center",
            "offset": {"x": 0, "y": 0},
            "constraints": {"maxWidth": "85%"},
        }

    @pytest.mark.unit
    def test_json_schema_uses_document_names(self):
        """Exported schema speaks the camelCase document vocabulary."""
        schema = export_json_schema()
        assert schema["title"] == "UnifiedConfig"
        assert "designTokens" in schema["properties"]
        assert "pageTypes" in schema["properties"]


class TestLegacyFields:
    """Tests for the fixed legacy field set."""

    @pytest.mark.unit
    def test_fixed_fields(self):
        """The nine legacy fields are recognized."""
        assert LEGACY_COMPONENT_FIELDS == {
            "id",
            "type",
            "content",
            "style",
            "x",
            "y",
            "position",
            "horizontalPosition",
            "containerStyle",
        }
