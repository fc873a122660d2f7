"""Unit tests for grid region resolution and positioning extraction."""

import itertools

import pytest

from stylemigrate.positioning import (
    REGION_RULES,
    PositionSignals,
    extract_positioning,
    match_region_rule,
    normalize_horizontal,
    normalize_vertical,
    resolve_region,
    split_region,
)
from stylemigrate.tokens import GridRegion, HorizontalPosition, VerticalPosition

VERTICALS = ["top", "center", "bottom"]
HORIZONTALS = ["left", "center", "right"]


class TestNormalization:
    """Tests for axis synonym normalization."""

    @pytest.mark.unit
    def test_middle_is_center(self):
        assert normalize_vertical("middle") is VerticalPosition.CENTER
        assert normalize_horizontal("middle") is HorizontalPosition.CENTER

    @pytest.mark.unit
    def test_case_and_whitespace(self):
        assert normalize_vertical(" Bottom ") is VerticalPosition.BOTTOM
        assert normalize_horizontal("RIGHT") is HorizontalPosition.RIGHT

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "upside", 3, True])
    def test_unrecognized_defaults_to_center(self, value):
        assert normalize_vertical(value) is VerticalPosition.CENTER
        assert normalize_horizontal(value) is HorizontalPosition.CENTER


class TestResolveRegion:
    """Tests for resolve_region priority rules."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "vertical,horizontal", list(itertools.product(VERTICALS, HORIZONTALS))
    )
    def test_exhaustive_position_grid(self, vertical, horizontal):
        """Every position pair maps to the matching region."""
        assert resolve_region(vertical, horizontal) == f"{vertical}-{horizontal}"

    @pytest.mark.unit
    def test_alignment_overrides_non_default(self):
        """Non-default alignment wins over the position pair."""
        assert resolve_region("center", "left", "bottom", "right") == "bottom-right"

    @pytest.mark.unit
    def test_default_alignment_does_not_override(self):
        """center-center alignment leaves the position pair in charge."""
        assert resolve_region("top", "center", "center", "center") == "top-center"

    @pytest.mark.unit
    def test_only_literal_center_alignment_is_default(self):
        """Any alignment other than the literal center pair overrides position."""
        assert resolve_region("top", "left", "middle", "center") == "center-center"
        assert resolve_region("top", "left", "foo", "bar") == "center-center"
        assert resolve_region("top", "left", " center ", "center") == "top-left"

    @pytest.mark.unit
    def test_alignment_only(self):
        """Alignment is used when no position signal exists."""
        assert resolve_region(None, None, "top", "center") == "top-center"
        assert resolve_region(None, None, "center", "center") == "center-center"

    @pytest.mark.unit
    def test_partial_alignment_ignored(self):
        """A single alignment signal never decides the region."""
        assert resolve_region(None, None, "bottom", None) == "center-center"
        assert resolve_region("top", "left", "bottom", None) == "top-left"

    @pytest.mark.unit
    def test_partial_position_defaults_axis(self):
        """A missing position axis defaults to center."""
        assert resolve_region("bottom") == "bottom-center"
        assert resolve_region(None, "right") == "center-right"

    @pytest.mark.unit
    def test_one_position_signal_blocks_alignment_only(self):
        """Alignment-only requires both position signals absent."""
        assert resolve_region("bottom", None, "top", "left") == "bottom-center"

    @pytest.mark.unit
    def test_no_signals(self):
        """No signal at all is center-center."""
        assert resolve_region() is GridRegion.CENTER_CENTER

    @pytest.mark.unit
    def test_synonym_in_position(self):
        """middle normalizes before joining."""
        assert resolve_region("middle", "left") == "center-left"

    @pytest.mark.unit
    def test_rule_names(self):
        """Rules are evaluated in a fixed, named order."""
        assert [r.name for r in REGION_RULES] == [
            "alignment-only",
            "alignment-override",
            "position",
        ]
        assert (
            match_region_rule(PositionSignals(None, None, "top", "left")).name
            == "alignment-only"
        )
        assert (
            match_region_rule(PositionSignals("top", "left", "bottom", "right")).name
            == "alignment-override"
        )
        assert match_region_rule(PositionSignals()).name == "position"


class TestSplitRegion:
    """Tests for split_region."""

    @pytest.mark.unit
    @pytest.mark.parametrize("region", list(GridRegion))
    def test_inverse_of_resolve(self, region):
        """Splitting then resolving gives the same region."""
        assert resolve_region(*split_region(region)) is region

    @pytest.mark.unit
    def test_accepts_string(self):
        assert split_region("center-center") == ("center", "center")

    @pytest.mark.unit
    def test_rejects_unknown(self):
        with pytest.raises(ValueError):
            split_region("middle-earth")


class TestExtractPositioning:
    """Tests for extract_positioning."""

    @pytest.mark.unit
    def test_consolidates_four_systems(self):
        """All four legacy systems collapse into one token."""
        component = {
            "x": 115,
            "y": 40,
            "position": "top",
            "horizontalPosition": "center",
            "containerStyle": {
                "verticalAlignment": "center",
                "horizontalAlignment": "center",
                "maxWidth": "85%",
            },
        }
        token = extract_positioning(component)
        assert token.model_dump(by_alias=True, exclude_none=True) == {
            "region": "top-center",
            "offset": {"x": 0, "y": 40},
            "constraints": {"maxWidth": "85%"},
        }
        dumped = token.model_dump(by_alias=True)
        for legacy_field in ("x", "position", "horizontalPosition", "containerStyle"):
            assert legacy_field not in dumped

    @pytest.mark.unit
    def test_no_signals_defaults(self):
        """A bare component is centered at a zero offset."""
        token = extract_positioning({"id": "bare"})
        assert token.region == "center-center"
        assert (token.offset.x, token.offset.y) == (0, 0)
        assert token.constraints is None

    @pytest.mark.unit
    @pytest.mark.parametrize("component", [None, "text", 7, []])
    def test_non_mapping_component(self, component):
        """Malformed components get the default token."""
        assert extract_positioning(component).region == "center-center"

    @pytest.mark.unit
    def test_offsets_kept(self):
        """Offsets pass through when no reset rule applies."""
        token = extract_positioning({"x": 75, "y": 120})
        assert token.offset.model_dump() == {"x": 75, "y": 120}

    @pytest.mark.unit
    def test_reset_only_above_threshold(self):
        """x at or below the threshold survives on top-center."""
        base = {"position": "top", "horizontalPosition": "center"}
        assert extract_positioning({**base, "x": 100}).offset.x == 100
        assert extract_positioning({**base, "x": 101}).offset.x == 0

    @pytest.mark.unit
    def test_reset_only_for_top_center(self):
        """Large offsets elsewhere are kept."""
        token = extract_positioning(
            {"x": 500, "position": "bottom", "horizontalPosition": "center"}
        )
        assert token.offset.x == 500

    @pytest.mark.unit
    def test_threshold_argument(self):
        """An explicit threshold overrides the configured one."""
        component = {"x": 150, "position": "top", "horizontalPosition": "center"}
        token = extract_positioning(component, offset_reset_threshold=200)
        assert token.offset.x == 150

    @pytest.mark.unit
    def test_threshold_from_environment(self, monkeypatch):
        """The threshold is read from the environment."""
        monkeypatch.setenv("STYLE_MIGRATE_OFFSET_RESET_THRESHOLD", "20")
        component = {"x": 50, "position": "top", "horizontalPosition": "center"}
        assert extract_positioning(component).offset.x == 0

    @pytest.mark.unit
    @pytest.mark.parametrize("bad", ["12px", True, float("nan"), {"v": 1}])
    def test_non_numeric_offsets_zeroed(self, bad):
        """Offsets that are not finite numbers become 0."""
        token = extract_positioning({"x": bad, "y": bad})
        assert (token.offset.x, token.offset.y) == (0, 0)

    @pytest.mark.unit
    def test_extra_constraints(self):
        """minHeight and width are carried alongside maxWidth."""
        token = extract_positioning(
            {"containerStyle": {"minHeight": "10rem", "width": 300}}
        )
        assert token.constraints is not None
        assert token.constraints.model_dump(by_alias=True, exclude_none=True) == {
            "minHeight": "10rem",
            "width": 300,
        }

    @pytest.mark.unit
    def test_invalid_container_style_ignored(self):
        """A non-mapping containerStyle contributes nothing."""
        token = extract_positioning(
            {"position": "bottom", "horizontalPosition": "left", "containerStyle": "x"}
        )
        assert token.region == "bottom-left"
        assert token.constraints is None

    @pytest.mark.unit
    def test_alignment_only_component(self):
        """containerStyle alignment alone positions the component."""
        token = extract_positioning(
            {
                "containerStyle": {
                    "verticalAlignment": "top",
                    "horizontalAlignment": "center",
                }
            }
        )
        assert token.region == "top-center"
