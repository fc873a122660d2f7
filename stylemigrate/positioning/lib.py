"""Grid region resolution and positioning extraction.

Legacy components can express placement through four independent systems
at once:

1. Absolute coordinates (`x`, `y`)
2. Position enums (`position`, `horizontalPosition`)
3. Container alignment (`containerStyle.verticalAlignment`,
   `containerStyle.horizontalAlignment`)
4. Layout constraints (`containerStyle.maxWidth` and friends)

This module folds them into a single PositioningToken: one of nine grid
regions, a pixel offset and optional constraints. Which system wins a
conflict is decided by REGION_RULES, evaluated in order.
"""

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from stylemigrate.config import get_offset_reset_threshold
from stylemigrate.core import get_logger
from stylemigrate.tokens import (
    GridRegion,
    HorizontalPosition,
    PositionConstraints,
    PositioningToken,
    PositionOffset,
    VerticalPosition,
)

logger = get_logger("migration.positioning")

VERTICAL_SYNONYMS: dict[str, VerticalPosition] = {
    "top": VerticalPosition.TOP,
    "center": VerticalPosition.CENTER,
    "middle": VerticalPosition.CENTER,
    "bottom": VerticalPosition.BOTTOM,
}

HORIZONTAL_SYNONYMS: dict[str, HorizontalPosition] = {
    "left": HorizontalPosition.LEFT,
    "center": HorizontalPosition.CENTER,
    "middle": HorizontalPosition.CENTER,
    "right": HorizontalPosition.RIGHT,
}

# containerStyle keys copied into PositioningToken.constraints
CONSTRAINT_KEYS: tuple[str, ...] = ("maxWidth", "minHeight", "width")


def normalize_vertical(value: Any) -> VerticalPosition:
    """Normalize a vertical signal; unrecognized values become CENTER."""
    if isinstance(value, str):
        return VERTICAL_SYNONYMS.get(value.strip().lower(), VerticalPosition.CENTER)
    return VerticalPosition.CENTER


def normalize_horizontal(value: Any) -> HorizontalPosition:
    """Normalize a horizontal signal; unrecognized values become CENTER."""
    if isinstance(value, str):
        return HORIZONTAL_SYNONYMS.get(
            value.strip().lower(), HorizontalPosition.CENTER
        )
    return HorizontalPosition.CENTER


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


@dataclass(frozen=True)
class PositionSignals:
    """The four legacy signals that can name a grid region."""

    position: Any = None
    horizontal_position: Any = None
    vertical_alignment: Any = None
    horizontal_alignment: Any = None

    @property
    def has_position(self) -> bool:
        return _is_present(self.position) and _is_present(self.horizontal_position)

    @property
    def has_any_position(self) -> bool:
        return _is_present(self.position) or _is_present(self.horizontal_position)

    @property
    def has_alignment(self) -> bool:
        return _is_present(self.vertical_alignment) and _is_present(
            self.horizontal_alignment
        )

    @property
    def alignment_is_default(self) -> bool:
        # Raw values; synonyms such as "middle" still count as an override.
        return all(
            isinstance(value, str) and value.strip() == "center"
            for value in self.alignment_pair()
        )

    def position_pair(self) -> tuple[Any, Any]:
        return self.position, self.horizontal_position

    def alignment_pair(self) -> tuple[Any, Any]:
        return self.vertical_alignment, self.horizontal_alignment


@dataclass(frozen=True)
class RegionRule:
    """A named priority rule choosing which signal pair names the region."""

    name: str
    applies: Callable[[PositionSignals], bool]
    select: Callable[[PositionSignals], tuple[Any, Any]]


REGION_RULES: tuple[RegionRule, ...] = (
    RegionRule(
        name="alignment-only",
        applies=lambda s: not s.has_any_position and s.has_alignment,
        select=PositionSignals.alignment_pair,
    ),
    RegionRule(
        name="alignment-override",
        applies=lambda s: s.has_position
        and s.has_alignment
        and not s.alignment_is_default,
        select=PositionSignals.alignment_pair,
    ),
    RegionRule(
        name="position",
        applies=lambda s: True,
        select=PositionSignals.position_pair,
    ),
)


def match_region_rule(signals: PositionSignals) -> RegionRule:
    """Return the first rule in REGION_RULES that applies to the signals."""
    for rule in REGION_RULES:
        if rule.applies(signals):
            return rule
    # The last rule always applies.
    return REGION_RULES[-1]


def resolve_region(
    position: Any = None,
    horizontal_position: Any = None,
    vertical_alignment: Any = None,
    horizontal_alignment: Any = None,
) -> GridRegion:
    """Resolve the legacy positioning signals to one grid region.

    Priority:
        1. No position signal but both alignment signals: use alignment.
        2. All four signals and alignment is not center-center: alignment
           overrides position.
        3. Otherwise use the position pair, missing axes default to center.

    Args:
        position: Legacy vertical enum (top, center, bottom).
        horizontal_position: Legacy horizontal enum (left, center, right).
        vertical_alignment: containerStyle.verticalAlignment.
        horizontal_alignment: containerStyle.horizontalAlignment.

    Returns:
        GridRegion: The resolved region.

    Example:
        >>> resolve_region("center", "left", "bottom", "right")
        <GridRegion.BOTTOM_RIGHT: 'bottom-right'>
    """
    signals = PositionSignals(
        position=position,
        horizontal_position=horizontal_position,
        vertical_alignment=vertical_alignment,
        horizontal_alignment=horizontal_alignment,
    )
    vertical, horizontal = match_region_rule(signals).select(signals)
    return GridRegion.from_axes(
        normalize_vertical(vertical), normalize_horizontal(horizontal)
    )


def split_region(region: GridRegion | str) -> tuple[str, str]:
    """Split a region into its legacy (position, horizontalPosition) pair.

    Raises:
        ValueError: If the value is not one of the nine regions.
    """
    resolved = GridRegion(region)
    return resolved.vertical.value, resolved.horizontal.value


def _coerce_offset(value: Any, axis: str) -> int | float:
    """Return a finite number for an offset axis, 0 otherwise."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.debug(f"Ignoring non-numeric {axis} offset {value!r}")
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


def _extract_constraints(
    container_style: Mapping[str, Any],
) -> PositionConstraints | None:
    values = {}
    for key in CONSTRAINT_KEYS:
        value = container_style.get(key)
        if value is None or value == "" or isinstance(value, bool):
            continue
        if isinstance(value, (str, int, float)):
            values[key] = value
    if not values:
        return None
    return PositionConstraints.model_validate(values)


def extract_positioning(
    component: Mapping[str, Any] | None,
    offset_reset_threshold: int | None = None,
) -> PositioningToken:
    """Consolidate a legacy component's placement into a PositioningToken.

    The result carries only region, offset and constraints; none of the
    legacy source fields are retained.

    A top-center component with an x offset above the threshold keeps a
    stale absolute coordinate from the old editor, so x is reset to 0.

    Args:
        component: Legacy component mapping.
        offset_reset_threshold: x above which a top-center offset is reset.
            Read from STYLE_MIGRATE_OFFSET_RESET_THRESHOLD when None.

    Returns:
        PositioningToken: The consolidated placement.

    Example:
        >>> token = extract_positioning({
        ...     "x": 115, "y": 40,
        ...     "position": "top", "horizontalPosition": "center",
        ...     "containerStyle": {"maxWidth": "85%"},
        ... })
        >>> token.region, token.offset.x, token.offset.y
        ('top-center', 0, 40)
    """
    if not isinstance(component, Mapping):
        component = {}

    container_style = component.get("containerStyle")
    if not isinstance(container_style, Mapping):
        container_style = {}

    region = resolve_region(
        component.get("position"),
        component.get("horizontalPosition"),
        container_style.get("verticalAlignment"),
        container_style.get("horizontalAlignment"),
    )

    x = _coerce_offset(component.get("x"), "x")
    y = _coerce_offset(component.get("y"), "y")

    threshold = get_offset_reset_threshold(offset_reset_threshold)
    if (
        component.get("position") == "top"
        and component.get("horizontalPosition") == "center"
        and x > threshold
    ):
        logger.debug(
            f"Resetting stale x offset {x} on top-center component "
            f"{component.get('id')!r}"
        )
        x = 0

    return PositioningToken(
        region=region,
        offset=PositionOffset(x=x, y=y),
        constraints=_extract_constraints(container_style),
    )


__all__ = [
    "VERTICAL_SYNONYMS",
    "HORIZONTAL_SYNONYMS",
    "CONSTRAINT_KEYS",
    "normalize_vertical",
    "normalize_horizontal",
    "PositionSignals",
    "RegionRule",
    "REGION_RULES",
    "match_region_rule",
    "resolve_region",
    "split_region",
    "extract_positioning",
]
