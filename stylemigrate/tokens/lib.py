"""Design-token models for unified style documents.

This module defines the unified representation that replaces the legacy
per-component inline styles. Legacy documents stay plain dictionaries because
they come from outside the engine and may be malformed; everything the engine
produces is expressed with the Pydantic models below and serialized back to
the camelCase document shape with `UnifiedConfig.to_document()`.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_serializer

UNIFIED_VERSION = "2.0"

# Fields with a fixed meaning on a legacy component. Anything else is a
# custom field and is carried over verbatim.
LEGACY_COMPONENT_FIELDS: frozenset[str] = frozenset(
    {
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
)

# Top-level document keys that never name a page type.
DOCUMENT_METADATA_KEYS: frozenset[str] = frozenset({"version", "designTokens"})

# Token reference fields on a unified component.
REFERENCE_FIELDS: tuple[str, ...] = ("typography", "container", "positioning")

# Flat property -> value maps.
TypographyToken = dict[str, Any]
ContainerToken = dict[str, Any]

# Legacy shapes are untyped JSON objects.
LegacyComponent = dict[str, Any]
LegacyConfig = dict[str, Any]


class StyleCategory(str, Enum):
    """Bucket a style property belongs to."""

    TYPOGRAPHY = "typography"
    CONTAINER = "container"
    POSITIONING = "positioning"
    UNKNOWN = "unknown"


class VerticalPosition(str, Enum):
    """Vertical axis of the 3x3 layout grid."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class HorizontalPosition(str, Enum):
    """Horizontal axis of the 3x3 layout grid."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class GridRegion(str, Enum):
    """One of the nine cells of the page layout grid.

    Values are "{vertical}-{horizontal}", e.g. "top-center".
    """

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER_CENTER = "center-center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def vertical(self) -> VerticalPosition:
        return VerticalPosition(self.value.split("-", 1)[0])

    @property
    def horizontal(self) -> HorizontalPosition:
        return HorizontalPosition(self.value.split("-", 1)[1])

    @classmethod
    def from_axes(
        cls, vertical: VerticalPosition, horizontal: HorizontalPosition
    ) -> "GridRegion":
        """Build a region from its two axes."""
        return cls(f"{vertical.value}-{horizontal.value}")


class _DocumentModel(BaseModel):
    """Base for models whose optional schema fields are omitted when None.

    Only the fields named in `omit_when_none` are dropped; extra fields are
    user data and keep a None value.
    """

    omit_when_none: ClassVar[tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def _omit_unset_fields(self, handler: Any, info: Any):
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name in self.omit_when_none:
            alias = type(self).model_fields[name].alias
            key = alias if info.by_alias and alias else name
            if key in data and data[key] is None:
                del data[key]
        return data


class PositionOffset(BaseModel):
    """Pixel offset from the anchor of a grid region."""

    x: int | float = Field(default=0, description="Horizontal offset in pixels")
    y: int | float = Field(default=0, description="Vertical offset in pixels")


class PositionConstraints(_DocumentModel):
    """Size constraints applied to a positioned component."""

    max_width: str | int | float | None = Field(
        default=None, alias="maxWidth", description="CSS max-width"
    )
    min_height: str | int | float | None = Field(
        default=None, alias="minHeight", description="CSS min-height"
    )
    width: str | int | float | None = Field(default=None, description="CSS width")

    omit_when_none = ("max_width", "min_height", "width")

    model_config = {"populate_by_name": True}

    def is_empty(self) -> bool:
        return self.max_width is None and self.min_height is None and self.width is None


class PositioningToken(_DocumentModel):
    """Consolidated placement of a component.

    Replaces the four legacy positioning systems (absolute x/y, the
    position enums, container alignment and inline layout properties).

    Attributes:
        region: Grid cell the component is anchored to.
        offset: Pixel offset from the region anchor.
        constraints: Optional size constraints.
    """

    region: GridRegion = Field(
        default=GridRegion.CENTER_CENTER,
        description="Grid region the component is anchored to",
    )
    offset: PositionOffset = Field(
        default_factory=PositionOffset,
        description="Pixel offset from the region anchor",
    )
    constraints: PositionConstraints | None = Field(
        default=None,
        description="Size constraints, omitted when none apply",
    )

    omit_when_none = ("constraints",)

    model_config = {"use_enum_values": True, "validate_default": True}


class DesignTokenTable(BaseModel):
    """The three token tables of a unified document, keyed by token id."""

    typography: dict[str, TypographyToken] = Field(default_factory=dict)
    containers: dict[str, ContainerToken] = Field(default_factory=dict)
    positioning: dict[str, PositioningToken] = Field(default_factory=dict)

    def table_for(self, category: StyleCategory) -> dict[str, Any]:
        """Return the table holding tokens of a category.

        Raises:
            KeyError: For StyleCategory.UNKNOWN, which has no table.
        """
        tables = {
            StyleCategory.TYPOGRAPHY: self.typography,
            StyleCategory.CONTAINER: self.containers,
            StyleCategory.POSITIONING: self.positioning,
        }
        return tables[StyleCategory(category)]

    def get_token(self, category: StyleCategory, token_id: str | None) -> Any | None:
        """Look up a token by id, returning None when it does not resolve."""
        if token_id is None:
            return None
        return self.table_for(category).get(token_id)

    def merge(self, other: "DesignTokenTable") -> None:
        """Merge another table into this one (later entries win)."""
        self.typography.update(other.typography)
        self.containers.update(other.containers)
        self.positioning.update(other.positioning)


class UnifiedComponent(_DocumentModel):
    """A page component that references design tokens instead of inline styles.

    Token fields hold ids into `DesignTokenTable`, never inline values.
    Unknown fields are custom data and are preserved as extras.
    """

    id: str = Field(..., description="Component identifier")
    type: str = Field(default="text", description="Component type, e.g. 'text'")
    content: Any = Field(default=None, description="Component content")
    typography: str | None = Field(default=None, description="Typography token id")
    container: str | None = Field(default=None, description="Container token id")
    positioning: str | None = Field(default=None, description="Positioning token id")

    omit_when_none = ("content", "typography", "container", "positioning")

    model_config = {"extra": "allow"}

    @property
    def custom_fields(self) -> dict[str, Any]:
        """Fields outside the unified schema, in insertion order."""
        return dict(self.model_extra or {})


class PageTypeConfig(_DocumentModel):
    """Components and background of one page type (cover, page, ...)."""

    background: Any = Field(default=None, description="Page background, opaque")
    components: list[UnifiedComponent] = Field(default_factory=list)

    omit_when_none = ("background",)


class UnifiedConfig(BaseModel):
    """A complete unified style document.

    Example:
        >>> config = UnifiedConfig()
        >>> config.to_document()
        {'version': '2.0', 'designTokens': {'typography': {}, 'containers': {}, 'positioning': {}}, 'pageTypes': {}}
    """

    version: str = Field(default=UNIFIED_VERSION, description="Document version")
    design_tokens: DesignTokenTable = Field(
        default_factory=DesignTokenTable, alias="designTokens"
    )
    page_types: dict[str, PageTypeConfig] = Field(
        default_factory=dict, alias="pageTypes"
    )

    model_config = {"populate_by_name": True}

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON document shape.

        Optional schema fields whose value is None are omitted; custom
        component fields are kept as they are, None included.
        """
        return self.model_dump(mode="json", by_alias=True)


def export_json_schema() -> dict[str, Any]:
    """Export the UnifiedConfig JSON Schema.

    Returns:
        dict: JSON Schema describing unified style documents.
    """
    return UnifiedConfig.model_json_schema(by_alias=True)


__all__ = [
    # Constants
    "UNIFIED_VERSION",
    "LEGACY_COMPONENT_FIELDS",
    "DOCUMENT_METADATA_KEYS",
    "REFERENCE_FIELDS",
    # Aliases
    "TypographyToken",
    "ContainerToken",
    "LegacyComponent",
    "LegacyConfig",
    # Enums
    "StyleCategory",
    "VerticalPosition",
    "HorizontalPosition",
    "GridRegion",
    # Models
    "PositionOffset",
    "PositionConstraints",
    "PositioningToken",
    "DesignTokenTable",
    "UnifiedComponent",
    "PageTypeConfig",
    "UnifiedConfig",
    "export_json_schema",
]
