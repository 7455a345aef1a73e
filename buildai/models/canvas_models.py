"""
Canvas Models for BuildAI
==========================

Models for regions, canvas geometry, catalog entries and placed components.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Region(str, Enum):
    """Fixed page zone a component belongs to."""
    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"


class Point(BaseModel):
    """A pointer coordinate or offset. May be negative."""
    x: float
    y: float


class Position(BaseModel):
    """Canvas-relative position of a placed component."""
    x: float = Field(ge=0)
    y: float = Field(ge=0)


class Footprint(BaseModel):
    """Assumed rendered size of a placed component, used for clamping."""
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class CanvasRect(BaseModel):
    """Bounding rectangle of the canvas as reported by the host."""
    left: float = 0
    top: float = 0
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class CatalogEntry(BaseModel):
    """A selectable component archetype scoped to a region."""
    model_config = ConfigDict(frozen=True)

    type: str
    label: str
    region: Region


class PlacedComponent(BaseModel):
    """A catalog entry instantiated on the canvas."""
    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(frozen=True)
    type: str = Field(frozen=True)
    label: str
    region: Region
    position: Position


class DragPayload(BaseModel):
    """Drag transfer blob sent by the catalog sidebar."""
    id: str
    content: str
    type: str


class CanvasConfig(BaseModel):
    """Geometry constants for placement and clamping."""
    default_width: float = 1200
    default_height: float = 800
    # Footprints intentionally differ between drop and reposition
    drop_footprint: Footprint = Field(default_factory=lambda: Footprint(width=100, height=50))
    drag_footprint: Footprint = Field(default_factory=lambda: Footprint(width=150, height=80))
    drop_bias: Point = Field(default_factory=lambda: Point(x=50, y=25))
    select_x: float = 50

    def default_rect(self) -> CanvasRect:
        return CanvasRect(width=self.default_width, height=self.default_height)


def clamp_position(
    x: float,
    y: float,
    bounds: CanvasRect,
    footprint: Footprint
) -> Position:
    """Clamp a canvas-relative point so the footprint stays inside bounds."""
    return Position(
        x=max(0, min(x, bounds.width - footprint.width)),
        y=max(0, min(y, bounds.height - footprint.height)),
    )
