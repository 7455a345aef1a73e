"""
Region Layout Resolver
======================

Maps a region to its canvas band, catalog subset and stacking parameters.
"""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict

from ..models.canvas_models import CatalogEntry, Region
from .catalog import entries_for

REGION_ORDER: Tuple[Region, ...] = (Region.HEADER, Region.BODY, Region.FOOTER)

# Vertical spacing between select-to-place components in one region
STACK_STEP = 80


class RegionLayout(BaseModel):
    """Resolved layout parameters for one region."""
    model_config = ConfigDict(frozen=True)

    region: Region
    label: str
    band_top: float
    band_bottom: Optional[float]  # None extends to the canvas bottom
    baseline: float
    stack_step: float = STACK_STEP
    entries: Tuple[CatalogEntry, ...]

    def slot_y(self, index: int) -> float:
        """Default y for the index-th component stacked in this region."""
        return self.baseline + self.stack_step * index

    def contains_y(self, y: float) -> bool:
        if y < self.band_top:
            return False
        return self.band_bottom is None or y < self.band_bottom


_BANDS = {
    Region.HEADER: (0, 150, 20),
    Region.BODY: (150, 600, 200),
    Region.FOOTER: (600, None, 600),
}


def resolve(region: Region) -> RegionLayout:
    """Resolve the layout for a region."""
    region = Region(region)
    top, bottom, baseline = _BANDS[region]
    return RegionLayout(
        region=region,
        label=region.value.capitalize(),
        band_top=top,
        band_bottom=bottom,
        baseline=baseline,
        entries=entries_for(region),
    )


def region_at(y: float) -> Region:
    """Region whose canvas band contains y. Points above the canvas map to header."""
    for region in reversed(REGION_ORDER):
        if resolve(region).contains_y(y):
            return region
    return Region.HEADER


def next_region(region: Region) -> Region:
    """Following region in page order; footer stays footer."""
    idx = REGION_ORDER.index(Region(region))
    return REGION_ORDER[min(idx + 1, len(REGION_ORDER) - 1)]


def previous_region(region: Region) -> Region:
    """Preceding region in page order; header stays header."""
    idx = REGION_ORDER.index(Region(region))
    return REGION_ORDER[max(idx - 1, 0)]
