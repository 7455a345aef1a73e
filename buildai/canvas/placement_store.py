"""
Placement Store
===============

Ordered collection of placed components plus the active region.
Single source of truth for canvas state within a session.
"""

import itertools
import logging
from typing import Callable, Dict, Iterator, List, Optional

from ..models.canvas_models import (
    CanvasRect, Footprint, PlacedComponent, Position, Region, clamp_position
)

logger = logging.getLogger(__name__)

Predicate = Callable[[PlacedComponent], bool]


class ComponentQuery:
    """
    Lazy filtered view over a store.

    Each iteration re-applies the predicate to the store's current
    contents, so the view can be iterated any number of times.
    """

    def __init__(self, store: "PlacementStore", predicate: Optional[Predicate] = None):
        self._store = store
        self._predicate = predicate

    def __iter__(self) -> Iterator[PlacedComponent]:
        for component in tuple(self._store._components):
            if self._predicate is None or self._predicate(component):
                yield component

    def ids(self) -> List[int]:
        return [c.id for c in self]

    def first(self) -> Optional[PlacedComponent]:
        return next(iter(self), None)


class PlacementStore:
    """Holds placed components in insertion order."""

    def __init__(self):
        self._components: List[PlacedComponent] = []
        # Shared counter keeps ids unique across clear()
        self._ids = itertools.count(1)
        self.active_region: Region = Region.HEADER

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[PlacedComponent]:
        return iter(tuple(self._components))

    def append(
        self,
        component_type: str,
        label: str,
        region: Region,
        position: Position
    ) -> PlacedComponent:
        """Create a record with a fresh id and store it."""
        component = PlacedComponent(
            id=next(self._ids),
            type=component_type,
            label=label,
            region=region,
            position=position,
        )
        self._components.append(component)
        logger.debug(
            f"[PLACEMENT-STORE] Appended id={component.id} type={component.type} "
            f"region={component.region.value} at ({position.x}, {position.y})"
        )
        return component

    def get(self, component_id: int) -> Optional[PlacedComponent]:
        for component in self._components:
            if component.id == component_id:
                return component
        return None

    def remove(self, component_id: int) -> bool:
        """Remove a component; returns False when the id is unknown."""
        initial_len = len(self._components)
        self._components = [c for c in self._components if c.id != component_id]
        return len(self._components) < initial_len

    def update_position(
        self,
        component_id: int,
        x: float,
        y: float,
        bounds: CanvasRect,
        footprint: Footprint
    ) -> Optional[PlacedComponent]:
        """Clamp and store a new position. Unknown ids are ignored."""
        component = self.get(component_id)
        if component is None:
            return None
        component.position = clamp_position(x, y, bounds, footprint)
        return component

    def clear(self) -> None:
        """Drop every component and return to the header region."""
        self._components = []
        self.active_region = Region.HEADER

    def query(self, predicate: Optional[Predicate] = None) -> ComponentQuery:
        return ComponentQuery(self, predicate)

    def in_region(self, region: Region) -> ComponentQuery:
        region = Region(region)
        return self.query(lambda c: c.region == region)

    def count_in_region(self, region: Region) -> int:
        return sum(1 for _ in self.in_region(region))

    def counts_by_region(self) -> Dict[str, int]:
        """Per-region component counts, as shown in the canvas stats panel."""
        counts = {region.value: 0 for region in Region}
        for component in self._components:
            counts[component.region.value] += 1
        return counts
