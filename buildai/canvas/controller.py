"""
Pointer Interaction Controller
==============================

Turns host pointer and drag events into placement store mutations.

Interaction modes:
- Drop-to-place: decode a drag payload and place it under the cursor
- Select-to-place: stack a catalog entry into the active region
- Reposition-by-drag: press / move / release on a placed component
- Delete: remove a placed component by id

The host event layer calls the transition methods directly; the controller
never registers listeners of its own.
"""

import logging
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ValidationError

from ..models.canvas_models import (
    CanvasConfig, CanvasRect, CatalogEntry, DragPayload, PlacedComponent, Point, Region,
    clamp_position
)
from ..services.markup_generator import EmptyCanvasError, generate_markup
from . import layout
from .catalog import find_entry
from .placement_store import PlacementStore

logger = logging.getLogger(__name__)


class UnknownComponentError(ValueError):
    """Raised when a selection is not in the active region's catalog."""


class DragState(str, Enum):
    """Reposition state machine states."""
    IDLE = "idle"
    DRAGGING = "dragging"


class RepositionSession(BaseModel):
    """An active press-and-drag on a placed component."""
    component_id: int
    offset: Point


class PointerController:
    """
    Owns a PlacementStore and the reposition session for one canvas.

    All methods are synchronous and must be called in event order.
    """

    def __init__(
        self,
        store: Optional[PlacementStore] = None,
        config: Optional[CanvasConfig] = None
    ):
        self.store = store or PlacementStore()
        self.config = config or CanvasConfig()
        self._session: Optional[RepositionSession] = None

    # ----- State -----

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self._session else DragState.IDLE

    @property
    def session(self) -> Optional[RepositionSession]:
        return self._session

    @property
    def active_region(self) -> Region:
        return self.store.active_region

    def set_active_region(self, region: Region) -> Region:
        self.store.active_region = Region(region)
        logger.info(f"[CONTROLLER] Active region -> {self.store.active_region.value}")
        return self.store.active_region

    def next_region(self) -> Region:
        return self.set_active_region(layout.next_region(self.active_region))

    def previous_region(self) -> Region:
        return self.set_active_region(layout.previous_region(self.active_region))

    def region_layout(self) -> layout.RegionLayout:
        return layout.resolve(self.active_region)

    # ----- Drop-to-place -----

    def handle_drop(
        self,
        payload: str,
        pointer: Point,
        canvas: CanvasRect
    ) -> Optional[PlacedComponent]:
        """
        Place a component dropped from the catalog sidebar.

        Returns the new component, or None when the drop was suppressed
        (reposition in progress) or the payload could not be decoded.
        """
        if self._session is not None:
            logger.debug("[CONTROLLER] Drop ignored while repositioning")
            return None

        try:
            data = DragPayload.model_validate_json(payload)
        except ValidationError as e:
            logger.error(f"[CONTROLLER] Error handling drop: {e.error_count()} payload error(s)")
            return None

        region = self.active_region
        if find_entry(region, data.type) is None:
            logger.error(
                f"[CONTROLLER] Error handling drop: type={data.type!r} "
                f"not in {region.value} catalog"
            )
            return None

        bias = self.config.drop_bias
        position = clamp_position(
            pointer.x - canvas.left - bias.x,
            pointer.y - canvas.top - bias.y,
            canvas,
            self.config.drop_footprint,
        )
        return self.store.append(data.type, data.content, region, position)

    # ----- Select-to-place -----

    def select_catalog_entry(
        self,
        entry: Union[CatalogEntry, str],
        canvas: Optional[CanvasRect] = None
    ) -> PlacedComponent:
        """Stack a catalog entry below the existing components of the active region."""
        region = self.active_region
        component_type = entry.type if isinstance(entry, CatalogEntry) else entry
        catalog_entry = find_entry(region, component_type)
        if catalog_entry is None:
            raise UnknownComponentError(
                f"'{component_type}' is not available in the {region.value} region"
            )

        region_layout = layout.resolve(region)
        y = region_layout.slot_y(self.store.count_in_region(region))
        position = clamp_position(
            self.config.select_x,
            y,
            canvas or self.config.default_rect(),
            self.config.drop_footprint,
        )
        return self.store.append(catalog_entry.type, catalog_entry.label, region, position)

    # ----- Reposition-by-drag -----

    def press(
        self,
        component_id: int,
        pointer: Point,
        canvas: CanvasRect,
        on_delete_control: bool = False
    ) -> bool:
        """Begin a reposition session. Returns True when dragging started."""
        if on_delete_control:
            return False

        component = self.store.get(component_id)
        if component is None:
            logger.debug(f"[CONTROLLER] Press on unknown component id={component_id}")
            return False

        offset = Point(
            x=pointer.x - canvas.left - component.position.x,
            y=pointer.y - canvas.top - component.position.y,
        )
        self._session = RepositionSession(component_id=component_id, offset=offset)
        logger.debug(f"[CONTROLLER] Starting drag for component id={component_id}")
        return True

    def move(self, pointer: Point, canvas: CanvasRect) -> Optional[PlacedComponent]:
        """Update the dragged component's position. No-op when idle."""
        if self._session is None:
            return None
        offset = self._session.offset
        return self.store.update_position(
            self._session.component_id,
            pointer.x - canvas.left - offset.x,
            pointer.y - canvas.top - offset.y,
            canvas,
            self.config.drag_footprint,
        )

    def release(self) -> Optional[PlacedComponent]:
        """End the reposition session at the last computed position."""
        if self._session is None:
            return None
        component_id = self._session.component_id
        self._session = None
        logger.debug(f"[CONTROLLER] Ending drag for component id={component_id}")
        return self.store.get(component_id)

    # ----- Delete / reset -----

    def delete(self, component_id: int) -> bool:
        removed = self.store.remove(component_id)
        if removed:
            logger.info(f"[CONTROLLER] Deleted component id={component_id}")
        return removed

    def reset(self) -> None:
        """Clear the canvas and return to the header region."""
        self._session = None
        self.store.clear()
        logger.info("[CONTROLLER] Canvas cleared")

    # ----- Generation -----

    def generate_markup(self) -> str:
        """Generate the document, refusing an empty canvas."""
        if len(self.store) == 0:
            raise EmptyCanvasError()
        return generate_markup(self.store)
