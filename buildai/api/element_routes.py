"""
Element Routes
===============

API routes that forward pointer and drag events to a session's controller.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional
from pydantic import BaseModel

from ..canvas.controller import UnknownComponentError
from ..models.canvas_models import CanvasRect, Point
from .canvas_routes import get_canvas_session

router = APIRouter(prefix="/api/element", tags=["elements"])


class DropRequest(BaseModel):
    """A drop of a sidebar item onto the canvas."""
    payload: str
    pointer: Point
    canvas: CanvasRect


class SelectRequest(BaseModel):
    """A catalog selection from the component picker."""
    type: str
    canvas: Optional[CanvasRect] = None


class PressRequest(BaseModel):
    """Pointer press on a placed component."""
    pointer: Point
    canvas: CanvasRect
    on_delete_control: bool = False


class MoveRequest(BaseModel):
    """Pointer move during a reposition session."""
    pointer: Point
    canvas: CanvasRect


class ElementResponse(BaseModel):
    """Response for element operations."""
    component: Optional[dict] = None
    drag_state: str
    message: str


@router.post("/{session_id}/drop")
async def drop_component(session_id: str, request: DropRequest) -> ElementResponse:
    """Place a dragged catalog item. Undecodable payloads are ignored."""
    session = get_canvas_session(session_id)
    controller = session.controller

    component = controller.handle_drop(request.payload, request.pointer, request.canvas)
    if component is None:
        return ElementResponse(drag_state=controller.state.value, message="Drop ignored")

    session.touch()
    return ElementResponse(
        component=component.model_dump(mode="json"),
        drag_state=controller.state.value,
        message="Component placed"
    )


@router.post("/{session_id}/select")
async def select_component(session_id: str, request: SelectRequest) -> ElementResponse:
    """Stack a catalog entry into the active region."""
    session = get_canvas_session(session_id)
    controller = session.controller

    try:
        component = controller.select_catalog_entry(request.type, request.canvas)
    except UnknownComponentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    session.touch()
    return ElementResponse(
        component=component.model_dump(mode="json"),
        drag_state=controller.state.value,
        message="Component placed"
    )


@router.post("/{session_id}/move")
async def move_component(session_id: str, request: MoveRequest) -> ElementResponse:
    session = get_canvas_session(session_id)
    controller = session.controller

    component = controller.move(request.pointer, request.canvas)
    if component is not None:
        session.touch()
    return ElementResponse(
        component=component.model_dump(mode="json") if component else None,
        drag_state=controller.state.value,
        message="Component moved" if component else "No component moved"
    )


@router.post("/{session_id}/release")
async def release_component(session_id: str) -> ElementResponse:
    session = get_canvas_session(session_id)
    controller = session.controller

    component = controller.release()
    return ElementResponse(
        component=component.model_dump(mode="json") if component else None,
        drag_state=controller.state.value,
        message="Drag ended"
    )


@router.post("/{session_id}/{component_id}/press")
async def press_component(
    session_id: str,
    component_id: int,
    request: PressRequest
) -> ElementResponse:
    """Begin repositioning a placed component."""
    session = get_canvas_session(session_id)
    controller = session.controller

    started = controller.press(
        component_id,
        request.pointer,
        request.canvas,
        on_delete_control=request.on_delete_control
    )
    component = controller.store.get(component_id)
    return ElementResponse(
        component=component.model_dump(mode="json") if component else None,
        drag_state=controller.state.value,
        message="Drag started" if started else "Drag not started"
    )


@router.delete("/{session_id}/{component_id}")
async def remove_component(session_id: str, component_id: int):
    """Remove a component. Unknown ids are not an error."""
    session = get_canvas_session(session_id)

    removed = session.controller.delete(component_id)
    if removed:
        session.touch()
    return {"message": "Component removed" if removed else "Component not found",
            "component_id": component_id,
            "removed": removed}
