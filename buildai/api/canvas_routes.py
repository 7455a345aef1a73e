"""
Canvas Routes
==============

API routes for session state, region navigation and the catalog.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional, Dict, Any, List
from pydantic import BaseModel

from ..canvas.state_manager import CanvasSession, StateManager
from ..models.canvas_models import Region

router = APIRouter(prefix="/api/canvas", tags=["canvas"])

# Injected by server
state_manager: Optional[StateManager] = None


class CanvasStateResponse(BaseModel):
    """Response for canvas state."""
    session_id: str
    active_region: Region
    drag_state: str
    dragging_id: Optional[int] = None
    components: List[Dict[str, Any]]
    counts: Dict[str, int]
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class RegionRequest(BaseModel):
    """Request to change the active region."""
    region: Region


def get_canvas_session(session_id: str) -> CanvasSession:
    """Look up a session or fail with 404."""
    if not state_manager:
        raise HTTPException(status_code=500, detail="State manager not initialized")

    session = state_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def region_payload(session: CanvasSession) -> Dict[str, Any]:
    region_layout = session.controller.region_layout()
    return {
        "session_id": session.id,
        "region": region_layout.region.value,
        "label": region_layout.label,
        "baseline": region_layout.baseline,
        "stack_step": region_layout.stack_step,
        "band": {"top": region_layout.band_top, "bottom": region_layout.band_bottom},
        "entries": [entry.model_dump(mode="json") for entry in region_layout.entries],
    }


@router.post("/session")
async def create_session():
    """Create a new canvas session."""
    if not state_manager:
        raise HTTPException(status_code=500, detail="State manager not initialized")

    session_id = state_manager.create_session()
    return {"session_id": session_id, "message": "Session created"}


@router.delete("/session/{session_id}")
async def delete_session(session_id: str):
    """Discard a session."""
    get_canvas_session(session_id)
    state_manager.delete_session(session_id)
    return {"message": "Session deleted", "session_id": session_id}


@router.get("/state/{session_id}")
async def get_state(session_id: str) -> CanvasStateResponse:
    """Get canvas state for session."""
    session = get_canvas_session(session_id)
    return CanvasStateResponse(**session.snapshot())


@router.delete("/state/{session_id}")
async def clear_canvas(session_id: str):
    """Clear all components and return to the header region."""
    get_canvas_session(session_id)
    state_manager.clear_session(session_id)
    return {"message": "Canvas cleared", "session_id": session_id}


@router.put("/region/{session_id}")
async def set_region(session_id: str, request: RegionRequest):
    """Switch the active region."""
    session = get_canvas_session(session_id)
    session.controller.set_active_region(request.region)
    session.touch()
    return region_payload(session)


@router.post("/region/{session_id}/next")
async def next_region(session_id: str):
    session = get_canvas_session(session_id)
    session.controller.next_region()
    session.touch()
    return region_payload(session)


@router.post("/region/{session_id}/previous")
async def previous_region(session_id: str):
    session = get_canvas_session(session_id)
    session.controller.previous_region()
    session.touch()
    return region_payload(session)


@router.get("/catalog/{session_id}")
async def get_catalog(session_id: str):
    """Catalog entries selectable in the session's active region."""
    return region_payload(get_canvas_session(session_id))
