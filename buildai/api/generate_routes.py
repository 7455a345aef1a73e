"""
Generate Routes
================

Markup generation for a session, and the code generation pass-through.
"""

import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..services.code_client import CodeGenClient
from ..services.markup_generator import EmptyCanvasError
from .canvas_routes import get_canvas_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/generate", tags=["generate"])

# Injected by server
code_client: Optional[CodeGenClient] = None


class CodeRequest(BaseModel):
    """Component list to forward to the model."""
    components: List[Dict[str, Any]]


def get_code_client() -> CodeGenClient:
    if code_client is None:
        raise HTTPException(500, "Code generation client not initialized")
    return code_client


async def _forward(components: List[Dict[str, Any]]):
    result = await get_code_client().generate_code(components)
    if not result.success:
        logger.error(f"[GENERATE] Code generation failed: {result.error}")
        return JSONResponse(status_code=500, content={"error": "Failed to generate code."})
    return {"code": result.code}


@router.post("/{session_id}/markup")
async def generate_markup(session_id: str):
    """Generate the static HTML document for the session's canvas."""
    session = get_canvas_session(session_id)

    try:
        document = session.controller.generate_markup()
    except EmptyCanvasError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"session_id": session_id, "html": document}


@router.post("/code")
async def generate_code(request: CodeRequest):
    """Forward an explicit component list to the text-generation service."""
    return await _forward(request.components)


@router.post("/{session_id}/code")
async def generate_session_code(session_id: str):
    """Forward the session's placed components to the text-generation service."""
    session = get_canvas_session(session_id)
    components = [c.model_dump(mode="json") for c in session.controller.store]
    if not components:
        raise HTTPException(status_code=400, detail=EmptyCanvasError.notice)
    return await _forward(components)
