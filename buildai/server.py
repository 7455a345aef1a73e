"""
BuildAI Server
===============

FastAPI server for the sequential website builder.

Features:
- Per-session canvas with header, body and footer regions
- Drop, select, reposition and delete of catalog components
- Deterministic static HTML generation grouped by region
- Pass-through to an Ollama-compatible model for React code generation
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from .canvas.catalog import CATALOG
from .canvas.layout import REGION_ORDER, resolve
from .canvas.state_manager import StateManager
from .models.canvas_models import CanvasConfig
from .services.code_client import CodeGenClient, OLLAMA_API_URL

# Import API routers
from .api import canvas_routes, element_routes, generate_routes


# Shared service instances
state_manager: StateManager = None
code_client: CodeGenClient = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global state_manager, code_client

    logger.info("[BUILDAI] Starting up...")

    state_manager = StateManager(config=CanvasConfig())
    code_client = CodeGenClient()

    # Inject into route modules
    canvas_routes.state_manager = state_manager
    generate_routes.code_client = code_client

    logger.info("[BUILDAI] Services initialized")

    yield

    # Cleanup
    logger.info("[BUILDAI] Shutting down...")
    if code_client:
        await code_client.close()


# Create FastAPI app
app = FastAPI(
    title="BuildAI",
    description="Sequential website builder with a drag-and-drop canvas",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(canvas_routes.router)
app.include_router(element_routes.router)
app.include_router(generate_routes.router)


@app.get("/")
async def root():
    """Return API info."""
    return {
        "service": "BuildAI",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "canvas": "/api/canvas/state/{session_id}",
            "elements": "/api/element/{session_id}/{component_id}",
            "markup": "/api/generate/{session_id}/markup",
            "code": "/api/generate/code"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "buildai",
        "sessions": state_manager.session_count() if state_manager else 0,
        "model_api": OLLAMA_API_URL
    }


@app.get("/api/info")
async def api_info():
    """Get catalog and canvas geometry."""
    config = state_manager.config if state_manager else CanvasConfig()
    regions = []
    for region in REGION_ORDER:
        region_layout = resolve(region)
        regions.append({
            "region": region.value,
            "label": region_layout.label,
            "band": {"top": region_layout.band_top, "bottom": region_layout.band_bottom},
            "baseline": region_layout.baseline,
            "components": [
                {"type": entry.type, "label": entry.label} for entry in CATALOG[region]
            ]
        })

    return {
        "service": "BuildAI",
        "version": "1.0.0",
        "regions": regions,
        "canvas": {
            "default_width": config.default_width,
            "default_height": config.default_height,
            "drop_footprint": config.drop_footprint.model_dump(),
            "drag_footprint": config.drag_footprint.model_dump(),
            "drop_bias": config.drop_bias.model_dump(),
            "stack_step": resolve(REGION_ORDER[0]).stack_step
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "buildai.server:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "3001")),
        reload=True
    )
