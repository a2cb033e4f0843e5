"""
FastAPI Backend dla HexFov.

Endpoints:
    GET  /api/health                  - health check
    GET  /api/scenarios               - lista scenariuszy
    GET  /api/scenarios/{id}/fov      - pole widzenia scenariusza
    POST /api/fov                     - pole widzenia dla przesłanej mapy
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.routers import fov, scenarios

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown events."""
    logger.info("HexFov API starting...")
    yield
    logger.info("HexFov API shutting down...")


app = FastAPI(
    title="HexFov API",
    description="Hex grid field of view",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS - allow all origins (including file://)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(fov.router, prefix="/api", tags=["FOV"])
app.include_router(scenarios.router, prefix="/api", tags=["Scenarios"])


@app.get("/api/health")
async def health():
    """API health check."""
    return {"status": "healthy"}
