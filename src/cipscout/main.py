"""FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI

from cipscout.api.routes import health, seances
from cipscout.config import settings

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="cipscout API",
    description="Seance listings of the CIP cinema network",
    version="0.1.0",
)

# Include routers
app.include_router(health.router)
app.include_router(seances.router, prefix="/api", tags=["seances"])


def run() -> None:
    """Serve the API with uvicorn."""
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
