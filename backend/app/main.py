"""FastAPI application."""

from fastapi import FastAPI

from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.itinerary import router as itinerary_router
from backend.app.config import get_settings
from backend.app.utils.logging import configure_logging

configure_logging(get_settings().log_level)

app = FastAPI(title="AI Travel Planner API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(itinerary_router, tags=["itinerary"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "AI Travel Planner API", "version": "0.1.0"}
