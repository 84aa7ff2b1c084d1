"""API routes package."""

from app.routes.health import router as health_router
from app.routes.summaries import router as summaries_router

__all__ = ["health_router", "summaries_router"]
