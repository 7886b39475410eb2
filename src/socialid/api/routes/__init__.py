"""API route modules."""

from socialid.api.routes.health import router as health_router
from socialid.api.routes.records import router as records_router

__all__ = [
    "health_router",
    "records_router",
]
