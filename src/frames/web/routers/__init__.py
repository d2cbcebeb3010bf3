"""API routers for the REST API."""

from frames.web.routers.export import router as export_router
from frames.web.routers.frames import router as frames_router

__all__ = [
    "export_router",
    "frames_router",
]
