"""FastAPI application factory for the frame preview and export API."""

from fastapi import FastAPI

from frames.web.exceptions import register_exception_handlers
from frames.web.routers import export_router, frames_router

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the API: frame preview routes, export routes and a health check."""
    app = FastAPI(
        title="Frame Generator API",
        description="Preview parametric picture frames and download printable STL pieces",
        version="1.0.0",
    )
    register_exception_handlers(app)
    app.include_router(frames_router, prefix=API_PREFIX)
    app.include_router(export_router, prefix=API_PREFIX)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
