"""FastAPI REST API for frame generation.

Serves previews (summary, scene geometry and camera) to a browser
renderer and STL archives for printing.

Usage:
    uvicorn frames.web:app --reload
"""

from frames.web.app import app, create_app

__all__ = ["app", "create_app"]
