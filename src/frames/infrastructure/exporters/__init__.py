"""Exporter framework for frame outputs.

Registered exporters:
- scene-json: Renderable JSON scene with camera
- stl: Whole frame as one STL in frame coordinates
- stl-zip: One STL per printable piece, bundled in a zip

Usage:
    from frames.infrastructure.exporters import ExporterRegistry

    formats = ExporterRegistry.available_formats()
    exporter = ExporterRegistry.get("stl-zip")(corner_insert_files=4)
"""

from .base import Exporter, ExporterRegistry, ExportManager
from .scene_json import SceneJsonExporter
from .stl import StlFrameExporter, StlZipExporter

__all__ = [
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "SceneJsonExporter",
    "StlFrameExporter",
    "StlZipExporter",
]
