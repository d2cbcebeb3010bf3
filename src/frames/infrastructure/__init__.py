"""Infrastructure layer - serializers, packaging, rendering support, formatters."""

from .archive import ZipArchivePackager
from .formatters import (
    FrameSummaryFormatter,
    JsonSummaryFormatter,
    ParametersFormatter,
    StyleTableFormatter,
)
from .scene import SceneRenderer, frame_to_scene
from .stl_exporter import StlExporter, StlMeshBuilder
from .viewport import CameraPose, Viewport

from .exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    SceneJsonExporter,
    StlFrameExporter,
    StlZipExporter,
)

__all__ = [
    "CameraPose",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "FrameSummaryFormatter",
    "JsonSummaryFormatter",
    "ParametersFormatter",
    "SceneJsonExporter",
    "SceneRenderer",
    "StlExporter",
    "StlFrameExporter",
    "StlMeshBuilder",
    "StlZipExporter",
    "StyleTableFormatter",
    "Viewport",
    "ZipArchivePackager",
    "frame_to_scene",
]
