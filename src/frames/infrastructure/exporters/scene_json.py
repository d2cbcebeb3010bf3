"""JSON scene exporter for browser renderers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from frames.infrastructure.exporters.base import ExporterRegistry
from frames.infrastructure.scene import frame_to_scene
from frames.infrastructure.viewport import Viewport

if TYPE_CHECKING:
    from frames.application.dtos import FrameOutput

SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("scene-json")
class SceneJsonExporter:
    """Exports the frame as a renderable JSON scene.

    Includes the summary, every piece (world-space vertices, faces,
    vertex normals, material) and a camera fitted to the frame.

    Attributes:
        format_name: "scene-json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "scene-json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, viewport: Viewport | None = None, indent: int | None = None) -> None:
        self._viewport = viewport or Viewport()
        self._indent = indent

    def to_dict(self, output: FrameOutput) -> dict[str, Any]:
        frame = output.frame
        scene = frame_to_scene(frame, self._viewport.fit_view(frame.bounding_box()))
        return {
            "schema_version": SCHEMA_VERSION,
            "summary": output.summary.to_dict(),
            **scene,
        }

    def export_string(self, output: FrameOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self._indent)

    def export_bytes(self, output: FrameOutput) -> bytes:
        return self.export_string(output).encode("utf-8")

    def export(self, output: FrameOutput, path: Path) -> None:
        Path(path).write_text(self.export_string(output), encoding="utf-8")
