"""STL exporters for assembled frames."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from frames.infrastructure.archive import ZipArchivePackager
from frames.infrastructure.exporters.base import ExporterRegistry
from frames.infrastructure.stl_exporter import StlExporter, StlMeshBuilder

if TYPE_CHECKING:
    from frames.application.dtos import FrameOutput


@ExporterRegistry.register("stl-zip")
class StlZipExporter:
    """Exports every printable piece as its own STL, bundled in a zip.

    Attributes:
        format_name: "stl-zip"
        file_extension: "zip"
    """

    format_name: ClassVar[str] = "stl-zip"
    file_extension: ClassVar[str] = "zip"

    def __init__(
        self,
        mode: str = "binary",
        corner_insert_files: int = 2,
        packager: ZipArchivePackager | None = None,
    ) -> None:
        self._stl = StlExporter(mode=mode)
        self._packager = packager or ZipArchivePackager()
        self._corner_insert_files = corner_insert_files

    def files(self, output: FrameOutput) -> dict[str, bytes]:
        """STL payload per printable piece, keyed by file name."""
        meshes = output.frame.printable_meshes(self._corner_insert_files)
        return {
            f"{stem}.{self._stl.file_extension}": self._stl.serialize(mesh, stem)
            for stem, mesh in meshes.items()
        }

    def export_bytes(self, output: FrameOutput) -> bytes:
        return self._packager.package(self.files(output))

    def export(self, output: FrameOutput, path: Path) -> None:
        self._packager.write(self.files(output), path)


@ExporterRegistry.register("stl")
class StlFrameExporter:
    """Exports the assembled frame as a single STL in frame coordinates.

    Lip overlays are left out; rails and corner inserts sit where they do
    in the preview.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(self, mesh_builder: StlMeshBuilder | None = None, mode: str = "binary") -> None:
        self._exporter = StlExporter(mesh_builder=mesh_builder, mode=mode)

    def export_bytes(self, output: FrameOutput) -> bytes:
        return self._exporter.serialize_frame(output.frame)

    def export(self, output: FrameOutput, path: Path) -> None:
        self._exporter.export_frame_to_file(output.frame, path)


__all__ = ["StlFrameExporter", "StlZipExporter"]
