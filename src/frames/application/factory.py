"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from frames.domain import MeshSettings

if TYPE_CHECKING:
    from frames.application.commands import ExportFrameCommand, GenerateFrameCommand
    from frames.application.session import FrameSession
    from frames.infrastructure import SceneRenderer, StlExporter, ZipArchivePackager


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes wiring of commands to their infrastructure collaborators
    so the CLI, the web API and tests build them the same way.

    Attributes:
        settings: Tessellation settings for every assembler it creates.
        stl_mode: "binary" or "ascii" STL output.
        corner_insert_files: Corner insert copies written per export.
        archive_name: File name suggested for export archives.
    """

    settings: MeshSettings = field(default_factory=MeshSettings)
    stl_mode: str = "binary"
    corner_insert_files: int = 2
    archive_name: str = "custom-frame.zip"

    def get_stl_exporter(self) -> StlExporter:
        from frames.infrastructure import StlExporter

        return StlExporter(mode=self.stl_mode)

    def get_archive_packager(self) -> ZipArchivePackager:
        from frames.infrastructure import ZipArchivePackager

        return ZipArchivePackager()

    def create_renderer(self) -> SceneRenderer:
        from frames.infrastructure import SceneRenderer

        return SceneRenderer()

    def create_generate_command(self) -> GenerateFrameCommand:
        from frames.application.commands import GenerateFrameCommand
        from frames.domain import FrameAssembler

        return GenerateFrameCommand(assembler=FrameAssembler(self.settings))

    def create_export_command(self) -> ExportFrameCommand:
        from frames.application.commands import ExportFrameCommand

        return ExportFrameCommand(
            serializer=self.get_stl_exporter(),
            packager=self.get_archive_packager(),
            settings=self.settings,
            corner_insert_files=self.corner_insert_files,
            archive_name=self.archive_name,
        )

    def create_session(self, debounce_seconds: float | None = None) -> FrameSession:
        from frames.application.session import DEFAULT_DEBOUNCE_SECONDS, FrameSession

        return FrameSession(
            generate_command=self.create_generate_command(),
            export_command=self.create_export_command(),
            renderer=self.create_renderer(),
            debounce_seconds=(
                DEFAULT_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
            ),
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Return the process-wide default factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory
