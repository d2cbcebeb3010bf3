"""Application commands (use cases) for frame generation and export."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from frames.domain import FrameAssembler, FrameParameters, MeshSettings, normalize

from .dtos import ExportOutput, FrameInput, FrameOutput

if TYPE_CHECKING:
    from frames.contracts import (
        ArchivePackagerProtocol,
        FrameAssemblerProtocol,
        MeshSerializerProtocol,
    )

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_NAME = "custom-frame.zip"


def _as_parameters(params: FrameParameters | FrameInput) -> FrameParameters:
    if isinstance(params, FrameInput):
        return params.to_parameters()
    return params


class GenerateFrameCommand:
    """Command to build a complete frame for display."""

    def __init__(self, assembler: FrameAssemblerProtocol | None = None) -> None:
        self.assembler = assembler or FrameAssembler()

    def execute(self, params: FrameParameters | FrameInput) -> FrameOutput:
        """Build a frame from raw parameters.

        Invalid values are normalized, never rejected.
        """
        return FrameOutput(frame=self.assembler.assemble(_as_parameters(params)))


class ExportFrameCommand:
    """Command to build printable piece files and bundle them.

    The export builds its own frame from freshly normalized parameters;
    it never looks at a frame held by a session or renderer. Pieces keep
    their orientation but lose their assembly placement, so each file is
    printable on its own. See ``Frame.printable_meshes`` for the file set.
    """

    def __init__(
        self,
        serializer: MeshSerializerProtocol,
        packager: ArchivePackagerProtocol,
        settings: MeshSettings | None = None,
        corner_insert_files: int = 2,
        archive_name: str = DEFAULT_ARCHIVE_NAME,
    ) -> None:
        self.serializer = serializer
        self.packager = packager
        self.assembler = FrameAssembler(settings)
        self.corner_insert_files = corner_insert_files
        self.archive_name = archive_name

    def build_files(
        self, params: FrameParameters | FrameInput
    ) -> tuple[FrameParameters, dict[str, bytes]]:
        """Serialize every printable piece, keyed by file name."""
        normalized = normalize(_as_parameters(params))
        frame = self.assembler.assemble(normalized)
        ext = self.serializer.file_extension
        return normalized, {
            f"{stem}.{ext}": self.serializer.serialize(mesh, stem)
            for stem, mesh in frame.printable_meshes(self.corner_insert_files).items()
        }

    def execute(self, params: FrameParameters | FrameInput) -> ExportOutput:
        normalized, files = self.build_files(params)
        archive = self.packager.package(files)
        logger.info(
            f"Exported {len(files)} files ({len(archive)} bytes) as {self.archive_name}"
        )
        return ExportOutput(
            archive=archive,
            archive_name=self.archive_name,
            file_names=list(files),
            parameters=normalized,
        )
