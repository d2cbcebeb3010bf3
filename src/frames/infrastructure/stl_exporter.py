"""STL export functionality using numpy-stl."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from stl import Mode, mesh

from frames.domain import Frame, Mesh

logger = logging.getLogger(__name__)

STL_MODES: dict[str, Mode] = {
    "binary": Mode.BINARY,
    "ascii": Mode.ASCII,
}


class StlMeshBuilder:
    """Builds numpy-stl meshes from domain meshes.

    Single Responsibility: converts indexed triangle meshes into the
    per-facet layout STL uses. Coordinates are copied as-is (frame
    coordinates are already y-up, like most STL viewers expect).
    """

    def build_mesh(self, source: Mesh) -> mesh.Mesh:
        """Create an STL mesh holding every face of ``source``.

        Facet normals are taken from the deformed geometry, so they match
        the surface actually exported.
        """
        stl_mesh = mesh.Mesh(np.zeros(source.face_count, dtype=mesh.Mesh.dtype))
        stl_mesh.vectors[:] = source.triangles
        stl_mesh.normals[:] = source.face_normals
        return stl_mesh

    def combine_meshes(self, meshes: list[mesh.Mesh]) -> mesh.Mesh:
        """Combine multiple meshes into a single mesh.

        Args:
            meshes: List of meshes to combine.

        Returns:
            A single combined mesh containing all faces.
        """
        if not meshes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))
        return mesh.Mesh(np.concatenate([m.data for m in meshes]))


class StlExporter:
    """Writes domain meshes as STL.

    Dependency Inversion: callers hand over ``frames.domain.Mesh`` values;
    numpy-stl details stay in this module.

    Attributes:
        file_extension: "stl"
    """

    file_extension = "stl"

    def __init__(
        self, mesh_builder: StlMeshBuilder | None = None, mode: str = "binary"
    ) -> None:
        """Initialize the exporter.

        Args:
            mesh_builder: Optional mesh builder instance for dependency injection.
            mode: "binary" (default) or "ascii".
        """
        if mode not in STL_MODES:
            raise ValueError(
                f"Unknown STL mode '{mode}'. Available: {', '.join(STL_MODES)}"
            )
        self.mesh_builder = mesh_builder or StlMeshBuilder()
        self.mode = mode

    def serialize(self, source: Mesh, name: str) -> bytes:
        """Encode one mesh as STL bytes.

        Args:
            source: Mesh to encode.
            name: Solid name written to the STL header.
        """
        return self._to_bytes(self.mesh_builder.build_mesh(source), name)

    def export_to_file(self, source: Mesh, filepath: Path | str) -> None:
        """Write one mesh to an STL file."""
        filepath = Path(filepath)
        filepath.write_bytes(self.serialize(source, filepath.stem))
        logger.debug(f"Wrote STL {filepath}")

    def export_frame(self, frame: Frame, include_overlays: bool = False) -> mesh.Mesh:
        """Combine the assembled frame into one STL mesh in frame coordinates.

        Useful as a single-file preview. Lip overlays are left out unless
        asked for, since they duplicate rail volume.
        """
        meshes = [
            self.mesh_builder.build_mesh(piece.world_mesh)
            for piece in frame.pieces
            if include_overlays or piece.is_structural
        ]
        return self.mesh_builder.combine_meshes(meshes)

    def serialize_frame(self, frame: Frame, name: str = "frame") -> bytes:
        """Encode the combined frame as STL bytes."""
        return self._to_bytes(self.export_frame(frame), name)

    def export_frame_to_file(self, frame: Frame, filepath: Path | str) -> None:
        filepath = Path(filepath)
        filepath.write_bytes(self.serialize_frame(frame, filepath.stem))

    def _to_bytes(self, stl_mesh: mesh.Mesh, name: str) -> bytes:
        buffer = io.BytesIO()
        stl_mesh.save(name, fh=buffer, mode=STL_MODES[self.mode], update_normals=False)
        return buffer.getvalue()
