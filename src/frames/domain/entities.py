"""Domain entities for assembled frames."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from .mesh import Mesh
from .styles import MaterialPolicy
from .value_objects import (
    BoundingBox3D,
    FrameDimensions,
    FrameParameters,
    Orientation,
    PieceKind,
    Placement,
)

INSERT_FILE_LABELS = "ABCD"


@dataclass(frozen=True, eq=False)
class Piece:
    """One positioned solid of a frame.

    ``mesh`` is in local coordinates, centred on the origin and already
    oriented; ``placement`` moves it into frame coordinates.
    """

    name: str
    kind: PieceKind
    orientation: Optional[Orientation]
    length: float
    mesh: Mesh
    placement: Placement
    material: MaterialPolicy

    @property
    def is_structural(self) -> bool:
        """True for parts that are printed (rails and inserts)."""
        return self.kind != PieceKind.LIP_OVERLAY

    @cached_property
    def world_mesh(self) -> Mesh:
        mesh = self.mesh
        if self.placement.rotation_z:
            mesh = mesh.rotate_z(math.radians(self.placement.rotation_z))
        return mesh.translate(*self.placement.position.as_tuple())


@dataclass(frozen=True, eq=False)
class Frame:
    """A fully assembled frame. Rebuilt wholesale, never edited."""

    parameters: FrameParameters
    dimensions: FrameDimensions
    pieces: tuple[Piece, ...]

    @property
    def rails(self) -> tuple[Piece, ...]:
        return tuple(p for p in self.pieces if p.kind == PieceKind.RAIL)

    @property
    def lip_overlays(self) -> tuple[Piece, ...]:
        return tuple(p for p in self.pieces if p.kind == PieceKind.LIP_OVERLAY)

    @property
    def corner_inserts(self) -> tuple[Piece, ...]:
        return tuple(p for p in self.pieces if p.kind == PieceKind.CORNER_INSERT)

    def piece(self, name: str) -> Piece:
        for candidate in self.pieces:
            if candidate.name == name:
                return candidate
        raise KeyError(f"No piece named '{name}'")

    def printable_meshes(self, corner_insert_files: int = 2) -> dict[str, Mesh]:
        """Meshes to print, keyed by file stem, in local coordinates.

        Rails are named ``frame_<side>``. When the frame has corner
        inserts, the canonical insert is repeated as ``corner_insert_A``,
        ``corner_insert_B`` and so on. Lip overlays are display-only and
        never included.
        """
        if not 1 <= corner_insert_files <= len(INSERT_FILE_LABELS):
            raise ValueError(
                f"corner_insert_files must be between 1 and {len(INSERT_FILE_LABELS)}"
            )
        meshes = {f"frame_{rail.name}": rail.mesh for rail in self.rails}
        inserts = self.corner_inserts
        if inserts:
            for label in INSERT_FILE_LABELS[:corner_insert_files]:
                meshes[f"corner_insert_{label}"] = inserts[0].mesh
        return meshes

    @property
    def vertex_count(self) -> int:
        return sum(p.mesh.vertex_count for p in self.pieces)

    def bounding_box(self) -> BoundingBox3D:
        boxes = [p.world_mesh.bounding_box() for p in self.pieces]
        box = boxes[0]
        for other in boxes[1:]:
            box = box.union(other)
        return box
