"""Frame assembler: normalized parameters in, positioned pieces out."""

from __future__ import annotations

import logging

from frames.domain.entities import Frame, Piece
from frames.domain.mesh import Mesh
from frames.domain.services.corner_insert import CORNER_ROTATIONS, build_corner_insert
from frames.domain.services.normalizer import normalize
from frames.domain.services.pieces import build_lip_overlay, extrude_piece
from frames.domain.services.profiles import build_rail_profile
from frames.domain.styles import CORNER_INSERT_MATERIAL, LIP_OVERLAY_MATERIAL, policy_for
from frames.domain.value_objects import (
    FrameDimensions,
    FrameParameters,
    MeshSettings,
    Orientation,
    PieceKind,
    Placement,
    RailPosition,
)

logger = logging.getLogger(__name__)

INSERT_INSET_RATIO = 0.25
INSERT_LIFT_RATIO = 0.2


class FrameGenerationError(Exception):
    """Raised when an assembled frame fails its geometry sanity check."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Frame generation failed: {errors}")


def rail_placement(
    position: RailPosition, params: FrameParameters, dims: FrameDimensions
) -> Placement:
    """Where a rail's centre sits in frame coordinates.

    Each rail's visible face sits flush with the opening while its lip
    withdraws inward by ``lip_width``.
    """
    reach = (params.face_width - params.lip_width) / 2
    if position == RailPosition.TOP:
        return Placement.at(y=dims.offset_y + reach)
    if position == RailPosition.BOTTOM:
        return Placement.at(y=-(dims.offset_y + reach))
    if position == RailPosition.LEFT:
        return Placement.at(x=-(dims.offset_x + reach))
    return Placement.at(x=dims.offset_x + reach)


def corner_placements(
    params: FrameParameters, dims: FrameDimensions
) -> dict[str, Placement]:
    """Placements of the four corner insert copies keyed by corner name."""
    inset = min(dims.inner_width, dims.inner_height) * INSERT_INSET_RATIO
    x = dims.offset_x - inset
    y = dims.offset_y - inset
    z = params.lip_depth * INSERT_LIFT_RATIO
    signs = {
        "top_right": (1, 1),
        "bottom_right": (1, -1),
        "top_left": (-1, 1),
        "bottom_left": (-1, -1),
    }
    return {
        name: Placement.at(sx * x, sy * y, z, rotation_z=CORNER_ROTATIONS[name])
        for name, (sx, sy) in signs.items()
    }


class FrameAssembler:
    """Composes rails, lip overlays and corner inserts into a Frame.

    Stateless apart from tessellation settings; every call rebuilds all
    geometry from the parameters.
    """

    def __init__(self, settings: MeshSettings | None = None) -> None:
        self.settings = settings or MeshSettings()

    def build_rail(
        self, position: RailPosition, params: FrameParameters, dims: FrameDimensions
    ) -> Mesh:
        """Rail mesh in local coordinates for an already normalized parameter set."""
        length = self._rail_length(position, dims)
        profile = build_rail_profile(
            params.face_width, params.profile_depth, params.lip_width, params.lip_depth
        )
        return extrude_piece(
            profile, length, params.style, position.orientation, self.settings
        )

    def build_insert(self, params: FrameParameters) -> Mesh:
        return build_corner_insert(
            params.face_width, params.profile_depth, params.lip_depth, params.clearance
        )

    def assemble(self, raw: FrameParameters) -> Frame:
        """Normalize ``raw`` and build the complete frame.

        Raises:
            FrameGenerationError: If any piece comes out non-finite or open.
        """
        params = normalize(raw)
        dims = FrameDimensions.from_parameters(params)
        policy = policy_for(params.style)

        pieces: list[Piece] = []
        for position in RailPosition:
            pieces.append(
                Piece(
                    name=position.value,
                    kind=PieceKind.RAIL,
                    orientation=position.orientation,
                    length=self._rail_length(position, dims),
                    mesh=self.build_rail(position, params, dims),
                    placement=rail_placement(position, params, dims),
                    material=policy.material,
                )
            )

        for rail in list(pieces):
            pieces.append(
                Piece(
                    name=f"lip_{rail.name}",
                    kind=PieceKind.LIP_OVERLAY,
                    orientation=rail.orientation,
                    length=rail.length,
                    mesh=build_lip_overlay(
                        rail.length, rail.orientation, params, self.settings
                    ),
                    placement=rail.placement,
                    material=LIP_OVERLAY_MATERIAL,
                )
            )

        if policy.corner_inserts:
            insert = self.build_insert(params)
            for name, placement in corner_placements(params, dims).items():
                pieces.append(
                    Piece(
                        name=f"corner_{name}",
                        kind=PieceKind.CORNER_INSERT,
                        orientation=None,
                        length=0.0,
                        mesh=insert,
                        placement=placement,
                        material=CORNER_INSERT_MATERIAL,
                    )
                )

        frame = Frame(parameters=params, dimensions=dims, pieces=tuple(pieces))
        self._check(frame)
        logger.info(
            f"Assembled {params.style.value} frame: inner "
            f"{dims.inner_width:.1f} x {dims.inner_height:.1f} mm, "
            f"{len(frame.pieces)} pieces, {frame.vertex_count} vertices"
        )
        return frame

    @staticmethod
    def _rail_length(position: RailPosition, dims: FrameDimensions) -> float:
        if position.orientation == Orientation.HORIZONTAL:
            return dims.horizontal_length
        return dims.vertical_length

    @staticmethod
    def _check(frame: Frame) -> None:
        errors: list[str] = []
        for piece in frame.pieces:
            if not piece.mesh.is_finite():
                errors.append(f"{piece.name}: non-finite vertex coordinates")
            if not piece.mesh.is_closed_manifold():
                errors.append(f"{piece.name}: mesh is not closed")
            if piece.kind != PieceKind.CORNER_INSERT and piece.length <= 0:
                errors.append(f"{piece.name}: non-positive length")
        if errors:
            raise FrameGenerationError(errors)


def assemble_frame(
    params: FrameParameters, settings: MeshSettings | None = None
) -> Frame:
    """Build a frame from raw parameters with a fresh assembler."""
    return FrameAssembler(settings).assemble(params)
