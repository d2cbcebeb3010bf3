"""Domain layer - parametric frame geometry."""

from .value_objects import (
    DEFAULT_PARAMETERS,
    BoundingBox3D,
    FrameDimensions,
    FrameParameters,
    FrameStyle,
    MeshSettings,
    Orientation,
    PieceKind,
    Placement,
    Position3D,
    Profile2D,
    RailPosition,
)
from .mesh import Mesh, triangulate_polygon
from .services import normalize
from .styles import STYLE_POLICIES, MaterialPolicy, StylePolicy, policy_for
from .entities import Frame, Piece
from .services.corner_insert import CornerInsertDimensions, build_corner_insert
from .services.pieces import build_lip_overlay, extrude_piece
from .services.assembler import FrameAssembler, FrameGenerationError, assemble_frame

__all__ = [
    "DEFAULT_PARAMETERS",
    "STYLE_POLICIES",
    "BoundingBox3D",
    "CornerInsertDimensions",
    "Frame",
    "FrameAssembler",
    "FrameDimensions",
    "FrameGenerationError",
    "FrameParameters",
    "FrameStyle",
    "MaterialPolicy",
    "Mesh",
    "MeshSettings",
    "Orientation",
    "Piece",
    "PieceKind",
    "Placement",
    "Position3D",
    "Profile2D",
    "RailPosition",
    "StylePolicy",
    "assemble_frame",
    "build_corner_insert",
    "build_lip_overlay",
    "extrude_piece",
    "normalize",
    "policy_for",
    "triangulate_polygon",
]
