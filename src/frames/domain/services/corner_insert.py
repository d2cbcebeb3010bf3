"""Corner connector inserts."""

from __future__ import annotations

from dataclasses import dataclass

from frames.domain.mesh import Mesh
from frames.domain.services.extrusion import extrude_profile, recenter
from frames.domain.services.profiles import build_corner_insert_profile
from frames.domain.value_objects import Profile2D

MIN_INSERT_LEG = 24.0
INSERT_LEG_RATIO = 1.4
MIN_INSERT_TAPER = 6.0
INSERT_TAPER_RATIO = 0.4
MIN_INSERT_THICKNESS = 3.0
INSERT_THICKNESS_RATIO = 0.35
MIN_INSERT_DEPTH = 6.0
INSERT_DEPTH_RATIO = 1.1

# Rotation of each corner copy about the frame normal, in degrees
CORNER_ROTATIONS: dict[str, float] = {
    "top_right": 0.0,
    "bottom_right": 90.0,
    "top_left": -90.0,
    "bottom_left": 180.0,
}


@dataclass(frozen=True)
class CornerInsertDimensions:
    """Sizes of the connector, independent of rail length."""

    insert_leg: float
    taper: float
    thickness: float
    depth: float

    @classmethod
    def from_parameters(
        cls, face_width: float, profile_depth: float, lip_depth: float, clearance: float
    ) -> CornerInsertDimensions:
        insert_leg = max(MIN_INSERT_LEG, face_width * INSERT_LEG_RATIO)
        thickness = max(MIN_INSERT_THICKNESS, profile_depth * INSERT_THICKNESS_RATIO)
        if thickness >= insert_leg:
            # Very deep profiles would swallow the leg; keep the L open
            thickness = insert_leg / 2
        return cls(
            insert_leg=insert_leg,
            taper=max(MIN_INSERT_TAPER, face_width * INSERT_TAPER_RATIO),
            thickness=thickness,
            depth=max(MIN_INSERT_DEPTH, lip_depth * INSERT_DEPTH_RATIO + clearance),
        )

    def profile(self) -> Profile2D:
        return build_corner_insert_profile(self.insert_leg, self.thickness, self.taper)


def build_corner_insert(
    face_width: float, profile_depth: float, lip_depth: float, clearance: float
) -> Mesh:
    """Build the canonical corner insert, centred on the origin.

    One insert is built per frame; corners reuse it with the rotations in
    ``CORNER_ROTATIONS``.
    """
    dims = CornerInsertDimensions.from_parameters(
        face_width, profile_depth, lip_depth, clearance
    )
    profile = dims.profile()
    return recenter(extrude_profile(profile, dims.depth), profile, dims.depth)
