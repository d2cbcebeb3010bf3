"""Domain services for building frame geometry.

Only the leaf services are re-exported here; the piece builder and the
assembler depend on the style table and are imported from their modules
(or from ``frames.domain``).
"""

from .deformations import apply_end_taper, apply_woodgrain, orient, taper_offsets
from .extrusion import extrude_profile, recenter, segment_count
from .normalizer import is_normalized, normalize
from .profiles import (
    build_corner_insert_profile,
    build_lip_overlay_profile,
    build_rail_profile,
)

__all__ = [
    "apply_end_taper",
    "apply_woodgrain",
    "build_corner_insert_profile",
    "build_lip_overlay_profile",
    "build_rail_profile",
    "extrude_profile",
    "is_normalized",
    "normalize",
    "orient",
    "recenter",
    "segment_count",
    "taper_offsets",
]
