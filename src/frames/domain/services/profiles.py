"""Cross-section profiles for rails and lip overlays."""

from __future__ import annotations

from frames.domain.value_objects import Profile2D


def build_rail_profile(
    face_width: float, profile_depth: float, lip_width: float, lip_depth: float
) -> Profile2D:
    """Build the L-shaped rail cross-section.

    The visible face spans the full ``face_width`` at the front; the rear
    lip keeps only ``lip_width`` of it from ``lip_depth`` back to
    ``profile_depth``::

                   +--+  profile_depth
                   |  |
        +----------+  |  lip_depth
        |             |
        +-------------+  0
        0        fw-lw fw
    """
    return Profile2D(
        points=(
            (0.0, 0.0),
            (face_width, 0.0),
            (face_width, profile_depth),
            (face_width - lip_width, profile_depth),
            (face_width - lip_width, lip_depth),
            (0.0, lip_depth),
        )
    )


def build_lip_overlay_profile(
    face_width: float, profile_depth: float, lip_width: float, lip_depth: float
) -> Profile2D:
    """Build the lip highlight rectangle, relative to a centred rail.

    The ring is closed explicitly, so it carries five points.
    """
    x0 = -face_width / 2
    y0 = -profile_depth / 2
    return Profile2D(
        points=(
            (x0, y0),
            (x0 + lip_width, y0),
            (x0 + lip_width, y0 + lip_depth),
            (x0, y0 + lip_depth),
            (x0, y0),
        )
    )


def build_corner_insert_profile(
    insert_leg: float, thickness: float, taper: float
) -> Profile2D:
    """Build the L-shaped connector cross-section."""
    return Profile2D(
        points=(
            (0.0, 0.0),
            (insert_leg, 0.0),
            (insert_leg, thickness),
            (taper, thickness),
            (taper, insert_leg),
            (0.0, insert_leg),
        )
    )
