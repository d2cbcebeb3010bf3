"""Longitudinal solid builder: profile + length + style -> oriented mesh."""

from __future__ import annotations

import logging

from frames.domain.mesh import Mesh
from frames.domain.services.deformations import apply_end_taper, orient
from frames.domain.services.extrusion import extrude_profile, recenter, segment_count
from frames.domain.services.profiles import build_lip_overlay_profile
from frames.domain.styles import policy_for
from frames.domain.value_objects import (
    FrameParameters,
    FrameStyle,
    MeshSettings,
    Orientation,
    Profile2D,
)

logger = logging.getLogger(__name__)


def extrude_piece(
    profile: Profile2D,
    length: float,
    style: FrameStyle | str,
    orientation: Orientation,
    settings: MeshSettings | None = None,
) -> Mesh:
    """Build one rail mesh.

    Pipeline: extrude (bevelled when the style asks for it), recentre,
    end taper, style surface deformation, orient. The taper uses the
    profile's extents as face width and depth.

    Args:
        profile: Rail cross-section.
        length: Extrusion length in mm, must be positive.
        style: Frame style selecting bevel and surface treatment.
        orientation: Run direction of the finished rail.
        settings: Tessellation settings; defaults to ``MeshSettings()``.

    Returns:
        Mesh centred on the origin with its run along x (horizontal) or
        y (vertical).
    """
    settings = settings or MeshSettings()
    policy = policy_for(style)

    mesh = extrude_profile(
        profile,
        length,
        steps=segment_count(length, settings.segment_length),
        bevel=policy.bevel,
    )
    mesh = recenter(mesh, profile, length)
    mesh = apply_end_taper(mesh, length, profile.width, profile.height)
    if policy.surface is not None:
        mesh = policy.surface(mesh, length)

    logger.debug(
        f"Built {policy.style.value} {orientation.value} piece, "
        f"length {length:.3f} mm, {mesh.vertex_count} vertices"
    )
    return orient(mesh, orientation)


def build_lip_overlay(
    length: float,
    orientation: Orientation,
    params: FrameParameters,
    settings: MeshSettings | None = None,
) -> Mesh:
    """Build the non-structural lip highlight for a rail of ``length``.

    The overlay profile is already expressed around the rail's centre, so
    only the length axis is centred. No taper or surface treatment.
    """
    settings = settings or MeshSettings()
    profile = build_lip_overlay_profile(
        params.face_width, params.profile_depth, params.lip_width, params.lip_depth
    )
    mesh = extrude_profile(
        profile, length, steps=segment_count(length, settings.segment_length)
    )
    return orient(mesh.translate(dz=-length / 2), orientation)
