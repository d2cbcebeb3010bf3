"""Pure vertex deformations applied to extruded pieces.

All functions take a mesh in local extrusion coordinates (profile in the
x/y plane, extrusion along z, centred on the origin) and return a new
mesh with the same faces. The constants are fixed by the look of the
frames.
"""

from __future__ import annotations

import math

import numpy as np

from frames.domain.mesh import Mesh
from frames.domain.value_objects import Orientation

TAPER_SPAN_FACTOR = 1.1
TAPER_DEPTH_WEIGHT = 0.8
TAPER_Y_RATIO = 0.55

WOODGRAIN_INTENSITY = 0.55
GRAIN_WAVES = 8
GRAIN_ACROSS = 0.08
RIPPLE_WAVES = 3
RIPPLE_AMPLITUDE = 0.6
GRAIN_X_SCALE = 0.15
GRAIN_Y_SCALE = 0.35


def taper_offsets(
    z: np.ndarray, length: float, face_width: float, profile_depth: float
) -> np.ndarray:
    """Signed shear offset along x for axial coordinates ``z``.

    Zero for vertices at least ``taper_span`` from an end (and for
    vertices beyond the ends), rising linearly to
    ``face_width + 0.8 * profile_depth`` at the very end.
    """
    half = length / 2
    taper_span = max(face_width, profile_depth) * TAPER_SPAN_FACTOR
    distance_from_end = half - np.abs(z)
    active = (distance_from_end >= 0) & (distance_from_end < taper_span)
    t = np.where(active, 1 - distance_from_end / taper_span, 0.0)
    return (face_width + profile_depth * TAPER_DEPTH_WEIGHT) * t * np.sign(z)


def apply_end_taper(
    mesh: Mesh, length: float, face_width: float, profile_depth: float
) -> Mesh:
    """Shear both ends to suggest a mitred joint.

    This approximates a miter; no geometry is cut.
    """
    vertices = mesh.vertices.copy()
    skew = taper_offsets(vertices[:, 2], length, face_width, profile_depth)
    vertices[:, 0] += skew
    vertices[:, 1] += skew * TAPER_Y_RATIO
    return mesh.with_vertices(vertices)


def apply_woodgrain(
    mesh: Mesh, length: float, intensity: float = WOODGRAIN_INTENSITY
) -> Mesh:
    """Displace the cross-section by a grain wave plus a slow ripple.

    Deterministic in vertex position only.
    """
    vertices = mesh.vertices.copy()
    x = vertices[:, 0]
    z = vertices[:, 2]
    grain_wave = np.sin((z / length) * math.pi * GRAIN_WAVES + x * GRAIN_ACROSS)
    ripple = np.cos((z / length) * math.pi * RIPPLE_WAVES) * RIPPLE_AMPLITUDE
    bump = (grain_wave + ripple) * intensity
    vertices[:, 0] = x + bump * GRAIN_X_SCALE
    vertices[:, 1] += bump * GRAIN_Y_SCALE
    return mesh.with_vertices(vertices)


def orient(mesh: Mesh, orientation: Orientation) -> Mesh:
    """Turn the extrusion axis into the rail's run direction.

    Horizontal pieces rotate +90 degrees about y (z becomes x); vertical
    pieces rotate -90 degrees about x (z becomes y).
    """
    if orientation == Orientation.HORIZONTAL:
        return mesh.rotate_y(math.pi / 2)
    if orientation == Orientation.VERTICAL:
        return mesh.rotate_x(-math.pi / 2)
    raise ValueError(f"Unknown orientation: {orientation!r}")
