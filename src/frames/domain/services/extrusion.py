"""Linear extrusion of 2D profiles into closed prisms."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

import numpy as np

from frames.domain.mesh import Mesh, triangulate_polygon
from frames.domain.value_objects import Profile2D

if TYPE_CHECKING:
    from frames.domain.styles import BevelPolicy

logger = logging.getLogger(__name__)

# Upper bound on longitudinal segments per piece
MAX_SEGMENTS = 512


def _bevel_vectors(ring: Sequence[tuple[float, float]]) -> np.ndarray:
    """Per-vertex outward offset that moves every edge out by one unit."""
    points = np.asarray(ring, dtype=np.float64)
    prev_pts = np.roll(points, 1, axis=0)
    next_pts = np.roll(points, -1, axis=0)

    def outward(d: np.ndarray) -> np.ndarray:
        # Right-hand normal of a counter-clockwise edge points outwards
        n = np.column_stack([d[:, 1], -d[:, 0]])
        return n / np.linalg.norm(n, axis=1, keepdims=True)

    n_in = outward(points - prev_pts)
    n_out = outward(next_pts - points)
    dot = np.einsum("ij,ij->i", n_in, n_out)
    return (n_in + n_out) / (1 + dot)[:, None]


def _ring_layers(
    ring: Sequence[tuple[float, float]],
    length: float,
    steps: int,
    bevel: BevelPolicy | None,
) -> list[tuple[float, float]]:
    """(z, outward offset) for every ring of the prism, front to back."""
    if bevel is None:
        return [(length * s / steps, 0.0) for s in range(steps + 1)]

    front: list[tuple[float, float]] = []
    for b in range(bevel.segments):
        t = b / bevel.segments
        front.append(
            (
                -bevel.thickness * math.cos(t * math.pi / 2),
                bevel.size * math.sin(t * math.pi / 2),
            )
        )
    body = [(length * s / steps, bevel.size) for s in range(steps + 1)]
    back = [(length - z, offset) for z, offset in reversed(front)]
    return front + body + back


def extrude_profile(
    profile: Profile2D,
    length: float,
    steps: int = 1,
    bevel: BevelPolicy | None = None,
) -> Mesh:
    """Extrude ``profile`` along +z from 0 to ``length``.

    The prism is split into ``steps`` equal segments; an optional bevel
    adds rounded rings beyond each end. The result is a closed,
    outward-wound 2-manifold whose vertex order depends only on the
    profile point count, ``steps`` and the bevel segment count.

    Raises:
        ValueError: If ``length`` is not a positive finite number or
            ``steps`` is less than one.
    """
    if not (math.isfinite(length) and length > 0):
        raise ValueError(f"Extrusion length must be positive, got {length!r}")
    if steps < 1:
        raise ValueError("Extrusion needs at least one step")

    ring = profile.ring
    n = len(ring)
    points = np.asarray(ring, dtype=np.float64)
    bevel_dirs = _bevel_vectors(ring) if bevel is not None else np.zeros_like(points)
    layers = _ring_layers(ring, length, steps, bevel)

    vertices = np.empty((len(layers) * n, 3), dtype=np.float64)
    for k, (z, offset) in enumerate(layers):
        block = vertices[k * n : (k + 1) * n]
        block[:, :2] = points + bevel_dirs * offset
        block[:, 2] = z

    faces: list[tuple[int, int, int]] = []
    for k in range(len(layers) - 1):
        base, top = k * n, (k + 1) * n
        for i in range(n):
            j = (i + 1) % n
            faces.append((base + i, base + j, top + j))
            faces.append((base + i, top + j, top + i))

    cap = triangulate_polygon(ring)
    last = (len(layers) - 1) * n
    for a, b, c in cap:
        faces.append((a, c, b))  # front cap faces -z
        faces.append((last + a, last + b, last + c))

    logger.debug(
        f"Extruded {n}-point profile to {length:.3f} mm: "
        f"{len(layers)} rings, {len(faces)} faces"
    )
    return Mesh(vertices=vertices, faces=np.asarray(faces, dtype=np.int64))


def segment_count(length: float, segment_length: float) -> int:
    """Number of longitudinal segments for a piece of ``length``.

    Capped at ``MAX_SEGMENTS``; very long pieces get longer segments.
    """
    return min(MAX_SEGMENTS, max(1, math.ceil(length / segment_length)))


def recenter(mesh: Mesh, profile: Profile2D, length: float) -> Mesh:
    """Move the profile's bounding box centre and the length midpoint to the origin."""
    min_x, min_y, max_x, max_y = profile.bounds
    return mesh.translate(-(min_x + max_x) / 2, -(min_y + max_y) / 2, -length / 2)
