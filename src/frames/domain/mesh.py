"""Immutable triangle mesh value and polygon triangulation."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from functools import cached_property
from typing import Sequence

import numpy as np

from .value_objects import BoundingBox3D, Position3D


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class Mesh:
    """Indexed triangle mesh.

    Faces are wound counter-clockwise when seen from outside. Instances
    are never mutated: every transform returns a new Mesh sharing the
    (read-only) face array, so topology survives any vertex displacement.

    Attributes:
        vertices: (N, 3) float64 vertex positions.
        faces: (M, 3) int64 vertex indices.
    """

    vertices: np.ndarray
    faces: np.ndarray

    def __post_init__(self) -> None:
        vertices = np.array(self.vertices, dtype=np.float64).reshape(-1, 3)
        faces = np.array(self.faces, dtype=np.int64).reshape(-1, 3)
        if faces.size and (faces.min() < 0 or faces.max() >= len(vertices)):
            raise ValueError("Face index out of range")
        object.__setattr__(self, "vertices", _frozen(vertices))
        object.__setattr__(self, "faces", _frozen(faces))

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    @cached_property
    def triangles(self) -> np.ndarray:
        """(M, 3, 3) corner positions of every face."""
        return _frozen(self.vertices[self.faces])

    @cached_property
    def face_normals(self) -> np.ndarray:
        """Unit normal of every face (zero for degenerate faces)."""
        tri = self.triangles
        cross = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
        lengths = np.linalg.norm(cross, axis=1, keepdims=True)
        normals = np.divide(cross, lengths, out=np.zeros_like(cross), where=lengths > 0)
        return _frozen(normals)

    @cached_property
    def vertex_normals(self) -> np.ndarray:
        """Area-weighted unit normal per vertex, derived from current positions."""
        tri = self.triangles
        cross = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
        accumulated = np.zeros_like(self.vertices)
        for corner in range(3):
            np.add.at(accumulated, self.faces[:, corner], cross)
        lengths = np.linalg.norm(accumulated, axis=1, keepdims=True)
        normals = np.divide(
            accumulated, lengths, out=np.zeros_like(accumulated), where=lengths > 0
        )
        return _frozen(normals)

    def bounding_box(self) -> BoundingBox3D:
        lo = self.vertices.min(axis=0)
        hi = self.vertices.max(axis=0)
        return BoundingBox3D(
            minimum=Position3D(float(lo[0]), float(lo[1]), float(lo[2])),
            maximum=Position3D(float(hi[0]), float(hi[1]), float(hi[2])),
        )

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.vertices).all())

    def edge_use_counts(self) -> Counter:
        """How many faces use each undirected edge."""
        counts: Counter = Counter()
        for a, b, c in self.faces.tolist():
            for u, v in ((a, b), (b, c), (c, a)):
                counts[(u, v) if u < v else (v, u)] += 1
        return counts

    def is_closed_manifold(self) -> bool:
        """True when every edge is shared by exactly two faces."""
        counts = self.edge_use_counts()
        return bool(counts) and all(n == 2 for n in counts.values())

    def signed_volume(self) -> float:
        """Enclosed volume; positive for outward-facing winding."""
        tri = self.triangles
        return float(np.einsum("ij,ij->i", tri[:, 0], np.cross(tri[:, 1], tri[:, 2])).sum() / 6)

    def with_vertices(self, vertices: np.ndarray) -> Mesh:
        """Same topology, new positions."""
        vertices = np.asarray(vertices, dtype=np.float64)
        if vertices.shape != self.vertices.shape:
            raise ValueError("Vertex displacement must not change vertex count")
        return Mesh(vertices=vertices, faces=self.faces)

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Mesh:
        return self.with_vertices(self.vertices + np.array([dx, dy, dz]))

    def rotate_x(self, angle: float) -> Mesh:
        """Rotate about the x axis by ``angle`` radians (right-handed)."""
        c, s = math.cos(angle), math.sin(angle)
        matrix = np.array([[1, 0, 0], [0, c, -s], [0, s, c]])
        return self.with_vertices(self.vertices @ matrix.T)

    def rotate_y(self, angle: float) -> Mesh:
        """Rotate about the y axis by ``angle`` radians (right-handed)."""
        c, s = math.cos(angle), math.sin(angle)
        matrix = np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
        return self.with_vertices(self.vertices @ matrix.T)

    def rotate_z(self, angle: float) -> Mesh:
        """Rotate about the z axis by ``angle`` radians (right-handed)."""
        c, s = math.cos(angle), math.sin(angle)
        matrix = np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])
        return self.with_vertices(self.vertices @ matrix.T)

    @classmethod
    def concatenate(cls, meshes: Sequence[Mesh]) -> Mesh:
        """Merge meshes into one without welding vertices."""
        if not meshes:
            return cls(vertices=np.zeros((0, 3)), faces=np.zeros((0, 3), dtype=np.int64))
        offsets = np.cumsum([0] + [m.vertex_count for m in meshes[:-1]])
        return cls(
            vertices=np.vstack([m.vertices for m in meshes]),
            faces=np.vstack([m.faces + off for m, off in zip(meshes, offsets)]),
        )


def _cross2(o: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _point_in_triangle(p, a, b, c) -> bool:
    return _cross2(a, b, p) >= 0 and _cross2(b, c, p) >= 0 and _cross2(c, a, p) >= 0


def triangulate_polygon(ring: Sequence[tuple[float, float]]) -> list[tuple[int, int, int]]:
    """Ear-clip a simple counter-clockwise polygon.

    Returns counter-clockwise index triples into ``ring``.
    """
    remaining = list(range(len(ring)))
    triangles: list[tuple[int, int, int]] = []
    while len(remaining) > 3:
        n = len(remaining)
        for k in range(n):
            i_prev, i, i_next = remaining[k - 1], remaining[k], remaining[(k + 1) % n]
            a, b, c = ring[i_prev], ring[i], ring[i_next]
            if _cross2(a, b, c) <= 0:
                continue  # reflex or collinear
            if any(
                _point_in_triangle(ring[j], a, b, c)
                for j in remaining
                if j not in (i_prev, i, i_next)
            ):
                continue
            triangles.append((i_prev, i, i_next))
            del remaining[k]
            break
        else:
            raise ValueError("Polygon could not be triangulated")
    triangles.append((remaining[0], remaining[1], remaining[2]))
    return triangles
