"""Value objects for the frame domain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FrameStyle(str, Enum):
    """Visual treatment of a frame.

    Attributes:
        MINIMAL: Sharp-edged rails with a flat finish.
        BOLD: Bevelled rail edges.
        WOOD: Procedural woodgrain surface and wood tint.
    """

    MINIMAL = "minimal"
    BOLD = "bold"
    WOOD = "wood"

    @classmethod
    def lookup(cls, value: Any) -> FrameStyle | None:
        """Return the style matching ``value`` (case-insensitive), or None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Orientation(str, Enum):
    """Run direction of a rail within the frame."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class PieceKind(str, Enum):
    """Role of a piece in the assembled frame."""

    RAIL = "rail"
    LIP_OVERLAY = "lip_overlay"
    CORNER_INSERT = "corner_insert"


class RailPosition(str, Enum):
    """Side of the frame a rail belongs to."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def orientation(self) -> Orientation:
        if self in (RailPosition.TOP, RailPosition.BOTTOM):
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL


@dataclass(frozen=True)
class FrameParameters:
    """Frame dimensions in millimeters plus the style choice.

    Raw instances may carry anything a user typed (strings, None, NaN,
    unknown style names). Instances returned by ``normalize`` hold finite
    positive floats with the lip strictly inside the rail envelope and a
    ``FrameStyle`` member as style.
    """

    width: Any = 600.0
    height: Any = 400.0
    face_width: Any = 20.0
    profile_depth: Any = 14.0
    lip_width: Any = 4.0
    lip_depth: Any = 4.0
    clearance: Any = 0.4
    style: Any = FrameStyle.MINIMAL

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary (style as its string value)."""
        style = self.style.value if isinstance(self.style, FrameStyle) else self.style
        return {
            "width": self.width,
            "height": self.height,
            "face_width": self.face_width,
            "profile_depth": self.profile_depth,
            "lip_width": self.lip_width,
            "lip_depth": self.lip_depth,
            "clearance": self.clearance,
            "style": style,
        }


NUMERIC_FIELDS: tuple[str, ...] = (
    "width",
    "height",
    "face_width",
    "profile_depth",
    "lip_width",
    "lip_depth",
    "clearance",
)

DEFAULT_PARAMETERS = FrameParameters()


@dataclass(frozen=True)
class FrameDimensions:
    """Quantities derived from normalized parameters.

    Never stored independently of the parameters they came from; use
    ``from_parameters`` to recompute them.
    """

    inner_width: float
    inner_height: float
    horizontal_length: float
    vertical_length: float
    outer_width: float
    outer_height: float

    @property
    def offset_x(self) -> float:
        return self.inner_width / 2

    @property
    def offset_y(self) -> float:
        return self.inner_height / 2

    @classmethod
    def from_parameters(cls, params: FrameParameters) -> FrameDimensions:
        inner_width = params.width + params.clearance * 2
        inner_height = params.height + params.clearance * 2
        return cls(
            inner_width=inner_width,
            inner_height=inner_height,
            horizontal_length=inner_width + params.lip_width * 2,
            vertical_length=inner_height + params.lip_width * 2,
            outer_width=inner_width + params.face_width * 2,
            outer_height=inner_height + params.face_width * 2,
        )


@dataclass(frozen=True)
class Profile2D:
    """Closed polygon used as an extrusion cross-section.

    An explicitly repeated closing point is accepted and ignored by
    ``ring``. The distinct points must form a simple ring with positive
    signed area (counter-clockwise).
    """

    points: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        ring = self.ring
        if len(ring) < 3:
            raise ValueError("Profile needs at least three distinct points")
        if any(not (math.isfinite(x) and math.isfinite(y)) for x, y in ring):
            raise ValueError("Profile points must be finite")
        if self.signed_area <= 0:
            raise ValueError("Profile must be counter-clockwise with positive area")
        if not self.is_simple():
            raise ValueError("Profile must not self-intersect")

    @property
    def ring(self) -> tuple[tuple[float, float], ...]:
        """Distinct points, without a repeated closing point."""
        if len(self.points) > 1 and self.points[0] == self.points[-1]:
            return self.points[:-1]
        return self.points

    @property
    def signed_area(self) -> float:
        ring = self.ring
        total = 0.0
        for i, (x0, y0) in enumerate(ring):
            x1, y1 = ring[(i + 1) % len(ring)]
            total += x0 * y1 - x1 * y0
        return total / 2

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)."""
        xs = [p[0] for p in self.ring]
        ys = [p[1] for p in self.ring]
        return min(xs), min(ys), max(xs), max(ys)

    @property
    def width(self) -> float:
        min_x, _, max_x, _ = self.bounds
        return max_x - min_x

    @property
    def height(self) -> float:
        _, min_y, _, max_y = self.bounds
        return max_y - min_y

    def is_simple(self) -> bool:
        """True if no two non-adjacent edges intersect."""
        ring = self.ring
        n = len(ring)
        edges = [(ring[i], ring[(i + 1) % n]) for i in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                # Adjacent edges share a vertex by construction
                if j == i + 1 or (i == 0 and j == n - 1):
                    continue
                if _segments_intersect(*edges[i], *edges[j]):
                    return False
        return True


def _orient(
    a: tuple[float, float], b: tuple[float, float], c: tuple[float, float]
) -> float:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _on_segment(
    a: tuple[float, float], b: tuple[float, float], p: tuple[float, float]
) -> bool:
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def _segments_intersect(
    p1: tuple[float, float],
    p2: tuple[float, float],
    q1: tuple[float, float],
    q2: tuple[float, float],
) -> bool:
    d1 = _orient(q1, q2, p1)
    d2 = _orient(q1, q2, p2)
    d3 = _orient(p1, p2, q1)
    d4 = _orient(p1, p2, q2)
    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True
    if d1 == 0 and _on_segment(q1, q2, p1):
        return True
    if d2 == 0 and _on_segment(q1, q2, p2):
        return True
    if d3 == 0 and _on_segment(p1, p2, q1):
        return True
    if d4 == 0 and _on_segment(p1, p2, q2):
        return True
    return False


@dataclass(frozen=True)
class Position3D:
    """3D position in frame coordinates (x right, y up, z toward viewer)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Placement:
    """Translation plus a rotation about the frame normal (z axis)."""

    position: Position3D = Position3D()
    rotation_z: float = 0.0

    @classmethod
    def at(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0, rotation_z: float = 0.0) -> Placement:
        return cls(position=Position3D(x, y, z), rotation_z=rotation_z)


@dataclass(frozen=True)
class BoundingBox3D:
    """Axis-aligned box given by its minimum and maximum corners."""

    minimum: Position3D
    maximum: Position3D

    @property
    def size(self) -> tuple[float, float, float]:
        return (
            self.maximum.x - self.minimum.x,
            self.maximum.y - self.minimum.y,
            self.maximum.z - self.minimum.z,
        )

    @property
    def center(self) -> tuple[float, float, float]:
        return (
            (self.maximum.x + self.minimum.x) / 2,
            (self.maximum.y + self.minimum.y) / 2,
            (self.maximum.z + self.minimum.z) / 2,
        )

    def union(self, other: BoundingBox3D) -> BoundingBox3D:
        return BoundingBox3D(
            minimum=Position3D(
                min(self.minimum.x, other.minimum.x),
                min(self.minimum.y, other.minimum.y),
                min(self.minimum.z, other.minimum.z),
            ),
            maximum=Position3D(
                max(self.maximum.x, other.maximum.x),
                max(self.maximum.y, other.maximum.y),
                max(self.maximum.z, other.maximum.z),
            ),
        )


@dataclass(frozen=True)
class MeshSettings:
    """Tessellation settings for extruded pieces.

    Attributes:
        segment_length: Target length in mm of one longitudinal segment.
            Interior rings give the end taper and woodgrain room to bend.
    """

    segment_length: float = 10.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.segment_length) and self.segment_length > 0):
            raise ValueError("segment_length must be positive")
