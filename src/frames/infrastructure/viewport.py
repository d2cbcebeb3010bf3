"""Camera framing for frame previews."""

from __future__ import annotations

import math
from dataclasses import dataclass

from frames.domain import BoundingBox3D

# Margin around the fitted frame
FIT_PADDING = 1.25
# Camera height relative to its horizontal distance
ELEVATION_RATIO = 0.55


@dataclass(frozen=True)
class CameraPose:
    """Where the camera sits and what it looks at."""

    position: tuple[float, float, float]
    target: tuple[float, float, float]
    fov: float
    aspect: float
    distance: float

    def to_dict(self) -> dict[str, object]:
        return {
            "position": list(self.position),
            "target": list(self.target),
            "fov": self.fov,
            "aspect": self.aspect,
            "distance": self.distance,
        }


@dataclass
class Viewport:
    """Perspective camera parameters of the preview.

    Attributes:
        fov: Vertical field of view in degrees.
        aspect: Width over height of the drawing surface.
        near: Near clipping distance.
        far: Far clipping distance.
    """

    fov: float = 45.0
    aspect: float = 16 / 9
    near: float = 0.1
    far: float = 8000.0

    def resize(self, width: float, height: float) -> None:
        if width > 0 and height > 0:
            self.aspect = width / height

    def fit_view(self, box: BoundingBox3D) -> CameraPose:
        """Place the camera so the whole box stays visible.

        The camera looks at the box centre from a diagonal above it, far
        enough back for the largest box dimension to fit both the vertical
        and the horizontal field of view.
        """
        size = box.size
        center = box.center
        max_size = max(size)
        fit_height_distance = max_size / (2 * math.atan(math.pi * self.fov / 360))
        fit_width_distance = fit_height_distance / self.aspect
        distance = max(fit_height_distance, fit_width_distance) * FIT_PADDING
        position = (
            center[0] + distance,
            center[1] + distance * ELEVATION_RATIO,
            center[2] + distance,
        )
        return CameraPose(
            position=position,
            target=center,
            fov=self.fov,
            aspect=self.aspect,
            distance=distance,
        )
