"""Headless scene renderer: owns the displayed frame and its camera.

A browser (or any other viewer) draws what ``SceneRenderer.scene()``
describes: one entry per piece with world-space vertices, faces, vertex
normals and material hints, plus the fitted camera pose.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from frames.domain import BoundingBox3D, Frame, Piece

from .viewport import CameraPose, Viewport

logger = logging.getLogger(__name__)

# Decimal places kept for coordinates in scene payloads
SCENE_PRECISION = 4


def piece_to_dict(piece: Piece, precision: int = SCENE_PRECISION) -> dict[str, Any]:
    """Describe one piece in frame coordinates."""
    mesh = piece.world_mesh
    return {
        "name": piece.name,
        "kind": piece.kind.value,
        "orientation": piece.orientation.value if piece.orientation else None,
        "position": list(piece.placement.position.as_tuple()),
        "rotation_z": piece.placement.rotation_z,
        "material": piece.material.to_dict(),
        "vertices": np.round(mesh.vertices, precision).tolist(),
        "normals": np.round(mesh.vertex_normals, precision).tolist(),
        "faces": mesh.faces.tolist(),
    }


def frame_to_scene(frame: Frame, camera: CameraPose | None = None) -> dict[str, Any]:
    """Describe a whole frame, optionally with a camera pose."""
    box = frame.bounding_box()
    return {
        "style": frame.parameters.style.value,
        "parameters": frame.parameters.to_dict(),
        "bounding_box": {
            "min": list(box.minimum.as_tuple()),
            "max": list(box.maximum.as_tuple()),
        },
        "camera": camera.to_dict() if camera else None,
        "pieces": [piece_to_dict(p) for p in frame.pieces],
    }


class SceneRenderer:
    """Rendering collaborator holding the one frame on display.

    ``show`` swaps the whole frame; nothing is patched in place.
    """

    def __init__(self, viewport: Viewport | None = None) -> None:
        self.viewport = viewport or Viewport()
        self._frame: Frame | None = None
        self._camera: CameraPose | None = None

    @property
    def current_frame(self) -> Frame | None:
        return self._frame

    @property
    def camera(self) -> CameraPose | None:
        return self._camera

    def fit_view(self, box: BoundingBox3D) -> CameraPose:
        self._camera = self.viewport.fit_view(box)
        return self._camera

    def show(self, frame: Frame) -> CameraPose:
        self._frame = frame
        camera = self.fit_view(frame.bounding_box())
        logger.debug(f"Showing frame with {len(frame.pieces)} pieces, camera distance {camera.distance:.1f}")
        return camera

    def scene(self) -> dict[str, Any]:
        """Scene payload for the current frame (empty when nothing is shown)."""
        if self._frame is None:
            return {"pieces": [], "camera": None}
        return frame_to_scene(self._frame, self._camera)
