"""Unit tests for camera fitting and the headless scene renderer."""

import math

import pytest

from frames.domain import BoundingBox3D, Frame, Position3D
from frames.infrastructure import SceneRenderer, Viewport, frame_to_scene

BOX = BoundingBox3D(Position3D(-320, -220, -10), Position3D(320, 220, 10))


class TestViewport:
    def test_fit_view_distance(self) -> None:
        viewport = Viewport(fov=45, aspect=16 / 9)
        pose = viewport.fit_view(BOX)

        fit_height = 640 / (2 * math.atan(math.pi * 45 / 360))
        assert pose.distance == pytest.approx(fit_height * 1.25)

    def test_narrow_viewport_backs_off(self) -> None:
        # Aspect below one makes the width fit the larger distance
        wide = Viewport(aspect=2.0).fit_view(BOX)
        narrow = Viewport(aspect=0.5).fit_view(BOX)
        assert narrow.distance == pytest.approx(wide.distance * 2)

    def test_camera_looks_at_centre_from_above(self) -> None:
        box = BoundingBox3D(Position3D(0, 0, 0), Position3D(100, 50, 10))
        pose = Viewport().fit_view(box)
        d = pose.distance
        assert pose.target == (50, 25, 5)
        assert pose.position == pytest.approx((50 + d, 25 + 0.55 * d, 5 + d))

    def test_resize_ignores_empty_surfaces(self) -> None:
        viewport = Viewport()
        viewport.resize(0, 300)
        assert viewport.aspect == pytest.approx(16 / 9)
        viewport.resize(400, 400)
        assert viewport.aspect == 1.0

    def test_pose_to_dict(self) -> None:
        data = Viewport().fit_view(BOX).to_dict()
        assert set(data) == {"position", "target", "fov", "aspect", "distance"}
        assert len(data["position"]) == 3


class TestSceneRenderer:
    def test_empty_scene(self) -> None:
        renderer = SceneRenderer()
        assert renderer.current_frame is None
        assert renderer.scene() == {"pieces": [], "camera": None}

    def test_show_replaces_frame_and_fits_camera(self, default_frame: Frame) -> None:
        renderer = SceneRenderer()
        camera = renderer.show(default_frame)

        assert renderer.current_frame is default_frame
        assert renderer.camera == camera
        assert camera.target == pytest.approx(default_frame.bounding_box().center)

    def test_scene_payload(self, default_frame: Frame) -> None:
        renderer = SceneRenderer()
        renderer.show(default_frame)
        scene = renderer.scene()

        assert scene["style"] == "minimal"
        assert len(scene["pieces"]) == 12
        top = scene["pieces"][0]
        assert top["name"] == "top"
        assert top["material"]["color"] == "#9ad4ff"
        assert len(top["vertices"]) == len(top["normals"])
        assert max(max(face) for face in top["faces"]) < len(top["vertices"])


class TestFrameToScene:
    def test_vertices_are_in_frame_coordinates(self, default_frame: Frame) -> None:
        scene = frame_to_scene(default_frame)
        top = next(p for p in scene["pieces"] if p["name"] == "top")
        ys = [v[1] for v in top["vertices"]]
        assert min(ys) > 150

    def test_overlay_material_is_transparent(self, default_frame: Frame) -> None:
        scene = frame_to_scene(default_frame)
        overlay = next(p for p in scene["pieces"] if p["kind"] == "lip_overlay")
        assert overlay["material"]["transparent"] is True
        assert overlay["material"]["opacity"] == 0.7
