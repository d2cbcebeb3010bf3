"""Unit tests for Frame and Piece entities."""

import numpy as np
import pytest

from frames.domain import Frame, FrameParameters, assemble_frame


class TestPiece:
    def test_world_mesh_applies_translation(self, default_frame: Frame) -> None:
        top = default_frame.piece("top")
        shift = top.world_mesh.vertices - top.mesh.vertices
        assert shift == pytest.approx(np.tile([0, 208.4, 0], (top.mesh.vertex_count, 1)))

    def test_world_mesh_applies_rotation(self, default_frame: Frame) -> None:
        corner = default_frame.piece("corner_bottom_right")
        box = corner.world_mesh.bounding_box()
        assert box.center == pytest.approx((200.2, -100.2, 0.8))

    def test_unknown_piece_name(self, default_frame: Frame) -> None:
        with pytest.raises(KeyError):
            default_frame.piece("middle")


class TestPrintableMeshes:
    def test_default_file_set(self, default_frame: Frame) -> None:
        meshes = default_frame.printable_meshes()
        assert list(meshes) == [
            "frame_top",
            "frame_bottom",
            "frame_left",
            "frame_right",
            "corner_insert_A",
            "corner_insert_B",
        ]

    def test_four_insert_files(self, default_frame: Frame) -> None:
        names = list(default_frame.printable_meshes(corner_insert_files=4))
        assert names[-4:] == [
            "corner_insert_A",
            "corner_insert_B",
            "corner_insert_C",
            "corner_insert_D",
        ]

    @pytest.mark.parametrize("count", [0, 5])
    def test_rejects_insert_file_count(self, default_frame: Frame, count: int) -> None:
        with pytest.raises(ValueError):
            default_frame.printable_meshes(corner_insert_files=count)

    def test_wood_exports_rails_only(self) -> None:
        frame = assemble_frame(FrameParameters(style="wood"))
        assert list(frame.printable_meshes()) == [
            "frame_top",
            "frame_bottom",
            "frame_left",
            "frame_right",
        ]

    def test_meshes_stay_at_local_origin(self, default_frame: Frame) -> None:
        for name, mesh in default_frame.printable_meshes().items():
            if name.startswith("frame_"):
                # Centred along the run, before placement
                box = mesh.bounding_box()
                run_axis = 0 if name in ("frame_top", "frame_bottom") else 1
                assert box.center[run_axis] == pytest.approx(0, abs=1e-6)

    def test_rail_meshes_are_distinct_and_closed(self, default_frame: Frame) -> None:
        meshes = default_frame.printable_meshes()
        top, bottom, left = meshes["frame_top"], meshes["frame_bottom"], meshes["frame_left"]
        assert all(m.is_closed_manifold() for m in meshes.values())
        assert top is not bottom
        assert top.vertex_count != left.vertex_count


class TestFrameBounds:
    def test_bounding_box_covers_outer_size(self, default_frame: Frame) -> None:
        size = default_frame.bounding_box().size
        assert size[0] >= 640.8 - 1e-6
        assert size[1] >= 440.8 - 1e-6

    def test_vertex_count_sums_pieces(self, default_frame: Frame) -> None:
        assert default_frame.vertex_count == sum(
            p.mesh.vertex_count for p in default_frame.pieces
        )
