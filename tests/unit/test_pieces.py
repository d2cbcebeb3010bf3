"""Unit tests for rail, lip overlay and corner insert solids."""

import numpy as np
import pytest

from frames.domain import (
    DEFAULT_PARAMETERS,
    CornerInsertDimensions,
    MeshSettings,
    Orientation,
    build_corner_insert,
    build_lip_overlay,
    extrude_piece,
)
from frames.domain.services.profiles import build_rail_profile

RAIL = build_rail_profile(20, 14, 4, 4)


class TestExtrudePiece:
    """Tests for the extrude, taper, surface, orient pipeline."""

    @pytest.mark.parametrize("style", ["minimal", "bold", "wood"])
    def test_closed_manifold_for_every_style(self, style: str) -> None:
        mesh = extrude_piece(RAIL, 608.8, style, Orientation.HORIZONTAL)
        assert mesh.is_closed_manifold()
        assert mesh.is_finite()

    def test_minimal_horizontal_rail_spans_its_length(self) -> None:
        mesh = extrude_piece(RAIL, 608.8, "minimal", Orientation.HORIZONTAL)
        box = mesh.bounding_box()
        assert box.size[0] == pytest.approx(608.8)
        assert box.center[0] == pytest.approx(0)

    def test_bold_rail_grows_by_the_bevel(self) -> None:
        mesh = extrude_piece(RAIL, 408.8, "bold", Orientation.VERTICAL)
        assert mesh.bounding_box().size[1] == pytest.approx(408.8 + 2 * 1.2)

    def test_wood_rail_differs_from_minimal(self) -> None:
        minimal = extrude_piece(RAIL, 300, "minimal", Orientation.HORIZONTAL)
        wood = extrude_piece(RAIL, 300, "wood", Orientation.HORIZONTAL)
        assert minimal.vertex_count == wood.vertex_count
        assert not np.allclose(minimal.vertices, wood.vertices)

    def test_segment_length_controls_ring_count(self) -> None:
        coarse = extrude_piece(RAIL, 100, "minimal", Orientation.HORIZONTAL, MeshSettings(50))
        fine = extrude_piece(RAIL, 100, "minimal", Orientation.HORIZONTAL, MeshSettings(5))
        assert coarse.vertex_count == 6 * 3
        assert fine.vertex_count == 6 * 21

    def test_rejects_non_positive_length(self) -> None:
        with pytest.raises(ValueError):
            extrude_piece(RAIL, 0, "minimal", Orientation.HORIZONTAL)


class TestLipOverlay:
    def test_sits_over_the_lip_of_a_centred_rail(self) -> None:
        mesh = build_lip_overlay(608.8, Orientation.HORIZONTAL, DEFAULT_PARAMETERS)
        box = mesh.bounding_box()
        assert box.size[0] == pytest.approx(608.8)
        assert box.center[0] == pytest.approx(0)
        assert (box.minimum.y, box.maximum.y) == pytest.approx((-7, -3))

    def test_is_closed(self) -> None:
        mesh = build_lip_overlay(408.8, Orientation.VERTICAL, DEFAULT_PARAMETERS)
        assert mesh.is_closed_manifold()


class TestCornerInsert:
    def test_default_dimensions(self) -> None:
        dims = CornerInsertDimensions.from_parameters(20, 14, 4, 0.4)
        assert dims.insert_leg == pytest.approx(28)
        assert dims.taper == pytest.approx(8)
        assert dims.thickness == pytest.approx(4.9)
        assert dims.depth == pytest.approx(6)

    def test_minimums_for_thin_frames(self) -> None:
        dims = CornerInsertDimensions.from_parameters(5, 5, 2, 0.4)
        assert dims.insert_leg == 24
        assert dims.taper == 6
        assert dims.thickness == 3
        assert dims.depth == 6

    def test_depth_follows_lip_depth_and_clearance(self) -> None:
        dims = CornerInsertDimensions.from_parameters(20, 30, 10, 1.0)
        assert dims.depth == pytest.approx(12.0)

    def test_thickness_never_swallows_the_leg(self) -> None:
        dims = CornerInsertDimensions.from_parameters(20, 100, 4, 0.4)
        assert dims.thickness < dims.insert_leg

    def test_mesh_is_centred_and_closed(self) -> None:
        mesh = build_corner_insert(20, 14, 4, 0.4)
        box = mesh.bounding_box()
        assert box.center == pytest.approx((0, 0, 0))
        assert box.size == pytest.approx((28, 28, 6))
        assert mesh.is_closed_manifold()
        assert mesh.signed_volume() == pytest.approx((28 * 4.9 + 8 * (28 - 4.9)) * 6)

    def test_independent_of_rail_length(self) -> None:
        a = build_corner_insert(20, 14, 4, 0.4)
        b = build_corner_insert(20, 14, 4, 0.4)
        assert np.array_equal(a.vertices, b.vertices)
