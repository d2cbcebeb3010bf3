"""Unit tests for profile extrusion."""

import numpy as np
import pytest

from frames.domain import Profile2D
from frames.domain.services.extrusion import (
    MAX_SEGMENTS,
    extrude_profile,
    recenter,
    segment_count,
)
from frames.domain.services.profiles import build_rail_profile
from frames.domain.styles import BevelPolicy

RAIL = build_rail_profile(20, 14, 4, 4)
BOLD_BEVEL = BevelPolicy(thickness=1.2, size=0.8, segments=2)


class TestExtrudeProfile:
    """Tests for the plain prism."""

    def test_single_step_vertex_and_face_counts(self) -> None:
        mesh = extrude_profile(RAIL, 100)
        assert mesh.vertex_count == 12
        # 6 side quads plus two 4-triangle caps
        assert mesh.face_count == 6 * 2 + 4 * 2

    def test_is_closed_and_outward_wound(self) -> None:
        mesh = extrude_profile(RAIL, 100, steps=7)
        assert mesh.is_closed_manifold()
        assert mesh.signed_volume() == pytest.approx(120 * 100)

    def test_runs_from_zero_to_length(self) -> None:
        mesh = extrude_profile(RAIL, 250, steps=5)
        assert mesh.vertices[:, 2].min() == 0
        assert mesh.vertices[:, 2].max() == pytest.approx(250)

    def test_steps_add_interior_rings(self) -> None:
        mesh = extrude_profile(RAIL, 100, steps=10)
        assert mesh.vertex_count == 6 * 11
        assert sorted(set(np.round(mesh.vertices[:, 2], 6))) == pytest.approx(
            [10.0 * i for i in range(11)]
        )

    @pytest.mark.parametrize("length", [0, -10, float("nan"), float("inf")])
    def test_rejects_unusable_length(self, length: float) -> None:
        with pytest.raises(ValueError, match="positive"):
            extrude_profile(RAIL, length)

    def test_rejects_zero_steps(self) -> None:
        with pytest.raises(ValueError):
            extrude_profile(RAIL, 10, steps=0)

    def test_accepts_explicitly_closed_ring(self) -> None:
        square = Profile2D(points=((0, 0), (2, 0), (2, 2), (0, 2), (0, 0)))
        mesh = extrude_profile(square, 3)
        assert mesh.vertex_count == 8
        assert mesh.is_closed_manifold()
        assert mesh.signed_volume() == pytest.approx(12)


class TestBevelledExtrusion:
    """Tests for rounded-edge extrusion used by the bold style."""

    def test_bevel_rings_reach_beyond_ends(self) -> None:
        mesh = extrude_profile(RAIL, 100, steps=4, bevel=BOLD_BEVEL)
        assert mesh.vertices[:, 2].min() == pytest.approx(-1.2)
        assert mesh.vertices[:, 2].max() == pytest.approx(101.2)

    def test_ring_count(self) -> None:
        mesh = extrude_profile(RAIL, 100, steps=4, bevel=BOLD_BEVEL)
        # Two bevel rings each side plus five body rings
        assert mesh.vertex_count == 6 * (2 + 5 + 2)

    def test_body_is_offset_outward(self) -> None:
        mesh = extrude_profile(RAIL, 100, steps=4, bevel=BOLD_BEVEL)
        body = mesh.vertices[(mesh.vertices[:, 2] >= 0) & (mesh.vertices[:, 2] <= 100)]
        assert body[:, 0].min() == pytest.approx(-0.8)
        assert body[:, 0].max() == pytest.approx(20.8)

    def test_still_closed_manifold(self) -> None:
        mesh = extrude_profile(RAIL, 100, steps=4, bevel=BOLD_BEVEL)
        assert mesh.is_closed_manifold()
        assert mesh.signed_volume() > 120 * 100


class TestHelpers:
    @pytest.mark.parametrize(
        ("length", "expected"), [(608.8, 61), (408.8, 41), (10.0, 1), (0.5, 1)]
    )
    def test_segment_count(self, length: float, expected: int) -> None:
        assert segment_count(length, 10.0) == expected

    @pytest.mark.parametrize(("length", "segment_length"), [(2e9, 10.0), (608.8, 1e-9)])
    def test_segment_count_is_capped(self, length: float, segment_length: float) -> None:
        assert segment_count(length, segment_length) == MAX_SEGMENTS

    def test_huge_length_builds_bounded_closed_mesh(self) -> None:
        length = 2e9
        mesh = extrude_profile(RAIL, length, steps=segment_count(length, 10.0))

        assert mesh.vertex_count == (MAX_SEGMENTS + 1) * 6
        assert mesh.is_closed_manifold()
        assert mesh.bounding_box().maximum.z == pytest.approx(length)

    def test_recenter_moves_profile_and_length_to_origin(self) -> None:
        mesh = recenter(extrude_profile(RAIL, 100), RAIL, 100)
        box = mesh.bounding_box()
        assert box.center == pytest.approx((0, 0, 0))
        assert box.size == pytest.approx((20, 14, 100))
