"""Unit tests for cross-section profile construction."""

import pytest

from frames.domain.services.profiles import (
    build_corner_insert_profile,
    build_lip_overlay_profile,
    build_rail_profile,
)


class TestRailProfile:
    def test_six_point_l_shape(self) -> None:
        profile = build_rail_profile(20, 14, 4, 4)
        assert profile.points == (
            (0.0, 0.0),
            (20, 0.0),
            (20, 14),
            (16, 14),
            (16, 4),
            (0.0, 4),
        )

    def test_extents_match_face_and_depth(self) -> None:
        profile = build_rail_profile(25, 18, 6, 5)
        assert profile.width == 25
        assert profile.height == 18

    def test_area(self) -> None:
        # Face strip plus the rear lip
        profile = build_rail_profile(20, 14, 4, 4)
        assert profile.signed_area == pytest.approx(20 * 4 + 4 * 10)

    def test_lip_as_wide_as_face_is_not_a_valid_profile(self) -> None:
        with pytest.raises(ValueError):
            build_rail_profile(4, 14, 4, 4)


class TestLipOverlayProfile:
    def test_explicitly_closed_five_point_ring(self) -> None:
        profile = build_lip_overlay_profile(20, 14, 4, 4)
        assert len(profile.points) == 5
        assert profile.points[0] == profile.points[-1]
        assert len(profile.ring) == 4

    def test_positioned_relative_to_rail_centre(self) -> None:
        profile = build_lip_overlay_profile(20, 14, 4, 4)
        assert profile.bounds == (-10, -7, -6, -3)


class TestCornerInsertProfile:
    def test_l_shape_extents(self) -> None:
        profile = build_corner_insert_profile(28, 4.9, 8)
        assert profile.width == 28
        assert profile.height == 28
        assert len(profile.ring) == 6
