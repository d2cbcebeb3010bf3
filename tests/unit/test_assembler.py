"""Unit tests for frame assembly.

These tests verify:
- Piece counts per style
- Rail lengths and positions form a closed rectangle
- Corner insert copies are congruent and rotated
- Rebuilds are deterministic
"""

import numpy as np
import pytest

from frames.domain import (
    DEFAULT_PARAMETERS,
    Frame,
    FrameAssembler,
    FrameGenerationError,
    FrameParameters,
    FrameDimensions,
    FrameStyle,
    MeshSettings,
    RailPosition,
    assemble_frame,
)
from frames.domain.services.assembler import corner_placements, rail_placement
from frames.domain.services.extrusion import MAX_SEGMENTS


class TestPieceComposition:
    def test_minimal_has_rails_overlays_and_inserts(self, default_frame: Frame) -> None:
        assert len(default_frame.rails) == 4
        assert len(default_frame.lip_overlays) == 4
        assert len(default_frame.corner_inserts) == 4
        assert len(default_frame.pieces) == 12

    def test_wood_has_no_corner_inserts(self) -> None:
        frame = assemble_frame(FrameParameters(style="wood"))
        assert len(frame.corner_inserts) == 0
        assert len(frame.pieces) == 8

    def test_bold_has_corner_inserts(self) -> None:
        frame = assemble_frame(FrameParameters(style="bold"))
        assert len(frame.corner_inserts) == 4

    def test_piece_names(self, default_frame: Frame) -> None:
        names = [p.name for p in default_frame.pieces]
        assert names[:4] == ["top", "bottom", "left", "right"]
        assert names[4:8] == ["lip_top", "lip_bottom", "lip_left", "lip_right"]
        assert set(names[8:]) == {
            "corner_top_right",
            "corner_bottom_right",
            "corner_top_left",
            "corner_bottom_left",
        }

    def test_lip_overlays_are_not_structural(self, default_frame: Frame) -> None:
        assert all(not p.is_structural for p in default_frame.lip_overlays)
        assert all(p.is_structural for p in default_frame.rails)


class TestDimensionsAndPlacement:
    def test_default_rail_lengths(self, default_frame: Frame) -> None:
        assert default_frame.piece("top").length == pytest.approx(608.8)
        assert default_frame.piece("left").length == pytest.approx(408.8)

    def test_default_rail_positions(self, default_frame: Frame) -> None:
        assert default_frame.piece("top").placement.position.as_tuple() == pytest.approx(
            (0, 208.4, 0)
        )
        assert default_frame.piece("bottom").placement.position.as_tuple() == pytest.approx(
            (0, -208.4, 0)
        )
        assert default_frame.piece("left").placement.position.as_tuple() == pytest.approx(
            (-308.4, 0, 0)
        )
        assert default_frame.piece("right").placement.position.as_tuple() == pytest.approx(
            (308.4, 0, 0)
        )

    def test_overlays_share_rail_placement(self, default_frame: Frame) -> None:
        for rail in default_frame.rails:
            overlay = default_frame.piece(f"lip_{rail.name}")
            assert overlay.placement == rail.placement
            assert overlay.length == rail.length

    def test_rail_placement_is_symmetric(self) -> None:
        params = FrameParameters(width=300, height=500, face_width=30, lip_width=10)
        dims = FrameDimensions.from_parameters(params)
        top = rail_placement(RailPosition.TOP, params, dims).position
        bottom = rail_placement(RailPosition.BOTTOM, params, dims).position
        assert top.y == pytest.approx(-bottom.y)
        assert top.y == pytest.approx(dims.offset_y + 10)

    def test_corner_insert_placements(self) -> None:
        dims = FrameDimensions.from_parameters(DEFAULT_PARAMETERS)
        placements = corner_placements(DEFAULT_PARAMETERS, dims)

        assert placements["top_right"].position.as_tuple() == pytest.approx((200.2, 100.2, 0.8))
        assert placements["bottom_left"].position.as_tuple() == pytest.approx(
            (-200.2, -100.2, 0.8)
        )
        assert {name: p.rotation_z for name, p in placements.items()} == {
            "top_right": 0.0,
            "bottom_right": 90.0,
            "top_left": -90.0,
            "bottom_left": 180.0,
        }

    def test_inserts_share_one_canonical_mesh(self, default_frame: Frame) -> None:
        meshes = {id(p.mesh) for p in default_frame.corner_inserts}
        assert len(meshes) == 1


class TestNormalizationDuringAssembly:
    def test_unknown_style_builds_minimal_frame(self, default_frame: Frame) -> None:
        frame = assemble_frame(FrameParameters(style="neon"))
        assert frame.parameters.style == FrameStyle.MINIMAL
        assert len(frame.pieces) == len(default_frame.pieces)
        assert np.array_equal(
            frame.piece("top").mesh.vertices, default_frame.piece("top").mesh.vertices
        )

    def test_invalid_lip_is_repaired(self) -> None:
        frame = assemble_frame(FrameParameters(face_width=3, lip_width=10))
        assert frame.parameters.lip_width == 2.0
        assert all(p.mesh.is_closed_manifold() for p in frame.pieces)

    def test_junk_input_still_builds(self) -> None:
        frame = assemble_frame(FrameParameters(width="wide", height=-3, clearance=None))
        assert frame.dimensions.inner_width == pytest.approx(600.8)

    def test_huge_width_builds_bounded_rails(self) -> None:
        frame = assemble_frame(FrameParameters(width=1e9))

        top = frame.piece("top")
        assert top.length == pytest.approx(1e9 + 8.8)
        assert top.mesh.vertex_count == (MAX_SEGMENTS + 1) * 6
        assert all(p.mesh.is_closed_manifold() for p in frame.pieces)

    def test_tiny_segment_length_builds_bounded_rails(self) -> None:
        frame = FrameAssembler(MeshSettings(segment_length=1e-6)).assemble(DEFAULT_PARAMETERS)

        for rail in frame.rails:
            assert rail.mesh.vertex_count == (MAX_SEGMENTS + 1) * 6


class TestDeterminism:
    @pytest.mark.parametrize("style", ["minimal", "bold", "wood"])
    def test_identical_parameters_give_identical_frames(self, style: str) -> None:
        params = FrameParameters(width=250, height=180, style=style)
        first = assemble_frame(params)
        second = assemble_frame(params)

        assert len(first.pieces) == len(second.pieces)
        assert first.vertex_count == second.vertex_count
        for a, b in zip(first.pieces, second.pieces):
            assert a.name == b.name
            assert a.placement == b.placement
            assert np.array_equal(a.mesh.vertices, b.mesh.vertices)
            assert np.array_equal(a.mesh.faces, b.mesh.faces)


class TestSanityCheck:
    def test_open_mesh_raises_generation_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from frames.domain import Mesh

        assembler = FrameAssembler()
        open_mesh = Mesh(vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0)], faces=[(0, 1, 2)])
        monkeypatch.setattr(assembler, "build_insert", lambda params: open_mesh)

        with pytest.raises(FrameGenerationError) as exc_info:
            assembler.assemble(DEFAULT_PARAMETERS)

        assert any("not closed" in e for e in exc_info.value.errors)
        assert all(e.startswith("corner_") for e in exc_info.value.errors)
