"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from frames.domain import (
    DEFAULT_PARAMETERS,
    Frame,
    FrameParameters,
    FrameStyle,
    policy_for,
)


@dataclass
class FrameInput:
    """Raw values from an input surface (form fields, CLI options, JSON).

    Every field may hold free-form text, a number or None. Nothing is
    validated here: ``to_parameters`` hands the values to the normalizer,
    which repairs whatever does not make sense.
    """

    width: Any = None
    height: Any = None
    face_width: Any = None
    profile_depth: Any = None
    lip_width: Any = None
    lip_depth: Any = None
    clearance: Any = None
    style: Any = None

    def to_parameters(self) -> FrameParameters:
        return FrameParameters(
            width=self.width,
            height=self.height,
            face_width=self.face_width,
            profile_depth=self.profile_depth,
            lip_width=self.lip_width,
            lip_depth=self.lip_depth,
            clearance=self.clearance,
            style=self.style,
        )

    @classmethod
    def defaults(cls) -> FrameInput:
        """Input pre-filled with the default parameters (the "reset" state)."""
        return cls(**DEFAULT_PARAMETERS.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FrameInput:
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass
class PieceSummary:
    """Name, role and size of one piece."""

    name: str
    kind: str
    orientation: str | None
    length: float
    vertices: int
    faces: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "orientation": self.orientation,
            "length": round(self.length, 3),
            "vertices": self.vertices,
            "faces": self.faces,
        }


@dataclass
class FrameSummary:
    """Reportable dimensions of a built frame.

    Attributes:
        style: Style the frame was built with.
        inner_width: Width of the opening including clearance.
        inner_height: Height of the opening including clearance.
        outer_width: Overall width including both rails.
        outer_height: Overall height including both rails.
        horizontal_length: Length of the top and bottom rails.
        vertical_length: Length of the left and right rails.
        corner_inserts: Whether the style adds corner inserts.
        pieces: Per-piece summaries.
    """

    style: FrameStyle
    inner_width: float
    inner_height: float
    outer_width: float
    outer_height: float
    horizontal_length: float
    vertical_length: float
    corner_inserts: bool
    pieces: list[PieceSummary] = field(default_factory=list)

    @classmethod
    def from_frame(cls, frame: Frame) -> FrameSummary:
        dims = frame.dimensions
        return cls(
            style=frame.parameters.style,
            inner_width=dims.inner_width,
            inner_height=dims.inner_height,
            outer_width=dims.outer_width,
            outer_height=dims.outer_height,
            horizontal_length=dims.horizontal_length,
            vertical_length=dims.vertical_length,
            corner_inserts=policy_for(frame.parameters.style).corner_inserts,
            pieces=[
                PieceSummary(
                    name=p.name,
                    kind=p.kind.value,
                    orientation=p.orientation.value if p.orientation else None,
                    length=p.length,
                    vertices=p.mesh.vertex_count,
                    faces=p.mesh.face_count,
                )
                for p in frame.pieces
            ],
        )

    def describe(self) -> str:
        """One-line summary for status bars."""
        return (
            f"Inner opening {self.inner_width:.1f} x {self.inner_height:.1f} mm, "
            f"outer size {self.outer_width:.1f} x {self.outer_height:.1f} mm."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "style": self.style.value,
            "inner_width": round(self.inner_width, 3),
            "inner_height": round(self.inner_height, 3),
            "outer_width": round(self.outer_width, 3),
            "outer_height": round(self.outer_height, 3),
            "horizontal_length": round(self.horizontal_length, 3),
            "vertical_length": round(self.vertical_length, 3),
            "corner_inserts": self.corner_inserts,
            "description": self.describe(),
            "pieces": [p.to_dict() for p in self.pieces],
        }


@dataclass
class FrameOutput:
    """Result of a frame build."""

    frame: Frame

    @property
    def parameters(self) -> FrameParameters:
        return self.frame.parameters

    @property
    def summary(self) -> FrameSummary:
        return FrameSummary.from_frame(self.frame)


@dataclass
class ExportOutput:
    """Result of an export: the archive plus what went into it."""

    archive: bytes
    archive_name: str
    file_names: list[str]
    parameters: FrameParameters

    @property
    def size(self) -> int:
        return len(self.archive)
