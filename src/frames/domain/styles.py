"""Style policy table.

Each ``FrameStyle`` maps to one ``StylePolicy`` bundling everything a
style changes: how rails are extruded, which surface deformation runs
after the end taper, which material the renderer uses and whether the
frame gets corner inserts. Adding a style means adding an enum member
and one entry in ``STYLE_POLICIES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from frames.domain.mesh import Mesh
from frames.domain.services.deformations import apply_woodgrain
from frames.domain.value_objects import FrameStyle

# (mesh, length) -> deformed mesh
SurfaceDeformation = Callable[[Mesh, float], Mesh]


@dataclass(frozen=True)
class BevelPolicy:
    """Rounded edge transition added around each extrusion end.

    Attributes:
        thickness: How far the bevel reaches beyond each end (mm).
        size: How far the body is offset outwards from the profile (mm).
        segments: Rings per bevel.
    """

    thickness: float
    size: float
    segments: int

    def __post_init__(self) -> None:
        if self.thickness <= 0 or self.size <= 0:
            raise ValueError("Bevel thickness and size must be positive")
        if self.segments < 1:
            raise ValueError("Bevel needs at least one segment")


@dataclass(frozen=True)
class MaterialPolicy:
    """Presentation hints for the renderer."""

    color: int
    roughness: float
    metalness: float = 0.05
    opacity: float = 1.0

    @property
    def hex_color(self) -> str:
        return f"#{self.color:06x}"

    @property
    def transparent(self) -> bool:
        return self.opacity < 1.0

    def to_dict(self) -> dict[str, object]:
        return {
            "color": self.hex_color,
            "roughness": self.roughness,
            "metalness": self.metalness,
            "opacity": self.opacity,
            "transparent": self.transparent,
        }


@dataclass(frozen=True)
class StylePolicy:
    """Everything a style decides."""

    style: FrameStyle
    description: str
    bevel: Optional[BevelPolicy]
    surface: Optional[SurfaceDeformation]
    material: MaterialPolicy
    corner_inserts: bool

    @property
    def surface_name(self) -> str:
        if self.surface is None:
            return "flat"
        return self.surface.__name__.removeprefix("apply_")


LIP_OVERLAY_MATERIAL = MaterialPolicy(color=0xFFE0A3, roughness=0.45, opacity=0.7)
CORNER_INSERT_MATERIAL = MaterialPolicy(color=0x72F1B8, roughness=0.5)


STYLE_POLICIES: dict[FrameStyle, StylePolicy] = {
    FrameStyle.MINIMAL: StylePolicy(
        style=FrameStyle.MINIMAL,
        description="Sharp edges, flat finish, corner inserts",
        bevel=None,
        surface=None,
        material=MaterialPolicy(color=0x9AD4FF, roughness=0.45),
        corner_inserts=True,
    ),
    FrameStyle.BOLD: StylePolicy(
        style=FrameStyle.BOLD,
        description="Bevelled edges, corner inserts",
        bevel=BevelPolicy(thickness=1.2, size=0.8, segments=2),
        surface=None,
        material=MaterialPolicy(color=0x7CC7FF, roughness=0.45),
        corner_inserts=True,
    ),
    FrameStyle.WOOD: StylePolicy(
        style=FrameStyle.WOOD,
        description="Carved woodgrain surface, mitred look without inserts",
        bevel=None,
        surface=apply_woodgrain,
        material=MaterialPolicy(color=0xAE8A63, roughness=0.9),
        corner_inserts=False,
    ),
}


def policy_for(style: FrameStyle | str) -> StylePolicy:
    """Look up the policy for ``style``; unknown names get the minimal policy."""
    resolved = FrameStyle.lookup(style) or FrameStyle.MINIMAL
    return STYLE_POLICIES[resolved]
