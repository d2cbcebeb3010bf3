"""Pydantic request schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from frames.application.dtos import FrameInput

# Raw form values: numbers, numeric strings, or anything the normalizer repairs
FormValue = float | str | None


class FrameRequest(BaseModel):
    """Frame parameters as typed into the editor form.

    Nothing is range-checked here; out-of-range or unparseable values are
    repaired by the normalizer and the repaired values are echoed back.
    """

    width: FormValue = Field(default=None, description="Opening width in mm")
    height: FormValue = Field(default=None, description="Opening height in mm")
    face_width: FormValue = Field(default=None, description="Rail face width in mm")
    profile_depth: FormValue = Field(default=None, description="Rail depth in mm")
    lip_width: FormValue = Field(default=None, description="Rebate lip width in mm")
    lip_depth: FormValue = Field(default=None, description="Rebate lip depth in mm")
    clearance: FormValue = Field(default=None, description="Extra room around the panel in mm")
    style: str | None = Field(default=None, description="minimal, bold or wood")

    def to_input(self) -> FrameInput:
        return FrameInput(
            width=self.width,
            height=self.height,
            face_width=self.face_width,
            profile_depth=self.profile_depth,
            lip_width=self.lip_width,
            lip_depth=self.lip_depth,
            clearance=self.clearance,
            style=self.style,
        )


class PreviewRequest(FrameRequest):
    """Frame parameters plus preview options."""

    include_geometry: bool = Field(
        default=True, description="Include per-piece vertices, normals and faces"
    )
    aspect: float | None = Field(
        default=None, gt=0, description="Viewport width over height for camera fitting"
    )


class ExportRequest(FrameRequest):
    """Frame parameters plus export options."""

    stl_mode: Literal["binary", "ascii"] = Field(default="binary", description="STL encoding")
    corner_insert_files: int = Field(
        default=2, ge=1, le=4, description="Corner insert copies to include"
    )


class FromConfigRequest(BaseModel):
    """Request carrying a full frame configuration document."""

    config: dict[str, Any] = Field(..., description="Frame configuration JSON")
