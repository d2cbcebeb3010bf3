"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class FrameParametersSchema(BaseModel):
    """A normalized parameter set."""

    width: float = Field(..., description="Opening width in mm")
    height: float = Field(..., description="Opening height in mm")
    face_width: float = Field(..., description="Rail face width in mm")
    profile_depth: float = Field(..., description="Rail depth in mm")
    lip_width: float = Field(..., description="Rebate lip width in mm")
    lip_depth: float = Field(..., description="Rebate lip depth in mm")
    clearance: float = Field(..., description="Extra room around the panel in mm")
    style: str = Field(..., description="Frame style")


class StyleSchema(BaseModel):
    """One frame style and how it changes the frame."""

    name: str
    description: str
    bevel: bool = Field(..., description="Whether rails get a bevelled profile")
    surface: str = Field(..., description="Surface treatment applied to rails")
    corner_inserts: bool = Field(..., description="Whether corner inserts are added")
    material: dict[str, Any] = Field(..., description="Rail material hints for renderers")


class PieceSummarySchema(BaseModel):
    name: str
    kind: str
    orientation: str | None = None
    length: float
    vertices: int
    faces: int


class FrameSummarySchema(BaseModel):
    """Dimensions of a built frame."""

    style: str
    inner_width: float
    inner_height: float
    outer_width: float
    outer_height: float
    horizontal_length: float
    vertical_length: float
    corner_inserts: bool
    description: str
    pieces: list[PieceSummarySchema] = Field(default_factory=list)


class PreviewResponseSchema(BaseModel):
    """Everything a browser needs to draw the frame."""

    parameters: FrameParametersSchema
    summary: FrameSummarySchema
    camera: dict[str, Any] = Field(..., description="Camera pose fitted to the frame")
    bounding_box: dict[str, list[float]]
    pieces: list[dict[str, Any]] = Field(
        default_factory=list, description="Piece geometry and materials"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
