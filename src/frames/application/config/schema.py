"""Pydantic configuration schema models for frame configuration files.

Frame values are deliberately loose: any number, numeric string or null is
accepted and later repaired by the normalizer. Only the envelope (unknown
keys, schema version, mesh and output settings) is validated strictly.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from frames.application.dtos import FrameInput
from frames.domain import MeshSettings

# Supported schema versions for configuration files
# Version 1.0: Initial schema with frame, mesh and output sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

FrameValue = float | str | None


class FrameConfig(BaseModel):
    """Frame parameters as written in a config file.

    Attributes:
        width: Opening width in mm.
        height: Opening height in mm.
        face_width: Visible face width of each rail in mm.
        profile_depth: Rail depth front to back in mm.
        lip_width: Width of the rebate lip holding the panel.
        lip_depth: Depth of the rebate lip.
        clearance: Extra room added to the opening on each axis.
        style: One of minimal, bold or wood; anything else falls back.
    """

    model_config = ConfigDict(extra="forbid")

    width: FrameValue = None
    height: FrameValue = None
    face_width: FrameValue = None
    profile_depth: FrameValue = None
    lip_width: FrameValue = None
    lip_depth: FrameValue = None
    clearance: FrameValue = None
    style: str | None = None

    def to_input(self) -> FrameInput:
        return FrameInput(**self.model_dump())


class MeshConfig(BaseModel):
    """Tessellation settings."""

    model_config = ConfigDict(extra="forbid")

    segment_length: float = Field(default=10.0, gt=0, description="Max mm between rings along a rail")

    def to_settings(self) -> MeshSettings:
        return MeshSettings(segment_length=self.segment_length)


class OutputConfig(BaseModel):
    """Configuration for export output.

    Attributes:
        archive_name: File name of the export archive.
        stl_mode: Binary or ASCII STL encoding.
        corner_insert_files: Number of corner insert copies (1-4).
    """

    model_config = ConfigDict(extra="forbid")

    archive_name: str = Field(default="custom-frame.zip", min_length=1)
    stl_mode: Literal["binary", "ascii"] = "binary"
    corner_insert_files: int = Field(default=2, ge=1, le=4)

    @field_validator("archive_name")
    @classmethod
    def validate_archive_name(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("archive_name must be a file name, not a path")
        return v


class FrameConfiguration(BaseModel):
    """Root configuration model for frame configuration files.

    Example:
        >>> config = FrameConfiguration(schema_version="1.0", frame=FrameConfig(width=500))
        >>> config.output.archive_name
        'custom-frame.zip'
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    frame: FrameConfig = Field(default_factory=FrameConfig)
    mesh: MeshConfig = Field(default_factory=MeshConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
