"""Configuration merging for CLI override support.

Precedence: CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values.
"""

from typing import Any

from frames.application.config.schema import (
    FrameConfig,
    FrameConfiguration,
    MeshConfig,
    OutputConfig,
)


def merge_config_with_cli(
    config: FrameConfiguration,
    *,
    width: Any = None,
    height: Any = None,
    face_width: Any = None,
    profile_depth: Any = None,
    lip_width: Any = None,
    lip_depth: Any = None,
    clearance: Any = None,
    style: str | None = None,
    segment_length: float | None = None,
    archive_name: str | None = None,
    stl_mode: str | None = None,
    corner_insert_files: int | None = None,
) -> FrameConfiguration:
    """Merge CLI arguments with configuration values.

    Returns:
        A new FrameConfiguration with merged values

    Example:
        >>> merged = merge_config_with_cli(config, width="450")
        >>> merged.frame.width
        '450'
    """
    frame_overrides = {
        "width": width,
        "height": height,
        "face_width": face_width,
        "profile_depth": profile_depth,
        "lip_width": lip_width,
        "lip_depth": lip_depth,
        "clearance": clearance,
        "style": style,
    }
    output_overrides = {
        "archive_name": archive_name,
        "stl_mode": stl_mode,
        "corner_insert_files": corner_insert_files,
    }

    return FrameConfiguration(
        schema_version=config.schema_version,
        frame=FrameConfig.model_validate(_apply(config.frame.model_dump(), frame_overrides)),
        mesh=MeshConfig.model_validate(
            _apply(config.mesh.model_dump(), {"segment_length": segment_length})
        ),
        output=OutputConfig.model_validate(_apply(config.output.model_dump(), output_overrides)),
    )


def _apply(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return merged
