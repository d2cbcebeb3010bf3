"""Frame preview endpoints."""

from dataclasses import replace

from fastapi import APIRouter

from frames.application import FrameOutput
from frames.application.config import load_config_from_dict
from frames.domain import DEFAULT_PARAMETERS, STYLE_POLICIES, normalize
from frames.infrastructure import Viewport, frame_to_scene
from frames.web.dependencies import GenerateCommandDep, ServiceFactoryDep
from frames.web.schemas.requests import FrameRequest, FromConfigRequest, PreviewRequest
from frames.web.schemas.responses import (
    FrameParametersSchema,
    FrameSummarySchema,
    PreviewResponseSchema,
    StyleSchema,
)

router = APIRouter(prefix="/frames", tags=["frames"])


def _preview(
    output: FrameOutput, include_geometry: bool = True, aspect: float | None = None
) -> PreviewResponseSchema:
    """Convert FrameOutput to response schema with a fitted camera."""
    frame = output.frame
    viewport = Viewport(aspect=aspect) if aspect else Viewport()
    scene = frame_to_scene(frame, viewport.fit_view(frame.bounding_box()))
    return PreviewResponseSchema(
        parameters=FrameParametersSchema(**output.parameters.to_dict()),
        summary=FrameSummarySchema(**output.summary.to_dict()),
        camera=scene["camera"],
        bounding_box=scene["bounding_box"],
        pieces=scene["pieces"] if include_geometry else [],
    )


@router.get("/defaults", response_model=FrameParametersSchema)
async def get_defaults() -> FrameParametersSchema:
    """Parameters the editor starts with and resets to."""
    return FrameParametersSchema(**DEFAULT_PARAMETERS.to_dict())


@router.get("/styles", response_model=list[StyleSchema])
async def list_styles() -> list[StyleSchema]:
    return [
        StyleSchema(
            name=style.value,
            description=policy.description,
            bevel=policy.bevel is not None,
            surface=policy.surface_name,
            corner_inserts=policy.corner_inserts,
            material=policy.material.to_dict(),
        )
        for style, policy in STYLE_POLICIES.items()
    ]


@router.post("/normalize", response_model=FrameParametersSchema)
async def normalize_parameters(request: FrameRequest) -> FrameParametersSchema:
    """Return the repaired values the form should display."""
    params = normalize(request.to_input().to_parameters())
    return FrameParametersSchema(**params.to_dict())


@router.post("/preview", response_model=PreviewResponseSchema)
def preview_frame(request: PreviewRequest, command: GenerateCommandDep) -> PreviewResponseSchema:
    """Build a frame and return its summary, camera and piece geometry.

    Args:
        request: Raw frame parameters plus preview options.
        command: Injected GenerateFrameCommand.
    """
    output = command.execute(request.to_input())
    return _preview(output, request.include_geometry, request.aspect)


@router.post("/from-config", response_model=PreviewResponseSchema)
def preview_from_config(
    request: FromConfigRequest, factory: ServiceFactoryDep
) -> PreviewResponseSchema:
    """Build a frame from a full configuration document.

    Invalid documents raise ConfigError, answered with 422.
    """
    config = load_config_from_dict(request.config)
    command = replace(factory, settings=config.mesh.to_settings()).create_generate_command()
    return _preview(command.execute(config.frame.to_input()))
