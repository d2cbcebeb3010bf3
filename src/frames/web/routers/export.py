"""Export format endpoints."""

from dataclasses import replace

from fastapi import APIRouter
from fastapi.responses import Response

from frames.infrastructure.exporters import ExporterRegistry
from frames.web.dependencies import GenerateCommandDep, ServiceFactoryDep
from frames.web.exceptions import UnsupportedFormatError
from frames.web.schemas.requests import ExportRequest, FrameRequest
from frames.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "zip": "application/zip",
    "json": "application/json",
    "stl": "model/stl",
}


def _attachment(content: bytes, filename: str, extension: str) -> Response:
    return Response(
        content=content,
        media_type=MEDIA_TYPES.get(extension, "application/octet-stream"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/zip")
def export_zip(request: ExportRequest, factory: ServiceFactoryDep) -> Response:
    """Export every printable piece as STL, bundled in a zip download.

    The archive holds frame_top/bottom/left/right.stl and, for styles
    with corner inserts, corner_insert_A.stl onwards.
    """
    command = replace(
        factory,
        stl_mode=request.stl_mode,
        corner_insert_files=request.corner_insert_files,
    ).create_export_command()
    result = command.execute(request.to_input())
    return _attachment(result.archive, result.archive_name, "zip")


@router.post("/{format_name}")
def export_format(
    format_name: str,
    request: FrameRequest,
    command: GenerateCommandDep,
) -> Response:
    """Export the frame in any registered format.

    Raises:
        UnsupportedFormatError: If ``format_name`` is not registered.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    exporter = ExporterRegistry.get(format_name)()
    output = command.execute(request.to_input())
    extension = exporter.file_extension
    return _attachment(exporter.export_bytes(output), f"frame.{extension}", extension)
