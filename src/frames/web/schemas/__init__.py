"""Pydantic schemas for the REST API."""

from frames.web.schemas.requests import (
    ExportRequest,
    FrameRequest,
    FromConfigRequest,
    PreviewRequest,
)
from frames.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    FrameParametersSchema,
    FrameSummarySchema,
    PieceSummarySchema,
    PreviewResponseSchema,
    StyleSchema,
)

__all__ = [
    # Requests
    "ExportRequest",
    "FrameRequest",
    "FromConfigRequest",
    "PreviewRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "FrameParametersSchema",
    "FrameSummarySchema",
    "PieceSummarySchema",
    "PreviewResponseSchema",
    "StyleSchema",
]
