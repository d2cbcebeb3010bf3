"""Application layer - use cases and orchestration."""

from .commands import ExportFrameCommand, GenerateFrameCommand
from .dtos import ExportOutput, FrameInput, FrameOutput, FrameSummary, PieceSummary
from .factory import ServiceFactory, get_factory
from .session import FrameSession

__all__ = [
    "ExportFrameCommand",
    "ExportOutput",
    "FrameInput",
    "FrameOutput",
    "FrameSession",
    "FrameSummary",
    "GenerateFrameCommand",
    "PieceSummary",
    "ServiceFactory",
    "get_factory",
]
