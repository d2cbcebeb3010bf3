"""Pytest configuration and shared fixtures for frame tests."""

from __future__ import annotations

import pytest
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frames.application.commands import ExportFrameCommand, GenerateFrameCommand
    from frames.domain import Frame


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def generate_command() -> "GenerateFrameCommand":
    """GenerateFrameCommand wired through the default ServiceFactory."""
    from frames.application.factory import ServiceFactory

    return ServiceFactory().create_generate_command()


@pytest.fixture
def export_command() -> "ExportFrameCommand":
    """ExportFrameCommand with binary STL and the zip packager."""
    from frames.application.factory import ServiceFactory

    return ServiceFactory().create_export_command()


@pytest.fixture
def default_frame() -> "Frame":
    """Frame built from the default parameters."""
    from frames.domain import DEFAULT_PARAMETERS, assemble_frame

    return assemble_frame(DEFAULT_PARAMETERS)
