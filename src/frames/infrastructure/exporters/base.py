"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from frames.application.dtos import FrameOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a FrameOutput to a specific format.

    Attributes:
        format_name: Registry name of the format (e.g., "stl-zip").
        file_extension: File extension without leading dot (e.g., "zip").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: FrameOutput, path: Path) -> None:
        """Export frame output to a file.

        Args:
            output: The frame output to export.
            path: Path where the file will be saved.
        """
        ...

    def export_bytes(self, output: FrameOutput) -> bytes:
        """Export frame output as an in-memory payload."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("scene-json")
        class SceneJsonExporter:
            format_name = "scene-json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class.

        Args:
            format_name: The format name to register.

        Returns:
            Decorator function that registers the class.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of all registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports one frame output to several formats in a directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: FrameOutput,
        project_name: str = "frame",
    ) -> dict[str, Path]:
        """Export to every format in ``formats``.

        Files are named ``{project_name}_{format}.{ext}``.

        Returns:
            Mapping of format name to written path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath
        return results
