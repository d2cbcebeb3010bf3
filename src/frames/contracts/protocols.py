"""Service protocols for dependency injection.

The application layer depends on these protocols; infrastructure
implementations satisfy them structurally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from frames.domain import BoundingBox3D, Frame, FrameParameters, Mesh
    from frames.infrastructure.viewport import CameraPose


@runtime_checkable
class FrameAssemblerProtocol(Protocol):
    """Builds a complete frame from raw parameters."""

    def assemble(self, raw: FrameParameters) -> Frame:
        ...


@runtime_checkable
class MeshSerializerProtocol(Protocol):
    """Encodes one mesh in a solid-model exchange format.

    Example:
        ```python
        payload = serializer.serialize(piece.mesh, "frame_top")
        ```
    """

    file_extension: str

    def serialize(self, mesh: Mesh, name: str) -> bytes:
        """Return the encoded mesh; vertices, faces and normals are preserved."""
        ...


@runtime_checkable
class ArchivePackagerProtocol(Protocol):
    """Bundles named payloads into one downloadable archive."""

    def package(self, files: dict[str, bytes]) -> bytes:
        ...


@runtime_checkable
class FrameRendererProtocol(Protocol):
    """Rendering collaborator that owns the frame currently on screen."""

    @property
    def current_frame(self) -> Frame | None:
        ...

    def show(self, frame: Frame) -> CameraPose:
        """Replace the displayed frame and refit the camera to it."""
        ...

    def fit_view(self, box: BoundingBox3D) -> CameraPose:
        ...
