"""Contracts module - protocols for cross-layer communication.

Example:
    ```python
    from frames.contracts import MeshSerializerProtocol

    def encode_all(serializer: MeshSerializerProtocol, frame) -> list[bytes]:
        return [serializer.serialize(p.mesh, p.name) for p in frame.rails]
    ```
"""

from .protocols import (
    ArchivePackagerProtocol as ArchivePackagerProtocol,
    FrameAssemblerProtocol as FrameAssemblerProtocol,
    FrameRendererProtocol as FrameRendererProtocol,
    MeshSerializerProtocol as MeshSerializerProtocol,
)

__all__ = [
    "ArchivePackagerProtocol",
    "FrameAssemblerProtocol",
    "FrameRendererProtocol",
    "MeshSerializerProtocol",
]
