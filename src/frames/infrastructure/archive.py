"""Zip archive packaging for exported pieces."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)

# Fixed entry timestamp so identical payloads give identical archives
ARCHIVE_TIMESTAMP = (2024, 1, 1, 0, 0, 0)


class ZipArchivePackager:
    """Bundles named payloads into one deflated zip archive.

    Entries keep the insertion order of the mapping.
    """

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self.compression = compression

    def package(self, files: dict[str, bytes]) -> bytes:
        if not files:
            raise ValueError("Nothing to package")
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=self.compression) as archive:
            for name, payload in files.items():
                info = zipfile.ZipInfo(name, date_time=ARCHIVE_TIMESTAMP)
                info.compress_type = self.compression
                info.external_attr = 0o644 << 16
                archive.writestr(info, payload)
        logger.debug(f"Packaged {len(files)} files into {buffer.tell()} bytes")
        return buffer.getvalue()

    def write(self, files: dict[str, bytes], path: Path | str) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.package(files))
        return path
