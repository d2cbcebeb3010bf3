"""Unit tests for zip packaging."""

import io
import zipfile
from pathlib import Path

import pytest

from frames.infrastructure import ZipArchivePackager


class TestZipArchivePackager:
    def test_entries_keep_insertion_order(self) -> None:
        payload = ZipArchivePackager().package({"b.stl": b"bb", "a.stl": b"a"})
        with zipfile.ZipFile(io.BytesIO(payload)) as archive:
            assert archive.namelist() == ["b.stl", "a.stl"]
            assert archive.read("b.stl") == b"bb"

    def test_entries_are_deflated(self) -> None:
        payload = ZipArchivePackager().package({"a.stl": b"x" * 1000})
        with zipfile.ZipFile(io.BytesIO(payload)) as archive:
            info = archive.getinfo("a.stl")
            assert info.compress_type == zipfile.ZIP_DEFLATED
            assert info.compress_size < info.file_size

    def test_identical_payloads_give_identical_archives(self) -> None:
        files = {"frame_top.stl": b"\x00" * 64}
        packager = ZipArchivePackager()
        assert packager.package(files) == packager.package(files)

    def test_rejects_empty_archive(self) -> None:
        with pytest.raises(ValueError):
            ZipArchivePackager().package({})

    def test_write_creates_parent_dirs(self, tmp_path: Path) -> None:
        path = ZipArchivePackager().write({"a.txt": b"a"}, tmp_path / "out" / "frame.zip")
        assert path.exists()
        assert zipfile.is_zipfile(path)
