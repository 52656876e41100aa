"""Tests for input sources."""

import tempfile
import zipfile
from pathlib import Path

import pytest

from legacy_mod_converter.core.errors import InputShapeError, PreconditionError
from legacy_mod_converter.sources import (
    DirectorySource,
    ZipArchiveSource,
    open_source,
    validate_path_safety,
)

from conftest import write_file


def make_zip(path: Path, members: dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, "w") as archive:
        for name, data in members.items():
            archive.writestr(name, data)
    return path


class TestOpenSource:
    """Test source selection."""

    def test_directory(self, tmp_path: Path) -> None:
        assert isinstance(open_source(tmp_path), DirectorySource)

    def test_zip_any_case(self, tmp_path: Path) -> None:
        archive = make_zip(tmp_path / "Mod.ZIP", {"Content/a.uasset": b"x"})
        assert isinstance(open_source(archive), ZipArchiveSource)

    def test_missing_input(self, tmp_path: Path) -> None:
        with pytest.raises(PreconditionError, match="Input does not exist"):
            open_source(tmp_path / "nope")

    def test_other_file(self, tmp_path: Path) -> None:
        other = write_file(tmp_path / "mod.rar")
        with pytest.raises(InputShapeError, match="must be a .zip"):
            open_source(other)


class TestZipArchiveSource:
    """Test archive extraction and cleanup."""

    def test_extracts_and_cleans_up(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = make_zip(tmp_path / "Mod.zip", {"Mod/Content/a.uasset": b"data"})

        with ZipArchiveSource(archive) as source:
            root = source.working_dir()
            assert (root / "Mod" / "Content" / "a.uasset").read_bytes() == b"data"
            assert root.parent == scratch_dir

        assert not root.exists()
        assert list(scratch_dir.iterdir()) == []

    def test_corrupt_archive(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = write_file(tmp_path / "broken.zip", b"not a zip")

        with ZipArchiveSource(archive) as source:
            with pytest.raises(InputShapeError, match="Not a valid zip archive"):
                source.working_dir()

        assert list(scratch_dir.iterdir()) == []

    def test_rejects_traversal_members(self, tmp_path: Path, scratch_dir: Path) -> None:
        archive = make_zip(tmp_path / "evil.zip", {"../../escape.uasset": b"x"})

        with ZipArchiveSource(archive) as source:
            with pytest.raises(InputShapeError, match="escapes base directory"):
                source.working_dir()

        assert not (tmp_path / "escape.uasset").exists()


class TestValidatePathSafety:
    """Test path traversal prevention."""

    def test_allows_paths_within_base(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            validate_path_safety(base / "subdir" / "file.txt", base)

    def test_rejects_path_traversal(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            with pytest.raises(ValueError, match="escapes base directory"):
                validate_path_safety(base / ".." / ".." / "etc" / "passwd", base)


def test_directory_source_is_read_only(legacy_mod: Path) -> None:
    before = sorted(p.relative_to(legacy_mod) for p in legacy_mod.rglob("*"))
    with DirectorySource(legacy_mod) as source:
        assert source.working_dir() == legacy_mod
    assert sorted(p.relative_to(legacy_mod) for p in legacy_mod.rglob("*")) == before
