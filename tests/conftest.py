"""Shared fixtures for converter tests."""

import stat
import tempfile
from pathlib import Path

import pytest

from legacy_mod_converter.core.config import ConverterConfig
from legacy_mod_converter.core.types import ConversionRequest
from legacy_mod_converter.paths import PassthroughTranslator

# Stands in for retoc: records its arguments, snapshots the staged tree,
# and writes the three container files next to the requested .utoc.
FAKE_RETOC = """#!/bin/sh
here="$(dirname "$0")"
echo "$@" >> "$here/calls.log"
case "$1" in
  to-zen)
    rm -rf "$here/staged_copy"
    cp -r "$4" "$here/staged_copy"
    base="${5%.utoc}"
    for ext in {extensions}; do
      printf 'container-%s' "$ext" > "$base.$ext"
    done
    exit {exit_code}
    ;;
  info)
    echo "Container: $2"
    echo "Packages: 1"
    ;;
esac
"""


def make_fake_retoc(
    directory: Path,
    extensions: tuple[str, ...] = ("utoc", "ucas", "pak"),
    exit_code: int = 0,
    name: str = "retoc.exe",
) -> Path:
    """Write an executable fake converter into directory."""
    directory.mkdir(parents=True, exist_ok=True)
    script = directory / name
    script.write_text(
        FAKE_RETOC.replace("{extensions}", " ".join(extensions)).replace(
            "{exit_code}", str(exit_code)
        )
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def write_file(path: Path, data: bytes = b"cooked") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def fake_retoc(tmp_path: Path) -> Path:
    """A working fake converter."""
    return make_fake_retoc(tmp_path / "tools")


@pytest.fixture
def legacy_mod(tmp_path: Path) -> Path:
    """A legacy mod folder laid out as OldSkin/Content/..."""
    root = tmp_path / "mods" / "OldSkin"
    write_file(root / "Content" / "Characters" / "foo.uasset", b"\x00foo-1011001-bar\x00")
    write_file(root / "Content" / "Characters" / "foo.uexp", b"uexp 1011001")
    return root


@pytest.fixture
def scratch_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect temporary directories so leftovers can be detected."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch


@pytest.fixture
def config(tmp_path: Path) -> ConverterConfig:
    """Config for a natively runnable converter, with no auto-detection."""
    return ConverterConfig(
        output_dir=str(tmp_path / "out"),
        mods_dir=str(tmp_path / "game" / "~mods"),
        tool_candidates=[],
        tool_name="retoc-not-on-path.exe",
        path_translation="none",
    )


@pytest.fixture
def translator() -> PassthroughTranslator:
    return PassthroughTranslator()


@pytest.fixture
def make_request(tmp_path: Path, config: ConverterConfig, fake_retoc: Path):
    """Factory for requests that use the fake converter."""

    def _make(input_path: Path, **overrides) -> ConversionRequest:
        values = dict(
            input_path=input_path,
            output_dir=Path(config.output_dir),
            engine_version=config.engine_version,
            project_name=config.project_name,
            mods_dir=Path(config.mods_dir),
            tool_path=fake_retoc,
        )
        values.update(overrides)
        return ConversionRequest(**values)

    return _make
