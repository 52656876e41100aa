"""Type definitions for a conversion run.

This module defines the records passed between pipeline stages, from the
resolved command-line request to the final result.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RetargetPair:
    """Validated (from, to) identifier tokens of equal length."""

    source: str
    target: str


@dataclass
class ConversionRequest:
    """Fully resolved parameters for a single conversion run.

    All paths are already in the native host convention.
    """

    input_path: Path
    output_dir: Path
    engine_version: str
    project_name: str
    mods_dir: Path
    mod_name: str | None = None  # Explicit --name, derived from input otherwise
    tool_path: Path | None = None  # Explicit --retoc, auto-detected otherwise
    retarget: RetargetPair | None = None
    install: bool = False


@dataclass(frozen=True)
class OutputTriple:
    """The three container files the converter produces for one mod."""

    pak: Path
    ucas: Path
    utoc: Path

    @classmethod
    def for_mod(cls, directory: Path, mod_name: str) -> "OutputTriple":
        """Build the expected output paths for a mod name in a directory."""
        return cls(
            pak=directory / f"{mod_name}.pak",
            ucas=directory / f"{mod_name}.ucas",
            utoc=directory / f"{mod_name}.utoc",
        )

    def __iter__(self) -> Iterator[Path]:
        # Verification order: the table of contents is written last
        yield self.utoc
        yield self.ucas
        yield self.pak


@dataclass
class RetargetReport:
    """Counts reported by the retarget passes."""

    renamed: int = 0
    patched: int = 0


@dataclass
class ConversionResult:
    """Outcome of a successful conversion run."""

    mod_name: str
    outputs: OutputTriple
    retarget: RetargetReport | None = None
    installed: list[Path] = field(default_factory=list)
