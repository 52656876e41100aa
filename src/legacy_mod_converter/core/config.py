"""Converter configuration.

Defaults for the target game live here in one place. A ConverterConfig is
built once by the CLI, optionally overlaid with a JSON config file, and
passed explicitly to every stage that needs it.
"""

import json
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .errors import UsageError

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "config.schema.json"

DEFAULT_OUTPUT_DIR = "converted_mods"

# Engine version tag understood by the converter's to-zen command
DEFAULT_ENGINE_VERSION = "UE5_3"

# Project folder the game mounts its Content under
DEFAULT_PROJECT_NAME = "Marvel"

DEFAULT_MODS_DIR = (
    "/mnt/c/Program Files (x86)/Steam/steamapps/common/"
    "MarvelRivals/MarvelGame/Marvel/Content/Paks/~mods"
)

DEFAULT_TOOL_NAME = "retoc.exe"

DEFAULT_TOOL_CANDIDATES = [
    "{cwd}/retoc.exe",
    "{home}/Downloads/retoc-x86_64-pc-windows-msvc/retoc.exe",
    "/mnt/c/Users/{user}/Downloads/retoc-x86_64-pc-windows-msvc/retoc.exe",
]


@dataclass
class ConverterConfig:
    """Defaults and environment knobs for a conversion run.

    Attributes:
        output_dir: Where container files are written, relative to the
            working directory unless absolute
        engine_version: Engine version tag passed to the converter
        project_name: Folder the staged Content is nested under
        mods_dir: Install destination used by --install
        tool_name: Converter executable looked up on the search path
        tool_candidates: Ordered well-known converter locations, with
            {cwd}, {home} and {user} placeholders
        path_translation: "wsl" to hand the converter Windows paths via
            wslpath, "none" to pass native paths through
        info_lines: Lines of container info printed after converting
    """

    output_dir: str = DEFAULT_OUTPUT_DIR
    engine_version: str = DEFAULT_ENGINE_VERSION
    project_name: str = DEFAULT_PROJECT_NAME
    mods_dir: str = DEFAULT_MODS_DIR
    tool_name: str = DEFAULT_TOOL_NAME
    tool_candidates: list[str] = field(default_factory=lambda: list(DEFAULT_TOOL_CANDIDATES))
    path_translation: str = "wsl"
    info_lines: int = 20

    def merged(self, overrides: dict[str, Any]) -> "ConverterConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


@lru_cache(maxsize=1)
def config_validator() -> Draft202012Validator:
    """Build the validator for config files from the packaged schema."""
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return Draft202012Validator(json.load(f))


def config_problems(data: Any) -> list[str]:
    """List every way data fails the config schema.

    Each entry is prefixed with the dotted location of the offending value,
    for example "tool_candidates.1: '' is too short". An empty list means
    the data is a valid config.
    """
    errors = sorted(
        config_validator().iter_errors(data),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    problems = []
    for error in errors:
        location = ".".join(str(p) for p in error.absolute_path) or "top level"
        problems.append(f"{location}: {error.message}")
    return problems


def load_config(path: Path, base: ConverterConfig | None = None) -> ConverterConfig:
    """Load a JSON config file and overlay it on the defaults.

    Args:
        path: Config file to read
        base: Config to overlay onto (defaults to built-in defaults)

    Returns:
        The merged configuration

    Raises:
        UsageError: If the file is missing, not JSON, or fails schema validation
    """
    base = base or ConverterConfig()

    if not path.is_file():
        raise UsageError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise UsageError(f"Config file is not valid JSON: {path}: {e}") from e

    problems = config_problems(data)
    if problems:
        details = "\n".join(f"  {p}" for p in problems)
        raise UsageError(f"Invalid config file {path}:\n{details}")

    return base.merged(data)
