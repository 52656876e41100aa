"""Discovery of the external converter binary."""

import os
import shutil
import sys
from pathlib import Path

from .core.config import ConverterConfig
from .core.errors import PreconditionError


def candidate_paths(config: ConverterConfig) -> list[Path]:
    """Expand the configured candidate locations, in probe order.

    Candidates whose placeholders cannot be filled in (for example {user}
    when USER is unset) are skipped.
    """
    values = {
        "cwd": str(Path.cwd()),
        "home": str(Path.home()),
        "user": os.environ.get("USER", ""),
    }

    paths = []
    for template in config.tool_candidates:
        if "{user}" in template and not values["user"]:
            continue
        try:
            paths.append(Path(template.format(**values)))
        except (KeyError, IndexError, ValueError):
            print(f"Warning: Ignoring malformed tool candidate: {template}", file=sys.stderr)
    return paths


def find_converter(explicit: Path | None, config: ConverterConfig) -> Path:
    """Locate the converter executable.

    An explicit path always wins and must exist. Otherwise the configured
    candidates are probed in order, then the search path. The first match
    wins.

    Args:
        explicit: Path given with --retoc, if any
        config: Converter configuration

    Returns:
        Path to the converter

    Raises:
        PreconditionError: If no converter can be found
    """
    if explicit is not None:
        if not explicit.is_file():
            raise PreconditionError(f"{config.tool_name} not found at: {explicit}")
        # A bare relative name would otherwise be looked up on PATH when run
        return explicit.resolve()

    for candidate in candidate_paths(config):
        if candidate.is_file():
            return candidate

    on_path = shutil.which(config.tool_name)
    if on_path:
        return Path(on_path)

    raise PreconditionError(
        f"Could not locate {config.tool_name}. Pass it explicitly with --retoc."
    )
