"""Host path conventions.

The converter is a Windows binary launched from WSL, so the paths handed to
it must be Windows paths, while everything else works with native paths.
Users may also pass Windows-style paths on the command line.
"""

import re
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from .core.config import ConverterConfig
from .core.errors import PreconditionError, UsageError

# Drive-letter paths such as C:\Games or c:/Games
FOREIGN_PATH_PATTERN = re.compile(r"^[A-Za-z]:[\\/]")

WSLPATH = "wslpath"


def is_foreign_path(text: str) -> bool:
    """Return True if text is a drive-letter style path."""
    return bool(FOREIGN_PATH_PATTERN.match(text))


def require_command(name: str) -> str:
    """Return the full path of a command on the search path.

    Raises:
        PreconditionError: If the command cannot be found
    """
    found = shutil.which(name)
    if found is None:
        raise PreconditionError(f"Missing required command: {name}")
    return found


class PathTranslator(Protocol):
    """Converts paths between the native and the converter's convention."""

    def to_native(self, text: str) -> Path:
        ...

    def to_foreign(self, path: Path) -> str:
        ...


class PassthroughTranslator:
    """Translator for a converter that runs natively on this host."""

    def to_native(self, text: str) -> Path:
        return Path(text)

    def to_foreign(self, path: Path) -> str:
        return str(path)


class WslPathTranslator:
    """Translator backed by the wslpath utility.

    Example:
        >>> translator = WslPathTranslator()
        >>> translator.to_native("C:\\Users\\me\\mod.zip")
        PosixPath('/mnt/c/Users/me/mod.zip')
    """

    def __init__(self, command: str | None = None):
        """Initialize the translator.

        Args:
            command: Path to wslpath (looked up on the search path by default)

        Raises:
            PreconditionError: If wslpath is not available
        """
        self.command = command or require_command(WSLPATH)

    def _run(self, flag: str, value: str) -> str:
        try:
            completed = subprocess.run(
                [self.command, flag, value],
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            message = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise UsageError(f"Could not translate path {value!r}: {message}") from e
        return completed.stdout.strip()

    def to_native(self, text: str) -> Path:
        """Translate a drive-letter path; other paths pass through."""
        if not is_foreign_path(text):
            return Path(text)
        return Path(self._run("-u", text))

    def to_foreign(self, path: Path) -> str:
        """Translate a native path to the Windows convention."""
        return self._run("-w", str(path))


def create_translator(config: ConverterConfig) -> PathTranslator:
    """Pick the translator named by the configuration.

    Raises:
        UsageError: If the configured mode is unknown
        PreconditionError: If the mode needs a utility that is missing
    """
    if config.path_translation == "wsl":
        return WslPathTranslator()
    if config.path_translation == "none":
        return PassthroughTranslator()
    raise UsageError(f"Unknown path translation mode: {config.path_translation}")
