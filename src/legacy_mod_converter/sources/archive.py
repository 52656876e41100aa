"""Zip archive input source."""

import sys
import tempfile
import zipfile
from pathlib import Path

from ..core.errors import InputShapeError
from .base import InputSource, validate_path_safety


class ZipArchiveSource(InputSource):
    """A mod shipped as a .zip file.

    The archive is extracted lazily into a private temporary directory that
    is removed when the source is closed. Members with the same name
    overwrite each other silently.

    Example:
        >>> with ZipArchiveSource(Path('old_mod.zip')) as source:
        ...     root = source.working_dir()
    """

    def __init__(self, path: Path):
        super().__init__(path)
        self._scratch: tempfile.TemporaryDirectory[str] | None = None
        self._extracted: Path | None = None

    def working_dir(self) -> Path:
        """Extract the archive on first use and return the extraction directory.

        Raises:
            InputShapeError: If the archive is corrupt or a member escapes
                the extraction directory
        """
        if self._extracted is None:
            self._scratch = tempfile.TemporaryDirectory(prefix="mod-extract-")
            target = Path(self._scratch.name)
            print(f"Extracting {self.path.name}...")
            self._extract(target)
            self._extracted = target
        return self._extracted

    def _extract(self, target: Path) -> None:
        try:
            with zipfile.ZipFile(self.path) as archive:
                for member in archive.namelist():
                    validate_path_safety(target / member, target)
                archive.extractall(target)
        except zipfile.BadZipFile as e:
            raise InputShapeError(f"Not a valid zip archive: {self.path}: {e}") from e
        except ValueError as e:
            raise InputShapeError(f"Unsafe archive {self.path}: {e}") from e

    def close(self) -> None:
        if self._scratch is not None:
            try:
                self._scratch.cleanup()
            except OSError as e:
                print(f"Warning: Failed to remove {self._scratch.name}: {e}", file=sys.stderr)
            self._scratch = None
            self._extracted = None
