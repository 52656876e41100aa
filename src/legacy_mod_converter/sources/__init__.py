"""Input sources for the conversion pipeline."""

from pathlib import Path

from ..core.errors import InputShapeError, PreconditionError
from .archive import ZipArchiveSource
from .base import InputSource, validate_path_safety
from .directory import DirectorySource

ARCHIVE_SUFFIXES = {".zip"}


def open_source(path: Path) -> InputSource:
    """Create the input source for a user-supplied path.

    Args:
        path: Folder or zip archive (native convention)

    Returns:
        An unopened InputSource

    Raises:
        PreconditionError: If the path does not exist
        InputShapeError: If the path is a file that is not a zip archive
    """
    if not path.exists():
        raise PreconditionError(f"Input does not exist: {path}")

    if path.is_dir():
        return DirectorySource(path)

    if path.suffix.lower() in ARCHIVE_SUFFIXES:
        return ZipArchiveSource(path)

    raise InputShapeError("Input file must be a .zip, or provide a directory.")


__all__ = [
    "InputSource",
    "DirectorySource",
    "ZipArchiveSource",
    "open_source",
    "validate_path_safety",
]
