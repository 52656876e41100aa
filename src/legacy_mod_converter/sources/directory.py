"""Folder input source."""

from pathlib import Path

from .base import InputSource


class DirectorySource(InputSource):
    """A mod that is already an unpacked folder.

    The folder is only read, never modified.
    """

    def working_dir(self) -> Path:
        return self.path
