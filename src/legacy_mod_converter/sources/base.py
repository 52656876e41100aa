"""Base abstraction for mod input sources.

A legacy mod arrives either as a folder or as a zip archive. Both are
exposed to the pipeline as a directory to read from; sources that need
scratch space own it and release it on close.
"""

from abc import ABC, abstractmethod
from pathlib import Path


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents archive members from escaping the extraction directory.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


class InputSource(ABC):
    """Abstract base class for mod inputs.

    Sources are context managers so the pipeline can register them with a
    single ExitStack and have scratch space removed on every exit path.

    Attributes:
        path: The path the user supplied (native convention)
    """

    def __init__(self, path: Path):
        self.path = path

    @abstractmethod
    def working_dir(self) -> Path:
        """Return the directory holding the mod's files.

        Raises:
            InputShapeError: If the input cannot be opened
        """
        pass

    def close(self) -> None:
        """Release any scratch space. Safe to call more than once."""

    def __enter__(self) -> "InputSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
