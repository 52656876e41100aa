"""Content root discovery.

Legacy mods are laid out in a few different ways. This module finds the
Content folder the converter needs, accepting:

    <root>/Content/...
    <root> itself named Content
    <root>/<ProjectName>/Content/...
"""

import os
from collections.abc import Iterator
from pathlib import Path

from .core.errors import InputShapeError

CONTENT_DIR_NAME = "Content"

# Cooked asset files; at least one must be present for the input to be a mod
ASSET_EXTENSIONS = {"uasset", "uexp", "ubulk"}


def normalize_working_root(working_dir: Path) -> Path:
    """Step up one level if the user pointed directly at a Content folder."""
    if working_dir.name == CONTENT_DIR_NAME:
        return working_dir.parent
    return working_dir


def iter_asset_files(root_path: Path) -> Iterator[Path]:
    """Yield every cooked asset file under root_path.

    Extensions are matched case-insensitively.
    """
    for dirpath, _, filenames in os.walk(root_path):
        for filename in filenames:
            file_type = Path(filename).suffix.lstrip(".").lower()
            if file_type in ASSET_EXTENSIONS:
                yield Path(dirpath) / filename


def has_asset_files(root_path: Path) -> bool:
    """Return True if any cooked asset file exists under root_path."""
    return next(iter_asset_files(root_path), None) is not None


def find_nested_content_dirs(root_path: Path) -> list[Path]:
    """Find <root>/<ProjectName>/Content folders, sorted by path."""
    return sorted(
        child / CONTENT_DIR_NAME
        for child in root_path.iterdir()
        if child.is_dir() and (child / CONTENT_DIR_NAME).is_dir()
    )


def locate_content_root(working_root: Path) -> Path:
    """Resolve the Content folder to stage.

    Resolution order:
        1. <root>/Content
        2. <root> itself, when it is named Content
        3. the single <root>/<ProjectName>/Content

    Args:
        working_root: Normalized working root

    Returns:
        Path to the Content folder

    Raises:
        InputShapeError: If no layout matches, or several project folders do
    """
    direct = working_root / CONTENT_DIR_NAME
    if direct.is_dir():
        return direct

    if working_root.name == CONTENT_DIR_NAME and working_root.is_dir():
        return working_root

    nested = find_nested_content_dirs(working_root)
    if len(nested) == 1:
        return nested[0]

    if len(nested) > 1:
        listing = "\n".join(f"  {p}" for p in nested)
        raise InputShapeError(
            f"Found several Content folders under {working_root}; "
            f"pass the one to convert directly:\n{listing}"
        )

    raise InputShapeError(f"Could not locate a Content folder under: {working_root}")


def resolve_content_root(working_dir: Path) -> Path:
    """Normalize a working directory, check for assets, and find its Content.

    Raises:
        InputShapeError: If no asset files exist or no Content folder is found
    """
    if not working_dir.is_dir():
        raise InputShapeError(f"Input is not a directory after extraction: {working_dir}")

    working_root = normalize_working_root(working_dir)

    if not has_asset_files(working_root):
        raise InputShapeError(f"No .uasset/.uexp/.ubulk files found under: {working_root}")

    return locate_content_root(working_root)
