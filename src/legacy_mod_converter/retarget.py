"""Retargeting of cooked identifiers in staged content.

Legacy mods often embed a character or skin ID both in folder and file
names and inside serialized package metadata. Retargeting applies the same
literal substitution to both. Tokens must have equal length because the
cooked files store offsets and lengths that would otherwise be invalidated.
"""

import os
import tempfile
from pathlib import Path

from .core.errors import ConsistencyError
from .core.types import RetargetPair, RetargetReport

# Files carrying package metadata that may reference the token
PATCHED_EXTENSIONS = {"uasset", "uexp"}


def validate_retarget(source: str | None, target: str | None) -> RetargetPair | None:
    """Check that retarget tokens are given together and have equal length.

    Returns:
        The validated pair, or None when neither token is given

    Raises:
        ConsistencyError: If only one token is given or the lengths differ
    """
    if not source and not target:
        return None

    if not source or not target:
        raise ConsistencyError("Use --retarget-from and --retarget-to together.")

    if len(source) != len(target) or len(source.encode("utf-8")) != len(target.encode("utf-8")):
        raise ConsistencyError(
            f"--retarget-from and --retarget-to must have equal length "
            f"({source!r} is {len(source)}, {target!r} is {len(target)})."
        )

    return RetargetPair(source=source, target=target)


def rename_paths(root: Path, pair: RetargetPair) -> int:
    """Move every file whose path contains the source token.

    The substitution is applied to the path relative to root, so both
    folder and file names are retargeted.

    Returns:
        Number of files moved
    """
    files = sorted(p for p in root.rglob("*") if p.is_file())

    renamed = 0
    for file_path in files:
        relative = file_path.relative_to(root).as_posix()
        new_relative = relative.replace(pair.source, pair.target)
        if new_relative == relative:
            continue

        new_path = root / new_relative
        new_path.parent.mkdir(parents=True, exist_ok=True)
        os.replace(file_path, new_path)
        renamed += 1

    return renamed


def remove_empty_dirs(root: Path) -> int:
    """Delete directories under root left empty, deepest first.

    root itself is kept.

    Returns:
        Number of directories removed
    """
    removed = 0
    for dirpath, _, _ in os.walk(root, topdown=False):
        directory = Path(dirpath)
        if directory == root:
            continue
        if not any(directory.iterdir()):
            directory.rmdir()
            removed += 1
    return removed


def patch_file(file_path: Path, pair: RetargetPair) -> bool:
    """Replace every literal occurrence of the token inside one file.

    The file is rewritten through a temporary sibling and moved into place,
    and is left untouched if the token does not occur.

    Returns:
        True if the file was rewritten
    """
    old = pair.source.encode("utf-8")
    new = pair.target.encode("utf-8")

    data = file_path.read_bytes()
    if old not in data:
        return False

    fd, tmp_name = tempfile.mkstemp(prefix=f".{file_path.name}.", suffix=".tmp", dir=file_path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data.replace(old, new))
        os.replace(tmp_name, file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return True


def patch_contents(root: Path, pair: RetargetPair) -> int:
    """Patch the token inside every .uasset/.uexp file under root.

    Returns:
        Number of files rewritten
    """
    patched = 0
    for file_path in sorted(root.rglob("*")):
        if not file_path.is_file():
            continue
        if file_path.suffix.lstrip(".").lower() not in PATCHED_EXTENSIONS:
            continue
        if patch_file(file_path, pair):
            patched += 1
    return patched


def retarget_tree(root: Path, pair: RetargetPair) -> RetargetReport:
    """Run the path rename pass, then the content patch pass."""
    renamed = rename_paths(root, pair)
    remove_empty_dirs(root)
    patched = patch_contents(root, pair)
    return RetargetReport(renamed=renamed, patched=patched)
