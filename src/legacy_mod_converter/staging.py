"""Staging of Content into the layout the converter expects.

The converter derives the mount paths inside the container from the folder
structure it is given, so Content must sit under the game's project folder:

    <stage>/<ProjectName>/Content/...
"""

import shutil
import sys
import tempfile
from pathlib import Path

from .layout import CONTENT_DIR_NAME


class Stage:
    """Scratch copy of a mod's Content, removed when closed.

    Attributes:
        root: Stage directory handed to the converter
        content_dir: <root>/<project_name>/Content
    """

    def __init__(self, project_name: str):
        self._scratch = tempfile.TemporaryDirectory(prefix="mod-stage-")
        self.root = Path(self._scratch.name)
        self.project_dir = self.root / project_name
        self.content_dir = self.project_dir / CONTENT_DIR_NAME

    def populate(self, content_root: Path) -> None:
        """Copy content_root into the stage, preserving structure and bytes."""
        self.project_dir.mkdir(parents=True, exist_ok=True)
        shutil.copytree(content_root, self.content_dir)

    def close(self) -> None:
        if self._scratch is None:
            return
        try:
            self._scratch.cleanup()
        except OSError as e:
            print(f"Warning: Failed to remove {self.root}: {e}", file=sys.stderr)
        self._scratch = None

    def __enter__(self) -> "Stage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def stage_content(content_root: Path, project_name: str) -> Stage:
    """Create a stage and copy content_root into it.

    The caller owns the returned Stage and must close it.
    """
    stage = Stage(project_name)
    try:
        stage.populate(content_root)
    except BaseException:
        stage.close()
        raise
    return stage
