"""Installation of converted mods into the game's ~mods folder."""

import shutil
from pathlib import Path

from .core.types import OutputTriple


def install_outputs(outputs: OutputTriple, mods_dir: Path) -> list[Path]:
    """Copy the output files into mods_dir.

    Existing files with the same names are overwritten without backup; the
    originals in the output directory are left in place.

    Returns:
        Paths of the installed copies
    """
    mods_dir.mkdir(parents=True, exist_ok=True)

    installed = []
    for output in (outputs.pak, outputs.ucas, outputs.utoc):
        destination = mods_dir / output.name
        shutil.copyfile(output, destination)
        installed.append(destination)
    return installed
