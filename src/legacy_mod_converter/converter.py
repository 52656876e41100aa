"""Invocation of the external IoStore converter (retoc).

The converter turns a staged folder of loose cooked assets into the three
container files the game loads: .utoc, .ucas and .pak.
"""

import subprocess
from pathlib import Path

from .core.errors import ConverterError
from .core.types import OutputTriple
from .paths import PathTranslator


def verify_outputs(outputs: OutputTriple) -> None:
    """Require every output file to exist and be non-empty.

    Raises:
        ConverterError: Naming the first missing or empty file
    """
    for output in outputs:
        if not output.is_file() or output.stat().st_size == 0:
            raise ConverterError(f"Missing output: {output}")


class RetocConverter:
    """Thin wrapper around the converter executable.

    Paths passed to the tool go through the translator, since the tool may
    run under a different host than this process.

    Example:
        >>> converter = RetocConverter(Path('retoc.exe'), WslPathTranslator())
        >>> converter.convert(stage.root, outputs, 'UE5_3')
    """

    def __init__(self, tool: Path, translator: PathTranslator):
        self.tool = tool
        self.translator = translator

    def _run(self, args: list[str], capture: bool = False) -> subprocess.CompletedProcess:
        command = [str(self.tool), *args]
        try:
            return subprocess.run(command, check=True, capture_output=capture, text=capture)
        except subprocess.CalledProcessError as e:
            raise ConverterError(
                f"{self.tool.name} {args[0]} failed with exit status {e.returncode}"
            ) from e
        except OSError as e:
            raise ConverterError(f"Could not run {self.tool}: {e}") from e

    def convert(self, stage_root: Path, outputs: OutputTriple, engine_version: str) -> None:
        """Convert a staged folder into an IoStore container.

        Args:
            stage_root: Directory containing <ProjectName>/Content
            outputs: Expected output files; the converter is given the .utoc
            engine_version: Engine version tag such as UE5_3

        Raises:
            ConverterError: If the tool fails or an output is missing or empty
        """
        self._run(
            [
                "to-zen",
                "--version",
                engine_version,
                self.translator.to_foreign(stage_root),
                self.translator.to_foreign(outputs.utoc),
            ]
        )
        verify_outputs(outputs)

    def info(self, utoc: Path, max_lines: int = 20) -> list[str]:
        """Return the first lines of the converter's description of a container.

        Raises:
            ConverterError: If the tool fails
        """
        completed = self._run(["info", self.translator.to_foreign(utoc)], capture=True)
        return completed.stdout.splitlines()[:max_lines]
