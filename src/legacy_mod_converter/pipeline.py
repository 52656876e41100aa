"""Conversion pipeline.

This module runs the stages of a conversion in order:

    Normalize -> DeriveName -> Stage -> Retarget? -> Convert -> Install?

Each stage consumes the previous stage's result. A failing stage raises a
ConversionError and no later stage runs. Scratch directories are owned by
one ExitStack, so they are removed however the run ends.
"""

from contextlib import ExitStack

from .converter import RetocConverter
from .core.config import ConverterConfig
from .core.types import (
    ConversionRequest,
    ConversionResult,
    OutputTriple,
    RetargetPair,
    RetargetReport,
)
from .installer import install_outputs
from .layout import resolve_content_root
from .locator import find_converter
from .naming import base_name_for, derive_mod_name
from .paths import PathTranslator
from .retarget import retarget_tree
from .sources import open_source
from .staging import Stage, stage_content


class ConversionPipeline:
    """Converts one legacy mod into an IoStore container mod.

    Example:
        >>> config = ConverterConfig()
        >>> translator = create_translator(config)
        >>> request = ConversionRequest(
        ...     input_path=Path('OldSkin'),
        ...     output_dir=Path('converted_mods'),
        ...     engine_version=config.engine_version,
        ...     project_name=config.project_name,
        ...     mods_dir=Path(config.mods_dir),
        ... )
        >>> result = ConversionPipeline(request, config, translator).run()
        >>> result.mod_name
        'OldSkin_9999999_P'
    """

    def __init__(
        self,
        request: ConversionRequest,
        config: ConverterConfig,
        translator: PathTranslator,
    ):
        self.request = request
        self.config = config
        self.translator = translator

    def run(self) -> ConversionResult:
        """Run every stage and return the result.

        Raises:
            ConversionError: From whichever stage failed
        """
        request = self.request

        with ExitStack() as scratch:
            source = scratch.enter_context(open_source(request.input_path))
            content_root = resolve_content_root(source.working_dir())

            tool = find_converter(request.tool_path, self.config)
            converter = RetocConverter(tool, self.translator)

            mod_name = self.derive_name()
            request.output_dir.mkdir(parents=True, exist_ok=True)
            outputs = OutputTriple.for_mod(request.output_dir, mod_name)

            stage = scratch.enter_context(stage_content(content_root, request.project_name))

            report = None
            if request.retarget is not None:
                report = self.retarget(stage, request.retarget)

            print(f"Converting with {tool.name}...")
            print(f"  input:   {source.working_dir()}")
            print(f"  staged:  {stage.content_dir}")
            print(f"  output:  {outputs.utoc}")
            print(f"  version: {request.engine_version}")
            print(f"  project: {request.project_name}")
            print(f"  tool:    {tool}")

            converter.convert(stage.root, outputs, request.engine_version)

        print()
        print("Created:")
        print(f"  {outputs.pak}")
        print(f"  {outputs.ucas}")
        print(f"  {outputs.utoc}")
        print()

        result = ConversionResult(mod_name=mod_name, outputs=outputs, retarget=report)

        if request.install:
            result.installed = install_outputs(outputs, request.mods_dir)
            print("Installed to:")
            print(f"  {request.mods_dir}")
            print()

        if self.config.info_lines > 0:
            print("Container info:")
            for line in converter.info(outputs.utoc, self.config.info_lines):
                print(line)
            print()

        print("Done.")
        return result

    def derive_name(self) -> str:
        """Derive the output name from --name or the input's base name."""
        candidate = self.request.mod_name or base_name_for(self.request.input_path)
        return derive_mod_name(candidate)

    def retarget(self, stage: Stage, pair: RetargetPair) -> RetargetReport:
        """Retarget identifiers in the staged Content."""
        print("Retargeting IDs in staged content:")
        print(f"  from: {pair.source}")
        print(f"  to:   {pair.target}")

        report = retarget_tree(stage.content_dir, pair)

        print(f"  renamed paths: {report.renamed}")
        print(f"  patched files: {report.patched}")
        return report
