"""Command-line interface for the legacy mod converter.

This module provides the CLI entry point that resolves options and paths
and hands a ConversionRequest to the pipeline.
"""

import argparse
import sys
from pathlib import Path

from .core.config import ConverterConfig, load_config
from .core.errors import ConversionError
from .core.types import ConversionRequest, RetargetPair
from .paths import PathTranslator, create_translator
from .pipeline import ConversionPipeline
from .retarget import validate_retarget


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="convert-legacy-mod",
        description=(
            "Convert a legacy Marvel Rivals mod (loose Content assets) "
            "to the new ~mods IoStore format."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  convert-legacy-mod old_mod
  convert-legacy-mod old_mod.zip --name MySkin --install
  convert-legacy-mod old_mod --retoc "/mnt/c/Users/me/Downloads/retoc-x86_64-pc-windows-msvc/retoc.exe"
  convert-legacy-mod old_mod --retarget-from 1011001 --retarget-to 1011002
        """,
    )

    parser.add_argument(
        "input_path",
        nargs="?",
        help="Legacy mod folder or .zip (must contain Content/... files)",
    )

    parser.add_argument("--output-dir", help="Output directory (default: ./converted_mods)")

    parser.add_argument("--name", help="Base name for output files (default: derived from input)")

    parser.add_argument("--retoc", help="Path to retoc.exe (default: auto-detect)")

    parser.add_argument("--version", help="retoc engine version (default: UE5_3)")

    parser.add_argument(
        "--project-name",
        help="Unreal project folder name used for staging (default: Marvel)",
    )

    parser.add_argument(
        "--retarget-from",
        help="Optional cooked-ID string to replace in paths and package metadata",
    )

    parser.add_argument(
        "--retarget-to",
        help="Replacement for --retarget-from (must be same length)",
    )

    parser.add_argument(
        "--install",
        action="store_true",
        help="Copy output files into game ~mods folder after convert",
    )

    parser.add_argument("--mods-dir", help="Override install folder for --install")

    parser.add_argument("--config", help="JSON file overriding the built-in defaults")

    return parser


def resolve_request(
    args: argparse.Namespace,
    config: ConverterConfig,
    translator: PathTranslator,
    retarget: RetargetPair | None = None,
) -> ConversionRequest:
    """Turn parsed options into a fully resolved request.

    Flags take precedence over the config, and every path is translated to
    the native convention. The retarget pair is validated by the caller.
    """
    output_dir = translator.to_native(args.output_dir or config.output_dir)
    if not output_dir.is_absolute():
        output_dir = Path.cwd() / output_dir

    return ConversionRequest(
        input_path=translator.to_native(args.input_path),
        output_dir=output_dir,
        engine_version=args.version or config.engine_version,
        project_name=args.project_name or config.project_name,
        mods_dir=translator.to_native(args.mods_dir or config.mods_dir),
        mod_name=args.name,
        tool_path=translator.to_native(args.retoc) if args.retoc else None,
        retarget=retarget,
        install=args.install,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the converter."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input_path:
        parser.print_help()
        sys.exit(1)

    try:
        # Checked first so inconsistent tokens never reach the filesystem
        retarget = validate_retarget(args.retarget_from, args.retarget_to)

        config = ConverterConfig()
        if args.config:
            config = load_config(Path(args.config), config)

        translator = create_translator(config)
        request = resolve_request(args, config, translator, retarget)

        ConversionPipeline(request, config, translator).run()

    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Error: Conversion failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
