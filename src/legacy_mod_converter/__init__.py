"""Legacy Mod Converter.

This package converts legacy loose-asset game mods into the IoStore
container format (.pak/.ucas/.utoc) loaded from the game's ~mods folder,
by staging Content into the expected layout, optionally retargeting
identifiers, and running the external retoc converter.
"""

# Core library interface
from .pipeline import ConversionPipeline
from .core import (
    ConversionError,
    ConversionRequest,
    ConversionResult,
    ConverterConfig,
    OutputTriple,
    RetargetPair,
    load_config,
)

# Stage helpers
from .naming import MOD_SUFFIX, derive_mod_name
from .paths import PassthroughTranslator, WslPathTranslator, create_translator
from .retarget import retarget_tree, validate_retarget

# CLI interface
from .cli import main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "ConversionPipeline",
    "ConversionRequest",
    "ConversionResult",
    "ConverterConfig",
    "ConversionError",
    "OutputTriple",
    "RetargetPair",
    "load_config",
    # Stage helpers
    "MOD_SUFFIX",
    "derive_mod_name",
    "PassthroughTranslator",
    "WslPathTranslator",
    "create_translator",
    "retarget_tree",
    "validate_retarget",
    # CLI
    "main",
]
