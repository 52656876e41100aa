"""Core utilities for mod conversion.

This package contains the shared records, the error taxonomy, and the
configuration object used across all pipeline stages.
"""

from .config import ConverterConfig, load_config
from .errors import (
    ConsistencyError,
    ConversionError,
    ConverterError,
    InputShapeError,
    PreconditionError,
    UsageError,
)
from .types import (
    ConversionRequest,
    ConversionResult,
    OutputTriple,
    RetargetPair,
    RetargetReport,
)

__all__ = [
    "ConverterConfig",
    "load_config",
    "ConversionError",
    "UsageError",
    "PreconditionError",
    "InputShapeError",
    "ConsistencyError",
    "ConverterError",
    "ConversionRequest",
    "ConversionResult",
    "OutputTriple",
    "RetargetPair",
    "RetargetReport",
]
