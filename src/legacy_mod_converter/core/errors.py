"""Exception hierarchy for conversion failures.

Every failure is fatal for the run. The CLI reports any of these as
``Error: <message>`` on stderr and exits with status 1.
"""


class ConversionError(Exception):
    """Base class for all expected conversion failures."""


class UsageError(ConversionError):
    """Bad or missing command-line options, or an invalid config file."""


class PreconditionError(ConversionError):
    """A required utility, the converter binary, or the input is missing."""


class InputShapeError(ConversionError):
    """The input does not have the layout the converter needs."""


class ConsistencyError(ConversionError):
    """Retarget tokens are partially given or of unequal length."""


class ConverterError(ConversionError):
    """The external converter failed or did not produce its outputs."""
