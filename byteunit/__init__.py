"""
Saturating, human-friendly byte units.

    >>> from byteunit import ByteUnit, kilobytes, mebibytes
    >>> str(kilobytes(323))
    '323kB'
    >>> 1024 * ByteUnit.EiB == ByteUnit.max_value()
    True
    >>> ByteUnit.parse("1.5 MiB") == mebibytes(1) + 512 * ByteUnit.KiB
    True

Logging goes through loguru and is disabled for this package by default;
call ``logger.enable("byteunit")`` to see parser diagnostics.
"""

# Third-party ----------------------------------------------------------------------------------------------------------
from loguru import logger

# Local ----------------------------------------------------------------------------------------------------------------
from .display import DisplayConf, FormatSpec, format_bytes
from .errors import ByteUnitError, DivideByZeroError, MalformedInputError, UnknownUnitError
from .parse import parse_bytes
from .size import (
    ByteUnit, Components,
    bytes_, kilobytes, kibibytes, megabytes, mebibytes, gigabytes, gibibytes,
    terabytes, tebibytes, petabytes, pebibytes, exabytes, exbibytes,
)
from .units import Unit, UnitFamily, UNITS, lookup_unit

__all__ = [
    "ByteUnit", "Components",
    "bytes_", "kilobytes", "kibibytes", "megabytes", "mebibytes", "gigabytes", "gibibytes",
    "terabytes", "tebibytes", "petabytes", "pebibytes", "exabytes", "exbibytes",
    "DisplayConf", "FormatSpec", "format_bytes",
    "parse_bytes",
    "Unit", "UnitFamily", "UNITS", "lookup_unit",
    "ByteUnitError", "DivideByZeroError", "MalformedInputError", "UnknownUnitError",
]

logger.disable(__name__)
