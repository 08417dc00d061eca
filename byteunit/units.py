#
# ByteUnit Unit Table
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .errors import UnknownUnitError

# Constants ------------------------------------------------------------------------------------------------------------

U64_MAX = 2 ** 64 - 1

MAX_EXPONENT = 6


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class UnitFamily(StrEnum):
    """
    Unit families of byte quantities.

    Attributes:
        DECIMAL (str) : SI prefixes, powers of 1000 - kB, MB, GB
        BINARY (str)  : IEC prefixes, powers of 1024 - KiB, MiB, GiB
    """
    DECIMAL = "decimal"
    BINARY = "binary"

    @property
    def base(self) -> int:
        return 1024 if self is UnitFamily.BINARY else 1000


@dataclass(frozen=True)
class Unit:
    """
    A byte unit descriptor: symbol, power of the family base, and the family.

    The plain byte ``B`` has exponent 0 and is shared by both families.
    """

    symbol: str
    exponent: int
    family: UnitFamily

    def __str__(self) -> str:
        return self.symbol

    @property
    def multiplier(self) -> int:
        """Number of bytes in one of this unit."""
        return unit_multiplier(self.family, self.exponent)

    @property
    def prefix(self) -> str:
        """Prefix part of the symbol, e.g. 'Ki' for KiB, '' for B."""
        return self.symbol[:-1]

    @property
    def is_binary(self) -> bool:
        return self.family is UnitFamily.BINARY and self.exponent > 0


# @formatter:off

decimal_prefixes = FrozenBiMap({
    0: "", 1: "k", 2: "M", 3: "G", 4: "T", 5: "P", 6: "E",
})

binary_prefixes = FrozenBiMap({
    0: "", 1: "Ki", 2: "Mi", 3: "Gi", 4: "Ti", 5: "Pi", 6: "Ei",
})

# @formatter:on

_FAMILY_PREFIXES = {
    UnitFamily.DECIMAL: decimal_prefixes,
    UnitFamily.BINARY: binary_prefixes,
}


# Methods --------------------------------------------------------------------------------------------------------------

def unit_multiplier(family: UnitFamily, exponent: int) -> int:
    """
    Bytes per unit for a family and exponent: 1000**exponent or 1024**exponent.

    The result is clamped to U64_MAX, so any non-negative exponent is accepted.

    Raises:
        ValueError: If exponent is negative, there are no sub-byte units.

    Examples:
        >>> unit_multiplier(UnitFamily.DECIMAL, 2)
        1000000
        >>> unit_multiplier(UnitFamily.BINARY, 6)
        1152921504606846976
    """
    family = UnitFamily(family)
    if not isinstance(exponent, int) or isinstance(exponent, bool):
        raise TypeError(f"exponent must be an int, got {type(exponent).__name__}")
    if exponent < 0:
        raise ValueError(f"exponent must be >= 0, got {exponent}")
    return min(family.base ** exponent, U64_MAX)


def unit_for(family: UnitFamily, exponent: int) -> Unit:
    """
    Return the unit of a family with the given exponent.

    Raises:
        UnknownUnitError: If exponent is outside 0..6.
    """
    family = UnitFamily(family)
    if isinstance(exponent, bool) or not isinstance(exponent, int) or not 0 <= exponent <= MAX_EXPONENT:
        raise UnknownUnitError(f"{family.value}:{exponent!r}")
    return _UNITS_BY_EXPONENT[family][exponent]


def units_of(family: UnitFamily) -> tuple[Unit, ...]:
    """Units of a family in ascending order, starting with the plain byte."""
    return _UNITS_BY_EXPONENT[UnitFamily(family)]


def lookup_unit(symbol: str) -> Unit:
    """
    Find a unit by its symbol, ignoring case.

    Only the letter 'i' separates the families, so "kb", "KB" and "Kb" all mean
    the kilobyte while "kib" means the kibibyte. A bare "B" or "b" is one byte.

    Raises:
        TypeError: If symbol is not a str.
        UnknownUnitError: If no unit matches.

    Examples:
        >>> lookup_unit("mib")
        Unit(symbol='MiB', exponent=2, family=<UnitFamily.BINARY: 'binary'>)
    """
    if not isinstance(symbol, str):
        raise TypeError(f"unit symbol must be a str, got {type(symbol).__name__}")
    try:
        return _UNITS_BY_SYMBOL[symbol.strip().lower()]
    except KeyError:
        raise UnknownUnitError(symbol) from None


def _build_family(family: UnitFamily) -> tuple[Unit, ...]:
    units = []
    for exponent, prefix in sorted(_FAMILY_PREFIXES[family].items()):
        if exponent == 0:
            units.append(B)
        else:
            units.append(Unit(f"{prefix}B", exponent, family))
    return tuple(units)


# Unit Table -----------------------------------------------------------------------------------------------------------

B = Unit("B", 0, UnitFamily.DECIMAL)

DECIMAL_UNITS = _build_family(UnitFamily.DECIMAL)
BINARY_UNITS = _build_family(UnitFamily.BINARY)

# @formatter:off
_, kB, MB, GB, TB, PB, EB = DECIMAL_UNITS
_, KiB, MiB, GiB, TiB, PiB, EiB = BINARY_UNITS
# @formatter:on

UNITS: tuple[Unit, ...] = (B, kB, KiB, MB, MiB, GB, GiB, TB, TiB, PB, PiB, EB, EiB)

_UNITS_BY_EXPONENT = {
    UnitFamily.DECIMAL: DECIMAL_UNITS,
    UnitFamily.BINARY: BINARY_UNITS,
}

_UNITS_BY_SYMBOL = {unit.symbol.lower(): unit for unit in UNITS}


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if len(_UNITS_BY_SYMBOL) != len(UNITS):
    raise AssertionError("Configuration Error: unit symbols must be unique ignoring case.")

if any(unit.exponent > MAX_EXPONENT for unit in UNITS):
    raise AssertionError(f"Configuration Error: unit exponents must not exceed {MAX_EXPONENT}.")
