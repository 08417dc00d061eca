#
# ByteUnit Value Type
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from dataclasses import dataclass
from typing import Callable, ClassVar, NamedTuple, Self

# Local ----------------------------------------------------------------------------------------------------------------
from . import numeric
from . import units
from .display import format_with_spec, natural_unit
from .units import Unit, U64_MAX, lookup_unit


# Classes --------------------------------------------------------------------------------------------------------------

class Components(NamedTuple):
    """
    Minimal representation of a byte count: (whole + frac) * unit.multiplier == count.

    Example:
        2.5 MiB → Components(whole=2, frac=0.5, unit=MiB)
    """
    whole: int
    frac: float
    unit: Unit

    @property
    def symbol(self) -> str:
        return self.unit.symbol


@dataclass(frozen=True, eq=False)
class ByteUnit:
    """
    An unsigned 64-bit count of bytes with saturating construction and arithmetic.

    A ByteUnit never leaves the range 0 ..= 2**64 - 1. Negative inputs and results
    clamp to 0, overflowing ones clamp to ``ByteUnit.max_value()``. The only
    failing operations are division and modulo by zero.

    Operands of arithmetic and comparisons may be ByteUnit or plain integers;
    a ByteUnit compares and hashes like the int of its count.

    Construction:
        ByteUnit(1024)                     # exact byte count
        ByteUnit.from_units(3, "MiB")      # 3 * 1024**2
        512 * ByteUnit.kB                  # unit constants
        kibibytes(512)                     # named constructors
        ByteUnit.Kibibyte(512)             # named-variant constructors

    Display and parsing:
        str(ByteUnit.from_units(3, "MiB"))   → "3MiB"
        f"{ByteUnit(999_990):04.2}"          → "0976.55KiB"
        ByteUnit.parse("1.5 MiB")            → ByteUnit(count=1572864)
    """

    count: int = 0

    # Unit constants, one of each unit, assigned below the class body
    B: ClassVar["ByteUnit"]
    kB: ClassVar["ByteUnit"]
    KiB: ClassVar["ByteUnit"]
    MB: ClassVar["ByteUnit"]
    MiB: ClassVar["ByteUnit"]
    GB: ClassVar["ByteUnit"]
    GiB: ClassVar["ByteUnit"]
    TB: ClassVar["ByteUnit"]
    TiB: ClassVar["ByteUnit"]
    PB: ClassVar["ByteUnit"]
    PiB: ClassVar["ByteUnit"]
    EB: ClassVar["ByteUnit"]
    EiB: ClassVar["ByteUnit"]

    # Named-variant constructors, ByteUnit.Kibibyte(n) == n * ByteUnit.KiB, assigned below the class body
    Byte: ClassVar[Callable[[int], "ByteUnit"]]
    Kilobyte: ClassVar[Callable[[int], "ByteUnit"]]
    Kibibyte: ClassVar[Callable[[int], "ByteUnit"]]
    Megabyte: ClassVar[Callable[[int], "ByteUnit"]]
    Mebibyte: ClassVar[Callable[[int], "ByteUnit"]]
    Gigabyte: ClassVar[Callable[[int], "ByteUnit"]]
    Gibibyte: ClassVar[Callable[[int], "ByteUnit"]]
    Terabyte: ClassVar[Callable[[int], "ByteUnit"]]
    Tebibyte: ClassVar[Callable[[int], "ByteUnit"]]
    Petabyte: ClassVar[Callable[[int], "ByteUnit"]]
    Pebibyte: ClassVar[Callable[[int], "ByteUnit"]]
    Exabyte: ClassVar[Callable[[int], "ByteUnit"]]
    Exbibyte: ClassVar[Callable[[int], "ByteUnit"]]

    def __post_init__(self):
        object.__setattr__(self, "count", numeric.as_byte_count(self.count))

    @classmethod
    def from_count(cls, n: int) -> Self:
        """Wrap an exact byte count, saturating out-of-range values."""
        return cls(n)

    @classmethod
    def from_units(cls, n: int, unit: Unit | str) -> Self:
        """
        Create n units worth of bytes, saturating at max_value().

        Args:
            n: Number of units. Negative counts clamp to 0.
            unit: A Unit descriptor or a unit symbol such as "KiB" (case-insensitive).

        Raises:
            UnknownUnitError: If unit is a symbol string not in the unit table.

        Examples:
            ByteUnit.from_units(500, "kB")   → 500_000 bytes
            ByteUnit.from_units(1024, "EiB") → ByteUnit.max_value()
        """
        unit = _as_unit(unit)
        return cls(numeric.saturating_mul(numeric.as_byte_count(n), unit.multiplier))

    @classmethod
    def max_value(cls) -> Self:
        return cls(U64_MAX)

    @classmethod
    def min_value(cls) -> Self:
        return cls(0)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a human-written byte string such as "10 KiB" or "7.25gb".

        See ``byteunit.parse.parse_bytes`` for the grammar and errors.
        """
        from .parse import parse_bytes
        return cls(parse_bytes(text).count)

    # ----- Accessors -----

    def as_u64(self) -> int:
        """Exact byte count."""
        return self.count

    def as_u128(self) -> int:
        """Exact byte count; Python ints are unbounded so this equals as_u64()."""
        return self.count

    def as_f64_in(self, unit: Unit | str) -> float:
        """
        Byte count expressed in unit as a float, e.g. 1536 bytes in KiB is 1.5.

        Not exact for large counts: float has a 53-bit mantissa.
        """
        unit = _as_unit(unit)
        return self.count / unit.multiplier

    def components(self) -> Components:
        """
        Split the count into its minimal representation in the naturally selected unit.

        Returns:
            Components(whole, frac, unit) where frac is in [0, 1).

        Examples:
            (mebibytes(2) + kibibytes(512)).components() → (2, 0.5, MiB)
            ByteUnit(1023).components() → (1, 0.023, kB)
        """
        unit = natural_unit(self.count)
        whole, rem = divmod(self.count, unit.multiplier)
        # Float division rounds remainders just below the multiplier up to 1.0
        frac = min(rem / unit.multiplier, math.nextafter(1.0, 0.0))
        return Components(whole, frac, unit)

    # ----- Conversions -----

    def __int__(self) -> int:
        return self.count

    def __index__(self) -> int:
        return self.count

    def __float__(self) -> float:
        return float(self.count)

    def __bool__(self) -> bool:
        return self.count != 0

    def __str__(self) -> str:
        return self.__format__("")

    def __format__(self, format_spec: str) -> str:
        return format_with_spec(self, format_spec)

    # ----- Comparison -----

    def __eq__(self, other) -> bool:
        other = _raw_operand(other)
        if other is None:
            return NotImplemented
        return self.count == other

    def __lt__(self, other) -> bool:
        other = _raw_operand(other)
        if other is None:
            return NotImplemented
        return self.count < other

    def __le__(self, other) -> bool:
        other = _raw_operand(other)
        if other is None:
            return NotImplemented
        return self.count <= other

    def __gt__(self, other) -> bool:
        other = _raw_operand(other)
        if other is None:
            return NotImplemented
        return self.count > other

    def __ge__(self, other) -> bool:
        other = _raw_operand(other)
        if other is None:
            return NotImplemented
        return self.count >= other

    def __hash__(self) -> int:
        return hash(self.count)

    # ----- Arithmetic -----

    def __add__(self, other) -> Self:
        return self._apply(numeric.saturating_add, self, other)

    def __radd__(self, other) -> Self:
        return self._apply(numeric.saturating_add, other, self)

    def __sub__(self, other) -> Self:
        return self._apply(numeric.saturating_sub, self, other)

    def __rsub__(self, other) -> Self:
        return self._apply(numeric.saturating_sub, other, self)

    def __mul__(self, other) -> Self:
        return self._apply(numeric.saturating_mul, self, other)

    def __rmul__(self, other) -> Self:
        return self._apply(numeric.saturating_mul, other, self)

    def __floordiv__(self, other) -> Self:
        return self._apply(numeric.checked_floordiv, self, other)

    def __rfloordiv__(self, other) -> Self:
        return self._apply(numeric.checked_floordiv, other, self)

    # Byte counts are integral: true division truncates like floor division
    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other) -> Self:
        return self._apply(numeric.checked_mod, self, other)

    def __rmod__(self, other) -> Self:
        return self._apply(numeric.checked_mod, other, self)

    def __divmod__(self, other) -> tuple[Self, Self]:
        quotient = self.__floordiv__(other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self.__mod__(other)

    def __rdivmod__(self, other) -> tuple[Self, Self]:
        quotient = self.__rfloordiv__(other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self.__rmod__(other)

    def __lshift__(self, other) -> Self:
        return self._apply(numeric.saturating_shl, self, other)

    def __rlshift__(self, other) -> Self:
        return self._apply(numeric.saturating_shl, other, self)

    def __rshift__(self, other) -> Self:
        return self._apply(_shr, self, other)

    def __rrshift__(self, other) -> Self:
        return self._apply(_shr, other, self)

    @classmethod
    def _apply(cls, op: Callable[[int, int], int], left, right):
        """Coerce both operands to byte counts and wrap op's result, or NotImplemented."""
        a = numeric.as_byte_count(left, on_error="none")
        b = numeric.as_byte_count(right, on_error="none")
        if a is None or b is None:
            return NotImplemented
        return cls(op(a, b))


# Methods --------------------------------------------------------------------------------------------------------------

def bytes_(n: int) -> ByteUnit:
    """n bytes; the trailing underscore avoids shadowing the builtin bytes."""
    return ByteUnit.from_units(n, units.B)


def _unit_constructor(unit: Unit, name: str) -> Callable[[int], ByteUnit]:
    def constructor(n: int) -> ByteUnit:
        return ByteUnit.from_units(n, unit)

    constructor.__name__ = constructor.__qualname__ = name
    constructor.__doc__ = f"n {name}, n * {unit.multiplier} bytes, saturating at ByteUnit.max_value()."
    return constructor


# @formatter:off
kilobytes = _unit_constructor(units.kB, "kilobytes")
kibibytes = _unit_constructor(units.KiB, "kibibytes")
megabytes = _unit_constructor(units.MB, "megabytes")
mebibytes = _unit_constructor(units.MiB, "mebibytes")
gigabytes = _unit_constructor(units.GB, "gigabytes")
gibibytes = _unit_constructor(units.GiB, "gibibytes")
terabytes = _unit_constructor(units.TB, "terabytes")
tebibytes = _unit_constructor(units.TiB, "tebibytes")
petabytes = _unit_constructor(units.PB, "petabytes")
pebibytes = _unit_constructor(units.PiB, "pebibytes")
exabytes  = _unit_constructor(units.EB, "exabytes")
exbibytes = _unit_constructor(units.EiB, "exbibytes")
# @formatter:on

CONSTRUCTORS: dict[Unit, Callable[[int], ByteUnit]] = {
    units.B: bytes_,
    units.kB: kilobytes, units.KiB: kibibytes,
    units.MB: megabytes, units.MiB: mebibytes,
    units.GB: gigabytes, units.GiB: gibibytes,
    units.TB: terabytes, units.TiB: tebibytes,
    units.PB: petabytes, units.PiB: pebibytes,
    units.EB: exabytes, units.EiB: exbibytes,
}


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_unit(unit: Unit | str) -> Unit:
    if isinstance(unit, Unit):
        return unit
    if isinstance(unit, str):
        return lookup_unit(unit)
    raise TypeError(f"unit must be a Unit or a unit symbol str, got {type(unit).__name__}")


def _raw_operand(other) -> int | None:
    """Comparison operand as an unclamped int, None if not integer-like."""
    if isinstance(other, ByteUnit):
        return other.count
    if isinstance(other, bool):
        return None
    if isinstance(other, int):
        return int(other)
    if hasattr(type(other), "__index__"):
        return operator.index(other)
    return None


def _shr(a: int, bits: int) -> int:
    return 0 if bits >= numeric.U64_BITS else a >> bits


def _variant_name(unit: Unit) -> str:
    """Singular capitalized constructor name: KiB -> 'Kibibyte', B -> 'Byte'."""
    if unit is units.B:
        return "Byte"
    return CONSTRUCTORS[unit].__name__[:-1].capitalize()


def _variant_constructor(unit: Unit, name: str) -> classmethod:
    def variant(cls, n: int) -> ByteUnit:
        return cls.from_units(n, unit)

    variant.__name__ = name
    variant.__qualname__ = f"ByteUnit.{name}"
    variant.__doc__ = f"n {unit.symbol}, n * {unit.multiplier} bytes, saturating at ByteUnit.max_value()."
    return classmethod(variant)


# Unit Constants -------------------------------------------------------------------------------------------------------

for _unit in units.UNITS:
    setattr(ByteUnit, _unit.symbol, ByteUnit.from_units(1, _unit))
    setattr(ByteUnit, _variant_name(_unit), _variant_constructor(_unit, _variant_name(_unit)))
del _unit
