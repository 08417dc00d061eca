"""
Human-readable display of byte counts: unit selection, rounding, and padding.
"""

# ## Unit selection
#
# Without an explicit family the unit is chosen per order of magnitude: at the first
# exponent whose decimal unit fits, the binary unit wins when the value is closer to a
# binary multiple, i.e. when count % 1000**e >= 1024**e - 1000**e.
#
#   323_000   → 323kB
#   3_145_728 → 3MiB
#
# ## Rounding at the unit boundary
#
# Precision > 0 keeps the unit selected from the unrounded value, so 1023.999 KiB at
# precision 2 renders as "1024.00KiB". Precision 0 rounds the value itself up to the next
# whole unit and reselects: 999_990 bytes at precision 0 is "1MB", not "977KiB".

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .numeric import as_byte_count, round_half_up_div, saturating_mul
from .units import Unit, UnitFamily, MAX_EXPONENT, B, unit_for, units_of


# @formatter:off

class DisplayConf:
    """
    Default configuration constants for byte count display.

    Attributes:
        DEFAULT_PRECISION: Fractional digits used when no precision is requested.
            Trailing zeros are trimmed in that case, "7.90GiB" displays as "7.9GiB".

        FAMILY_CODES: Format-spec type characters mapped to unit families.
            "d" forces decimal units (kB, MB), "b" forces binary units (KiB, MiB).
    """
    DEFAULT_PRECISION = 2

    FAMILY_CODES = FrozenBiMap({
        "d": UnitFamily.DECIMAL,
        "b": UnitFamily.BINARY,
    })

# @formatter:on

_FORMAT_SPEC = re.compile(r"0?(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<family>[a-z])?")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatSpec:
    """
    Display options for a byte count.

    Attributes:
        precision: Fractional digits, or None for DisplayConf.DEFAULT_PRECISION with trailing zeros trimmed.
        width: Minimum width of the whole-number part, zero-padded.
        family: Unit family to display in, or None to select it from the value.
    """

    precision: int | None = None
    width: int = 0
    family: UnitFamily | None = None

    def __post_init__(self):
        if self.precision is not None:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise TypeError(f"precision must be int | None, got {type(self.precision).__name__}")
            if self.precision < 0:
                raise ValueError(f"precision must be >= 0, got {self.precision}")

        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise TypeError(f"width must be int, got {type(self.width).__name__}")
        if self.width < 0:
            raise ValueError(f"width must be >= 0, got {self.width}")

        if self.family is not None:
            object.__setattr__(self, "family", UnitFamily(self.family))

    @classmethod
    def parse(cls, format_spec: str) -> Self:
        """
        Parse a format spec of the form [0][width][.precision][family].

        The leading zero is optional, padding is always with zeros. Family is
        "d" (decimal) or "b" (binary).

        Raises:
            ValueError: If the spec does not match.

        Examples:
            >>> FormatSpec.parse("04.2")
            FormatSpec(precision=2, width=4, family=None)
            >>> FormatSpec.parse(".1b").family
            <UnitFamily.BINARY: 'binary'>
        """
        match = _FORMAT_SPEC.fullmatch(format_spec)
        if match is None:
            raise ValueError(f"Invalid format specifier '{format_spec}' for object of type 'ByteUnit'")

        family_code = match["family"]
        if family_code is not None and family_code not in DisplayConf.FAMILY_CODES:
            raise ValueError(
                f"Unknown format code '{family_code}' for object of type 'ByteUnit', "
                f"expected one of {tuple(DisplayConf.FAMILY_CODES)}"
            )

        return cls(
            precision=int(match["precision"]) if match["precision"] is not None else None,
            width=int(match["width"]) if match["width"] is not None else 0,
            family=DisplayConf.FAMILY_CODES[family_code] if family_code else None,
        )

    def __str__(self) -> str:
        spec = f"0{self.width}" if self.width else ""
        if self.precision is not None:
            spec += f".{self.precision}"
        if self.family is not None:
            spec += DisplayConf.FAMILY_CODES.get_key(self.family)
        return spec


# Methods --------------------------------------------------------------------------------------------------------------

def natural_unit(count: int) -> Unit:
    """
    Select the display unit for a byte count without a family preference.

    Examples:
        >>> natural_unit(323_000).symbol
        'kB'
        >>> natural_unit(3 * 1024 ** 2).symbol
        'MiB'
        >>> natural_unit(999).symbol
        'B'
    """
    for exponent in range(MAX_EXPONENT, 0, -1):
        decimal = unit_for(UnitFamily.DECIMAL, exponent)
        binary = unit_for(UnitFamily.BINARY, exponent)
        if count >= decimal.multiplier:
            if count % decimal.multiplier >= binary.multiplier - decimal.multiplier:
                return binary
            return decimal
    return B


def select_unit(count: int, family: UnitFamily | None = None) -> Unit:
    """Largest unit of family not exceeding count; the natural unit when family is None."""
    if family is None:
        return natural_unit(count)
    for unit in reversed(units_of(family)):
        if count >= unit.multiplier:
            return unit
    return B


def format_bytes(
        value,
        precision: int | None = None,
        width: int = 0,
        family: UnitFamily | str | None = None,
) -> str:
    """
    Format a byte count with the most readable unit.

    Args:
        value: ByteUnit or int byte count, saturated to 0 ..= 2**64 - 1.
        precision: Fractional digits. None displays up to DisplayConf.DEFAULT_PRECISION
                   digits with trailing zeros trimmed.
        width: Minimum width of the whole-number part, zero-padded.
        family: Force decimal or binary units; None selects from the value.

    Returns:
        String such as "7.06GB" or "0976.55KiB". Exact multiples of the selected
        unit never show a fraction.

    Examples:
        format_bytes(323_000)                       → "323kB"
        format_bytes(8_480_882_688, precision=0)    → "8GiB"
        format_bytes(8_480_882_688, precision=3)    → "7.898GiB"
        format_bytes(999_990, precision=2, width=4) → "0976.55KiB"
        format_bytes(999_990, precision=0, width=2) → "01MB"
        format_bytes(3 * 1024 ** 2, family="decimal") → "3.15MB"
    """
    spec = FormatSpec(precision=precision, width=width, family=family)
    return _render(as_byte_count(value), spec)


def format_with_spec(value, format_spec: str) -> str:
    """Format a byte count with a format-spec string, as used by ByteUnit.__format__."""
    return _render(as_byte_count(value), FormatSpec.parse(format_spec))


# Private Methods ------------------------------------------------------------------------------------------------------

def _render(count: int, spec: FormatSpec) -> str:
    unit = select_unit(count, spec.family)
    whole, rem = divmod(count, unit.multiplier)

    if rem == 0:
        return _join(whole, "", unit, spec.width)

    if spec.precision is None or spec.precision > 0:
        digits_len = DisplayConf.DEFAULT_PRECISION if spec.precision is None else spec.precision
        scale = 10 ** digits_len
        digits = round_half_up_div(rem * scale, unit.multiplier)
        if digits >= scale:
            # Carry into the whole part, the unit stays as selected
            whole += 1
            digits -= scale
        frac = f"{digits:0{digits_len}d}"
        if spec.precision is None:
            frac = frac.rstrip("0")
        return _join(whole, frac, unit, spec.width)

    # Precision 0 rounds the value itself and reselects the unit
    if 2 * rem >= unit.multiplier:
        rounded = saturating_mul(whole + 1, unit.multiplier)
        if rounded > count:
            return _render(rounded, spec)
        whole += 1
    return _join(whole, "", unit, spec.width)


def _join(whole: int, frac: str, unit: Unit, width: int) -> str:
    number = f"{whole:0{width}d}"
    if frac:
        number = f"{number}.{frac}"
    return f"{number}{unit.symbol}"
