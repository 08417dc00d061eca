"""
Parse human-written byte strings such as "10 KiB", "0.2MB" or "7.25 gb".

Grammar (case-insensitive, whitespace allowed around the input and between
the number and the unit):

    byte-string := number unit?
    number      := digit+ ("." digit+)?
    unit        := prefix "i"? "B" | "B"
    prefix      := "k" | "M" | "G" | "T" | "P" | "E"

Only the letter "i" selects the binary family: "kb", "KB" and "Kb" are all
1000 bytes, "KiB" is 1024. Without a unit, or with a bare "B", the number must
be an integer since there is no sub-byte unit.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Third-party ----------------------------------------------------------------------------------------------------------
from loguru import logger

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import MalformedInputError, UnknownUnitError
from .numeric import saturate
from .size import ByteUnit
from .units import B, U64_MAX, lookup_unit

_NUMBER = re.compile(r"(?P<whole>[0-9]+)(?:\.(?P<frac>[0-9]+))?")
_UNIT = re.compile(r"[A-Za-z]+")

# Digits of headroom for Decimal multiplication, enough for any u64 product
_DECIMAL_PRECISION = 64

# Whole parts with more digits than U64_MAX always saturate
_U64_DIGITS = len(str(U64_MAX))


# Methods --------------------------------------------------------------------------------------------------------------

def parse_bytes(text: str) -> ByteUnit:
    """
    Convert a byte string into a ByteUnit, rounding to the nearest whole byte.

    Fractional values are scaled exactly with Decimal and rounded half away from
    zero. Values beyond 2**64 - 1 bytes saturate to ByteUnit.max_value().

    Args:
        text: Byte string, e.g. "512Kb", "1.5 MiB", " 42 ".

    Returns:
        The parsed ByteUnit.

    Raises:
        TypeError: If text is not a str.
        MalformedInputError: Empty input, missing or signed number, stray characters,
            or a fractional byte count without a prefixed unit.
        UnknownUnitError: The unit is not a recognized byte unit, e.g. "5 XB".

    Examples:
        >>> parse_bytes("10 KiB") == 10 * 1024
        True
        >>> parse_bytes("0.2MB") == 200_000
        True
        >>> parse_bytes("7.25 gb") == 7_250_000_000
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"byte string must be a str, got {type(text).__name__}")

    try:
        count = _parse_count(text)
    except MalformedInputError as e:
        logger.debug('Rejected byte string "{}": {}', text, e)
        raise

    logger.trace('Parsed "{}" as {} bytes', text, count)
    return ByteUnit(count)


def _parse_count(text: str) -> int:
    stripped = text.strip()
    offset = len(text) - len(text.lstrip())

    if not stripped:
        raise MalformedInputError("the input was empty", text=text)

    if stripped[0] in "+-":
        kind = "negative" if stripped[0] == "-" else "signed"
        raise MalformedInputError(f"{kind} byte counts are not allowed: {text!r}", text=text, position=offset)

    number = _NUMBER.match(stripped)
    if number is None:
        raise _unexpected(text, stripped, 0, offset)

    pos = number.end()
    while pos < len(stripped) and stripped[pos].isspace():
        pos += 1

    unit = B
    unit_match = _UNIT.match(stripped, pos)
    if unit_match is not None:
        try:
            unit = lookup_unit(unit_match.group())
        except UnknownUnitError as e:
            raise UnknownUnitError(e.symbol, text=text, position=offset + pos) from None
        pos = unit_match.end()

    if pos < len(stripped):
        raise _unexpected(text, stripped, pos, offset)

    whole, frac = number["whole"], number["frac"]
    if frac is not None and unit is B:
        raise MalformedInputError(
            f"a byte count cannot have a fractional component: {text!r}", text=text, position=offset
        )

    if len(whole.lstrip("0")) > _U64_DIGITS:
        count = U64_MAX + 1
    elif frac is None:
        count = int(whole) * unit.multiplier
    else:
        with localcontext() as ctx:
            ctx.prec = _DECIMAL_PRECISION
            scaled = Decimal(f"{whole}.{frac}") * unit.multiplier
            count = int(scaled.to_integral_value(rounding=ROUND_HALF_UP))

    if count > U64_MAX:
        logger.debug('Byte string "{}" exceeds {} bytes, saturating', text, U64_MAX)
    return saturate(count)


def _unexpected(text: str, stripped: str, index: int, offset: int) -> MalformedInputError:
    char = stripped[index]
    return MalformedInputError(
        f"unexpected character {char!r} at index {offset + index} in {text!r}",
        text=text,
        position=offset + index,
    )
