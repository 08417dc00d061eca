"""
Saturating unsigned 64-bit integer arithmetic.

Byte counts live in the closed range 0 ..= 2**64 - 1. Every primitive here
clamps its result to that range instead of wrapping, except division and
modulo by zero which raise DivideByZeroError.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import DivideByZeroError
from .units import U64_MAX

U64_MIN = 0

U64_BITS = 64


# Methods --------------------------------------------------------------------------------------------------------------

def saturate(value: int) -> int:
    """Clamp an int into 0 ..= U64_MAX."""
    if value < U64_MIN:
        return U64_MIN
    if value > U64_MAX:
        return U64_MAX
    return value


def as_byte_count(
        value,
        *,
        on_error: Literal["raise", "none"] = "raise",
) -> int | None:
    """
    Convert an integer-like operand to a saturated byte count.

    Accepts Python int and any type implementing __index__ (ByteUnit itself,
    NumPy integers). Negative values clamp to 0, values above U64_MAX clamp
    to U64_MAX.

    Parameters
    ----------
    value : various
        Operand to convert.

    on_error : {"raise", "none"}, default "raise"
        How to handle unsupported types (float, str, None, ...):

        - "raise": Raise TypeError
        - "none": Return None, operators use it to return NotImplemented

    Returns
    -------
    int
        The clamped byte count, or None for unsupported types when on_error="none".

    Raises
    ------
    TypeError
        When on_error="raise" and value is not integer-like.

    Examples
    --------
    >>> as_byte_count(512)
    512
    >>> as_byte_count(-3)
    0
    >>> as_byte_count(2 ** 70) == U64_MAX
    True
    >>> as_byte_count(1.5, on_error="none") is None
    True
    """
    # bool is a subclass of int
    if isinstance(value, bool):
        return _unsupported(value, on_error, reason="boolean values not supported")

    if isinstance(value, int):
        return saturate(int(value))

    if hasattr(type(value), "__index__"):
        return saturate(operator.index(value))

    return _unsupported(value, on_error)


def saturating_add(a: int, b: int) -> int:
    return min(a + b, U64_MAX)


def saturating_sub(a: int, b: int) -> int:
    return max(a - b, U64_MIN)


def saturating_mul(a: int, b: int) -> int:
    """
    Multiply two byte counts, clamping at U64_MAX.

    Examples
    --------
    >>> saturating_mul(1024, 2 ** 60) == U64_MAX
    True
    """
    return min(a * b, U64_MAX)


def saturating_shl(a: int, bits: int) -> int:
    """Left shift that saturates once any set bit would leave the 64-bit range."""
    if a == 0:
        return 0
    if bits >= U64_BITS or a.bit_length() + bits > U64_BITS:
        return U64_MAX
    return a << bits


def checked_floordiv(a: int, b: int) -> int:
    if b == 0:
        raise DivideByZeroError(f"byte count division by zero: {a} // 0")
    return a // b


def checked_mod(a: int, b: int) -> int:
    if b == 0:
        raise DivideByZeroError(f"byte count modulo by zero: {a} % 0")
    return a % b


def round_half_up_div(numerator: int, denominator: int) -> int:
    """
    Integer division of non-negative operands rounding half away from zero.

    Examples
    --------
    >>> round_half_up_div(5, 2)
    3
    >>> round_half_up_div(566 * 100, 1024)
    55
    """
    quotient, remainder = divmod(numerator, denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return quotient


# Private Methods ------------------------------------------------------------------------------------------------------

def _unsupported(value, on_error: str, reason: str | None = None) -> None:
    if on_error == "none":
        return None
    if on_error != "raise":
        raise ValueError(f"on_error must be 'raise' or 'none', got {on_error!r}")
    reason = reason or f"unsupported byte count type: {type(value).__name__}"
    raise TypeError(reason)
