"""
Exceptions raised by byteunit.

Only parsing and division can fail. Overflow and underflow are never errors:
every other operation saturates to the 0 ..= 2**64 - 1 range.
"""


class ByteUnitError(Exception):
    """Base class for all byteunit errors."""


class MalformedInputError(ByteUnitError, ValueError):
    """
    Input string does not match the byte-string grammar.

    Attributes:
        text: The rejected input.
        position: Index of the offending character, or None when the whole input is at fault.
    """

    def __init__(self, message: str, text: str | None = None, position: int | None = None):
        super().__init__(message)
        self.text = text
        self.position = position


class UnknownUnitError(MalformedInputError):
    """Unit symbol is not in the unit table."""

    def __init__(self, symbol: str, text: str | None = None, position: int | None = None):
        super().__init__(f"unknown byte unit symbol: {symbol!r}", text=text, position=position)
        self.symbol = symbol


class DivideByZeroError(ByteUnitError, ZeroDivisionError):
    """Division or modulo of a ByteUnit by zero."""
