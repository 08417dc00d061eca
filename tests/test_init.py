#
# ByteUnit - Package Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
import byteunit


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPackage:

    @pytest.mark.parametrize("name", byteunit.__all__)
    def test_exports(self, name):
        assert hasattr(byteunit, name)

    def test_round_trip_through_package(self):
        value = byteunit.kilobytes(323)
        assert str(value) == "323kB"
        assert byteunit.parse_bytes(str(value)) == value
        assert byteunit.format_bytes(value, family="binary") == "315.43KiB"

    def test_error_hierarchy(self):
        assert issubclass(byteunit.UnknownUnitError, byteunit.MalformedInputError)
        assert issubclass(byteunit.MalformedInputError, byteunit.ByteUnitError)
        assert issubclass(byteunit.DivideByZeroError, byteunit.ByteUnitError)
        assert issubclass(byteunit.DivideByZeroError, ZeroDivisionError)

    def test_logging_disabled_by_default(self):
        from loguru import logger

        messages = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            with pytest.raises(byteunit.MalformedInputError):
                byteunit.parse_bytes("not a size")
        finally:
            logger.remove(handler_id)
        assert messages == []
