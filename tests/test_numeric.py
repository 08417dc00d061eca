"""
Core test suite for the saturating u64 primitives and operand coercion.
"""

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from byteunit.errors import DivideByZeroError
from byteunit.numeric import (
    as_byte_count, checked_floordiv, checked_mod, round_half_up_div, saturate,
    saturating_add, saturating_mul, saturating_shl, saturating_sub,
)
from byteunit.size import ByteUnit
from byteunit.units import U64_MAX


class _IndexLike:
    """Minimal third-party integer stand-in implementing __index__."""

    def __init__(self, value: int):
        self._value = value

    def __index__(self) -> int:
        return self._value


class TestAsByteCount:
    """Test operand coercion to saturated byte counts."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(512, 512, id="int"),
            pytest.param(0, 0, id="zero"),
            pytest.param(-3, 0, id="negative"),
            pytest.param(2 ** 70, U64_MAX, id="huge"),
            pytest.param(U64_MAX, U64_MAX, id="max"),
            pytest.param(ByteUnit(7), 7, id="byte_unit"),
            pytest.param(_IndexLike(42), 42, id="index_like"),
            pytest.param(_IndexLike(-42), 0, id="index_like_negative"),
        ],
    )
    def test_convert(self, value, expected):
        res = as_byte_count(value)
        assert res == expected
        assert type(res) is int

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(1.5, id="float"),
            pytest.param(2.0, id="whole_float"),
            pytest.param("5", id="str"),
            pytest.param(None, id="none"),
        ],
    )
    def test_unsupported(self, value):
        with pytest.raises(TypeError, match="unsupported byte count type"):
            as_byte_count(value)
        assert as_byte_count(value, on_error="none") is None

    def test_bool(self):
        """Reject bool since bool is a subclass of int."""
        with pytest.raises(TypeError, match="boolean"):
            as_byte_count(True)
        assert as_byte_count(False, on_error="none") is None

    def test_invalid_on_error(self):
        with pytest.raises(ValueError, match="on_error"):
            as_byte_count(1.5, on_error="nan")


class TestSaturatingOps:

    @pytest.mark.parametrize("value, expected", [
        pytest.param(-1, 0, id="below"),
        pytest.param(5, 5, id="inside"),
        pytest.param(U64_MAX + 1, U64_MAX, id="above"),
    ])
    def test_saturate(self, value, expected):
        assert saturate(value) == expected

    @pytest.mark.parametrize("a, b, expected", [
        pytest.param(1, 2, 3, id="small"),
        pytest.param(U64_MAX - 1, 1, U64_MAX, id="exact_max"),
        pytest.param(U64_MAX, 1, U64_MAX, id="overflow"),
        pytest.param(U64_MAX, U64_MAX, U64_MAX, id="double_max"),
    ])
    def test_add(self, a, b, expected):
        assert saturating_add(a, b) == expected

    @pytest.mark.parametrize("a, b, expected", [
        pytest.param(10, 3, 7, id="small"),
        pytest.param(1, 100, 0, id="underflow"),
        pytest.param(0, U64_MAX, 0, id="max_underflow"),
    ])
    def test_sub(self, a, b, expected):
        assert saturating_sub(a, b) == expected

    @pytest.mark.parametrize("a, b, expected", [
        pytest.param(2 ** 32, 2 ** 31, 2 ** 63, id="in_range"),
        pytest.param(2 ** 32, 2 ** 32, U64_MAX, id="just_over"),
        pytest.param(1024, 2 ** 60, U64_MAX, id="1024_exbibytes"),
        pytest.param(0, U64_MAX, 0, id="zero"),
    ])
    def test_mul(self, a, b, expected):
        assert saturating_mul(a, b) == expected

    @pytest.mark.parametrize("a, bits, expected", [
        pytest.param(2 ** 60, 3, 2 ** 63, id="fits"),
        pytest.param(2 ** 60, 4, U64_MAX, id="one_bit_over"),
        pytest.param(2 ** 60, 10, U64_MAX, id="far_over"),
        pytest.param(1, 63, 2 ** 63, id="top_bit"),
        pytest.param(1, 64, U64_MAX, id="all_bits"),
        pytest.param(0, 100, 0, id="zero"),
    ])
    def test_shl(self, a, bits, expected):
        assert saturating_shl(a, bits) == expected


class TestCheckedDivision:

    def test_floordiv(self):
        assert checked_floordiv(2048, 4) == 512
        assert checked_floordiv(7, 2) == 3

    def test_mod(self):
        assert checked_mod(1030, 1024) == 6

    @pytest.mark.parametrize("op", [checked_floordiv, checked_mod])
    def test_zero_divisor(self, op):
        with pytest.raises(DivideByZeroError) as exc_info:
            op(10, 0)
        assert isinstance(exc_info.value, ZeroDivisionError)


class TestRoundHalfUpDiv:

    @pytest.mark.parametrize("numerator, denominator, expected", [
        pytest.param(5, 2, 3, id="half_up"),
        pytest.param(4, 2, 2, id="exact"),
        pytest.param(1, 3, 0, id="third_down"),
        pytest.param(2, 3, 1, id="two_thirds_up"),
        pytest.param(566 * 100, 1024, 55, id="kib_fraction"),
        pytest.param(0, 7, 0, id="zero"),
    ])
    def test_round(self, numerator, denominator, expected):
        assert round_half_up_div(numerator, denominator) == expected
