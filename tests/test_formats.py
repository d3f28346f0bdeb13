# ==============================================
# Tests for the platform float formats
# ==============================================

import math

import pytest

from float_inspector.errors import FormatError, InvalidFieldWidth, PackError, UnknownFormat
from float_inspector.extraction import Category, Sign
from float_inspector.formats import (
    BFLOAT16,
    DOUBLE,
    EXTENDED,
    HALF,
    SINGLE,
    exponent_width_from_range,
    get_format,
    inspect_value,
)


class TestWidths:
    def test_builtin_widths(self):
        assert (SINGLE.exponent_bit_width, SINGLE.mantissa_bit_width) == (8, 23)
        assert (DOUBLE.exponent_bit_width, DOUBLE.mantissa_bit_width) == (11, 52)
        assert (HALF.exponent_bit_width, HALF.mantissa_bit_width) == (5, 10)
        assert (BFLOAT16.exponent_bit_width, BFLOAT16.mantissa_bit_width) == (8, 7)

    def test_extended_width_is_derived_from_range(self):
        assert EXTENDED.exponent_bit_width == 15
        assert EXTENDED.mantissa_bit_width == 64
        assert EXTENDED.byte_count == 10

    def test_exponent_width_from_range(self):
        assert exponent_width_from_range(128, -125) == 8
        assert exponent_width_from_range(1024, -1021) == 11
        with pytest.raises(InvalidFieldWidth):
            exponent_width_from_range(1, 1)

    def test_bias_and_sizes(self):
        assert SINGLE.bias == 127
        assert DOUBLE.bias == 1023
        assert SINGLE.total_bits == 32
        assert HALF.byte_count == 2


class TestLookup:
    @pytest.mark.parametrize("name", ["single", "SINGLE", "float", "float32", " float "])
    def test_aliases(self, name):
        assert get_format(name) is SINGLE

    def test_long_double_alias(self):
        assert get_format("long double") is EXTENDED

    def test_unknown_format(self):
        with pytest.raises(UnknownFormat) as excinfo:
            get_format("quad")
        assert "quad" in str(excinfo.value)

    def test_unknown_format_is_key_error(self):
        with pytest.raises(KeyError) as excinfo:
            get_format("quad")
        assert isinstance(excinfo.value, FormatError)
        assert not isinstance(excinfo.value, ValueError)


class TestPacking:
    def test_single_pack_is_little_endian(self):
        assert SINGLE.pack(1.0) == bytes.fromhex("0000803f")

    def test_bfloat16_is_upper_half_of_single(self):
        assert BFLOAT16.pack(1.0) == b"\x80\x3f"

    def test_half_overflow(self):
        with pytest.raises(PackError):
            HALF.pack(1e6)

    def test_pack_error_is_value_error(self):
        with pytest.raises(ValueError) as excinfo:
            HALF.pack(1e6)
        assert isinstance(excinfo.value, FormatError)
        assert not isinstance(excinfo.value, KeyError)

    def test_extended_has_no_native_packing(self):
        assert not EXTENDED.can_pack
        with pytest.raises(PackError):
            EXTENDED.pack(1.0)


class TestInspectValue:
    def test_double_infinity(self):
        info = inspect_value(float("-inf"), DOUBLE)
        assert info.category is Category.INFINITY
        assert info.sign is Sign.NEGATIVE

    def test_single_nan(self):
        assert inspect_value(math.nan, SINGLE).category is Category.NAN

    def test_double_subnormal(self):
        info = inspect_value(5e-324, DOUBLE)
        assert info.category is Category.DENORMALIZED
        assert info.non_zero_mantissa_bit_count == 52

    def test_half_one(self):
        info = inspect_value(1.0, HALF)
        assert info.exponent_value == 15
        assert info.category is Category.NORMALIZED
