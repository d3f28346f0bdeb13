# ==============================================
# Tests for FieldInfo
# ==============================================
#
# Construction checks and the dict form used by `--json` output.
# ==============================================

import json

import pytest

from float_inspector.errors import InvalidFieldWidth
from float_inspector.extraction import Category, FieldInfo, Sign, extract


def single(value: int):
    return extract(value.to_bytes(4, "little"), 8, 23)


def make(**overrides):
    fields = dict(
        sign=Sign.POSITIVE,
        exponent=b"\x7f",
        exponent_bit_width=8,
        non_zero_exponent_bit_count=7,
        mantissa=b"\x00\x00\x00",
        mantissa_bit_width=23,
        non_zero_mantissa_bit_count=0,
        category=Category.NORMALIZED,
    )
    fields.update(overrides)
    return FieldInfo(**fields)


class TestConstruction:
    def test_valid_fields(self):
        assert make() == single(0x3F800000)

    @pytest.mark.parametrize("count", [9, -1])
    def test_exponent_count_out_of_range(self, count):
        with pytest.raises(InvalidFieldWidth):
            make(non_zero_exponent_bit_count=count)

    @pytest.mark.parametrize("count", [24, -1])
    def test_mantissa_count_out_of_range(self, count):
        with pytest.raises(InvalidFieldWidth):
            make(non_zero_mantissa_bit_count=count)

    def test_negative_width(self):
        with pytest.raises(InvalidFieldWidth):
            make(exponent=b"", exponent_bit_width=-1, non_zero_exponent_bit_count=0)

    def test_wrong_byte_length(self):
        with pytest.raises(InvalidFieldWidth):
            make(exponent=b"\x7f\x00")
        with pytest.raises(InvalidFieldWidth):
            make(mantissa=b"\x00\x00")

    def test_extracted_fields_always_construct(self):
        # every 8-bit pattern of a 1-3-4 minifloat
        for value in range(256):
            info = extract(bytes([value]), 3, 4)
            assert 0 <= info.non_zero_exponent_bit_count <= 3
            assert 0 <= info.non_zero_mantissa_bit_count <= 4


class TestDictForm:
    def test_to_dict_single_one(self):
        assert single(0x3F800000).to_dict() == {
            "sign": "positive",
            "exponent": "7f",
            "exponent_bit_width": 8,
            "non_zero_exponent_bit_count": 7,
            "mantissa": "000000",
            "mantissa_bit_width": 23,
            "non_zero_mantissa_bit_count": 0,
            "category": "normalized",
        }

    def test_mantissa_hex_is_most_significant_first(self):
        # pi: mantissa 0x490FDB
        assert single(0x40490FDB).to_dict()["mantissa"] == "490fdb"

    @pytest.mark.parametrize(
        "info",
        [
            single(0xFFC00000),
            single(0x80000001),
            extract(b"\x7f", 0, 7),
            extract(b"\x7f", 7, 0),
            extract(((0x3FFF << 64) | (1 << 63)).to_bytes(10, "little"), 15, 64),
        ],
        ids=["nan", "negative-subnormal", "no-exponent", "no-mantissa", "extended"],
    )
    def test_round_trip_through_json(self, info):
        text = json.dumps(info.to_dict())
        assert FieldInfo.from_dict(json.loads(text)) == info

    def test_no_exponent_field_serializes_empty(self):
        data = extract(b"\x7f", 0, 7).to_dict()
        assert data["exponent"] == ""
        assert data["category"] == "denormalized"
        assert data["non_zero_mantissa_bit_count"] == 7

    def test_from_dict_rejects_out_of_range_count(self):
        data = single(0x3F800000).to_dict()
        data["non_zero_exponent_bit_count"] = 9
        with pytest.raises(InvalidFieldWidth):
            FieldInfo.from_dict(data)

    def test_from_dict_rejects_wrong_byte_length(self):
        data = single(0x3F800000).to_dict()
        data["mantissa"] = "00"
        with pytest.raises(InvalidFieldWidth):
            FieldInfo.from_dict(data)
