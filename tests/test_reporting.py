# ==============================================
# Tests for text reporting
# ==============================================

from float_inspector.analysis import new_profile
from float_inspector.extraction import extract
from float_inspector.reporting import describe, hex_field, render_statistics


def single(value: int):
    return extract(value.to_bytes(4, "little"), 8, 23)


class TestDescribe:
    def test_describe_one(self):
        text = describe(single(0x3F800000))
        lines = text.splitlines()

        assert lines[0].startswith("Sign:")
        assert lines[0].endswith("+")
        assert "Normalized" in lines[1]
        assert lines[2].endswith("8 bits")
        assert lines[3].endswith("7")
        assert lines[4].endswith("0x7f")
        assert lines[7].endswith("0x000000")

    def test_describe_negative_nan(self):
        text = describe(single(0xFFC00001))
        assert "Sign:" in text and text.splitlines()[0].endswith("-")
        assert "Not a Number" in text

    def test_descriptions_are_independent(self):
        first = describe(single(0x3F800000))
        second = describe(single(0x7F800000))
        assert first != second
        assert "Infinity" in second
        assert "Infinity" not in first

    def test_hex_field(self):
        assert hex_field(b"\xff\x03") == "0x03ff"
        assert hex_field(b"") == "0x0"


class TestRenderStatistics:
    def test_render(self):
        profile = new_profile("single", 8, 23)
        profile.update(single(0x3F800000))
        profile.update(single(0x00000000))

        text = render_statistics(profile.snapshot())
        lines = text.splitlines()

        assert "Type: single" in lines
        assert "2 entries overall," in lines
        assert "1 normalized numbers," in lines
        assert "1 denormalized numbers," in lines

        start = lines.index("Non-zero bits of positive normalized numbers:")
        grid = lines[start + 1:start + 25]
        assert grid[0] == "\t".join(["0"] * 7 + ["1", "0"])
        assert all(len(row.split("\t")) == 9 for row in grid)

        start = lines.index("Non-zero bits of positive denormalized numbers:")
        assert lines[start + 1] == "1"
