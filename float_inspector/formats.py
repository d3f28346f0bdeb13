"""
Platform float formats.

Knows how many exponent and mantissa bits the common floating-point
formats have and how to turn a Python number into the raw
little-endian bytes that `extract()` consumes. The extractor itself never
looks at a format; it only receives (bytes, E, M).
"""

import math
import struct
from dataclasses import dataclass
from typing import Dict, Optional

from float_inspector.errors import InvalidFieldWidth, PackError, UnknownFormat
from float_inspector.extraction import FieldInfo, extract


def exponent_width_from_range(max_exponent: int, min_exponent: int) -> int:
    """
    Derive an exponent field width from the exponent range of a type.

    Used for formats that only publish their exponent range, such as the
    C `long double` (LDBL_MAX_EXP / LDBL_MIN_EXP).

    Args:
        max_exponent: Largest exponent (e.g. 16384 for x87 extended)
        min_exponent: Smallest exponent (e.g. -16381 for x87 extended)

    Returns:
        ceil(log2(max_exponent - min_exponent))
    """
    span = max_exponent - min_exponent
    if span <= 1:
        raise InvalidFieldWidth(f"exponent range [{min_exponent}, {max_exponent}] is empty")
    return math.ceil(math.log2(span))


@dataclass(frozen=True)
class FloatFormat:
    """Field widths of one floating-point format."""

    name: str
    exponent_bit_width: int
    mantissa_bit_width: int
    struct_code: Optional[str] = None  # native packing, if struct supports it

    @property
    def total_bits(self) -> int:
        return 1 + self.exponent_bit_width + self.mantissa_bit_width

    @property
    def byte_count(self) -> int:
        return (self.total_bits + 7) // 8

    @property
    def bias(self) -> int:
        """Exponent bias (2^(E-1) - 1)"""
        return (1 << (self.exponent_bit_width - 1)) - 1

    @property
    def can_pack(self) -> bool:
        return self.struct_code is not None or self.name == "bfloat16"

    def pack(self, value: float) -> bytes:
        """
        Encode a Python number in this format, least-significant byte first.

        Raises:
            PackError: The format has no native encoding or the value
                does not fit (e.g. 1e6 as half precision)
        """
        if self.name == "bfloat16":
            # bfloat16 is the upper half of a single-precision value
            return SINGLE.pack(value)[2:]

        if self.struct_code is None:
            raise PackError(
                f"format '{self.name}' has no native encoding; pass raw bytes instead"
            )

        try:
            return struct.pack("<" + self.struct_code, value)
        except (OverflowError, struct.error) as e:
            raise PackError(f"cannot encode {value!r} as {self.name}: {e}") from e


# Predefined formats
HALF = FloatFormat("half", exponent_bit_width=5, mantissa_bit_width=10, struct_code="e")
SINGLE = FloatFormat("single", exponent_bit_width=8, mantissa_bit_width=23, struct_code="f")
DOUBLE = FloatFormat("double", exponent_bit_width=11, mantissa_bit_width=52, struct_code="d")
BFLOAT16 = FloatFormat("bfloat16", exponent_bit_width=8, mantissa_bit_width=7)

# x87 80-bit extended precision: 64 stored mantissa bits including the
# explicit integer bit, exponent width derived from LDBL_MAX_EXP/LDBL_MIN_EXP
EXTENDED = FloatFormat(
    "extended",
    exponent_bit_width=exponent_width_from_range(16384, -16381),
    mantissa_bit_width=64,
)

FORMATS: Dict[str, FloatFormat] = {
    fmt.name: fmt for fmt in (HALF, SINGLE, DOUBLE, BFLOAT16, EXTENDED)
}

# C type and numpy dtype names
ALIASES = {
    "float16": "half",
    "float": "single",
    "float32": "single",
    "float64": "double",
    "long double": "extended",
    "longdouble": "extended",
}


def get_format(name: str) -> FloatFormat:
    """
    Look up a predefined format by name or alias (case-insensitive).

    Raises:
        UnknownFormat: Unknown format name
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in FORMATS:
        raise UnknownFormat(
            f"unknown float format '{name}'. Must be one of {sorted(FORMATS)}"
        )
    return FORMATS[key]


def inspect_value(value: float, fmt: FloatFormat) -> FieldInfo:
    """Encode `value` in `fmt` and extract its fields."""
    return extract(fmt.pack(value), fmt.exponent_bit_width, fmt.mantissa_bit_width)
