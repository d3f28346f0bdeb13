# ==============================================
# FieldInfo (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of extraction: the sign,
#   exponent and mantissa fields of one floating-point value together
#   with its IEEE-754 category.
#
# ENUMS:
# ------
# - Sign(Enum): POSITIVE, NEGATIVE
# - Category(Enum): NORMALIZED, DENORMALIZED, INFINITY, NAN
#
# CLASSES:
# --------
# - FieldInfo (frozen dataclass)
#
#     Attributes:
#     -----------
#     - sign: Sign
#     - exponent: bytes                    → ceil(E/8) bytes, LSB-first
#     - exponent_bit_width: int            → E
#     - non_zero_exponent_bit_count: int   → in [0, E]
#     - mantissa: bytes                    → ceil(M/8) bytes, LSB-first
#     - mantissa_bit_width: int            → M
#     - non_zero_mantissa_bit_count: int   → in [0, M]
#     - category: Category
#
#     Construction raises InvalidFieldWidth when a count is outside
#     [0, width] or a byte field has the wrong length.
#
#     Methods:
#     --------
#     - to_dict() -> dict            → Serialize (bytes as hex, MSB first)
#     - from_dict(data: dict) -> FieldInfo  (classmethod) → Deserialize
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from float_inspector.errors import InvalidFieldWidth

from .bit_reader import byte_count


class Sign(Enum):
    """Sign bit of a floating-point value."""
    POSITIVE = 0
    NEGATIVE = 1


class Category(Enum):
    """
    IEEE-754 category of a floating-point value.

    - NORMALIZED: exponent neither all-zero nor all-one (hidden leading one)
    - DENORMALIZED: exponent all-zero (no hidden leading one, includes zero)
    - INFINITY: exponent all-one, mantissa zero
    - NAN: exponent all-one, mantissa non-zero
    """
    NORMALIZED = "normalized"
    DENORMALIZED = "denormalized"
    INFINITY = "infinity"
    NAN = "nan"


@dataclass(frozen=True)
class FieldInfo:
    """
    Decomposition of one floating-point value into its bit fields.

    Created fresh by `extract()`; never mutated afterwards.
    """

    sign: Sign

    # --- Exponent ---
    exponent: bytes  # LSB-first, unused high bits of the last byte are zero
    exponent_bit_width: int
    non_zero_exponent_bit_count: int

    # --- Mantissa ---
    mantissa: bytes  # LSB-first, unused high bits of the last byte are zero
    mantissa_bit_width: int
    non_zero_mantissa_bit_count: int

    category: Category

    def __post_init__(self):
        _check_field("exponent", self.exponent, self.exponent_bit_width,
                     self.non_zero_exponent_bit_count)
        _check_field("mantissa", self.mantissa, self.mantissa_bit_width,
                     self.non_zero_mantissa_bit_count)

    @property
    def widths(self) -> Tuple[int, int]:
        """(exponent_bit_width, mantissa_bit_width)"""
        return self.exponent_bit_width, self.mantissa_bit_width

    @property
    def exponent_byte_count(self) -> int:
        return len(self.exponent)

    @property
    def mantissa_byte_count(self) -> int:
        return len(self.mantissa)

    @property
    def exponent_value(self) -> int:
        """Biased exponent as an unsigned integer."""
        return int.from_bytes(self.exponent, "little")

    @property
    def mantissa_value(self) -> int:
        """Mantissa (fraction) field as an unsigned integer."""
        return int.from_bytes(self.mantissa, "little")

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the field info to a dictionary.

        Byte fields are written as hex strings, most significant byte
        first, the way they are usually read.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "sign": self.sign.name.lower(),
            "exponent": self.exponent[::-1].hex(),
            "exponent_bit_width": self.exponent_bit_width,
            "non_zero_exponent_bit_count": self.non_zero_exponent_bit_count,
            "mantissa": self.mantissa[::-1].hex(),
            "mantissa_bit_width": self.mantissa_bit_width,
            "non_zero_mantissa_bit_count": self.non_zero_mantissa_bit_count,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldInfo":
        """
        Reconstruct a FieldInfo from `to_dict()` output.

        Args:
            data: Dictionary with saved field information

        Returns:
            A FieldInfo instance
        """
        return cls(
            sign=Sign[data["sign"].upper()],
            exponent=bytes.fromhex(data["exponent"])[::-1],
            exponent_bit_width=data["exponent_bit_width"],
            non_zero_exponent_bit_count=data["non_zero_exponent_bit_count"],
            mantissa=bytes.fromhex(data["mantissa"])[::-1],
            mantissa_bit_width=data["mantissa_bit_width"],
            non_zero_mantissa_bit_count=data["non_zero_mantissa_bit_count"],
            category=Category(data["category"]),
        )


def _check_field(name: str, value: bytes, width: int, count: int) -> None:
    if width < 0:
        raise InvalidFieldWidth(f"{name} width must be non-negative, got {width}")
    if not 0 <= count <= width:
        raise InvalidFieldWidth(
            f"{name} bit count {count} is outside [0, {width}]"
        )
    expected = byte_count(width)
    if len(value) != expected:
        raise InvalidFieldWidth(
            f"{name} of width {width} needs {expected} bytes, got {len(value)}"
        )
