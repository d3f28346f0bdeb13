# ==============================================
# Extractor
# ==============================================
#
# PURPOSE:
#   Decompose a raw floating-point bit pattern of arbitrary width into
#   sign, exponent and mantissa fields and classify it as Normalized,
#   Denormalized, Infinity or NaN.
#
# LAYOUT:
#   A value with E exponent bits and M mantissa bits occupies
#   ceil((1 + E + M) / 8) bytes, least-significant byte first:
#
#     byte n-1                                           byte 0
#     ┌─┬──────────────── E ───────────────┬ ... ┬─────── M ───────┐
#     │S│ exponent (just below the sign)   │ pad │ mantissa (bit 0)│
#     └─┴──────────────────────────────────┴─────┴─────────────────┘
#
#   The sign is the top bit of the highest occupied byte, the exponent
#   sits directly below it and the mantissa starts at bit 0. When 1+E+M
#   is not a multiple of 8 the bits between mantissa and exponent are
#   ignored.
#
# FUNCTIONS:
# ----------
# - extract(data, exponent_bit_width, mantissa_bit_width) -> FieldInfo
#     Pure function. Raises InvalidFieldWidth on bad widths or a short
#     buffer; never returns a partially filled FieldInfo.
#
# - count_exponent_bits(exponent: bytes) -> int
#     0 for an all-zero field, otherwise
#     (8 - leading zeros of the top non-zero byte) + 8 * (bytes below it).
#
# - count_mantissa_bits(mantissa: bytes, width: int) -> int
#     0 for an all-zero field, otherwise the number of bit positions from
#     the lowest set bit to the top of the field.
#
# - classify(exponent, exponent_bit_width, Z_e, Z_m) -> Category
#     Z_e == 0                     → DENORMALIZED
#     Z_e == E and exponent all-1  → INFINITY (Z_m == 0) / NAN
#     otherwise                    → NORMALIZED
#
# ==============================================

from float_inspector.errors import InvalidFieldWidth
from .bit_reader import BitReader, BytesLike, byte_count, low_mask
from .field_info import Category, FieldInfo, Sign


def required_byte_count(exponent_bit_width: int, mantissa_bit_width: int) -> int:
    """Bytes occupied by a value with the given field widths."""
    return byte_count(1 + exponent_bit_width + mantissa_bit_width)


def extract(data: BytesLike, exponent_bit_width: int, mantissa_bit_width: int) -> FieldInfo:
    """
    Decompose a raw floating-point value into its fields.

    Args:
        data: Raw bytes of the value, least-significant byte first. Extra
              trailing bytes beyond the occupied span are ignored.
        exponent_bit_width: E, number of exponent bits
        mantissa_bit_width: M, number of stored mantissa bits

    Returns:
        A fresh FieldInfo

    Raises:
        InvalidFieldWidth: Negative widths, E == M == 0, or a buffer
            shorter than ceil((1 + E + M) / 8) bytes
    """
    _check_widths(exponent_bit_width, mantissa_bit_width)

    n_bytes = required_byte_count(exponent_bit_width, mantissa_bit_width)
    if len(data) < n_bytes:
        raise InvalidFieldWidth(
            f"(E={exponent_bit_width}, M={mantissa_bit_width}) needs {n_bytes} "
            f"bytes, got {len(data)}"
        )

    reader = BitReader(bytes(data[:n_bytes]))
    sign_offset = n_bytes * 8 - 1

    # Step 1: Sign
    sign = Sign(reader.bit(sign_offset))

    # Step 2: Exponent, the E bits right below the sign
    exponent = reader.read_bytes(sign_offset - exponent_bit_width, exponent_bit_width)

    # Step 3: Mantissa, the M low-order bits
    mantissa = reader.read_bytes(0, mantissa_bit_width)

    # Step 4: Significant bit counts
    n_exponent = count_exponent_bits(exponent)
    n_mantissa = count_mantissa_bits(mantissa, mantissa_bit_width)

    # Step 5: Category
    category = classify(exponent, exponent_bit_width, n_exponent, n_mantissa)

    return FieldInfo(
        sign=sign,
        exponent=exponent,
        exponent_bit_width=exponent_bit_width,
        non_zero_exponent_bit_count=n_exponent,
        mantissa=mantissa,
        mantissa_bit_width=mantissa_bit_width,
        non_zero_mantissa_bit_count=n_mantissa,
        category=category,
    )


def count_exponent_bits(exponent: bytes) -> int:
    """
    Count the significant bits of an exponent field.

    Scans from the most significant byte downward to the first non-zero
    byte and adds the bits of all bytes below it.

    Args:
        exponent: Exponent field, LSB-first

    Returns:
        0 if the field is zero, else the position of the highest set bit + 1
    """
    for index in range(len(exponent) - 1, -1, -1):
        byte = exponent[index]
        if byte == 0:
            continue

        n_bits = 0
        while byte != 0:
            n_bits += 1
            byte >>= 1
        return n_bits + 8 * index

    return 0


def count_mantissa_bits(mantissa: bytes, width: int) -> int:
    """
    Count the significant bits of a mantissa field.

    Scans from the least significant byte upward to the first non-zero
    byte. Within that byte the bits from its lowest set bit to bit 7 are
    counted, every full byte above it adds 8, and the unused high bits of
    a partial top byte are taken off again.

    Args:
        mantissa: Mantissa field, LSB-first
        width: M, declared mantissa width in bits

    Returns:
        0 if the field is zero, else M - (index of the lowest set bit)
    """
    n_bytes = len(mantissa)
    top_bits = width - 8 * (n_bytes - 1)

    for index in range(n_bytes):
        byte = mantissa[index]
        if byte == 0:
            continue

        n_bits = 0
        while byte != 0:
            n_bits += 1
            byte = (byte << 1) & 0xFF
        return n_bits + 8 * (n_bytes - index - 1) - (8 - top_bits)

    return 0


def classify(
    exponent: bytes,
    exponent_bit_width: int,
    non_zero_exponent_bit_count: int,
    non_zero_mantissa_bit_count: int,
) -> Category:
    """
    Apply the IEEE-754 category rules.

    Args:
        exponent: Exponent field, LSB-first
        exponent_bit_width: E
        non_zero_exponent_bit_count: Z_e from count_exponent_bits()
        non_zero_mantissa_bit_count: Z_m from count_mantissa_bits()

    Returns:
        The Category of the value
    """
    if non_zero_exponent_bit_count == 0:
        return Category.DENORMALIZED

    if non_zero_exponent_bit_count == exponent_bit_width and _is_saturated(
        exponent, exponent_bit_width
    ):
        if non_zero_mantissa_bit_count == 0:
            return Category.INFINITY
        return Category.NAN

    return Category.NORMALIZED


def _is_saturated(exponent: bytes, exponent_bit_width: int) -> bool:
    """True if every declared exponent bit is set."""
    if not exponent:
        return False

    # Full bytes must be 0xFF
    for byte in exponent[:-1]:
        if byte != 0xFF:
            return False

    # Partial top byte: all declared bits set
    top_bits = exponent_bit_width - 8 * (len(exponent) - 1)
    mask = low_mask(top_bits)
    return (exponent[-1] & mask) == mask


def _check_widths(exponent_bit_width: int, mantissa_bit_width: int) -> None:
    if exponent_bit_width < 0 or mantissa_bit_width < 0:
        raise InvalidFieldWidth(
            f"field widths must be non-negative "
            f"(E={exponent_bit_width}, M={mantissa_bit_width})"
        )
    if exponent_bit_width == 0 and mantissa_bit_width == 0:
        raise InvalidFieldWidth("exponent and mantissa widths are both zero")
