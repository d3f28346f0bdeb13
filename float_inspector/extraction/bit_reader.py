# ==============================================
# BitReader
# ==============================================
#
# PURPOSE:
#   Read arbitrary bit spans out of a byte buffer that is laid out
#   least-significant-byte-first (bit 0 is the lowest bit of byte 0).
#
#   Fields of a floating-point layout rarely start on a byte boundary
#   (the 8 exponent bits of a single-precision value start at bit 23).
#   The reader right-shifts and merges adjacent source bytes so that the
#   extracted span starts fresh at bit 0 of byte 0 of the output.
#
# CLASS: BitReader
# ----------------
#   Constructor:
#   ------------
#   - __init__(data: bytes-like)
#       Takes an immutable copy of the buffer.
#
#   Methods:
#   --------
#   - bit(offset: int) -> int
#       Value (0 or 1) of a single bit.
#
#   - read_bytes(offset: int, width: int) -> bytes
#       `width` bits starting at `offset`, packed into ceil(width / 8)
#       bytes, LSB-first, unused high bits of the last byte cleared.
#
#   - read_int(offset: int, width: int) -> int
#       Same span as an unsigned integer.
#
# ==============================================

from typing import Union

from float_inspector.errors import InvalidFieldWidth


BytesLike = Union[bytes, bytearray, memoryview]


def byte_count(bit_width: int) -> int:
    """Number of bytes needed to hold `bit_width` bits."""
    return (bit_width + 7) // 8


def low_mask(bit_width: int) -> int:
    """Byte mask with the lowest `bit_width` bits set (0 < bit_width <= 8)."""
    return (1 << bit_width) - 1


class BitReader:
    """Reads bit spans from an LSB-first byte buffer."""

    def __init__(self, data: BytesLike):
        self._data = bytes(data)

    @property
    def bit_length(self) -> int:
        """Number of addressable bits in the buffer."""
        return len(self._data) * 8

    def __len__(self) -> int:
        return len(self._data)

    def bit(self, offset: int) -> int:
        """
        Return the bit at position `offset`.

        Args:
            offset: Bit index, 0 being the lowest bit of byte 0

        Returns:
            0 or 1
        """
        self._check_span(offset, 1)
        return (self._data[offset >> 3] >> (offset & 7)) & 1

    def read_bytes(self, offset: int, width: int) -> bytes:
        """
        Extract `width` bits starting at bit `offset`.

        Each output byte j is built from source bit offset + 8*j: the low
        part comes from the source byte holding that bit shifted right, the
        high part from the next source byte shifted left. The last output
        byte is masked down to the bits that belong to the span.

        Args:
            offset: First bit of the span
            width: Number of bits in the span (may be 0)

        Returns:
            ceil(width / 8) bytes, LSB-first
        """
        self._check_span(offset, width)

        n_out = byte_count(width)
        out = bytearray(n_out)
        shift = offset & 7
        first = offset >> 3

        for j in range(n_out):
            i = first + j
            value = self._data[i] >> shift
            if shift and i + 1 < len(self._data):
                value |= self._data[i + 1] << (8 - shift)
            out[j] = value & 0xFF

        rest = width & 7
        if n_out and rest:
            out[-1] &= low_mask(rest)

        return bytes(out)

    def read_int(self, offset: int, width: int) -> int:
        """Extract a bit span as an unsigned integer."""
        return int.from_bytes(self.read_bytes(offset, width), "little")

    def _check_span(self, offset: int, width: int) -> None:
        if offset < 0 or width < 0:
            raise InvalidFieldWidth(
                f"bit span must be non-negative (offset={offset}, width={width})"
            )
        if offset + width > self.bit_length:
            raise InvalidFieldWidth(
                f"bit span [{offset}, {offset + width}) exceeds buffer of "
                f"{self.bit_length} bits"
            )
