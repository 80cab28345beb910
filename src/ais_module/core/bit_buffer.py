"""
Bit buffer for de-armored AIS payloads.

Holds one 6-bit unit per armored character and exposes an
MSB-first bitstream view for reading fields at arbitrary
bit offsets.
"""

from typing import Iterable, Sequence, Union

import numpy as np

BITS_PER_UNIT = 6
MAX_FIELD_BITS = 32


class DecodeError(ValueError):
    """Raised when a payload cannot be structurally decoded."""

    pass


class FieldBoundsError(DecodeError):
    """Raised when a field read extends past the end of the buffer."""

    def __init__(self, offset: int, length: int, bit_length: int):
        self.offset = offset
        self.length = length
        self.bit_length = bit_length
        super().__init__(
            f"Field at bit {offset} with length {length} exceeds "
            f"buffer of {bit_length} bits"
        )


class BitBuffer:
    """
    Immutable buffer of 6-bit units.

    Bits are numbered from 0 at the most significant bit of the
    first unit and run continuously across unit boundaries.
    Instances are never modified after construction, so one buffer
    can be read from several threads at once.
    """

    def __init__(self, units: Union[Sequence[int], np.ndarray]):
        """
        Initialize buffer.

        Args:
            units: 6-bit values (0-63), one per armored character
        """
        data = np.asarray(units, dtype=np.int64).ravel()
        if data.size and (data.min() < 0 or data.max() >= 1 << BITS_PER_UNIT):
            raise ValueError("Bit buffer units must be in range 0-63")

        self._units = data.astype(np.uint8)
        self._units.flags.writeable = False

        # Per-unit bits, MSB first; drop the two unused high bits of each byte
        bits = np.unpackbits(self._units.reshape(-1, 1), axis=1)[:, 8 - BITS_PER_UNIT :]
        self._bits = bits.ravel()
        self._bits.flags.writeable = False

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> "BitBuffer":
        """
        Build a buffer from a sequence of bits.

        The bitstream is zero-padded to a whole number of units.

        Args:
            bits: Sequence of 0/1 values, MSB first

        Returns:
            New BitBuffer
        """
        bit_array = np.asarray(list(bits), dtype=np.uint8)
        if bit_array.size and bit_array.max() > 1:
            raise ValueError("Bits must be 0 or 1")

        remainder = bit_array.size % BITS_PER_UNIT
        if remainder:
            bit_array = np.concatenate(
                [bit_array, np.zeros(BITS_PER_UNIT - remainder, dtype=np.uint8)]
            )

        weights = 1 << np.arange(BITS_PER_UNIT - 1, -1, -1)
        units = bit_array.reshape(-1, BITS_PER_UNIT) @ weights
        return cls(units)

    @property
    def units(self) -> np.ndarray:
        """Read-only view of the 6-bit units."""
        return self._units

    @property
    def unit_count(self) -> int:
        """Number of 6-bit units."""
        return int(self._units.size)

    @property
    def bit_length(self) -> int:
        """Total number of bits."""
        return self.unit_count * BITS_PER_UNIT

    def __len__(self) -> int:
        return self.unit_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitBuffer):
            return NotImplemented
        return np.array_equal(self._units, other._units)

    def __repr__(self) -> str:
        return f"BitBuffer(units={self.unit_count}, bits={self.bit_length})"

    def bit(self, index: int) -> int:
        """
        Get a single bit.

        Args:
            index: Absolute bit index

        Returns:
            0 or 1
        """
        if not 0 <= index < self.bit_length:
            raise FieldBoundsError(index, 1, self.bit_length)
        return int(self._bits[index])

    def extract(self, offset: int, length: int) -> int:
        """
        Extract an unsigned field value.

        Args:
            offset: Index of the first bit
            length: Field width in bits (1-32)

        Returns:
            Unsigned integer; the first bit read is the most significant

        Raises:
            ValueError: If offset or length is out of range
            FieldBoundsError: If the field runs past the end of the buffer
        """
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")
        if not 1 <= length <= MAX_FIELD_BITS:
            raise ValueError(
                f"length must be between 1 and {MAX_FIELD_BITS}, got {length}"
            )
        if offset + length > self.bit_length:
            raise FieldBoundsError(offset, length, self.bit_length)

        value = 0
        for bit in self._bits[offset : offset + length]:
            value = (value << 1) | int(bit)
        return value

    def to_bit_string(self) -> str:
        """Render the bitstream as a string of '0' and '1'."""
        return "".join("1" if b else "0" for b in self._bits)


def extract_field(buffer: BitBuffer, offset: int, length: int) -> int:
    """
    Extract an unsigned field value from a bit buffer.

    Args:
        buffer: Source buffer
        offset: Index of the first bit
        length: Field width in bits (1-32)

    Returns:
        Unsigned field value
    """
    return buffer.extract(offset, length)
