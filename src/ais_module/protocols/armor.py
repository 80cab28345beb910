"""
AIVDM payload armoring.

Maps the 64-symbol ASCII armor alphabet to 6-bit values and back.

Two tables are provided. The reference table reproduces the
de-armoring data this decoder's output has historically been checked
against: value 40 is written as an apostrophe and 'f' carries the
same value as 'e' (45). The corrected table follows ITU-R M.1371,
where 40 is a backtick (the apostrophe is still accepted) and 'f'
is 46.
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from ..core.bit_buffer import BitBuffer, DecodeError


class ArmorMode(Enum):
    """Armor table selection."""

    REFERENCE = "reference"  # 'f' decodes as 45, like 'e'
    CORRECTED = "corrected"  # ITU table, 'f' decodes as 46


class InvalidCharacterError(DecodeError):
    """Raised when a payload contains a character outside the armor alphabet."""

    def __init__(self, character: str, index: int):
        self.character = character
        self.index = index
        super().__init__(
            f"Invalid armor character {character!r} at position {index}"
        )


class InvalidSixBitValueError(DecodeError):
    """Raised when a value has no armor character in the selected table."""

    def __init__(self, value: int, mode: "ArmorMode"):
        self.value = value
        self.mode = mode
        super().__init__(f"No armor character for value {value} in {mode.value} table")


def _build_table(corrected: bool) -> Mapping[str, int]:
    table = {}
    for i, ch in enumerate("0123456789:;<=>?@"):
        table[ch] = i
    for i in range(ord("W") - ord("A") + 1):
        table[chr(ord("A") + i)] = 17 + i
    if corrected:
        table["`"] = 40
    table["'"] = 40
    for i in range(ord("w") - ord("a") + 1):
        table[chr(ord("a") + i)] = 41 + i
    if not corrected:
        table["f"] = table["e"]
    return MappingProxyType(table)


def _build_reverse(table: Mapping[str, int]) -> Mapping[int, str]:
    reverse = {}
    for ch, value in table.items():
        # First character wins, so 45 encodes as 'e' in the reference table
        reverse.setdefault(value, ch)
    return MappingProxyType(reverse)


_TABLES = {
    ArmorMode.REFERENCE: _build_table(corrected=False),
    ArmorMode.CORRECTED: _build_table(corrected=True),
}

_REVERSE_TABLES = {mode: _build_reverse(table) for mode, table in _TABLES.items()}


def armor_alphabet(mode: ArmorMode = ArmorMode.REFERENCE) -> Mapping[str, int]:
    """
    Get the read-only character to 6-bit value table.

    Args:
        mode: Table selection

    Returns:
        Immutable mapping
    """
    return _TABLES[mode]


def decode_armor(payload: str, mode: ArmorMode = ArmorMode.REFERENCE) -> BitBuffer:
    """
    Convert an armored payload to a bit buffer.

    Args:
        payload: Armored payload characters
        mode: Table selection

    Returns:
        BitBuffer with one 6-bit unit per character

    Raises:
        InvalidCharacterError: If a character is not in the alphabet
    """
    table = _TABLES[mode]
    units = []
    for index, ch in enumerate(payload):
        try:
            units.append(table[ch])
        except KeyError:
            raise InvalidCharacterError(ch, index) from None
    return BitBuffer(units)


def encode_armor(values: Iterable[int], mode: ArmorMode = ArmorMode.REFERENCE) -> str:
    """
    Convert 6-bit values back to armor characters.

    Args:
        values: 6-bit values, or a BitBuffer
        mode: Table selection

    Returns:
        Armored payload string

    Raises:
        InvalidSixBitValueError: If a value has no character in the table
    """
    if isinstance(values, BitBuffer):
        values = values.units.tolist()

    reverse = _REVERSE_TABLES[mode]
    chars = []
    for value in values:
        try:
            chars.append(reverse[int(value)])
        except KeyError:
            raise InvalidSixBitValueError(int(value), mode) from None
    return "".join(chars)
