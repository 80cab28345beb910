"""
Base message decoder framework.

Provides abstract base classes and result types for
implementing AIS message decoders.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.bit_buffer import BitBuffer
from .armor import ArmorMode, decode_armor


@dataclass
class ProtocolInfo:
    """Message family information."""

    name: str
    message_types: Tuple[int, ...]
    min_bits: int
    description: str = ""


@dataclass
class DecodedField:
    """One decoded parameter."""

    name: str
    raw: int
    value: str


@dataclass
class DecodedReport:
    """Decoded AIS message."""

    protocol: str
    message_type: int
    fields: List[DecodedField] = field(default_factory=list)

    def __getitem__(self, name: str) -> DecodedField:
        for decoded in self.fields:
            if decoded.name == name:
                return decoded
        raise KeyError(name)

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Get (name, value) pairs in field order."""
        return [(f.name, f.value) for f in self.fields]

    def as_dict(self) -> Dict[str, str]:
        """Get name to decoded value mapping."""
        return dict(self.as_pairs())


class ProtocolDecoder(ABC):
    """
    Abstract base class for message decoders.

    Subclass this to implement decoders for specific message families.
    """

    def __init__(self, mode: ArmorMode = ArmorMode.REFERENCE):
        """
        Initialize decoder.

        Args:
            mode: Armor table used to de-armor payloads
        """
        self._mode = mode
        self._info: Optional[ProtocolInfo] = None

    @property
    def mode(self) -> ArmorMode:
        """Get armor table selection."""
        return self._mode

    @property
    @abstractmethod
    def protocol_info(self) -> ProtocolInfo:
        """Get protocol information."""
        pass

    @abstractmethod
    def decode_buffer(self, buffer: BitBuffer) -> DecodedReport:
        """
        Decode a de-armored payload.

        Args:
            buffer: Payload bit buffer

        Returns:
            Decoded report
        """
        pass

    @abstractmethod
    def can_decode(self, buffer: BitBuffer) -> bool:
        """
        Check if a payload belongs to this decoder's message family.

        Args:
            buffer: Payload bit buffer

        Returns:
            True if decode_buffer() should be called
        """
        pass

    def to_buffer(self, payload: str) -> BitBuffer:
        """De-armor a payload with this decoder's table."""
        return decode_armor(payload, self._mode)

    def decode(self, payload: str) -> DecodedReport:
        """
        Decode an armored payload.

        Args:
            payload: Armored payload characters

        Returns:
            Decoded report
        """
        return self.decode_buffer(self.to_buffer(payload))
