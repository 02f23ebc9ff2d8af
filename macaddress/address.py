from dataclasses import dataclass, field
from io import BytesIO

from macaddress.codec import EUI48LEN, MacAddressFormat, format_eui, parse_eui
from macaddress.util import ByteUtils


@dataclass(eq=True, frozen=True)
class MacAddress:
    """
    A MAC address (EUI-48), six octets in transmission order.

    Instances are immutable, so they can be shared freely and used as
    dictionary keys.
    """
    eui: bytes = field(default=bytes(EUI48LEN))

    def __post_init__(self):
        if isinstance(self.eui, (int, str)):
            raise TypeError(f"Cannot create MacAddress from {type(self.eui).__name__}. Expected bytes")
        eui = bytes(self.eui)
        if len(eui) != EUI48LEN:
            raise ValueError(f"Cannot create MacAddress from {len(eui)} bytes. Expected {EUI48LEN}")
        object.__setattr__(self, "eui", eui)

    def __repr__(self):
        return f"MacAddress(\"{self.to_hex_string()}\")"

    def __str__(self):
        return self.to_canonical()

    def __bytes__(self):
        return self.eui

    @classmethod
    def nil(cls):
        """Returns the empty address 00-00-00-00-00-00"""
        return cls(bytes(EUI48LEN))

    @classmethod
    def broadcast(cls):
        """Returns the broadcast address ff-ff-ff-ff-ff-ff"""
        return cls(bytes([0xFF] * EUI48LEN))

    @classmethod
    def parse(cls, s: str):
        """
        Parse an address from any supported notation, see
        :func:`macaddress.codec.parse_eui` for the accepted forms and errors.
        """
        return cls(parse_eui(s))

    @classmethod
    def decode(cls, data: BytesIO):
        return cls(ByteUtils.read_bytes(data, EUI48LEN))

    def encode(self, data: BytesIO) -> None:
        for b in self.eui:
            ByteUtils.write_uint8(data, b)

    def as_bytes(self) -> bytes:
        return self.eui

    def is_nil(self) -> bool:
        return all(b == 0x00 for b in self.eui)

    def is_broadcast(self) -> bool:
        return all(b == 0xFF for b in self.eui)

    def is_unicast(self) -> bool:
        return not self.is_multicast()

    def is_multicast(self) -> bool:
        """Group address, the I/G bit (bit 0 of the first octet) is set"""
        return ByteUtils.bit(self.eui[0], 0)

    def is_universal(self) -> bool:
        return not self.is_local()

    def is_local(self) -> bool:
        """Locally administered, the U/L bit (bit 1 of the first octet) is set"""
        return ByteUtils.bit(self.eui[0], 1)

    def to_canonical(self) -> str:
        return format_eui(self.eui, MacAddressFormat.Canonical)

    def to_hex_string(self) -> str:
        return format_eui(self.eui, MacAddressFormat.HexString)

    def to_dot_string(self) -> str:
        return format_eui(self.eui, MacAddressFormat.DotNotation)

    def to_hexadecimal(self) -> str:
        return format_eui(self.eui, MacAddressFormat.Hexadecimal)

    def to_string(self, fmt: MacAddressFormat = MacAddressFormat.Canonical) -> str:
        return format_eui(self.eui, fmt)
