from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from macaddress.util import ByteUtils

EUI48LEN = 6
"""Number of octets in an EUI-48 address"""

EUI64LEN = 8
"""Number of octets in an EUI-64 address"""

SHORT_LEN = 14
"""Length of the 0x123456abcdef and 1234.56ab.cdef forms"""

LONG_LEN = 17
"""Length of the 12-34-56-ab-cd-ef and 12:34:56:ab:cd:ef forms"""

SEPARATORS = ("-", ":", ".")


class MacAddressFormat(Enum):
    Canonical = auto()
    """12-34-56-ab-cd-ef"""
    HexString = auto()
    """12:34:56:ab:cd:ef"""
    DotNotation = auto()
    """1234.56ab.cdef"""
    Hexadecimal = auto()
    """0x123456abcdef"""

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.name

    @staticmethod
    def from_name(name: str):
        for member_name, member in MacAddressFormat.__members__.items():
            if member_name.lower() == name.strip().lower():
                return member
        raise ValueError(f"No such MacAddressFormat {name}. Expected one of "
                         f"{', '.join(MacAddressFormat.__members__.keys())}")


class ParseError(ValueError):
    """
    Base of the two ways parsing text into an address can fail. Only
    InvalidLength and InvalidCharacter are ever raised.
    """
    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class InvalidLength(ParseError):
    def __init__(self, length: int):
        super().__init__(length)
        self.length = length

    def __str__(self):
        return f"Invalid length; expecting {SHORT_LEN} or {LONG_LEN} chars, found {self.length}"

    def __repr__(self):
        return f"InvalidLength({self.length})"


class InvalidCharacter(ParseError):
    def __init__(self, character: str, offset: int):
        super().__init__(character, offset)
        self.character = character
        self.offset = offset

    def __str__(self):
        return f"Invalid character; found `{self.character}` at offset {self.offset}"

    def __repr__(self):
        return f"InvalidCharacter({self.character!r}, {self.offset})"


def format_eui(eui: Iterable[int], fmt: MacAddressFormat = MacAddressFormat.Canonical) -> str:
    """
    Render the six octets of an address in the given notation, always as
    zero-padded lowercase hex
    """
    octets = [f"{b:02x}" for b in eui]
    if fmt == MacAddressFormat.Canonical:
        return "-".join(octets)
    elif fmt == MacAddressFormat.HexString:
        return ":".join(octets)
    elif fmt == MacAddressFormat.DotNotation:
        return ".".join("".join(octets[i:i + 2]) for i in range(0, len(octets), 2))
    elif fmt == MacAddressFormat.Hexadecimal:
        return "0x" + "".join(octets)
    else:
        raise ValueError(f"Unknown MacAddressFormat {fmt}")


@dataclass
class _ScanState:
    eui: bytearray = field(default_factory=lambda: bytearray(EUI48LEN))
    offset: int = 0
    """Index of the octet currently being filled"""
    high_nibble: bool = False
    """Have we seen the high nibble of the current octet yet?"""

    def reset(self):
        self.offset = 0
        self.high_nibble = False

    def full(self) -> bool:
        return self.offset == EUI48LEN

    def push(self, nibble: int):
        if not self.high_nibble:
            self.eui[self.offset] = (nibble << 4) & 0xF0
            self.high_nibble = True
        else:
            self.eui[self.offset] |= nibble & 0x0F
            self.offset += 1
            self.high_nibble = False


def parse_eui(s: str) -> bytes:
    """
    Parse any of the supported notations into six octets.

    Accepts 12-34-56-ab-cd-ef, 12:34:56:ab:cd:ef, 1234.56ab.cdef and
    0x123456abcdef in either case. Separators are skipped wherever they
    appear and are not checked for consistency, only the total length is.

    :raises InvalidLength: the text is not 14 or 17 characters long, or does
        not hold exactly six pairs of hex digits
    :raises InvalidCharacter: a character outside the notations was found,
        or an 'x' appeared anywhere but the second position
    """
    if len(s) not in (SHORT_LEN, LONG_LEN):
        raise InvalidLength(len(s))

    state = _ScanState()
    for idx, c in enumerate(s):
        if state.full():
            # Six octets written but characters remain
            raise InvalidLength(len(s))
        nibble = ByteUtils.hex_value(c)
        if nibble >= 0:
            state.push(nibble)
        elif c in SEPARATORS:
            continue
        elif c in ("x", "X"):
            if idx == 1:
                # Possibly a 0x prefix, drop whatever the leading character wrote
                state.reset()
            else:
                raise InvalidCharacter(c, idx)
        else:
            raise InvalidCharacter(c, idx)

    if not state.full():
        raise InvalidLength(len(s))
    return bytes(state.eui)
