import struct
from io import BytesIO


class ByteUtils:
    @staticmethod
    def write_uint8(data: BytesIO, val: int) -> None:
        data.write(struct.pack(">B", val))

    @staticmethod
    def read_bytes(data: BytesIO, n: int) -> bytes:
        buf = data.read(n)
        if len(buf) != n:
            raise ValueError(f"Expected {n} bytes, only {len(buf)} available")
        return buf

    @staticmethod
    def bit(byte: int, n: int) -> bool:
        return bool((byte >> n) & 0x01)

    @staticmethod
    def hex_value(c: str) -> int:
        """Value of a single hexadecimal digit, or -1 if ``c`` is not one"""
        if "0" <= c <= "9":
            return ord(c) - ord("0")
        if "a" <= c <= "f":
            return ord(c) - ord("a") + 10
        if "A" <= c <= "F":
            return ord(c) - ord("A") + 10
        return -1
