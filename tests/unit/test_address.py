import copy
import unittest
from io import BytesIO

from macaddress import MacAddress, MacAddressFormat, InvalidLength, InvalidCharacter, EUI48LEN


class TestMacAddress(unittest.TestCase):
    def test_nil(self):
        nil = MacAddress.nil()
        not_nil = MacAddress.broadcast()

        assert nil.is_nil()
        assert not not_nil.is_nil()
        assert not MacAddress(bytes([0, 0, 0, 0, 0, 1])).is_nil()

    def test_broadcast(self):
        broadcast = MacAddress.broadcast()
        not_broadcast = MacAddress.nil()

        assert broadcast.is_broadcast()
        assert not not_broadcast.is_broadcast()
        assert not MacAddress(bytes([0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFE])).is_broadcast()
        assert MacAddress.nil() != MacAddress.broadcast()

    def test_new(self):
        eui = bytes([0x12, 0x34, 0x56, 0xAB, 0xCD, 0xEF])
        mac = MacAddress(eui)
        assert mac.eui == eui
        assert bytes(mac) == eui
        assert mac.as_bytes() == eui

    def test_default_is_nil(self):
        assert MacAddress() == MacAddress.nil()
        assert MacAddress().is_nil()

    def test_wrong_length(self):
        self.assertRaises(ValueError, MacAddress, bytes(5))
        self.assertRaises(ValueError, MacAddress, bytes(7))
        self.assertRaises(ValueError, MacAddress, b"")

    def test_not_bytes(self):
        # bytes(6) would otherwise quietly build the nil address
        self.assertRaises(TypeError, MacAddress, 6)
        self.assertRaises(TypeError, MacAddress, 0)
        self.assertRaises(TypeError, MacAddress, "12:34:56:ab:cd:ef")

    def test_copies_mutable_input(self):
        buf = bytearray([1, 2, 3, 4, 5, 6])
        mac = MacAddress(buf)
        buf[0] = 0xFF
        assert mac.eui == bytes([1, 2, 3, 4, 5, 6])
        assert isinstance(mac.eui, bytes)

    def test_immutable(self):
        mac = MacAddress.broadcast()
        with self.assertRaises(AttributeError):
            mac.eui = bytes(EUI48LEN)

    def test_copy(self):
        mac = MacAddress(bytes([1, 2, 3, 4, 5, 6]))
        assert copy.copy(mac) == mac
        assert copy.deepcopy(mac) == mac

    def test_equality_and_hash(self):
        a = MacAddress(bytes([1, 2, 3, 4, 5, 6]))
        b = MacAddress([1, 2, 3, 4, 5, 6])
        c = MacAddress(bytes([1, 2, 3, 4, 5, 7]))
        assert a == b
        assert a != c
        assert len({a, b, c}) == 2

    def test_unicast_multicast(self):
        assert MacAddress.parse("01:00:5E:AB:CD:EF").is_multicast()
        assert not MacAddress.parse("01:00:5E:AB:CD:EF").is_unicast()
        assert MacAddress.broadcast().is_multicast()
        assert MacAddress.nil().is_unicast()
        assert MacAddress.parse("12:34:56:ab:cd:ef").is_unicast()

    def test_universal_local(self):
        assert MacAddress.parse("02:00:00:00:00:01").is_local()
        assert MacAddress.parse("00:1b:21:00:00:01").is_universal()
        assert MacAddress.broadcast().is_local()

    def test_flags_are_complements(self):
        for first in range(256):
            mac = MacAddress(bytes([first, 0, 0, 0, 0, 0]))
            assert mac.is_unicast() != mac.is_multicast()
            assert mac.is_universal() != mac.is_local()
            assert mac.is_multicast() == bool(first & 0x01)
            assert mac.is_local() == bool(first & 0x02)

    def test_parse_hex_string(self):
        mac = MacAddress.parse("12:34:56:AB:CD:EF")
        assert mac.eui == bytes([0x12, 0x34, 0x56, 0xAB, 0xCD, 0xEF])
        assert mac.to_string(MacAddressFormat.Canonical) == "12-34-56-ab-cd-ef"

    def test_parse_hexadecimal(self):
        mac = MacAddress.parse("0x123456ABCDEF")
        assert mac == MacAddress.parse("12:34:56:AB:CD:EF")
        assert mac.to_hexadecimal() == "0x123456abcdef"

    def test_parse_errors(self):
        self.assertRaises(InvalidLength, MacAddress.parse, "")
        self.assertRaises(InvalidCharacter, MacAddress.parse, "0x0x0x0x0x0x0x")

    def test_to_string(self):
        mac = MacAddress(bytes([0x12, 0x34, 0x56, 0xAB, 0xCD, 0xEF]))
        assert mac.to_canonical() == "12-34-56-ab-cd-ef"
        assert mac.to_hex_string() == "12:34:56:ab:cd:ef"
        assert mac.to_dot_string() == "1234.56ab.cdef"
        assert mac.to_hexadecimal() == "0x123456abcdef"
        assert mac.to_string() == mac.to_canonical()

    def test_str_and_repr(self):
        mac = MacAddress(bytes([0x12, 0x34, 0x56, 0xAB, 0xCD, 0xEF]))
        assert str(mac) == "12-34-56-ab-cd-ef"
        assert f"{mac}" == "12-34-56-ab-cd-ef"
        assert repr(mac) == 'MacAddress("12:34:56:ab:cd:ef")'

    def test_encode_decode(self):
        mac = MacAddress(bytes([0x12, 0x34, 0x56, 0xAB, 0xCD, 0xEF]))
        data = BytesIO()
        mac.encode(data)
        data.write(b"\x99")
        assert data.getvalue() == b"\x12\x34\x56\xab\xcd\xef\x99"

        data.seek(0)
        assert MacAddress.decode(data) == mac
        assert data.read() == b"\x99"

    def test_decode_short(self):
        self.assertRaises(ValueError, MacAddress.decode, BytesIO(b"\x01\x02\x03"))
