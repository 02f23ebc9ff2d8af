"""
msgpack glue for MacAddress.

A lone address is packed as its canonical string. Addresses nested inside
larger structures are packed as a 6 byte ExtType by passing :func:`default`
and :func:`ext_hook` to msgpack:

    data = msgpack.packb({"src": addr}, default=default)
    obj = msgpack.unpackb(data, ext_hook=ext_hook)
"""
from typing import Any

import msgpack

from macaddress.address import MacAddress
from macaddress.codec import parse_eui

MSGPACK_EXT_TYPE = 0x48


def packb(address: MacAddress) -> bytes:
    return msgpack.packb(address.to_canonical())


def unpackb(data: bytes) -> MacAddress:
    value = msgpack.unpackb(data)
    if not isinstance(value, str):
        raise TypeError(f"Expected a packed string, got {type(value).__name__}")
    return MacAddress(parse_eui(value))


def default(obj: Any) -> msgpack.ExtType:
    if isinstance(obj, MacAddress):
        return msgpack.ExtType(MSGPACK_EXT_TYPE, bytes(obj))
    raise TypeError(f"Cannot serialize {obj!r}")


def ext_hook(code: int, data: bytes) -> Any:
    if code == MSGPACK_EXT_TYPE:
        return MacAddress(data)
    return msgpack.ExtType(code, data)
