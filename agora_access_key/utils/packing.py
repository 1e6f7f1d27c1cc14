"""Little-endian fixed-width integer packing."""

from __future__ import annotations

import operator
import struct

from ..errors import FieldOverflowError

UINT16 = struct.Struct("<H")
UINT32 = struct.Struct("<I")

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF


def _checked(value: int, maximum: int, field: str) -> int:
    number = operator.index(value)
    if not 0 <= number <= maximum:
        raise FieldOverflowError(f"{field}={number} does not fit in range [0, {maximum}].")
    return number


def pack_uint16(value: int, field: str = "value") -> bytes:
    return UINT16.pack(_checked(value, UINT16_MAX, field))


def pack_uint32(value: int, field: str = "value") -> bytes:
    return UINT32.pack(_checked(value, UINT32_MAX, field))
