"""Binary message serialization for access keys."""

from __future__ import annotations

from typing import Iterable

from ..errors import FieldOverflowError
from ..privilege import privilege_code
from ..utils.packing import UINT16_MAX, pack_uint16, pack_uint32
from .types import GrantLike, to_grants

def build_message(salt: int, ts: int, grants: Iterable[GrantLike]) -> bytes:
    """Serialize salt, expiry and grants into the signed message layout.

    Layout (little-endian)::

        salt:u32 ts:u32 count:u16 {code:u16 expires_at:u32}*count

    Grants are written in input order with no deduplication.
    """
    normalized = to_grants(grants)
    if len(normalized) > UINT16_MAX:
        raise FieldOverflowError(f"Too many privileges: {len(normalized)} > {UINT16_MAX}.")

    buf = bytearray()
    buf += pack_uint32(salt, "salt")
    buf += pack_uint32(ts, "ts")
    buf += pack_uint16(len(normalized), "privilege_count")
    for grant in normalized:
        buf += pack_uint16(privilege_code(grant.privilege), "privilege_code")
        buf += pack_uint32(grant.expires_at, "expires_at")
    return bytes(buf)
