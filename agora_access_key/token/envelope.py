"""Access key envelope encoding.

A token is ``VERSION + app_id + base64(content)`` where content is::

    sig_len:u16 signature crc32(channel):u32 crc32(identity):u32 msg_len:u16 message
"""

from __future__ import annotations

import base64
from typing import Iterable

from ..errors import AccessKeyError
from ..utils.hashing import crc32
from ..utils.packing import pack_uint16, pack_uint32
from .message import build_message
from .signer import SIGNATURE_SIZE, sign, signing_payload
from .types import GrantLike, IdentityLike, canonical_identity

VERSION = "006"


def build_content(signature: bytes, channel_name: str, identity: str, message: bytes) -> bytes:
    """Assemble the binary block that gets base64 encoded."""
    if len(signature) != SIGNATURE_SIZE:
        raise AccessKeyError(f"Signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}.")
    buf = bytearray()
    buf += pack_uint16(len(signature), "signature_length")
    buf += signature
    buf += pack_uint32(crc32(channel_name.encode("utf-8")), "crc_channel_name")
    buf += pack_uint32(crc32(identity.encode("utf-8")), "crc_identity")
    buf += pack_uint16(len(message), "message_length")
    buf += message
    return bytes(buf)


def generate_signed_token(
    app_id: str,
    app_certificate: str,
    channel_name: str,
    identity: IdentityLike,
    grants: Iterable[GrantLike],
    salt: int,
    ts: int,
) -> str:
    """Build a signed token with an explicit salt and expiry.

    Deterministic for identical inputs; use ``new_token`` for a random salt
    and a one day expiry.
    """
    uid = canonical_identity(identity)
    message = build_message(salt, ts, grants)
    signature = sign(app_certificate, signing_payload(app_id, channel_name, uid, message))
    content = build_content(signature, channel_name, uid, message)
    return f"{VERSION}{app_id}{base64.b64encode(content).decode('ascii')}"
