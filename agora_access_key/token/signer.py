"""HMAC-SHA256 signing of access key payloads."""

from __future__ import annotations

import hmac
from hashlib import sha256
from typing import Union

from ..errors import InvalidKeyError

SIGNATURE_SIZE = sha256().digest_size


def _to_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def sign(key: Union[str, bytes], data: bytes) -> bytes:
    """Return the 32-byte HMAC-SHA256 digest of ``data`` under ``key``."""
    raw_key = _to_bytes(key)
    if not raw_key:
        raise InvalidKeyError("Signing key must not be empty.")
    return hmac.new(raw_key, data, sha256).digest()


def signing_payload(app_id: str, channel_name: str, identity: str, message: bytes) -> bytes:
    """Concatenate the signed region with no separators or length prefixes."""
    return _to_bytes(app_id) + _to_bytes(channel_name) + _to_bytes(identity) + message
