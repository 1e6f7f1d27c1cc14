"""Checksum helpers."""

from __future__ import annotations

import zlib


def crc32(value: bytes) -> int:
    """Return unsigned CRC-32 of the provided bytes."""
    return zlib.crc32(value) & 0xFFFFFFFF
