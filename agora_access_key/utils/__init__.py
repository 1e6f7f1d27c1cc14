"""Utility helpers for packing, checksums and time."""

from .hashing import crc32
from .packing import UINT16_MAX, UINT32_MAX, pack_uint16, pack_uint32
from .time import unix_seconds, utc_now

__all__ = ["crc32", "pack_uint16", "pack_uint32", "UINT16_MAX", "UINT32_MAX", "unix_seconds", "utc_now"]
