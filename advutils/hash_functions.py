"""String hash functions: FNV-1a, Dan Bernstein's djb and sdbm.

Every function takes a ``str`` (encoded as UTF-8) or ``bytes`` key and
returns an unsigned 32-bit hash. As with NUL-terminated strings, hashing
stops at the first zero byte.
"""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211


def _key_bytes(key: str | bytes | bytearray) -> bytes:
    if isinstance(key, str):
        data = key.encode("utf-8")
    elif isinstance(key, (bytes, bytearray)):
        data = bytes(key)
    else:
        raise TypeError(f"key must be str or bytes, not {type(key).__name__}")
    terminator = data.find(b"\0")
    return data if terminator < 0 else data[:terminator]


def hash_fnv1a(key: str | bytes) -> int:
    """64-bit FNV-1a hash of ``key``, truncated to its low 32 bits."""
    value = _FNV_OFFSET
    for byte in _key_bytes(key):
        value = ((value ^ byte) * _FNV_PRIME) & _MASK64
    return value & _MASK32


def hash_djb(key: str | bytes) -> int:
    """Dan Bernstein's hash (``hash * 33 + c``) of ``key``."""
    value = 5381
    for byte in _key_bytes(key):
        value = ((value << 5) + value + byte) & _MASK32
    return value


def hash_sdbm(key: str | bytes) -> int:
    """sdbm hash (``hash * 65599 + c``) of ``key``."""
    value = 0
    for byte in _key_bytes(key):
        value = (byte + (value << 6) + (value << 16) - value) & _MASK32
    return value