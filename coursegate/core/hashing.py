"""Stable string hashing used to derive reproducible orderings."""

from __future__ import annotations

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF


def fnv1a32(value: str) -> int:
    """
    32-bit FNV-1a hash of the UTF-8 encoding of ``value``.

    Unlike the builtin ``hash()``, the result does not depend on
    PYTHONHASHSEED, so it is safe to use for orderings that must be
    reproduced across processes.
    """
    h = FNV_OFFSET_BASIS
    for byte in value.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & _MASK_32
    return h
