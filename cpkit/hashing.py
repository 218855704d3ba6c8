"""Polynomial rolling hash for strings."""

from __future__ import annotations

DEFAULT_BASE = 31
DEFAULT_MODULUS = 10**9 + 9


def compute_hash(s: str, base: int = DEFAULT_BASE, modulus: int = DEFAULT_MODULUS) -> int:
    """Return the polynomial hash of ``s``.

    Each character ``c`` contributes ``(ord(c) - ord('a') + 1) * base**i``
    for its position ``i``, with all arithmetic modulo ``modulus``.
    """
    hash_value = 0
    power = 1
    for ch in s:
        hash_value = (hash_value + (ord(ch) - ord("a") + 1) * power) % modulus
        power = power * base % modulus
    return hash_value