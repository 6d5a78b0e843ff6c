"""AES-256-GCM authenticated encryption helpers."""

from __future__ import annotations

from secrets import token_bytes
from typing import Final

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .kdf import KEY_SIZE, RandomSource

__all__ = [
    "NONCE_SIZE",
    "TAG_SIZE",
    "cipher_decrypt",
    "cipher_encrypt",
    "generate_nonce",
]

NONCE_SIZE: Final[int] = 12
TAG_SIZE: Final[int] = 16


def _check_sizes(key: bytes, nonce: bytes) -> None:
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise ValueError("AES-256-GCM key must be bytes.")
    if not isinstance(nonce, (bytes, bytearray, memoryview)):
        raise ValueError("AES-GCM nonce must be bytes.")
    if len(key) != KEY_SIZE:
        raise ValueError(f"AES-256-GCM key must be {KEY_SIZE} bytes long.")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"AES-GCM nonce must be {NONCE_SIZE} bytes long.")


def generate_nonce(random_source: RandomSource | None = None) -> bytes:
    """Return a fresh ``NONCE_SIZE`` byte nonce from ``random_source``."""

    source = random_source or token_bytes
    return source(NONCE_SIZE)


def cipher_encrypt(key: bytes, nonce: bytes, plaintext: bytes, *, aad: bytes = b"") -> bytes:
    """Encrypt ``plaintext`` and return ``ciphertext || tag``.

    ``nonce`` must never be reused with the same ``key``.
    """

    _check_sizes(key, nonce)
    return AESGCM(bytes(key)).encrypt(bytes(nonce), bytes(plaintext), aad or None)


def cipher_decrypt(key: bytes, nonce: bytes, ciphertext: bytes, *, aad: bytes = b"") -> bytes:
    """Decrypt ``ciphertext || tag`` produced by :func:`cipher_encrypt`.

    Propagates :class:`cryptography.exceptions.InvalidTag` when the tag does not
    verify, whether because of a wrong key or modified input.
    """

    _check_sizes(key, nonce)
    return AESGCM(bytes(key)).decrypt(bytes(nonce), bytes(ciphertext), aad or None)
