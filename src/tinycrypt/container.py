"""Binary container holding a sealed payload.

Layout (version 1, integers big-endian)::

    [version:1][nonce:12][salt:32][length:8][ciphertext:length]

``ciphertext`` carries the 16-byte authentication tag at its end, so it is never
shorter than 16 bytes. Every field is either fixed-width or length-prefixed, so
a given ``(ciphertext, nonce, salt)`` triple has exactly one encoding and
trailing or missing bytes are detected.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Final

from .aead import NONCE_SIZE, TAG_SIZE
from .errors import ContainerError
from .kdf import SALT_SIZE

__all__ = [
    "CONTAINER_VERSION",
    "HEADER_SIZE",
    "EncryptedContainer",
    "pack",
    "unpack",
]

CONTAINER_VERSION: Final[int] = 0x01

_LENGTH: Final[struct.Struct] = struct.Struct(">Q")
_NONCE_OFFSET: Final[int] = 1
_SALT_OFFSET: Final[int] = _NONCE_OFFSET + NONCE_SIZE
_LENGTH_OFFSET: Final[int] = _SALT_OFFSET + SALT_SIZE
HEADER_SIZE: Final[int] = _LENGTH_OFFSET + _LENGTH.size

_BYTES_LIKE = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class EncryptedContainer:
    """Salt, nonce and ciphertext of one sealed payload."""

    ciphertext: bytes
    nonce: bytes
    salt: bytes

    def to_bytes(self) -> bytes:
        return pack(self.ciphertext, self.nonce, self.salt)

    @classmethod
    def from_bytes(cls, data: bytes) -> "EncryptedContainer":
        ciphertext, nonce, salt = unpack(data)
        return cls(ciphertext=ciphertext, nonce=nonce, salt=salt)


def pack(ciphertext: bytes, nonce: bytes, salt: bytes) -> bytes:
    """Serialise the three container fields into their wire form."""

    if not isinstance(ciphertext, _BYTES_LIKE):
        raise ContainerError("Ciphertext must be bytes.")
    if not isinstance(nonce, _BYTES_LIKE) or len(nonce) != NONCE_SIZE:
        raise ContainerError(f"Nonce must be {NONCE_SIZE} bytes long.")
    if not isinstance(salt, _BYTES_LIKE) or len(salt) != SALT_SIZE:
        raise ContainerError(f"Salt must be {SALT_SIZE} bytes long.")

    return b"".join(
        (
            bytes([CONTAINER_VERSION]),
            bytes(nonce),
            bytes(salt),
            _LENGTH.pack(len(ciphertext)),
            bytes(ciphertext),
        )
    )


def unpack(data: bytes) -> tuple[bytes, bytes, bytes]:
    """Parse ``data`` and return ``(ciphertext, nonce, salt)``.

    Raises :class:`ContainerError` when ``data`` does not follow the layout
    exactly. No cryptographic check is performed here.
    """

    if not isinstance(data, _BYTES_LIKE):
        raise ContainerError("Container must be bytes.")
    blob = bytes(data)
    if len(blob) < HEADER_SIZE:
        raise ContainerError(
            f"Container too short: {len(blob)} bytes (minimum {HEADER_SIZE})."
        )

    version = blob[0]
    if version != CONTAINER_VERSION:
        raise ContainerError(f"Unsupported container version: 0x{version:02x}.")

    (length,) = _LENGTH.unpack_from(blob, _LENGTH_OFFSET)
    if len(blob) - HEADER_SIZE != length:
        raise ContainerError(
            f"Length mismatch: header declares {length} ciphertext bytes, "
            f"found {len(blob) - HEADER_SIZE}."
        )
    if length < TAG_SIZE:
        raise ContainerError(
            f"Ciphertext of {length} bytes is shorter than the {TAG_SIZE} byte authentication tag."
        )

    nonce = blob[_NONCE_OFFSET:_SALT_OFFSET]
    salt = blob[_SALT_OFFSET:_LENGTH_OFFSET]
    ciphertext = blob[HEADER_SIZE:]
    return ciphertext, nonce, salt
