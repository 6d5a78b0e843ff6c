"""High-level password encryption API: :func:`seal` and :func:`open`."""

from __future__ import annotations

import logging

from cryptography.exceptions import InvalidTag

from .aead import cipher_decrypt, cipher_encrypt, generate_nonce
from .container import CONTAINER_VERSION, EncryptedContainer
from .errors import ContainerError, DecodingFailure, EncodingFailure, IncorrectPassword
from .kdf import Argon2Params, RandomSource, derive_key, generate_salt

__all__ = [
    "decrypt",
    "encrypt",
    "open",
    "seal",
]

logger = logging.getLogger(__name__)

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _associated_data(extra: bytes) -> bytes:
    """Return the AEAD associated data: the format version followed by ``extra``."""

    if not isinstance(extra, _BYTES_LIKE):
        raise ContainerError("Associated data must be bytes.")
    return bytes([CONTAINER_VERSION]) + bytes(extra)


def seal(
    plaintext: bytes,
    password: bytes,
    *,
    associated_data: bytes = b"",
    params: Argon2Params | None = None,
    random_source: RandomSource | None = None,
) -> bytes:
    """Encrypt ``plaintext`` under ``password`` and return a self-contained container.

    A fresh salt and nonce are drawn from ``random_source`` (the OS CSPRNG by
    default) on every call, so sealing the same input twice yields different
    bytes. ``associated_data`` is authenticated but not stored; the same value
    must be passed to :func:`open`. ``params`` must also match on both sides.

    Examples
    --------
    >>> blob = seal(b"Hello world!", b"password")
    >>> open(blob, b"password")
    b'Hello world!'

    Raises
    ------
    KeyGenerationFailure
        If the key cannot be derived from ``password``.
    IncorrectPassword
        If the cipher rejects its input. Not expected under correct usage.
    EncodingFailure
        If the plaintext, ``associated_data`` or the container fields cannot be
        serialised.
    """

    if not isinstance(plaintext, _BYTES_LIKE):
        raise EncodingFailure("Plaintext must be bytes.")
    try:
        aad = _associated_data(associated_data)
    except ContainerError as exc:
        raise EncodingFailure(str(exc)) from exc

    salt = generate_salt(random_source)
    key = derive_key(password, salt, params=params)
    nonce = generate_nonce(random_source)

    try:
        ciphertext = cipher_encrypt(key, nonce, plaintext, aad=aad)
    except (ValueError, OverflowError) as exc:
        raise IncorrectPassword("Failed to encrypt data") from exc

    try:
        blob = EncryptedContainer(ciphertext=ciphertext, nonce=nonce, salt=salt).to_bytes()
    except ContainerError as exc:
        raise EncodingFailure(str(exc)) from exc

    logger.debug("Sealed %d plaintext bytes into a %d byte container", len(plaintext), len(blob))
    return blob


def open(  # noqa: A001
    data: bytes,
    password: bytes,
    *,
    associated_data: bytes = b"",
    params: Argon2Params | None = None,
) -> bytes:
    """Decrypt a container produced by :func:`seal` and return the plaintext.

    Raises
    ------
    DecodingFailure
        If ``data`` is not a well-formed container or ``associated_data`` is not
        bytes. Checked before any cryptographic work.
    KeyGenerationFailure
        If the key cannot be derived from ``password``.
    IncorrectPassword
        If authentication fails: the password is wrong or the container was
        modified. The two cases are intentionally indistinguishable.
    """

    try:
        aad = _associated_data(associated_data)
        container = EncryptedContainer.from_bytes(data)
    except ContainerError as exc:
        logger.debug("Rejected malformed container: %s", exc)
        raise DecodingFailure(str(exc)) from exc

    key = derive_key(password, container.salt, params=params)

    try:
        plaintext = cipher_decrypt(key, container.nonce, container.ciphertext, aad=aad)
    except InvalidTag as exc:
        logger.debug("Authentication failed while opening a %d byte container", len(data))
        raise IncorrectPassword() from exc

    return plaintext


encrypt = seal
decrypt = open
