"""Small and simple password-based encryption.

``seal`` turns plaintext and a password into one self-contained encrypted blob;
``open`` reverses it. Failures are reported through the exceptions in
:mod:`tinycrypt.errors`, and a wrong password is always :class:`IncorrectPassword`.
"""

from __future__ import annotations

from .api import decrypt, encrypt, open, seal
from .container import CONTAINER_VERSION, EncryptedContainer
from .errors import (
    CryptographyError,
    DecodingFailure,
    EncodingFailure,
    ErrorKind,
    IncorrectPassword,
    KeyGenerationFailure,
)
from .kdf import DEFAULT_PARAMS, Argon2Params

__all__ = [
    "CONTAINER_VERSION",
    "DEFAULT_PARAMS",
    "Argon2Params",
    "CryptographyError",
    "DecodingFailure",
    "EncodingFailure",
    "EncryptedContainer",
    "ErrorKind",
    "IncorrectPassword",
    "KeyGenerationFailure",
    "decrypt",
    "encrypt",
    "open",
    "seal",
]

__version__ = "1.0.0"
