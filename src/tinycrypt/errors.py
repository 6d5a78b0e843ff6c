"""Exception hierarchy for :mod:`tinycrypt`.

Every failure raised by :func:`tinycrypt.seal` or :func:`tinycrypt.open` is one
of four mutually exclusive kinds. Callers may branch on the exception class::

    try:
        plaintext = tinycrypt.open(blob, password)
    except tinycrypt.IncorrectPassword:
        ...  # ask for another password
    except tinycrypt.CryptographyError as exc:
        log.error("decryption failed: %s", exc)

or on the :class:`ErrorKind` tag carried by every instance, which supports
exhaustive ``match`` statements.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

__all__ = [
    "ContainerError",
    "ErrorKind",
    "CryptographyError",
    "DecodingFailure",
    "EncodingFailure",
    "KeyGenerationFailure",
    "IncorrectPassword",
]


class ErrorKind(Enum):
    """Tag identifying the root cause of a :class:`CryptographyError`."""

    DECODING_FAILURE = "DecodingFailure"
    ENCODING_FAILURE = "EncodingFailure"
    KEY_GENERATION_FAILURE = "KeyGenerationFailure"
    INCORRECT_PASSWORD = "IncorrectPassword"


class CryptographyError(Exception):
    """Base exception for all failures of the public API."""

    kind: ClassVar[ErrorKind]
    description: ClassVar[str] = "Cryptographic operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.description)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CryptographyError):
            return NotImplemented
        return getattr(self, "kind", None) is getattr(other, "kind", None)

    def __hash__(self) -> int:
        return hash(getattr(self, "kind", None))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class DecodingFailure(CryptographyError):
    """Raised when the input to ``open`` is not a well-formed container."""

    kind = ErrorKind.DECODING_FAILURE
    description = "Data not valid"


class EncodingFailure(CryptographyError):
    """Raised when the container cannot be serialized during ``seal``."""

    kind = ErrorKind.ENCODING_FAILURE
    description = "Failed to encode data"


class KeyGenerationFailure(CryptographyError):
    """Raised when the password-derivation step rejects its configuration or inputs."""

    kind = ErrorKind.KEY_GENERATION_FAILURE
    description = "Failed to create key from password"


class IncorrectPassword(CryptographyError):
    """Raised when the authentication tag does not verify.

    A wrong password and a corrupted container are indistinguishable here and
    are deliberately reported as the same error.
    """

    kind = ErrorKind.INCORRECT_PASSWORD
    description = "Given password was incorrect"


class ContainerError(ValueError):
    """Raised by :mod:`tinycrypt.container` for malformed fields or wire bytes.

    The public API translates it into :class:`EncodingFailure` or
    :class:`DecodingFailure` depending on the direction.
    """
