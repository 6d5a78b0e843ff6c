"""Password-based key derivation using Argon2id."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from secrets import token_bytes
from typing import Callable, Final

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from .errors import KeyGenerationFailure

__all__ = [
    "KEY_SIZE",
    "SALT_SIZE",
    "Argon2Params",
    "DEFAULT_PARAMS",
    "RandomSource",
    "derive_key",
    "generate_salt",
]

KEY_SIZE: Final[int] = 32
SALT_SIZE: Final[int] = 32

RandomSource = Callable[[int], bytes]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Argon2Params:
    """Tunable parameters for the Argon2id key derivation function."""

    time_cost: int = 3
    """Number of iterations (the ``t`` parameter)."""

    memory_cost: int = 64 * 1024
    """Memory usage in kibibytes (the ``m`` parameter)."""

    parallelism: int = 4
    """Number of parallel lanes (the ``p`` parameter)."""

    def validate(self) -> None:
        """Raise :class:`KeyGenerationFailure` if Argon2 would reject these values."""

        for name in ("time_cost", "memory_cost", "parallelism"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise KeyGenerationFailure(f"Argon2 {name} must be a positive integer.")
        # Argon2 needs at least 8 KiB of memory per lane.
        if self.memory_cost < 8 * self.parallelism:
            raise KeyGenerationFailure("Argon2 memory_cost must be at least 8 * parallelism.")


DEFAULT_PARAMS: Final[Argon2Params] = Argon2Params()


def generate_salt(random_source: RandomSource | None = None) -> bytes:
    """Return ``SALT_SIZE`` bytes from ``random_source`` (the OS CSPRNG by default)."""

    source = random_source or token_bytes
    return source(SALT_SIZE)


def derive_key(
    password: bytes,
    salt: bytes,
    *,
    params: Argon2Params | None = None,
) -> bytes:
    """Derive a ``KEY_SIZE`` byte key from ``password`` and ``salt``.

    The result is deterministic for identical inputs, which is what allows
    decryption to rebuild the key from the salt stored in the container. Nothing
    is cached: the cost of each call is what slows down password guessing.

    Raises :class:`KeyGenerationFailure` when the parameters or inputs are
    rejected.
    """

    effective = params or DEFAULT_PARAMS
    effective.validate()

    if not isinstance(password, (bytes, bytearray, memoryview)):
        raise KeyGenerationFailure("Password must be bytes.")
    if not isinstance(salt, (bytes, bytearray, memoryview)) or len(salt) != SALT_SIZE:
        raise KeyGenerationFailure(f"Salt must be exactly {SALT_SIZE} bytes long.")

    logger.debug(
        "Deriving key with Argon2id (t=%d, m=%d KiB, p=%d)",
        effective.time_cost,
        effective.memory_cost,
        effective.parallelism,
    )
    try:
        return hash_secret_raw(
            secret=bytes(password),
            salt=bytes(salt),
            time_cost=effective.time_cost,
            memory_cost=effective.memory_cost,
            parallelism=effective.parallelism,
            hash_len=KEY_SIZE,
            type=Type.ID,
        )
    except HashingError as exc:
        raise KeyGenerationFailure(str(exc)) from exc
