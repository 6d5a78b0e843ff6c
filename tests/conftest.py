"""Shared fixtures for the tinycrypt test-suite."""

from __future__ import annotations

import pytest

from tinycrypt.kdf import Argon2Params


@pytest.fixture
def fast_params() -> Argon2Params:
    """Minimal Argon2id cost so the suite does not spend seconds per derivation."""

    return Argon2Params(time_cost=1, memory_cost=8, parallelism=1)
