"""Injectable source of cryptographically secure random bytes.

Key generation and nonce generation both take a RandomSource instead of calling
os.urandom directly, so tests can swap in a deterministic source.
"""
from __future__ import annotations

import os
from typing import Protocol


class RandomSource(Protocol):
    def random_bytes(self, length: int) -> bytes:
        ...


class SystemRandomSource:
    """RandomSource backed by the operating system CSPRNG."""

    def random_bytes(self, length: int) -> bytes:
        return os.urandom(length)


def default_random_source() -> RandomSource:
    return SystemRandomSource()
