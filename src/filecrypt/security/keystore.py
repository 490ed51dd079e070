"""Detached key file handling.

A key file holds exactly KEY_SIZE raw bytes: no header, no encoding. The store
only generates, writes, and reads keys; it never logs key material and keeps no
key in memory between calls.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from filecrypt.core.exceptions import InvalidKeySizeError
from filecrypt.core.file_io import read_bytes, write_bytes

from .random import RandomSource, default_random_source

logger = logging.getLogger(__name__)

# 32 bytes for AES-256
KEY_SIZE = 32
# owner read/write only, applied before the key bytes are written
KEY_FILE_MODE = 0o600


class KeyStore:
    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source or default_random_source()

    def generate(self) -> bytes:
        """Return a fresh KEY_SIZE-byte key; nothing is persisted."""
        key = self.random_source.random_bytes(KEY_SIZE)
        if len(key) != KEY_SIZE:
            raise InvalidKeySizeError(KEY_SIZE, len(key))
        return key

    def save(self, key: bytes, path: Path | str) -> Path:
        """
        Write `key` to `path`, creating parent directories and overwriting any existing file.

        The file is restricted to owner read/write. Returns the path written.
        """
        if len(key) != KEY_SIZE:
            raise InvalidKeySizeError(KEY_SIZE, len(key), path)

        p = Path(path).expanduser()
        write_bytes(p, key, create_parents=True, description="key file", mode=KEY_FILE_MODE)
        logger.info("saved key file %s", p)
        return p

    def load(self, path: Path | str) -> bytes:
        """Read a key file, rejecting anything that is not exactly KEY_SIZE bytes."""
        key = read_bytes(path, description="key file")
        if len(key) != KEY_SIZE:
            raise InvalidKeySizeError(KEY_SIZE, len(key), path)
        logger.debug("loaded key file %s", path)
        return key
