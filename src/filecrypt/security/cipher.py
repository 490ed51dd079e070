"""AES-256-GCM engine used for whole-file encryption.

Nonce and tag sizes are format constants: every envelope written by filecrypt
depends on them, so they are not configurable.

- KEY_SIZE:   32 bytes (AES-256)
- NONCE_SIZE: 12 bytes (96-bit GCM nonce, random per message)
- TAG_SIZE:   16 bytes (appended to the ciphertext by AESGCM)
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from filecrypt.core.exceptions import CipherInitError, DecryptionFailedError

from .keystore import KEY_SIZE
from .random import RandomSource, default_random_source

logger = logging.getLogger(__name__)

NONCE_SIZE = 12
TAG_SIZE = 16


class CipherEngine:
    """Authenticated encryption with a fresh random nonce per call and no associated data."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source or default_random_source()

    def _aead(self, key: bytes) -> AESGCM:
        # AESGCM also accepts 128/192-bit keys; only 256-bit keys are valid here.
        if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_SIZE:
            size = len(key) if isinstance(key, (bytes, bytearray)) else "non-bytes"
            raise CipherInitError(f"Failed to initialize AES-256-GCM cipher: key must be {KEY_SIZE} bytes, got {size}")
        return AESGCM(bytes(key))

    def encrypt(self, key: bytes, plaintext: bytes) -> Tuple[bytes, bytes]:
        """
        Encrypt `plaintext` under `key`.

        Returns (ciphertext, nonce) where ciphertext is len(plaintext) + TAG_SIZE bytes.
        """
        aead = self._aead(key)
        nonce = self.random_source.random_bytes(NONCE_SIZE)
        if len(nonce) != NONCE_SIZE:
            raise CipherInitError(f"random source returned {len(nonce)} bytes for a {NONCE_SIZE}-byte nonce")
        ciphertext = aead.encrypt(nonce, plaintext, None)
        logger.debug("encrypted %d bytes", len(plaintext))
        return ciphertext, nonce

    def decrypt(self, key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
        """
        Verify and decrypt `ciphertext`.

        Wrong key, wrong nonce, and corrupted or truncated data all raise the
        same DecryptionFailedError.
        """
        aead = self._aead(key)
        if len(nonce) != NONCE_SIZE or len(ciphertext) < TAG_SIZE:
            raise DecryptionFailedError()
        try:
            plaintext = aead.decrypt(bytes(nonce), bytes(ciphertext), None)
        except InvalidTag:
            raise DecryptionFailedError() from None
        logger.debug("decrypted %d bytes", len(plaintext))
        return plaintext
