"""
On-disk layout of an encrypted file.

    offset 0..12   : nonce
    offset 12..end : AES-GCM ciphertext with the 16-byte tag appended

There is no magic, version byte or length prefix; the format is purely positional.
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from ..security.cipher import NONCE_SIZE, TAG_SIZE
from .exceptions import MalformedEnvelopeError


def envelope_size(plaintext_len: int) -> int:
    return NONCE_SIZE + plaintext_len + TAG_SIZE


def pack(nonce: bytes, ciphertext: bytes) -> bytes:
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
    return bytes(nonce) + bytes(ciphertext)


def unpack(blob: bytes, path: Path | str | None = None) -> Tuple[bytes, bytes]:
    """Split an envelope into (nonce, ciphertext)."""
    if len(blob) < NONCE_SIZE:
        raise MalformedEnvelopeError(len(blob), NONCE_SIZE, path)
    return bytes(blob[:NONCE_SIZE]), bytes(blob[NONCE_SIZE:])
