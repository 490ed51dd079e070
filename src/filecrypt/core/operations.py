"""
File-level encrypt/decrypt pipelines.

Both operations are single linear passes with no retries: load or generate the
key, read the input, run the cipher, write the result. Each call builds its own
KeyStore/CipherEngine unless one is passed in, so no key outlives the call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import DECRYPTED_FALLBACK_NAME, DECRYPTED_SUFFIX, DEFAULT_KEY_PATH, ENCRYPTED_SUFFIX
from ..security.cipher import CipherEngine
from ..security.keystore import KeyStore
from . import envelope
from .exceptions import MissingKeyPathError
from .file_io import read_bytes, write_bytes, write_bytes_atomic

logger = logging.getLogger(__name__)


@dataclass
class EncryptResult:
    """Outcome of encrypt_file."""

    output_path: Path
    # set only when no key file was given and a new key was generated
    generated_key_path: Optional[Path] = None


def default_encrypted_path(input_path: Path | str) -> Path:
    return Path(f"{input_path}{ENCRYPTED_SUFFIX}")


def default_decrypted_path(input_path: Path | str) -> Path:
    # Base name only: the result lands in the working directory, not next to the input.
    stem = Path(input_path).stem
    if not stem or stem in (".", ".."):
        return Path(DECRYPTED_FALLBACK_NAME)
    return Path(f"{stem}{DECRYPTED_SUFFIX}")


def encrypt_file(
    input_path: Path | str,
    output_path: Optional[Path | str] = None,
    key_path: Optional[Path | str] = None,
    default_key_path: Path | str = DEFAULT_KEY_PATH,
    key_store: Optional[KeyStore] = None,
    cipher: Optional[CipherEngine] = None,
) -> EncryptResult:
    """
    Encrypt `input_path` into a ``nonce || ciphertext`` envelope.

    With `key_path` the key is loaded from that file. Without it a new key is
    generated, used for this encryption, and saved to `default_key_path` once
    encryption has succeeded; the saved location is reported in the result so
    the key is never lost.

    The envelope is written atomically to `output_path`, or to
    ``<input_path>.enc`` when omitted.
    """
    key_store = key_store or KeyStore()
    cipher = cipher or CipherEngine()

    generate = key_path is None
    key = key_store.generate() if generate else key_store.load(key_path)

    plaintext = read_bytes(input_path, description="input file")
    ciphertext, nonce = cipher.encrypt(key, plaintext)

    # persist a generated key only after encryption has succeeded
    generated_key_path: Optional[Path] = None
    if generate:
        generated_key_path = key_store.save(key, default_key_path)
        logger.info("generated new key and saved it to %s", generated_key_path)
    del key

    out = Path(output_path) if output_path is not None else default_encrypted_path(input_path)
    write_bytes_atomic(out, envelope.pack(nonce, ciphertext), description="output file")
    logger.info("encrypted %s -> %s (%d bytes)", input_path, out, envelope.envelope_size(len(plaintext)))
    return EncryptResult(output_path=out, generated_key_path=generated_key_path)


def decrypt_file(
    input_path: Path | str,
    output_path: Optional[Path | str] = None,
    key_path: Optional[Path | str] = None,
    key_store: Optional[KeyStore] = None,
    cipher: Optional[CipherEngine] = None,
) -> Path:
    """
    Decrypt an envelope produced by encrypt_file.

    `key_path` is required; there is no default key for decryption. The
    plaintext is written to `output_path`, or to ``<input stem>_decrypted`` in
    the working directory when omitted. Returns the path written.
    """
    if key_path is None or Path(key_path) == Path(""):
        raise MissingKeyPathError()

    key_store = key_store or KeyStore()
    cipher = cipher or CipherEngine()

    key = key_store.load(key_path)
    blob = read_bytes(input_path, description="input file")
    nonce, ciphertext = envelope.unpack(blob, input_path)
    plaintext = cipher.decrypt(key, nonce, ciphertext)
    del key

    out = Path(output_path) if output_path is not None else default_decrypted_path(input_path)
    write_bytes(out, plaintext, description="output file")
    logger.info("decrypted %s -> %s (%d bytes)", input_path, out, len(plaintext))
    return out
