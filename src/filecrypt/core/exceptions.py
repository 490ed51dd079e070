"""
Exceptions for filecrypt
Everything raised on purpose derives from FilecryptError so the CLI has one thing to catch
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class FilecryptError(Exception):
    # general container for errors
    pass


class FileAccessError(FilecryptError):
    # raised when a filesystem read/write/mkdir fails

    def __init__(self, operation: str, path: Path | str, reason: Optional[str] = None):
        self.operation = operation
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to {operation}: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidKeySizeError(FilecryptError):
    # raised when key material is not exactly KEY_SIZE bytes

    def __init__(self, expected: int, actual: int, path: Path | str | None = None):
        self.expected = expected
        self.actual = actual
        self.path = Path(path) if path is not None else None
        message = f"Invalid key size: expected {expected} bytes, found {actual} bytes"
        if path is not None:
            message = f"{message} in {path}"
        super().__init__(message)


class CipherInitError(FilecryptError):
    # raised when a malformed key reaches the cipher layer
    pass


class DecryptionFailedError(FilecryptError):
    # raised on any authentication failure; the cause is never disclosed

    def __init__(self):
        super().__init__("Decryption failed: wrong key or corrupted data")


class MalformedEnvelopeError(FilecryptError):
    # raised when an encrypted input is too short to hold a nonce

    def __init__(self, actual: int, minimum: int, path: Path | str | None = None):
        self.actual = actual
        self.minimum = minimum
        self.path = Path(path) if path is not None else None
        message = f"Invalid encrypted file: {actual} bytes is shorter than the {minimum}-byte nonce"
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class MissingKeyPathError(FilecryptError):
    # raised when decrypt is requested without a key file

    def __init__(self):
        super().__init__("Key file must be specified with --key")
