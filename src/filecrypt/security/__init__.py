"""Security helpers: key files and the AES-256-GCM engine for filecrypt.

This package provides:
- KeyStore: generate, save and load raw 32-byte keys
- CipherEngine: AES-256-GCM encryption with a fresh random nonce per call
- RandomSource: the injectable secure-random provider both of them use
"""

from .random import RandomSource, SystemRandomSource, default_random_source
from .keystore import KEY_SIZE, KeyStore
from .cipher import NONCE_SIZE, TAG_SIZE, CipherEngine

__all__ = [
    "RandomSource",
    "SystemRandomSource",
    "default_random_source",
    "KEY_SIZE",
    "KeyStore",
    "NONCE_SIZE",
    "TAG_SIZE",
    "CipherEngine",
]
