"""filecrypt: encrypt and decrypt files with AES-256-GCM and a detached key file."""

__version__ = "0.1.0"
