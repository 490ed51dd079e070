"""Runtime settings for filecrypt, resolved from environment variables.

- ``FILECRYPT_DEFAULT_KEY_PATH``: where a generated key is saved when
  ``encrypt`` runs without ``--key`` (default ``keys/default.key``).
- ``FILECRYPT_LOG_LEVEL``: logging level name (default ``WARNING``).

Command-line flags take precedence over these values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_KEY_PATH = Path("keys") / "default.key"
ENCRYPTED_SUFFIX = ".enc"
DECRYPTED_SUFFIX = "_decrypted"
DECRYPTED_FALLBACK_NAME = "decrypted_output"


@dataclass(frozen=True)
class Settings:
    default_key_path: Path = DEFAULT_KEY_PATH
    log_level: int = logging.WARNING


def _parse_level(name: Optional[str]) -> int:
    if not name:
        return logging.WARNING
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    key_path = env.get("FILECRYPT_DEFAULT_KEY_PATH")
    return Settings(
        default_key_path=Path(key_path).expanduser() if key_path else DEFAULT_KEY_PATH,
        log_level=_parse_level(env.get("FILECRYPT_LOG_LEVEL")),
    )
