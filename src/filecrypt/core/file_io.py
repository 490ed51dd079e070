""" Whole-file read/write helpers used by the key store and file operations. """

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError

logger = logging.getLogger(__name__)


def ensure_parent_dir(path: Path | str) -> None:
    # Create the directory that will hold `path`, including missing ancestors.
    parent = Path(path).expanduser().parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileAccessError("create directory", parent, e.strerror) from e


def _default_file_mode() -> int:
    # Mode a plain open(path, "wb") would give a new file.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def read_bytes(path: Path | str, description: str = "file") -> bytes:
    """Return the full contents of `path`; `description` names it in error messages."""
    p = Path(path).expanduser()
    try:
        data = p.read_bytes()
    except OSError as e:
        raise FileAccessError(f"read {description}", path, e.strerror) from e
    logger.debug("read %d bytes from %s", len(data), p)
    return data


def write_bytes(
    path: Path | str,
    data: bytes,
    create_parents: bool = True,
    description: str = "file",
    mode: Optional[int] = None,
) -> None:
    """
    Write `data` to `path`, replacing whatever was there.

    With `mode` the file is created with those permission bits, and an existing
    file is switched to them before any byte is written.
    """
    p = Path(path).expanduser()
    if create_parents:
        ensure_parent_dir(p)
    if mode is None:
        try:
            p.write_bytes(data)
        except OSError as e:
            raise FileAccessError(f"write {description}", path, e.strerror) from e
    else:
        try:
            fd = os.open(p, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        except OSError as e:
            raise FileAccessError(f"write {description}", path, e.strerror) from e
        try:
            with os.fdopen(fd, "wb") as f:
                if hasattr(os, "fchmod"):
                    os.fchmod(f.fileno(), mode)
                f.write(data)
        except OSError as e:
            raise FileAccessError(f"write {description}", path, e.strerror) from e
    logger.debug("wrote %d bytes to %s", len(data), p)


def write_bytes_atomic(path: Path | str, data: bytes, description: str = "file") -> None:
    """
    Write `data` to `path` so readers see either the old file or the complete new one.

    The bytes go to a temporary file in the destination directory which is then
    renamed over `path` with os.replace. The result keeps the mode of the file
    it replaces, or gets the usual umask-derived mode when `path` is new. The
    temporary file is removed if anything fails before the rename.
    """
    p = Path(path).expanduser()
    ensure_parent_dir(p)

    try:
        target_mode = stat.S_IMODE(p.stat().st_mode)
    except FileNotFoundError:
        target_mode = _default_file_mode()
    except OSError as e:
        raise FileAccessError(f"write {description}", path, e.strerror) from e

    try:
        tmpf = tempfile.NamedTemporaryFile(dir=p.parent, prefix=f".{p.name}.", suffix=".tmp", delete=False)
    except OSError as e:
        raise FileAccessError(f"write {description}", path, e.strerror) from e

    tmp_path = Path(tmpf.name)
    try:
        with tmpf:
            tmpf.write(data)
            tmpf.flush()
            os.fsync(tmpf.fileno())
        # NamedTemporaryFile creates 0600 files
        os.chmod(tmp_path, target_mode)
        os.replace(tmp_path, p)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise FileAccessError(f"write {description}", path, e.strerror) from e
    logger.debug("atomically wrote %d bytes to %s", len(data), p)
