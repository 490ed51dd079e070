"""Unit tests for the whole-file read/write helpers."""

import os
import stat
import sys
from pathlib import Path

import pytest
from unittest.mock import patch

from filecrypt.core import file_io
from filecrypt.core.exceptions import FileAccessError


def test_read_bytes(tmp_path: Path) -> None:
    p = tmp_path / "data.bin"
    p.write_bytes(b"\x00\x01payload")
    assert file_io.read_bytes(p) == b"\x00\x01payload"


def test_read_bytes_missing_names_step_and_path(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"
    with pytest.raises(FileAccessError) as excinfo:
        file_io.read_bytes(missing, description="input file")

    err = excinfo.value
    assert str(err).startswith(f"Failed to read input file: {missing}")
    assert err.operation == "read input file"
    assert err.path == missing
    assert isinstance(err.__cause__, OSError)


def test_read_bytes_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        file_io.read_bytes(tmp_path)


def test_ensure_parent_dir_creates_tree(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c" / "file.bin"
    file_io.ensure_parent_dir(target)
    assert target.parent.is_dir()
    assert not target.exists()


def test_write_bytes_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "x" / "y" / "out.bin"
    file_io.write_bytes(target, b"hello")
    assert target.read_bytes() == b"hello"


def test_write_bytes_without_parents_fails(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "out.bin"
    with pytest.raises(FileAccessError, match="Failed to write output file"):
        file_io.write_bytes(target, b"hello", create_parents=False, description="output file")


def test_write_bytes_atomic_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "out.enc"
    target.write_bytes(b"previous")

    file_io.write_bytes_atomic(target, b"new content")

    assert target.read_bytes() == b"new content"
    assert [p.name for p in tmp_path.iterdir()] == ["out.enc"]


def test_write_bytes_atomic_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "dir" / "out.enc"
    file_io.write_bytes_atomic(target, b"data")
    assert target.read_bytes() == b"data"


def test_write_bytes_atomic_failure_keeps_old_file(tmp_path: Path) -> None:
    """A failed rename leaves the previous file intact and no temp file behind."""
    target = tmp_path / "out.enc"
    target.write_bytes(b"previous")

    with patch("filecrypt.core.file_io.os.replace", side_effect=OSError(28, "No space left on device")):
        with pytest.raises(FileAccessError, match="Failed to write output file"):
            file_io.write_bytes_atomic(target, b"new content", description="output file")

    assert target.read_bytes() == b"previous"
    assert [p.name for p in tmp_path.iterdir()] == ["out.enc"]


def test_write_bytes_atomic_failure_leaves_no_partial_file(tmp_path: Path) -> None:
    target = tmp_path / "fresh.enc"

    with patch("filecrypt.core.file_io.os.fsync", side_effect=OSError(5, "Input/output error")):
        with pytest.raises(FileAccessError):
            file_io.write_bytes_atomic(target, b"data")

    assert list(tmp_path.iterdir()) == []


posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions only")


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


@posix_only
def test_write_bytes_atomic_new_file_uses_umask_mode(tmp_path: Path, umask_022) -> None:
    atomic = tmp_path / "atomic.enc"
    plain = tmp_path / "plain.txt"

    file_io.write_bytes_atomic(atomic, b"data")
    file_io.write_bytes(plain, b"data")

    assert stat.S_IMODE(atomic.stat().st_mode) == 0o644
    assert stat.S_IMODE(atomic.stat().st_mode) == stat.S_IMODE(plain.stat().st_mode)


@posix_only
def test_write_bytes_atomic_keeps_existing_mode(tmp_path: Path, umask_022) -> None:
    target = tmp_path / "shared.enc"
    target.write_bytes(b"previous")
    os.chmod(target, 0o664)

    file_io.write_bytes_atomic(target, b"new content")

    assert target.read_bytes() == b"new content"
    assert stat.S_IMODE(target.stat().st_mode) == 0o664


@posix_only
def test_write_bytes_with_mode_creates_restricted_file(tmp_path: Path, umask_022) -> None:
    target = tmp_path / "secret.bin"
    file_io.write_bytes(target, b"data", mode=0o600)
    assert target.read_bytes() == b"data"
    assert stat.S_IMODE(target.stat().st_mode) == 0o600
