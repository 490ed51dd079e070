"""Unit tests for the CLI logging setup."""

import io
import logging

import pytest

from filecrypt.frontend.cli.logging_config import configure_logging


@pytest.fixture(autouse=True)
def clean_package_logger():
    logger = logging.getLogger("filecrypt")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_logs_to_given_stream_with_format() -> None:
    stream = io.StringIO()
    configure_logging(logging.INFO, stream=stream)

    logging.getLogger("filecrypt.core.operations").info("encrypted %s", "a.txt")

    line = stream.getvalue()
    assert "INFO filecrypt.core.operations: encrypted a.txt" in line
    assert line.startswith("[")


def test_level_filters_messages() -> None:
    stream = io.StringIO()
    configure_logging(logging.WARNING, stream=stream)

    logging.getLogger("filecrypt.security.keystore").info("saved key file k.key")

    assert stream.getvalue() == ""


def test_repeated_calls_reuse_one_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure_logging(logging.WARNING, stream=first)
    logger = configure_logging(logging.DEBUG, stream=second)

    logging.getLogger("filecrypt.core.file_io").debug("read 3 bytes")

    ours = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
    assert first.getvalue() == ""
    assert "read 3 bytes" in second.getvalue()
