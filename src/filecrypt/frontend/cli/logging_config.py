"""Logging setup for the filecrypt command line.

Diagnostics go to stderr through a single handler on the ``filecrypt``
package logger, leaving stdout for the command's own result lines. Calling
configure_logging again (e.g. several main() runs in one process) reuses that
handler and only changes its level and stream.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


class _CliHandler(logging.StreamHandler):
    pass


def configure_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    package_logger = logging.getLogger("filecrypt")
    package_logger.setLevel(level)

    handler = next((h for h in package_logger.handlers if isinstance(h, _CliHandler)), None)
    if handler is None:
        handler = _CliHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)
    # sys.stderr is looked up per call so a replaced stream is picked up
    handler.setStream(stream or sys.stderr)
    handler.setLevel(level)
    return package_logger
