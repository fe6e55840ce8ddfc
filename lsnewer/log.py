"""Logging setup shared by the console entrypoints."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(prog)s: %(message)s"

_INSTALLED_HANDLER: logging.Handler | None = None


class _ProgFilter(logging.Filter):
    """Stamp records with the running program name for ``LOG_FORMAT``."""

    def __init__(self, prog: str) -> None:
        super().__init__()
        self.prog = prog

    def filter(self, record: logging.LogRecord) -> bool:
        record.prog = self.prog
        return True


def configure_logging(prog: str, verbose: bool = False) -> logging.Handler:
    """Attach one stderr handler to the ``lsnewer`` logger.

    Repeated calls replace the previously installed handler, so tests can
    invoke the CLI several times in one process.
    """
    global _INSTALLED_HANDLER

    package_logger = logging.getLogger("lsnewer")
    if _INSTALLED_HANDLER is not None:
        package_logger.removeHandler(_INSTALLED_HANDLER)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(_ProgFilter(prog))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    _INSTALLED_HANDLER = handler
    return handler


__all__ = ["LOG_FORMAT", "configure_logging"]
