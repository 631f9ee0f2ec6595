"""Debug traces for catlog's own file handling."""

from __future__ import annotations

import sys
from typing import TextIO


class DiagnosticLogger:
    """Off-by-default trace of open and write failures.

    Callers only ever see those failures as a ``False`` or swallowed result;
    this trace goes to ``sys.stderr`` (or a set stream) and never to a
    destination handed to a catlog logger.
    """

    def __init__(self, enabled: bool = False, stream: TextIO | None = None) -> None:
        self._enabled = enabled
        self._stream = stream

    def set_enabled(self, enabled: bool = True) -> None:
        self._enabled = enabled

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    def debug(self, message: str) -> None:
        if self._enabled:
            print(f"catlog debug: {message}", file=self._stream or sys.stderr)


_LOGGER = DiagnosticLogger()


def get_logger() -> DiagnosticLogger:
    """Return the shared diagnostics logger."""
    return _LOGGER
