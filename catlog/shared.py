"""Process-wide logger without instances or buffering.

``SharedStateLogger`` formats lines as ``"[CATEGORY] - " + message + newline``.
Only the four enable flags and the newline sequence are configurable, and
they live in a single module-level ``SharedState`` for the life of the
process. FATAL is written as ``"[FATAL] - "`` on every path, streams included.
Nothing here is synchronized: mutating the shared state from
several threads while others log is a data race.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from catlog.categories import Category
from catlog.destinations import FilePath, OpenMode, as_sink, is_file_target, write_file

_PREFIXES = {
    Category.INFO: "[INFO] - ",
    Category.WARNING: "[WARNING] - ",
    Category.ERROR: "[ERROR] - ",
    Category.FATAL: "[FATAL] - ",
}

_FLAG_FIELDS = {
    Category.INFO: "info_enabled",
    Category.WARNING: "warning_enabled",
    Category.ERROR: "error_enabled",
    Category.FATAL: "fatal_enabled",
}


@dataclass
class SharedState:
    """Shared flags and newline; initial values are all enabled and ``"\\n"``."""

    info_enabled: bool = True
    warning_enabled: bool = True
    error_enabled: bool = True
    fatal_enabled: bool = True
    newline: str = "\n"


_STATE = SharedState()


def shared_state() -> SharedState:
    """Return the process-wide state used by SharedStateLogger."""
    return _STATE


class SharedStateLogger:
    """Static logger backed by process-wide state. Not instantiable."""

    def __new__(cls, *args: Any, **kwargs: Any) -> "SharedStateLogger":
        raise TypeError("SharedStateLogger is not instantiable")

    @staticmethod
    def set_enabled(category: Category, enabled: bool = True) -> None:
        setattr(_STATE, _FLAG_FIELDS[Category(category)], enabled)

    @staticmethod
    def set_enabled_all(enabled: bool = True) -> None:
        for name in _FLAG_FIELDS.values():
            setattr(_STATE, name, enabled)

    @staticmethod
    def is_enabled(category: Category) -> bool:
        return getattr(_STATE, _FLAG_FIELDS[Category(category)])

    @staticmethod
    def set_newline(newline: str) -> None:
        _STATE.newline = newline

    @staticmethod
    def newline() -> str:
        return _STATE.newline

    @staticmethod
    def reset() -> None:
        """Restore the initial shared state."""
        initial = SharedState()
        for name in _FLAG_FIELDS.values():
            setattr(_STATE, name, getattr(initial, name))
        _STATE.newline = initial.newline

    @staticmethod
    def _format(category: Category, message: str) -> str:
        return _PREFIXES[Category(category)] + message + _STATE.newline

    @staticmethod
    def log(
        category: Category,
        message: str,
        destination: Any,
        mode: OpenMode | str = OpenMode.TRUNCATE,
    ) -> bool | None:
        """Write a message to a sink or, for a file path, to a file.

        Returns:
            For file paths, False if the file could not be opened and True
            otherwise. None for sinks.
        """
        if is_file_target(destination):
            return SharedStateLogger.log_to_file(category, message, destination, mode)
        if SharedStateLogger.is_enabled(category):
            as_sink(destination).write(SharedStateLogger._format(category, message))
        return None

    @staticmethod
    def log_to_file(
        category: Category,
        message: str,
        path: FilePath,
        mode: OpenMode | str = OpenMode.TRUNCATE,
    ) -> bool:
        """Write a single message to a file.

        Returns:
            False if the file could not be opened, True otherwise, including
            when the category is disabled and nothing is written.
        """
        if not SharedStateLogger.is_enabled(category):
            return True
        return write_file(path, [SharedStateLogger._format(category, message)], mode)
