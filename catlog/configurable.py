"""Per-instance configurable logger with an in-memory buffer."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from catlog.categories import Category
from catlog.destinations import FilePath, OpenMode, as_sink, is_file_target, write_file
from catlog.diagnostics import get_logger
from catlog.settings import LoggerSettings

log = get_logger()


class ConfigurableLogger:
    """Logger with per-category filtering, custom formatting and buffering.

    A line is ``header + separator + message + newline``. Buffered lines are
    stored without the newline, which is appended when the buffer is dumped.
    Header and separator changes never rewrite lines already buffered.

    Instances are not copyable and not thread-safe.
    """

    def __init__(self, buffer_min_capacity: int = 0, settings: LoggerSettings | None = None) -> None:
        self._enabled: Dict[Category, bool] = {}
        self._headers: Dict[Category, str] = {}
        self._separator = ""
        self._newline = ""
        self.apply_settings(settings or LoggerSettings())
        # Lists grow on demand; the hint is kept for callers that size batches.
        self.buffer_min_capacity = max(buffer_min_capacity, self.buffer_min_capacity)
        self._buffer: List[str] = []

    def __copy__(self) -> "ConfigurableLogger":
        raise TypeError("ConfigurableLogger instances cannot be copied")

    def __deepcopy__(self, memo: Dict[int, Any]) -> "ConfigurableLogger":
        raise TypeError("ConfigurableLogger instances cannot be copied")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise TypeError("ConfigurableLogger instances cannot be pickled")

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"<ConfigurableLogger buffered={len(self._buffer)}>"

    # Flags

    def set_enabled(self, category: Category, enabled: bool = True) -> None:
        self._enabled[Category(category)] = enabled

    def set_enabled_all(self, enabled: bool = True) -> None:
        for category in Category:
            self._enabled[category] = enabled

    def is_enabled(self, category: Category) -> bool:
        return self._enabled[Category(category)]

    # Format

    def set_header(self, category: Category, header: str) -> None:
        self._headers[Category(category)] = header

    def header(self, category: Category) -> str:
        return self._headers[Category(category)]

    def set_separator(self, separator: str) -> None:
        self._separator = separator

    def separator(self) -> str:
        return self._separator

    def set_newline(self, newline: str) -> None:
        self._newline = newline

    def newline(self) -> str:
        return self._newline

    def settings(self) -> LoggerSettings:
        """Return a snapshot of the current formatting and filtering state."""
        return LoggerSettings(
            enabled=dict(self._enabled),
            headers=dict(self._headers),
            separator=self._separator,
            newline=self._newline,
            buffer_min_capacity=self.buffer_min_capacity,
        )

    def apply_settings(self, settings: LoggerSettings) -> None:
        """Replace formatting and filtering state; the buffer is left as is."""
        for category in Category:
            self._enabled[category] = settings.enabled.get(category, True)
            self._headers[category] = settings.headers.get(category, category.default_header)
        self._separator = settings.separator
        self._newline = settings.newline
        self.buffer_min_capacity = settings.buffer_min_capacity

    # Log & dump

    @property
    def buffered(self) -> Tuple[str, ...]:
        """Buffered lines in insertion order, without newlines."""
        return tuple(self._buffer)

    def _format(self, category: Category, message: str) -> str:
        return self._headers[category] + self._separator + message

    def log(
        self,
        category: Category,
        message: str,
        destination: Any = None,
        mode: OpenMode | str = OpenMode.TRUNCATE,
    ) -> bool | None:
        """Buffer a message, or write it to a destination.

        Args:
            category: Log category.
            message: Log message.
            destination: None to buffer, a file path to write a file, or any
                sink accepted by ``as_sink``.
            mode: Open mode when ``destination`` is a file path.

        Returns:
            For file paths, False if the file could not be opened and True
            otherwise. None for buffering and sinks.
        """
        category = Category(category)
        if destination is None:
            if self._enabled[category]:
                self._buffer.append(self._format(category, message))
            return None
        if is_file_target(destination):
            return self.log_to_file(category, message, destination, mode)
        if self._enabled[category]:
            as_sink(destination).write(self._format(category, message) + self._newline)
        return None

    def log_to_file(
        self,
        category: Category,
        message: str,
        path: FilePath,
        mode: OpenMode | str = OpenMode.TRUNCATE,
    ) -> bool:
        """Write a single message to a file.

        A disabled category writes nothing, does not open the file, and
        still reports success.

        Returns:
            False if the file could not be opened, True otherwise.
        """
        category = Category(category)
        if not self._enabled[category]:
            return True
        return write_file(path, [self._format(category, message) + self._newline], mode)

    def dump(self, destination: Any, mode: OpenMode | str = OpenMode.TRUNCATE) -> bool | None:
        """Write every buffered line to a destination and clear the buffer.

        Args:
            destination: A file path or any sink accepted by ``as_sink``.
            mode: Open mode when ``destination`` is a file path.

        Returns:
            For file paths, the result of ``dump_to_file``. None for sinks.
        """
        if is_file_target(destination):
            return self.dump_to_file(destination, mode)
        sink = as_sink(destination)
        try:
            self._write_buffer(sink)
        finally:
            self._buffer.clear()
        return None

    def dump_to_file(self, path: FilePath, mode: OpenMode | str = OpenMode.TRUNCATE) -> bool:
        """Write every buffered line to a file and clear the buffer.

        The buffer is kept intact when the file cannot be opened, so the dump
        can be retried. Once the file is open the buffer is always cleared,
        even if a write fails part way.

        Returns:
            False if the file could not be opened, True otherwise.
        """
        lines = [line + self._newline for line in self._buffer]
        if not write_file(path, lines, mode):
            return False
        log.debug(f"dumped {len(lines)} buffered line(s) to {path}")
        self._buffer.clear()
        return True

    def _write_buffer(self, sink: Any) -> None:
        for line in self._buffer:
            sink.write(line + self._newline)
