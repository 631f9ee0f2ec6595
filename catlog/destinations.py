"""Destination helpers: text sinks and file targets."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, Protocol, TextIO, Union, runtime_checkable

from catlog.diagnostics import get_logger

log = get_logger()

FilePath = Union[str, "os.PathLike[str]"]


@runtime_checkable
class Destination(Protocol):
    """Anything that accepts appended text."""

    def write(self, text: str) -> Any:
        """Append ``text`` to the destination."""


class OpenMode(str, Enum):
    """How a file destination is opened."""

    TRUNCATE = "w"
    APPEND = "a"


class _AppendSink:
    def __init__(self, target: Any) -> None:
        self._target = target

    def write(self, text: str) -> None:
        self._target.append(text)


class _CallableSink:
    def __init__(self, target: Callable[[str], Any]) -> None:
        self._target = target

    def write(self, text: str) -> None:
        self._target(text)


def is_file_target(target: Any) -> bool:
    """Return True when ``target`` names a file rather than a sink."""
    return isinstance(target, (str, os.PathLike))


def as_sink(target: Any) -> Destination:
    """Adapt ``target`` to the Destination protocol.

    Objects with ``write`` are returned unchanged, objects with ``append``
    (such as a list) collect each chunk, and plain callables are called
    with each chunk.

    Raises:
        TypeError: If ``target`` offers none of these.
    """
    if hasattr(target, "write"):
        return target
    if hasattr(target, "append"):
        return _AppendSink(target)
    if callable(target):
        return _CallableSink(target)
    raise TypeError(f"Not a log destination: {type(target).__name__}")


def open_text(path: FilePath, mode: OpenMode | str = OpenMode.TRUNCATE) -> TextIO | None:
    """Open a file destination for writing.

    Newline translation is disabled so configured newline sequences reach
    the file verbatim. Undecodable bytes carried as surrogates (for example
    filenames decoded with ``surrogateescape``) are written back as bytes.

    Args:
        path: File path.
        mode: Truncate or append.

    Returns:
        An open text handle, or None if the file could not be opened.
    """
    file_mode = OpenMode(mode).value
    try:
        return Path(path).open(file_mode, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        log.debug(f"could not open {path} ({file_mode}): {exc}")
        return None


def write_file(path: FilePath, chunks: Iterable[str], mode: OpenMode | str = OpenMode.TRUNCATE) -> bool:
    """Open a file, write every chunk, and close it.

    Only the open can fail from the caller's point of view. Errors while
    writing or closing stop the write and are traced, not raised.

    Args:
        path: File path.
        chunks: Text to write, in order.
        mode: Truncate or append.

    Returns:
        False if the file could not be opened, True otherwise.
    """
    handle = open_text(path, mode)
    if handle is None:
        return False
    try:
        with handle:
            for chunk in chunks:
                handle.write(chunk)
    except (OSError, UnicodeError) as exc:
        log.debug(f"write to {path} failed: {exc}")
    return True
