"""Logger settings dataclass and normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from catlog.categories import Category, category_from_name

DEFAULT_SEPARATOR = " - "
DEFAULT_NEWLINE = "\n"


def _default_enabled() -> Dict[Category, bool]:
    return {category: True for category in Category}


def _default_headers() -> Dict[Category, str]:
    return {category: category.default_header for category in Category}


@dataclass
class LoggerSettings:
    """Formatting and filtering state of a ConfigurableLogger."""

    enabled: Dict[Category, bool] = field(default_factory=_default_enabled)
    headers: Dict[Category, str] = field(default_factory=_default_headers)
    separator: str = DEFAULT_SEPARATOR
    newline: str = DEFAULT_NEWLINE
    buffer_min_capacity: int = 0


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


def _as_int(value: Any, default: int) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return default


def settings_from_dict(raw: Dict[str, Any]) -> LoggerSettings:
    """Build LoggerSettings from a plain dictionary.

    Category keys in ``enabled`` and ``headers`` may be Category members or
    names. Missing categories keep their defaults, so every category is
    always present in the result.

    Args:
        raw: Mapping with any of ``enabled``, ``headers``, ``separator``,
            ``newline`` and ``buffer_min_capacity``.

    Returns:
        Normalized settings.

    Raises:
        ValueError: If a category name is unknown.
    """
    settings = LoggerSettings()
    enabled_raw = raw.get("enabled")
    if isinstance(enabled_raw, bool):
        settings.enabled = {category: enabled_raw for category in Category}
    elif isinstance(enabled_raw, dict):
        for key, value in enabled_raw.items():
            category = category_from_name(key)
            settings.enabled[category] = _as_bool(value, settings.enabled[category])
    headers_raw = raw.get("headers") or {}
    for key, value in headers_raw.items():
        category = category_from_name(key)
        settings.headers[category] = _as_str(value, settings.headers[category])
    settings.separator = _as_str(raw.get("separator"), DEFAULT_SEPARATOR)
    settings.newline = _as_str(raw.get("newline"), DEFAULT_NEWLINE)
    settings.buffer_min_capacity = _as_int(raw.get("buffer_min_capacity", 0), 0)
    return settings
