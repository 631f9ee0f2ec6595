"""Log categories."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """The four fixed log categories."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3

    @property
    def default_header(self) -> str:
        return f"[{self.name}]"


def category_from_name(value: Category | str) -> Category:
    """Resolve a category from an enum member or a case-insensitive name.

    Args:
        value: Category member or name such as ``"info"``.

    Returns:
        The matching Category.

    Raises:
        ValueError: If the name does not match any category.
    """
    if isinstance(value, Category):
        return value
    key = str(value).strip().upper()
    try:
        return Category[key]
    except KeyError:
        raise ValueError(f"Unknown log category: {value!r}") from None
