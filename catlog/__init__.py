"""Categorized message logging with buffered and shared-state facades."""

from catlog.categories import Category, category_from_name
from catlog.configurable import ConfigurableLogger
from catlog.destinations import Destination, OpenMode, as_sink
from catlog.settings import LoggerSettings, settings_from_dict
from catlog.shared import SharedState, SharedStateLogger, shared_state

__all__ = [
    "Category",
    "ConfigurableLogger",
    "Destination",
    "LoggerSettings",
    "OpenMode",
    "SharedState",
    "SharedStateLogger",
    "as_sink",
    "category_from_name",
    "settings_from_dict",
    "shared_state",
]
