"""Settings store, backing file and hot reload."""

from composekey.settings.entries import SettingsEntry
from composekey.settings.paths import AppPaths, default_paths
from composekey.settings.settings import (
    DEFAULT_COMPOSE_KEY,
    VALID_COMPOSE_KEYS,
    VALID_DELAYS,
    Settings,
)
from composekey.settings.store import IniStore
from composekey.settings.watcher import ConfigWatcher, Debouncer

__all__ = [
    "AppPaths",
    "ConfigWatcher",
    "DEFAULT_COMPOSE_KEY",
    "Debouncer",
    "IniStore",
    "Settings",
    "SettingsEntry",
    "VALID_COMPOSE_KEYS",
    "VALID_DELAYS",
    "default_paths",
]
