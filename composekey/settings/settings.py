"""The settings store: user preferences plus the compiled sequence tree.

A ``Settings`` object replaces process-wide state. Create one, ``load()``
the preferences, ``load_sequences()`` the definition files, then hand it
to whatever needs lookups. Lookups may run on any thread: the tree is
rebuilt aside and published with a single assignment, and reloaded
preferences are published together under a lock. Use ``snapshot()`` for a
consistent view of several preferences.
"""

import threading
from typing import Iterable

from loguru import logger
import yaml

from composekey.core.keys import VK, Key, is_named_key
from composekey.core.sequences import SequenceDescription, SequenceTree
from composekey.data.compose_file import load_compose_file
from composekey.i18n import LocaleError, Localization
from composekey.settings.entries import SettingsEntry
from composekey.settings.paths import AppPaths, default_paths
from composekey.settings.store import IniStore
from composekey.settings.watcher import ConfigWatcher
from composekey.utils.constants import Constants

DEFAULT_COMPOSE_KEY = Key(VK.RMENU)

VALID_COMPOSE_KEYS: tuple[Key, ...] = (
    Key(VK.LMENU),
    Key(VK.RMENU),
    Key(VK.LCONTROL),
    Key(VK.RCONTROL),
    Key(VK.LWIN),
    Key(VK.RWIN),
    Key(VK.CAPITAL),
    Key(VK.NUMLOCK),
    Key(VK.PAUSE),
    Key(VK.APPS),
    Key(VK.ESCAPE),
    Key(VK.SCROLL),
    Key("`"),
)

# Reset delays offered to the user, in milliseconds; -1 disables the reset
VALID_DELAYS: dict[int, str] = {
    500: "500 milliseconds",
    1000: "1 second",
    2000: "2 seconds",
    3000: "3 seconds",
    5000: "5 seconds",
    10000: "10 seconds",
    -1: "None",
}


class Settings:
    """User settings and compose sequences.

    Args:
        paths: Where to find the settings and definition files
        localization: Locale provider; a default one is created when omitted
        reload_delay: Seconds between the first settings file change and the reload
    """

    def __init__(
        self,
        paths: AppPaths | None = None,
        localization: Localization | None = None,
        reload_delay: float = Constants.RELOAD_DELAY,
    ):
        self.paths = paths or default_paths()
        self.localization = localization or Localization()
        self.store = IniStore(self.paths.config_file)
        self.reload_delay = reload_delay
        self._lock = threading.RLock()
        self._tree = SequenceTree()
        self._watcher: ConfigWatcher | None = None

        self.compose_key = SettingsEntry(
            "compose_key",
            DEFAULT_COMPOSE_KEY,
            parse=Key.from_string,
            accept=lambda key: key in VALID_COMPOSE_KEYS,
        )
        self.reset_delay = SettingsEntry("reset_delay", -1)
        self.language = SettingsEntry("language", "", accept=self.localization.is_supported)
        self.case_insensitive = SettingsEntry("case_insensitive", False)
        self.discard_on_invalid = SettingsEntry("discard_on_invalid", False)
        self.beep_on_invalid = SettingsEntry("beep_on_invalid", False)
        self.keep_original_key = SettingsEntry("keep_original_key", False)
        self.insert_zwsp = SettingsEntry("insert_zwsp", True)
        self.emulate_capslock = SettingsEntry("emulate_capslock", False)
        self.shift_disables_capslock = SettingsEntry("shift_disables_capslock", False)

    @property
    def entries(self) -> tuple[SettingsEntry, ...]:
        return (
            self.compose_key,
            self.reset_delay,
            self.language,
            self.case_insensitive,
            self.discard_on_invalid,
            self.beep_on_invalid,
            self.keep_original_key,
            self.insert_zwsp,
            self.emulate_capslock,
            self.shift_disables_capslock,
        )

    # Loading and saving

    def load(self) -> None:
        """Read every setting from the settings file and apply the language.

        The file is read once and every entry is parsed before any of them
        changes; the new values are then published together under the lock.
        """
        stored = self.store.load_entries()
        values = {entry.key: entry.parse(stored.get(entry.key, "")) for entry in self.entries}
        with self._lock:
            for entry in self.entries:
                entry.value = values[entry.key]
            self._apply_language()
        logger.info(f"Loaded settings from {self.store.path}")

    def snapshot(self) -> dict[str, object]:
        """Current value of every entry, taken from one consistent state."""
        with self._lock:
            return {entry.key: entry.value for entry in self.entries}

    def _apply_language(self) -> None:
        language = self.language.value
        try:
            self.localization.apply(language)
        except (LocaleError, OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not activate language {language!r}: {e}")

    def save(self) -> None:
        """Write every setting back to the settings file."""
        with self._lock:
            values = {entry.key: entry.serialize() for entry in self.entries}
            self.store.save_entries(values)
        logger.info(f"Saved settings to {self.store.path}")

    def reload(self) -> None:
        """Reload the settings; definition files are left alone."""
        logger.info("Settings file changed, reloading")
        self.load()

    def load_sequences(self) -> None:
        """Rebuild the sequence tree from every definition file.

        Later files override earlier ones for identical sequences. Missing
        files are skipped.
        """
        tree = SequenceTree()
        for path in self.paths.rule_files():
            load_compose_file(path, tree, self.localization.unicode_description)
        self._tree = tree
        logger.info(f"Loaded {len(tree)} compose sequences")

    # Watching

    def start_watch(self) -> None:
        """Reload the settings whenever the settings file changes."""
        with self._lock:
            if self._watcher is not None:
                return
            watcher = ConfigWatcher(self.paths.config_file, self.reload, self.reload_delay)
            watcher.start()
            self._watcher = watcher

    def stop_watch(self) -> None:
        with self._lock:
            watcher, self._watcher = self._watcher, None
        if watcher is not None:
            watcher.stop()

    @property
    def is_watching(self) -> bool:
        return self._watcher is not None

    def close(self) -> None:
        self.stop_watch()

    def __enter__(self) -> "Settings":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Lookups

    @property
    def sequences(self) -> SequenceTree:
        return self._tree

    def is_compose_trigger(self, key: Key) -> bool:
        with self._lock:
            return key == self.compose_key.value

    def is_usable(self, key: Key) -> bool:
        """Printable keys and keys with a keysym name can appear in sequences."""
        return key.is_printable() or is_named_key(key)

    def is_valid_prefix(self, sequence: Iterable[Key]) -> bool:
        return self._tree.is_valid_prefix(sequence)

    def is_valid_sequence(self, sequence: Iterable[Key]) -> bool:
        return self._tree.is_valid_sequence(sequence)

    def get_result(self, sequence: Iterable[Key]) -> str:
        return self._tree.get_result(sequence)

    def list_entries(self) -> list[SequenceDescription]:
        return self._tree.enumerate()

    def entry_count(self) -> int:
        return len(self._tree)

    # Presentation helpers

    @property
    def valid_compose_keys(self) -> tuple[Key, ...]:
        return VALID_COMPOSE_KEYS

    def compose_key_name(self) -> str:
        """Localized name of the current compose key."""
        with self._lock:
            compose_key = self.compose_key.value
        return self.localization.key_name(compose_key)

    def valid_languages(self) -> dict[str, str]:
        return self.localization.supported()
