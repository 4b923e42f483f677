"""Locale discovery and lookup of localized strings.

Each supported locale is a YAML file in the ``locales`` directory::

    name: Français           # native name, required
    keys:                     # friendly names of named keys, by VK name
      RMENU: Alt droite
    unicode:                  # character descriptions, by codepoint
      U00BD: FRACTION UN DEMI
"""

from pathlib import Path

from loguru import logger
import yaml

from composekey.core.keys import Key
from composekey.utils.constants import Constants

LOCALES_DIR = Path(__file__).parent / "locales"


class LocaleError(LookupError):
    """Raised when a locale cannot be applied."""


def _read_locale_file(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict) or not isinstance(data.get("name"), str):
        raise LocaleError(f"Locale file {path} has no 'name' entry")
    return data


class Localization:
    """Supported locales and the tables of the active one."""

    def __init__(self, locales_dir: str | Path | None = None):
        self.locales_dir = Path(locales_dir) if locales_dir else LOCALES_DIR
        self._supported = self._discover()
        self._active = ""
        self._key_names: dict[str, str] = {}
        self._unicode: dict[str, str] = {}

    def _discover(self) -> dict[str, str]:
        """Probe the locale directory for readable locale files."""
        supported = {Constants.DEFAULT_LANGUAGE: "English"}
        if not self.locales_dir.is_dir():
            logger.debug(f"No locale directory at {self.locales_dir}")
            return supported

        for path in sorted(self.locales_dir.glob("*.yml")):
            try:
                supported[path.stem] = _read_locale_file(path)["name"]
            except (OSError, yaml.YAMLError, LocaleError) as e:
                logger.debug(f"Skipping locale {path.name}: {e}")
        return supported

    def supported(self) -> dict[str, str]:
        """Map of locale identifier to native language name."""
        return dict(self._supported)

    def is_supported(self, language: str) -> bool:
        return language in self._supported

    @property
    def active(self) -> str:
        """Identifier of the applied locale, or "" when none was applied."""
        return self._active

    def apply(self, language: str) -> None:
        """Make ``language`` the active locale.

        An empty identifier clears the localized tables.

        Raises:
            LocaleError: If the locale is unknown or its file is invalid
            OSError: If the locale file cannot be read
            yaml.YAMLError: If the locale file is not valid YAML
        """
        if not language:
            self._active, self._key_names, self._unicode = "", {}, {}
            return
        if language not in self._supported:
            raise LocaleError(f"Unsupported language: {language}")

        path = self.locales_dir / f"{language}.yml"
        data = _read_locale_file(path) if path.exists() else {"name": language}
        self._key_names = {str(k): str(v) for k, v in (data.get("keys") or {}).items()}
        self._unicode = {str(k).upper(): str(v) for k, v in (data.get("unicode") or {}).items()}
        self._active = language
        logger.debug(f"Applied locale {language}")

    def unicode_description(self, codepoint: int) -> str | None:
        """Localized description of a character, if the active locale has one."""
        return self._unicode.get(f"U{codepoint:04X}") or None

    def key_name(self, key: Key) -> str:
        """Localized friendly name of a key, falling back to its default name."""
        if key.vk is not None and key.vk.name in self._key_names:
            return self._key_names[key.vk.name]
        return key.friendly_name
