"""INI-file backing store for settings entries."""

from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path
from typing import Mapping

from loguru import logger

from composekey.utils.constants import Constants
from composekey.utils.helpers import write_file_safely


def _new_parser() -> ConfigParser:
    return ConfigParser(interpolation=None, strict=False)


class IniStore:
    """Flat key-value store kept in one section of an INI file.

    The file is read again on every access so that external edits are
    always picked up. Unreadable files behave like empty ones.
    """

    def __init__(self, path: str | Path, section: str = Constants.GLOBAL_SECTION):
        self.path = Path(path)
        self.section = section

    def _read(self) -> ConfigParser | None:
        """Parse the file; None when it exists but cannot be parsed."""
        parser = _new_parser()
        try:
            parser.read(self.path, encoding="utf-8")
        except (ConfigParserError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return None
        return parser

    def load_entries(self) -> dict[str, str]:
        """Return every entry of the section from a single read of the file."""
        parser = self._read()
        if parser is None or not parser.has_section(self.section):
            return {}
        return dict(parser.items(self.section))

    def load_entry(self, key: str) -> str:
        """Return the stored text for ``key``, or "" when absent."""
        return self.load_entries().get(key, "")

    def save_entries(self, values: Mapping[str, str]) -> None:
        """Write several entries at once, keeping every other key and section.

        A file that cannot be parsed is replaced by one holding only
        ``values``; this is logged as a warning.

        Raises:
            PermissionError: If the file cannot be written
            OSError: If writing fails for other OS-related reasons
        """
        parser = self._read()
        if parser is None:
            logger.warning(f"Overwriting unreadable settings file {self.path}")
            parser = _new_parser()
        if not parser.has_section(self.section):
            parser.add_section(self.section)
        for key, value in values.items():
            parser.set(self.section, key, value)
        write_file_safely(self.path, parser.write, "writing settings")

    def save_entry(self, key: str, value: str) -> None:
        self.save_entries({key: value})
