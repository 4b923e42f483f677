"""Unit tests for locale discovery and lookups.

Each test has a single assertion and focuses on behavior.
"""

import pytest

from composekey.core.keys import VK, Key
from composekey.i18n import LocaleError, Localization

FR = "name: Français\nkeys:\n  RMENU: Alt droite\nunicode:\n  U00BD: FRACTION UN DEMI\n"


@pytest.fixture
def locales_dir(tmp_path):
    (tmp_path / "fr.yml").write_text(FR, encoding="utf-8")
    (tmp_path / "xx.yml").write_text("just: [broken\n", encoding="utf-8")
    (tmp_path / "yy.yml").write_text("- no name\n", encoding="utf-8")
    return tmp_path


class TestDiscovery:
    """Test probing of locale files."""

    def test_discovers_valid_locale(self, locales_dir) -> None:
        """When a locale file has a name, it is listed as supported."""
        assert Localization(locales_dir).supported()["fr"] == "Français"

    def test_english_is_always_supported(self, tmp_path) -> None:
        """When no English file exists, English is still supported."""
        assert Localization(tmp_path).is_supported("en") is True

    def test_skips_invalid_yaml(self, locales_dir) -> None:
        """When a locale file is not valid YAML, it is skipped."""
        assert Localization(locales_dir).is_supported("xx") is False

    def test_skips_file_without_name(self, locales_dir) -> None:
        """When a locale file has no name, it is skipped."""
        assert Localization(locales_dir).is_supported("yy") is False

    def test_missing_directory_supports_only_english(self, tmp_path) -> None:
        """When the locale directory is missing, only English is supported."""
        assert list(Localization(tmp_path / "missing").supported()) == ["en"]

    def test_bundled_locales_include_french(self) -> None:
        """When using the bundled locales, French is supported."""
        assert Localization().is_supported("fr") is True


class TestApply:
    """Test activating a locale."""

    def test_apply_sets_active(self, locales_dir) -> None:
        """When a locale is applied, it becomes active."""
        localization = Localization(locales_dir)
        localization.apply("fr")
        assert localization.active == "fr"

    def test_unknown_locale_raises(self, locales_dir) -> None:
        """When applying an unknown locale, raises LocaleError."""
        with pytest.raises(LocaleError):
            Localization(locales_dir).apply("zz")

    def test_empty_identifier_clears_tables(self, locales_dir) -> None:
        """When applying "", localized tables are cleared."""
        localization = Localization(locales_dir)
        localization.apply("fr")
        localization.apply("")
        assert localization.unicode_description(0xBD) is None

    def test_english_without_file_applies(self, tmp_path) -> None:
        """When English has no file, applying it still succeeds."""
        localization = Localization(tmp_path)
        localization.apply("en")
        assert localization.active == "en"


class TestLookups:
    """Test localized strings of the active locale."""

    def test_unicode_description(self, locales_dir) -> None:
        """When the locale translates a codepoint, returns the translation."""
        localization = Localization(locales_dir)
        localization.apply("fr")
        assert localization.unicode_description(0xBD) == "FRACTION UN DEMI"

    def test_unicode_description_absent(self, locales_dir) -> None:
        """When the locale lacks a codepoint, returns None."""
        localization = Localization(locales_dir)
        localization.apply("fr")
        assert localization.unicode_description(0xBC) is None

    def test_key_name(self, locales_dir) -> None:
        """When the locale names a key, returns the localized name."""
        localization = Localization(locales_dir)
        localization.apply("fr")
        assert localization.key_name(Key(VK.RMENU)) == "Alt droite"

    def test_key_name_falls_back_to_friendly_name(self, locales_dir) -> None:
        """When the locale lacks a key, returns its friendly name."""
        localization = Localization(locales_dir)
        localization.apply("fr")
        assert localization.key_name(Key(VK.LWIN)) == "Left Windows"

    def test_key_name_of_printable_key(self, locales_dir) -> None:
        """When the key is printable, its name is its text."""
        assert Localization(locales_dir).key_name(Key("`")) == "`"
