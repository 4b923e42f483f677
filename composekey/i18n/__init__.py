"""Localized resources for composekey."""

from composekey.i18n.localization import Localization, LocaleError

__all__ = ["LocaleError", "Localization"]
