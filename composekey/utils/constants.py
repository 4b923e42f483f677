"""Constants used throughout the composekey codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Settings file
    CONFIG_FILE_NAME = "settings.ini"
    """Name of the settings file inside the config directory."""

    GLOBAL_SECTION = "global"
    """Only section read from and written to the settings file."""

    # Hot reload
    RELOAD_DELAY = 0.3
    """Seconds to wait after the first change notification before reloading."""

    # Definition files
    MULTI_KEY_MARKER = "Multi_key"
    """Keysym name that starts every compose sequence we care about."""

    MIN_SEQUENCE_KEYS = 2
    """Minimum number of trigger keys following the marker."""

    SYSTEM_RULE_FILES = ("Xorg.txt", "XCompose.txt", "Emoji.txt", "WinCompose.txt")
    """Bundled definition files, loaded first, in this order."""

    USER_RULE_FILES = (".XCompose", ".XCompose.txt")
    """User override files in the home directory, loaded last."""

    # Named key serialization
    VK_PREFIX = "VK."
    """Prefix of the serialized form of a named key."""

    # Localization
    DEFAULT_LANGUAGE = "en"
    """Locale always considered supported."""
