"""composekey - compose key sequence engine.

Match sequences of keys typed after a compose key against a dictionary
compiled from X11-style Compose definition files.
"""

from composekey.core import VK, Key, KeySequence, SequenceDescription, SequenceTree
from composekey.data import ComposeEntry, load_compose_file, parse_line
from composekey.i18n import Localization
from composekey.settings import AppPaths, Settings, default_paths
from composekey.utils.logging import setup_logger

__version__ = "0.3.0"
__all__ = [
    "VK",
    "AppPaths",
    "ComposeEntry",
    "Key",
    "KeySequence",
    "Localization",
    "SequenceDescription",
    "SequenceTree",
    "Settings",
    "default_paths",
    "load_compose_file",
    "parse_line",
    "setup_logger",
]
