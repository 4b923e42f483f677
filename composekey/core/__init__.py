"""Core domain logic for composekey."""

from .keys import KEY_NAMES, VK, Key, KeySequence, format_sequence, is_named_key, resolve_key_name
from .sequences import SequenceDescription, SequenceNode, SequenceTree

__all__ = [
    "KEY_NAMES",
    "VK",
    "Key",
    "KeySequence",
    "SequenceDescription",
    "SequenceNode",
    "SequenceTree",
    "format_sequence",
    "is_named_key",
    "resolve_key_name",
]
