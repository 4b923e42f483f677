"""Keys and key sequences.

A Key is anything that can be done on the keyboard: either a printable
string or a named platform key (a Windows virtual-key code).
"""

from dataclasses import dataclass
from enum import IntEnum

from composekey.utils.constants import Constants


class VK(IntEnum):
    """Virtual-key codes the engine knows how to name."""

    BACK = 0x08
    TAB = 0x09
    RETURN = 0x0D
    PAUSE = 0x13
    CAPITAL = 0x14
    ESCAPE = 0x1B
    PRIOR = 0x21
    NEXT = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    INSERT = 0x2D
    DELETE = 0x2E
    LWIN = 0x5B
    RWIN = 0x5C
    APPS = 0x5D
    NUMLOCK = 0x90
    SCROLL = 0x91
    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LMENU = 0xA4
    RMENU = 0xA5


# Names suitable for a dropdown menu
_FRIENDLY_NAMES: dict[VK, str] = {
    VK.LMENU: "Left Alt",
    VK.RMENU: "Right Alt",
    VK.LCONTROL: "Left Control",
    VK.RCONTROL: "Right Control",
    VK.LWIN: "Left Windows",
    VK.RWIN: "Right Windows",
    VK.CAPITAL: "Caps Lock",
    VK.NUMLOCK: "Num Lock",
    VK.PAUSE: "Pause",
    VK.APPS: "Menu",
    VK.ESCAPE: "Escape",
    VK.SCROLL: "Scroll Lock",
    VK.INSERT: "Insert",
}

# Glyphs we can print on keycap icons
_KEY_LABELS: dict[VK, str] = {
    VK.UP: "▲",
    VK.DOWN: "▼",
    VK.LEFT: "◀",
    VK.RIGHT: "▶",
}


@dataclass(frozen=True)
class Key:
    """An immutable keyboard key.

    ``Key("a")`` is a printable key, ``Key(VK.RMENU)`` a named one. Two keys
    are equal when they hold the same text or the same virtual-key code; a
    printable key never equals a named key.
    """

    value: str | VK

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            return
        # Plain ints are accepted for convenience; unknown codes raise ValueError
        object.__setattr__(self, "value", VK(self.value))

    @classmethod
    def from_string(cls, text: str) -> "Key":
        """Parse the serialized form produced by ``str(key)``.

        ``"VK.<name>"`` with a known name gives a named key; any other text,
        including an unknown ``VK.`` name, gives a printable key.
        """
        if text.startswith(Constants.VK_PREFIX):
            name = text[len(Constants.VK_PREFIX) :]
            if name in VK.__members__:
                return cls(VK[name])
        return cls(text)

    @property
    def vk(self) -> VK | None:
        return None if self.is_printable() else self.value  # type: ignore[return-value]

    def is_printable(self) -> bool:
        return isinstance(self.value, str)

    @property
    def friendly_name(self) -> str:
        """A friendly name that we can put in e.g. a dropdown menu."""
        if not self.is_printable() and self.value in _FRIENDLY_NAMES:
            return _FRIENDLY_NAMES[self.value]  # type: ignore[index]
        return str(self)

    @property
    def key_label(self) -> str:
        """A label that we can print on keycap icons."""
        if not self.is_printable() and self.value in _KEY_LABELS:
            return _KEY_LABELS[self.value]  # type: ignore[index]
        return str(self)

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return f"{Constants.VK_PREFIX}{self.value.name}"

    def __repr__(self) -> str:
        return f"Key({self.value!r})"


# Type alias for key sequences: compared positionally, hashable
KeySequence = tuple[Key, ...]


# X11 keysym names accepted in definition files
KEY_NAMES: dict[str, Key] = {
    # ASCII-mapped keys
    "space": Key(" "),  # 0x20
    "exclam": Key("!"),  # 0x21
    "quotedbl": Key('"'),  # 0x22
    "numbersign": Key("#"),  # 0x23
    "dollar": Key("$"),  # 0x24
    "percent": Key("%"),  # 0x25
    "ampersand": Key("&"),  # 0x26
    "apostrophe": Key("'"),  # 0x27
    "parenleft": Key("("),  # 0x28
    "parenright": Key(")"),  # 0x29
    "asterisk": Key("*"),  # 0x2a
    "plus": Key("+"),  # 0x2b
    "comma": Key(","),  # 0x2c
    "minus": Key("-"),  # 0x2d
    "period": Key("."),  # 0x2e
    "slash": Key("/"),  # 0x2f
    "colon": Key(":"),  # 0x3a
    "semicolon": Key(";"),  # 0x3b
    "less": Key("<"),  # 0x3c
    "equal": Key("="),  # 0x3d
    "greater": Key(">"),  # 0x3e
    "question": Key("?"),  # 0x3f
    "at": Key("@"),  # 0x40
    "bracketleft": Key("["),  # 0x5b
    "backslash": Key("\\"),  # 0x5c
    "bracketright": Key("]"),  # 0x5d
    "asciicircum": Key("^"),  # 0x5e
    "underscore": Key("_"),  # 0x5f
    "grave": Key("`"),  # 0x60
    "braceleft": Key("{"),  # 0x7b
    "bar": Key("|"),  # 0x7c
    "braceright": Key("}"),  # 0x7d
    "asciitilde": Key("~"),  # 0x7e
    # Non-printing keys
    "Up": Key(VK.UP),
    "Down": Key(VK.DOWN),
    "Left": Key(VK.LEFT),
    "Right": Key(VK.RIGHT),
}

_NAMED_KEYS = frozenset(KEY_NAMES.values())


def is_named_key(key: Key) -> bool:
    """Check whether a key appears in the keysym name table."""
    return key in _NAMED_KEYS


def resolve_key_name(token: str) -> Key | None:
    """Resolve a keysym name or a single character to a Key.

    Returns:
        The key, or None when the token is neither a known name nor one character
    """
    if token in KEY_NAMES:
        return KEY_NAMES[token]
    if len(token) == 1:
        return Key(token)
    return None


def format_sequence(sequence: KeySequence) -> str:
    """Render a sequence as space-separated keycap labels."""
    return " ".join(key.key_label for key in sequence)
