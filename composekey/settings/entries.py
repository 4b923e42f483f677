"""Typed settings entries with fallback to a default value."""

from typing import Callable, Generic, Protocol, TypeVar

from loguru import logger
from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")


class EntryStore(Protocol):
    """Anything entries can be loaded from and saved to."""

    def load_entry(self, key: str) -> str: ...

    def save_entry(self, key: str, value: str) -> None: ...


def serialize_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class SettingsEntry(Generic[T]):
    """A named setting of type T.

    Loading never fails: absent, unparsable or rejected values fall back to
    the default.

    Args:
        key: Name of the entry in the store
        default: Value used when nothing usable is stored
        parse: Turns stored text into a value; raises ValueError on bad input.
            Defaults to pydantic validation against the type of ``default``.
        accept: Optional check run on parsed values
        serialize: Turns a value back into stored text
    """

    def __init__(
        self,
        key: str,
        default: T,
        parse: Callable[[str], T] | None = None,
        accept: Callable[[T], bool] | None = None,
        serialize: Callable[[T], str] = serialize_value,
    ):
        if not key:
            raise ValueError("Settings entries need a key")
        self.key = key
        self.default = default
        self.value: T = default
        self._parse = parse or TypeAdapter(type(default)).validate_python
        self._accept = accept
        self._serialize = serialize

    def parse(self, text: str) -> T:
        """Convert stored text, falling back to the default."""
        text = text.strip()
        if not text:
            return self.default
        try:
            value = self._parse(text)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Invalid value {text!r} for setting {self.key}, using default: {e}")
            return self.default
        if self._accept is not None and not self._accept(value):
            logger.warning(
                f"Unsupported value {text!r} for setting {self.key}, "
                f"using default {self._serialize(self.default)!r}"
            )
            return self.default
        return value

    def load(self, store: EntryStore) -> T:
        self.value = self.parse(store.load_entry(self.key))
        return self.value

    def serialize(self) -> str:
        """Stored text form of the current value."""
        return self._serialize(self.value)

    def save(self, store: EntryStore) -> None:
        store.save_entry(self.key, self.serialize())

    def __repr__(self) -> str:
        return f"SettingsEntry({self.key!r}, value={self.value!r})"
