"""Unit tests for keys and key names.

Each test has a single assertion and focuses on behavior.
"""

import pytest

from composekey.core.keys import (
    KEY_NAMES,
    VK,
    Key,
    format_sequence,
    is_named_key,
    resolve_key_name,
)


class TestKeyEquality:
    """Test Key equality and hashing."""

    def test_printable_keys_with_same_text_are_equal(self) -> None:
        """When two printable keys hold the same text, they compare equal."""
        assert Key("a") == Key("a")

    def test_printable_keys_with_different_text_differ(self) -> None:
        """When printable keys hold different text, they compare unequal."""
        assert Key("a") != Key("b")

    def test_named_keys_with_same_code_are_equal(self) -> None:
        """When two named keys share a virtual-key code, they compare equal."""
        assert Key(VK.RMENU) == Key(VK.RMENU)

    def test_named_key_never_equals_printable_key(self) -> None:
        """When a named key is compared to its glyph as text, they differ."""
        assert Key(VK.UP) != Key("▲")

    def test_equal_keys_share_a_hash(self) -> None:
        """When equal keys are put in a set, they collapse to one member."""
        assert len({Key("a"), Key("a"), Key(VK.UP), Key(VK.UP)}) == 2

    def test_int_code_is_normalized_to_vk(self) -> None:
        """When built from a plain int, the key holds the matching VK member."""
        assert Key(0xA5) == Key(VK.RMENU)

    def test_unknown_int_code_raises(self) -> None:
        """When built from an unknown int code, raises ValueError."""
        with pytest.raises(ValueError):
            Key(0xFFFF)

    def test_keys_are_immutable(self) -> None:
        """When assigning to a key's value, raises AttributeError."""
        key = Key("a")
        with pytest.raises(AttributeError):
            key.value = "b"  # type: ignore[misc]


class TestKeyProperties:
    """Test printable checks and display names."""

    def test_text_key_is_printable(self) -> None:
        """When a key holds text, reports itself printable."""
        assert Key("a").is_printable() is True

    def test_vk_key_is_not_printable(self) -> None:
        """When a key holds a virtual-key code, reports itself not printable."""
        assert Key(VK.LWIN).is_printable() is False

    def test_friendly_name_of_curated_key(self) -> None:
        """When the key has a curated name, friendly_name returns it."""
        assert Key(VK.RMENU).friendly_name == "Right Alt"

    def test_friendly_name_falls_back_to_canonical_form(self) -> None:
        """When no curated name exists, friendly_name is the serialized form."""
        assert Key(VK.UP).friendly_name == "VK.UP"

    def test_friendly_name_of_printable_key_is_its_text(self) -> None:
        """When the key is printable, friendly_name is its text."""
        assert Key("`").friendly_name == "`"

    def test_key_label_of_arrow(self) -> None:
        """When the key is an arrow, key_label is its glyph."""
        assert Key(VK.LEFT).key_label == "◀"

    def test_key_label_falls_back_to_canonical_form(self) -> None:
        """When no glyph exists, key_label is the serialized form."""
        assert Key(VK.ESCAPE).key_label == "VK.ESCAPE"

    def test_vk_of_printable_key_is_none(self) -> None:
        """When the key is printable, vk is None."""
        assert Key("a").vk is None


class TestKeySerialization:
    """Test str() and Key.from_string()."""

    def test_named_key_serializes_with_prefix(self) -> None:
        """When serialized, a named key gets the VK. prefix."""
        assert str(Key(VK.RMENU)) == "VK.RMENU"

    def test_printable_key_serializes_to_its_text(self) -> None:
        """When serialized, a printable key is its text."""
        assert str(Key("é")) == "é"

    def test_parses_vk_name(self) -> None:
        """When given a known VK name, from_string returns the named key."""
        assert Key.from_string("VK.CAPITAL") == Key(VK.CAPITAL)

    def test_parses_plain_text_as_printable(self) -> None:
        """When given plain text, from_string returns a printable key."""
        assert Key.from_string("`") == Key("`")

    def test_unknown_vk_name_becomes_printable(self) -> None:
        """When given an unknown VK name, from_string keeps it as text."""
        assert Key.from_string("VK.NOPE") == Key("VK.NOPE")

    @pytest.mark.parametrize("key", [Key(VK.LMENU), Key("x"), Key("VK")])
    def test_from_string_inverts_str(self, key: Key) -> None:
        """When a key is serialized and parsed back, the same key results."""
        assert Key.from_string(str(key)) == key


class TestKeyNames:
    """Test keysym name resolution."""

    def test_resolves_curated_name(self) -> None:
        """When given a keysym name, resolves it to its character."""
        assert resolve_key_name("quotedbl") == Key('"')

    def test_resolves_arrow_name_to_named_key(self) -> None:
        """When given an arrow keysym name, resolves it to the named key."""
        assert resolve_key_name("Up") == Key(VK.UP)

    def test_resolves_single_character(self) -> None:
        """When given one character, resolves it to a printable key."""
        assert resolve_key_name("e") == Key("e")

    def test_rejects_unknown_multi_character_name(self) -> None:
        """When given an unknown multi-character name, returns None."""
        assert resolve_key_name("eacute") is None

    def test_named_key_table_membership(self) -> None:
        """When the key appears in the keysym table, it is a named key."""
        assert is_named_key(Key(VK.DOWN)) is True

    def test_unlisted_vk_is_not_named(self) -> None:
        """When the key is missing from the keysym table, it is not named."""
        assert is_named_key(Key(VK.RMENU)) is False

    def test_every_ascii_name_maps_to_one_character(self) -> None:
        """When a keysym maps to a printable key, that key is one character."""
        printable = [key for key in KEY_NAMES.values() if key.is_printable()]
        assert all(len(str(key)) == 1 for key in printable)

    def test_format_sequence_uses_key_labels(self) -> None:
        """When formatting a sequence, joins the key labels with spaces."""
        assert format_sequence((Key(VK.UP), Key("a"))) == "▲ a"
