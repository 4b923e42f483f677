"""Prefix tree of all valid compose sequences.

Each node is indexed by the key that leads to it from its parent. A node
carrying a result is a complete sequence, but it may still have children:
``<a> <e>`` and ``<a> <e> <e>`` can both be valid entries.
"""

from dataclasses import dataclass
from typing import Iterable

from composekey.core.keys import Key, KeySequence

_NO_CODEPOINT = -1


class SequenceNode:
    """Single node in the sequence tree."""

    __slots__ = ("children", "result", "description", "codepoint")

    def __init__(self) -> None:
        self.children: dict[Key, SequenceNode] = {}
        self.result: str | None = None  # None on pass-through prefix nodes
        self.description = ""
        self.codepoint: int | None = None


@dataclass
class SequenceDescription:
    """Flattened view of one tree entry, used for listings.

    Entries that produce a single character sort by codepoint; an entry
    without a codepoint compares as -1 against one that has it. Otherwise
    entries sort by result string.
    """

    sequence: KeySequence
    result: str
    description: str = ""
    codepoint: int | None = None

    def _sort_codepoint(self) -> int:
        return _NO_CODEPOINT if self.codepoint is None else self.codepoint

    def __lt__(self, other: "SequenceDescription") -> bool:
        if self.codepoint is not None or other.codepoint is not None:
            return self._sort_codepoint() < other._sort_codepoint()
        return self.result < other.result


class SequenceTree:
    """Trie keyed by Key, storing an optional result on every node.

    Usage:
        tree = SequenceTree()
        tree.insert((Key('"'), Key("-")), "½", 0xBD, "VULGAR FRACTION ONE HALF")

        tree.is_valid_prefix((Key('"'),))   # True
        tree.get_result((Key('"'), Key("-")))  # "½"
    """

    __slots__ = ("_root", "_count")

    def __init__(self) -> None:
        self._root = SequenceNode()
        self._count = 0

    def __len__(self) -> int:
        """Number of distinct complete sequences."""
        return self._count

    def insert(
        self,
        sequence: Iterable[Key],
        result: str,
        codepoint: int | None = None,
        description: str = "",
    ) -> None:
        """Add a sequence, replacing the result of an existing one.

        Raises:
            ValueError: If the sequence is empty
        """
        node = self._root
        depth = 0
        for key in sequence:
            child = node.children.get(key)
            if child is None:
                child = node.children[key] = SequenceNode()
            node = child
            depth += 1
        if depth == 0:
            raise ValueError("Cannot insert an empty key sequence")

        if node.result is None:
            self._count += 1
        node.result = result
        node.codepoint = codepoint
        node.description = description

    def _find(self, sequence: Iterable[Key]) -> SequenceNode | None:
        node = self._root
        for key in sequence:
            node = node.children.get(key)
            if node is None:
                return None
        return node

    def is_valid_prefix(self, sequence: Iterable[Key]) -> bool:
        """True if some entry starts with this sequence (the empty one included)."""
        return self._find(sequence) is not None

    def is_valid_sequence(self, sequence: Iterable[Key]) -> bool:
        """True if this exact sequence is an entry."""
        node = self._find(sequence)
        return node is not None and node.result is not None

    def get_result(self, sequence: Iterable[Key]) -> str:
        """Return the entry's result, or an empty string if there is none."""
        node = self._find(sequence)
        if node is None or node.result is None:
            return ""
        return node.result

    def enumerate(self) -> list[SequenceDescription]:
        """List every entry with its full key path, sorted for display."""
        descriptions = []
        stack: list[tuple[KeySequence, SequenceNode]] = [((), self._root)]
        while stack:
            path, node = stack.pop()
            if node.result is not None:
                descriptions.append(
                    SequenceDescription(path, node.result, node.description, node.codepoint)
                )
            for key, child in node.children.items():
                stack.append((path + (key,), child))
        descriptions.sort()
        return descriptions
