"""Parser for X11-style Compose definition files.

Only lines starting with ``<Multi_key>`` are considered::

    <Multi_key> <quotedbl> <minus> : "½" onehalf # VULGAR FRACTION ONE HALF

Everything else (comments, blank lines, ``include`` directives, dead key
sequences) is skipped without complaint.
"""

from pathlib import Path
import re
from typing import Callable, Iterable, Iterator

from loguru import logger
from pydantic import BaseModel

from composekey.core.keys import KeySequence, resolve_key_name
from composekey.core.sequences import SequenceTree
from composekey.utils.constants import Constants
from composekey.utils.helpers import expand_file_path

# Returns a replacement description for a codepoint, or None
Translator = Callable[[int], str | None]

_LINE_RE = re.compile(
    r"^\s*(<" + re.escape(Constants.MULTI_KEY_MARKER) + r">[^:]*)"  # marker and keys
    r':[^"]*"((?:[^"\\]|\\.)*)"'  # result
    r"(?:[^#]*#\s*(.*))?"  # description
)
_TOKEN_SPLIT_RE = re.compile(r"[\s<>]+")
_ESCAPE_RE = re.compile(r"\\(.)")


class ComposeEntry(BaseModel):
    """One parsed definition line."""

    sequence: KeySequence
    result: str
    description: str = ""
    codepoint: int | None = None

    model_config = {"frozen": True}


def parse_line(line: str, translate: Translator | None = None) -> ComposeEntry | None:
    """Parse one definition line.

    Args:
        line: Raw line from a definition file
        translate: Optional lookup of a localized description by codepoint

    Returns:
        The entry, or None if the line is not a usable sequence
    """
    match = _LINE_RE.match(line)
    if not match:
        return None

    # Token 0 is the marker itself
    tokens = [token for token in _TOKEN_SPLIT_RE.split(match.group(1)) if token][1:]
    if len(tokens) < Constants.MIN_SEQUENCE_KEYS:
        return None

    sequence = []
    for token in tokens:
        key = resolve_key_name(token)
        if key is None:
            logger.trace(f"Unknown key name <{token}>, ignoring sequence")
            return None
        sequence.append(key)

    result = _ESCAPE_RE.sub(r"\1", match.group(2))
    if not result:
        return None
    description = (match.group(3) or "").strip()

    codepoint = None
    if len(result) == 1:
        codepoint = ord(result)
        if translate is not None:
            description = translate(codepoint) or description

    return ComposeEntry(
        sequence=tuple(sequence),
        result=result,
        description=description,
        codepoint=codepoint,
    )


def iter_compose_entries(
    lines: Iterable[str], translate: Translator | None = None
) -> Iterator[ComposeEntry]:
    """Yield the usable entries among ``lines``, dropping everything else."""
    for line in lines:
        entry = parse_line(line, translate)
        if entry is not None:
            yield entry


def load_compose_file(
    filepath: str | Path, tree: SequenceTree, translate: Translator | None = None
) -> int:
    """Insert every usable entry of a definition file into ``tree``.

    Missing or unreadable files are skipped: user override files are
    usually absent.

    Returns:
        Number of entries inserted
    """
    path = expand_file_path(filepath) or str(filepath)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            lines = f.readlines()
    except FileNotFoundError:
        logger.debug(f"Definition file not found, skipping: {path}")
        return 0
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read definition file {path}: {e}")
        return 0

    count = 0
    for entry in iter_compose_entries(lines, translate):
        tree.insert(entry.sequence, entry.result, entry.codepoint, entry.description)
        count += 1

    logger.debug(f"Loaded {count} sequences from {path}")
    return count
