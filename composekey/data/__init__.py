"""Definition file parsing and bundled rule files."""

from pathlib import Path

from composekey.data.compose_file import (
    ComposeEntry,
    iter_compose_entries,
    load_compose_file,
    parse_line,
)

RULES_DIR = Path(__file__).parent / "rules"

__all__ = [
    "RULES_DIR",
    "ComposeEntry",
    "iter_compose_entries",
    "load_compose_file",
    "parse_line",
]
