"""Integration tests for the composekey command.

Each test has a single assertion and focuses on behavior.
"""

import sys

from loguru import logger
import pytest

from composekey.__main__ import main, parse_keys
from composekey.core.keys import VK, Key

RULES = """\
<Multi_key> <quotedbl> <minus> : "½" onehalf # VULGAR FRACTION ONE HALF
<Multi_key> <period> <period> : "…" ellipsis # HORIZONTAL ELLIPSIS
<Multi_key> <bogus> <x> : "?" # REJECTED
"""


@pytest.fixture(autouse=True)
def restore_logger():
    """main() reconfigures loguru; put the default handler back afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def dirs(tmp_path) -> list[str]:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "WinCompose.txt").write_text(RULES, encoding="utf-8")
    return [
        "--config-dir",
        str(tmp_path / "conf"),
        "--data-dir",
        str(data_dir),
        "--user-dir",
        str(tmp_path / "home"),
    ]


class TestParseKeys:
    """Test command-line key parsing."""

    def test_parses_names_and_characters(self) -> None:
        """When given names, characters and VK names, parses them all."""
        assert parse_keys(["quotedbl", "a", "VK.UP"]) == [Key('"'), Key("a"), Key(VK.UP)]

    def test_rejects_unknown_name(self) -> None:
        """When given an unknown key name, raises ValueError."""
        with pytest.raises(ValueError):
            parse_keys(["nonsense"])


class TestCommands:
    """Test sub-commands end to end."""

    def test_lookup_complete_sequence(self, dirs, capsys) -> None:
        """When the keys form a sequence, lookup prints its result."""
        main(dirs + ["lookup", "quotedbl", "minus"])
        assert capsys.readouterr().out.strip() == "complete: ½"

    def test_lookup_prefix(self, dirs, capsys) -> None:
        """When the keys form a prefix, lookup prints "prefix"."""
        main(dirs + ["lookup", "period"])
        assert capsys.readouterr().out.strip() == "prefix"

    def test_lookup_invalid_returns_error_status(self, dirs) -> None:
        """When the keys match nothing, lookup exits with status 1."""
        assert main(dirs + ["lookup", "z", "z"]) == 1

    def test_lookup_unknown_key_name_exits(self, dirs) -> None:
        """When a key name is unknown, the parser exits."""
        with pytest.raises(SystemExit):
            main(dirs + ["lookup", "nonsense"])

    def test_list_prints_every_entry(self, dirs, capsys) -> None:
        """When listing, prints one line per entry."""
        main(dirs + ["list"])
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_settings_prints_compose_key(self, dirs, capsys) -> None:
        """When showing settings, prints the compose key."""
        main(dirs + ["settings"])
        assert "compose_key = VK.RMENU" in capsys.readouterr().out

    def test_check_reports_rejected_lines(self, tmp_path, capsys) -> None:
        """When checking a file, reports accepted and rejected counts."""
        rules = tmp_path / "rules.txt"
        rules.write_text(RULES, encoding="utf-8")
        main(["check", str(rules)])
        assert "2 sequences, 1 rejected" in capsys.readouterr().out

    def test_check_missing_file_fails(self, tmp_path) -> None:
        """When a checked file is missing, exits with status 1."""
        assert main(["check", str(tmp_path / "missing.txt")]) == 1
