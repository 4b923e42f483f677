"""Main entry point for the composekey package."""

import sys
import time

from loguru import logger

from composekey.cli import create_parser
from composekey.core.keys import Key, format_sequence, resolve_key_name
from composekey.data.compose_file import iter_compose_entries
from composekey.settings import Settings, default_paths
from composekey.utils.constants import Constants
from composekey.utils.helpers import expand_file_path
from composekey.utils.logging import add_log_file_handler, setup_logger


def parse_keys(tokens: list[str]) -> list[Key]:
    """Turn command-line key names into keys.

    Raises:
        ValueError: If a token is not a keysym name, a VK name or a single character
    """
    keys = []
    for token in tokens:
        if token.startswith(Constants.VK_PREFIX):
            keys.append(Key.from_string(token))
            continue
        key = resolve_key_name(token)
        if key is None:
            raise ValueError(f"Unknown key name: {token}")
        keys.append(key)
    return keys


def run_list(settings: Settings) -> None:
    for entry in settings.list_entries():
        print(f"{format_sequence(entry.sequence)}\t{entry.result}\t{entry.description}")


def run_lookup(settings: Settings, keys: list[Key]) -> int:
    if settings.is_valid_sequence(keys):
        print(f"complete: {settings.get_result(keys)}")
        return 0
    if settings.is_valid_prefix(keys):
        print("prefix")
        return 0
    print("invalid")
    return 1


def run_check(files: list[str]) -> int:
    status = 0
    for filepath in files:
        path = expand_file_path(filepath) or filepath
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"✗ Cannot read {path}: {e}")
            status = 1
            continue
        candidates = sum(1 for line in lines if f"<{Constants.MULTI_KEY_MARKER}>" in line)
        accepted = sum(1 for _ in iter_compose_entries(lines))
        print(f"{path}: {accepted} sequences, {candidates - accepted} rejected")
    return status


def run_settings(settings: Settings) -> None:
    for entry in settings.entries:
        print(f"{entry.key} = {entry.serialize()}")
    print(f"# compose key: {settings.compose_key_name()}")
    print(f"# sequences: {settings.entry_count()}")


def run_watch(settings: Settings) -> None:
    settings.start_watch()
    logger.info(f"Watching {settings.paths.config_file}, press Ctrl+C to stop")
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Stopping")
    finally:
        settings.stop_watch()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logger(verbose=args.verbose, debug=args.debug)
    if args.log_file:
        add_log_file_handler(args.log_file, verbose=args.verbose, debug=args.debug)

    if args.command == "check":
        return run_check(args.files)

    keys: list[Key] = []
    if args.command == "lookup":
        try:
            keys = parse_keys(args.keys)
        except ValueError as e:
            parser.error(str(e))

    paths = default_paths(args.config_dir, args.data_dir, args.user_dir)
    delay = getattr(args, "delay", None)
    settings = Settings(paths, reload_delay=delay if delay is not None else Constants.RELOAD_DELAY)
    with settings:
        settings.load()
        settings.load_sequences()

        if args.command == "list":
            run_list(settings)
        elif args.command == "lookup":
            return run_lookup(settings, keys)
        elif args.command == "settings":
            run_settings(settings)
        elif args.command == "watch":
            run_watch(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
