"""Argument parser for the composekey command."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="composekey",
        description="Inspect compose key sequences and settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List every known sequence
  %(prog)s list

  # What does <Multi_key> " - produce?
  %(prog)s lookup quotedbl minus

  # Check a user definition file
  %(prog)s check ~/.XCompose

  # Follow changes to the settings file
  %(prog)s -v watch

Keys are X11 keysym names (quotedbl, minus, Up...) or single characters.
Definition files are read in this order, later entries overriding earlier ones:
  <data dir>/Xorg.txt, XCompose.txt, Emoji.txt, WinCompose.txt
  <user dir>/.XCompose, .XCompose.txt
        """,
    )

    # Locations
    parser.add_argument("--config-dir", type=str, help="Directory holding settings.ini")
    parser.add_argument("--data-dir", type=str, help="Directory of bundled definition files")
    parser.add_argument("--user-dir", type=str, help="Directory of user definition files")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List every sequence, sorted by result")

    lookup = subparsers.add_parser("lookup", help="Classify a key sequence")
    lookup.add_argument("keys", nargs="+", help="Keys typed after the compose key")

    check = subparsers.add_parser("check", help="Count usable sequences in definition files")
    check.add_argument("files", nargs="+", help="Definition files to parse")

    subparsers.add_parser("settings", help="Show the effective settings")

    watch = subparsers.add_parser("watch", help="Reload settings whenever the file changes")
    watch.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait after a change before reloading",
    )

    return parser
