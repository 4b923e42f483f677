"""Command-line interface for composekey."""

from composekey.cli.parser import create_parser

__all__ = ["create_parser"]
