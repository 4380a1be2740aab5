"""Command-line interface for runesearch."""

from runesearch.cli.parser import create_parser

__all__ = ["create_parser"]
