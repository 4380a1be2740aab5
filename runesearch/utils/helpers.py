"""Shared utility functions for runesearch."""

import os
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger

PREFIX_SEPARATOR = " -> "


def chain_prefix(error_prefix: str | None, method_name: str) -> str:
    """Append a method name to an error-prefix chain.

    The chain is a breadcrumb of the calls leading to an error and is placed
    at the start of every exception message.

    e.g., chain_prefix("main()", "RuneArrayDto.add_char()")
          -> 'main() -> RuneArrayDto.add_char()'

    Args:
        error_prefix: Existing chain (may be None or empty)
        method_name: Name of the method being entered

    Returns:
        The extended chain
    """
    if not error_prefix:
        return method_name
    return f"{error_prefix}{PREFIX_SEPARATOR}{method_name}"


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def ensure_directory_exists(dir_path: str | Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        dir_path: Directory path to create (may be string or Path)

    Raises:
        PermissionError: If directory creation is denied
        OSError: If directory creation fails for other OS-related reasons
    """
    dir_str = str(dir_path)
    try:
        os.makedirs(dir_str, exist_ok=True)
    except PermissionError:
        logger.error(f"✗ Permission denied creating output directory: {dir_str}")
        logger.error("  Please check directory permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error creating output directory {dir_str}: {e}")
        raise


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Write to a file with consistent error handling.

    Args:
        file_path: Path to the file to write
        content_writer: Callable that takes a file handle and writes content
        operation_name: Description of the operation for error messages

    Raises:
        PermissionError: If file writing is denied
        OSError: If file writing fails for OS-related reasons
    """
    file_str = str(file_path)
    try:
        parent_dir = os.path.dirname(file_str) or "."
        ensure_directory_exists(parent_dir)

        with open(file_str, "w", encoding="utf-8") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ Permission denied {operation_name}: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error {operation_name} {file_str}: {e}")
        raise


def read_text_lines(file_path: str | Path) -> list[str]:
    """Read a UTF-8 text file and return its lines without line terminators.

    Blank lines are dropped.

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
    """
    file_str = expand_file_path(str(file_path)) or str(file_path)
    try:
        with open(file_str, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f if line.strip()]
    except FileNotFoundError:
        logger.error(f"✗ Input file not found: {file_str}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading input file: {file_str}")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading input file {file_str}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise
