"""Utility functions for runesearch."""

from runesearch.utils.formatting import format_parameter_listing, format_time
from runesearch.utils.helpers import (
    chain_prefix,
    ensure_directory_exists,
    expand_file_path,
    read_text_lines,
    write_file_safely,
)
from runesearch.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "add_log_file_handler",
    "chain_prefix",
    "ensure_directory_exists",
    "expand_file_path",
    "format_parameter_listing",
    "format_time",
    "read_text_lines",
    "setup_logger",
    "write_file_safely",
]
