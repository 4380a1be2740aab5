"""Command-line interface for the runesearch project."""

import argparse

from runesearch.core.types import CharacterSearchType


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    search_types = [member.value for member in CharacterSearchType if member.is_valid()]
    parser = argparse.ArgumentParser(
        prog="runesearch",
        description="Search target strings for test strings, character by character",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scan a single target string for the first occurrence of 'XYZ'
  %(prog)s --target abcXYZdef --tests XYZ

  # Does the target match 'Xray' exactly at index 5?
  %(prog)s --target "Hey, Xray-4" --tests Xray --search-type linear_target_starting_index \\
      --starting-index 5

  # Is the character at index 5 one of 'ZFXyURJK'?
  %(prog)s --target "Hey, Xray-4" --tests ZFXyURJK --search-type single_target_char \\
      --starting-index 5

  # Search every line of a file for any of several test strings, write YAML
  %(prog)s --input targets.txt --tests "USD,EUR,GBP" -o results.yml -v

  # Using JSON config
  %(prog)s --config config.json

Search types:
- linear_end_of_string: scan the target window, first occurrence wins
- linear_target_starting_index: match only at the starting index
- single_target_char: is the target character at the starting index in the test string

Example config.json:
{
  "input": "targets.txt",
  "tests": ["USD", "EUR", "GBP"],
  "search_type": "linear_end_of_string",
  "starting_index": 0,
  "search_length": -1,
  "request_found_characters": true,
  "request_remainder": false,
  "output": "results.yml",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input
    parser.add_argument("-t", "--target", type=str, help="Target string to search")
    parser.add_argument(
        "-i", "--input", type=str, help="File with one target string per line"
    )
    parser.add_argument(
        "--tests",
        type=str,
        help="Comma-separated test strings, tried in order (first match wins)",
    )

    # Output
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output YAML file (default: stdout)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Search parameters
    parser.add_argument(
        "--search-type",
        type=str,
        choices=search_types,
        default=CharacterSearchType.LINEAR_END_OF_STRING.value,
        help="Character search algorithm",
    )
    parser.add_argument(
        "--starting-index", type=int, default=0, help="Target string starting search index"
    )
    parser.add_argument(
        "--search-length",
        type=int,
        default=-1,
        help="Number of target characters to search (-1: through the end)",
    )
    parser.add_argument(
        "--test-starting-index",
        type=int,
        default=0,
        help="Test string starting index (single_target_char only)",
    )
    parser.add_argument(
        "--request-found-characters",
        action="store_true",
        help="Include the matched characters in the results",
    )
    parser.add_argument(
        "--request-remainder",
        action="store_true",
        help="Include the target characters following the match in the results",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
