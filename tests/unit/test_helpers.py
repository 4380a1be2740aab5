"""Unit tests for shared helpers and formatting.

Each test has a single assertion and focuses on behavior.
"""

import pytest

from runesearch.utils import chain_prefix, format_time, read_text_lines
from runesearch.utils.formatting import format_parameter_listing, format_value
from runesearch.core import CharacterSearchType, RuneArrayDto

# pylint: disable=missing-function-docstring


class TestChainPrefix:
    """Building the error-prefix chain."""

    def test_empty_prefix_returns_method_name(self) -> None:
        assert chain_prefix("", "search()") == "search()"

    def test_joins_prefix_and_method_name(self) -> None:
        assert chain_prefix("main()", "search()") == "main() -> search()"


class TestFormatting:
    """Rendering values for listings."""

    def test_buffer_rendered_as_quoted_text(self) -> None:
        assert format_value(RuneArrayDto("abc")) == "'abc'"

    def test_enum_rendered_by_label(self) -> None:
        assert format_value(CharacterSearchType.SINGLE_TARGET_CHAR) == "SingleTargetChar"

    def test_empty_string_marked(self) -> None:
        assert format_value("") == "(empty)"

    def test_listing_includes_subtitle(self) -> None:
        assert "MyParams" in format_parameter_listing("Title", [("A", 1)], "MyParams")

    def test_format_time_milliseconds(self) -> None:
        assert format_time(0.5) == "500.0ms"

    def test_format_time_minutes(self) -> None:
        assert format_time(125) == "2m 5.00s"


class TestReadTextLines:
    """Reading target lines from a file."""

    def test_drops_blank_lines(self, tmp_path) -> None:
        input_file = tmp_path / "targets.txt"
        input_file.write_text("abc\n\n  \ndef\n", encoding="utf-8")
        assert read_text_lines(input_file) == ["abc", "def"]

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            read_text_lines(tmp_path / "missing.txt")
