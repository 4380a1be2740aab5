"""Unit tests for Target and Test String parameter validation.

Validation returns a normalized copy and leaves the receiver untouched.
Each test has a single assertion and focuses on behavior.
"""

import pytest

from runesearch.core import (
    CharacterSearchType,
    EmptyBufferError,
    InvalidSearchTypeError,
    NilReferenceError,
    NumericSymbolLocation,
    OutOfRangeError,
    RuneArrayDto,
)
from runesearch.parameters import (
    SEARCH_TO_END,
    CharSearchTargetInputParametersDto,
    CharSearchTestConfigDto,
    CharSearchTestInputParametersDto,
    validate_target_parameters,
    validate_test_parameters,
)

# pylint: disable=missing-function-docstring


def _target(text: str, start: int = 0, search_length: int = SEARCH_TO_END):
    return CharSearchTargetInputParametersDto(
        target_string=RuneArrayDto(text),
        target_string_starting_search_index=start,
        target_string_search_length=search_length,
    )


class TestValidateTargetParameters:
    """Target String validation and normalization."""

    def test_rejects_empty_target_string(self) -> None:
        with pytest.raises(EmptyBufferError, match="TargetStringLength"):
            _target("").validate_target_parameters()

    def test_empty_target_error_mentions_zero(self) -> None:
        with pytest.raises(EmptyBufferError, match="Zero"):
            _target("").validate_target_parameters()

    def test_rejects_missing_target_string(self) -> None:
        with pytest.raises(NilReferenceError):
            CharSearchTargetInputParametersDto.new().validate_target_parameters()

    def test_rejects_starting_index_equal_to_length(self) -> None:
        with pytest.raises(OutOfRangeError, match="TargetStringStartingSearchIndex"):
            _target("abc", 3).validate_target_parameters()

    def test_rejects_negative_starting_index(self) -> None:
        with pytest.raises(OutOfRangeError):
            _target("abc", -1).validate_target_parameters()

    def test_rejects_zero_search_length(self) -> None:
        with pytest.raises(OutOfRangeError):
            _target("abc", 0, 0).validate_target_parameters()

    def test_rejects_search_length_below_minus_one(self) -> None:
        with pytest.raises(OutOfRangeError):
            _target("abc", 0, -2).validate_target_parameters()

    def test_search_to_end_covers_rest_of_buffer(self) -> None:
        normalized = _target("abcdef", 2).validate_target_parameters()
        assert normalized.target_string_adjusted_search_length == 6

    def test_adjusted_length_is_offset_by_starting_index(self) -> None:
        normalized = _target("abcdef", 1, 2).validate_target_parameters()
        assert normalized.target_string_adjusted_search_length == 3

    def test_adjusted_length_is_clamped_to_buffer_length(self) -> None:
        normalized = _target("abcdef", 3, 100).validate_target_parameters()
        assert normalized.target_string_adjusted_search_length == 6

    def test_recomputes_target_string_length(self) -> None:
        normalized = _target("abcdef").validate_target_parameters()
        assert normalized.target_string_length == 6

    def test_moves_current_index_up_to_starting_index(self) -> None:
        normalized = _target("abcdef", 4).validate_target_parameters()
        assert normalized.target_string_current_search_index == 4

    def test_keeps_current_index_ahead_of_starting_index(self) -> None:
        params = _target("abcdef", 1)
        params.target_string_current_search_index = 3
        assert params.validate_target_parameters().target_string_current_search_index == 3

    def test_rejects_current_index_past_end(self) -> None:
        params = _target("abcdef")
        params.target_string_current_search_index = 6
        with pytest.raises(OutOfRangeError):
            params.validate_target_parameters()

    def test_fills_default_labels(self) -> None:
        normalized = _target("abc").validate_target_parameters()
        assert normalized.target_string_name == "TargetString"

    def test_keeps_caller_labels(self) -> None:
        params = _target("abc", 3)
        params.target_string_starting_search_index_name = "DecimalIndex"
        with pytest.raises(OutOfRangeError, match="DecimalIndex"):
            params.validate_target_parameters()

    def test_does_not_modify_receiver(self) -> None:
        params = _target("abcdef")
        params.validate_target_parameters()
        assert params.target_string_adjusted_search_length == -1

    def test_normalized_copy_shares_buffer(self) -> None:
        params = _target("abcdef")
        assert params.validate_target_parameters().target_string is params.target_string

    def test_module_function_rejects_none(self) -> None:
        with pytest.raises(NilReferenceError):
            validate_target_parameters(None)

    @pytest.mark.parametrize(
        "text, start, search_length",
        [("a", 0, -1), ("abcdef", 5, 1), ("abcdef", 2, 10), ("abcdef", 0, 6)],
    )
    def test_adjusted_length_never_exceeds_buffer_length(
        self, text: str, start: int, search_length: int
    ) -> None:
        normalized = _target(text, start, search_length).validate_target_parameters()
        assert normalized.target_string_adjusted_search_length <= len(text)


class TestCharSearchTargetInputParametersDto:
    """Construction, copying and comparison of Target parameters."""

    def test_new_target_string_returns_validated_parameters(self) -> None:
        params = CharSearchTargetInputParametersDto.new_target_string(RuneArrayDto("abc"))
        assert params.target_string_adjusted_search_length == 3

    def test_new_target_string_rejects_none(self) -> None:
        with pytest.raises(NilReferenceError):
            CharSearchTargetInputParametersDto.new_target_string(None)

    def test_is_valid_instance_false_for_empty_buffer(self) -> None:
        assert _target("").is_valid_instance() is False

    def test_validate_char_search_type_rejects_none(self) -> None:
        with pytest.raises(InvalidSearchTypeError):
            _target("abc").validate_char_search_type()

    def test_copy_out_is_equal(self) -> None:
        params = _target("abc", 1)
        assert params.copy_out().equal(params) is True

    def test_equal_detects_different_target_strings(self) -> None:
        assert _target("abc").equal(_target("abd")) is False

    def test_empty_detaches_target_string(self) -> None:
        params = _target("abc")
        params.empty()
        assert params.target_string is None

    def test_listing_names_adjusted_search_length(self) -> None:
        listing = _target("abc").get_parameter_text_listing()
        assert "TargetStringAdjustedSearchLength" in listing


class TestValidateTestParameters:
    """Test String validation and normalization."""

    def test_rejects_empty_test_string(self) -> None:
        params = CharSearchTestInputParametersDto(test_string=RuneArrayDto(""))
        with pytest.raises(EmptyBufferError, match="TestStringLength"):
            params.validate_test_parameters()

    def test_rejects_starting_index_past_end(self) -> None:
        params = CharSearchTestInputParametersDto(
            test_string=RuneArrayDto("ab"), test_string_starting_index=2
        )
        with pytest.raises(OutOfRangeError, match="TestStringStartingIndex"):
            params.validate_test_parameters()

    def test_recomputes_test_string_length(self) -> None:
        params = CharSearchTestInputParametersDto(test_string=RuneArrayDto("héllo"))
        assert params.validate_test_parameters().test_string_length == 5

    def test_does_not_modify_receiver(self) -> None:
        params = CharSearchTestInputParametersDto(test_string=RuneArrayDto("abc"))
        params.validate_test_parameters()
        assert params.test_string_name == ""

    def test_module_function_rejects_none(self) -> None:
        with pytest.raises(NilReferenceError):
            validate_test_parameters(None)


class TestCharSearchTestInputParametersDto:
    """Construction and configuration of Test parameters."""

    def test_new_test_string_uses_buffer_search_type(self) -> None:
        buffer = RuneArrayDto("abc", search_type=CharacterSearchType.SINGLE_TARGET_CHAR)
        params = CharSearchTestInputParametersDto.new_test_string(buffer)
        assert params.text_char_search_type == CharacterSearchType.SINGLE_TARGET_CHAR

    def test_new_test_string_prefers_explicit_search_type(self) -> None:
        buffer = RuneArrayDto("abc", search_type=CharacterSearchType.SINGLE_TARGET_CHAR)
        params = CharSearchTestInputParametersDto.new_test_string(
            buffer, CharacterSearchType.LINEAR_END_OF_STRING
        )
        assert params.text_char_search_type == CharacterSearchType.LINEAR_END_OF_STRING

    def test_load_test_config_copies_symbol_location(self) -> None:
        params = CharSearchTestInputParametersDto.new()
        params.load_test_config_dto(
            CharSearchTestConfigDto(num_symbol_location=NumericSymbolLocation.BEFORE)
        )
        assert params.num_sym_location == NumericSymbolLocation.BEFORE

    def test_load_test_config_copies_starting_index(self) -> None:
        params = CharSearchTestInputParametersDto.new()
        params.load_test_config_dto(CharSearchTestConfigDto(test_string_starting_index=2))
        assert params.test_string_starting_index == 2

    def test_load_test_config_rejects_none(self) -> None:
        with pytest.raises(NilReferenceError):
            CharSearchTestInputParametersDto.new().load_test_config_dto(None)

    def test_equal_test_strings_compares_characters(self) -> None:
        first = CharSearchTestInputParametersDto(test_string=RuneArrayDto("abc"))
        second = CharSearchTestInputParametersDto(test_string=RuneArrayDto("abc"))
        assert first.equal_test_strings(second) is True
