"""Outcome of a single character search operation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from runesearch.core.rune_array import RuneArrayDto
from runesearch.core.types import (
    CharacterSearchType,
    NumericSignValue,
    NumericSymbolClass,
    NumericSymbolLocation,
    NumericValueType,
    NumSignSymbolPosition,
    NumStrFormatType,
)
from runesearch.parameters.target import CharSearchTargetInputParametersDto
from runesearch.parameters.test_string import CharSearchTestInputParametersDto
from runesearch.utils.formatting import format_parameter_listing


def _empty_buffer() -> RuneArrayDto:
    buffer = RuneArrayDto()
    buffer.empty()
    return buffer


class CharSearchRuneArrayResultsDto(BaseModel):
    """Search results, including copies of the base input parameters.

    Indices default to -1, meaning "not set". Results are created fresh by
    every search and owned by the caller.
    """

    search_results_name: str = ""
    search_results_function_chain: str = ""
    found_search_target: bool = False
    found_first_numeric_digit_in_num_str: bool = False
    found_decimal_separator_symbols: bool = False
    found_non_zero_value: bool = False

    target_input_parameters_name: str = ""
    target_string_length: int = -1
    target_string_search_length: int = -1
    target_string_adjusted_search_length: int = -1
    target_string_starting_search_index: int = -1
    target_string_current_search_index: int = -1
    target_string_first_found_index: int = -1
    target_string_last_found_index: int = -1
    target_string_last_search_index: int = -1
    target_string_next_search_index: int = -1
    target_string_description1: str = ""
    target_string_description2: str = ""

    test_input_parameters_name: str = ""
    test_string_name: str = ""
    test_string_length: int = -1
    test_string_length_name: str = ""
    test_string_starting_index: int = -1
    test_string_starting_index_name: str = ""
    test_string_first_found_index: int = -1
    test_string_last_found_index: int = -1
    test_string_description1: str = ""
    test_string_description2: str = ""
    collection_test_obj_index: int = -1
    num_value_type: NumericValueType = NumericValueType.NONE
    num_str_format_type: NumStrFormatType = NumStrFormatType.NONE
    num_sym_location: NumericSymbolLocation = NumericSymbolLocation.NONE
    num_symbol_class: NumericSymbolClass = NumericSymbolClass.NONE
    num_sign_value: NumericSignValue = NumericSignValue.NONE
    primary_num_sign_position: NumSignSymbolPosition = NumSignSymbolPosition.NONE
    secondary_num_sign_position: NumSignSymbolPosition = NumSignSymbolPosition.NONE

    text_char_search_type: CharacterSearchType = CharacterSearchType.NONE

    replacement_string: RuneArrayDto = Field(default_factory=_empty_buffer)
    remainder_string: RuneArrayDto = Field(default_factory=_empty_buffer)
    found_characters: RuneArrayDto = Field(default_factory=_empty_buffer)

    model_config = {
        "arbitrary_types_allowed": True,  # For RuneArrayDto
    }

    @classmethod
    def new(cls) -> CharSearchRuneArrayResultsDto:
        return cls()

    def empty(self) -> None:
        """Reset every field to its empty value."""
        blank = type(self)()
        for field_name in type(self).model_fields:
            setattr(self, field_name, getattr(blank, field_name))

    def load_target_base_input_parameters(
        self, target_params: CharSearchTargetInputParametersDto
    ) -> None:
        """Copy the Target String parameters that describe this search."""
        self.target_input_parameters_name = target_params.target_input_parameters_name
        self.found_first_numeric_digit_in_num_str = (
            target_params.found_first_numeric_digit_in_num_str
        )
        self.found_decimal_separator_symbols = target_params.found_decimal_separator_symbols
        self.found_non_zero_value = target_params.found_non_zero_value
        self.target_string_length = target_params.target_string_length
        # Results report the effective window, not the requested length
        self.target_string_search_length = target_params.target_string_adjusted_search_length
        self.target_string_adjusted_search_length = (
            target_params.target_string_adjusted_search_length
        )
        self.target_string_starting_search_index = (
            target_params.target_string_starting_search_index
        )
        self.target_string_current_search_index = target_params.target_string_current_search_index
        self.target_string_description1 = target_params.target_string_description1
        self.target_string_description2 = target_params.target_string_description2

    def load_test_base_input_parameters(
        self, test_params: CharSearchTestInputParametersDto
    ) -> None:
        """Copy the Test String parameters that describe this search."""
        self.test_input_parameters_name = test_params.test_input_parameters_name
        self.test_string_name = test_params.test_string_name
        self.test_string_length = test_params.test_string_length
        self.test_string_length_name = test_params.test_string_length_name
        self.test_string_starting_index = test_params.test_string_starting_index
        self.test_string_starting_index_name = test_params.test_string_starting_index_name
        self.test_string_description1 = test_params.test_string_description1
        self.test_string_description2 = test_params.test_string_description2
        self.collection_test_obj_index = test_params.collection_test_obj_index
        self.num_value_type = test_params.num_value_type
        self.num_str_format_type = test_params.num_str_format_type
        self.num_sym_location = test_params.num_sym_location
        self.num_symbol_class = test_params.num_symbol_class
        self.num_sign_value = test_params.num_sign_value
        self.primary_num_sign_position = test_params.primary_num_sign_position
        self.secondary_num_sign_position = test_params.secondary_num_sign_position
        self.text_char_search_type = test_params.text_char_search_type

    def equal(self, other: CharSearchRuneArrayResultsDto | None) -> bool:
        """Compare every field; buffers are compared by characters."""
        if other is None:
            return False
        buffers = {"replacement_string", "remainder_string", "found_characters"}
        for name in buffers:
            if not getattr(self, name).equal_char_arrays(getattr(other, name)):
                return False
        return self.model_dump(exclude=buffers) == other.model_dump(exclude=buffers)

    def to_report_dict(self) -> dict:
        """Plain dict of the outcome fields, suitable for YAML output."""
        report = {
            "found": self.found_search_target,
            "search_type": self.text_char_search_type.value,
            "target_first_found_index": self.target_string_first_found_index,
            "target_last_found_index": self.target_string_last_found_index,
            "target_next_search_index": self.target_string_next_search_index,
            "test_first_found_index": self.test_string_first_found_index,
            "test_last_found_index": self.test_string_last_found_index,
        }
        if self.collection_test_obj_index >= 0:
            report["collection_index"] = self.collection_test_obj_index
        if not self.found_characters.is_empty():
            report["found_characters"] = self.found_characters.get_character_string()
        if not self.remainder_string.is_empty():
            report["remainder"] = self.remainder_string.get_character_string()
        return report

    def get_formatted_text(self) -> str:
        """Return a framed, human-readable listing of the results."""
        rows = [
            ("SearchResultsFunctionChain", self.search_results_function_chain),
            ("FoundSearchTarget", self.found_search_target),
            ("FoundFirstNumericDigitInNumStr", self.found_first_numeric_digit_in_num_str),
            ("FoundDecimalSeparatorSymbols", self.found_decimal_separator_symbols),
            ("FoundNonZeroValue", self.found_non_zero_value),
            ("TargetInputParametersName", self.target_input_parameters_name),
            ("TargetStringLength", self.target_string_length),
            ("TargetStringSearchLength", self.target_string_search_length),
            ("TargetStringAdjustedSearchLength", self.target_string_adjusted_search_length),
            ("TargetStringStartingSearchIndex", self.target_string_starting_search_index),
            ("TargetStringCurrentSearchIndex", self.target_string_current_search_index),
            ("TargetStringFirstFoundIndex", self.target_string_first_found_index),
            ("TargetStringLastFoundIndex", self.target_string_last_found_index),
            ("TargetStringLastSearchIndex", self.target_string_last_search_index),
            ("TargetStringNextSearchIndex", self.target_string_next_search_index),
            ("TargetStringDescription1", self.target_string_description1),
            ("TargetStringDescription2", self.target_string_description2),
            ("TestInputParametersName", self.test_input_parameters_name),
            ("TestStringName", self.test_string_name),
            ("TestStringLength", self.test_string_length),
            ("TestStringStartingIndex", self.test_string_starting_index),
            ("TestStringFirstFoundIndex", self.test_string_first_found_index),
            ("TestStringLastFoundIndex", self.test_string_last_found_index),
            ("TestStringDescription1", self.test_string_description1),
            ("TestStringDescription2", self.test_string_description2),
            ("CollectionTestObjIndex", self.collection_test_obj_index),
            ("TextCharSearchType", self.text_char_search_type),
            ("ReplacementString", self.replacement_string),
            ("RemainderString", self.remainder_string),
            ("FoundCharacters", self.found_characters),
        ]
        return format_parameter_listing(
            "CharSearchRuneArrayResultsDto", rows, self.search_results_name
        )

    def __str__(self) -> str:
        return self.get_formatted_text()
