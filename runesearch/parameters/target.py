"""Target String (haystack) parameters for character search operations.

A search compares the characters of a Target String against those of a Test
String. The Target String parameters carry a reference to the caller-owned
buffer together with the index bookkeeping that bounds the search window.
"""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel

from runesearch.core.errors import (
    EmptyBufferError,
    InvalidSearchTypeError,
    NilReferenceError,
    OutOfRangeError,
)
from runesearch.core.rune_array import RuneArrayDto
from runesearch.core.types import CharacterSearchType
from runesearch.utils.formatting import format_parameter_listing
from runesearch.utils.helpers import chain_prefix

DEFAULT_PARAMETERS_NAME = "TargetInputParameters"
DEFAULT_STRING_NAME = "TargetString"
DEFAULT_LENGTH_NAME = "TargetStringLength"
DEFAULT_STARTING_INDEX_NAME = "TargetStringStartingSearchIndex"
DEFAULT_SEARCH_LENGTH_NAME = "TargetStringSearchLength"

# Search length meaning "search through the last character"
SEARCH_TO_END = -1


class CharSearchTargetInputParametersDto(BaseModel):
    """Target String input parameters for a single search operation.

    `target_string` is a reference to a buffer owned by the caller. It is
    never copied, so the buffer must not be modified while a search is
    running.

    Derived lengths and cursors default to -1 (unset) and are filled in by
    validation. `target_string_search_length` of -1 extends the search window
    to the end of the Target String.
    """

    target_input_parameters_name: str = ""
    target_string: RuneArrayDto | None = None
    target_string_name: str = ""
    target_string_length: int = -1
    target_string_length_name: str = ""
    target_string_starting_search_index: int = 0
    target_string_starting_search_index_name: str = ""
    target_string_current_search_index: int = -1
    target_string_next_search_index: int = -1
    target_string_search_length: int = SEARCH_TO_END
    target_string_search_length_name: str = ""
    target_string_adjusted_search_length: int = -1
    target_string_description1: str = ""
    target_string_description2: str = ""

    # Set by number-string parsers; not read by the search algorithms
    found_first_numeric_digit_in_num_str: bool = False
    found_decimal_separator_symbols: bool = False
    found_non_zero_value: bool = False

    text_char_search_type: CharacterSearchType = CharacterSearchType.NONE

    request_found_test_characters: bool = False
    request_remainder_string: bool = False
    request_replacement_string: bool = False

    model_config = {
        "arbitrary_types_allowed": True,  # For RuneArrayDto
    }

    @classmethod
    def new(cls) -> CharSearchTargetInputParametersDto:
        """Return an empty instance."""
        return cls()

    @classmethod
    def new_target_string(
        cls,
        target_string: RuneArrayDto,
        target_input_parameters_name: str = "",
        target_string_starting_search_index: int = 0,
        target_string_search_length: int = SEARCH_TO_END,
        error_prefix: str = "",
    ) -> CharSearchTargetInputParametersDto:
        """Build and validate Target parameters for `target_string`.

        Raises:
            NilReferenceError: If target_string is None
            EmptyBufferError: If target_string is empty
            OutOfRangeError: If the index or search length is invalid
        """
        prefix = chain_prefix(error_prefix, "CharSearchTargetInputParametersDto.new_target_string()")

        if target_string is None:
            raise NilReferenceError(
                f"{prefix}\nERROR: Input parameter 'target_string' is None!"
            )
        if target_string.get_rune_array_length() == 0:
            raise EmptyBufferError(
                f"{prefix}\nERROR: Input parameter 'target_string' is empty\n"
                "and has a length of zero!"
            )
        if target_string_starting_search_index < 0:
            raise OutOfRangeError(
                f"{prefix}\nERROR: Input parameter 'target_string_starting_search_index' is invalid!\n"
                "'target_string_starting_search_index' has a value less than zero (0).\n"
                f"target_string_starting_search_index = '{target_string_starting_search_index}'"
            )
        if target_string_search_length < SEARCH_TO_END:
            raise OutOfRangeError(
                f"{prefix}\nERROR: Input parameter 'target_string_search_length' is invalid!\n"
                "'target_string_search_length' has a value less than minus one (-1).\n"
                f"target_string_search_length = '{target_string_search_length}'"
            )

        params = cls(
            target_string=target_string,
            target_input_parameters_name=target_input_parameters_name,
            target_string_starting_search_index=target_string_starting_search_index,
            target_string_search_length=target_string_search_length,
        )
        return params.validate_target_parameters(prefix)

    def validate_target_parameters(self, error_prefix: str = "") -> CharSearchTargetInputParametersDto:
        """Validate these parameters and return a normalized copy.

        The copy has default labels filled in, the buffer length recomputed,
        the adjusted search length computed and the current search index
        moved up to the starting index when it lags behind. The receiver is
        not modified and the copy shares the same buffer reference.

        Raises:
            NilReferenceError: If target_string is None
            EmptyBufferError: If target_string holds zero characters
            OutOfRangeError: If the starting index, search length or current
                search index is out of range
        """
        prefix = chain_prefix(
            error_prefix, "CharSearchTargetInputParametersDto.validate_target_parameters()"
        )
        normalized = self.model_copy()

        if normalized.target_string is None:
            raise NilReferenceError(
                f"{prefix}\nERROR: Input parameter 'target_string' is None!"
            )

        if not normalized.target_input_parameters_name:
            normalized.target_input_parameters_name = DEFAULT_PARAMETERS_NAME
        if not normalized.target_string_name:
            normalized.target_string_name = DEFAULT_STRING_NAME
        if not normalized.target_string_length_name:
            normalized.target_string_length_name = DEFAULT_LENGTH_NAME
        if not normalized.target_string_starting_search_index_name:
            normalized.target_string_starting_search_index_name = DEFAULT_STARTING_INDEX_NAME
        if not normalized.target_string_search_length_name:
            normalized.target_string_search_length_name = DEFAULT_SEARCH_LENGTH_NAME

        length_name = normalized.target_string_length_name
        start_name = normalized.target_string_starting_search_index_name
        search_length_name = normalized.target_string_search_length_name

        length = normalized.target_string.get_rune_array_length()
        normalized.target_string_length = length
        if length == 0:
            raise EmptyBufferError(
                f"{prefix}\nERROR: Input parameter '{length_name}' is invalid!\n"
                f"'{length_name}' has a value of Zero (0).\n"
                f"'{normalized.target_string_name}' contains zero characters."
            )

        start = normalized.target_string_starting_search_index
        if start < 0:
            raise OutOfRangeError(
                f"{prefix}\nERROR: Input parameter '{start_name}' is invalid!\n"
                f"'{start_name}' has a value less than zero (0).\n"
                f"{start_name} = '{start}'"
            )
        if start >= length:
            raise OutOfRangeError(
                f"{prefix}\nERROR: Input parameter '{start_name}' is invalid!\n"
                f"'{start_name}' has a value greater than the last index\n"
                f"in '{normalized.target_string_name}'.\n"
                f"Last index in '{normalized.target_string_name}' = '{length - 1}'\n"
                f"{start_name} = '{start}'"
            )

        search_length = normalized.target_string_search_length
        if search_length < SEARCH_TO_END:
            raise OutOfRangeError(
                f"{prefix}\nERROR: Input parameter '{search_length_name}' is invalid!\n"
                f"'{search_length_name}' has a value less than minus one (-1).\n"
                f"{search_length_name} = '{search_length}'"
            )
        if search_length == 0:
            raise OutOfRangeError(
                f"{prefix}\nERROR: Input parameter '{search_length_name}' is invalid!\n"
                f"'{search_length_name}' has a value of Zero (0)."
            )

        # Offset first, then clamp to the buffer length
        if search_length == SEARCH_TO_END:
            adjusted = length - start
        else:
            adjusted = search_length
        adjusted = start + adjusted
        if adjusted > length:
            adjusted = length
        normalized.target_string_adjusted_search_length = adjusted

        if normalized.target_string_current_search_index < start:
            normalized.target_string_current_search_index = start
        if normalized.target_string_current_search_index >= length:
            raise OutOfRangeError(
                f"{prefix}\nERROR: 'target_string_current_search_index' is invalid!\n"
                "'target_string_current_search_index' has a value greater than the\n"
                f"last index in '{normalized.target_string_name}'.\n"
                f"Last index = '{length - 1}'\n"
                f"target_string_current_search_index = "
                f"'{normalized.target_string_current_search_index}'"
            )

        return normalized

    def validate_char_search_type(self, error_prefix: str = "") -> None:
        """Raise InvalidSearchTypeError if `text_char_search_type` is NONE."""
        prefix = chain_prefix(
            error_prefix, "CharSearchTargetInputParametersDto.validate_char_search_type()"
        )
        if not self.text_char_search_type.is_valid():
            raise InvalidSearchTypeError(
                f"{prefix}\nERROR: The Character Search Type is invalid!\n"
                "Character Search Type must be set to one of these values:\n"
                "  CharacterSearchType.LINEAR_TARGET_STARTING_INDEX\n"
                "  CharacterSearchType.SINGLE_TARGET_CHAR\n"
                "  CharacterSearchType.LINEAR_END_OF_STRING\n"
                f"Current value: {self.text_char_search_type.label}"
            )

    def is_valid_instance(self) -> bool:
        """Return True if validation would succeed."""
        try:
            self.validate_target_parameters()
        except (NilReferenceError, EmptyBufferError, OutOfRangeError) as e:
            logger.debug(f"Target parameters invalid: {e}")
            return False
        return True

    def is_valid_instance_error(self, error_prefix: str = "") -> None:
        """Raise the validation error, if any, without returning the copy."""
        self.validate_target_parameters(
            chain_prefix(error_prefix, "CharSearchTargetInputParametersDto.is_valid_instance_error()")
        )

    def copy_in(self, other: CharSearchTargetInputParametersDto, error_prefix: str = "") -> None:
        """Overwrite every field with the values of `other`.

        The Target String reference is shared, not copied. No validation is
        performed.
        """
        if other is None:
            prefix = chain_prefix(error_prefix, "CharSearchTargetInputParametersDto.copy_in()")
            raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'other' is None!")
        for field_name in type(self).model_fields:
            setattr(self, field_name, getattr(other, field_name))

    def copy_out(self) -> CharSearchTargetInputParametersDto:
        """Return a copy sharing the same Target String reference."""
        return self.model_copy()

    def empty(self) -> None:
        """Reset every field to its empty value."""
        self.copy_in(type(self)())

    def empty_target_string(self) -> None:
        """Detach the Target String reference."""
        self.target_string = None

    def equal_target_strings(self, other: CharSearchTargetInputParametersDto) -> bool:
        """Compare the characters of both Target Strings. Two None references are equal."""
        if other is None:
            return False
        if self.target_string is None or other.target_string is None:
            return self.target_string is None and other.target_string is None
        return self.target_string.equal_char_arrays(other.target_string)

    def equal(self, other: CharSearchTargetInputParametersDto) -> bool:
        """Compare all fields. Target Strings are compared by characters."""
        if other is None or not self.equal_target_strings(other):
            return False
        return self.model_dump(exclude={"target_string"}) == other.model_dump(
            exclude={"target_string"}
        )

    def get_parameter_text_listing(self) -> str:
        """Return a framed, human-readable listing of every field."""
        rows = [
            ("TargetString", self.target_string),
            ("TargetStringName", self.target_string_name),
            ("TargetStringLength", self.target_string_length),
            ("TargetStringLengthName", self.target_string_length_name),
            ("TargetStringStartingSearchIndex", self.target_string_starting_search_index),
            (
                "TargetStringStartingSearchIndexName",
                self.target_string_starting_search_index_name,
            ),
            ("TargetStringCurrentSearchIndex", self.target_string_current_search_index),
            ("TargetStringNextSearchIndex", self.target_string_next_search_index),
            ("TargetStringSearchLength", self.target_string_search_length),
            ("TargetStringSearchLengthName", self.target_string_search_length_name),
            ("TargetStringAdjustedSearchLength", self.target_string_adjusted_search_length),
            ("TargetStringDescription1", self.target_string_description1),
            ("TargetStringDescription2", self.target_string_description2),
            ("FoundFirstNumericDigitInNumStr", self.found_first_numeric_digit_in_num_str),
            ("FoundDecimalSeparatorSymbols", self.found_decimal_separator_symbols),
            ("FoundNonZeroValue", self.found_non_zero_value),
            ("TextCharSearchType", self.text_char_search_type),
            ("RequestFoundTestCharacters", self.request_found_test_characters),
            ("RequestRemainderString", self.request_remainder_string),
            ("RequestReplacementString", self.request_replacement_string),
        ]
        return format_parameter_listing(
            "CharSearchTargetInputParametersDto", rows, self.target_input_parameters_name
        )

    def __str__(self) -> str:
        return self.get_parameter_text_listing()


def validate_target_parameters(
    params: CharSearchTargetInputParametersDto | None, error_prefix: str = ""
) -> CharSearchTargetInputParametersDto:
    """Validate `params` and return its normalized copy.

    Raises:
        NilReferenceError: If params is None
    """
    prefix = chain_prefix(error_prefix, "validate_target_parameters()")
    if params is None:
        raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'params' is None!")
    return params.validate_target_parameters(prefix)
