"""Test String (needle) parameters for character search operations."""

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
from runesearch.core.types import (
    CharacterSearchType,
    NumericSignValue,
    NumericSymbolClass,
    NumericSymbolLocation,
    NumericValueType,
    NumSignSymbolPosition,
    NumStrFormatType,
)
from runesearch.parameters.test_config import CharSearchTestConfigDto
from runesearch.utils.formatting import format_parameter_listing
from runesearch.utils.helpers import chain_prefix

DEFAULT_PARAMETERS_NAME = "TestInputParameters"
DEFAULT_STRING_NAME = "TestString"
DEFAULT_LENGTH_NAME = "TestStringLength"
DEFAULT_STARTING_INDEX_NAME = "TestStringStartingIndex"

# Fields shared with CharSearchTestConfigDto, config name -> parameter name
_CONFIG_FIELD_MAP = {
    "test_input_parameters_name": "test_input_parameters_name",
    "test_string_name": "test_string_name",
    "test_string_length_name": "test_string_length_name",
    "test_string_starting_index": "test_string_starting_index",
    "test_string_starting_index_name": "test_string_starting_index_name",
    "test_string_description1": "test_string_description1",
    "test_string_description2": "test_string_description2",
    "collection_test_obj_index": "collection_test_obj_index",
    "num_value_type": "num_value_type",
    "num_str_format_type": "num_str_format_type",
    "num_symbol_location": "num_sym_location",
    "num_symbol_class": "num_symbol_class",
    "num_sign_value": "num_sign_value",
    "primary_num_sign_position": "primary_num_sign_position",
    "secondary_num_sign_position": "secondary_num_sign_position",
    "text_char_search_type": "text_char_search_type",
}


class CharSearchTestInputParametersDto(BaseModel):
    """Test String input parameters for a single search operation.

    `test_string` references a caller-owned buffer. The numeric tags are
    passed through to the search results for number-string parsers; the
    search algorithms do not read them.
    """

    test_input_parameters_name: str = ""
    test_string: RuneArrayDto | None = None
    test_string_name: str = ""
    test_string_length: int = -1
    test_string_length_name: str = ""
    test_string_starting_index: int = 0
    test_string_starting_index_name: str = ""
    test_string_description1: str = ""
    test_string_description2: str = ""
    collection_test_obj_index: int = -1  # position in a parent collection, -1 if none
    num_value_type: NumericValueType = NumericValueType.NONE
    num_str_format_type: NumStrFormatType = NumStrFormatType.NONE
    num_sym_location: NumericSymbolLocation = NumericSymbolLocation.NONE
    num_symbol_class: NumericSymbolClass = NumericSymbolClass.NONE
    num_sign_value: NumericSignValue = NumericSignValue.NONE
    primary_num_sign_position: NumSignSymbolPosition = NumSignSymbolPosition.NONE
    secondary_num_sign_position: NumSignSymbolPosition = NumSignSymbolPosition.NONE
    text_char_search_type: CharacterSearchType = CharacterSearchType.NONE

    model_config = {
        "arbitrary_types_allowed": True,  # For RuneArrayDto
    }

    @classmethod
    def new(cls) -> CharSearchTestInputParametersDto:
        """Return an empty instance."""
        return cls()

    @classmethod
    def new_test_string(
        cls,
        test_string: RuneArrayDto,
        text_char_search_type: CharacterSearchType = CharacterSearchType.NONE,
        test_string_starting_index: int = 0,
        error_prefix: str = "",
    ) -> CharSearchTestInputParametersDto:
        """Build and validate Test parameters for `test_string`.

        When `text_char_search_type` is NONE the buffer's own search type is
        used.
        """
        prefix = chain_prefix(error_prefix, "CharSearchTestInputParametersDto.new_test_string()")
        if test_string is None:
            raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'test_string' is None!")
        if not text_char_search_type.is_valid():
            text_char_search_type = test_string.get_char_search_type()
        params = cls(
            test_string=test_string,
            test_string_starting_index=test_string_starting_index,
            text_char_search_type=text_char_search_type,
        )
        return params.validate_test_parameters(prefix)

    def load_test_config_dto(
        self, test_config: CharSearchTestConfigDto, error_prefix: str = ""
    ) -> None:
        """Copy every field of `test_config` into these parameters.

        Raises:
            NilReferenceError: If test_config is None
        """
        if test_config is None:
            prefix = chain_prefix(
                error_prefix, "CharSearchTestInputParametersDto.load_test_config_dto()"
            )
            raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'test_config' is None!")
        for config_field, param_field in _CONFIG_FIELD_MAP.items():
            setattr(self, param_field, getattr(test_config, config_field))

    def validate_test_parameters(self, error_prefix: str = "") -> CharSearchTestInputParametersDto:
        """Validate these parameters and return a normalized copy.

        The copy has default labels filled in and the buffer length
        recomputed. The receiver is not modified.

        Raises:
            NilReferenceError: If test_string is None
            EmptyBufferError: If test_string holds zero characters
            OutOfRangeError: If the starting index is out of range
        """
        prefix = chain_prefix(
            error_prefix, "CharSearchTestInputParametersDto.validate_test_parameters()"
        )
        normalized = self.model_copy()

        if normalized.test_string is None:
            raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'test_string' is None!")

        if not normalized.test_input_parameters_name:
            normalized.test_input_parameters_name = DEFAULT_PARAMETERS_NAME
        if not normalized.test_string_name:
            normalized.test_string_name = DEFAULT_STRING_NAME
        if not normalized.test_string_length_name:
            normalized.test_string_length_name = DEFAULT_LENGTH_NAME
        if not normalized.test_string_starting_index_name:
            normalized.test_string_starting_index_name = DEFAULT_STARTING_INDEX_NAME

        length_name = normalized.test_string_length_name
        start_name = normalized.test_string_starting_index_name

        length = normalized.test_string.get_rune_array_length()
        normalized.test_string_length = length
        if length == 0:
            raise EmptyBufferError(
                f"{prefix}\nERROR: Input parameter '{length_name}' is invalid!\n"
                f"'{length_name}' has a value of Zero (0).\n"
                f"'{normalized.test_string_name}' contains zero characters."
            )

        start = normalized.test_string_starting_index
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
                f"in '{normalized.test_string_name}'.\n"
                f"Last index in '{normalized.test_string_name}' = '{length - 1}'\n"
                f"{start_name} = '{start}'"
            )

        return normalized

    def validate_char_search_type(self, error_prefix: str = "") -> None:
        """Raise InvalidSearchTypeError if `text_char_search_type` is NONE."""
        prefix = chain_prefix(
            error_prefix, "CharSearchTestInputParametersDto.validate_char_search_type()"
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
        try:
            self.validate_test_parameters()
        except (NilReferenceError, EmptyBufferError, OutOfRangeError) as e:
            logger.debug(f"Test parameters invalid: {e}")
            return False
        return True

    def is_valid_instance_error(self, error_prefix: str = "") -> None:
        self.validate_test_parameters(
            chain_prefix(error_prefix, "CharSearchTestInputParametersDto.is_valid_instance_error()")
        )

    def copy_in(self, other: CharSearchTestInputParametersDto, error_prefix: str = "") -> None:
        """Overwrite every field with the values of `other` (buffer shared)."""
        if other is None:
            prefix = chain_prefix(error_prefix, "CharSearchTestInputParametersDto.copy_in()")
            raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'other' is None!")
        for field_name in type(self).model_fields:
            setattr(self, field_name, getattr(other, field_name))

    def copy_out(self) -> CharSearchTestInputParametersDto:
        return self.model_copy()

    def empty(self) -> None:
        self.copy_in(type(self)())

    def empty_test_string(self) -> None:
        self.test_string = None

    def equal_test_strings(self, other: CharSearchTestInputParametersDto) -> bool:
        """Compare the characters of both Test Strings. Two None references are equal."""
        if other is None:
            return False
        if self.test_string is None or other.test_string is None:
            return self.test_string is None and other.test_string is None
        return self.test_string.equal_char_arrays(other.test_string)

    def equal(self, other: CharSearchTestInputParametersDto) -> bool:
        if other is None or not self.equal_test_strings(other):
            return False
        return self.model_dump(exclude={"test_string"}) == other.model_dump(
            exclude={"test_string"}
        )

    def get_formatted_text(self) -> str:
        """Return a framed, human-readable listing of every field."""
        rows = [
            ("TestString", self.test_string),
            ("TestStringName", self.test_string_name),
            ("TestStringLength", self.test_string_length),
            ("TestStringLengthName", self.test_string_length_name),
            ("TestStringStartingIndex", self.test_string_starting_index),
            ("TestStringStartingIndexName", self.test_string_starting_index_name),
            ("TestStringDescription1", self.test_string_description1),
            ("TestStringDescription2", self.test_string_description2),
            ("CollectionTestObjIndex", self.collection_test_obj_index),
            ("NumValueType", self.num_value_type),
            ("NumStrFormatType", self.num_str_format_type),
            ("NumSymLocation", self.num_sym_location),
            ("NumSymbolClass", self.num_symbol_class),
            ("NumSignValue", self.num_sign_value),
            ("PrimaryNumSignPosition", self.primary_num_sign_position),
            ("SecondaryNumSignPosition", self.secondary_num_sign_position),
            ("TextCharSearchType", self.text_char_search_type),
        ]
        return format_parameter_listing(
            "CharSearchTestInputParametersDto", rows, self.test_input_parameters_name
        )

    def __str__(self) -> str:
        return self.get_formatted_text()


def validate_test_parameters(
    params: CharSearchTestInputParametersDto | None, error_prefix: str = ""
) -> CharSearchTestInputParametersDto:
    """Validate `params` and return its normalized copy.

    Raises:
        NilReferenceError: If params is None
    """
    prefix = chain_prefix(error_prefix, "validate_test_parameters()")
    if params is None:
        raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'params' is None!")
    return params.validate_test_parameters(prefix)
