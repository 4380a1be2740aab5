"""Character buffer used as the Target String or Test String of a search."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from loguru import logger

from runesearch.core.errors import (
    EmptyBufferError,
    InvalidInputError,
    InvalidSearchTypeError,
    NilReferenceError,
    OutOfRangeError,
)
from runesearch.core.types import CharacterSearchType
from runesearch.utils.helpers import chain_prefix

if TYPE_CHECKING:
    from runesearch.parameters.target import CharSearchTargetInputParametersDto
    from runesearch.parameters.test_config import CharSearchTestConfigDto
    from runesearch.search.results import CharSearchRuneArrayResultsDto

NUMERIC_CHARACTERS = "0123456789"
LATIN_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _check_char(char: str, prefix: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidInputError(
            f"{prefix}\nError: Input parameter 'char' is invalid!\n"
            f"A character must be a string of length one (1). char = {char!r}"
        )


def _to_chars(chars: Iterable[str], prefix: str) -> list[str]:
    """Flatten strings/characters into a list of single characters."""
    result: list[str] = []
    for item in chars:
        if not isinstance(item, str):
            raise InvalidInputError(
                f"{prefix}\nError: Characters must be strings. Received {item!r}"
            )
        result.extend(item)
    return result


class RuneArrayDto:
    """An owned, growable sequence of Unicode characters.

    Each element of ``chars_array`` holds exactly one code point. The buffer
    also carries two free-text descriptions and a character search type which
    is used when the buffer serves as a Test String and no other search type
    has been specified.

    Attributes:
        chars_array: The characters, in order
        description1: Optional description
        description2: Optional description
    """

    def __init__(
        self,
        chars: Iterable[str] = (),
        description1: str = "",
        description2: str = "",
        search_type: CharacterSearchType = CharacterSearchType.LINEAR_TARGET_STARTING_INDEX,
    ) -> None:
        self.chars_array: list[str] = _to_chars(chars, "RuneArrayDto()")
        self.description1 = description1
        self.description2 = description2
        self._char_search_type = search_type

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def new_string(
        cls,
        text: str,
        search_type: CharacterSearchType = CharacterSearchType.LINEAR_TARGET_STARTING_INDEX,
        error_prefix: str = "",
    ) -> RuneArrayDto:
        """Create a buffer from a string.

        Raises:
            EmptyBufferError: If text is empty
            InvalidSearchTypeError: If search_type is NONE
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.new_string()")
        if not text:
            raise EmptyBufferError(
                f"{prefix}\nError: Input parameter 'text' is invalid!\n"
                "'text' is an empty string with a length of zero (0)."
            )
        _check_search_type(search_type, prefix)
        return cls(text, search_type=search_type)

    @classmethod
    def new_string_default(cls, text: str) -> RuneArrayDto:
        """Create a buffer from a string without validation."""
        return cls(text)

    @classmethod
    def new_runes(
        cls,
        chars: Iterable[str],
        search_type: CharacterSearchType = CharacterSearchType.LINEAR_TARGET_STARTING_INDEX,
        error_prefix: str = "",
    ) -> RuneArrayDto:
        """Create a buffer from a sequence of characters.

        Raises:
            EmptyBufferError: If chars is empty
            InvalidSearchTypeError: If search_type is NONE
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.new_runes()")
        char_list = _to_chars(chars, prefix)
        if not char_list:
            raise EmptyBufferError(
                f"{prefix}\nError: Input parameter 'chars' is invalid!\n"
                "'chars' is empty and has a length of zero (0)."
            )
        _check_search_type(search_type, prefix)
        return cls(char_list, search_type=search_type)

    @classmethod
    def new_runes_default(cls, chars: Iterable[str]) -> RuneArrayDto:
        """Create a buffer from characters without validation."""
        return cls(chars)

    @classmethod
    def new_strings(
        cls,
        strings: Iterable[str],
        search_type: CharacterSearchType = CharacterSearchType.LINEAR_TARGET_STARTING_INDEX,
        error_prefix: str = "",
    ) -> RuneArrayDto:
        """Concatenate several strings into one buffer."""
        prefix = chain_prefix(error_prefix, "RuneArrayDto.new_strings()")
        return cls.new_runes(list(strings), search_type, prefix)

    @classmethod
    def new_rune_array_dtos(cls, *dtos: RuneArrayDto, error_prefix: str = "") -> RuneArrayDto:
        """Concatenate the characters of several buffers into a new buffer.

        The new buffer takes the search type of the first input.

        Raises:
            NilReferenceError: If any input is None
            EmptyBufferError: If the combined length is zero
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.new_rune_array_dtos()")
        chars: list[str] = []
        for idx, dto in enumerate(dtos):
            if dto is None:
                raise NilReferenceError(f"{prefix}\nError: dtos[{idx}] is None!")
            chars.extend(dto.chars_array)
        if not chars:
            raise EmptyBufferError(
                f"{prefix}\nError: The input RuneArrayDto objects contain zero characters."
            )
        return cls(chars, search_type=dtos[0].get_char_search_type())

    @classmethod
    def new_numeric_characters(cls) -> RuneArrayDto:
        """Buffer holding the digits '0' through '9'."""
        return cls(NUMERIC_CHARACTERS)

    @classmethod
    def new_latin_alphabet(cls) -> RuneArrayDto:
        """Buffer holding 'A'-'Z' followed by 'a'-'z'."""
        return cls(LATIN_ALPHABET)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_char(self, char: str, add_trailing_char: bool = True, error_prefix: str = "") -> None:
        """Append (or prepend) a single character."""
        prefix = chain_prefix(error_prefix, "RuneArrayDto.add_char()")
        _check_char(char, prefix)
        if add_trailing_char:
            self.chars_array.append(char)
        else:
            self.chars_array.insert(0, char)

    def add_runes(
        self, chars: Iterable[str], add_trailing_chars: bool = True, error_prefix: str = ""
    ) -> None:
        """Append (or prepend) a sequence of characters.

        Raises:
            EmptyBufferError: If chars is empty
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.add_runes()")
        new_chars = _to_chars(chars, prefix)
        if not new_chars:
            raise EmptyBufferError(
                f"{prefix}\nError: Input parameter 'chars' is empty and has a length of zero (0)."
            )
        if add_trailing_chars:
            self.chars_array.extend(new_chars)
        else:
            self.chars_array[:0] = new_chars

    def add_strings(self, *strings: str, add_trailing_chars: bool = True, error_prefix: str = "") -> None:
        """Append (or prepend) the characters of one or more strings."""
        prefix = chain_prefix(error_prefix, "RuneArrayDto.add_strings()")
        self.add_runes(strings, add_trailing_chars, prefix)

    def add_rune_array_dtos(
        self, *dtos: RuneArrayDto, add_trailing_chars: bool = True, error_prefix: str = ""
    ) -> None:
        """Append (or prepend) the characters of other buffers."""
        prefix = chain_prefix(error_prefix, "RuneArrayDto.add_rune_array_dtos()")
        chars: list[str] = []
        for idx, dto in enumerate(dtos):
            if dto is None:
                raise NilReferenceError(f"{prefix}\nError: dtos[{idx}] is None!")
            chars.extend(dto.chars_array)
        self.add_runes(chars, add_trailing_chars, prefix)

    def extend_rune_array(
        self, char: str, count: int, add_trailing_chars: bool = True, error_prefix: str = ""
    ) -> None:
        """Pad the buffer with `count` copies of `char`.

        Raises:
            OutOfRangeError: If count is less than one
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.extend_rune_array()")
        if count < 1:
            raise OutOfRangeError(
                f"{prefix}\nError: Input parameter 'count' is invalid!\n"
                f"'count' has a value less than one (1).\ncount = '{count}'"
            )
        _check_char(char, prefix)
        self.add_runes([char] * count, add_trailing_chars, prefix)

    def delete_leading_trailing_chars(
        self, count: int, delete_trailing_chars: bool, error_prefix: str = ""
    ) -> None:
        """Remove `count` characters from the end (or start) of the buffer.

        Deleting at least as many characters as the buffer holds empties it.
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.delete_leading_trailing_chars()")
        if count < 0:
            raise OutOfRangeError(
                f"{prefix}\nError: Input parameter 'count' is negative.\ncount = '{count}'"
            )
        if count == 0:
            return
        if count >= len(self.chars_array):
            self.chars_array.clear()
        elif delete_trailing_chars:
            del self.chars_array[-count:]
        else:
            del self.chars_array[:count]

    def set_rune_array(self, chars: Iterable[str], error_prefix: str = "") -> None:
        """Replace the characters with a copy of `chars`.

        Raises:
            EmptyBufferError: If chars is empty
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.set_rune_array()")
        new_chars = _to_chars(chars, prefix)
        if not new_chars:
            raise EmptyBufferError(
                f"{prefix}\nError: Input parameter 'chars' is invalid!\n"
                "'chars' is empty and has a length of zero."
            )
        self.chars_array = new_chars

    def set_string(self, text: str, error_prefix: str = "") -> None:
        """Replace the characters with those of `text`."""
        self.set_rune_array(text, chain_prefix(error_prefix, "RuneArrayDto.set_string()"))

    def set_runes_default(self, chars: Iterable[str]) -> None:
        """Replace the characters without validation."""
        self.chars_array = _to_chars(chars, "RuneArrayDto.set_runes_default()")

    def set_str_default(self, text: str) -> None:
        """Replace the characters with those of `text` without validation."""
        self.chars_array = list(text)

    def set_description1(self, description: str) -> None:
        self.description1 = description

    def set_description2(self, description: str) -> None:
        self.description2 = description

    def set_character_search_type(
        self, search_type: CharacterSearchType, error_prefix: str = ""
    ) -> None:
        """Set the search type used when this buffer is a Test String.

        Raises:
            InvalidSearchTypeError: If search_type is NONE
        """
        prefix = chain_prefix(error_prefix, "RuneArrayDto.set_character_search_type()")
        _check_search_type(search_type, prefix)
        self._char_search_type = search_type

    def empty(self) -> None:
        """Reset every field. The search type becomes NONE."""
        self.chars_array = []
        self.description1 = ""
        self.description2 = ""
        self._char_search_type = CharacterSearchType.NONE

    def empty_chars_array(self) -> None:
        """Remove all characters, keeping descriptions and search type."""
        self.chars_array = []

    def copy_in(self, other: RuneArrayDto, error_prefix: str = "") -> None:
        """Overwrite this buffer with a deep copy of `other`."""
        prefix = chain_prefix(error_prefix, "RuneArrayDto.copy_in()")
        if other is None:
            raise NilReferenceError(f"{prefix}\nError: Input parameter 'other' is None!")
        self.chars_array = list(other.chars_array)
        self.description1 = other.description1
        self.description2 = other.description2
        self._char_search_type = other.get_char_search_type()

    def copy_out(self) -> RuneArrayDto:
        """Return a deep copy of this buffer."""
        return RuneArrayDto(
            self.chars_array,
            description1=self.description1,
            description2=self.description2,
            search_type=self._char_search_type,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_character_string(self) -> str:
        return "".join(self.chars_array)

    def get_rune_array(self) -> list[str]:
        """Return a copy of the characters."""
        return list(self.chars_array)

    def get_rune_array_length(self) -> int:
        return len(self.chars_array)

    def get_char_search_type(self) -> CharacterSearchType:
        return self._char_search_type

    def get_rune_array_description1(self) -> str:
        return self.description1

    def get_rune_array_description2(self) -> str:
        return self.description2

    def get_count_leading_zeros(self) -> int:
        """Count consecutive '0' characters at the start of the buffer."""
        count = 0
        for char in self.chars_array:
            if char != "0":
                break
            count += 1
        return count

    def get_count_trailing_zeros(self) -> int:
        """Count consecutive '0' characters at the end of the buffer."""
        count = 0
        for char in reversed(self.chars_array):
            if char != "0":
                break
            count += 1
        return count

    def is_all_numeric_digits(self) -> bool:
        """True if the buffer is non-empty and holds only ASCII digits."""
        if not self.chars_array:
            return False
        return all("0" <= char <= "9" for char in self.chars_array)

    def is_all_numeric_zeros(self) -> bool:
        """True if the buffer is non-empty and holds only '0' characters."""
        if not self.chars_array:
            return False
        return all(char == "0" for char in self.chars_array)

    def is_empty(self) -> bool:
        return not self.chars_array

    def is_valid_character_array(self) -> bool:
        return bool(self.chars_array)

    def is_valid_character_array_error(self, error_prefix: str = "") -> None:
        """Raise EmptyBufferError if the buffer holds zero characters."""
        prefix = chain_prefix(error_prefix, "RuneArrayDto.is_valid_character_array_error()")
        if not self.chars_array:
            raise EmptyBufferError(
                f"{prefix}\nError: The Character Array for this instance of\n"
                "RuneArrayDto is invalid!\n"
                "RuneArrayDto.chars_array is empty, has a length\n"
                "of zero and therefore contains zero characters."
            )

    def is_valid_character_search_type(self) -> bool:
        return self._char_search_type.is_valid()

    def is_valid_character_search_type_error(self, error_prefix: str = "") -> None:
        """Raise InvalidSearchTypeError if the search type is NONE."""
        prefix = chain_prefix(
            error_prefix, "RuneArrayDto.is_valid_character_search_type_error()"
        )
        _check_search_type(self._char_search_type, prefix)

    def equal(self, other: RuneArrayDto | None) -> bool:
        """Compare characters, descriptions and search type."""
        if other is None:
            return False
        return (
            self.chars_array == other.chars_array
            and self.description1 == other.description1
            and self.description2 == other.description2
            and self._char_search_type == other.get_char_search_type()
        )

    def equal_char_arrays(self, other: RuneArrayDto | None) -> bool:
        """Compare characters only."""
        if other is None:
            return False
        return self.chars_array == other.chars_array

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_for_text_character_string(
        self,
        target_params: CharSearchTargetInputParametersDto,
        test_config: CharSearchTestConfigDto,
        error_prefix: str = "",
    ) -> CharSearchRuneArrayResultsDto:
        """Search a Target String using this buffer as the Test String.

        The search type is taken from the target parameters if valid, then
        from the test config, then from this buffer's own search type.

        Args:
            target_params: Target String parameters (the haystack)
            test_config: Labels, tags and search type for the Test String
            error_prefix: Error-prefix chain of the caller

        Returns:
            Search results. On success `found_characters` holds a copy of
            this buffer.

        Raises:
            InvalidSearchTypeError: If no valid search type can be resolved
            InvalidInputError: If either parameter set fails validation
        """
        # pylint: disable=import-outside-toplevel
        from runesearch.parameters.test_string import CharSearchTestInputParametersDto
        from runesearch.search.executor import character_search_executor

        prefix = chain_prefix(error_prefix, "RuneArrayDto.search_for_text_character_string()")

        if target_params is None:
            raise NilReferenceError(
                f"{prefix}\nError: Input parameter 'target_params' is None!"
            )

        test_params = CharSearchTestInputParametersDto.new()
        test_params.load_test_config_dto(test_config, prefix)
        if not test_params.test_input_parameters_name:
            test_params.test_input_parameters_name = "RuneArrayDto"

        if target_params.text_char_search_type.is_valid():
            test_params.text_char_search_type = target_params.text_char_search_type
        elif not test_params.text_char_search_type.is_valid():
            if not self._char_search_type.is_valid():
                raise InvalidSearchTypeError(
                    f"{prefix}\nError: Both Input Parameters Search Type and\n"
                    "RuneArrayDto Search Type are invalid.\n"
                    "The Search Operation is Terminating!\n"
                    f"Input Parameters Search Type = '{test_params.text_char_search_type.label}'\n"
                    f"RuneArrayDto Search Type = '{self._char_search_type.label}'"
                )
            test_params.text_char_search_type = self._char_search_type

        test_params.test_string = self
        if not test_params.test_string_name:
            test_params.test_string_name = "RuneArrayDto.CharsArray"
        if not test_params.test_string_length_name:
            test_params.test_string_length_name = "RuneArrayDto Length"
        test_params.test_string_starting_index = 0

        test_params = test_params.validate_test_parameters(prefix)

        results = character_search_executor(target_params, test_params, prefix)

        if results.found_search_target:
            results.found_characters = self.copy_out()

        logger.debug(
            f"RuneArrayDto '{self.get_character_string()}' search "
            f"({test_params.text_char_search_type.label}): found={results.found_search_target}"
        )
        return results

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.chars_array)

    def __iter__(self):
        return iter(self.chars_array)

    def __getitem__(self, index):
        return self.chars_array[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuneArrayDto):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # mutable buffer

    def __str__(self) -> str:
        return self.get_character_string()

    def __repr__(self) -> str:
        return (
            f"RuneArrayDto({self.get_character_string()!r}, "
            f"search_type={self._char_search_type.name})"
        )


def _check_search_type(search_type: CharacterSearchType, prefix: str) -> None:
    if not isinstance(search_type, CharacterSearchType) or not search_type.is_valid():
        raise InvalidSearchTypeError(
            f"{prefix}\nError: The Character Search Type is invalid!\n"
            "Character Search Type must be set to one of these values:\n"
            "  CharacterSearchType.LINEAR_TARGET_STARTING_INDEX\n"
            "  CharacterSearchType.SINGLE_TARGET_CHAR\n"
            "  CharacterSearchType.LINEAR_END_OF_STRING\n"
            f"Current value: {search_type!r}"
        )
