"""Ordered collection of candidate Test Strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from loguru import logger

from runesearch.core.errors import EmptyBufferError, NilReferenceError, OutOfRangeError
from runesearch.core.rune_array import RuneArrayDto
from runesearch.core.types import CharacterSearchType
from runesearch.utils.helpers import chain_prefix

if TYPE_CHECKING:
    from runesearch.parameters.target import CharSearchTargetInputParametersDto
    from runesearch.parameters.test_config import CharSearchTestConfigDto
    from runesearch.search.results import CharSearchRuneArrayResultsDto


class RuneArrayCollection:
    """A list of RuneArrayDto objects searched in order.

    Members are deep copies; changing a buffer after adding it does not
    affect the collection.
    """

    def __init__(self, dtos: list[RuneArrayDto] | None = None) -> None:
        self.rune_array_dto_col: list[RuneArrayDto] = []
        for dto in dtos or []:
            self.add_rune_array_dto(dto)

    @classmethod
    def new_strings(
        cls,
        strings: list[str],
        search_type: CharacterSearchType = CharacterSearchType.LINEAR_TARGET_STARTING_INDEX,
        error_prefix: str = "",
    ) -> RuneArrayCollection:
        """Build a collection with one member per string."""
        prefix = chain_prefix(error_prefix, "RuneArrayCollection.new_strings()")
        collection = cls()
        for text in strings:
            collection.add_string(text, search_type, prefix)
        return collection

    def add_rune_array_dto(self, dto: RuneArrayDto, error_prefix: str = "") -> None:
        """Append a deep copy of `dto`."""
        if dto is None:
            prefix = chain_prefix(error_prefix, "RuneArrayCollection.add_rune_array_dto()")
            raise NilReferenceError(f"{prefix}\nError: Input parameter 'dto' is None!")
        self.rune_array_dto_col.append(dto.copy_out())

    def add_string(
        self,
        text: str,
        search_type: CharacterSearchType = CharacterSearchType.LINEAR_TARGET_STARTING_INDEX,
        error_prefix: str = "",
    ) -> None:
        """Append a new buffer holding the characters of `text`."""
        prefix = chain_prefix(error_prefix, "RuneArrayCollection.add_string()")
        self.rune_array_dto_col.append(RuneArrayDto.new_string(text, search_type, prefix))

    def get_rune_array_dto(self, index: int, error_prefix: str = "") -> RuneArrayDto:
        """Return a deep copy of the member at `index`.

        Raises:
            OutOfRangeError: If index is outside the collection
        """
        self._check_index(index, chain_prefix(error_prefix, "RuneArrayCollection.get_rune_array_dto()"))
        return self.rune_array_dto_col[index].copy_out()

    def delete_collection_element(self, index: int, error_prefix: str = "") -> None:
        """Remove the member at `index`.

        Raises:
            OutOfRangeError: If index is outside the collection
        """
        self._check_index(
            index, chain_prefix(error_prefix, "RuneArrayCollection.delete_collection_element()")
        )
        del self.rune_array_dto_col[index]

    def get_number_of_elements(self) -> int:
        return len(self.rune_array_dto_col)

    def empty(self) -> None:
        self.rune_array_dto_col = []

    def copy_in(self, other: RuneArrayCollection, error_prefix: str = "") -> None:
        """Replace the members with deep copies of those in `other`."""
        if other is None:
            prefix = chain_prefix(error_prefix, "RuneArrayCollection.copy_in()")
            raise NilReferenceError(f"{prefix}\nError: Input parameter 'other' is None!")
        self.rune_array_dto_col = [dto.copy_out() for dto in other.rune_array_dto_col]

    def copy_out(self) -> RuneArrayCollection:
        return RuneArrayCollection(self.rune_array_dto_col)

    def is_valid_collection_error(self, error_prefix: str = "") -> None:
        """Raise EmptyBufferError if the collection or any member is empty."""
        prefix = chain_prefix(error_prefix, "RuneArrayCollection.is_valid_collection_error()")
        if not self.rune_array_dto_col:
            raise EmptyBufferError(
                f"{prefix}\nError: The RuneArrayCollection is empty and contains zero members."
            )
        for idx, dto in enumerate(self.rune_array_dto_col):
            dto.is_valid_character_array_error(chain_prefix(prefix, f"rune_array_dto_col[{idx}]"))

    def search_for_text_characters(
        self,
        target_params: CharSearchTargetInputParametersDto,
        test_config: CharSearchTestConfigDto,
        error_prefix: str = "",
    ) -> CharSearchRuneArrayResultsDto:
        """Search the Target String with each member until one matches.

        The first successful search wins and its results carry the member's
        position in `collection_test_obj_index`. When no member matches, the
        results of the last attempt are returned.

        Raises:
            EmptyBufferError: If the collection is empty
            InvalidInputError: If a search fails validation
        """
        prefix = chain_prefix(error_prefix, "RuneArrayCollection.search_for_text_characters()")
        if not self.rune_array_dto_col:
            raise EmptyBufferError(
                f"{prefix}\nError: The RuneArrayCollection is empty and contains zero members."
            )

        results = None
        for idx, dto in enumerate(self.rune_array_dto_col):
            results = dto.search_for_text_character_string(
                target_params, test_config, chain_prefix(prefix, f"rune_array_dto_col[{idx}]")
            )
            results.collection_test_obj_index = idx
            if results.found_search_target:
                logger.debug(f"Collection member {idx} matched '{dto.get_character_string()}'")
                return results

        return results

    def _check_index(self, index: int, prefix: str) -> None:
        length = len(self.rune_array_dto_col)
        if index < 0 or index >= length:
            raise OutOfRangeError(
                f"{prefix}\nError: Input parameter 'index' is out of range!\n"
                f"Collection length = '{length}'\nindex = '{index}'"
            )

    def __len__(self) -> int:
        return len(self.rune_array_dto_col)

    def __iter__(self) -> Iterator[RuneArrayDto]:
        return iter(self.rune_array_dto_col)
