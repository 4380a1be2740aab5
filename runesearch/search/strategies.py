"""Search algorithms for comparing a Target String against a Test String.

Each algorithm is a SearchStrategy. `search()` validates both parameter sets,
builds a fresh results object and hands the normalized inputs to the
algorithm. The inputs passed by the caller are never modified.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger

from runesearch.core.errors import InvalidSearchTypeError, NilReferenceError
from runesearch.core.rune_array import RuneArrayDto
from runesearch.core.types import CharacterSearchType
from runesearch.parameters.target import CharSearchTargetInputParametersDto
from runesearch.parameters.test_string import CharSearchTestInputParametersDto
from runesearch.search.results import CharSearchRuneArrayResultsDto
from runesearch.utils.helpers import chain_prefix


class SearchStrategy(ABC):
    """Base class for the character search algorithms."""

    search_type: CharacterSearchType = CharacterSearchType.NONE
    name: str = "SearchStrategy"

    def search(
        self,
        target: CharSearchTargetInputParametersDto,
        test: CharSearchTestInputParametersDto,
        error_prefix: str = "",
    ) -> CharSearchRuneArrayResultsDto:
        """Run the search and return a new results object.

        Args:
            target: Target String parameters (the haystack)
            test: Test String parameters (the needle)
            error_prefix: Error-prefix chain of the caller

        Returns:
            Results with `found_search_target` set either way

        Raises:
            InvalidInputError: If either parameter set fails validation
        """
        prefix = chain_prefix(error_prefix, f"{self.name}.search()")
        if target is None:
            raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'target' is None!")
        if test is None:
            raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'test' is None!")

        target = target.validate_target_parameters(prefix)
        test = test.validate_test_parameters(prefix)

        results = CharSearchRuneArrayResultsDto.new()
        results.load_target_base_input_parameters(target)
        results.load_test_base_input_parameters(test)
        results.text_char_search_type = self.search_type
        results.search_results_function_chain = prefix

        self._run(target, test, results)

        logger.debug(
            f"{self.name}: found={results.found_search_target} "
            f"target_first={results.target_string_first_found_index} "
            f"target_last={results.target_string_last_found_index}"
        )
        return results

    @abstractmethod
    def _run(
        self,
        target: CharSearchTargetInputParametersDto,
        test: CharSearchTestInputParametersDto,
        results: CharSearchRuneArrayResultsDto,
    ) -> None:
        """Compare the validated inputs and record the outcome in `results`."""


def _record_match(
    target: CharSearchTargetInputParametersDto,
    test: CharSearchTestInputParametersDto,
    results: CharSearchRuneArrayResultsDto,
    target_first: int,
    target_last: int,
    test_first: int,
    test_last: int,
    remainder_chars: list[str] | None = None,
) -> None:
    """Fill in the found-indices shared by every successful search.

    The remainder runs from the last matched target character to the end of
    the Target String unless `remainder_chars` is given.
    """
    results.found_search_target = True
    results.test_string_first_found_index = test_first
    results.test_string_last_found_index = test_last
    results.target_string_first_found_index = target_first
    results.target_string_last_found_index = target_last
    results.target_string_last_search_index = target_last
    results.target_string_current_search_index = target_last

    next_index = target_last + 1
    if next_index >= target.target_string_length:
        next_index = -1
    results.target_string_next_search_index = next_index

    if target.request_found_test_characters:
        results.found_characters = test.test_string.copy_out()

    if target.request_remainder_string and next_index != -1:
        if remainder_chars is None:
            remainder_chars = target.target_string.chars_array[target_last:]
        results.remainder_string = RuneArrayDto(remainder_chars)


class LinearTargetStartingIndexSearch(SearchStrategy):
    """Match the whole Test String starting exactly at the current target index.

    A single attempt: the first mismatch ends the search. Callers wanting a
    scanning search advance the starting index themselves or use
    LinearEndOfStringSearch.
    """

    search_type = CharacterSearchType.LINEAR_TARGET_STARTING_INDEX
    name = "LinearTargetStartingIndexSearch"

    def _run(self, target, test, results):
        target_chars = target.target_string.chars_array
        test_chars = test.test_string.chars_array
        test_length = test.test_string_length

        j = 0
        for i in range(
            target.target_string_current_search_index,
            target.target_string_adjusted_search_length,
        ):
            if target_chars[i] != test_chars[j]:
                break
            j += 1
            if j == test_length:
                _record_match(target, test, results, i - test_length + 1, i, 0, test_length - 1)
                return

        # Mismatch, or the window ran out before the Test String did
        results.found_search_target = False


class LinearEndOfStringSearch(SearchStrategy):
    """Scan the target window for the first occurrence of the Test String."""

    search_type = CharacterSearchType.LINEAR_END_OF_STRING
    name = "LinearEndOfStringSearch"

    def _run(self, target, test, results):
        target_chars = target.target_string.chars_array
        test_chars = test.test_string.chars_array
        test_length = test.test_string_length
        end = target.target_string_adjusted_search_length

        for i in range(target.target_string_current_search_index, end):
            j = 0
            k = i
            while k < end and target_chars[k] == test_chars[j]:
                j += 1
                if j == test_length:
                    _record_match(
                        target, test, results, k - test_length + 1, k, 0, test_length - 1
                    )
                    return
                k += 1

        results.found_search_target = False


class SingleTargetCharSearch(SearchStrategy):
    """Test whether the single target character appears in the Test String.

    Only the character at the current target index is examined. The Test
    String is scanned from its starting index and the first match wins.
    """

    search_type = CharacterSearchType.SINGLE_TARGET_CHAR
    name = "SingleTargetCharSearch"

    def _run(self, target, test, results):
        index = target.target_string_current_search_index
        target_char = target.target_string.chars_array[index]
        test_chars = test.test_string.chars_array

        for j in range(test.test_string_starting_index, test.test_string_length):
            if test_chars[j] == target_char:
                _record_match(target, test, results, index, index, j, j, [test_chars[j]])
                return

        results.found_search_target = False


# Strategy registry
_STRATEGIES: dict[CharacterSearchType, type[SearchStrategy]] = {
    CharacterSearchType.LINEAR_TARGET_STARTING_INDEX: LinearTargetStartingIndexSearch,
    CharacterSearchType.LINEAR_END_OF_STRING: LinearEndOfStringSearch,
    CharacterSearchType.SINGLE_TARGET_CHAR: SingleTargetCharSearch,
}


def get_search_strategy(search_type: CharacterSearchType, error_prefix: str = "") -> SearchStrategy:
    """Factory function returning the strategy for `search_type`.

    Raises:
        InvalidSearchTypeError: If search_type is NONE or unregistered
    """
    if search_type not in _STRATEGIES:
        prefix = chain_prefix(error_prefix, "get_search_strategy()")
        available = ", ".join(member.label for member in _STRATEGIES)
        label = search_type.label if isinstance(search_type, CharacterSearchType) else search_type
        raise InvalidSearchTypeError(
            f"{prefix}\nERROR: Unknown Character Search Type '{label}'.\n"
            f"Available search types: {available}"
        )
    return _STRATEGIES[search_type]()


def list_search_types() -> list[CharacterSearchType]:
    """Return the search types that have a registered strategy."""
    return list(_STRATEGIES.keys())
