"""Entry points that validate search inputs and dispatch to a strategy."""

from __future__ import annotations

from loguru import logger

from runesearch.core.errors import NilReferenceError
from runesearch.core.types import CharacterSearchType
from runesearch.parameters.target import CharSearchTargetInputParametersDto
from runesearch.parameters.test_string import CharSearchTestInputParametersDto
from runesearch.search.results import CharSearchRuneArrayResultsDto
from runesearch.search.strategies import get_search_strategy
from runesearch.utils.helpers import chain_prefix


def character_search_executor(
    target: CharSearchTargetInputParametersDto,
    test: CharSearchTestInputParametersDto,
    error_prefix: str = "",
) -> CharSearchRuneArrayResultsDto:
    """Validate both parameter sets and run the matching search algorithm.

    The search type comes from the Test parameters. Callers that let the
    Target parameters override it resolve the type before calling.

    Args:
        target: Target String parameters (the haystack)
        test: Test String parameters (the needle)
        error_prefix: Error-prefix chain of the caller

    Returns:
        A new results object

    Raises:
        NilReferenceError: If either parameter set is None
        InvalidInputError: If validation fails
        InvalidSearchTypeError: If the Test search type is not valid
    """
    prefix = chain_prefix(error_prefix, "character_search_executor()")

    if target is None:
        raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'target' is None!")
    if test is None:
        raise NilReferenceError(f"{prefix}\nERROR: Input parameter 'test' is None!")

    target = target.validate_target_parameters(prefix)
    test = test.validate_test_parameters(prefix)

    test.validate_char_search_type(prefix)
    search_type = test.text_char_search_type

    logger.debug(f"Dispatching {search_type.label} search")
    return get_search_strategy(search_type, prefix).search(target, test, prefix)


def _search_with(
    search_type: CharacterSearchType,
    target: CharSearchTargetInputParametersDto,
    test: CharSearchTestInputParametersDto,
    error_prefix: str,
) -> CharSearchRuneArrayResultsDto:
    return get_search_strategy(search_type, error_prefix).search(target, test, error_prefix)


def linear_target_starting_index_search(
    target: CharSearchTargetInputParametersDto,
    test: CharSearchTestInputParametersDto,
    error_prefix: str = "",
) -> CharSearchRuneArrayResultsDto:
    """Single-attempt match of the Test String at the current target index."""
    return _search_with(
        CharacterSearchType.LINEAR_TARGET_STARTING_INDEX,
        target,
        test,
        chain_prefix(error_prefix, "linear_target_starting_index_search()"),
    )


def linear_end_of_string_search(
    target: CharSearchTargetInputParametersDto,
    test: CharSearchTestInputParametersDto,
    error_prefix: str = "",
) -> CharSearchRuneArrayResultsDto:
    """Scan the target window for the first occurrence of the Test String."""
    return _search_with(
        CharacterSearchType.LINEAR_END_OF_STRING,
        target,
        test,
        chain_prefix(error_prefix, "linear_end_of_string_search()"),
    )


def single_character_search(
    target: CharSearchTargetInputParametersDto,
    test: CharSearchTestInputParametersDto,
    error_prefix: str = "",
) -> CharSearchRuneArrayResultsDto:
    """Test whether the target character is one of the Test String characters."""
    return _search_with(
        CharacterSearchType.SINGLE_TARGET_CHAR,
        target,
        test,
        chain_prefix(error_prefix, "single_character_search()"),
    )
