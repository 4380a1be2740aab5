"""Character search algorithms and their results."""

from .executor import (
    character_search_executor,
    linear_end_of_string_search,
    linear_target_starting_index_search,
    single_character_search,
)
from .results import CharSearchRuneArrayResultsDto
from .strategies import (
    LinearEndOfStringSearch,
    LinearTargetStartingIndexSearch,
    SearchStrategy,
    SingleTargetCharSearch,
    get_search_strategy,
    list_search_types,
)

__all__ = [
    "CharSearchRuneArrayResultsDto",
    "SearchStrategy",
    "LinearTargetStartingIndexSearch",
    "LinearEndOfStringSearch",
    "SingleTargetCharSearch",
    "get_search_strategy",
    "list_search_types",
    "character_search_executor",
    "linear_target_starting_index_search",
    "linear_end_of_string_search",
    "single_character_search",
]
