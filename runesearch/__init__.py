"""runesearch - Character search over Unicode character buffers.

Compare a Target String against one or more Test Strings using a
single-attempt prefix match, a scanning substring search or a
single-character membership test.
"""

from runesearch.core import (
    CharacterSearchType,
    Config,
    RuneArrayCollection,
    RuneArrayDto,
    load_config,
)
from runesearch.parameters import (
    CharSearchTargetInputParametersDto,
    CharSearchTestConfigDto,
    CharSearchTestInputParametersDto,
)
from runesearch.processing import run_batch_search
from runesearch.search import CharSearchRuneArrayResultsDto, character_search_executor
from runesearch.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "CharSearchRuneArrayResultsDto",
    "CharSearchTargetInputParametersDto",
    "CharSearchTestConfigDto",
    "CharSearchTestInputParametersDto",
    "CharacterSearchType",
    "Config",
    "RuneArrayCollection",
    "RuneArrayDto",
    "character_search_executor",
    "load_config",
    "run_batch_search",
    "setup_logger",
]
