"""Target and Test String parameter objects."""

from runesearch.parameters.target import (
    SEARCH_TO_END,
    CharSearchTargetInputParametersDto,
    validate_target_parameters,
)
from runesearch.parameters.test_config import CharSearchTestConfigDto
from runesearch.parameters.test_string import (
    CharSearchTestInputParametersDto,
    validate_test_parameters,
)

__all__ = [
    "SEARCH_TO_END",
    "CharSearchTargetInputParametersDto",
    "CharSearchTestConfigDto",
    "CharSearchTestInputParametersDto",
    "validate_target_parameters",
    "validate_test_parameters",
]
