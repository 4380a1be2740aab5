"""Core domain objects for runesearch."""

from runesearch.core.errors import (
    EmptyBufferError,
    InvalidInputError,
    InvalidSearchTypeError,
    NilReferenceError,
    OutOfRangeError,
)

from .collection import RuneArrayCollection
from .config import Config, load_config
from .rune_array import RuneArrayDto
from .types import (
    CharacterSearchType,
    NumericSignValue,
    NumericSymbolClass,
    NumericSymbolLocation,
    NumericValueType,
    NumSignSymbolPosition,
    NumStrFormatType,
)

__all__ = [
    "CharacterSearchType",
    "Config",
    "EmptyBufferError",
    "InvalidInputError",
    "InvalidSearchTypeError",
    "NilReferenceError",
    "NumericSignValue",
    "NumericSymbolClass",
    "NumericSymbolLocation",
    "NumericValueType",
    "NumSignSymbolPosition",
    "NumStrFormatType",
    "OutOfRangeError",
    "RuneArrayCollection",
    "RuneArrayDto",
    "load_config",
]
