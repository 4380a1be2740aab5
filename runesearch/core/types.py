"""Type definitions for runesearch."""

from enum import Enum

from runesearch.core.errors import InvalidSearchTypeError


class CharacterSearchType(Enum):
    """Selects the text character search algorithm.

    LINEAR_TARGET_STARTING_INDEX is the default. NONE is never valid for a
    search operation.
    """

    NONE = "none"
    LINEAR_TARGET_STARTING_INDEX = "linear_target_starting_index"  # single-attempt prefix match
    SINGLE_TARGET_CHAR = "single_target_char"  # one target char vs. every test char
    LINEAR_END_OF_STRING = "linear_end_of_string"  # scanning substring search

    @property
    def label(self) -> str:
        """CamelCase label, e.g. 'LinearEndOfString'."""
        return "".join(part.capitalize() for part in self.value.split("_"))

    def is_valid(self) -> bool:
        """Return True for every member except NONE."""
        return self is not CharacterSearchType.NONE

    @classmethod
    def parse(cls, name: str) -> "CharacterSearchType":
        """Look up a member by value, member name or CamelCase label.

        Matching is case-insensitive: 'linear_end_of_string',
        'LINEAR_END_OF_STRING' and 'LinearEndOfString' all resolve to
        LINEAR_END_OF_STRING.

        Raises:
            InvalidSearchTypeError: If no member matches
        """
        key = name.strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.value, member.label.lower()):
                return member
        available = ", ".join(member.value for member in cls)
        raise InvalidSearchTypeError(
            f"Unknown character search type '{name}'. Available types: {available}"
        )


class NumericValueType(Enum):
    """Numeric value kind associated with a test string."""

    NONE = "none"
    FLOATING_POINT = "floating_point"
    INTEGER = "integer"


class NumStrFormatType(Enum):
    """Output format type for a number string."""

    NONE = "none"
    ABSOLUTE_VALUE = "absolute_value"
    BINARY = "binary"
    COUNTRY_CULTURE = "country_culture"
    CURRENCY = "currency"
    HEXADECIMAL = "hexadecimal"
    OCTAL = "octal"
    SCIENTIFIC_NOTATION = "scientific_notation"


class NumericSymbolLocation(Enum):
    """Relative location of a numeric symbol."""

    NONE = "none"
    BEFORE = "before"
    INTERIOR = "interior"
    AFTER = "after"


class NumericSymbolClass(Enum):
    """Classification of a number-string symbol."""

    NONE = "none"
    NUMBER_SIGN = "number_sign"
    CURRENCY_SIGN = "currency_sign"
    INTEGER_SEPARATOR = "integer_separator"
    DECIMAL_SEPARATOR = "decimal_separator"


class NumericSignValue(Enum):
    """Sign of a numeric value."""

    NONE = "none"
    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"


class NumSignSymbolPosition(Enum):
    """Position of number sign symbols relative to the digits."""

    NONE = "none"
    BEFORE = "before"
    AFTER = "after"
    BEFORE_AND_AFTER = "before_and_after"
