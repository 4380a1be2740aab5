"""Exception types raised by runesearch validation."""


class InvalidInputError(ValueError):
    """A parameter or buffer failed validation."""


class NilReferenceError(InvalidInputError):
    """A required object (parameter DTO or character buffer) is None."""


class OutOfRangeError(InvalidInputError):
    """An index, length or count lies outside its permitted range."""


class EmptyBufferError(InvalidInputError):
    """A character buffer contains zero characters."""


class InvalidSearchTypeError(InvalidInputError):
    """A character search type is NONE or could not be resolved."""
