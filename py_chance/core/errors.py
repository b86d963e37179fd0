"""
Errors raised by Chance sessions.

Every rejected request raises one of a closed set of error kinds, always
before the session draws from its random source.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of rejected requests."""

    INVALID_RANGE = "invalid_range"
    INVALID_OPTION_COMBINATION = "invalid_option_combination"
    INVALID_LENGTH = "invalid_length"


class ChanceError(Exception):
    """Base class for rejected generation requests.

    Not a ValueError subclass, so pydantic validators raising it propagate
    it to the caller unwrapped.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRangeError(ChanceError):
    """A bound pair with min > max, or a value outside its allowed range."""

    kind = ErrorKind.INVALID_RANGE


class InvalidOptionCombinationError(ChanceError):
    """Mutually exclusive options were requested together."""

    kind = ErrorKind.INVALID_OPTION_COMBINATION


class InvalidLengthError(ChanceError):
    """A requested length that is negative or not an integer."""

    kind = ErrorKind.INVALID_LENGTH
