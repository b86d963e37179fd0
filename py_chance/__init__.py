"""
Seeded generation of random booleans, numbers, characters and strings.
"""

from .chance import Chance, create
from .core import (
    MAX_INT,
    ChanceError,
    ErrorKind,
    InvalidLengthError,
    InvalidOptionCombinationError,
    InvalidRangeError,
)

__all__ = ['Chance', 'create', 'MAX_INT', 'ChanceError', 'ErrorKind',
           'InvalidLengthError', 'InvalidOptionCombinationError', 'InvalidRangeError']
