"""
Random source, sampling and request validation.
"""

from .alea_prng import AleaPRNG
from .errors import (
    ChanceError,
    ErrorKind,
    InvalidLengthError,
    InvalidOptionCombinationError,
    InvalidRangeError,
)
from .options import Casing
from .pool import build_pool
from .sampler import MAX_INT, sample_int
from .seed import resolve_seed

__all__ = ['AleaPRNG', 'ChanceError', 'ErrorKind', 'InvalidLengthError',
           'InvalidOptionCombinationError', 'InvalidRangeError', 'Casing',
           'build_pool', 'MAX_INT', 'sample_int', 'resolve_seed']
