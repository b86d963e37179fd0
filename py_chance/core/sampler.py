"""
Inclusive-range integer sampling on top of the Alea random source.

One uniform draw u is mapped to min + floor(u * (max - min + 1)). The
scale-and-floor step runs on the exact rational value of u, so ranges as
wide as MAX_INT (2^53 - 1) and beyond stay inside their bounds.
"""

from typing import Optional

from .alea_prng import AleaPRNG
from .errors import InvalidRangeError

# Largest integer a double represents exactly
MAX_INT = 2**53 - 1

NATURAL_MIN = 0
NATURAL_MAX = MAX_INT

INTEGER_MIN = -MAX_INT
INTEGER_MAX = MAX_INT


def check_range(minimum: int, maximum: int) -> None:
    """Raise InvalidRangeError unless minimum <= maximum."""
    if minimum > maximum:
        raise InvalidRangeError(f"min ({minimum}) must not be greater than max ({maximum})")


def scale(draw: float, minimum: int, maximum: int) -> int:
    """Map a draw in [0, 1) onto [minimum, maximum] without rounding error."""
    numerator, denominator = draw.as_integer_ratio()
    width = maximum - minimum + 1
    return minimum + (numerator * width) // denominator


def sample_int(prng: AleaPRNG, minimum: int, maximum: int) -> int:
    """
    Draw a uniform integer from the inclusive range [minimum, maximum].

    A degenerate range (minimum == maximum) still consumes one draw.

    Raises:
        InvalidRangeError: If minimum > maximum; nothing is drawn
    """
    check_range(minimum, maximum)
    return scale(prng.random(), minimum, maximum)


def resolve_bounds(
    minimum: Optional[int],
    maximum: Optional[int],
    default_min: int,
    default_max: int,
):
    """Fill in omitted bounds with defaults."""
    return (
        default_min if minimum is None else minimum,
        default_max if maximum is None else maximum,
    )
