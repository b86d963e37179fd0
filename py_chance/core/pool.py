"""
Character pools for character and string generation.
"""

from typing import Optional

from .errors import InvalidOptionCombinationError, InvalidRangeError

DIGITS = "0123456789"
LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = LOWER.upper()
ALPHA = LOWER + UPPER
SYMBOLS = "!@#$%^&*()[]"


def apply_casing(letters: str, casing: Optional[str]) -> str:
    """Keep only the letters matching casing ('upper', 'lower' or None)."""
    if casing == "upper":
        return "".join(ch for ch in letters if ch.isupper())
    if casing == "lower":
        return "".join(ch for ch in letters if ch.islower())
    return letters


def build_pool(
    pool: Optional[str] = None,
    alpha: bool = False,
    symbols: bool = False,
    casing: Optional[str] = None,
) -> str:
    """
    Resolve a pool specification into the characters to sample from.

    An explicit pool is returned unchanged, duplicates included; repeated
    characters are simply drawn more often.

    Args:
        pool: Explicit characters to draw from
        alpha: Draw only Latin letters
        symbols: Draw only symbols
        casing: 'upper' or 'lower' to restrict letters to one case

    Returns:
        Ordered string of allowed characters

    Raises:
        InvalidOptionCombinationError: If alpha and symbols are both set
        InvalidRangeError: If the explicit pool is empty
    """
    if alpha and symbols:
        raise InvalidOptionCombinationError("Cannot specify both alpha and symbols")

    if pool is not None:
        if not pool:
            raise InvalidRangeError("Cannot draw characters from an empty pool")
        return pool

    if alpha:
        return apply_casing(ALPHA, casing)
    if symbols:
        return SYMBOLS
    return DIGITS + apply_casing(ALPHA, casing) + SYMBOLS
