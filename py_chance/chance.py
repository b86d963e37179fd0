"""
Chance sessions.

A session owns one Alea random source. Every operation draws from it, so
the values a session produces depend only on its seed and on the order of
calls. Sessions are not thread-safe; use one per thread.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Type, TypeVar

import structlog

from .core.alea_prng import AleaPRNG
from .core.errors import ChanceError
from .core.options import (
    STRING_MAX_LENGTH,
    STRING_MIN_LENGTH,
    BoolOptions,
    CharacterOptions,
    FloatingOptions,
    IntegerOptions,
    NaturalOptions,
    PickOptions,
    RequestOptions,
    StringOptions,
)
from .core.sampler import sample_int
from .core.seed import Seed, resolve_seed

logger = structlog.get_logger()

OptionsT = TypeVar("OptionsT", bound=RequestOptions)


class Chance:
    """Seeded generator of booleans, numbers, characters and strings."""

    def __init__(self, seed: Optional[Seed] = None):
        """
        Create a session.

        Args:
            seed: Integer or string seed. Omit it for an entropy-derived
                seed, readable afterwards from the seed property.
        """
        self._seed = resolve_seed(seed)
        self.prng = AleaPRNG(self._seed)
        logger.debug("Created chance session", seed=self._seed, entropy=seed is None)

    @property
    def seed(self) -> Seed:
        """Seed the random source was initialized with."""
        return self._seed

    def __repr__(self):
        return f"Chance(seed={self._seed!r})"

    def _reject(self, operation: str, error: ChanceError) -> ChanceError:
        logger.debug("Rejected request", operation=operation, kind=error.kind.value, reason=error.message)
        return error

    def _options(self, operation: str, model: Type[OptionsT], **kwargs: Any) -> OptionsT:
        try:
            return model(**kwargs)
        except ChanceError as exc:
            self._reject(operation, exc)
            raise

    def random(self) -> float:
        """Raw uniform draw in [0, 1)."""
        return self.prng.random()

    def bool(self, likelihood: float = 50) -> bool:
        """
        Bernoulli trial.

        Args:
            likelihood: Percent chance of returning True, in [0, 100]

        Raises:
            InvalidRangeError: If likelihood is outside [0, 100]
        """
        options = self._options("bool", BoolOptions, likelihood=likelihood)
        return self.prng.random() < options.likelihood / 100

    def integer(self, min: Optional[int] = None, max: Optional[int] = None) -> int:
        """
        Integer in [min, max], both inclusive.

        Omitted bounds default to -(2^53 - 1) and 2^53 - 1.

        Raises:
            InvalidRangeError: If min > max
        """
        options = self._options("integer", IntegerOptions, min=min, max=max)
        return sample_int(self.prng, *options.bounds())

    def natural(self, min: Optional[int] = None, max: Optional[int] = None) -> int:
        """
        Non-negative integer in [min, max], defaulting to [0, 2^53 - 1].

        Raises:
            InvalidRangeError: If min > max or min is negative
        """
        options = self._options("natural", NaturalOptions, min=min, max=max)
        return sample_int(self.prng, *options.bounds())

    def character(
        self,
        pool: Optional[str] = None,
        alpha: bool = False,
        symbols: bool = False,
        casing: Optional[str] = None,
    ) -> str:
        """
        Single character drawn from a pool.

        Args:
            pool: Explicit characters to draw from; overrides the flags
            alpha: Letters only
            symbols: Symbols only
            casing: 'upper' or 'lower' to restrict letters to one case

        Raises:
            InvalidOptionCombinationError: If alpha and symbols are both set
        """
        options = self._options(
            "character", CharacterOptions, pool=pool, alpha=alpha, symbols=symbols, casing=casing
        )
        return self._character_from(options.build_pool())

    def _character_from(self, pool: str) -> str:
        return pool[sample_int(self.prng, 0, len(pool) - 1)]

    def string(
        self,
        length: Optional[int] = None,
        pool: Optional[str] = None,
        alpha: bool = False,
        symbols: bool = False,
        casing: Optional[str] = None,
    ) -> str:
        """
        String of independently drawn characters.

        Takes the same pool options as character(). Without a length, one
        is drawn from [5, 20] before the characters.

        Raises:
            InvalidLengthError: If length is negative or not an integer
            InvalidOptionCombinationError: If alpha and symbols are both set
        """
        options = self._options(
            "string",
            StringOptions,
            length=length,
            pool=pool,
            alpha=alpha,
            symbols=symbols,
            casing=casing,
        )
        chars = options.build_pool()
        if options.length is None:
            length = sample_int(self.prng, STRING_MIN_LENGTH, STRING_MAX_LENGTH)
        else:
            length = options.length
        return "".join(self._character_from(chars) for _ in range(length))

    def floating(
        self,
        min: Optional[float] = None,
        max: Optional[float] = None,
        fixed: int = 4,
    ) -> float:
        """
        Float in [min, max] with at most `fixed` digits after the point.

        Raises:
            InvalidRangeError: If min > max or fixed is negative
        """
        options = self._options("floating", FloatingOptions, min=min, max=max, fixed=fixed)
        return sample_int(self.prng, *options.scaled_bounds()) / options.factor

    def shuffle(self, seq: Sequence[Any]) -> List[Any]:
        """Return the elements of seq in random order; seq is left untouched."""
        remaining = list(seq)
        shuffled = []
        while remaining:
            shuffled.append(remaining.pop(sample_int(self.prng, 0, len(remaining) - 1)))
        return shuffled

    def pick(self, seq: Sequence[Any], count: int = 1) -> Any:
        """
        Pick one element of seq, or a list of `count` distinct positions.

        Raises:
            InvalidRangeError: If seq is empty or count is outside [1, len(seq)]
        """
        options = self._options("pick", PickOptions, size=len(seq), count=count)
        if options.count == 1:
            return seq[sample_int(self.prng, 0, options.size - 1)]
        return self.shuffle(seq)[:options.count]


def create(seed: Optional[Seed] = None) -> Chance:
    """Create a new Chance session."""
    return Chance(seed)
