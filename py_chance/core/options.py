"""
Request models for Chance operations.

Each operation's options are enumerated here with their defaults and are
validated when the model is built, before the session draws anything.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidLengthError, InvalidRangeError
from .pool import build_pool
from .sampler import (
    INTEGER_MAX,
    INTEGER_MIN,
    NATURAL_MAX,
    NATURAL_MIN,
    check_range,
    resolve_bounds,
)

STRING_MIN_LENGTH = 5
STRING_MAX_LENGTH = 20

FLOATING_FIXED = 4


class Casing(str, Enum):
    """Letter case restriction for character pools."""

    UPPER = "upper"
    LOWER = "lower"


class RequestOptions(BaseModel):
    """Base for request models: immutable, strictly typed, unknown options rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)


class BoolOptions(RequestOptions):
    likelihood: float = Field(default=50, description="Percent chance of True, in [0, 100]")

    @field_validator("likelihood")
    @classmethod
    def check_likelihood(cls, value: float) -> float:
        if not 0 <= value <= 100:
            raise InvalidRangeError(f"Likelihood must be between 0 and 100, got {value}")
        return value


class IntegerOptions(RequestOptions):
    min: Optional[int] = Field(default=None, description="Lower bound, inclusive")
    max: Optional[int] = Field(default=None, description="Upper bound, inclusive")

    default_min: ClassVar[int] = INTEGER_MIN
    default_max: ClassVar[int] = INTEGER_MAX

    @model_validator(mode="after")
    def check_bounds(self) -> IntegerOptions:
        check_range(*self.bounds())
        return self

    def bounds(self) -> Tuple[int, int]:
        """Bounds with omitted values replaced by the defaults."""
        return resolve_bounds(self.min, self.max, self.default_min, self.default_max)


class NaturalOptions(IntegerOptions):
    default_min: ClassVar[int] = NATURAL_MIN
    default_max: ClassVar[int] = NATURAL_MAX

    @model_validator(mode="after")
    def check_non_negative(self) -> NaturalOptions:
        if self.min is not None and self.min < 0:
            raise InvalidRangeError(f"Natural numbers cannot have a negative min, got {self.min}")
        return self


class CharacterOptions(RequestOptions):
    pool: Optional[str] = Field(default=None, description="Explicit characters to draw from")
    alpha: bool = Field(default=False, description="Draw only Latin letters")
    symbols: bool = Field(default=False, description="Draw only symbols")
    casing: Optional[Casing] = Field(
        default=None, strict=False, description="Restrict letters to one case"
    )

    @model_validator(mode="after")
    def check_pool(self) -> CharacterOptions:
        self.build_pool()
        return self

    def build_pool(self) -> str:
        return build_pool(self.pool, self.alpha, self.symbols, self.casing)


class StringOptions(CharacterOptions):
    length: Optional[int] = Field(
        default=None,
        description=f"Exact length; random in [{STRING_MIN_LENGTH}, {STRING_MAX_LENGTH}] if omitted",
    )

    @field_validator("length", mode="before")
    @classmethod
    def check_length(cls, value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidLengthError(f"Length must be an integer, got {value!r}")
        if value < 0:
            raise InvalidLengthError(f"Length cannot be negative, got {value}")
        return value


class FloatingOptions(RequestOptions):
    min: Optional[float] = Field(default=None, description="Lower bound, inclusive")
    max: Optional[float] = Field(default=None, description="Upper bound, inclusive")
    fixed: int = Field(default=FLOATING_FIXED, description="Digits after the decimal point")

    @field_validator("min", "max")
    @classmethod
    def check_finite(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not math.isfinite(value):
            raise InvalidRangeError(f"Bounds must be finite, got {value}")
        return value

    @field_validator("fixed")
    @classmethod
    def check_fixed(cls, value: int) -> int:
        if value < 0:
            raise InvalidRangeError(f"Fixed precision cannot be negative, got {value}")
        return value

    @model_validator(mode="after")
    def check_bounds(self) -> FloatingOptions:
        check_range(*self.scaled_bounds())
        return self

    @property
    def factor(self) -> int:
        return 10**self.fixed

    def scaled_bounds(self) -> Tuple[int, int]:
        """Bounds in units of 10^-fixed, rounded inward so results stay in [min, max]."""
        low = INTEGER_MIN if self.min is None else math.ceil(Decimal(str(self.min)) * self.factor)
        high = INTEGER_MAX if self.max is None else math.floor(Decimal(str(self.max)) * self.factor)
        return low, high


class PickOptions(RequestOptions):
    size: int = Field(description="Length of the sequence to pick from")
    count: int = Field(default=1, description="Number of distinct positions to pick")

    @model_validator(mode="after")
    def check_count(self) -> PickOptions:
        if self.size == 0:
            raise InvalidRangeError("Cannot pick from an empty sequence")
        if not 1 <= self.count <= self.size:
            raise InvalidRangeError(f"Count must be between 1 and {self.size}, got {self.count}")
        return self
