"""Tests for character pool building."""

import pytest

from py_chance.core.errors import ErrorKind, InvalidOptionCombinationError, InvalidRangeError
from py_chance.core.pool import ALPHA, DIGITS, SYMBOLS, apply_casing, build_pool


class TestBuildPool:
    def test_default_pool(self):
        pool = build_pool()
        assert pool == DIGITS + ALPHA + SYMBOLS
        assert len(pool) == 10 + 52 + len(SYMBOLS)

    def test_explicit_pool_used_as_is(self):
        assert build_pool(pool="abcde") == "abcde"
        assert build_pool(pool="aab") == "aab"

    def test_explicit_pool_wins_over_flags(self):
        assert build_pool(pool="xyz", alpha=True, casing="upper") == "xyz"

    def test_alpha(self):
        pool = build_pool(alpha=True)
        assert len(pool) == 52
        assert pool.isalpha()

    def test_alpha_casing(self):
        assert build_pool(alpha=True, casing="upper") == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert build_pool(alpha=True, casing="lower") == "abcdefghijklmnopqrstuvwxyz"

    def test_default_pool_casing(self):
        pool = build_pool(casing="lower")
        assert not any(ch.isupper() for ch in pool)
        assert DIGITS in pool

    def test_symbols(self):
        assert build_pool(symbols=True) == "!@#$%^&*()[]"

    def test_alpha_and_symbols_conflict(self):
        with pytest.raises(InvalidOptionCombinationError) as excinfo:
            build_pool(alpha=True, symbols=True)
        assert excinfo.value.kind is ErrorKind.INVALID_OPTION_COMBINATION

    def test_empty_pool(self):
        with pytest.raises(InvalidRangeError):
            build_pool(pool="")


class TestApplyCasing:
    def test_no_casing(self):
        assert apply_casing("aBc", None) == "aBc"

    def test_upper_lower(self):
        assert apply_casing("aBcD", "upper") == "BD"
        assert apply_casing("aBcD", "lower") == "ac"
