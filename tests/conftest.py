"""Shared fixtures for py_chance tests."""

import pytest

from py_chance import Chance


class FixedSource:
    """Stand-in random source returning a scripted series of draws."""

    def __init__(self, *draws):
        self.draws = list(draws)
        self.call_count = 0

    def random(self):
        value = self.draws[self.call_count % len(self.draws)]
        self.call_count += 1
        return value


@pytest.fixture
def chance():
    """Seeded session, so failures are reproducible."""
    return Chance("py-chance-tests")


@pytest.fixture
def fixed_source():
    return FixedSource
