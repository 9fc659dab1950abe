"""Shared fixtures: deterministic random sources for level assignment."""
import itertools
import random

import pytest


class Coin:
    """Scripted stand-in for ``random.Random`` replaying fixed draws."""

    def __init__(self, draws):
        self._draws = iter(draws)

    def random(self) -> float:
        return next(self._draws)


HEADS = 0.0  # always below 0.5: grow / add a level
TAILS = 0.99


@pytest.fixture
def rng():
    """Seeded generator so randomized scenarios are reproducible."""
    return random.Random(0xC0FFEE)


@pytest.fixture
def always_heads():
    return Coin(itertools.repeat(HEADS))


@pytest.fixture
def always_tails():
    return Coin(itertools.repeat(TAILS))
