"""Pytest fixtures for humanshuffle tests."""

import pytest
from random import Random

from humanshuffle.deck import Deck
from humanshuffle.shuffling import OverhandShuffle, ShuffleSettings


class ScriptedRandom(Random):
    """
    A random source that replays a fixed list of draws.

    Every randrange call is recorded as a (start, stop) pair so tests can
    check which ranges the shuffle asked for.
    """

    def __init__(self, draws: list[int]) -> None:
        super().__init__(0)
        self._draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            start, stop = 0, start
        self.calls.append((start, stop))
        if not self._draws:
            raise AssertionError(f"No scripted draw left for randrange({start}, {stop})")
        value = self._draws.pop(0)
        if not start <= value < stop:
            raise AssertionError(f"Scripted draw {value} outside [{start}, {stop})")
        return value

    @property
    def remaining(self) -> int:
        """Return the number of draws not yet used."""
        return len(self._draws)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A fresh deck in construction order."""
    return Deck(rng=rng)


@pytest.fixture
def scripted():
    """Factory for random sources that replay fixed draws."""
    return ScriptedRandom


@pytest.fixture
def overhand():
    """Overhand shuffle with standard settings."""
    return OverhandShuffle()


@pytest.fixture
def left_handed_overhand():
    """Overhand shuffle for a left-handed dealer."""
    return OverhandShuffle(ShuffleSettings.left_handed())


@pytest.fixture
def ten_cards():
    """The first ten cards of a fresh deck."""
    return list(Deck())[:10]

