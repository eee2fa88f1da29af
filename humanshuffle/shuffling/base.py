"""Abstract base class for shuffle styles and shared hand helpers."""

import logging
import math
from abc import ABC, abstractmethod
from random import Random
from typing import MutableSequence

from humanshuffle.cards import Card

logger = logging.getLogger(__name__)


class ShuffleStyle(ABC):
    """
    Abstract base class for shuffle styles.

    A style rearranges a sequence of cards in place, drawing all of its
    randomness from the random source it is handed.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the shuffle style."""
        ...

    @abstractmethod
    def apply(self, cards: MutableSequence[Card], rng: Random) -> None:
        """
        Shuffle the cards in place.

        Args:
            cards: The sequence to rearrange; its length never changes
            rng: Random source owned by the caller for the whole call
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def next_int(rng: Random, lower: int, upper: int | None = None) -> int:
    """
    Draw a uniform integer.

    next_int(rng, bound) draws from [0, bound), next_int(rng, lower, upper)
    from [lower, upper). An empty range returns its lower end without
    consuming a draw.
    """
    if upper is None:
        lower, upper = 0, lower
    if upper <= lower:
        return lower
    return rng.randrange(lower, upper)


def split_the_deck(card_count: int, split_precision: float, rng: Random) -> int:
    """
    Choose where to cut the deck, somewhere near the middle.

    Args:
        card_count: Number of cards in the deck
        split_precision: Fraction of the deck around the middle the cut may
            land in (0.0 cuts at the exact middle)
        rng: Random number generator

    Returns:
        The split index; cards before it form the left packet, the rest
        the right packet. Small decks and zero precision always split at 0.
    """
    if card_count < 0:
        raise ValueError("card_count must not be negative")
    if not 0.0 <= split_precision <= 1.0:
        raise ValueError("split_precision must be between 0 and 1")

    if split_precision <= 0.0 or card_count <= 5:
        return 0

    max_spread = math.floor(card_count * split_precision)
    offset = next_int(rng, max_spread)
    split_index = math.floor(card_count / 2 - max_spread / 2 + offset)

    if not 0 <= split_index <= card_count:
        logger.warning(
            "Split index %d out of range for %d cards, clamping", split_index, card_count
        )
        split_index = min(max(split_index, 0), card_count)
    return split_index
