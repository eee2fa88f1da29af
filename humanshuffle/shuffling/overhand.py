"""Overhand shuffle - the lazy, sloppy shuffle most people use."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import MutableSequence

from humanshuffle.cards import Card
from humanshuffle.shuffling.base import ShuffleStyle, next_int, split_the_deck
from humanshuffle.shuffling.settings import ShuffleSettings

logger = logging.getLogger(__name__)


class Hand(Enum):
    """The dealer's hands."""

    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class Turn:
    """One hand letting a run of cards slip."""

    hand: Hand
    run_length: int
    moved: int


@dataclass(frozen=True)
class OverhandTrace:
    """What happened during one overhand shuffle."""

    split_index: int
    lower_bound: int
    upper_bound: int
    turns: tuple[Turn, ...]

    @property
    def run_lengths(self) -> list[int]:
        """Return the drawn run length of every turn, in order."""
        return [turn.run_length for turn in self.turns]


class OverhandShuffle(ShuffleStyle):
    """
    The Overhand Shuffle.

    The deck is cut near the middle into a left and a right packet. The
    hands then take turns letting short runs of cards slip from their own
    packet onto the pile until both packets are spent. Once one hand runs
    out, the other keeps every remaining turn.

    Run lengths are drawn between a lower and an upper limit chosen at the
    start of each shuffle. A hand may let nothing slip once; from then on
    every turn moves at least one card.
    """

    def __init__(self, settings: ShuffleSettings | None = None) -> None:
        """
        Initialize the overhand shuffle.

        Args:
            settings: Split precision and handedness (standard if omitted)
        """
        self._settings = settings or ShuffleSettings()

    @property
    def name(self) -> str:
        return "Overhand"

    @property
    def settings(self) -> ShuffleSettings:
        """Return the dealer settings."""
        return self._settings

    def apply(self, cards: MutableSequence[Card], rng: Random) -> None:
        self.run(cards, rng)

    def run(self, cards: MutableSequence[Card], rng: Random) -> OverhandTrace:
        """
        Shuffle the cards in place and report how it went.

        Args:
            cards: The sequence to rearrange
            rng: Random source for the split and the run lengths

        Returns:
            The trace of the split, the run-length limits and every turn
        """
        card_count = len(cards)
        split_index = split_the_deck(card_count, self._settings.split_precision, rng)
        logger.debug("Deck split index: %d of %d", split_index, card_count)

        # Every read comes from the snapshot, never from the list being written.
        snapshot = tuple(cards)
        left = 0
        right = split_index
        right_turn = self._settings.dealer_is_right_handed
        one_hand_finished = False
        # Once a hand has let nothing slip, every later turn moves at least one card.
        last_run_was_zero = False

        lower_bound, upper_bound = self._run_limits(rng)

        turns: list[Turn] = []
        i = 0
        while i < card_count:
            run_lower = 1 if last_run_was_zero else lower_bound
            run_length = next_int(rng, run_lower, upper_bound)
            last_run_was_zero = last_run_was_zero or run_length == 0

            start = i
            if right_turn:
                while i - start < run_length and i < card_count and right < card_count:
                    cards[i] = snapshot[right]
                    i += 1
                    right += 1
            else:
                while i - start < run_length and i < card_count and left < split_index:
                    cards[i] = snapshot[left]
                    i += 1
                    left += 1

            hand = Hand.RIGHT if right_turn else Hand.LEFT
            turns.append(Turn(hand, run_length, i - start))
            logger.debug("%s hand slipped %d of %d cards", hand.name, i - start, run_length)

            if left >= split_index and not right_turn:
                right_turn = True
                one_hand_finished = True

            if right >= card_count and right_turn:
                right_turn = False
                one_hand_finished = True

            if not one_hand_finished:
                right_turn = not right_turn

        return OverhandTrace(split_index, lower_bound, upper_bound, tuple(turns))

    @staticmethod
    def _run_limits(rng: Random) -> tuple[int, int]:
        """Pick the lower and upper limits for how many cards a hand lets slip."""
        lower_bound = next_int(rng, 0, 3)
        spread = next_int(rng, 5, 9)
        upper_bound = next_int(rng, lower_bound, lower_bound + spread)
        if upper_bound <= lower_bound:
            upper_bound = lower_bound + 3
        logger.debug(
            "Run limits: lower=%d spread=%d upper=%d", lower_bound, spread, upper_bound
        )
        return lower_bound, upper_bound

    def __repr__(self) -> str:
        return f"OverhandShuffle(settings={self._settings!r})"
