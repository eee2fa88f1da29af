"""A standard deck of cards that can be sorted and shuffled by hand."""

from collections.abc import MutableSequence
from random import Random
from typing import Iterable, Iterator, overload

from humanshuffle.cards import Card, Rank, Suit
from humanshuffle.shuffling import ShuffleStyle, shuffle


class Deck(MutableSequence[Card]):
    """
    A standard 52-card deck.

    Behaves like a list of cards. Nothing stops a caller from adding a
    duplicate card.
    """

    MAX_CARD_COUNT = len(Suit) * len(Rank)

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck with every card in order."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to all 52 cards, suit by suit, Ace to Two."""
        self._cards = [Card(suit, rank) for suit in Suit for rank in Rank]

    def shuffle(self, style: ShuffleStyle | Iterable[ShuffleStyle] | None = None) -> None:
        """
        Shuffle the deck in place.

        Args:
            style: A style, several styles to apply one after another,
                or None for the default style
        """
        shuffle(self, style, self._rng)

    def sort(self, *, reverse: bool = False) -> None:
        """Sort the deck by suit, then rank."""
        self._cards.sort(reverse=reverse)

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> list[Card]: ...

    def __getitem__(self, index):
        return self._cards[index]

    def __setitem__(self, index, value) -> None:
        self._cards[index] = value

    def __delitem__(self, index) -> None:
        del self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def insert(self, index: int, value: Card) -> None:
        self._cards.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ",".join(str(card) for card in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
