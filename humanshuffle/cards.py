"""Card, Suit and Rank - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


class Suit(Enum):
    """Card suits, in sort order."""

    CLUBS = 0
    SPADES = 1
    DIAMONDS = 2
    HEARTS = 3

    def __str__(self) -> str:
        return self.name

    @property
    def symbol(self) -> str:
        """Return the display symbol for this suit."""
        symbols = {
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
        }
        return symbols[self]


class Rank(Enum):
    """
    Card ranks, in sort order.

    The order runs from Ace down to Two, so a lower value is a stronger
    card and sorts first.
    """

    ACE = 0
    KING = 1
    QUEEN = 2
    KNAVE = 3
    TEN = 4
    NINE = 5
    EIGHT = 6
    SEVEN = 7
    SIX = 8
    FIVE = 9
    FOUR = 10
    THREE = 11
    TWO = 12

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        """Return the short face label (A, K, Q, J, 10 ... 2)."""
        return {
            Rank.ACE: "A",
            Rank.KING: "K",
            Rank.QUEEN: "Q",
            Rank.KNAVE: "J",
            Rank.TEN: "10",
            Rank.NINE: "9",
            Rank.EIGHT: "8",
            Rank.SEVEN: "7",
            Rank.SIX: "6",
            Rank.FIVE: "5",
            Rank.FOUR: "4",
            Rank.THREE: "3",
            Rank.TWO: "2",
        }[self]


@total_ordering
@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card, ordered by suit then rank."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank.name}_OF_{self.suit.name}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def sort_key(self) -> tuple[int, int]:
        """Return the (suit ordinal, rank ordinal) pair cards sort by."""
        return (self.suit.value, self.rank.value)

    @property
    def short(self) -> str:
        """Return a compact display form like 'A♣'."""
        return f"{self.rank.label}{self.suit.symbol}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from its string form, e.g. 'ACE_OF_CLUBS'."""
        rank_str, sep, suit_str = s.strip().upper().partition("_OF_")
        if not sep:
            raise ValueError(f"Invalid card string: {s}")

        try:
            rank = Rank[rank_str]
        except KeyError:
            raise ValueError(f"Invalid rank: {rank_str}") from None
        try:
            suit = Suit[suit_str]
        except KeyError:
            raise ValueError(f"Invalid suit: {suit_str}") from None

        return cls(suit, rank)


def compare(a: Card, b: Card) -> int:
    """
    Compare two cards.

    Returns:
        A negative number if a sorts before b, zero if they are equal,
        a positive number if a sorts after b
    """
    if a.sort_key < b.sort_key:
        return -1
    if a.sort_key > b.sort_key:
        return 1
    return 0
