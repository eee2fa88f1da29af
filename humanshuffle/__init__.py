"""Playing cards with shuffles that move like human hands."""

from humanshuffle.cards import Card, Rank, Suit, compare
from humanshuffle.deck import Deck
from humanshuffle.shuffling import (
    OverhandShuffle,
    ShuffleSettings,
    ShuffleStyle,
    ShuffleStyles,
    get_style,
    shuffle,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "compare",
    "Deck",
    "OverhandShuffle",
    "ShuffleSettings",
    "ShuffleStyle",
    "ShuffleStyles",
    "get_style",
    "shuffle",
]
